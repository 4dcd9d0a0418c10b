"""Ad-hoc HTTP request debugger: saved request tabs, a request builder and an executor."""

__version__ = "0.1.0"
