from request_debugger.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
