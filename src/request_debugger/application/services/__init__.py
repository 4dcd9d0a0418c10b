from .tab_store import TabStore
from .debugger_service import DebuggerService, RequestInFlightError

__all__ = ["TabStore", "DebuggerService", "RequestInFlightError"]
