from .draft import (
    DraftFields,
    ExecutionState,
    HttpMethod,
    KeyValuePair,
    PersistedDraft,
    RequestDraft,
)
from .response import DraftResponse, JsonBody, ResponseBody, TextBody

__all__ = [
    "DraftFields",
    "ExecutionState",
    "HttpMethod",
    "KeyValuePair",
    "PersistedDraft",
    "RequestDraft",
    "DraftResponse",
    "JsonBody",
    "ResponseBody",
    "TextBody",
]
