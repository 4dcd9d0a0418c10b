# schemas/draft.py

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from request_debugger.config.constants import DEFAULT_DRAFT_PATH, AUTHORIZATION_HEADER
from request_debugger.schemas.response import DraftResponse


class HttpMethod(str, Enum):
    """Methods the debugger can send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ExecutionState(str, Enum):
    """Transient execution state of a draft."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class KeyValuePair(BaseModel):
    """One editable query or header row."""

    key: str = ""
    value: str = ""

    @field_validator("key", "value", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


def default_query_params() -> List[KeyValuePair]:
    return [KeyValuePair()]


def default_header_params() -> List[KeyValuePair]:
    return [KeyValuePair(key=AUTHORIZATION_HEADER)]


class DraftFields(BaseModel):
    """The editable part of a draft (what the edit surface holds)."""

    path: str = Field(DEFAULT_DRAFT_PATH, description="Relative or absolute target")
    method: HttpMethod = Field(HttpMethod.GET, description="HTTP method")
    request_body: str = Field("", description="Raw body text, ignored for GET")
    query_params: List[KeyValuePair] = Field(default_factory=default_query_params)
    header_params: List[KeyValuePair] = Field(default_factory=default_header_params)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("path", "request_body", mode="before")
    @classmethod
    def _none_as_default(cls, v: Any, info) -> Any:
        if v is None:
            return DEFAULT_DRAFT_PATH if info.field_name == "path" else ""
        return v

    @field_validator("query_params", "header_params", mode="before")
    @classmethod
    def _none_as_default_rows(cls, v: Any, info) -> Any:
        if v is None:
            if info.field_name == "query_params":
                return default_query_params()
            return default_header_params()
        return v


class PersistedDraft(DraftFields):
    """Sanitized projection written to storage."""

    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    name: str = Field("Request", description="Human readable tab label")

    @field_validator("name", mode="before")
    @classmethod
    def _none_as_default_name(cls, v: Any) -> Any:
        return "Request" if v is None else v

    @field_validator("method", mode="before")
    @classmethod
    def _saved_method_or_get(cls, v: Any) -> Any:
        # Saved entries are rescued rather than dropped; edits still reject unknown methods
        if isinstance(v, HttpMethod):
            return v
        method = v.strip().upper() if isinstance(v, str) else None
        if method not in HttpMethod.__members__:
            return HttpMethod.GET
        return method

    def editable_fields(self) -> DraftFields:
        """Deep copy of the editable fields."""
        return DraftFields.model_validate(
            self.model_dump(include=set(DraftFields.model_fields))
        )

    def apply(self, fields: DraftFields) -> None:
        """Overwrite the editable fields with a deep copy of ``fields``."""
        incoming = fields.model_copy(deep=True)
        for name in DraftFields.model_fields:
            setattr(self, name, getattr(incoming, name))


class RequestDraft(PersistedDraft):
    """A saved request tab with its transient execution outcome."""

    response: Optional[DraftResponse] = Field(
        None, description="Last normalized response, never persisted"
    )
    error: Optional[str] = Field(
        None, description="Last transport failure message, never persisted"
    )
    state: ExecutionState = Field(ExecutionState.IDLE, description="Execution state")

    def to_persisted(self) -> PersistedDraft:
        return PersistedDraft.model_validate(
            self.model_dump(include=set(PersistedDraft.model_fields))
        )

    def record_response(self, response: DraftResponse) -> None:
        self.response = response
        self.error = None
        self.state = ExecutionState.SUCCEEDED

    def record_error(self, message: str) -> None:
        self.response = None
        self.error = message
        self.state = ExecutionState.FAILED
