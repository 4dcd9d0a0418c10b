# schemas/tools/request_executor.py

from typing import Dict, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from request_debugger.schemas.draft import ExecutionState, HttpMethod, RequestDraft
from request_debugger.schemas.response import DraftResponse


class RequestDescriptor(BaseModel):
    """Executable request materialized from a draft's editable fields."""

    method: HttpMethod = Field(..., description="HTTP method")
    url: str = Field(..., description="Path or URL with the query string appended")
    headers: Dict[str, str] = Field(default_factory=dict, description="Final header map")
    body: Optional[str] = Field(None, description="Raw body, None for GET")


class RequestExecutorInput(BaseModel):
    """Input schema for the request executor tool."""

    draft: RequestDraft = Field(..., description="Draft to execute")


class RequestExecutorOutput(BaseModel):
    """Output schema of the request executor tool."""

    draft_id: str = Field(..., description="ID of the executed draft")
    request: Optional[RequestDescriptor] = Field(
        None, description="Request as built, None if building failed"
    )
    response: Optional[DraftResponse] = Field(None, description="Normalized response")
    error: Optional[str] = Field(None, description="Transport failure message")
    state: ExecutionState = Field(..., description="Draft state after execution")
    elapsed: float = Field(0.0, description="Time taken by the request (s)")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
