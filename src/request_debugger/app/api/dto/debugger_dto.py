from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from request_debugger.schemas.draft import HttpMethod


class ParamKind(str, Enum):
    QUERY = "query"
    HEADER = "header"


class RenameDraftRequest(BaseModel):
    name: str = Field(..., description="New tab label, must not be blank")


class EditDraftRequest(BaseModel):
    """Partial update of the active draft; omitted fields stay as they are."""

    path: Optional[str] = Field(None, description="Request path or absolute URL")
    method: Optional[HttpMethod] = Field(None, description="GET, POST, PUT or DELETE")
    request_body: Optional[str] = Field(None, description="Raw request body")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ParamRowRequest(BaseModel):
    key: Optional[str] = Field(None, description="New key, unchanged if omitted")
    value: Optional[str] = Field(None, description="New value, unchanged if omitted")


class CopyResponseText(BaseModel):
    text: str = Field(..., description="Response body ready for the clipboard")
