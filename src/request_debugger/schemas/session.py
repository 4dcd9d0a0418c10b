# schemas/session.py

from typing import List
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from request_debugger.schemas.draft import DraftFields, RequestDraft


class DebuggerSnapshot(BaseModel):
    """Everything a host UI needs to render the debugger."""

    drafts: List[RequestDraft] = Field(default_factory=list, description="Tabs in order")
    active_id: str = Field(..., description="ID of the draft being edited")
    working: DraftFields = Field(..., description="Edit buffer of the active draft")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
