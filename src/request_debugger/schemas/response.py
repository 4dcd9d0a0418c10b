# schemas/response.py

from typing import Annotated, Any, Dict, Literal, Union
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class JsonBody(BaseModel):
    """Response body parsed from a JSON payload."""

    kind: Literal["json"] = "json"
    value: Any = Field(None, description="Decoded JSON value (any JSON type)")


class TextBody(BaseModel):
    """Response body kept as raw text."""

    kind: Literal["text"] = "text"
    text: str = Field("", description="Body decoded as text")


ResponseBody = Annotated[Union[JsonBody, TextBody], Field(discriminator="kind")]


class DraftResponse(BaseModel):
    """Normalized outcome of one executed request."""

    status: int = Field(..., description="HTTP status code")
    status_text: str = Field("", description="Reason phrase sent by the server")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Response headers, lower-cased names"
    )
    data: ResponseBody = Field(..., description="JSON or text body")
    url: str = Field("", description="Final request URL")
    elapsed_ms: float = Field(0.0, description="Round trip time in milliseconds")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
