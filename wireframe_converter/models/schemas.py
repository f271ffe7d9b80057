from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

# === Inbound API Schemas ===


class ConversionRequest(BaseModel):
    """Wireframe conversion request"""

    image: str = Field(..., description="Image URL or data URI of the wireframe")


# === Chat Completion Schemas (outbound) ===


class ImageUrl(BaseModel):
    """Image reference inside an image_url content part"""

    url: str = Field(..., description="Image URL or data URI")
    detail: Literal["low", "high", "auto"] = Field(
        default="auto", description="Fidelity the model should read the image at"
    )


class ImageUrlPart(BaseModel):
    """Image content part of a user message"""

    type: Literal["image_url"] = Field(default="image_url")
    image_url: ImageUrl = Field(..., description="Referenced image")


class TextPart(BaseModel):
    """Text content part of a user message"""

    type: Literal["text"] = Field(default="text")
    text: str = Field(..., description="Literal text")


MessageContent = Union[str, list[Union[ImageUrlPart, TextPart]]]


class Message(BaseModel):
    """A single chat message"""

    role: Literal["system", "user", "assistant", "function"] = Field(
        ..., description="Role of the message sender"
    )
    content: MessageContent = Field(..., description="Message content")
    name: Optional[str] = Field(default=None, description="Author name")


class CompletionRequest(BaseModel):
    """
    Chat completion request sent to the vision model.

    Only model, max_tokens and messages are set by the converter; the rest
    of the protocol surface is declared so the payload type is complete.
    Unset fields are dropped from the wire payload.
    """

    model: str = Field(..., description="Vision-capable model identifier")
    messages: list[Message] = Field(..., description="List of chat messages")
    max_tokens: Optional[int] = Field(default=None, description="Maximum tokens")
    temperature: Optional[float] = Field(
        default=None, ge=0.0, le=2.0, description="Sampling temperature"
    )
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    n: Optional[int] = Field(default=None, ge=1)
    best_of: Optional[int] = Field(default=None, ge=1)
    stream: Optional[bool] = Field(default=None)
    stop: Optional[Union[str, list[str]]] = Field(default=None)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    logit_bias: Optional[dict[str, float]] = Field(default=None)
    functions: Optional[list[dict[str, Any]]] = Field(default=None)
    function_call: Optional[Union[str, dict[str, Any]]] = Field(default=None)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body with unset optional fields omitted."""
        return self.model_dump(exclude_none=True)


# === Operational Schemas ===


class HealthResponse(BaseModel):
    status: Literal["healthy"] = Field(default="healthy")
    service: str
    model: str
    api_configured: bool


class LogsResponse(BaseModel):
    request_id: str
    logs: list[str]
    count: int
