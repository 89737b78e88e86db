"""Shared response envelope and schema base classes."""

from typing import Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# {"en": "Hello", "hi": "नमस्ते"}
LocalizedText = Dict[str, str]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire (matches the web client)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Standard `{success, data, message}` envelope."""
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


class MessageResponse(BaseModel):
    """Envelope for actions that only report an outcome."""
    success: bool = True
    message: str


def validate_localized_text(value: LocalizedText) -> LocalizedText:
    """At least one locale, no blank locale codes."""
    if not value:
        raise ValueError("At least one locale entry is required")
    cleaned = {}
    for locale, text in value.items():
        code = locale.strip().lower()
        if not code:
            raise ValueError("Locale codes must not be blank")
        cleaned[code] = text
    return cleaned
