"""Core module exports."""

from .security import (
    create_access_token,
    decode_token,
    get_token_subject,
)
from .permissions import can_mutate

__all__ = [
    "create_access_token",
    "decode_token",
    "get_token_subject",
    "can_mutate",
]
