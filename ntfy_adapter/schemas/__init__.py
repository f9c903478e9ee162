"""Pydantic schemas for configuration and wire messages."""

from ntfy_adapter.schemas.config import DEFAULT_HOST, NtfyConfig, QUERY_FIELDS, resolver
from ntfy_adapter.schemas.message import ErrorResponse, MessageRequest, MessageResponse

__all__ = [
    "DEFAULT_HOST",
    "ErrorResponse",
    "MessageRequest",
    "MessageResponse",
    "NtfyConfig",
    "QUERY_FIELDS",
    "resolver",
]
