"""Ntfy notification adapter."""

from ntfy_adapter.codec import SCHEME, config_from_url, config_to_url
from ntfy_adapter.dispatcher import send_notification
from ntfy_adapter.exceptions import ConfigValidationError, DeliveryError, NotificationError, ServerError
from ntfy_adapter.schemas import NtfyConfig
from ntfy_adapter.service import NtfyService

__all__ = [
    "ConfigValidationError",
    "DeliveryError",
    "NotificationError",
    "NtfyConfig",
    "NtfyService",
    "SCHEME",
    "ServerError",
    "config_from_url",
    "config_to_url",
    "send_notification",
]
