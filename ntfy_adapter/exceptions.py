"""Exception hierarchy for the ntfy adapter."""

from typing import Optional


class NotificationError(RuntimeError):
    """Base exception for every failure raised by the adapter."""


class ConfigValidationError(NotificationError, ValueError):
    """Raised when a configuration URL or a config key/value is rejected."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class DeliveryError(NotificationError):
    """Raised when a notification could not be delivered."""


class ServerError(DeliveryError):
    """
    A structured error returned by the ntfy server.

    Carries the decoded ``error``, ``errorCode`` and ``errorDescription``
    fields of the response body.
    """

    def __init__(self, name: str, code: int, description: str, status_code: Optional[int] = None):
        self.name = name
        self.code = code
        self.description = description
        self.status_code = status_code
        super().__init__(f"server responds with {name} ({code}): {description}")
