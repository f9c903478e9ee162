"""Base types for notification channel formatters."""

from dataclasses import dataclass, field


@dataclass
class ChannelPayload:
    """Represents the HTTP request a channel formatter wants sent."""
    method: str
    url: str
    body: dict  # serialized as JSON
    headers: dict[str, str] = field(default_factory=dict)
