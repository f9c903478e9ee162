"""One-shot delivery from a configuration URL."""

import logging
from typing import Mapping, Optional
from urllib.parse import urlsplit

import httpx

from ntfy_adapter.codec import SCHEME
from ntfy_adapter.exceptions import ConfigValidationError, NotificationError
from ntfy_adapter.service import NtfyService

_logger = logging.getLogger(__name__)


async def send_notification(
    url: str,
    message: str,
    params: Optional[Mapping[str, str]] = None,
    logger: Optional[logging.Logger] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """
    Parse ``url``, then deliver ``message`` through a fresh ``NtfyService``.

    Args:
        url: Configuration URL, e.g. ``ntfy://ntfy.sh/alerts?priority=4``
        message: The notification text
        params: Optional per-call overrides, see ``NtfyService.send``
        logger: Logger handed to the service, defaults to this module's logger
        transport: Optional httpx transport override
    """
    logger = logger or _logger
    scheme = urlsplit(url).scheme.lower()
    if scheme != SCHEME:
        raise ConfigValidationError(f"Unsupported notification scheme: {scheme or '(none)'}", key="scheme")

    service = NtfyService(transport=transport)
    service.initialize(url, logger)

    try:
        await service.send(message, params)
    except NotificationError as e:
        logger.error("Failed to send notification to %s/%s: %s", service.config.host, service.config.topic, e)
        raise
    logger.info("Notification sent to %s/%s", service.config.host, service.config.topic)
