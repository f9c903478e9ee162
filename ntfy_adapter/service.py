"""Ntfy notification service."""

import base64
import logging
from typing import Mapping, Optional

import httpx

from ntfy_adapter.channels.ntfy import format_ntfy
from ntfy_adapter.codec import config_from_url
from ntfy_adapter.config import settings
from ntfy_adapter.exceptions import ConfigValidationError, DeliveryError, NotificationError, ServerError
from ntfy_adapter.schemas.config import NtfyConfig, resolver
from ntfy_adapter.schemas.message import ErrorResponse, MessageResponse
from ntfy_adapter.transport import error_body, http_client, post_json

logger = logging.getLogger(__name__)


def basic_authorization(username: str, password: str) -> str:
    """Return the ``Authorization`` header value for HTTP basic auth."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class NtfyService:
    """
    Deliver messages to an ntfy topic.

    Call ``initialize()`` with a configuration URL once, then ``send()`` as
    often as needed. The stored configuration is never changed by a send;
    per-call params are applied to a copy.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config: Optional[NtfyConfig] = None
        self.logger = logger
        self._transport = transport
        self._headers: dict[str, str] = {}
        self._verify = True

    @property
    def ready(self) -> bool:
        return self.config is not None

    @staticmethod
    def describe_config() -> list[dict]:
        """Query keys accepted in the configuration URL and as send params."""
        return resolver.describe()

    def initialize(self, url: str, logger: Optional[logging.Logger] = None) -> None:
        """
        Load the configuration from ``url`` and prepare the transport options.

        Raises:
            ConfigValidationError: if ``url`` is not a valid ntfy configuration URL.
                The service is left uninitialized.
        """
        self.config = None
        if logger is not None:
            self.logger = logger

        config = config_from_url(url)

        self._verify = not config.disable_tls
        self._headers = {}
        # Credentials are fixed for the lifetime of the service
        if config.username and config.password:
            self._headers["Authorization"] = basic_authorization(config.username, config.password)

        self.config = config

    def _apply_params(self, params: Optional[Mapping[str, str]]) -> NtfyConfig:
        config = self.config.model_copy(deep=True)
        for key, value in (params or {}).items():
            try:
                resolver.apply(config, key, value)
            except ConfigValidationError as e:
                self.logger.warning("Failed to update params: %s", e)
        return config

    async def send(self, message: str, params: Optional[Mapping[str, str]] = None) -> None:
        """
        Send ``message`` to the configured topic.

        Args:
            message: The notification text
            params: Optional per-call overrides keyed like the URL query
                (e.g. ``{"title": "Backup", "priority": "5"}``). Invalid entries
                are logged and ignored.

        Raises:
            NotificationError: if the service has not been initialized
            ServerError: if the server answered with a structured error
            DeliveryError: for any other delivery failure
        """
        if not self.ready:
            raise NotificationError("ntfy service is not initialized")

        config = self._apply_params(params)
        payload = format_ntfy(config, message)

        try:
            async with http_client(
                timeout=settings.request_timeout,
                verify=self._verify,
                headers=self._headers,
                transport=self._transport,
            ) as client:
                body = await post_json(client, payload)
            response = MessageResponse.model_validate(body)
        except httpx.HTTPStatusError as e:
            self.logger.warning(
                "Ntfy server %s returned status %s: %s",
                payload.url, e.response.status_code, e.response.text[:200],
            )
            error = error_body(e, ErrorResponse)
            if error is not None:
                raise ServerError(
                    error.name, error.code, error.description, status_code=e.response.status_code
                ) from e
            raise DeliveryError(f"failed to send notification to ntfy: {e}") from e
        except httpx.HTTPError as e:
            self.logger.warning("Failed to contact ntfy server %s: %s", payload.url, e)
            raise DeliveryError(f"failed to send notification to ntfy: {e}") from e
        except ValueError as e:
            raise DeliveryError(f"ntfy returned a malformed response: {e}") from e

        self.logger.debug("Delivered message %s to topic %s", response.id, config.topic)
