"""HTTP helpers for posting JSON payloads to notification servers."""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ntfy_adapter.channels import ChannelPayload
from ntfy_adapter.config import settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def http_client(
    timeout: Optional[float] = None,
    verify: bool = True,
    headers: Optional[dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    follow_redirects: bool = True,
) -> httpx.AsyncClient:
    """
    Create an ``httpx.AsyncClient`` for a single delivery.

    Args:
        timeout: Request timeout in seconds, defaults to ``settings.request_timeout``
        verify: Set to False to skip TLS certificate verification
        headers: Headers sent with every request made by the client
        transport: Optional transport override (e.g. ``httpx.MockTransport``)
    """
    return httpx.AsyncClient(
        timeout=settings.request_timeout if timeout is None else timeout,
        verify=verify,
        headers={"User-Agent": settings.user_agent, **(headers or {})},
        transport=transport,
        follow_redirects=follow_redirects,
    )


async def post_json(client: httpx.AsyncClient, payload: ChannelPayload) -> Any:
    """
    Send ``payload`` and return the decoded JSON response body.

    Raises:
        httpx.HTTPStatusError: for any non-2xx response
        httpx.HTTPError: for connection failures and timeouts
        ValueError: if a successful response is not valid JSON
    """
    response = await client.request(
        method=payload.method,
        url=payload.url,
        headers=payload.headers,
        json=payload.body,
    )
    response.raise_for_status()
    return response.json()


def error_body(exc: httpx.HTTPStatusError, model: type[ModelT]) -> Optional[ModelT]:
    """Decode the body of a failed response into ``model``, or None if it does not fit."""
    try:
        return model.model_validate_json(exc.response.content)
    except ValidationError:
        logger.debug(
            "Error response from %s is not a %s: %s",
            exc.request.url, model.__name__, exc.response.text[:200],
        )
        return None
