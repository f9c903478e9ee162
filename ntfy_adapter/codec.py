"""Conversion between ntfy configuration URLs and ``NtfyConfig`` objects."""

import logging
import re
from urllib.parse import SplitResult, parse_qs, quote, unquote, urlsplit

from ntfy_adapter.exceptions import ConfigValidationError
from ntfy_adapter.schemas.config import DEFAULT_HOST, NtfyConfig, resolver

logger = logging.getLogger(__name__)

SCHEME = "ntfy"

# Permissive domain shape: something, a dot, then a short TLD-like label.
_HOST_PATTERN = re.compile(
    r"[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b([-a-zA-Z0-9()@:%_\+.~#?&/=]*)"
)


def is_valid_host(hostname: str) -> bool:
    """Return True if ``hostname`` looks like a domain name."""
    return bool(hostname) and _HOST_PATTERN.search(hostname) is not None


def _parse_host(parts: SplitResult) -> str:
    hostname = parts.hostname or ""
    if not is_valid_host(hostname):
        if hostname:
            logger.debug("Host %r does not look like a domain, using %s", hostname, DEFAULT_HOST)
        return DEFAULT_HOST
    try:
        port = parts.port
    except ValueError:
        logger.debug("Invalid port in %r, using %s", parts.netloc, DEFAULT_HOST)
        return DEFAULT_HOST
    return f"{hostname}:{port}" if port else hostname


def config_from_url(url: str) -> NtfyConfig:
    """
    Build a validated ``NtfyConfig`` from a configuration URL.

    Format: ``ntfy://[user:pass@]host[:port]/topic[?key=value&...]``

    The host falls back to ``ntfy.sh`` when it does not look like a domain, and
    credentials are only kept when both username and password are present.

    Raises:
        ConfigValidationError: if the topic is missing or a query parameter is
            unknown or has an invalid value.
    """
    parts = urlsplit(url)
    config = NtfyConfig(host=_parse_host(parts))

    username = unquote(parts.username or "")
    password = unquote(parts.password or "")
    if username and password:
        config.username = username
        config.password = password

    topic = parts.path[1:] if parts.path.startswith("/") else parts.path
    if not topic:
        raise ConfigValidationError("ntfy topic is invalid", key="topic")
    config.topic = unquote(topic)

    for key, values in parse_qs(parts.query, keep_blank_values=True).items():
        resolver.apply(config, key, values[0])

    return config


def config_to_url(config: NtfyConfig) -> str:
    """Render ``config`` back into its configuration URL."""
    userinfo = ""
    if config.username and config.password:
        userinfo = f"{quote(config.username, safe='')}:{quote(config.password, safe='')}@"

    url = f"{SCHEME}://{userinfo}{config.host}/{quote(config.topic)}"
    query = resolver.resolve(config)
    return f"{url}?{query}" if query else url
