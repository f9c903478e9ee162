"""Ntfy channel formatter."""

from ntfy_adapter.channels import ChannelPayload
from ntfy_adapter.schemas.config import NtfyConfig
from ntfy_adapter.schemas.message import MessageRequest


def build_post_url(config: NtfyConfig) -> str:
    scheme = "http" if config.disable_tls else "https"
    return f"{scheme}://{config.host}"


def format_ntfy(config: NtfyConfig, message: str) -> ChannelPayload:
    """
    Format a notification for an ntfy server.

    The topic travels in the JSON body, so every message is posted to the
    server root. Click, attach, email and delay are kept on the config but
    are not forwarded.
    """
    request = MessageRequest(
        topic=config.topic,
        message=message,
        title=config.title,
        priority=config.priority,
        tags=list(config.tags),
    )

    return ChannelPayload(
        method="POST",
        url=build_post_url(config),
        body=request.to_payload(),
        headers={"Content-Type": "application/json"},
    )
