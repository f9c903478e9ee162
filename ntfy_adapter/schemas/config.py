"""Pydantic model for an ntfy configuration and its query fields."""

from pydantic import BaseModel, Field

from ntfy_adapter.fields import (
    FieldResolver,
    QueryField,
    format_bool,
    format_list,
    parse_bool,
    parse_int,
    parse_list,
)

DEFAULT_HOST = "ntfy.sh"


class NtfyConfig(BaseModel):
    host: str = Field(DEFAULT_HOST, description="Server hostname (and optionally port)")
    topic: str = Field("", description="Target topic name (required)")
    username: str = Field("", description="Username of a protected topic")
    password: str = Field("", description="Password of a protected topic")
    priority: int = Field(3, ge=1, le=5, description="Message priority with 1=min, 3=default and 5=max")
    title: str = Field("", description="Message title")
    disable_tls: bool = Field(False, description="Use http instead of https")
    tags: list[str] = Field(
        default_factory=list,
        description='List of tags that may or may not map to emojis, separated by "," (comma)',
    )
    click: str = Field("", description="Website opened when the notification is clicked")
    attach: str = Field("", description="URL of an attachment")
    email: str = Field("", description="E-mail address for e-mail notifications")
    delay: str = Field("", description="Timestamp or duration for delayed delivery")

    model_config = {"validate_assignment": True}


# Host, topic and credentials live in the URL itself, everything else in the query.
QUERY_FIELDS = (
    QueryField("priority", ("priority",), parse_int),
    QueryField("title", ("title",)),
    QueryField("disable_tls", ("disabletls",), parse_bool, format_bool),
    QueryField("tags", ("tags", "tag"), parse_list, format_list),
    QueryField("click", ("click",)),
    QueryField("attach", ("attach",)),
    QueryField("email", ("email",)),
    QueryField("delay", ("delay",)),
)

resolver = FieldResolver(NtfyConfig, QUERY_FIELDS)
