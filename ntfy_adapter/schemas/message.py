"""Pydantic schemas for the ntfy publish API."""

from pydantic import BaseModel, Field


class MessageRequest(BaseModel):
    """JSON body posted to the server root."""
    topic: str
    message: str = ""
    title: str = ""
    tags: list[str] = Field(default_factory=list, alias="tag")
    priority: int = 0
    click: str = ""
    attach: str = ""
    filename: str = ""
    delay: str = ""
    email: str = ""

    model_config = {"populate_by_name": True}

    def to_payload(self) -> dict:
        """Dump by alias, leaving out empty fields. ``topic`` is always kept."""
        data = self.model_dump(by_alias=True)
        return {k: v for k, v in data.items() if v or k == "topic"}


class MessageResponse(MessageRequest):
    """Success body: the request echoed back plus the server-side identifiers."""
    topic: str = ""
    id: str = ""
    timestamp: int = 0
    event: str = ""

    model_config = {"populate_by_name": True, "extra": "ignore"}


class ErrorResponse(BaseModel):
    name: str = Field("", alias="error")
    code: int = Field(0, alias="errorCode")
    description: str = Field("", alias="errorDescription")

    model_config = {"populate_by_name": True, "extra": "ignore"}
