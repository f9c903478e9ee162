"""Tests for the ntfy channel formatter and wire schemas."""

from ntfy_adapter.channels.ntfy import build_post_url, format_ntfy
from ntfy_adapter.schemas import ErrorResponse, MessageRequest, MessageResponse, NtfyConfig


def test_format_ntfy_posts_to_server_root():
    config = NtfyConfig(host="ntfy.example.com:8443", topic="alerts", title="Disk", tags=["warning"])

    payload = format_ntfy(config, "Disk almost full")

    assert payload.method == "POST"
    assert payload.url == "https://ntfy.example.com:8443"
    assert payload.headers == {"Content-Type": "application/json"}
    assert payload.body == {
        "topic": "alerts",
        "message": "Disk almost full",
        "title": "Disk",
        "tag": ["warning"],
        "priority": 3,
    }


def test_format_ntfy_does_not_forward_delivery_hints():
    config = NtfyConfig(
        topic="alerts", click="https://example.com", attach="https://example.com/a.png",
        email="ops@example.com", delay="30m",
    )

    body = format_ntfy(config, "Message").body

    assert set(body) == {"topic", "message", "priority"}


def test_format_ntfy_copies_tags():
    config = NtfyConfig(topic="alerts", tags=["a"])

    payload = format_ntfy(config, "Message")
    payload.body["tag"].append("b")

    assert config.tags == ["a"]


def test_build_post_url_without_tls():
    assert build_post_url(NtfyConfig(topic="t", disable_tls=True)) == "http://ntfy.sh"


def test_message_request_keeps_empty_topic():
    assert MessageRequest(topic="").to_payload() == {"topic": ""}


def test_message_response_ignores_unknown_fields():
    response = MessageResponse.model_validate(
        {"id": "abc", "time": 1700000000, "event": "message", "topic": "alerts", "tag": ["a"]}
    )

    assert response.id == "abc"
    assert response.topic == "alerts"
    assert response.tags == ["a"]


def test_error_response_aliases():
    error = ErrorResponse.model_validate_json(
        '{"error": "unauthorized", "errorCode": 40101, "errorDescription": "auth failed", "http": 401}'
    )

    assert (error.name, error.code, error.description) == ("unauthorized", 40101, "auth failed")
