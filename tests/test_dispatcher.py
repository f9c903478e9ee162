"""Tests for the one-shot dispatcher."""

import logging

import pytest

from ntfy_adapter import send_notification
from ntfy_adapter.exceptions import ConfigValidationError, ServerError


@pytest.mark.asyncio
async def test_send_notification(recorder, caplog):
    with caplog.at_level(logging.INFO, logger="ntfy_adapter.dispatcher"):
        await send_notification(
            "ntfy://ntfy.test/deploys?tags=rocket",
            "Deployed v1.2",
            {"title": "Release"},
            transport=recorder.transport,
        )

    assert recorder.last_json == {
        "topic": "deploys",
        "message": "Deployed v1.2",
        "title": "Release",
        "tag": ["rocket"],
        "priority": 3,
    }
    assert "Notification sent to ntfy.test/deploys" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["https://ntfy.sh/topic", "ntfy.sh/topic"])
async def test_send_notification_rejects_other_schemes(recorder, url):
    with pytest.raises(ConfigValidationError):
        await send_notification(url, "Message", transport=recorder.transport)

    assert recorder.requests == []


@pytest.mark.asyncio
async def test_send_notification_logs_and_reraises(recorder, caplog):
    recorder.status_code = 403
    recorder.body = {"error": "forbidden", "errorCode": 40301, "errorDescription": "topic is reserved"}

    with caplog.at_level(logging.ERROR, logger="ntfy_adapter.dispatcher"):
        with pytest.raises(ServerError) as exc_info:
            await send_notification("ntfy://ntfy.test/reserved", "Message", transport=recorder.transport)

    assert exc_info.value.code == 40301
    assert "topic is reserved" in caplog.text


@pytest.mark.asyncio
async def test_send_notification_uses_given_logger(recorder, caplog):
    custom = logging.getLogger("tests.dispatch")

    with caplog.at_level(logging.INFO, logger="tests.dispatch"):
        await send_notification(
            "ntfy://ntfy.test/deploys", "Deployed", logger=custom, transport=recorder.transport,
        )

    assert [record.name for record in caplog.records] == ["tests.dispatch"]
    assert "Notification sent to ntfy.test/deploys" in caplog.text
