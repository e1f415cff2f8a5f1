"""Unit tests for the webhook invoker."""

import asyncio
import json

import httpx
import pytest

from poke_mcp.config import Settings
from poke_mcp.errors import ConfigurationError, HttpStatusError, NetworkError, WebhookTimeoutError
from poke_mcp.webhook import parse_body, post_message, webhook_url


async def test_posts_correct_payload(settings, make_transport):
    """Verify the invoker sends the right url, headers and body to Poke."""
    transport = make_transport(lambda request: httpx.Response(200, json={"ok": True}))

    reply = await post_message("drink water", settings, transport=transport)

    assert reply.status_code == 200
    assert json.loads(reply.text) == {"ok": True}
    [request] = transport.requests
    assert request.method == "POST"
    assert str(request.url) == "https://poke.test/api/v1/inbound-sms/webhook"
    assert request.headers["authorization"] == "Bearer sk-test"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"message": "drink water"}


def test_webhook_url_strips_trailing_slash():
    assert webhook_url("https://poke.com/") == "https://poke.com/api/v1/inbound-sms/webhook"
    assert webhook_url("https://poke.com") == "https://poke.com/api/v1/inbound-sms/webhook"


async def test_raises_on_http_error(settings, make_transport):
    transport = make_transport(lambda request: httpx.Response(401, text="unauthorized"))

    with pytest.raises(HttpStatusError) as exc:
        await post_message("test", settings, transport=transport)

    assert exc.value.status_code == 401
    assert exc.value.body == "unauthorized"
    assert str(exc.value) == "Poke API error 401: unauthorized"


async def test_transport_failure_is_a_network_error(settings, make_transport):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(refuse)

    with pytest.raises(NetworkError, match="connection refused") as exc:
        await post_message("test", settings, transport=transport)
    assert not isinstance(exc.value, WebhookTimeoutError)


async def test_slow_webhook_times_out(make_transport):
    async def stall(request):
        await asyncio.sleep(5)
        return httpx.Response(200, text="too late")

    transport = make_transport(stall)
    settings = Settings(api_key="sk-test", base_url="https://poke.test", timeout_ms=50)

    with pytest.raises(WebhookTimeoutError, match="50 ms"):
        await post_message("test", settings, transport=transport)


async def test_missing_api_key_sends_nothing(make_transport):
    transport = make_transport(lambda request: httpx.Response(200))

    with pytest.raises(ConfigurationError, match="POKE_API_KEY is required"):
        await post_message("test", Settings(), transport=transport)
    assert transport.requests == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ('{"ok": true, "id": "msg_1"}', {"ok": True, "id": "msg_1"}),
        ("[1, 2, 3]", [1, 2, 3]),
        ("42", 42),
        ("null", None),
        ("queued", "queued"),
        ("{not json", "{not json"),
        ("", ""),
        ("NaN", "NaN"),
        ("Infinity", "Infinity"),
        ("[1, -Infinity]", "[1, -Infinity]"),
    ],
)
def test_parse_body(text, expected):
    assert parse_body(text) == expected


def test_parse_body_survives_deeply_nested_input():
    unbalanced = "[" * 200000
    assert parse_body(unbalanced) == unbalanced

    nested = "[" * 200000 + "]" * 200000
    assert parse_body(nested) == nested
