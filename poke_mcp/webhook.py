"""Outbound call to the Poke inbound webhook.

API: POST {base_url}/api/v1/inbound-sms/webhook
Auth: Bearer token from POKE_API_KEY
Body: {"message": "your message text"}
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .config import Settings
from .errors import HttpStatusError, NetworkError, WebhookTimeoutError


WEBHOOK_PATH = "/api/v1/inbound-sms/webhook"

logger = logging.getLogger(__name__)


@dataclass
class WebhookReply:
	status_code: int
	text: str

	@property
	def ok(self) -> bool:
		return 200 <= self.status_code < 300


def webhook_url(base_url: str) -> str:
	return base_url.rstrip("/") + WEBHOOK_PATH


def _reject_constant(name: str) -> Any:
	# NaN and Infinity are not JSON
	raise ValueError(f"invalid JSON constant {name}")


def parse_body(text: str) -> Any:
	"""Decode a webhook body as JSON, falling back to the raw text. Never raises."""
	if not text:
		return text
	try:
		return json.loads(text, parse_constant=_reject_constant)
	except (ValueError, RecursionError):
		return text


async def _post(url: str, headers: dict, body: dict, timeout_s: float, transport: Optional[httpx.AsyncBaseTransport]) -> WebhookReply:
	async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as http:
		r = await http.post(url, headers=headers, json=body)
		return WebhookReply(status_code=r.status_code, text=r.text)


async def post_message(
	message: str,
	settings: Settings,
	*,
	transport: Optional[httpx.AsyncBaseTransport] = None,
) -> WebhookReply:
	"""POST one message to the webhook, bounded by settings.timeout_ms.

	Raises NetworkError (or WebhookTimeoutError) when the webhook cannot be
	reached in time, and HttpStatusError for any non-2xx reply.
	"""
	url = webhook_url(settings.base_url)
	headers = {
		"Authorization": f"Bearer {settings.require_api_key()}",
		"Content-Type": "application/json",
	}
	timeout_s = settings.timeout_ms / 1000
	logger.debug("POST %s (timeout %d ms)", url, settings.timeout_ms)
	try:
		# wait_for cancels the in-flight request; the client context closes on every path
		reply = await asyncio.wait_for(_post(url, headers, {"message": message}, timeout_s, transport), timeout=timeout_s)
	except (asyncio.TimeoutError, httpx.TimeoutException) as e:
		raise WebhookTimeoutError(f"Poke API request timed out after {settings.timeout_ms} ms") from e
	except httpx.HTTPError as e:
		raise NetworkError(str(e) or e.__class__.__name__) from e

	if not reply.ok:
		raise HttpStatusError(reply.status_code, reply.text)
	return reply
