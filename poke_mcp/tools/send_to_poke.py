import json
import logging
from typing import Annotated, Optional

import httpx
from mcp.types import CallToolResult, TextContent, ToolAnnotations
from pydantic import Field, ValidationError

from . import _extract_parameters, _register_tool_meta
from ..config import Settings, get_settings
from ..errors import PokeError
from ..schema import SendReceipt, SendToPokeOutput, SendToPokeRequest, ToolFailure
from ..webhook import parse_body, post_message


TOOL_NAME = "send_to_poke"
TOOL_TITLE = "Send to Poke"
TOOL_DESCRIPTION = "Send a message to Poke using the inbound webhook."

logger = logging.getLogger(__name__)


def _text_result(data: dict, *, is_error: bool, structured: dict | None = None) -> CallToolResult:
	return CallToolResult(
		content=[TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))],
		structuredContent=structured,
		isError=is_error,
	)


def _describe_validation_error(e: ValidationError) -> str:
	return "; ".join(err["msg"] for err in e.errors()) or "Invalid arguments"


def _to_failure(e: Exception) -> ToolFailure:
	if isinstance(e, PokeError):
		return ToolFailure(error=str(e) or "Unknown error", kind=e.kind)
	if isinstance(e, ValidationError):
		return ToolFailure(error=_describe_validation_error(e), kind="validation")
	return ToolFailure(error=str(e) or "Unknown error", kind="unknown")


async def deliver(
	message: str,
	include_raw_response: Optional[bool] = None,
	*,
	settings: Settings | None = None,
	transport: httpx.AsyncBaseTransport | None = None,
) -> CallToolResult:
	"""Validate, send and shape the result of one send_to_poke call.

	Every failure comes back as an isError result; nothing is raised.
	"""
	try:
		request = SendToPokeRequest(message=message, include_raw_response=include_raw_response)
		if settings is None:
			settings = get_settings()
		settings.require_api_key()
		reply = await post_message(request.message, settings, transport=transport)
		receipt = SendReceipt(
			http_status=reply.status_code,
			response=parse_body(reply.text),
			raw_response=reply.text if request.include_raw_response else None,
		)
	except Exception as e:
		failure = _to_failure(e)
		logger.error("send_to_poke failed [%s]: %s", failure.kind, failure.error)
		return _text_result(failure.model_dump(), is_error=True)

	payload = receipt.payload()
	logger.info("send_to_poke delivered (HTTP %d)", receipt.http_status)
	return _text_result(payload, is_error=False, structured=payload)


def register(mcp):
	@mcp.tool(
		name=TOOL_NAME,
		title=TOOL_TITLE,
		description=TOOL_DESCRIPTION,
		annotations=ToolAnnotations(readOnlyHint=False, idempotentHint=False, openWorldHint=True),
	)
	async def send_to_poke(
		message: Annotated[str, Field(min_length=1, description="Message to send to Poke")],
		include_raw_response: Annotated[Optional[bool], Field(description="Include raw response text for debugging")] = None,
	) -> Annotated[CallToolResult, SendToPokeOutput]:
		return await deliver(message, include_raw_response)

	_register_tool_meta(TOOL_NAME, TOOL_DESCRIPTION, __name__, parameters=_extract_parameters(send_to_poke))
