from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError


class SendToPokeRequest(BaseModel):
	message: str = Field(min_length=1, description="Message to send to Poke")
	include_raw_response: Optional[bool] = Field(default=None, description="Include raw response text for debugging")

	@field_validator("message")
	@classmethod
	def message_must_have_content(cls, v: str) -> str:
		v = v.strip()
		if not v:
			raise PydanticCustomError("empty_message", "message cannot be empty")
		return v


class SendReceipt(BaseModel):
	status: Literal["sent"] = "sent"
	http_status: int
	response: Any = None
	raw_response: Optional[str] = None

	def payload(self) -> dict:
		data = self.model_dump()
		if self.raw_response is None:
			data.pop("raw_response")
		return data


class SendToPokeOutput(SendReceipt):
	"""Output schema advertised for send_to_poke.

	Error results carry no structured content, so validating None passes through.
	"""

	@model_validator(mode="wrap")
	@classmethod
	def allow_error_results(cls, data: Any, handler):
		if data is None:
			return None
		return handler(data)


class ToolFailure(BaseModel):
	error: str
	status: Literal["failed"] = "failed"
	kind: str = Field(default="unknown", exclude=True)
