class PokeError(Exception):
	"""Base class for failures surfaced by the send_to_poke tool."""

	kind = "unknown"


class ConfigurationError(PokeError):
	kind = "configuration"


class NetworkError(PokeError):
	kind = "network"


class WebhookTimeoutError(NetworkError):
	kind = "timeout"


class HttpStatusError(PokeError):
	kind = "http_status"

	def __init__(self, status_code: int, body: str):
		super().__init__(f"Poke API error {status_code}: {body}")
		self.status_code = status_code
		self.body = body
