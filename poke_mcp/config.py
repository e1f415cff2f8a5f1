import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .errors import ConfigurationError


DEFAULT_BASE_URL = "https://poke.com"
DEFAULT_TIMEOUT_MS = 30000


@dataclass
class Settings:
	api_key: str | None = None
	base_url: str = DEFAULT_BASE_URL
	timeout_ms: int = DEFAULT_TIMEOUT_MS

	def require_api_key(self) -> str:
		if not self.api_key:
			raise ConfigurationError("POKE_API_KEY is required")
		return self.api_key


def _parse_timeout(raw: str | None) -> int:
	if raw is None or not raw.strip():
		return DEFAULT_TIMEOUT_MS
	try:
		value = int(raw.strip(), 10)
	except ValueError:
		raise ConfigurationError(f"POKE_TIMEOUT must be an integer number of milliseconds, got {raw!r}") from None
	if value <= 0:
		raise ConfigurationError(f"POKE_TIMEOUT must be positive, got {value}")
	return value


def get_settings() -> Settings:
	"""Resolve settings from the environment.

	Called on every tool invocation so environment changes apply to the next call.
	"""
	# Load .env if present
	load_dotenv(override=False)
	return Settings(
		api_key=(os.getenv("POKE_API_KEY") or "").strip() or None,
		base_url=(os.getenv("POKE_BASE_URL") or "").strip().rstrip("/") or DEFAULT_BASE_URL,
		timeout_ms=_parse_timeout(os.getenv("POKE_TIMEOUT")),
	)
