import httpx
import pytest

from poke_mcp.config import Settings


POKE_ENV_VARS = ("POKE_API_KEY", "POKE_BASE_URL", "POKE_TIMEOUT", "POKE_LOG_LEVEL")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it was asked to send."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        async def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        super().__init__(record)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in POKE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's local .env out of the tests
    monkeypatch.setattr("poke_mcp.config.load_dotenv", lambda **kwargs: False)


@pytest.fixture
def settings():
    return Settings(api_key="sk-test", base_url="https://poke.test", timeout_ms=1000)


@pytest.fixture
def make_transport():
    def factory(handler):
        return RecordingTransport(handler)

    return factory
