import httpx
import pytest
import structlog

from gemini_client.client import Client
from gemini_client.core.config import Settings, get_settings

from .fakes import FakeGemini


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory(), cache_logger_on_first_use=False)
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_caches():
    get_settings.cache_clear()
    Client.reset_instance()
    yield
    get_settings.cache_clear()
    Client.reset_instance()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(_env_file=None, gemini_api_key="test-key", google_api_key=None)


@pytest.fixture
def fake_api():
    return FakeGemini()


@pytest.fixture
def client(settings, fake_api):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api))
    return Client(http_client=http_client, settings=settings)
