import httpx
import pytest
import respx

from ocean_client.infrastructure.client import Client

BASE_URL = "https://api.example.test"
TOKEN = "test-token"


def url(path: str) -> str:
    return BASE_URL + path


@pytest.fixture
def api():
    """A fresh mocked transport for every test; nothing is shared."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
async def http_client():
    async with httpx.AsyncClient() as http_client:
        yield http_client


@pytest.fixture
def client(http_client):
    return Client(TOKEN, http_client=http_client, base_url=BASE_URL)
