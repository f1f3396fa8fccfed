import httpx
import pytest

from crypto_mcp.backend.coingecko import CoinGeckoClient


API_URL = "https://api.coingecko.test/api/v3"


def json_handler(body, status_code=200, seen=None):
    """Build a MockTransport handler that always answers with `body`."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=body)

    return handler


@pytest.fixture
def make_client():
    def _make(handler) -> CoinGeckoClient:
        return CoinGeckoClient(api_url=API_URL, timeout=5, transport=httpx.MockTransport(handler))

    return _make
