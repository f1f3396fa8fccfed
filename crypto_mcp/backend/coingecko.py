"""
Backend data layer for the price tool.

Talks to the public CoinGecko "simple price" endpoint (no API key) and
turns whatever comes back into a lookup outcome instead of raising.
"""

import logging
from decimal import Decimal
from typing import Any

import httpx

from crypto_mcp.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from crypto_mcp.models import Found, NotFound, TransportError


logger = logging.getLogger(__name__)

SIMPLE_PRICE_PATH = "/simple/price"


def extract_price(data: Any, coin: str, currency: str) -> Found | NotFound:
    """
    Pick data[coin][currency] out of a decoded simple-price body.

    A missing key at either level, a body of the wrong shape, or a falsy
    price (0, null) all count as not found.
    """
    if not isinstance(data, dict):
        return NotFound(coin=coin, currency=currency)

    prices = data.get(coin)
    if not isinstance(prices, dict):
        return NotFound(coin=coin, currency=currency)

    price = prices.get(currency)
    if not price:
        return NotFound(coin=coin, currency=currency)

    return Found(coin=coin, currency=currency, price=price)


class CoinGeckoClient:
    """
    Minimal async client for the CoinGecko simple-price endpoint.

    A fresh httpx.AsyncClient is opened for every lookup, so nothing is
    shared between requests. `transport` lets callers swap in a custom
    httpx transport.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def simple_price_url(self) -> str:
        return f"{self.api_url}{SIMPLE_PRICE_PATH}"

    async def fetch_simple_price(
        self, coin: str, currency: str
    ) -> Found | NotFound | TransportError:
        """
        Get the price of `coin` in `currency`.
        """
        params = {
            "ids": coin,
            "vs_currencies": currency,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.simple_price_url, params=params)
                response.raise_for_status()
                # Decimal keeps the price digits as the API sent them
                data = response.json(parse_float=Decimal)

        except Exception as e:
            logger.debug("price lookup for %s/%s failed: %s", coin, currency, e)
            return TransportError(message=str(e))

        return extract_price(data, coin, currency)
