from typing import Any

from mcp.types import Tool

from crypto_mcp.backend.coingecko import CoinGeckoClient
from crypto_mcp.models import (
    DEFAULT_CURRENCY,
    Err,
    Ok,
    PriceArgs,
    PriceQuoteResult,
    ValidationError,
    ValidationOutcome,
)


TOOL_NAME = "get-crypto-price"


def get_crypto_price_tool() -> Tool:
    """
    MCP Tool definition for the CoinGecko price lookup.
    """
    return Tool(
        name=TOOL_NAME,
        description="Fetch current price of a cryptocurrency from CoinGecko",
        inputSchema={
            "type": "object",
            "properties": {
                "coin": {
                    "type": "string",
                    "description": "coin identifier, e.g. bitcoin, ethereum"
                },
                "currency": {
                    "type": "string",
                    "description": "fiat currency code, default 'usd'"
                }
            },
            "required": ["coin"]
        }
    )


def validate_price_args(arguments: Any) -> ValidationOutcome:
    """
    Check caller arguments against the tool's input schema.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        return Err("arguments must be an object")

    if "coin" not in arguments:
        return Err("coin is required")
    coin = arguments["coin"]
    if not isinstance(coin, str):
        return Err("coin must be a string")
    if not coin:
        return Err("coin must be a non-empty string")

    currency = arguments.get("currency", DEFAULT_CURRENCY)
    if not isinstance(currency, str):
        return Err("currency must be a string")

    return Ok(PriceArgs(coin=coin, currency=currency))


async def run_get_crypto_price(client: CoinGeckoClient, arguments: Any) -> PriceQuoteResult:
    outcome = validate_price_args(arguments)
    if isinstance(outcome, Err):
        return ValidationError(message=outcome.reason)

    args = outcome.args
    return await client.fetch_simple_price(args.coin, args.currency)
