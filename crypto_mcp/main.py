import asyncio
import logging
import sys
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData, TextContent, Tool

from crypto_mcp import __version__
from crypto_mcp.backend.coingecko import CoinGeckoClient
from crypto_mcp.config import Settings
from crypto_mcp.errors import UnknownToolError
from crypto_mcp.models import PriceQuoteResult
from crypto_mcp.tools.get_crypto_price import (
    TOOL_NAME,
    get_crypto_price_tool,
    run_get_crypto_price,
)


logger = logging.getLogger("crypto_mcp")

SERVER_NAME = "crypto"


class CryptoPriceApp:
    """
    Tool registry and invoker behind the MCP handlers.
    """

    def __init__(self, client: CoinGeckoClient):
        self.client = client
        self._tools = [get_crypto_price_tool()]

    def list_tools(self) -> list[Tool]:
        return list(self._tools)

    def require_tool(self, name: str) -> None:
        if name != TOOL_NAME:
            raise UnknownToolError(name)

    async def call_tool(self, name: str, arguments: Any) -> PriceQuoteResult:
        self.require_tool(name)
        return await run_get_crypto_price(self.client, arguments)


def build_server(app: CryptoPriceApp) -> Server:
    """
    Create the MCP server instance and wire its handlers to `app`.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """
        List all tools exposed by this MCP server.
        """
        return app.list_tools()

    # validation happens in the tool so that bad arguments come back as text
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        """
        Execute the requested MCP tool.
        """
        result = await app.call_tool(name, arguments)
        return [
            TextContent(
                type="text",
                text=result.text()
            )
        ]

    # unknown names must fail as a JSON-RPC error, ahead of the tool handler
    dispatch_call_tool = server.request_handlers[types.CallToolRequest]

    async def call_tool_request(req: types.CallToolRequest) -> types.ServerResult:
        try:
            app.require_tool(req.params.name)
        except UnknownToolError as e:
            raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e))) from e
        return await dispatch_call_tool(req)

    server.request_handlers[types.CallToolRequest] = call_tool_request

    return server


async def serve(settings: Settings) -> None:
    """
    Start MCP server over STDIO.
    """
    client = CoinGeckoClient(api_url=settings.api_url, timeout=settings.timeout)
    server = build_server(CryptoPriceApp(client))

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Crypto MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main() -> None:
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = Settings.from_env()
        logging.getLogger().setLevel(settings.log_level)
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Crypto MCP Server stopped")
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
