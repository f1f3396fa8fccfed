"""
Command-line MCP client for the crypto price server.

Spawns the server as a subprocess over STDIO, then lists its tools or
calls get-crypto-price and prints the text it returns.
"""

import argparse
import asyncio
import sys
from contextlib import AsyncExitStack
from typing import Any

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.types import CallToolResult, Tool

from crypto_mcp.tools.get_crypto_price import TOOL_NAME


class MCPClient:
    """
    Handles connection to an MCP server over STDIO
    and exposes tool discovery and execution
    """
    def __init__(self, command: str = sys.executable, args: list[str] | None = None):
        self.command = command
        self.args = args if args is not None else ["-m", "crypto_mcp.main"]
        self.session: ClientSession | None = None
        self.exit_stack = AsyncExitStack()

    async def connect(self):
        """
        Starts the MCP server process and opens a client session.
        """
        server_params = StdioServerParameters(
            command=self.command,
            args=self.args,
            env=None
        )

        read_stream, write_stream = await self.exit_stack.enter_async_context(
            stdio_client(server_params)
        )

        self.session = await self.exit_stack.enter_async_context(
            ClientSession(read_stream, write_stream)
        )

        await self.session.initialize()

    async def close(self):
        """
        Shuts down MCP session and server process
        """
        await self.exit_stack.aclose()

    async def list_tools(self) -> list[Tool]:
        assert self.session is not None, "MCP session is not initialized"
        response = await self.session.list_tools()
        return response.tools

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> CallToolResult:
        assert self.session is not None, "MCP session is not initialized"
        return await self.session.call_tool(name, arguments)


def result_text(result: CallToolResult) -> str:
    """
    Join the text blocks of a tool result.
    """
    parts = [block.text for block in result.content if block.type == "text"]
    if not parts:
        return "No response from tool."
    return "\n".join(parts)


async def run(args: argparse.Namespace) -> int:
    mcp_client = MCPClient()
    try:
        await mcp_client.connect()

        if args.list:
            for tool in await mcp_client.list_tools():
                print(f"{tool.name}: {tool.description}")
            return 0

        arguments = {"coin": args.coin}
        if args.currency is not None:
            arguments["currency"] = args.currency

        result = await mcp_client.call_tool(TOOL_NAME, arguments)
        print(result_text(result))
        return 1 if result.isError else 0

    finally:
        await mcp_client.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Query the crypto MCP server over stdio")
    parser.add_argument("coin", nargs="?", help="coin identifier, e.g. bitcoin")
    parser.add_argument("--currency", default=None, help="fiat currency code (server default: usd)")
    parser.add_argument("--list", action="store_true", help="list the server's tools and exit")
    args = parser.parse_args()

    if not args.list and not args.coin:
        parser.error("coin is required unless --list is given")

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
