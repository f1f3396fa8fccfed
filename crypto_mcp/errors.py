"""Error hierarchy for the crypto MCP server."""


class CryptoMCPError(Exception):
    """Base error for the crypto MCP server."""


class UnknownToolError(CryptoMCPError):
    """Raised when a call names a tool this server does not expose."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ConfigError(CryptoMCPError):
    """Raised when an environment setting cannot be used."""
