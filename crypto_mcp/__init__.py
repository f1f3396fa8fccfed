"""
MCP server exposing a single cryptocurrency price tool backed by CoinGecko.
"""

__version__ = "1.0.0"
