"""
Per-request values for the price tool.

Validated arguments, the validation outcome, and every way a price lookup
can end. Each lookup outcome knows how to render itself as the text body
returned to the caller.
"""

from dataclasses import dataclass
from typing import Any, Union


DEFAULT_CURRENCY = "usd"


@dataclass(frozen=True)
class PriceArgs:
    coin: str
    currency: str = DEFAULT_CURRENCY


# -------------------------------------------------
# Argument validation outcome
# -------------------------------------------------

@dataclass(frozen=True)
class Ok:
    args: PriceArgs


@dataclass(frozen=True)
class Err:
    reason: str


ValidationOutcome = Union[Ok, Err]


# -------------------------------------------------
# Lookup outcome
# -------------------------------------------------

@dataclass(frozen=True)
class Found:
    coin: str
    currency: str
    price: Any

    def text(self) -> str:
        return f"{self.coin.upper()} = {self.price} {self.currency.upper()}"


@dataclass(frozen=True)
class NotFound:
    coin: str
    currency: str

    def text(self) -> str:
        return f"Could not find price for {self.coin} in {self.currency}."


@dataclass(frozen=True)
class ValidationError:
    message: str

    def text(self) -> str:
        return f"Error: {self.message}"


@dataclass(frozen=True)
class TransportError:
    message: str

    def text(self) -> str:
        return f"Error: {self.message}"


PriceQuoteResult = Union[Found, NotFound, ValidationError, TransportError]
