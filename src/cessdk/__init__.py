"""cessdk: client for the Crypto Exchange Standard correlation API."""

from .client import DEFAULT_BASE_URL, CESClient, ProxyConfig
from .errors import APIStatusError, CESError, InputValidationError, ResponseDecodeError
from .models import (
    CoinCorrelateInput,
    CoinCorrelateOutput,
    ExchangeListOutput,
    NetworkCorrelateInput,
    NetworkCorrelateOutput,
    Ticker,
    TickerCorrelateInput,
    TickerCorrelateOutput,
)
from .settings import Settings

__all__ = [
    "DEFAULT_BASE_URL",
    "CESClient",
    "ProxyConfig",
    "CESError",
    "InputValidationError",
    "APIStatusError",
    "ResponseDecodeError",
    "CoinCorrelateInput",
    "CoinCorrelateOutput",
    "ExchangeListOutput",
    "NetworkCorrelateInput",
    "NetworkCorrelateOutput",
    "Ticker",
    "TickerCorrelateInput",
    "TickerCorrelateOutput",
    "Settings",
]
