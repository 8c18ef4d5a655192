"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest


def create_async_response(status=200, text="[]"):
    """Create a mock aiohttp response usable as `async with`."""
    resp = AsyncMock()
    resp.status = status
    body = text if isinstance(text, bytes) else text.encode()
    resp.read = AsyncMock(return_value=body)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


def create_mock_session(status=200, text="[]"):
    """Create a mock session whose request() yields one canned response."""
    session = MagicMock()
    session.request = MagicMock(return_value=create_async_response(status, text))
    session.close = AsyncMock()
    return session


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_api_key_123456"


@pytest.fixture
def exchange_id():
    return "12345678-1234-1234-1234-123456789012"


@pytest.fixture
def sample_exchange_list_response():
    """Sample exchange list response data."""
    return [
        {
            "Name": "MEXC",
            "ID": "12345678-1234-1234-1234-123456789012",
            "TickerFormat": "%s_%s",
            "URL": "https://mexc.com/",
        },
        {
            "Name": "Gate.io",
            "ID": "abcdef12-1234-1234-1234-123456789012",
            "TickerFormat": "%s_%s",
            "URL": "https://gate.io/",
        },
    ]


@pytest.fixture
def sample_coin_correlate_response():
    """Coin correlate response as documented for BENQI."""
    return [
        {
            "ExchangeName": "MEXC",
            "ExchangeCoin": "BENQI",
            "ExchangeCoinBase": "BENQI",
            "ExchangeCoinUnsafetyScore": 0,
        }
    ]


@pytest.fixture
def sample_network_correlate_response():
    return [
        {
            "ExchangeName": "MEXC",
            "ExchangeID": "12345678-1234-1234-1234-123456789012",
            "ExchangeNetworkID": "22222222-1234-1234-1234-123456789012",
            "ExchangeNetwork": "Ethereum",
            "ExchangeNetworkCode": "ERC20",
            "ExchangeNetworkUnsafetyScore": 2,
        },
        {
            "ExchangeName": "Gate.io",
            "ExchangeID": "abcdef12-1234-1234-1234-123456789012",
            "ExchangeNetworkID": "33333333-1234-1234-1234-123456789012",
            "ExchangeNetwork": "ETH",
            "ExchangeNetworkCode": "ETH",
            "ExchangeNetworkUnsafetyScore": 5,
        },
    ]


@pytest.fixture
def sample_ticker_correlate_response():
    return [
        {
            "ExchangeName": "MEXC",
            "ExchangeID": "12345678-1234-1234-1234-123456789012",
            "ExchangeTickerID": "11111111-1234-1234-1234-123456789012",
            "ExchangeTicker": {"Base": "BTC", "Quote": "USDT"},
        }
    ]
