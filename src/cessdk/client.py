"""Async client for the Crypto Exchange Standard v1 API."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import APIStatusError, ResponseDecodeError
from .models import (
    CoinCorrelateInput,
    CoinCorrelateOutput,
    ExchangeListOutput,
    NetworkCorrelateInput,
    NetworkCorrelateOutput,
    TickerCorrelateInput,
    TickerCorrelateOutput,
)
from .validation import (
    validate_coin_correlate_input,
    validate_network_correlate_input,
    validate_ticker_correlate_input,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cryptoexchangestandard.com"
API_KEY_HEADER = "CES_API_KEY"
USER_AGENT = "cessdk/1.0"

API_V1_EXCHANGE_LIST = "/api/v1/exchange/list"
API_V1_COIN_CORRELATE = "/api/v1/coin/correlate"
API_V1_NETWORK_CORRELATE = "/api/v1/network/correlate"
API_V1_TICKER_CORRELATE = "/api/v1/ticker/correlate"

T = TypeVar("T", bound=BaseModel)


class ProxyConfig:
    """HTTP proxy configuration."""

    def __init__(self, url: str | None = None, username: str | None = None, password: str | None = None):
        self.url = url
        self.username = username
        self.password = password

    @property
    def proxy_url(self) -> str | None:
        if not self.url:
            return None
        if self.username and self.password:
            protocol = self.url.split("://")[0] if "://" in self.url else "http"
            rest = self.url.split("://")[1] if "://" in self.url else self.url
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        return self.url


def decode_list(raw: str, model: type[T]) -> list[T]:
    """Decode a JSON array response body into a list of ``model`` records.

    A ``null`` body decodes to an empty list.

    Raises:
        ResponseDecodeError: If the body is not JSON or does not match ``model``
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ResponseDecodeError(f"invalid JSON in response: {exc}", raw) from exc

    if data is None:
        return []

    try:
        return TypeAdapter(list[model]).validate_python(data)
    except ValidationError as exc:
        raise ResponseDecodeError(f"unexpected response shape for {model.__name__}: {exc}", raw) from exc


class CESClient:
    """Client for the exchange correlation service.

    The configuration is read-only after construction, so a single client can
    serve concurrent calls from one event loop. Cancelling the awaiting task
    aborts the in-flight request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: aiohttp.ClientSession | None = None,
        proxy: ProxyConfig | None = None,
        user_agent: str = USER_AGENT,
    ):
        """Initialize the client.

        Args:
            api_key: Key sent in the CES_API_KEY header
            base_url: Service root, defaults to the public endpoint
            session: Existing aiohttp session; it is never closed by the client
            proxy: Proxy configuration
            user_agent: User-Agent header value
        """
        self.api_key = api_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.proxy = proxy or ProxyConfig()
        self.user_agent = user_agent
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> CESClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            connector = aiohttp.TCPConnector()
            # No timeout of our own; deadlines come from the caller.
            timeout = aiohttp.ClientTimeout(total=None)
            self.session = aiohttp.ClientSession(connector=connector, timeout=timeout)
        return self.session

    def _get_headers(self, with_body: bool) -> dict[str, str]:
        headers = {
            API_KEY_HEADER: self.api_key,
            "User-Agent": self.user_agent,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def send(self, method: str, path: str, body: Any = None) -> tuple[int, str]:
        """Perform one authenticated round trip.

        Args:
            method: HTTP verb
            path: Path appended to the base URL
            body: JSON-serializable request body (optional)

        Returns:
            Status code and raw response body
        """
        session = await self._ensure_session()
        url = f"{self.base_url}{path}"
        data = json.dumps(body) if body is not None else None

        async with session.request(
            method,
            url,
            data=data,
            headers=self._get_headers(body is not None),
            proxy=self.proxy.proxy_url,
        ) as resp:
            status = resp.status
            raw = (await resp.read()).decode("utf-8", errors="replace")

        logger.debug("%s %s -> %s", method, path, status)
        return status, raw

    async def _call(self, method: str, path: str, model: type[T], body: Any = None) -> list[T]:
        status, raw = await self.send(method, path, body)
        if status != 200:
            raise APIStatusError(status, raw)
        return decode_list(raw, model)

    async def get_exchange_list(self) -> list[ExchangeListOutput]:
        """Fetch the exchanges known to the service with their metadata.

        Example record::

            ExchangeListOutput(name="MEXC", id=UUID("12345678-..."),
                               ticker_format="%s_%s", url="https://mexc.com/")
        """
        return await self._call("GET", API_V1_EXCHANGE_LIST, ExchangeListOutput)

    async def post_coin_correlate(self, data: CoinCorrelateInput) -> list[CoinCorrelateOutput]:
        """Find the name and base of a coin on other exchanges.

        For example, BENQI on Binance looked up on MEXC and Gate::

            CoinCorrelateInput(
                exchange_from="Binance",
                exchange_to=["MEXC", "Gate"],
                exchange_coin="BENQI",
            )

        returns one CoinCorrelateOutput per target exchange.
        """
        validate_coin_correlate_input(data)
        return await self._call("POST", API_V1_COIN_CORRELATE, CoinCorrelateOutput, data.to_payload())

    async def post_network_correlate(self, data: NetworkCorrelateInput) -> list[NetworkCorrelateOutput]:
        """Find the name and code of a network on other exchanges."""
        validate_network_correlate_input(data)
        return await self._call("POST", API_V1_NETWORK_CORRELATE, NetworkCorrelateOutput, data.to_payload())

    async def post_ticker_correlate(self, data: TickerCorrelateInput) -> list[TickerCorrelateOutput]:
        """Find the base and quote of a ticker on other exchanges.

        BTC/USDT from Binance on MEXC and Gate::

            TickerCorrelateInput(
                exchange_from="Binance",
                exchange_to=["MEXC", "Gate"],
                exchange_ticker=Ticker(base="BTC", quote="USDT"),
            )
        """
        validate_ticker_correlate_input(data)
        return await self._call("POST", API_V1_TICKER_CORRELATE, TickerCorrelateOutput, data.to_payload())

    async def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None
