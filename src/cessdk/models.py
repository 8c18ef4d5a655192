"""Request and response models for the v1 correlation API.

Attribute names are snake_case; the wire names (``ExchangeFrom``,
``ExchangeFromID``...) are kept as pydantic aliases so both spellings are
accepted on construction and the aliases are used on the wire.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

NIL_UUID = UUID(int=0)


class Ticker(BaseModel):
    """A trading pair expressed as base/quote symbols."""

    base: str = Field(default="", alias="Base")
    quote: str = Field(default="", alias="Quote")

    model_config = {"populate_by_name": True}

    @property
    def is_empty(self) -> bool:
        return not self.base and not self.quote

    def __str__(self) -> str:
        return f"{self.base}/{self.quote}"


class CorrelateInput(BaseModel):
    """Source and target exchanges shared by every correlate request.

    Exactly one of ``exchange_from``/``exchange_from_id`` and exactly one of
    ``exchange_to``/``exchange_to_id`` must be given. The ID forms are
    recommended.
    """

    exchange_from: str = Field(default="", alias="ExchangeFrom")
    exchange_from_id: UUID | None = Field(default=None, alias="ExchangeFromID")

    exchange_to: list[str] = Field(default_factory=list, alias="ExchangeTo")
    exchange_to_id: list[UUID] = Field(default_factory=list, alias="ExchangeToID")

    model_config = {"populate_by_name": True, "extra": "forbid"}

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body sent to the service.

        Empty names and lists are omitted. Absent identifiers are sent as the
        nil UUID, which the service reads as "not provided".
        """
        payload: dict[str, Any] = {}
        for key, value in self.model_dump(mode="json", by_alias=True).items():
            if value is None:
                value = str(NIL_UUID)
            elif value == "" or value == []:
                continue
            payload[key] = value
        return payload


class CoinCorrelateInput(CorrelateInput):
    """Coin to correlate, given by exactly one of name, base or ID."""

    exchange_coin: str = Field(default="", alias="ExchangeCoin")
    exchange_coin_base: str = Field(default="", alias="ExchangeCoinBase")
    exchange_coin_id: UUID | None = Field(default=None, alias="ExchangeCoinID")


class NetworkCorrelateInput(CorrelateInput):
    """Network to correlate, given by exactly one of name, code or ID."""

    exchange_network: str = Field(default="", alias="ExchangeNetwork")
    exchange_network_code: str = Field(default="", alias="ExchangeNetworkCode")
    exchange_network_id: UUID | None = Field(default=None, alias="ExchangeNetworkID")


class TickerCorrelateInput(CorrelateInput):
    """Ticker to correlate, given either as a base/quote pair or by ID."""

    exchange_ticker: Ticker = Field(default_factory=Ticker, alias="ExchangeTicker")
    exchange_ticker_id: UUID | None = Field(default=None, alias="ExchangeTickerID")


class ExchangeListOutput(BaseModel):
    """Metadata of an exchange known to the service."""

    name: str = Field(default="", alias="Name")
    id: UUID | None = Field(default=None, alias="ID")
    ticker_format: str = Field(default="", alias="TickerFormat")
    url: str = Field(default="", alias="URL")

    model_config = {"populate_by_name": True}


class CorrelateOutput(BaseModel):
    """Target exchange a correlate result belongs to."""

    exchange_name: str = Field(default="", alias="ExchangeName")
    exchange_id: UUID | None = Field(default=None, alias="ExchangeID")

    model_config = {"populate_by_name": True}


class CoinCorrelateOutput(CorrelateOutput):
    """Name and base of the coin on the target exchange, not the standard."""

    exchange_coin_id: UUID | None = Field(default=None, alias="ExchangeCoinID")
    exchange_coin: str = Field(default="", alias="ExchangeCoin")
    exchange_coin_base: str = Field(default="", alias="ExchangeCoinBase")
    exchange_coin_unsafety_score: int = Field(default=0, alias="ExchangeCoinUnsafetyScore")


class NetworkCorrelateOutput(CorrelateOutput):
    """Name and code of the network on the target exchange."""

    exchange_network_id: UUID | None = Field(default=None, alias="ExchangeNetworkID")
    exchange_network: str = Field(default="", alias="ExchangeNetwork")
    exchange_network_code: str = Field(default="", alias="ExchangeNetworkCode")
    exchange_network_unsafety_score: int = Field(default=0, alias="ExchangeNetworkUnsafetyScore")


class TickerCorrelateOutput(CorrelateOutput):
    """Base and quote of the ticker on the target exchange."""

    exchange_ticker_id: UUID | None = Field(default=None, alias="ExchangeTickerID")
    exchange_ticker: Ticker = Field(default_factory=Ticker, alias="ExchangeTicker")
