"""Client-side checks run on correlate inputs before any request is sent.

The service validates the same rules, so these only fail fast.
"""

from __future__ import annotations

from typing import Sequence

from .errors import InputValidationError
from .models import (
    CoinCorrelateInput,
    CorrelateInput,
    NetworkCorrelateInput,
    TickerCorrelateInput,
)

OP_COIN_CORRELATE = "coin_correlate"
OP_NETWORK_CORRELATE = "network_correlate"
OP_TICKER_CORRELATE = "ticker_correlate"

MSG_EXCHANGE_FROM = "input not valid: one of ExchangeFrom or ExchangeFromID should be provided"
MSG_EXCHANGE_TO = "input not valid: one of ExchangeTo or ExchangeToID should be provided"
MSG_EXCHANGE_COIN = "input not valid: one of ExchangeCoin, ExchangeCoinBase or ExchangeCoinID should be provided"
MSG_EXCHANGE_NETWORK = (
    "input not valid: one of ExchangeNetwork, ExchangeNetworkCode or ExchangeNetworkID should be provided"
)
MSG_EXCHANGE_TICKER = "input not valid: one of ExchangeTicker or ExchangeTickerID should be provided"

# (slot name, error message, "is this form filled?" per candidate form)
Slot = tuple[str, str, Sequence[bool]]


def require_exactly_one(operation: str, slots: Sequence[Slot]) -> None:
    """Raise InputValidationError unless every slot has exactly one filled form.

    Missing slots are reported before slots with several forms, so an input
    that leaves "to" empty reports "to" even if "from" is also ambiguous.
    """
    counts = [(slot, message, sum(1 for candidate in filled if candidate)) for slot, message, filled in slots]

    for slot, message, count in counts:
        if count == 0:
            raise InputValidationError(operation, slot, message)

    for slot, message, count in counts:
        if count > 1:
            raise InputValidationError(operation, slot, message)


def _exchange_slots(data: CorrelateInput) -> list[Slot]:
    return [
        ("from", MSG_EXCHANGE_FROM, (bool(data.exchange_from), data.exchange_from_id is not None)),
        ("to", MSG_EXCHANGE_TO, (bool(data.exchange_to), bool(data.exchange_to_id))),
    ]


def validate_coin_correlate_input(data: CoinCorrelateInput) -> None:
    require_exactly_one(OP_COIN_CORRELATE, [
        *_exchange_slots(data),
        (
            "coin",
            MSG_EXCHANGE_COIN,
            (bool(data.exchange_coin), bool(data.exchange_coin_base), data.exchange_coin_id is not None),
        ),
    ])


def validate_network_correlate_input(data: NetworkCorrelateInput) -> None:
    require_exactly_one(OP_NETWORK_CORRELATE, [
        *_exchange_slots(data),
        (
            "network",
            MSG_EXCHANGE_NETWORK,
            (bool(data.exchange_network), bool(data.exchange_network_code), data.exchange_network_id is not None),
        ),
    ])


def validate_ticker_correlate_input(data: TickerCorrelateInput) -> None:
    # Base and quote count as a single form.
    require_exactly_one(OP_TICKER_CORRELATE, [
        *_exchange_slots(data),
        ("ticker", MSG_EXCHANGE_TICKER, (not data.exchange_ticker.is_empty, data.exchange_ticker_id is not None)),
    ])
