# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Client for the public Poloniex API.

See https://docs.legacy.poloniex.com/ for the ``command=...`` endpoints used
here. Only market data is supported, trading calls raise
NotYetImplementedError.
"""

from __future__ import annotations

import json
import threading
from decimal import Decimal
from logging import getLogger
from typing import Any, Self

from trade_site.adapters.http import RequestsHttpFetcher
from trade_site.exceptions import (
    CurrencyNotSupportedError,
    NotYetImplementedError,
    TradeDataNotAvailableError,
    UnsupportedOrderTypeError,
)
from trade_site.interfaces import (
    IExchangeClient,
    IHttpFetcher,
    UnrestrictedRequestsMixin,
)
from trade_site.models.domain import (
    CurrencyPair,
    DepositOrder,
    OrderStatus,
    OrderType,
    Price,
    SiteOrder,
    WithdrawOrder,
)
from trade_site.models.dto import ClientConfigDTO
from trade_site.models.schemas import DepthOrderSchema, DepthSchema, TickerSchema
from trade_site.services.currency_registry import CurrencyRegistry

LOG = getLogger(__name__)

#: Poloniex charges 0.2% for buys and sells.
FEE_RATE = Decimal("0.002")

#: 15s, the actual refresh rate of Poloniex is unknown.
UPDATE_INTERVAL_MICROS = 15 * 1_000_000

PAIR_SEPARATOR = "_"


def currency_pair_name(currency_pair: CurrencyPair) -> str:
    """Returns the Poloniex name of a currency pair, e.g. 'BTC_NXT'."""
    return (
        f"{currency_pair.currency.code.upper()}"
        f"{PAIR_SEPARATOR}"
        f"{currency_pair.payment_currency.code.upper()}"
    )


def parse_currency_pair_name(name: str) -> tuple[str, str]:
    """
    Split a Poloniex pair name into the traded and the payment currency code.

    Raises ValueError if the name does not consist of exactly two non-empty
    codes joined by an underscore. Poloniex pair names never contain a second
    underscore, so such keys are rejected instead of truncated.
    """
    codes = name.split(PAIR_SEPARATOR)
    if len(codes) != 2 or not all(codes):  # noqa: PLR2004
        raise ValueError(f"Invalid Poloniex currency pair name '{name}'")
    return codes[0].upper(), codes[1].upper()


class PoloniexDepth(DepthSchema):
    """Order book built from a ``returnOrderBook`` response."""

    @classmethod
    def from_response(
        cls: type[Self],
        data: dict[str, Any],
        currency_pair: CurrencyPair,
    ) -> Self:
        """
        {
            "asks": [["0.00007600", 1164], ...],
            "bids": [["0.00006901", "200.00000000"], ...],
            "isFrozen": "0",
            "seq": 18849
        }
        """

        def levels(entries: list[list[Any]]) -> list[DepthOrderSchema]:
            return [
                DepthOrderSchema(price=price, amount=amount)
                for price, amount in entries
            ]

        return cls(
            currency_pair=currency_pair,
            asks=sorted(levels(data["asks"]), key=lambda level: level.price),
            bids=sorted(
                levels(data["bids"]),
                key=lambda level: level.price,
                reverse=True,
            ),
            is_frozen=str(data.get("isFrozen", "0")) == "1",
            sequence=data.get("seq"),
        )


class PoloniexTicker(TickerSchema):
    """Ticker picked out of a ``returnTicker`` response."""

    @classmethod
    def from_response(
        cls: type[Self],
        data: dict[str, Any],
        currency_pair: CurrencyPair,
    ) -> Self:
        """
        Poloniex returns the tickers of all pairs at once, keyed by pair name:

        {
            "BTC_NXT": {
                "last": "0.00007600", "lowestAsk": "0.00007624",
                "highestBid": "0.00007600", "percentChange": "-0.01298701",
                "baseVolume": "1.20452011", "quoteVolume": "15750.40700000",
                "isFrozen": "0", "high24hr": "0.00007905",
                "low24hr": "0.00007501"
            },
            ...
        }

        Raises KeyError if the requested pair is not part of the response.
        """
        ticker = data[currency_pair_name(currency_pair)]
        return cls(
            currency_pair=currency_pair,
            last=ticker["last"],
            lowest_ask=ticker["lowestAsk"],
            highest_bid=ticker["highestBid"],
            percent_change=ticker.get("percentChange", "0"),
            base_volume=ticker.get("baseVolume", "0"),
            quote_volume=ticker.get("quoteVolume", "0"),
            high_24h=ticker.get("high24hr"),
            low_24h=ticker.get("low24hr"),
            is_frozen=str(ticker.get("isFrozen", "0")) == "1",
        )


class PoloniexExchangeClient(UnrestrictedRequestsMixin, IExchangeClient):
    """
    Client for the Poloniex exchange.

    The supported currency pairs are fetched on construction unless
    ``discover`` is False, e.g. for offline fee computation.
    """

    def __init__(
        self: Self,
        registry: CurrencyRegistry,
        fetcher: IHttpFetcher | None = None,
        config: ClientConfigDTO | None = None,
        *,
        discover: bool = True,
    ) -> None:
        self.__config = config or ClientConfigDTO()
        self.__registry = registry
        self.__fetcher = fetcher or RequestsHttpFetcher(
            timeout=self.__config.timeout,
            user_agent=self.__config.user_agent,
        )
        self.__supported_currency_pairs: tuple[CurrencyPair, ...] = ()
        # Serializes order execution and fee computation
        self.__order_lock = threading.Lock()

        if discover and not self.refresh_supported_currency_pairs():
            LOG.error("Cannot fetch the supported currency pairs for %s", self.name)

    @property
    def name(self: Self) -> str:
        return "Poloniex"

    @property
    def url(self: Self) -> str:
        return self.__config.base_url

    @property
    def supported_currency_pairs(self: Self) -> tuple[CurrencyPair, ...]:
        return self.__supported_currency_pairs

    # == Market data ===========================================================

    def get_depth(self: Self, currency_pair: CurrencyPair) -> DepthSchema:
        self.__ensure_supported(currency_pair)
        data = self.__request(
            f"{self.url}?command=returnOrderBook"
            f"&currencyPair={currency_pair_name(currency_pair)}",
            what="depth",
        )
        try:
            return PoloniexDepth.from_response(data, currency_pair)
        except (KeyError, TypeError, ValueError) as exc:
            LOG.debug("Invalid depth response: %s", data, exc_info=exc)
            raise TradeDataNotAvailableError(
                f"Cannot parse depth data from {self.name}: {exc}",
            ) from exc

    def get_ticker(self: Self, currency_pair: CurrencyPair) -> TickerSchema:
        self.__ensure_supported(currency_pair)
        # All tickers are returned at once, the pair is filtered afterwards.
        data = self.__request(f"{self.url}?command=returnTicker", what="ticker")
        try:
            return PoloniexTicker.from_response(data, currency_pair)
        except KeyError as exc:
            raise TradeDataNotAvailableError(
                f"{self.name} returned no ticker for {currency_pair}",
            ) from exc
        except (TypeError, ValueError) as exc:
            raise TradeDataNotAvailableError(
                f"Cannot parse ticker data from {self.name}: {exc}",
            ) from exc

    def get_trades(
        self: Self,
        since_micros: int,  # noqa: ARG002
        currency_pair: CurrencyPair,  # noqa: ARG002
    ) -> list[dict]:
        raise NotYetImplementedError(
            f"Getting the trades is not yet implemented for {self.name}",
        )

    def get_update_interval(self: Self) -> int:
        return UPDATE_INTERVAL_MICROS

    def refresh_supported_currency_pairs(self: Self) -> bool:
        """
        Request the traded pairs via the 24h volume endpoint, since Poloniex
        has no dedicated endpoint for it. The keys of the response are the pair
        names; keys without an underscore ('totalBTC', ...) are aggregates.

        The supported pairs are only replaced if the response could be parsed.
        """
        if (response := self.__fetcher.fetch(f"{self.url}?command=return24hVolume")) is None:
            LOG.error(
                "Error while fetching the %s supported currency pairs. "
                "Server returned no reply.",
                self.name,
            )
            return False

        try:
            data = json.loads(response)
        except json.JSONDecodeError as exc:
            LOG.error(
                "Cannot parse %s 24h volumes to get the supported currency pairs: %s",
                self.name,
                exc,
            )
            return False

        if not isinstance(data, dict) or "error" in data:
            LOG.error(
                "Unexpected %s 24h volume response: %.200s",
                self.name,
                response,
            )
            return False

        pairs: list[CurrencyPair] = []
        for key in data:
            if PAIR_SEPARATOR not in key:
                continue
            try:
                code, payment_code = parse_currency_pair_name(key)
            except ValueError as exc:
                LOG.warning("Skipping currency pair: %s", exc)
                continue
            pairs.append(
                CurrencyPair(
                    currency=self.__registry.get_or_register(code),
                    payment_currency=self.__registry.get_or_register(payment_code),
                ),
            )

        self.__supported_currency_pairs = tuple(pairs)
        LOG.info("%s supports %d currency pairs", self.name, len(pairs))
        return True

    # == Trading ===============================================================

    def get_fee_for_order(self: Self, order: SiteOrder) -> Price:
        """
        Withdrawals and deposits are free. Buys cost 0.2% of the bought
        amount, sells 0.2% of the paid amount.
        """
        with self.__order_lock:
            pair = order.currency_pair
            if isinstance(order, (WithdrawOrder, DepositOrder)) or order.order_type in {
                OrderType.WITHDRAW,
                OrderType.DEPOSIT,
            }:
                return Price(value=Decimal(0), currency=pair.currency)
            if order.order_type == OrderType.BUY:
                return Price(value=order.amount * FEE_RATE, currency=pair.currency)
            if order.order_type == OrderType.SELL:
                return Price(
                    value=order.amount * order.price * FEE_RATE,
                    currency=pair.payment_currency,
                )
            raise UnsupportedOrderTypeError(
                f"No {self.name} fee rule for order type '{order.order_type}'",
            )

    def execute_order(self: Self, order: SiteOrder) -> OrderStatus:  # noqa: ARG002
        with self.__order_lock:
            raise NotYetImplementedError(
                f"Executing an order is not yet implemented for {self.name}",
            )

    def cancel_order(self: Self, order: SiteOrder) -> bool:  # noqa: ARG002
        raise NotYetImplementedError(
            f"Cancelling an order is not yet implemented for {self.name}",
        )

    def get_open_orders(self: Self, user_account: str | None = None) -> list[SiteOrder]:  # noqa: ARG002
        raise NotYetImplementedError(
            f"Getting the open orders is not yet implemented for {self.name}",
        )

    def get_accounts(self: Self, user_account: str | None = None) -> dict[str, Price]:  # noqa: ARG002
        raise NotYetImplementedError(
            f"Getting the accounts is not yet implemented for {self.name}",
        )

    # == Custom Poloniex Methods for convenience ===============================

    def __ensure_supported(self: Self, currency_pair: CurrencyPair) -> None:
        if not self.is_supported_currency_pair(currency_pair):
            raise CurrencyNotSupportedError(
                f"Currency pair: {currency_pair} is currently not supported on {self.name}",
            )

    def __request(self: Self, url: str, what: str) -> dict[str, Any]:
        """Fetch and decode a JSON object, raising TradeDataNotAvailableError."""
        if (response := self.__fetcher.fetch(url)) is None:
            raise TradeDataNotAvailableError(
                f"{self.name} server did not respond to {what} request",
            )
        try:
            data = json.loads(response)
        except json.JSONDecodeError as exc:
            LOG.error("Cannot parse %s %s return: %s", self.name, what, exc)
            raise TradeDataNotAvailableError(
                f"Cannot parse {what} data from {self.name}",
            ) from exc

        if not isinstance(data, dict):
            raise TradeDataNotAvailableError(
                f"Unexpected {what} data from {self.name}: {type(data).__name__}",
            )
        if "error" in data:
            raise TradeDataNotAvailableError(
                f"{self.name} returned an error for {what} request: {data['error']}",
            )
        return data
