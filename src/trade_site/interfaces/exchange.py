# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Interfaces for the trade site clients

Every exchange binding implements :class:`IExchangeClient`. Behaviour shared
by several exchanges is offered as opt-in mixins instead of a common base
implementation.
"""

from abc import ABC, abstractmethod
from typing import Self

from trade_site.models.domain import (
    CurrencyPair,
    OrderStatus,
    Price,
    SiteOrder,
    TradeSiteRequestType,
)
from trade_site.models.schemas import DepthSchema, TickerSchema


class IExchangeClient(ABC):
    """Interface for exchange operations."""

    @property
    @abstractmethod
    def name(self: Self) -> str:
        """Human readable name of the exchange, e.g. 'Poloniex'."""

    @property
    @abstractmethod
    def supported_currency_pairs(self: Self) -> tuple[CurrencyPair, ...]:
        """The currency pairs returned by the last successful discovery."""

    def is_supported_currency_pair(self: Self, currency_pair: CurrencyPair) -> bool:
        """Check if the pair was listed by the last successful discovery."""
        return currency_pair in self.supported_currency_pairs

    @property
    def property_section_name(self: Self) -> str:
        """Name of the section holding this exchange's settings."""
        return self.name

    # == Market data ===========================================================
    @abstractmethod
    def get_depth(self: Self, currency_pair: CurrencyPair) -> DepthSchema:
        """
        Get the order book of a currency pair.

        Raises CurrencyNotSupportedError for unsupported pairs and
        TradeDataNotAvailableError if the exchange returned no usable data.
        """

    @abstractmethod
    def get_ticker(self: Self, currency_pair: CurrencyPair) -> TickerSchema:
        """Get the ticker of a currency pair. Raises like get_depth."""

    @abstractmethod
    def get_trades(
        self: Self,
        since_micros: int,
        currency_pair: CurrencyPair,
    ) -> list[dict]:
        """Get the trades of a currency pair since a UTC epoch in microseconds."""

    @abstractmethod
    def get_update_interval(self: Self) -> int:
        """Interval in microseconds in which the exchange refreshes its data."""

    @abstractmethod
    def is_request_allowed(self: Self, request_type: TradeSiteRequestType) -> bool:
        """Check if a request of the given type may be issued right now."""

    # == Trading ===============================================================
    @abstractmethod
    def get_fee_for_order(self: Self, order: SiteOrder) -> Price:
        """
        Get the fee of an order in the resulting currency: the traded currency
        for buys, the payment currency for sells.
        """

    @abstractmethod
    def execute_order(self: Self, order: SiteOrder) -> OrderStatus:
        """Place an order and return its new status."""

    @abstractmethod
    def cancel_order(self: Self, order: SiteOrder) -> bool:
        """Cancel an order."""

    @abstractmethod
    def get_open_orders(self: Self, user_account: str | None = None) -> list[SiteOrder]:
        """Get the open orders of a user account (None for the default account)."""

    @abstractmethod
    def get_accounts(self: Self, user_account: str | None = None) -> dict[str, Price]:
        """Get the balances of a user account (None for the default account)."""


class UnrestrictedRequestsMixin:
    """Default request policy for exchanges without known rate limits."""

    def is_request_allowed(self: Self, request_type: TradeSiteRequestType) -> bool:  # noqa: ARG002
        return True
