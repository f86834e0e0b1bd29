# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Market data snapshots returned by the exchange clients.

Snapshots are built from a single response and never mutated afterwards.
Prices and amounts are kept as ``Decimal`` to avoid rounding in the fee and
depth arithmetic done by consumers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from trade_site.models.domain import CurrencyPair


class DepthOrderSchema(BaseModel):
    """A single price level of the order book."""

    model_config = ConfigDict(frozen=True)

    price: Decimal = Field(..., ge=0, description="Price in the payment currency")
    amount: Decimal = Field(..., ge=0, description="Amount of the traded currency")


class DepthSchema(BaseModel):
    """Order book snapshot for a currency pair"""

    model_config = ConfigDict(frozen=True)

    currency_pair: CurrencyPair
    asks: tuple[DepthOrderSchema, ...] = ()
    bids: tuple[DepthOrderSchema, ...] = ()
    is_frozen: bool = False
    sequence: int | None = None

    @model_validator(mode="after")
    def validate_ordering(self: Self) -> Self:
        """Asks must ascend and bids must descend in price"""
        ask_prices = [ask.price for ask in self.asks]
        bid_prices = [bid.price for bid in self.bids]
        if ask_prices != sorted(ask_prices):
            raise ValueError("Asks must be sorted by ascending price")
        if bid_prices != sorted(bid_prices, reverse=True):
            raise ValueError("Bids must be sorted by descending price")
        return self

    @property
    def best_ask(self: Self) -> DepthOrderSchema | None:
        return self.asks[0] if self.asks else None

    @property
    def best_bid(self: Self) -> DepthOrderSchema | None:
        return self.bids[0] if self.bids else None


class TickerSchema(BaseModel):
    """Price and volume summary of a currency pair"""

    model_config = ConfigDict(frozen=True)

    currency_pair: CurrencyPair
    last: Decimal
    lowest_ask: Decimal
    highest_bid: Decimal
    percent_change: Decimal = Decimal(0)
    base_volume: Decimal = Field(Decimal(0), ge=0)
    quote_volume: Decimal = Field(Decimal(0), ge=0)
    high_24h: Decimal | None = None
    low_24h: Decimal | None = None
    is_frozen: bool = False
