# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from trade_site.models.domain.currency import Currency, CurrencyPair


class OrderType(str, Enum):
    BUY = "buy"
    SELL = "sell"
    WITHDRAW = "withdraw"
    DEPOSIT = "deposit"


class OrderStatus(str, Enum):
    UNKNOWN = "unknown"
    UNFILLED = "unfilled"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    CANCELED = "canceled"
    ERROR = "error"


class TradeSiteRequestType(str, Enum):
    """Kind of request a caller wants to issue against an exchange."""

    DEPTH = "depth"
    TICKER = "ticker"
    TRADES = "trades"
    ORDER = "order"
    ACCOUNTS = "accounts"
    CURRENCY_PAIRS = "currency_pairs"


class SiteOrder(BaseModel):
    """Order descriptor used for fee computation and order placement."""

    model_config = ConfigDict(frozen=True)

    order_type: OrderType
    currency_pair: CurrencyPair
    amount: Decimal = Field(..., ge=0, description="Amount of the traded currency")
    price: Decimal = Field(Decimal(0), ge=0, description="Price in the payment currency")


class WithdrawOrder(SiteOrder):
    """Withdrawal of the traded currency of a pair to an external account."""

    order_type: OrderType = OrderType.WITHDRAW
    account: str | None = Field(None, description="Target account or address")

    @model_validator(mode="after")
    def check_order_type(self: Self) -> Self:
        if self.order_type != OrderType.WITHDRAW:
            raise ValueError("WithdrawOrder must have order type 'withdraw'")
        return self

    @property
    def currency(self: Self) -> Currency:
        return self.currency_pair.currency


class DepositOrder(SiteOrder):
    order_type: OrderType = OrderType.DEPOSIT

    @model_validator(mode="after")
    def check_order_type(self: Self) -> Self:
        if self.order_type != OrderType.DEPOSIT:
            raise ValueError("DepositOrder must have order type 'deposit'")
        return self
