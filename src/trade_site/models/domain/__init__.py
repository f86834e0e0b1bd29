# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Domain models

from trade_site.models.domain.currency import (
    Currency,
    CurrencyPair,
    CurrencyType,
    Price,
)
from trade_site.models.domain.order import (
    DepositOrder,
    OrderStatus,
    OrderType,
    SiteOrder,
    TradeSiteRequestType,
    WithdrawOrder,
)

__all__ = [
    "Currency",
    "CurrencyPair",
    "CurrencyType",
    "DepositOrder",
    "OrderStatus",
    "OrderType",
    "Price",
    "SiteOrder",
    "TradeSiteRequestType",
    "WithdrawOrder",
]
