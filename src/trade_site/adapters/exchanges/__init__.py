# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from trade_site.adapters.exchanges.poloniex import (
    PoloniexDepth,
    PoloniexExchangeClient,
    PoloniexTicker,
)

__all__ = ["PoloniexDepth", "PoloniexExchangeClient", "PoloniexTicker"]
