# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from trade_site.services.currency_persistence import CurrencyFileStore
from trade_site.services.currency_registry import CurrencyRegistry

__all__ = ["CurrencyFileStore", "CurrencyRegistry"]
