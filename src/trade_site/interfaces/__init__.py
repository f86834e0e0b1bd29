# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from trade_site.interfaces.exchange import IExchangeClient, UnrestrictedRequestsMixin
from trade_site.interfaces.http import IHttpFetcher
from trade_site.interfaces.persistence import ICurrencyPersistence

__all__ = [
    "ICurrencyPersistence",
    "IExchangeClient",
    "IHttpFetcher",
    "UnrestrictedRequestsMixin",
]
