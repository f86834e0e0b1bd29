# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from trade_site.models.schemas.market import (
    DepthOrderSchema,
    DepthSchema,
    TickerSchema,
)

__all__ = ["DepthOrderSchema", "DepthSchema", "TickerSchema"]
