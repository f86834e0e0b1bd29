# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Data Transfer objects

from trade_site.models.dto.configuration import ClientConfigDTO, PersistenceConfigDTO

__all__ = ["ClientConfigDTO", "PersistenceConfigDTO"]
