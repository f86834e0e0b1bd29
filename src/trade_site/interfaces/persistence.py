# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from abc import ABC, abstractmethod


class ICurrencyPersistence(ABC):
    """Interface for storing the known currencies."""

    @abstractmethod
    def save(self) -> bool:
        """Store all known currencies. Returns False on failure."""

    @abstractmethod
    def load(self) -> bool:
        """Register all stored currencies. Returns False on failure."""
