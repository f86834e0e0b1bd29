# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

import threading
from logging import getLogger
from typing import Iterable, Iterator, Self

from trade_site.models.domain import Currency, CurrencyType

LOG = getLogger(__name__)


class CurrencyRegistry:
    """
    Registry of known currencies, keyed by code.

    The registry is passed explicitly to clients and stores instead of being a
    process-wide singleton. Entries are only ever added, never removed, and
    registering an already known code keeps the existing entry.
    """

    def __init__(self: Self, currencies: Iterable[Currency] = ()) -> None:
        self.__currencies: dict[str, Currency] = {}
        self.__lock = threading.Lock()
        for currency in currencies:
            self.register(currency)

    def lookup(self: Self, code: str) -> Currency | None:
        """Return the currency for ``code`` (case-insensitive) or None."""
        return self.__currencies.get(code.upper())

    def register(self: Self, currency: Currency) -> Currency:
        """Add a currency and return the registered instance."""
        with self.__lock:
            if (known := self.__currencies.get(currency.code)) is not None:
                if known != currency:
                    LOG.debug(
                        "Currency '%s' is already registered, keeping the known entry.",
                        currency.code,
                    )
                return known
            self.__currencies[currency.code] = currency
            LOG.debug("Registered currency '%s'", currency.code)
            return currency

    def get_or_register(
        self: Self,
        code: str,
        currency_type: CurrencyType = CurrencyType.CRYPTO,
    ) -> Currency:
        """Return the known currency or register a bare one for ``code``."""
        if (currency := self.lookup(code)) is not None:
            return currency
        return self.register(Currency(code=code, currency_type=currency_type))

    def registered_currencies(self: Self) -> list[Currency]:
        """Return all currencies in registration order."""
        with self.__lock:
            return list(self.__currencies.values())

    def __contains__(self: Self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self.__currencies

    def __iter__(self: Self) -> Iterator[Currency]:
        return iter(self.registered_currencies())

    def __len__(self: Self) -> int:
        return len(self.__currencies)

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, CurrencyRegistry):
            return NotImplemented
        return self.registered_currencies() == other.registered_currencies()
