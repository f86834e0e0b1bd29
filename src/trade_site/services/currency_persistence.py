# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Flat-file storage of the currency registry.

Each currency is stored as one line ``code|name|description|type``. Every
field is form-encoded (spaces as ``+``, everything else outside ``[A-Za-z0-9_.-]``
as UTF-8 ``%XX``), so a literal ``|`` inside a field can never be mistaken for
the delimiter.
"""

from logging import getLogger
from pathlib import Path
from typing import Self
from urllib.parse import quote_plus, unquote_plus

from trade_site.exceptions import PersistenceIOError
from trade_site.interfaces import ICurrencyPersistence
from trade_site.models.domain import Currency, CurrencyType
from trade_site.models.dto import PersistenceConfigDTO
from trade_site.services.currency_registry import CurrencyRegistry

LOG = getLogger(__name__)

DELIMITER = "|"


def encode_currency(currency: Currency) -> str:
    return DELIMITER.join(
        quote_plus(field or "")
        for field in (
            currency.code,
            currency.name,
            currency.description,
            currency.currency_type.name,
        )
    )


def decode_currency(line: str) -> Currency:
    """
    Parse a single line of the currency file.

    Raises ValueError if the line does not hold exactly four fields, the code
    is empty or the type is unknown.
    """
    fields = line.split(DELIMITER)
    if len(fields) != 4:  # noqa: PLR2004
        raise ValueError(f"Expected 4 fields, got {len(fields)}")
    code, name, description, type_name = (unquote_plus(field) for field in fields)
    if not code:
        raise ValueError("Currency code is empty")
    try:
        currency_type = CurrencyType[type_name]
    except KeyError as exc:
        raise ValueError(f"Unknown currency type '{type_name}'") from exc
    return Currency(
        code=code,
        name=name,
        description=description,
        currency_type=currency_type,
    )


class CurrencyFileStore(ICurrencyPersistence):
    """Stores the currencies of a registry in ``<data_dir>/currency.lst``."""

    def __init__(
        self: Self,
        registry: CurrencyRegistry,
        config: PersistenceConfigDTO,
    ) -> None:
        self.__registry = registry
        self.__config = config

    @property
    def path(self: Self) -> Path:
        return self.__config.path

    def write(self: Self) -> int:
        """
        Write all registered currencies, replacing the file, and return the
        number of written entries.

        Raises PersistenceIOError if the file cannot be written. The file is
        overwritten in place, a crash while writing leaves it truncated.
        """
        currencies = self.__registry.registered_currencies()
        try:
            with self.path.open("w", encoding="utf-8", newline="\n") as file:
                for currency in currencies:
                    file.write(encode_currency(currency))
                    file.write("\n")
        except OSError as exc:
            raise PersistenceIOError(
                f"Cannot open file to store currencies: {exc}",
            ) from exc
        return len(currencies)

    def read(self: Self) -> int:
        """
        Register every currency listed in the file and return the number of
        registered entries. Malformed lines are skipped.

        Raises PersistenceIOError if the file cannot be read.
        """
        try:
            with self.path.open("r", encoding="utf-8") as file:
                lines = file.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceIOError(
                f"Cannot open file to load currencies: {exc}",
            ) from exc

        loaded = 0
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                currency = decode_currency(line)
            except ValueError as exc:
                LOG.warning("Skipping malformed line %d in %s: %s", lineno, self.path, exc)
                continue
            self.__registry.register(currency)
            loaded += 1
        return loaded

    def save(self: Self) -> bool:
        try:
            count = self.write()
        except PersistenceIOError as exc:
            LOG.error("%s", exc)
            return False
        LOG.info("Saved %d currencies to %s", count, self.path)
        return True

    def load(self: Self) -> bool:
        try:
            count = self.read()
        except PersistenceIOError as exc:
            LOG.error("%s", exc)
            return False
        LOG.info("Loaded %d currencies from %s", count, self.path)
        return True
