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

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CurrencyType(str, Enum):
    CRYPTO = "CRYPTO"
    FIAT = "FIAT"


class Currency(BaseModel):
    """A currency known to the registry, identified by its uppercase code."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1, description="Currency code, e.g. 'BTC'")
    name: str = ""
    description: str = ""
    currency_type: CurrencyType = CurrencyType.CRYPTO

    @field_validator("code")
    @classmethod
    def upper_code(cls, value: str) -> str:
        return value.upper()

    @field_validator("name", "description", mode="before")
    @classmethod
    def none_to_empty(cls, value: str | None) -> str:
        """Missing names and descriptions are stored as empty strings."""
        return "" if value is None else value

    def __str__(self: Self) -> str:
        return self.code


class CurrencyPair(BaseModel):
    """
    Ordered pair of the traded currency and the currency it is paid with,
    e.g. ``BTC`` paid in ``USDT``. Two pairs are equal if their codes are.
    """

    model_config = ConfigDict(frozen=True)

    currency: Currency
    payment_currency: Currency

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, CurrencyPair):
            return NotImplemented
        return self.codes == other.codes

    def __hash__(self: Self) -> int:
        return hash(self.codes)

    @property
    def codes(self: Self) -> tuple[str, str]:
        return self.currency.code, self.payment_currency.code

    def __str__(self: Self) -> str:
        return f"{self.currency.code}<=>{self.payment_currency.code}"


class Price(BaseModel):
    """An amount expressed in a currency."""

    model_config = ConfigDict(frozen=True)

    value: Decimal
    currency: Currency

    def __str__(self: Self) -> str:
        return f"{self.value} {self.currency.code}"
