# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Exceptions raised by the trade site clients and the currency store."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed trade site operation."""

    NOT_SUPPORTED_CURRENCY_PAIR = "not_supported_currency_pair"
    DATA_UNAVAILABLE = "data_unavailable"
    NOT_IMPLEMENTED = "not_implemented"
    PERSISTENCE_IO_FAILURE = "persistence_io_failure"
    UNSUPPORTED_ORDER_TYPE = "unsupported_order_type"
    UNKNOWN = "unknown"


class TradeSiteError(Exception):
    """Base class for all trade site errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class CurrencyNotSupportedError(TradeSiteError):
    """The currency pair is not in the supported set of the exchange."""

    kind = ErrorKind.NOT_SUPPORTED_CURRENCY_PAIR


class TradeDataNotAvailableError(TradeSiteError):
    """The exchange did not respond or returned data that could not be parsed."""

    kind = ErrorKind.DATA_UNAVAILABLE


class NotYetImplementedError(TradeSiteError, NotImplementedError):
    """The operation is not available for this exchange."""

    kind = ErrorKind.NOT_IMPLEMENTED


class PersistenceIOError(TradeSiteError):
    """Reading or writing the currency file failed."""

    kind = ErrorKind.PERSISTENCE_IO_FAILURE


class UnsupportedOrderTypeError(TradeSiteError):
    """No fee rule exists for the order type."""

    kind = ErrorKind.UNSUPPORTED_ORDER_TYPE
