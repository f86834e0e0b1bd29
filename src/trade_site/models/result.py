# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Tagged results for trade site calls.

:func:`capture` runs a client method and folds the trade site exceptions into
one of three variants, so callers can dispatch with ``match`` instead of
``try``/``except``::

    match capture(client.get_ticker, pair):
        case Ok(value=ticker):
            ...
        case NotImplementedResult():
            ...
        case Failure(kind=ErrorKind.DATA_UNAVAILABLE):
            ...
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from trade_site.exceptions import ErrorKind, NotYetImplementedError, TradeSiteError

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T


class NotImplementedResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = ""


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str = ""


Result = Union[Ok[T], NotImplementedResult, Failure]


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:  # noqa: ANN401
    """Call ``func`` and wrap its outcome. Unrelated exceptions propagate."""
    try:
        return Ok[Any](value=func(*args, **kwargs))
    except NotYetImplementedError as exc:
        return NotImplementedResult(message=str(exc))
    except TradeSiteError as exc:
        return Failure(kind=exc.kind, message=str(exc))
