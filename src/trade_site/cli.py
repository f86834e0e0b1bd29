#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright (C) 2023 Benjamin Thomas Schwertfeger
# GitHub: https://github.com/btschwertfeger
#

from decimal import Decimal
from logging import DEBUG, INFO, WARNING, basicConfig, getLogger
from pathlib import Path
from typing import Any

from click import FLOAT, INT, STRING, ClickException, Context, argument, echo, pass_context
from click import Path as ClickPath
from cloup import Choice, HelpFormatter, HelpTheme, Style, group, option

FORMATTER_SETTINGS = HelpFormatter.settings(
    theme=HelpTheme(
        invoked_command=Style(fg="bright_yellow"),
        heading=Style(fg="bright_white", bold=True),
        constraint=Style(fg="magenta"),
        col1=Style(fg="bright_yellow"),
    ),
)


def print_version(ctx: Context, param: Any, value: Any) -> None:  # noqa: ANN401, ARG001
    """Prints the version of the package"""
    if not value or ctx.resilient_parsing:
        return
    from importlib.metadata import (  # noqa: PLC0415 # pylint: disable=import-outside-toplevel
        version,
    )

    echo(version("poloniex-trade-site"))
    ctx.exit()


def ensure_larger_than_zero(
    ctx: Context,
    param: Any,  # noqa: ANN401
    value: Any,  # noqa: ANN401
) -> Any:  # noqa: ANN401
    """Ensure the value is larger than 0"""
    if value is not None and value <= 0:
        ctx.fail(f"Value for option '{param.name}' must be larger than 0")
    return value


def unwrap(result: Any) -> Any:  # noqa: ANN401
    """Return the value of a successful result or abort the command."""
    from trade_site.models.result import (  # noqa: PLC0415
        Failure,
        NotImplementedResult,
        Ok,
    )

    match result:
        case Ok(value=value):
            return value
        case NotImplementedResult(message=message):
            raise ClickException(message)
        case Failure(kind=kind, message=message):
            raise ClickException(f"[{kind.value}] {message}")
    raise ClickException(f"Unexpected result: {result!r}")


def create_client(ctx: Context, *, discover: bool = True) -> Any:  # noqa: ANN401
    from trade_site.adapters.exchanges import PoloniexExchangeClient  # noqa: PLC0415
    from trade_site.models.dto import ClientConfigDTO  # noqa: PLC0415
    from trade_site.services import CurrencyRegistry  # noqa: PLC0415

    registry = ctx.obj.setdefault("registry", CurrencyRegistry())
    return PoloniexExchangeClient(
        registry=registry,
        config=ClientConfigDTO(
            base_url=ctx.obj["base_url"],
            timeout=ctx.obj["timeout"],
        ),
        discover=discover,
    )


def create_pair(ctx: Context, base_currency: str, quote_currency: str) -> Any:  # noqa: ANN401
    from trade_site.models.domain import CurrencyPair  # noqa: PLC0415

    registry = ctx.obj["registry"]
    return CurrencyPair(
        currency=registry.get_or_register(base_currency),
        payment_currency=registry.get_or_register(quote_currency),
    )


@group(
    context_settings={
        "auto_envvar_prefix": "POLONIEX",
        "help_option_names": ["-h", "--help"],
    },
    formatter_settings=FORMATTER_SETTINGS,
    no_args_is_help=True,
)
@option(
    "--version",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
)
@option(
    "--base-url",
    type=STRING,
    default="https://poloniex.com/public",
    show_default=True,
    help="Base URL of the public Poloniex API.",
)
@option(
    "--timeout",
    type=FLOAT,
    default=10.0,
    show_default=True,
    callback=ensure_larger_than_zero,
    help="HTTP timeout in seconds.",
)
@option(
    "-v",
    "--verbose",
    count=True,
    help="Increase the verbosity of output. Use -vv for even more verbosity.",
)
@pass_context
def cli(ctx: Context, **kwargs: dict) -> None:
    """
    Command-line interface entry point
    """
    ctx.ensure_object(dict)
    ctx.obj |= kwargs

    verbosity = kwargs.get("verbose", 0)

    basicConfig(
        format="%(asctime)s %(levelname)8s | %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
        level=INFO if verbosity == 0 else DEBUG,
    )

    if verbosity > 1:  # type: ignore[operator]
        getLogger("requests").setLevel(DEBUG)
        getLogger("urllib3").setLevel(DEBUG)
    else:
        getLogger("requests").setLevel(WARNING)
        getLogger("urllib3").setLevel(WARNING)


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@pass_context
def pairs(ctx: Context) -> None:
    """List the currency pairs traded on Poloniex."""
    client = create_client(ctx)
    if not client.supported_currency_pairs:
        raise ClickException("No supported currency pairs available.")
    for pair in sorted(client.supported_currency_pairs, key=lambda p: p.codes):
        echo(f"{pair.currency.code}/{pair.payment_currency.code}")


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@argument("base_currency", type=STRING)
@argument("quote_currency", type=STRING)
@option(
    "--limit",
    type=INT,
    default=None,
    callback=ensure_larger_than_zero,
    help="Only show the best N levels per side.",
)
@pass_context
def depth(
    ctx: Context,
    base_currency: str,
    quote_currency: str,
    limit: int | None,
) -> None:
    """Show the order book of a currency pair."""
    from trade_site.models.result import capture  # noqa: PLC0415

    client = create_client(ctx)
    order_book = unwrap(
        capture(client.get_depth, create_pair(ctx, base_currency, quote_currency)),
    )
    if limit is not None:
        order_book = order_book.model_copy(
            update={"asks": order_book.asks[:limit], "bids": order_book.bids[:limit]},
        )
    echo(order_book.model_dump_json(indent=2))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@argument("base_currency", type=STRING)
@argument("quote_currency", type=STRING)
@pass_context
def ticker(ctx: Context, base_currency: str, quote_currency: str) -> None:
    """Show the ticker of a currency pair."""
    from trade_site.models.result import capture  # noqa: PLC0415

    client = create_client(ctx)
    echo(
        unwrap(
            capture(client.get_ticker, create_pair(ctx, base_currency, quote_currency)),
        ).model_dump_json(indent=2),
    )


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@argument("base_currency", type=STRING)
@argument("quote_currency", type=STRING)
@option(
    "--type",
    "order_type",
    type=Choice(choices=("buy", "sell", "withdraw", "deposit"), case_sensitive=False),
    required=True,
    help="The order type.",
)
@option("--amount", type=STRING, required=True, help="Amount of the base currency.")
@option(
    "--price",
    type=STRING,
    default="0",
    show_default=True,
    help="Price in the quote currency.",
)
@pass_context
def fee(
    ctx: Context,
    base_currency: str,
    quote_currency: str,
    order_type: str,
    amount: str,
    price: str,
) -> None:
    """Compute the Poloniex fee of an order."""
    from pydantic import ValidationError  # noqa: PLC0415

    from trade_site.models.domain import OrderType, SiteOrder  # noqa: PLC0415
    from trade_site.models.result import capture  # noqa: PLC0415

    client = create_client(ctx, discover=False)
    try:
        order = SiteOrder(
            order_type=OrderType(order_type.lower()),
            currency_pair=create_pair(ctx, base_currency, quote_currency),
            amount=Decimal(amount),
            price=Decimal(price),
        )
    except (ArithmeticError, ValidationError) as exc:
        raise ClickException(f"Invalid order: {exc}") from exc
    echo(str(unwrap(capture(client.get_fee_for_order, order))))


@cli.group(formatter_settings=FORMATTER_SETTINGS)
@option(
    "--data-dir",
    type=ClickPath(file_okay=False, path_type=Path),
    required=True,
    help="Directory holding the currency file.",
)
@option(
    "--filename",
    type=STRING,
    default="currency.lst",
    show_default=True,
    help="Name of the currency file.",
)
@pass_context
def currencies(ctx: Context, data_dir: Path, filename: str) -> None:
    """Store and restore the known currencies."""
    from trade_site.models.dto import PersistenceConfigDTO  # noqa: PLC0415
    from trade_site.services import CurrencyRegistry  # noqa: PLC0415

    ctx.obj["persistence"] = PersistenceConfigDTO(data_dir=data_dir, filename=filename)
    ctx.obj.setdefault("registry", CurrencyRegistry())


@currencies.command(formatter_settings=FORMATTER_SETTINGS)
@pass_context
def save(ctx: Context) -> None:
    """Discover the Poloniex currencies and add them to the currency file."""
    from trade_site.services import CurrencyFileStore  # noqa: PLC0415

    store = CurrencyFileStore(ctx.obj["registry"], ctx.obj["persistence"])
    # Known entries keep their names, descriptions and types
    if store.path.exists() and not store.load():
        raise ClickException(f"Could not read {store.path}")

    if not create_client(ctx).supported_currency_pairs:
        raise ClickException(
            f"No supported currency pairs available, {store.path} is left unchanged.",
        )
    if not store.save():
        raise ClickException(f"Could not write {store.path}")
    echo(f"Saved {len(ctx.obj['registry'])} currencies to {store.path}")


@currencies.command(formatter_settings=FORMATTER_SETTINGS)
@pass_context
def load(ctx: Context) -> None:
    """Read the currency file and list its currencies."""
    from trade_site.services import CurrencyFileStore  # noqa: PLC0415

    registry = ctx.obj["registry"]
    store = CurrencyFileStore(registry, ctx.obj["persistence"])
    if not store.load():
        raise ClickException(f"Could not read {store.path}")
    for currency in registry:
        echo(f"{currency.code}\t{currency.currency_type.value}\t{currency.name}")
