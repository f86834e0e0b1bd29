# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

import json
from unittest.mock import Mock

import pytest

from trade_site.interfaces import IHttpFetcher
from trade_site.models.domain import Currency, CurrencyPair, CurrencyType
from trade_site.services import CurrencyRegistry

VOLUME_RESPONSE = {
    "BTC_NXT": {"BTC": "0.51", "NXT": "8123.12"},
    "BTC_ETH": {"BTC": "12.1", "ETH": "300.5"},
    "USDT_BTC": {"USDT": "151230.2", "BTC": "22.2"},
    "totalBTC": "34.71",
    "totalUSDT": "151230.2",
}

ORDER_BOOK_RESPONSE = {
    "asks": [["0.00007600", 1164], ["0.00007620", "1.5"]],
    "bids": [["0.00006901", "200.00000000"], ["0.00006900", 408]],
    "isFrozen": "0",
    "seq": 18849,
}

TICKER_RESPONSE = {
    "BTC_NXT": {
        "id": 69,
        "last": "0.00007600",
        "lowestAsk": "0.00007624",
        "highestBid": "0.00007600",
        "percentChange": "-0.01298701",
        "baseVolume": "1.20452011",
        "quoteVolume": "15750.40700000",
        "isFrozen": "0",
        "high24hr": "0.00007905",
        "low24hr": "0.00007501",
    },
    "BTC_ETH": {
        "id": 148,
        "last": "0.07110000",
        "lowestAsk": "0.07112000",
        "highestBid": "0.07109000",
        "percentChange": "0.0021",
        "baseVolume": "12.1",
        "quoteVolume": "300.5",
        "isFrozen": "0",
        "high24hr": "0.072",
        "low24hr": "0.070",
    },
}


@pytest.fixture
def registry() -> CurrencyRegistry:
    return CurrencyRegistry(
        [
            Currency(code="BTC", name="Bitcoin", currency_type=CurrencyType.CRYPTO),
            Currency(code="NXT", name="Nxt", currency_type=CurrencyType.CRYPTO),
            Currency(code="ETH", name="Ethereum", currency_type=CurrencyType.CRYPTO),
            Currency(code="USDT", name="Tether", currency_type=CurrencyType.CRYPTO),
            Currency(code="EUR", name="Euro", currency_type=CurrencyType.FIAT),
        ],
    )


@pytest.fixture
def btc_nxt(registry: CurrencyRegistry) -> CurrencyPair:
    return CurrencyPair(
        currency=registry.lookup("BTC"),
        payment_currency=registry.lookup("NXT"),
    )


@pytest.fixture
def mock_fetcher() -> Mock:
    """Fetcher answering every request with the 24h volume response."""
    fetcher = Mock(spec=IHttpFetcher)
    fetcher.fetch.return_value = json.dumps(VOLUME_RESPONSE)
    return fetcher


@pytest.fixture
def order_book_response() -> dict:
    return ORDER_BOOK_RESPONSE


@pytest.fixture
def ticker_response() -> dict:
    return TICKER_RESPONSE
