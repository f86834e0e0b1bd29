# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Unit tests for the flat-file currency store."""

from pathlib import Path

import pytest

from trade_site.exceptions import PersistenceIOError
from trade_site.interfaces import ICurrencyPersistence
from trade_site.models.domain import Currency, CurrencyType
from trade_site.models.dto import PersistenceConfigDTO
from trade_site.services import CurrencyFileStore, CurrencyRegistry
from trade_site.services.currency_persistence import decode_currency, encode_currency


@pytest.fixture
def config(tmp_path: Path) -> PersistenceConfigDTO:
    return PersistenceConfigDTO(data_dir=tmp_path)


class TestEncoding:
    def test_encode(self) -> None:
        currency = Currency(
            code="BTC",
            name="Bitcoin",
            description="Peer to peer cash",
            currency_type=CurrencyType.CRYPTO,
        )
        assert encode_currency(currency) == "BTC|Bitcoin|Peer+to+peer+cash|CRYPTO"

    def test_encode_escapes_delimiter(self) -> None:
        """Test that a '|' inside a field is percent-encoded"""
        currency = Currency(code="X", name="a|b", description="")
        assert encode_currency(currency) == "X|a%7Cb||CRYPTO"

    def test_encode_unicode(self) -> None:
        currency = Currency(code="EUR", name="Euro €", currency_type=CurrencyType.FIAT)
        assert encode_currency(currency) == "EUR|Euro+%E2%82%AC||FIAT"

    @pytest.mark.parametrize(
        ("line", "message"),
        [
            ("BTC|Bitcoin|CRYPTO", "Expected 4 fields"),
            ("BTC|Bitcoin||CRYPTO|extra", "Expected 4 fields"),
            ("|Bitcoin||CRYPTO", "code is empty"),
            ("BTC|Bitcoin||STOCK", "Unknown currency type"),
        ],
    )
    def test_decode_malformed(self, line: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            decode_currency(line)


class TestCurrencyFileStore:
    def test_implements_interface(self, config: PersistenceConfigDTO) -> None:
        assert isinstance(CurrencyFileStore(CurrencyRegistry(), config), ICurrencyPersistence)

    def test_default_path(self, config: PersistenceConfigDTO, tmp_path: Path) -> None:
        store = CurrencyFileStore(CurrencyRegistry(), config)
        assert store.path == tmp_path / "currency.lst"

    def test_save(self, registry: CurrencyRegistry, config: PersistenceConfigDTO) -> None:
        store = CurrencyFileStore(registry, config)

        assert store.save() is True
        assert store.path.read_text(encoding="utf-8").splitlines() == [
            "BTC|Bitcoin||CRYPTO",
            "NXT|Nxt||CRYPTO",
            "ETH|Ethereum||CRYPTO",
            "USDT|Tether||CRYPTO",
            "EUR|Euro||FIAT",
        ]

    def test_save_overwrites(self, config: PersistenceConfigDTO) -> None:
        config.path.write_text("OLD|old||CRYPTO\n" * 10, encoding="utf-8")
        store = CurrencyFileStore(CurrencyRegistry([Currency(code="BTC")]), config)

        assert store.save() is True
        assert config.path.read_text(encoding="utf-8") == "BTC|||CRYPTO\n"

    def test_save_io_failure(
        self,
        registry: CurrencyRegistry,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that write failures are logged and reported as False"""
        config = PersistenceConfigDTO(data_dir=tmp_path / "missing")
        store = CurrencyFileStore(registry, config)

        assert store.save() is False
        assert "Cannot open file to store currencies" in caplog.text

    def test_write_raises(self, registry: CurrencyRegistry, tmp_path: Path) -> None:
        store = CurrencyFileStore(registry, PersistenceConfigDTO(data_dir=tmp_path / "missing"))

        with pytest.raises(PersistenceIOError):
            store.write()

    def test_load_missing_file(
        self,
        config: PersistenceConfigDTO,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        store = CurrencyFileStore(CurrencyRegistry(), config)

        assert store.load() is False
        assert "Cannot open file to load currencies" in caplog.text

    def test_read_raises(self, config: PersistenceConfigDTO) -> None:
        with pytest.raises(PersistenceIOError):
            CurrencyFileStore(CurrencyRegistry(), config).read()

    def test_load_skips_malformed_lines(
        self,
        config: PersistenceConfigDTO,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        config.path.write_text(
            "BTC|Bitcoin||CRYPTO\n"
            "garbage\n"
            "\n"
            "EUR|Euro||FIAT\n"
            "XYZ|||METAL\n",
            encoding="utf-8",
        )
        registry = CurrencyRegistry()

        assert CurrencyFileStore(registry, config).load() is True
        assert [currency.code for currency in registry] == ["BTC", "EUR"]
        assert "Skipping malformed line 2" in caplog.text
        assert "Skipping malformed line 5" in caplog.text

    def test_load_keeps_known_currencies(self, config: PersistenceConfigDTO) -> None:
        config.path.write_text("BTC|Renamed||CRYPTO\n", encoding="utf-8")
        registry = CurrencyRegistry([Currency(code="BTC", name="Bitcoin")])

        assert CurrencyFileStore(registry, config).load() is True
        assert registry.lookup("BTC").name == "Bitcoin"

    def test_round_trip(self, config: PersistenceConfigDTO) -> None:
        """Test that loading a saved registry restores it exactly"""
        registry = CurrencyRegistry(
            [
                Currency(code="BTC", name="Bitcoin", description="Peer | peer"),
                Currency(code="EUR", name="Euro €", currency_type=CurrencyType.FIAT),
                Currency(code="XMR", name="", description=""),
                Currency(code="NXT", name=None, description=None),
                Currency(code="JPY", name="日本円", description="100% + tax\nnew line"),
                Currency(code="A%7C", name="%7C|%", description="+ +"),
            ],
        )
        assert CurrencyFileStore(registry, config).save() is True

        restored = CurrencyRegistry()
        assert CurrencyFileStore(restored, config).load() is True

        assert restored == registry
