"""
Tests for barrier normalization and barrier display text.
"""

import pytest

from core.errors import UnknownUnderlyingError, UnrecognizedBarrierError
from longcode.barriers import BarrierNormalizer, barrier_display, barrier_text
from longcode.tokens import Group, NumericValue, Text


class TestBarrierNormalizer:
    """Tests for BarrierNormalizer.normalize."""

    @pytest.fixture
    def normalizer(self, instruments):
        return BarrierNormalizer(instruments)

    def test_forex_absolute_barrier_scaled(self, normalizer):
        assert normalizer.normalize("1234560", "FRXEURUSD", "CALL") == 1.23456

    def test_commodities_absolute_barrier_scaled(self, normalizer):
        assert normalizer.normalize("1950250000", "FRXXAUUSD", "ONETOUCH") == 1950.25

    def test_synthetic_index_absolute_barrier_scaled(self, normalizer):
        assert normalizer.normalize("1500000000", "R_100", "CALL") == 1500.0

    def test_index_barrier_unchanged(self, normalizer):
        assert normalizer.normalize("30000", "OTC_DJI", "CALL") == "30000"

    def test_crypto_barrier_unchanged(self, normalizer):
        assert normalizer.normalize("42000", "cryBTCUSD", "CALL") == "42000"

    def test_digit_contract_unchanged(self, normalizer):
        assert normalizer.normalize("7", "R_100", "DIGITMATCH") == "7"

    def test_relative_barrier_unchanged(self, normalizer):
        assert normalizer.normalize("S-25P", "FRXEURUSD", "CALL") == "S-25P"

    def test_zero_unchanged(self, normalizer):
        assert normalizer.normalize("0", "FRXEURUSD", "CALL") == "0"

    def test_at_entry_spot_any_instrument(self, normalizer, instruments):
        for symbol in ("FRXEURUSD", "R_100", "OTC_DJI", "FRXXAUUSD"):
            assert normalizer.normalize("S0P", symbol, "CALL") == "S0P"

    def test_unknown_underlying_raises(self, normalizer):
        with pytest.raises(UnknownUnderlyingError):
            normalizer.normalize("1234560", "NOSUCH", "CALL")


class TestBarrierDisplay:
    """Tests for barrier_display."""

    def test_absolute_uses_pip_size(self, instruments, catalog):
        token = barrier_display(101.5, instruments.by_symbol("FRXUSDJPY"), catalog)
        assert token == NumericValue("101.500")

    def test_absolute_string_uses_pip_size(self, instruments, catalog):
        token = barrier_display("30000", instruments.by_symbol("OTC_DJI"), catalog)
        assert token == NumericValue("30000.00")

    def test_small_float_without_exponent(self, instruments, catalog):
        token = barrier_display(0.00001, instruments.by_symbol("FRXEURUSD"), catalog)
        assert token == NumericValue("0.00001")

    def test_zero_offset_is_entry_spot(self, instruments, catalog):
        for symbol in ("FRXUSDJPY", "R_100"):
            token = barrier_display("S0P", instruments.by_symbol(symbol), catalog)
            assert token == Group((Text("entry spot"),))

    def test_forex_plus_pips(self, instruments, catalog):
        token = barrier_display("S10P", instruments.by_symbol("FRXUSDJPY"), catalog)
        assert token == Group((
            Text("entry spot plus [plural,_1,%d pip,%d pips]"),
            NumericValue(10),
        ))

    def test_forex_minus_pips(self, instruments, catalog):
        token = barrier_display("S-10P", instruments.by_symbol("FRXUSDJPY"), catalog)
        assert token == Group((
            Text("entry spot minus [plural,_1,%d pip,%d pips]"),
            NumericValue(10),
        ))

    def test_non_forex_offset_in_price_units(self, instruments, catalog):
        token = barrier_display("S25P", instruments.by_symbol("R_100"), catalog)
        assert token == Group((Text("entry spot plus [_1]"), NumericValue("0.25")))

    def test_signed_decimal_forex(self, instruments, catalog):
        token = barrier_display("+0.005", instruments.by_symbol("FRXUSDJPY"), catalog)
        assert token == Group((
            Text("entry spot plus [plural,_1,%d pip,%d pips]"),
            NumericValue(5),
        ))

    def test_signed_decimal_non_forex(self, instruments, catalog):
        token = barrier_display("-0.5", instruments.by_symbol("R_100"), catalog)
        assert token == Group((Text("entry spot minus [_1]"), NumericValue("0.50")))

    def test_negative_float_treated_as_signed_decimal(self, instruments, catalog):
        token = barrier_display(-0.5, instruments.by_symbol("R_100"), catalog)
        assert token == Group((Text("entry spot minus [_1]"), NumericValue("0.50")))

    def test_signed_zero_decimal_is_entry_spot(self, instruments, catalog):
        token = barrier_display("+0.0", instruments.by_symbol("FRXEURUSD"), catalog)
        assert token == Group((Text("entry spot"),))

    @pytest.mark.parametrize("raw", ["XYZ", "S1.5P", "1e5", "--1", ""])
    def test_unrecognized_format_raises(self, instruments, catalog, raw):
        with pytest.raises(UnrecognizedBarrierError, match="Unrecognized supplied barrier"):
            barrier_display(raw, instruments.by_symbol("R_100"), catalog)


def test_barrier_text():
    assert barrier_text("S0P") == "S0P"
    assert barrier_text(1.23456) == "1.23456"
    assert barrier_text(1e-05) == "0.00001"
