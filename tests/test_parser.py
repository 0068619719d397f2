"""
Unit tests for the shortcode parser.

Covers every grammar shape, the Invalid/legacy escape hatches and the
documented end-to-end parse scenarios.
"""

import pytest

from config.constants import AMOUNT_TYPES, DURATION_TYPES
from core.domain.entities import Duration


class TestScenarios:
    """End-to-end parse scenarios."""

    def test_call_with_relative_barrier(self, parser):
        params = parser.parse("CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0", "USD")

        assert params.bet_type == "CALL"
        assert params.underlying_symbol == "FRXUSDJPY"
        assert params.amount == 100
        assert params.amount_type == AMOUNT_TYPES.PAYOUT
        assert params.date_start == 1393816299
        assert params.date_expiry == 1393828299
        assert params.barrier == "S0P"
        assert params.high_barrier is None
        assert params.low_barrier is None
        assert params.duration is None
        assert params.currency == "USD"
        assert params.shortcode == "CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0"

    def test_unknown_contract_type_is_invalid(self, parser):
        params = parser.parse("FOO_BAR_1_2_3")

        assert params.is_invalid
        assert params.bet_type == "Invalid"
        assert params.underlying_symbol == "config"

    def test_multiplier_contract(self, parser):
        params = parser.parse("MULTUP_FRXEURUSD_10_100_1000_2000_60_5.5")

        assert params.bet_type == "MULTUP"
        assert params.underlying_symbol == "FRXEURUSD"
        assert params.amount_type == AMOUNT_TYPES.STAKE
        assert params.amount == 10
        assert params.multiplier == 100
        assert params.date_start == 1000
        assert params.date_expiry == 2000
        assert params.cancellation == 60
        assert params.cancellation_tp == 5.5


class TestInvalidShortcodes:
    """Unrecognized and legacy input yields the Invalid sentinel."""

    @pytest.mark.parametrize(
        "shortcode",
        [
            "FOO_BAR_1_2_3",
            "",
            "call_FRXUSDJPY_100_1393816299_1393828299_S0P_0",
            "CALL",
            "CALL_FRXUSDJPY_100",
            "CALL_FRXUSDJPY_abc_1393816299_1393828299_S0P_0",
        ],
    )
    def test_unrecognized(self, parser, shortcode):
        params = parser.parse(shortcode, "EUR")

        assert params.is_invalid
        assert params.underlying_symbol == "config"
        assert params.currency == "EUR"

    def test_legacy_marker_checked_before_shapes(self, parser):
        params = parser.parse("CALL_FRXEURUSD_100_1393816299_10H30_S0P_0")
        assert params.is_invalid

    def test_legacy_marker_anywhere(self, parser):
        params = parser.parse("ONETOUCH_FRXEURUSD_100_12_OCT_12_3H30_S10P_0")
        assert params.is_invalid

    @pytest.mark.parametrize(
        "shortcode",
        [
            "CALL_R_100_10_1000_99999999999999_S0P_0",
            "CALL_R_100_10_99999999999999F_99999999999999_S0P_0",
            "ASIANU_R_100_10_1000_99999999999999",
        ],
    )
    def test_timestamp_beyond_calendar_is_invalid(self, parser, shortcode):
        assert parser.parse(shortcode).is_invalid

    def test_last_representable_timestamp_accepted(self, parser):
        params = parser.parse("CALL_R_100_10_1000_253402300799F_S0P_0")
        assert params.date_expiry == 253402300799

    def test_unknown_underlying_is_invalid(self, parser):
        params = parser.parse("CALL_NOSUCHSYMBOL_100_1000_2000_S0P_0")
        assert params.is_invalid

    def test_invalid_populates_only_sentinel_fields(self, parser):
        params = parser.parse("FOO_BAR_1_2_3", "USD")

        assert params.to_dict() == {
            "bet_type": "Invalid",
            "underlying_symbol": "config",
            "currency": "USD",
            "fixed_expiry": False,
            "starts_as_forward_starting": False,
            "is_sold": False,
        }

    def test_token_issuance_disabled_by_default(self, parser):
        assert parser.parse("BINARYICO_1.35_100_10").is_invalid


class TestBarrierShape:
    """Timestamped contracts with barrier tokens."""

    def test_forward_starting_flag(self, parser):
        params = parser.parse("CALL_R_100_10_1000F_2000_S0P_0")

        assert params.underlying_symbol == "R_100"
        assert params.starts_as_forward_starting is True
        assert params.fixed_expiry is False

    def test_fixed_expiry_flag(self, parser):
        params = parser.parse("CALL_FRXUSDJPY_100_1393816299_1393828299F_S0P_0")

        assert params.fixed_expiry is True
        assert params.date_expiry == 1393828299

    def test_tick_expiry_flag_sets_duration(self, parser):
        params = parser.parse("CALL_R_100_10_1000_5T_S0P_0")

        assert params.duration == Duration(value=5, unit="t")
        assert params.date_expiry is None
        assert params.duration_type == DURATION_TYPES.TICKS
        assert params.is_tick_expiry

    def test_absolute_forex_barrier_is_scaled(self, parser):
        params = parser.parse("CALL_FRXUSDJPY_100_1000_2000_101500000_0")
        assert params.barrier == 101.5

    def test_absolute_barrier_on_index_is_kept(self, parser):
        params = parser.parse("CALL_OTC_DJI_10_1000_2000_30000_0")

        assert params.underlying_symbol == "OTC_DJI"
        assert params.barrier == "30000"

    def test_two_barriers_become_pair(self, parser):
        params = parser.parse("EXPIRYRANGE_FRXUSDJPY_100_1000_2000_102000000_101000000")

        assert params.high_barrier == 102.0
        assert params.low_barrier == 101.0
        assert params.barrier is None

    def test_relative_pair(self, parser):
        params = parser.parse("RANGE_R_100_10_1000_2000_S100P_S-100P")

        assert params.high_barrier == "S100P"
        assert params.low_barrier == "S-100P"

    def test_zero_second_barrier_keeps_single(self, parser):
        params = parser.parse("ONETOUCH_R_50_10_1000_2000_S50P_0")

        assert params.barrier == "S50P"
        assert params.high_barrier is None

    def test_digit_barrier_not_scaled(self, parser):
        params = parser.parse("DIGITMATCH_R_100_10_1000_5T_7_0")

        assert params.barrier == "7"
        assert params.duration.value == 5

    def test_lookback_trailing_multiplier(self, parser):
        params = parser.parse("LBFIXEDCALL_R_100_10_1000_1300_S0P_0_2.5")

        assert params.multiplier == 2.5
        assert params.amount == 10

    def test_trailing_multiplier_ignored_for_other_types(self, parser):
        params = parser.parse("CALL_R_100_10_1000_1300_S0P_0_5")

        assert params.bet_type == "CALL"
        assert params.multiplier is None

    def test_duration_type_from_span(self, parser):
        params = parser.parse("CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0")
        assert params.duration_type == DURATION_TYPES.HOURS


class TestMultiplierShape:
    def test_empty_cancellation_fields(self, parser):
        params = parser.parse("MULTDOWN_R_100_10_50_1000_2000__")

        assert params.bet_type == "MULTDOWN"
        assert params.cancellation is None
        assert params.cancellation_tp is None
        assert params.multiplier == 50
        assert params.duration_type == DURATION_TYPES.MINUTES

    def test_missing_cancellation_fields_is_invalid(self, parser):
        assert parser.parse("MULTUP_R_100_10_50_1000_2000").is_invalid

    @pytest.mark.parametrize(
        "shortcode",
        [
            "MULTUP_R_100_10_100_1000_2000_S0P_0",
            "MULTDOWN_FRXEURUSD_10_1000_2000_S0P_0",
            "MULTUP_R_100_10_1000_2000",
        ],
    )
    def test_not_read_as_other_shapes(self, parser, shortcode):
        assert parser.parse(shortcode).is_invalid


class TestTickSelectionShape:
    def test_tick_high(self, parser):
        params = parser.parse("TICKHIGH_R_100_10_1000_5t_3")

        assert params.bet_type == "TICKHIGH"
        assert params.duration == Duration(value=5, unit="t")
        assert params.selected_tick == 3
        assert params.barrier is None

    def test_other_types_do_not_use_tick_selection(self, parser):
        assert parser.parse("CALL_R_100_10_1000_5t_3").is_invalid


class TestNoBarrierShape:
    def test_plain_payout(self, parser):
        params = parser.parse("DIGITEVEN_R_100_10_1000_5T")

        assert params.amount == 10
        assert params.amount_type == AMOUNT_TYPES.PAYOUT
        assert params.duration.value == 5
        assert params.barrier is None

    def test_lookback_amount_is_multiplier(self, parser):
        params = parser.parse("LBFLOATCALL_R_100_5_1000_1300")

        assert params.multiplier == 5
        assert params.amount is None
        assert params.amount_type is None
        assert params.date_expiry == 1300

    def test_fixed_expiry_flag(self, parser):
        params = parser.parse("ASIANU_R_100_10_1000_1300F")
        assert params.fixed_expiry is True


class TestTokenIssuance:
    def test_enabled_rule(self, ico_service):
        params = ico_service.parse("BINARYICO_1.35_100_10", "USD")

        assert params.bet_type == "BINARYICO"
        assert params.amount_type == AMOUNT_TYPES.STAKE
        assert params.per_token_bid_price == 1.35
        assert params.number_of_tokens == 100
        assert params.deposit_percentage == 10
        assert params.date_expiry is None

    def test_deposit_optional(self, ico_service):
        params = ico_service.parse("BINARYICO_2_500")
        assert params.deposit_percentage is None


class TestCallerContext:
    def test_is_sold_copied(self, parser):
        assert parser.parse("CALL_R_100_10_1000_2000_S0P_0", is_sold=True).is_sold is True

    def test_logs_unmatched_shortcode(self, parser, caplog):
        with caplog.at_level("DEBUG", logger="longcode.parser"):
            parser.parse("CALL_R_100_10")

        assert "No grammar rule matches" in caplog.text
