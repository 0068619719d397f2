"""
Shortcode parser.

Turns a shortcode such as ``CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0``
into ContractParameters. Unrecognized and legacy shortcodes are not errors:
they produce the Invalid sentinel (``bet_type="Invalid"``,
``underlying_symbol="config"``).

Example:
    >>> parser = ShortcodeParser(instruments, contract_types)
    >>> params = parser.parse("CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0", "USD")
    >>> params.barrier
    'S0P'
"""

import logging
import re
from typing import Any, Optional

from config.constants import (
    AMOUNT_TYPES,
    LEGACY_MARKER_PATTERN,
    LOOKBACK_TYPES,
    MAX_EPOCH,
    SHORTCODE_SEPARATOR,
)
from config.logging_config import LogCategory
from core.domain.entities import BarrierValue, ContractParameters, Duration
from core.interfaces import IContractTypeRegistry, IInstrumentRegistry
from longcode.barriers import BarrierNormalizer
from longcode.durations import classify_duration_type
from longcode.grammar import (
    DEFAULT_RULES,
    BarrierShape,
    GrammarRule,
    MultiplierShape,
    NoBarrierShape,
    RawShape,
    TickSelectionShape,
    TokenIssuanceShape,
    match_shortcode,
)

logger = logging.getLogger(__name__)

_LEGACY_MARKER_RE = re.compile(LEGACY_MARKER_PATTERN)


def _is_set(value: Optional[BarrierValue]) -> bool:
    """A barrier counts as set unless it is absent, empty or a plain zero."""
    if value is None:
        return False
    if isinstance(value, str):
        return value not in ("", "0")
    return value != 0


def _epochs_in_range(fields: dict[str, Any]) -> bool:
    return all(
        fields.get(name) is None or fields[name] <= MAX_EPOCH
        for name in ("date_start", "date_expiry")
    )


def _optional_float(raw: Optional[str]) -> Optional[float]:
    return float(raw) if raw else None


def _optional_int(raw: Optional[str]) -> Optional[int]:
    return int(raw) if raw else None


class ShortcodeParser:
    """
    Ordered-rule shortcode recognizer.

    Thread-safe: holds only read-only collaborators.
    """

    def __init__(
        self,
        instruments: IInstrumentRegistry,
        contract_types: IContractTypeRegistry,
        rules: tuple[GrammarRule, ...] = DEFAULT_RULES,
        normalizer: Optional[BarrierNormalizer] = None,
    ):
        self.instruments = instruments
        self.contract_types = contract_types
        self.rules = rules
        self.normalizer = normalizer or BarrierNormalizer(instruments)

    def parse(
        self,
        shortcode: str,
        currency: Optional[str] = None,
        is_sold: bool = False,
    ) -> ContractParameters:
        """
        Decode a shortcode. Never raises for malformed input.

        Args:
            shortcode: Underscore-delimited contract encoding
            currency: Account currency, copied onto the result
            is_sold: Whether the contract has been sold, copied onto the result

        Returns:
            ContractParameters, or the Invalid sentinel
        """
        initial_bet_type = shortcode.split(SHORTCODE_SEPARATOR, 1)[0]
        if not self.contract_types.is_known_type(initial_bet_type):
            logger.debug(f"{LogCategory.PARSE} Unknown contract type [{initial_bet_type}] in {shortcode}")
            return ContractParameters.invalid(currency, is_sold)
        if _LEGACY_MARKER_RE.search(shortcode):
            logger.debug(f"{LogCategory.PARSE} Legacy shortcode {shortcode}")
            return ContractParameters.invalid(currency, is_sold)

        matched = match_shortcode(shortcode, self.rules)
        if matched is None:
            logger.debug(f"{LogCategory.PARSE} No grammar rule matches {shortcode}")
            return ContractParameters.invalid(currency, is_sold)

        rule_name, shape = matched
        if not isinstance(shape, TokenIssuanceShape) and not self.instruments.is_known(shape.underlying):
            logger.debug(f"{LogCategory.PARSE} Unknown underlying [{shape.underlying}] in {shortcode}")
            return ContractParameters.invalid(currency, is_sold)

        logger.debug(f"{LogCategory.PARSE} Matched rule {rule_name} for {shortcode}")
        fields = self._shape_fields(shape)
        if not _epochs_in_range(fields):
            logger.debug(f"{LogCategory.PARSE} Timestamp out of range in {shortcode}")
            return ContractParameters.invalid(currency, is_sold)
        fields.update(self._barrier_fields(shape))
        fields["duration_type"] = classify_duration_type(
            fields.get("date_start"), fields.get("date_expiry"), fields.get("duration")
        )

        return ContractParameters(
            shortcode=shortcode,
            currency=currency,
            is_sold=is_sold,
            **fields,
        )

    def _shape_fields(self, shape: RawShape) -> dict[str, Any]:
        """Typed ContractParameters fields for a raw shape, barriers excluded."""
        if isinstance(shape, MultiplierShape):
            return {
                "bet_type": shape.bet_type,
                "underlying_symbol": shape.underlying,
                "amount": float(shape.stake),
                "amount_type": AMOUNT_TYPES.STAKE,
                "multiplier": float(shape.multiplier),
                "date_start": int(shape.date_start),
                "date_expiry": int(shape.date_expiry),
                "cancellation": _optional_int(shape.cancellation),
                "cancellation_tp": _optional_float(shape.cancellation_tp),
            }

        if isinstance(shape, BarrierShape):
            fields = {
                "bet_type": shape.bet_type,
                "underlying_symbol": shape.underlying,
                "amount": float(shape.payout),
                "amount_type": AMOUNT_TYPES.PAYOUT,
                "date_start": int(shape.date_start),
                "starts_as_forward_starting": shape.start_flag == "F",
                **self._expiry_fields(shape.expiry, shape.expiry_flag),
            }
            if shape.bet_type in LOOKBACK_TYPES:
                fields["multiplier"] = _optional_float(shape.multiplier)
            return fields

        if isinstance(shape, TickSelectionShape):
            return {
                "bet_type": shape.bet_type,
                "underlying_symbol": shape.underlying,
                "amount": float(shape.payout),
                "amount_type": AMOUNT_TYPES.PAYOUT,
                "date_start": int(shape.date_start),
                "duration": Duration(value=int(shape.tick_count), unit="t"),
                "selected_tick": int(shape.selected_tick),
            }

        if isinstance(shape, NoBarrierShape):
            fields = {
                "bet_type": shape.bet_type,
                "underlying_symbol": shape.underlying,
                "date_start": int(shape.date_start),
                **self._expiry_fields(shape.expiry, shape.expiry_flag),
            }
            if shape.bet_type in LOOKBACK_TYPES:
                fields["multiplier"] = float(shape.amount)
            else:
                fields["amount"] = float(shape.amount)
                fields["amount_type"] = AMOUNT_TYPES.PAYOUT
            return fields

        if isinstance(shape, TokenIssuanceShape):
            return {
                "bet_type": shape.bet_type,
                "underlying_symbol": shape.underlying,
                "amount": float(shape.per_token_bid_price),
                "amount_type": AMOUNT_TYPES.STAKE,
                "per_token_bid_price": float(shape.per_token_bid_price),
                "number_of_tokens": int(shape.number_of_tokens),
                "deposit_percentage": _optional_int(shape.deposit_percentage),
            }

        raise TypeError(f"Unsupported shortcode shape: {type(shape).__name__}")

    @staticmethod
    def _expiry_fields(expiry: str, flag: str) -> dict[str, Any]:
        # "T" turns the expiry field into a tick count
        if flag == "T":
            return {"duration": Duration(value=int(expiry), unit="t")}
        return {"date_expiry": int(expiry), "fixed_expiry": flag == "F"}

    def _barrier_fields(self, shape: RawShape) -> dict[str, BarrierValue]:
        if not isinstance(shape, BarrierShape):
            return {}

        barrier = self.normalizer.normalize(shape.barrier, shape.underlying, shape.bet_type)
        barrier2 = self.normalizer.normalize(shape.barrier2, shape.underlying, shape.bet_type)

        if _is_set(barrier) and _is_set(barrier2):
            return {"high_barrier": barrier, "low_barrier": barrier2}
        return {"barrier": barrier}
