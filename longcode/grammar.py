"""
Shortcode grammar rules.

Each rule recognizes one textual shape of shortcode and turns a match into
a raw shape: the captured fields as strings, before any interpretation.
Shapes overlap, so rules are tried in a fixed priority order
(``DEFAULT_RULES``) and the first match wins. Multiplier bet types are only
ever read by the multiplier rule.

Shapes, with examples:
    multiplier      MULTUP_FRXEURUSD_10_100_1000_2000_60_5.5
    barrier         CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0
                    CALL_R_100_10_1000F_2000F_S10P_0
                    RESETCALL_R_100_10_1000_5T_S0P_0
    tick selection  TICKHIGH_R_100_10_1000_5t_3
    no barrier      DIGITEVEN_R_100_10_1000_5T
                    LBFLOATCALL_R_100_5_1000_1300F
    token issuance  BINARYICO_1.35_100_10   (opt-in)
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from config.constants import (
    MULTIPLIER_TYPES,
    TICK_SELECTION_TYPES,
    TOKEN_ISSUANCE_TYPE,
    UNDERLYING_PATTERN,
)

_NUMBER = r"\d+(?:\.\d+)?"
_BARRIER = r"S?-?\d+P?"


def _alternation(codes: frozenset[str]) -> str:
    return "|".join(sorted(codes))


@dataclass(frozen=True)
class MultiplierShape:
    bet_type: str
    underlying: str
    stake: str
    multiplier: str
    date_start: str
    date_expiry: str
    cancellation: str
    cancellation_tp: Optional[str]


@dataclass(frozen=True)
class BarrierShape:
    """Timestamped contract with one or two barrier tokens."""

    bet_type: str
    underlying: str
    payout: str
    date_start: str
    start_flag: str  # "F" for forward starting
    expiry: str
    expiry_flag: str  # "F" fixed expiry, "T" tick count
    barrier: str
    barrier2: str
    multiplier: Optional[str]


@dataclass(frozen=True)
class TickSelectionShape:
    bet_type: str
    underlying: str
    payout: str
    date_start: str
    tick_count: str
    selected_tick: str


@dataclass(frozen=True)
class NoBarrierShape:
    """Contract without barriers. ``amount`` is the multiplier for lookbacks."""

    bet_type: str
    underlying: str
    amount: str
    date_start: str
    expiry: str
    expiry_flag: str


@dataclass(frozen=True)
class TokenIssuanceShape:
    per_token_bid_price: str
    number_of_tokens: str
    deposit_percentage: Optional[str]

    @property
    def bet_type(self) -> str:
        return TOKEN_ISSUANCE_TYPE

    @property
    def underlying(self) -> str:
        return TOKEN_ISSUANCE_TYPE


RawShape = Union[
    MultiplierShape, BarrierShape, TickSelectionShape, NoBarrierShape, TokenIssuanceShape
]


@dataclass(frozen=True)
class GrammarRule:
    """A named pattern plus the constructor of its raw shape."""

    name: str
    pattern: re.Pattern
    build: Callable[[re.Match], RawShape]

    def match(self, shortcode: str) -> Optional[RawShape]:
        found = self.pattern.match(shortcode)
        if found is None:
            return None
        return self.build(found)


MULTIPLIER_RULE = GrammarRule(
    name="multiplier",
    pattern=re.compile(
        rf"^(?P<bet_type>{_alternation(MULTIPLIER_TYPES)})"
        rf"_(?P<underlying>{UNDERLYING_PATTERN})"
        rf"_(?P<stake>{_NUMBER})"
        rf"_(?P<multiplier>{_NUMBER})"
        r"_(?P<date_start>\d+)"
        r"_(?P<date_expiry>\d+)"
        r"_(?P<cancellation>\d*)"
        rf"_(?P<cancellation_tp>{_NUMBER})?$"
    ),
    build=lambda m: MultiplierShape(**m.groupdict()),
)

BARRIER_RULE = GrammarRule(
    name="barrier",
    pattern=re.compile(
        rf"^(?!(?:{_alternation(MULTIPLIER_TYPES)})_)(?P<bet_type>[^_]+)"
        rf"_(?P<underlying>{UNDERLYING_PATTERN})"
        rf"_(?P<payout>{_NUMBER})"
        r"_(?P<date_start>\d+)(?P<start_flag>F?)"
        r"_(?P<expiry>\d+)(?P<expiry_flag>[FT]?)"
        rf"_(?P<barrier>{_BARRIER})"
        rf"_(?P<barrier2>{_BARRIER})"
        rf"(?:_(?P<multiplier>{_NUMBER})?)?$"
    ),
    build=lambda m: BarrierShape(**m.groupdict()),
)

TICK_SELECTION_RULE = GrammarRule(
    name="tick_selection",
    pattern=re.compile(
        rf"^(?P<bet_type>{_alternation(TICK_SELECTION_TYPES)})"
        rf"_(?P<underlying>{UNDERLYING_PATTERN})"
        rf"_(?P<payout>{_NUMBER})"
        r"_(?P<date_start>\d+)"
        r"_(?P<tick_count>\d+)[tT]"
        r"_(?P<selected_tick>\d+)$"
    ),
    build=lambda m: TickSelectionShape(**m.groupdict()),
)

NO_BARRIER_RULE = GrammarRule(
    name="no_barrier",
    pattern=re.compile(
        rf"^(?!(?:{_alternation(MULTIPLIER_TYPES)})_)(?P<bet_type>[^_]+)"
        rf"_(?P<underlying>{UNDERLYING_PATTERN})"
        rf"_(?P<amount>{_NUMBER})"
        r"_(?P<date_start>\d+)"
        r"_(?P<expiry>\d+)(?P<expiry_flag>[FT]?)$"
    ),
    build=lambda m: NoBarrierShape(**m.groupdict()),
)

TOKEN_ISSUANCE_RULE = GrammarRule(
    name="token_issuance",
    pattern=re.compile(
        rf"^{TOKEN_ISSUANCE_TYPE}"
        rf"_(?P<per_token_bid_price>{_NUMBER})"
        r"_(?P<number_of_tokens>\d+)"
        r"(?:_(?P<deposit_percentage>\d+))?$"
    ),
    build=lambda m: TokenIssuanceShape(**m.groupdict()),
)

# Priority order matters: the shapes are not mutually exclusive.
DEFAULT_RULES: tuple[GrammarRule, ...] = (
    MULTIPLIER_RULE,
    BARRIER_RULE,
    TICK_SELECTION_RULE,
    NO_BARRIER_RULE,
)


def build_rules(enable_token_issuance: bool = False) -> tuple[GrammarRule, ...]:
    """Rule list in priority order, optionally with the token-issuance rule last."""
    if enable_token_issuance:
        return DEFAULT_RULES + (TOKEN_ISSUANCE_RULE,)
    return DEFAULT_RULES


def match_shortcode(
    shortcode: str, rules: tuple[GrammarRule, ...] = DEFAULT_RULES
) -> Optional[tuple[str, RawShape]]:
    """First matching rule's name and raw shape, or None."""
    for rule in rules:
        shape = rule.match(shortcode)
        if shape is not None:
            return rule.name, shape
    return None
