"""
Configuration constants for the shortcode/longcode library.

This module defines core constants used throughout the application including:
- Sentinels for invalid and legacy shortcodes
- Duration and expiry classifications
- Contract-type families that change how a shortcode is read
- Barrier encoding constants

Example:
    >>> from config.constants import EXPIRY_TYPES, STRIKE_MULTIPLIER
    >>> EXPIRY_TYPES.INTRADAY.value
    'intraday'
"""

from enum import Enum
from typing import Final


class DURATION_TYPES(str, Enum):
    """
    Coarse bucket for the length of a contract.

    Stored on ContractParameters for information only.
    """

    TICKS = "ticks"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"


class EXPIRY_TYPES(str, Enum):
    """
    Expiry classification used to pick a longcode template.

    The value is appended to the lower-cased bet type to build the
    template key, e.g. ``call_intraday_fixed_expiry``.
    """

    TICK = "tick"
    INTRADAY = "intraday"
    INTRADAY_FIXED_EXPIRY = "intraday_fixed_expiry"
    DAILY = "daily"


class AMOUNT_TYPES(str, Enum):
    """What the amount field of a shortcode means."""

    PAYOUT = "payout"
    STAKE = "stake"


# Sentinels
INVALID_BET_TYPE: Final[str] = "Invalid"
"""bet_type of any shortcode that could not be recognized."""

LEGACY_UNDERLYING: Final[str] = "config"
"""underlying_symbol reported for invalid and legacy shortcodes."""

SHORTCODE_SEPARATOR: Final[str] = "_"

LEGACY_MARKER_PATTERN: Final[str] = r"_\d+H\d+"
"""Old-style shortcodes embed an hour marker such as ``_20H35``."""

# Time
SECONDS_IN_A_MINUTE: Final[int] = 60
SECONDS_IN_AN_HOUR: Final[int] = 3600
SECONDS_IN_A_DAY: Final[int] = 86400

# Barriers
STRIKE_MULTIPLIER: Final[float] = 1e6
"""
Scale factor for absolute barriers.

Fractional absolute barriers are encoded in shortcodes as integers
multiplied by this value, e.g. 1.23456 is written as 1234560.
"""

ABSOLUTE_BARRIER_MARKETS: Final[frozenset[str]] = frozenset(
    ["forex", "commodities", "synthetic_index"]
)
"""Markets whose absolute barriers are encoded with STRIKE_MULTIPLIER."""

FOREX_MARKET: Final[str] = "forex"

# Contract-type families
MULTIPLIER_TYPES: Final[frozenset[str]] = frozenset(["MULTUP", "MULTDOWN"])

LOOKBACK_TYPES: Final[frozenset[str]] = frozenset(
    ["LBFIXEDCALL", "LBFIXEDPUT", "LBFLOATCALL", "LBFLOATPUT", "LBHIGHLOW"]
)
"""Lookbacks carry a multiplier instead of (or next to) a payout."""

TICK_SELECTION_TYPES: Final[frozenset[str]] = frozenset(["TICKHIGH", "TICKLOW"])

TOKEN_ISSUANCE_TYPE: Final[str] = "BINARYICO"

DIGIT_PREFIX: Final[str] = "DIGIT"
SPREAD_SUFFIX: Final[str] = "SPREAD"
TICK_MARKER: Final[str] = "TICK"
RESET_MARKER: Final[str] = "RESET"

# Underlying symbols may carry a single underscore (R_100, OTC_DJI), so the
# grammar needs an explicit pattern instead of a greedy word match.
UNDERLYING_PATTERN: Final[str] = r"(?:R_\d+|OTC_[A-Za-z0-9]+|[A-Za-z0-9]+)"

MAX_EPOCH: Final[int] = 253402300799
"""Last second representable as a date (9999-12-31 23:59:59 UTC)."""
