"""
Domain models for decoded contracts.
"""
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, model_validator

from config.constants import (
    AMOUNT_TYPES,
    DURATION_TYPES,
    INVALID_BET_TYPE,
    LEGACY_UNDERLYING,
    SECONDS_IN_A_DAY,
    SECONDS_IN_A_MINUTE,
    SECONDS_IN_AN_HOUR,
)
from core.domain.base import DomainEntity

DurationUnit = Literal["t", "s", "m", "h", "d"]
BarrierValue = float | str

_UNIT_SECONDS = {
    "s": 1,
    "m": SECONDS_IN_A_MINUTE,
    "h": SECONDS_IN_AN_HOUR,
    "d": SECONDS_IN_A_DAY,
}


class Duration(DomainEntity):
    """
    Relative contract length. Unit ``t`` counts ticks, not time.
    """
    value: int = Field(..., ge=0)
    unit: DurationUnit = "t"

    @property
    def is_ticks(self) -> bool:
        return self.unit == "t"

    @property
    def seconds(self) -> Optional[int]:
        """Length in seconds, or None for tick durations."""
        if self.is_ticks:
            return None
        return self.value * _UNIT_SECONDS[self.unit]


class Instrument(DomainEntity):
    """
    Metadata for a tradable underlying, as served by an instrument registry.
    """
    symbol: str
    display_name: str
    pip_size: float = Field(..., gt=0)
    market: str

    @property
    def pip_decimals(self) -> int:
        exponent = Decimal(str(self.pip_size)).normalize().as_tuple().exponent
        return max(0, -int(exponent))

    def pipsized_value(self, value: float | str) -> str:
        """Format a price to the instrument's pip precision."""
        return f"{float(value):.{self.pip_decimals}f}"


class ContractParameters(DomainEntity):
    """
    Structured result of decoding a shortcode.

    Either a recognized contract or the Invalid sentinel (see ``invalid``).
    At most one expiry form (``date_expiry`` or ``duration``) and at most one
    barrier form (``barrier`` or the ``high_barrier``/``low_barrier`` pair)
    are populated.
    """
    shortcode: Optional[str] = None
    bet_type: str
    underlying_symbol: str

    amount: Optional[float] = None
    amount_type: Optional[AMOUNT_TYPES] = None

    date_start: Optional[int] = None
    date_expiry: Optional[int] = None
    duration: Optional[Duration] = None

    barrier: Optional[BarrierValue] = None
    high_barrier: Optional[BarrierValue] = None
    low_barrier: Optional[BarrierValue] = None

    multiplier: Optional[float] = None
    fixed_expiry: bool = False
    starts_as_forward_starting: bool = False
    selected_tick: Optional[int] = None
    cancellation: Optional[int] = None
    cancellation_tp: Optional[float] = None

    currency: Optional[str] = None
    is_sold: bool = False
    duration_type: Optional[DURATION_TYPES] = None

    # Token issuance only
    number_of_tokens: Optional[int] = None
    per_token_bid_price: Optional[float] = None
    deposit_percentage: Optional[int] = None

    @model_validator(mode="after")
    def validate_exclusive_forms(self) -> "ContractParameters":
        """Reject mixed expiry or barrier forms."""
        if self.date_expiry is not None and self.duration is not None:
            raise ValueError("date_expiry and duration are mutually exclusive")

        has_pair = self.high_barrier is not None or self.low_barrier is not None
        if has_pair and (self.high_barrier is None or self.low_barrier is None):
            raise ValueError("high_barrier and low_barrier must be given together")
        if has_pair and self.barrier is not None:
            raise ValueError("barrier cannot be combined with high_barrier/low_barrier")
        return self

    @classmethod
    def invalid(cls, currency: Optional[str] = None, is_sold: bool = False) -> "ContractParameters":
        """Sentinel for unrecognized and legacy shortcodes."""
        return cls(
            bet_type=INVALID_BET_TYPE,
            underlying_symbol=LEGACY_UNDERLYING,
            currency=currency,
            is_sold=is_sold,
        )

    @property
    def is_invalid(self) -> bool:
        return self.bet_type == INVALID_BET_TYPE

    @property
    def is_tick_expiry(self) -> bool:
        return self.duration is not None and self.duration.is_ticks

    @property
    def has_expiry(self) -> bool:
        return self.date_expiry is not None or self.duration is not None

    @property
    def has_barrier_pair(self) -> bool:
        return self.high_barrier is not None and self.low_barrier is not None
