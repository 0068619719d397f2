"""
Duration classification for decoded contracts.

Two independent classifications:
- duration_type: coarse bucket stored on ContractParameters
- expiry_type: picks the longcode template, used only by the assembler
"""

from typing import Optional

from config.constants import (
    DURATION_TYPES,
    EXPIRY_TYPES,
    SECONDS_IN_A_DAY,
    SECONDS_IN_A_MINUTE,
    SECONDS_IN_AN_HOUR,
)
from core.domain.entities import ContractParameters, Duration


def span_seconds(
    date_start: Optional[int],
    date_expiry: Optional[int],
    duration: Optional[Duration] = None,
) -> Optional[int]:
    """
    Seconds between start and expiry.

    Returns None for tick durations and when no expiry is known.
    """
    if duration is not None:
        return duration.seconds
    if date_expiry is None:
        return None
    return date_expiry - (date_start or 0)


def contract_span_seconds(params: ContractParameters) -> Optional[int]:
    return span_seconds(params.date_start, params.date_expiry, params.duration)


def classify_duration_type(
    date_start: Optional[int],
    date_expiry: Optional[int],
    duration: Optional[Duration] = None,
) -> Optional[DURATION_TYPES]:
    """
    Bucket a contract's length.

    Tick durations are ``ticks``; otherwise the span in seconds decides:
    under a minute, under an hour, under a day, or days.
    """
    if duration is not None and duration.is_ticks:
        return DURATION_TYPES.TICKS

    seconds = span_seconds(date_start, date_expiry, duration)
    if seconds is None:
        return None
    if seconds < SECONDS_IN_A_MINUTE:
        return DURATION_TYPES.SECONDS
    if seconds < SECONDS_IN_AN_HOUR:
        return DURATION_TYPES.MINUTES
    if seconds < SECONDS_IN_A_DAY:
        return DURATION_TYPES.HOURS
    return DURATION_TYPES.DAYS


def resolve_expiry_type(params: ContractParameters) -> EXPIRY_TYPES:
    """
    Expiry classification used for the template key.

    ``tick`` for tick contracts, ``daily`` for spans over one day, otherwise
    ``intraday`` (``intraday_fixed_expiry`` when the contract has a fixed
    expiry and does not start forward).
    """
    if params.is_tick_expiry:
        return EXPIRY_TYPES.TICK

    seconds = contract_span_seconds(params) or 0
    if seconds > SECONDS_IN_A_DAY:
        return EXPIRY_TYPES.DAILY

    if params.fixed_expiry and not params.starts_as_forward_starting:
        return EXPIRY_TYPES.INTRADAY_FIXED_EXPIRY
    return EXPIRY_TYPES.INTRADAY
