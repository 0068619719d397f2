"""
Barrier normalization and display.

Shortcodes carry barriers in one of two encodings:
- absolute: an integer holding price * STRIKE_MULTIPLIER (forex,
  commodities and synthetic indices) or the plain price (other markets)
- relative: ``S<signed pips>P``, an offset from the entry spot

``BarrierNormalizer`` undoes the absolute encoding while parsing.
``barrier_display`` turns a stored barrier into longcode tokens.
"""

import logging
import re
from decimal import Decimal
from typing import Union

from config.constants import (
    ABSOLUTE_BARRIER_MARKETS,
    DIGIT_PREFIX,
    FOREX_MARKET,
    STRIKE_MULTIPLIER,
)
from config.logging_config import LogCategory
from core.domain.entities import BarrierValue, Instrument
from core.errors import UnrecognizedBarrierError
from core.interfaces import IInstrumentRegistry
from longcode.catalog import TemplateCatalog
from longcode.tokens import Group, NumericValue, Text

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r"^[+-]?\d+(?:\.\d+)?$")
_ABSOLUTE_RE = re.compile(r"^\d+(?:\.\d{0,12})?$")
_RELATIVE_PIPS_RE = re.compile(r"^S([-+]?\d+)P$")
_SIGNED_DECIMAL_RE = re.compile(r"^[+-](?:\d+\.?\d{0,12})$")


class BarrierNormalizer:
    """
    Converts raw shortcode barrier tokens into stored barrier values.

    Needs the instrument registry to find the market of the underlying.
    """

    def __init__(self, instruments: IInstrumentRegistry):
        self.instruments = instruments

    def normalize(self, raw: str, underlying_symbol: str, bet_type: str) -> BarrierValue:
        """
        Stored value for a raw barrier token.

        Non-zero numeric tokens of non-digit contracts on markets with
        encoded absolute barriers are divided by STRIKE_MULTIPLIER;
        everything else, relative ``S<n>P`` tokens included, is returned
        unchanged.

        Raises:
            UnknownUnderlyingError: If the registry does not know the symbol.
        """
        if bet_type.startswith(DIGIT_PREFIX) or not _NUMERIC_RE.match(raw):
            return raw
        if float(raw) == 0:
            return raw

        market = self.instruments.by_symbol(underlying_symbol).market
        if market not in ABSOLUTE_BARRIER_MARKETS:
            return raw

        return float(raw) / STRIKE_MULTIPLIER


def barrier_text(value: BarrierValue) -> str:
    """String form of a stored barrier without exponent notation."""
    if isinstance(value, str):
        return value
    return format(Decimal(repr(value)), "f")


def _plain_number(value: Decimal) -> Union[int, float]:
    return int(value) if value == value.to_integral_value() else float(value)


def barrier_display(
    value: BarrierValue,
    instrument: Instrument,
    catalog: TemplateCatalog,
) -> Union[NumericValue, Group]:
    """
    Longcode token(s) describing a barrier.

    Absolute barriers become a pip-sized number. Relative barriers become
    "entry spot" when the offset is zero, otherwise a directional phrase
    plus magnitude: raw pips for forex, a pip-sized price offset elsewhere.

    Raises:
        UnrecognizedBarrierError: For any other barrier form.
    """
    text = barrier_text(value)

    if _ABSOLUTE_RE.match(text):
        return NumericValue(instrument.pipsized_value(text))

    relative = _RELATIVE_PIPS_RE.match(text)
    if relative:
        pips = Decimal(relative.group(1))
    elif _SIGNED_DECIMAL_RE.match(text):
        pips = Decimal(text) / Decimal(str(instrument.pip_size))
    else:
        msg = f"Unrecognized supplied barrier [{text}]"
        logger.error(f"{LogCategory.LONGCODE} {msg}")
        raise UnrecognizedBarrierError(msg)

    if pips == 0:
        return Group((Text(catalog.template("entry_spot")),))

    if instrument.market == FOREX_MARKET:
        key = "entry_spot_plus_plural" if pips > 0 else "entry_spot_minus_plural"
        magnitude: Union[int, float, str] = _plain_number(abs(pips))
    else:
        key = "entry_spot_plus" if pips > 0 else "entry_spot_minus"
        offset = abs(pips) * Decimal(str(instrument.pip_size))
        magnitude = instrument.pipsized_value(float(offset))

    return Group((Text(catalog.template(key)), NumericValue(magnitude)))
