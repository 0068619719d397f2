"""
Default instrument registry backed by a YAML data file.

Serves display name, pip size and market classification per underlying
symbol. Applications with their own instrument service can pass any
object implementing ``core.interfaces.IInstrumentRegistry`` instead.

Example:
    >>> from data.instruments import InstrumentRegistry
    >>> registry = InstrumentRegistry.from_yaml(path)
    >>> registry.by_symbol("FRXUSDJPY").pipsized_value(101.5)
    '101.500'
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from config.logging_config import LogCategory
from core.domain.entities import Instrument
from core.errors import UnknownUnderlyingError

logger = logging.getLogger(__name__)


class InstrumentRegistry:
    """
    Read-only symbol -> Instrument lookup.

    Populated once at construction and never mutated, so one instance can
    be shared between threads.
    """

    def __init__(self, instruments: Mapping[str, Instrument]):
        self._instruments = MappingProxyType(dict(instruments))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> "InstrumentRegistry":
        """Build from ``{symbol: {display_name, pip_size, market}}``."""
        return cls({
            symbol: Instrument(symbol=symbol, **fields)
            for symbol, fields in raw.items()
        })

    @classmethod
    def from_yaml(cls, path: Path | str) -> "InstrumentRegistry":
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Instrument file {path} must contain a mapping")

        registry = cls.from_mapping(raw)
        logger.info(f"{LogCategory.REGISTRY} Loaded {len(registry)} instruments from {path}")
        return registry

    def by_symbol(self, symbol: str) -> Instrument:
        try:
            return self._instruments[symbol]
        except KeyError:
            raise UnknownUnderlyingError(symbol) from None

    def is_known(self, symbol: str) -> bool:
        return symbol in self._instruments

    def __len__(self) -> int:
        return len(self._instruments)
