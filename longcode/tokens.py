"""
Longcode token types.

A longcode is an ordered tuple of tokens. Position matters: the first
token is the phrase template and each following token fills the next
placeholder of that template, so tokens are never reordered and an empty
``Group`` still occupies its slot.

Example:
    >>> tokens = assemble("CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0", "USD")
    >>> longcode_to_json(tokens)[3]
    {'class': 'duration', 'value': 12000, 'unit': 'seconds'}
"""

from dataclasses import dataclass
from typing import Any, Literal, Union


@dataclass(frozen=True)
class Text:
    """Literal template string, timestamp or date."""

    value: str

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class UnderlyingName:
    """Display name of the contract's underlying."""

    value: str

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class DurationValue:
    """
    Length of time (seconds) or count of ticks.

    Rendered into words by a downstream duration-phrase renderer.
    """

    value: int
    unit: Literal["seconds", "ticks"] = "seconds"

    def to_json(self) -> Any:
        return {"class": "duration", "value": self.value, "unit": self.unit}


@dataclass(frozen=True)
class NumericValue:
    """Barrier display value, multiplier, tick count, amount or currency code."""

    value: Union[int, float, str]

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Group:
    """Ordered tokens that together fill one placeholder. May be empty."""

    parts: tuple["Token", ...] = ()

    def to_json(self) -> Any:
        return [part.to_json() for part in self.parts]


Token = Union[Text, UnderlyingName, DurationValue, NumericValue, Group]
Longcode = tuple[Token, ...]


def longcode_to_json(tokens: Longcode) -> list[Any]:
    """Convert a token tuple into plain nested lists for serialization."""
    return [token.to_json() for token in tokens]
