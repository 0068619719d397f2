"""
Error types raised by the shortcode/longcode library.

Unrecognized or legacy shortcodes are not errors: ``parse`` returns the
Invalid sentinel for them. Everything here signals a defect that must
reach the caller.
"""


class LongcodeError(Exception):
    """Base class for all library errors."""
    pass


class IncompleteContractError(LongcodeError):
    """Raised when a recognized contract carries no expiry information."""
    pass


class MissingTemplateError(LongcodeError, KeyError):
    """Raised when the template catalog has no phrase for a key."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Could not find longcode for {self.key}"


class UnrecognizedBarrierError(LongcodeError, ValueError):
    """Raised when a barrier token cannot be turned into display text."""
    pass


class CatalogError(LongcodeError):
    """Raised when the template catalog cannot be loaded."""
    pass


class UnknownUnderlyingError(LongcodeError, KeyError):
    """Raised by an instrument registry for symbols it does not know."""

    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Unknown underlying symbol [{self.symbol}]"
