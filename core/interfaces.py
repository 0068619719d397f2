"""
Interfaces for the external collaborators of the shortcode/longcode core.
"""
from typing import Protocol, runtime_checkable

from core.domain.entities import Instrument

@runtime_checkable
class IInstrumentRegistry(Protocol):
    """Interface for instrument metadata lookup."""
    def by_symbol(self, symbol: str) -> Instrument:
        """Raises UnknownUnderlyingError for unknown symbols."""
        ...

    def is_known(self, symbol: str) -> bool:
        ...

@runtime_checkable
class IContractTypeRegistry(Protocol):
    """Interface for the registry of valid contract-type codes."""
    def is_known_type(self, code: str) -> bool:
        ...
