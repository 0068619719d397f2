"""
Domain entities.
"""
from core.domain.entities import ContractParameters, Duration, Instrument

__all__ = ["ContractParameters", "Duration", "Instrument"]
