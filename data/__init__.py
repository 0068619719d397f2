"""
Data module for the shortcode/longcode library.

Default, file-backed implementations of the external collaborators:
- InstrumentRegistry: display name, pip size and market per underlying
- ContractTypeRegistry: known contract-type codes

Both read their YAML file once and are read-only afterwards.
"""

from data.contract_types import ContractTypeRegistry
from data.instruments import InstrumentRegistry

__all__ = [
    "ContractTypeRegistry",
    "InstrumentRegistry",
]
