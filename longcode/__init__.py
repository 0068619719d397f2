"""
Shortcode to parameters and longcode conversion.

A shortcode is the underscore-delimited encoding of a contract, e.g.
``CALL_FRXUSDJPY_100_1393816299_1393828299_S0P_0``:

- CALL is the contract type
- FRXUSDJPY is the underlying symbol
- 100 is the payout
- 1393816299 / 1393828299 are start and expiry epochs
- S0P and 0 are the two barrier tokens

Public API:
    - parse: shortcode -> ContractParameters (Invalid sentinel if unrecognized)
    - assemble: shortcode -> longcode token tuple
    - get_template_catalog: the loaded, read-only template catalog
    - longcode_to_json: token tuple -> plain nested lists
    - create_longcode_stack: build a service with custom settings/collaborators

>>> from longcode import assemble, longcode_to_json
>>> longcode_to_json(assemble("PUT_FRXEURNOK_100_1394590423_1394591143_S0P_0", "USD"))[3]
{'class': 'duration', 'value': 720, 'unit': 'seconds'}
"""

from typing import Optional

from core.domain.entities import ContractParameters
from longcode.catalog import TemplateCatalog
from longcode.service import LongcodeService, create_longcode_stack, get_default_service
from longcode.tokens import Longcode, longcode_to_json


def parse(shortcode: str, currency: Optional[str] = None, is_sold: bool = False) -> ContractParameters:
    """Decode a shortcode with the default service. Never raises for malformed input."""
    return get_default_service().parse(shortcode, currency, is_sold)


def assemble(shortcode: str, currency: Optional[str] = None) -> Longcode:
    """Longcode tokens for a shortcode, using the default service."""
    return get_default_service().assemble(shortcode, currency)


def get_template_catalog() -> TemplateCatalog:
    """The default service's read-only template catalog."""
    return get_default_service().catalog


__all__ = [
    "ContractParameters",
    "LongcodeService",
    "TemplateCatalog",
    "assemble",
    "create_longcode_stack",
    "get_template_catalog",
    "longcode_to_json",
    "parse",
]
