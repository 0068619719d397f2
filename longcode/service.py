"""
Centralized wiring for the shortcode/longcode stack.

``create_longcode_stack`` builds parser and assembler from settings;
``LongcodeService`` is the facade behind the package-level ``parse`` and
``assemble`` functions.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from config.settings import DEFAULT_CATALOG_PATH, Settings
from core.domain.entities import ContractParameters
from core.interfaces import IContractTypeRegistry, IInstrumentRegistry
from data.contract_types import ContractTypeRegistry
from data.instruments import InstrumentRegistry
from longcode.assembler import LongcodeAssembler
from longcode.catalog import TemplateCatalog, get_template_catalog, load_template_catalog
from longcode.grammar import build_rules
from longcode.parser import ShortcodeParser
from longcode.tokens import Longcode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LongcodeService:
    """Parser and assembler sharing one set of collaborators."""

    parser: ShortcodeParser
    assembler: LongcodeAssembler

    @property
    def catalog(self) -> TemplateCatalog:
        return self.assembler.catalog

    def parse(
        self, shortcode: str, currency: Optional[str] = None, is_sold: bool = False
    ) -> ContractParameters:
        return self.parser.parse(shortcode, currency, is_sold)

    def assemble(self, shortcode: str, currency: Optional[str] = None) -> Longcode:
        """Parse a shortcode and render its longcode tokens."""
        params = self.parser.parse(shortcode, currency)
        return self.assembler.assemble(params, currency)


def create_longcode_stack(
    settings: Optional[Settings] = None,
    instruments: Optional[IInstrumentRegistry] = None,
    contract_types: Optional[IContractTypeRegistry] = None,
    catalog: Optional[TemplateCatalog] = None,
) -> LongcodeService:
    """
    Initialize parser and assembler.

    Args:
        settings: Loaded configuration (defaults to ``Settings()``)
        instruments: Instrument registry (defaults to the YAML-backed one)
        contract_types: Contract-type registry (defaults to the YAML-backed one)
        catalog: Template catalog (defaults to the process-wide catalog, or
            a fresh load when settings point at a non-default file)

    Returns:
        LongcodeService ready for concurrent use
    """
    settings = settings or Settings()

    if instruments is None:
        instruments = InstrumentRegistry.from_yaml(settings.registry.underlyings_path)
    if contract_types is None:
        contract_types = ContractTypeRegistry.from_yaml(settings.registry.contract_types_path)
    if catalog is None:
        if settings.catalog.path.resolve() == DEFAULT_CATALOG_PATH.resolve():
            catalog = get_template_catalog()
        else:
            catalog = load_template_catalog(settings.catalog.path)

    rules = build_rules(settings.parser.enable_token_issuance)
    logger.info(f"Longcode stack ready with rules: {', '.join(rule.name for rule in rules)}")

    return LongcodeService(
        parser=ShortcodeParser(instruments, contract_types, rules=rules),
        assembler=LongcodeAssembler(instruments, catalog),
    )


_DEFAULT_SERVICE: Optional[LongcodeService] = None
_DEFAULT_LOCK = threading.Lock()


def get_default_service() -> LongcodeService:
    """Process-wide service built from environment settings on first use."""
    global _DEFAULT_SERVICE
    if _DEFAULT_SERVICE is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_SERVICE is None:
                _DEFAULT_SERVICE = create_longcode_stack()
    return _DEFAULT_SERVICE
