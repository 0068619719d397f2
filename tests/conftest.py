"""
Shared fixtures: the bundled registries, catalog and a wired parser/assembler.
"""

import pytest

from config.settings import (
    DEFAULT_CATALOG_PATH,
    DEFAULT_CONTRACT_TYPES_PATH,
    DEFAULT_UNDERLYINGS_PATH,
    ParserConfig,
    Settings,
)
from data.contract_types import ContractTypeRegistry
from data.instruments import InstrumentRegistry
from longcode.assembler import LongcodeAssembler
from longcode.catalog import load_template_catalog
from longcode.parser import ShortcodeParser
from longcode.service import create_longcode_stack


@pytest.fixture(scope="session")
def instruments():
    return InstrumentRegistry.from_yaml(DEFAULT_UNDERLYINGS_PATH)


@pytest.fixture(scope="session")
def contract_types():
    return ContractTypeRegistry.from_yaml(DEFAULT_CONTRACT_TYPES_PATH)


@pytest.fixture(scope="session")
def catalog():
    return load_template_catalog(DEFAULT_CATALOG_PATH)


@pytest.fixture
def parser(instruments, contract_types):
    return ShortcodeParser(instruments, contract_types)


@pytest.fixture
def assembler(instruments, catalog):
    return LongcodeAssembler(instruments, catalog)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def service(settings, instruments, contract_types, catalog):
    return create_longcode_stack(settings, instruments, contract_types, catalog)


@pytest.fixture
def ico_service(instruments, contract_types, catalog):
    settings = Settings(parser=ParserConfig(enable_token_issuance=True), _env_file=None)
    return create_longcode_stack(settings, instruments, contract_types, catalog)
