"""
Longcode template catalog.

Maps template keys (``call_intraday``, ``entry_spot``, ...) to phrase
templates. The catalog is loaded from a YAML file once per process and is
read-only afterwards: ``TemplateCatalog`` wraps a ``MappingProxyType`` and
``get_template_catalog`` guards the one-time load with a lock.

Example:
    >>> from longcode.catalog import get_template_catalog
    >>> catalog = get_template_catalog()
    >>> catalog["entry_spot"]
    'entry spot'
"""

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Optional

import yaml

from config.logging_config import LogCategory
from config.settings import DEFAULT_CATALOG_PATH
from core.errors import CatalogError, MissingTemplateError

logger = logging.getLogger(__name__)

# Shared fragments the assembler always needs
REQUIRED_KEYS = frozenset([
    "legacy_contract",
    "contract_start_time",
    "close_on",
    "first_tick",
    "entry_spot",
    "entry_spot_plus",
    "entry_spot_minus",
    "entry_spot_plus_plural",
    "entry_spot_minus_plural",
])


class TemplateCatalog(Mapping):
    """Immutable mapping from template key to phrase template."""

    def __init__(self, templates: Mapping[str, str], source: Optional[Path] = None):
        missing = REQUIRED_KEYS.difference(templates)
        if missing:
            msg = f"Template catalog is missing required keys: {sorted(missing)}"
            logger.error(f"{LogCategory.CATALOG} {msg}")
            raise CatalogError(msg)

        self._templates = MappingProxyType(dict(templates))
        self.source = source

    def __getitem__(self, key: str) -> str:
        return self._templates[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def template(self, key: str) -> str:
        """
        Phrase template for ``key``.

        Raises:
            MissingTemplateError: If the catalog has no such key.
        """
        try:
            return self._templates[key]
        except KeyError:
            logger.error(f"{LogCategory.CATALOG} Could not find longcode for {key}")
            raise MissingTemplateError(key) from None


def load_template_catalog(path: Path | str) -> TemplateCatalog:
    """
    Read a catalog from a YAML file.

    Raises:
        CatalogError: If the file is missing, unreadable, not a mapping of
            strings, or lacks a required key.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        msg = f"Failed to load template catalog {path}: {e}"
        logger.error(f"{LogCategory.CATALOG} {msg}")
        raise CatalogError(msg) from e

    if not isinstance(raw, dict):
        msg = f"Template catalog {path} must contain a mapping"
        logger.error(f"{LogCategory.CATALOG} {msg}")
        raise CatalogError(msg)

    bad = sorted(str(key) for key, value in raw.items() if not isinstance(value, str))
    if bad:
        msg = f"Template catalog {path} has non-string templates: {bad}"
        logger.error(f"{LogCategory.CATALOG} {msg}")
        raise CatalogError(msg)

    catalog = TemplateCatalog(raw, source=path)
    logger.info(f"{LogCategory.CATALOG} Loaded {len(catalog)} templates from {path}")
    return catalog


_CATALOG: Optional[TemplateCatalog] = None
_CATALOG_LOCK = threading.Lock()


def get_template_catalog(path: Path | str | None = None) -> TemplateCatalog:
    """
    Process-wide catalog, loaded on first use.

    ``path`` only matters for the first call; later calls return the
    already loaded catalog.
    """
    global _CATALOG
    if _CATALOG is None:
        with _CATALOG_LOCK:
            if _CATALOG is None:
                _CATALOG = load_template_catalog(path or DEFAULT_CATALOG_PATH)
    return _CATALOG
