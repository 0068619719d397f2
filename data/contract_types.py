"""
Default contract-type registry backed by a YAML data file.

The file groups contract-type codes by category:

    callput: [CALL, PUT, CALLE, PUTE]
    digits: [DIGITMATCH, DIGITDIFF]
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping

import yaml

from config.logging_config import LogCategory

logger = logging.getLogger(__name__)


class ContractTypeRegistry:
    """Read-only set of known contract-type codes."""

    def __init__(self, categories: Mapping[str, Iterable[str]]):
        self._codes = frozenset(
            str(code) for codes in categories.values() for code in codes
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ContractTypeRegistry":
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Contract type file {path} must contain a mapping")

        registry = cls(raw)
        logger.info(f"{LogCategory.REGISTRY} Loaded {len(registry)} contract types from {path}")
        return registry

    def is_known_type(self, code: str) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)
