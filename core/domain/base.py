"""
Base classes for domain entities.
"""
from typing import Any
from pydantic import BaseModel, ConfigDict

class DomainEntity(BaseModel):
    """Base class for all domain entities."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict without absent (None) fields."""
        return self.model_dump(mode="json", exclude_none=True)
