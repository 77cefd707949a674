"""Footprint result and category assessment models using Pydantic."""

from enum import Enum
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

class CategoryTier(str, Enum):
    """Ordinal severity band of an annual footprint."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

class CategoryAssessment(BaseModel):
    """Band, badge colour and description derived from a footprint total."""
    model_config = ConfigDict(frozen=True)

    tier: CategoryTier
    label: str
    color: str
    description: str

class FootprintResult(BaseModel):
    """Annual footprint in whole kilograms CO2e, with its unrounded parts."""
    model_config = ConfigDict(frozen=True)

    total_kg: int = Field(ge=0)
    breakdown: Dict[str, float] = Field(default_factory=dict)

    @property
    def tonnes(self) -> float:
        return self.total_kg / 1000
