"""
Analytical result bundle.
Collects the per-domain outputs; any domain may still be missing.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from sitmap.models.outputs import (
    CivilianImpactOutput,
    EconomyOutput,
    FoodSupplyOutput,
    GeopoliticsOutput,
    InfrastructureOutput,
)


class Domain(str, Enum):
    """Analytical domains."""
    GEOPOLITICS = "geopolitics"
    ECONOMY = "economy"
    FOOD_SUPPLY = "food_supply"
    INFRASTRUCTURE = "infrastructure"
    CIVILIAN_IMPACT = "civilian_impact"


DomainOutput = Union[
    GeopoliticsOutput,
    EconomyOutput,
    FoodSupplyOutput,
    InfrastructureOutput,
    CivilianImpactOutput,
]


class AnalyticalResultBundle(BaseModel):
    """
    Per-domain analytical outputs.
    A domain set to None has not produced output yet.
    """
    model_config = ConfigDict(frozen=True)

    geopolitics: Optional[GeopoliticsOutput] = None
    economy: Optional[EconomyOutput] = None
    food_supply: Optional[FoodSupplyOutput] = None
    infrastructure: Optional[InfrastructureOutput] = None
    civilian_impact: Optional[CivilianImpactOutput] = None

    def get(self, domain: Domain) -> Optional[DomainOutput]:
        """Get the output for a domain, or None if not yet available."""
        return getattr(self, Domain(domain).value)

    def has(self, domain: Domain) -> bool:
        return self.get(domain) is not None

    def available_domains(self) -> list[Domain]:
        """Get the domains that have produced output."""
        return [domain for domain in Domain if self.has(domain)]

    def is_empty(self) -> bool:
        return not self.available_domains()

    def with_output(
        self, domain: Domain, output: Optional[DomainOutput]
    ) -> "AnalyticalResultBundle":
        """Return a new bundle with one domain replaced."""
        return self.model_copy(update={Domain(domain).value: output})
