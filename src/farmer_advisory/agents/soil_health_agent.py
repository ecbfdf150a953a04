"""
Soil Health Agent
=================

Serves Soil Health Card results (pH, NPK, organic matter) per district.
"""

from typing import List

from .base import DatasetAgent, contains_text
from .schemas import QueryContext, QueryType, SoilHealth

SOURCE = "Soil Health Card Scheme"

SOIL_HEALTH_RECORDS = (
    SoilHealth(
        region="Allahabad District",
        ph=7.2,
        nitrogen=280,
        phosphorus=45,
        potassium=320,
        organic_matter=1.8,
        recommendations=(
            "Soil pH is optimal for most crops",
            "Consider adding organic matter",
            "Phosphorus levels are adequate",
        ),
        source=SOURCE,
    ),
)


class SoilHealthAgent(DatasetAgent):
    domain = QueryType.SOIL
    field = "soil_health"
    source = SOURCE
    requires_location = True
    simulated_latency_s = 0.35

    def default_records(self):
        return SOIL_HEALTH_RECORDS

    def _filter(self, context: QueryContext) -> List[SoilHealth]:
        return [r for r in self.records if contains_text(r.region, context.location.district)]
