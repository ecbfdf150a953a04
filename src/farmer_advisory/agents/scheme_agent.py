"""
Government Scheme Agent
=======================

Serves central agriculture schemes (DBT Agriculture portal). Every scheme
is returned regardless of the query context.
"""

from typing import List

from .base import DatasetAgent
from .schemas import GovernmentScheme, QueryContext, QueryType

SOURCE = "Ministry of Agriculture & Farmers Welfare"

GOVERNMENT_SCHEMES = (
    GovernmentScheme(
        name="PM-KISAN",
        description="Direct income support to farmers",
        eligibility=("Small and marginal farmers", "Land ownership required"),
        benefits="₹6000 per year in three installments",
        application_process="Online registration through PM-KISAN portal",
        source=SOURCE,
    ),
    GovernmentScheme(
        name="Pradhan Mantri Fasal Bima Yojana",
        description="Crop insurance scheme for farmers",
        eligibility=("All farmers", "Covers notified crops"),
        benefits="Insurance coverage against crop loss",
        application_process="Through banks, CSCs, or insurance companies",
        source=SOURCE,
    ),
)


class GovernmentSchemeAgent(DatasetAgent):
    domain = QueryType.SCHEME
    field = "schemes"
    source = SOURCE
    simulated_latency_s = 0.2

    def default_records(self):
        return GOVERNMENT_SCHEMES

    def _filter(self, context: QueryContext) -> List[GovernmentScheme]:
        return list(self.records)
