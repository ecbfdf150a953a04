"""
Crop Advisory Agent
===================

Serves sowing/harvest calendars, pest alerts and recommendations per crop
and region (state agriculture departments, ICAR, KVK advisories).

Filtering:
- Location given → region must mention the state
- Crop given → advisory crop must mention the crop
"""

from datetime import datetime, timezone
from typing import List

from .base import DatasetAgent, contains_text
from .schemas import CropAdvisory, QueryContext, QueryType

SOURCE = "State Agriculture Departments"

_ISSUED_AT = datetime.now(timezone.utc).isoformat()

CROP_ADVISORIES = (
    CropAdvisory(
        crop="Paddy/Rice",
        region="Uttar Pradesh",
        sowing_time="June-July (Kharif season)",
        harvest_time="October-November",
        pest_alerts=("Brown Plant Hopper", "Stem Borer"),
        recommendations=(
            "Prepare nursery beds with proper drainage",
            "Use certified seeds for better yield",
            "Apply organic manure before sowing",
        ),
        date=_ISSUED_AT,
        source="Department of Agriculture, UP",
    ),
    CropAdvisory(
        crop="Wheat",
        region="Punjab",
        sowing_time="November-December (Rabi season)",
        harvest_time="April-May",
        pest_alerts=("Aphids", "Rust disease"),
        recommendations=(
            "Ensure proper soil moisture before sowing",
            "Use recommended fertilizer doses",
            "Monitor for pest attacks regularly",
        ),
        date=_ISSUED_AT,
        source="Punjab Agricultural University",
    ),
)


class CropAdvisoryAgent(DatasetAgent):
    domain = QueryType.CROP
    field = "crop_advisories"
    source = SOURCE
    simulated_latency_s = 0.3

    def default_records(self):
        return CROP_ADVISORIES

    def _filter(self, context: QueryContext) -> List[CropAdvisory]:
        advisories = list(self.records)

        if context.location:
            advisories = [a for a in advisories if contains_text(a.region, context.location.state)]

        if context.crop:
            advisories = [a for a in advisories if contains_text(a.crop, context.crop)]

        return advisories
