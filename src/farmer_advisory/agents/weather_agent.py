"""
Weather Agent
=============

Serves current weather observations and short forecasts for a location.
Records are matched on district or state name.

Production sources would be the IMD API or an India-focused
weather provider; the table below stands in for them.
"""

from datetime import datetime, timezone
from typing import List

from .base import DatasetAgent, matches_location
from .schemas import QueryContext, QueryType, WeatherData

SOURCE = "Indian Meteorological Department"

_OBSERVED_AT = datetime.now(timezone.utc).isoformat()

WEATHER_RECORDS = (
    WeatherData(
        location="Allahabad, UP",
        temperature=28,
        humidity=65,
        rainfall=2.5,
        wind_speed=12,
        forecast="Partly cloudy with light rain expected",
        date=_OBSERVED_AT,
        source=SOURCE,
    ),
    WeatherData(
        location="Mumbai, Maharashtra",
        temperature=32,
        humidity=78,
        rainfall=0,
        wind_speed=8,
        forecast="Clear skies, hot and humid",
        date=_OBSERVED_AT,
        source=SOURCE,
    ),
)


class WeatherAgent(DatasetAgent):
    domain = QueryType.WEATHER
    field = "weather"
    source = SOURCE
    requires_location = True
    simulated_latency_s = 0.5

    def default_records(self):
        return WEATHER_RECORDS

    def _filter(self, context: QueryContext) -> List[WeatherData]:
        return [r for r in self.records if matches_location(r.location, context.location)]
