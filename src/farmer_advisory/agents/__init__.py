"""
Dataset Agents
==============

Query classification plus five dataset agents coordinated by an orchestrator:
- Weather Agent: weather observations and forecasts (needs a location)
- Crop Advisory Agent: sowing/harvest calendars and pest alerts
- Market Price Agent: mandi prices
- Soil Health Agent: Soil Health Card results (needs a location)
- Government Scheme Agent: central agriculture schemes
- Orchestrator: runs the selected agents concurrently and merges results

Agents hold read-only record tables and keep no state between calls.
"""

from .schemas import (
    QueryType,
    LocationInfo,
    QueryContext,
    WeatherData,
    CropAdvisory,
    MarketPrice,
    SoilHealth,
    GovernmentScheme,
    DatasetResponse,
)
from .query_parser import (
    classify_query,
    determine_query_type,
    parse_crop_from_query,
    parse_location_from_query,
)
from .orchestrator import DatasetOrchestrator, aggregate, retrieve_for_query
