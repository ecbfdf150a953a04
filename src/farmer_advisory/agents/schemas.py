"""
Dataset Schemas
---------------
Query context, dataset records and the merged response returned to callers.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, Any, List, Optional, Tuple


class QueryType(Enum):
    """Kinds of farmer query, one per dataset agent plus general."""
    WEATHER = "weather"
    CROP = "crop"
    MARKET = "market"
    SOIL = "soil"
    SCHEME = "scheme"
    GENERAL = "general"


@dataclass(frozen=True)
class LocationInfo:
    district: str
    state: str


@dataclass(frozen=True)
class QueryContext:
    """Structured view of a farmer query, built fresh for every query."""
    query_type: QueryType = QueryType.GENERAL
    location: Optional[LocationInfo] = None
    crop: Optional[str] = None
    language: str = "en"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query_type": self.query_type.value,
            "location": asdict(self.location) if self.location else None,
            "crop": self.crop,
            "language": self.language,
        }


@dataclass(frozen=True)
class WeatherData:
    location: str
    temperature: float    # °C
    humidity: float       # %
    rainfall: float       # mm
    wind_speed: float     # km/h
    forecast: str
    date: str
    source: str


@dataclass(frozen=True)
class CropAdvisory:
    crop: str
    region: str
    sowing_time: str
    harvest_time: str
    pest_alerts: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    date: str
    source: str


@dataclass(frozen=True)
class MarketPrice:
    crop: str
    market: str
    price: float
    unit: str
    date: str
    trend: str  # up, down, stable
    source: str


@dataclass(frozen=True)
class SoilHealth:
    region: str
    ph: float
    nitrogen: float       # kg/ha
    phosphorus: float     # kg/ha
    potassium: float      # kg/ha
    organic_matter: float  # %
    recommendations: Tuple[str, ...]
    source: str


@dataclass(frozen=True)
class GovernmentScheme:
    name: str
    description: str
    eligibility: Tuple[str, ...]
    benefits: str
    application_process: str
    source: str
    deadline: Optional[str] = None


# Response fields in the order their sources are reported
RESPONSE_FIELDS = ("weather", "crop_advisories", "market_prices", "soil_health", "schemes")


@dataclass
class DatasetResponse:
    """
    Merged output of the dataset agents.

    A data field is left as None unless its agent was selected and succeeded.
    ``sources`` has one entry per populated field, in RESPONSE_FIELDS order.
    ``errors`` records agents that failed; it never affects ``sources``.
    """
    last_updated: str
    weather: Optional[List[WeatherData]] = None
    crop_advisories: Optional[List[CropAdvisory]] = None
    market_prices: Optional[List[MarketPrice]] = None
    soil_health: Optional[List[SoilHealth]] = None
    schemes: Optional[List[GovernmentScheme]] = None
    sources: List[str] = field(default_factory=list)
    errors: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; absent data fields and an empty error list are omitted."""
        result: Dict[str, Any] = {}
        for name in RESPONSE_FIELDS:
            records = getattr(self, name)
            if records is not None:
                result[name] = [_record_to_dict(r) for r in records]
        result["sources"] = list(self.sources)
        result["last_updated"] = self.last_updated
        if self.errors:
            result["errors"] = [dict(e) for e in self.errors]
        return result


def _record_to_dict(record) -> Dict[str, Any]:
    data = asdict(record)
    # tuple fields -> JSON arrays
    return {k: list(v) if isinstance(v, tuple) else v for k, v in data.items()}
