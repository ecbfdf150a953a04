"""
Query Parser
============

Turns a free-text farmer query into a QueryContext:
- Query type from keyword rules checked in priority order
- Crop from a fixed crop vocabulary
- Location from "in/at/from <place>" phrases, with district → state lookup

Nothing here fails: an unmatched query simply leaves optional fields unset.
"""

import re
from typing import Optional, Tuple

from farmer_advisory.utils.logger import logger
from .schemas import LocationInfo, QueryContext, QueryType


# (keywords, query type) pairs; first rule with a matching keyword wins
QUERY_TYPE_RULES: Tuple[Tuple[Tuple[str, ...], QueryType], ...] = (
    (("weather", "rain", "temperature"), QueryType.WEATHER),
    (("price", "market", "mandi"), QueryType.MARKET),
    (("soil", "ph", "fertility"), QueryType.SOIL),
    (("scheme", "subsidy", "loan"), QueryType.SCHEME),
    (("crop", "sow", "plant", "harvest"), QueryType.CROP),
)

KNOWN_CROPS = (
    "rice", "paddy", "wheat", "maize", "cotton",
    "sugarcane", "soybean", "tomato", "potato", "onion",
)

DISTRICT_STATE_MAP = {
    "allahabad": "Uttar Pradesh",
    "prayagraj": "Uttar Pradesh",
    "lucknow": "Uttar Pradesh",
    "kanpur": "Uttar Pradesh",
    "mumbai": "Maharashtra",
    "pune": "Maharashtra",
    "nagpur": "Maharashtra",
    "delhi": "Delhi",
    "bangalore": "Karnataka",
    "bengaluru": "Karnataka",
    "chennai": "Tamil Nadu",
    "hyderabad": "Telangana",
    "kolkata": "West Bengal",
    "ahmedabad": "Gujarat",
    "jaipur": "Rajasthan",
    "chandigarh": "Punjab",
    "ludhiana": "Punjab",
}

UNKNOWN_STATE = "Unknown"

# "in Allahabad, Uttar Pradesh"
_DISTRICT_STATE_PATTERN = re.compile(
    r"\b(?:in|at|from)\s+([a-z][a-z\s]*?)\s*,\s*([a-z][a-z\s]*)", re.IGNORECASE
)
# "in Delhi"
_PLACE_PATTERN = re.compile(r"\b(?:in|at|from)\s+([a-z][a-z\s]*)", re.IGNORECASE)

_CROP_PATTERNS = tuple(
    (crop, re.compile(r"\b" + crop, re.IGNORECASE)) for crop in KNOWN_CROPS
)


def determine_query_type(query: str) -> QueryType:
    """Return the first query type whose keywords appear in the query."""
    query_lower = (query or "").lower()
    for keywords, query_type in QUERY_TYPE_RULES:
        if any(keyword in query_lower for keyword in keywords):
            return query_type
    return QueryType.GENERAL


def parse_crop_from_query(query: str) -> Optional[str]:
    """
    Return the first known crop mentioned in the query.

    Crops are checked in vocabulary order and must start a word, so
    "prices" is not read as "rice" while "tomatoes" still gives "tomato".
    """
    query = query or ""
    for crop, pattern in _CROP_PATTERNS:
        if pattern.search(query):
            return crop
    return None


def parse_location_from_query(query: str) -> Optional[LocationInfo]:
    query = query or ""

    match = _DISTRICT_STATE_PATTERN.search(query)
    if match:
        return LocationInfo(district=match.group(1).strip(), state=match.group(2).strip())

    match = _PLACE_PATTERN.search(query)
    if match:
        district = match.group(1).strip()
        return LocationInfo(district=district, state=infer_state_from_district(district))

    return None


def infer_state_from_district(district: str) -> str:
    return DISTRICT_STATE_MAP.get(district.lower(), UNKNOWN_STATE)


def classify_query(query: str, language: str = "en") -> QueryContext:
    """
    Build the query context for a farmer query.

    Args:
        query: Free-text query
        language: Caller's language tag, carried along for downstream use

    Returns:
        QueryContext with query type and any crop/location found
    """
    context = QueryContext(
        query_type=determine_query_type(query),
        location=parse_location_from_query(query),
        crop=parse_crop_from_query(query),
        language=language or "en",
    )
    logger.info(
        f"Classified query: type={context.query_type.value}, "
        f"crop={context.crop}, location={context.location}"
    )
    return context
