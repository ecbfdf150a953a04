"""
Market Price Agent
==================

Serves mandi prices (eNAM, state mandi boards, AGMARKNET).
Filters by crop first, then by market name against district or state.
"""

from datetime import datetime, timezone
from typing import List

from .base import DatasetAgent, contains_text, matches_location
from .schemas import MarketPrice, QueryContext, QueryType

SOURCE = "eNAM - National Agriculture Market"

_QUOTED_AT = datetime.now(timezone.utc).isoformat()

MARKET_PRICES = (
    MarketPrice(
        crop="Rice",
        market="Allahabad Mandi",
        price=2850,
        unit="per quintal",
        date=_QUOTED_AT,
        trend="up",
        source=SOURCE,
    ),
    MarketPrice(
        crop="Wheat",
        market="Delhi Mandi",
        price=2200,
        unit="per quintal",
        date=_QUOTED_AT,
        trend="stable",
        source=SOURCE,
    ),
)


class MarketPriceAgent(DatasetAgent):
    domain = QueryType.MARKET
    field = "market_prices"
    source = SOURCE
    simulated_latency_s = 0.4

    def default_records(self):
        return MARKET_PRICES

    def _filter(self, context: QueryContext) -> List[MarketPrice]:
        prices = list(self.records)

        if context.crop:
            prices = [p for p in prices if contains_text(p.crop, context.crop)]

        if context.location:
            prices = [p for p in prices if matches_location(p.market, context.location)]

        return prices
