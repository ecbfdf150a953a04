"""
Dataset Agent Base
------------------
Common shape of the dataset agents: a read-only record table, the query
domain it serves, and the provenance string reported when it contributes.
"""

import time
from typing import Iterable, List, Optional

from farmer_advisory import config
from farmer_advisory.utils.logger import logger
from .schemas import LocationInfo, QueryContext, QueryType


class DatasetAgent:
    """
    Base class for dataset agents.

    Subclasses set the class attributes and implement ``_filter``.
    Records are stored as a tuple and never modified after construction.
    """

    domain: QueryType = None
    field: str = None
    source: str = None
    requires_location: bool = False
    simulated_latency_s: float = 0.0

    def __init__(self, records: Optional[Iterable] = None, simulate_latency: Optional[bool] = None):
        self._records = tuple(records if records is not None else self.default_records())
        self._simulate_latency = config.SIMULATE_LATENCY if simulate_latency is None else simulate_latency

    def default_records(self) -> Iterable:
        raise NotImplementedError

    @property
    def records(self) -> tuple:
        return self._records

    def fetch(self, context: QueryContext) -> List:
        """Return the records relevant to the query context."""
        if self.requires_location and context.location is None:
            raise ValueError(f"{self.domain.value} agent requires a location")

        if self._simulate_latency:
            time.sleep(self.simulated_latency_s)

        results = self._filter(context)
        logger.info(f"{type(self).__name__} returned {len(results)} record(s)")
        return results

    def _filter(self, context: QueryContext) -> List:
        raise NotImplementedError


def contains_text(text: str, fragment: str) -> bool:
    return fragment.lower() in text.lower()


def matches_location(text: str, location: LocationInfo) -> bool:
    """True when the text mentions the district or the state."""
    return contains_text(text, location.district) or contains_text(text, location.state)
