"""
Dataset Orchestrator
====================

Decides which dataset agents a query context needs, runs them concurrently
and merges their results into one DatasetResponse.

- An agent runs when the query type is its domain or "general"
- Weather and soil agents also need a location
- A failing agent only loses its own section and source entry
- Sections and sources always follow weather → crop → market → soil → scheme,
  whatever order the agents finish in
- Any unexpected error yields an empty response instead of raising
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from farmer_advisory import config
from farmer_advisory.utils.logger import logger
from .base import DatasetAgent
from .crop_advisory_agent import CropAdvisoryAgent
from .market_price_agent import MarketPriceAgent
from .query_parser import classify_query
from .scheme_agent import GovernmentSchemeAgent
from .schemas import DatasetResponse, QueryContext, QueryType
from .soil_health_agent import SoilHealthAgent
from .weather_agent import WeatherAgent


DOMAIN_ORDER = (
    QueryType.WEATHER,
    QueryType.CROP,
    QueryType.MARKET,
    QueryType.SOIL,
    QueryType.SCHEME,
)


def default_agents() -> Tuple[DatasetAgent, ...]:
    return (
        WeatherAgent(),
        CropAdvisoryAgent(),
        MarketPriceAgent(),
        SoilHealthAgent(),
        GovernmentSchemeAgent(),
    )


class DatasetOrchestrator:
    """
    Fans a query context out to the dataset agents and folds the results.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, agents: Optional[Sequence[DatasetAgent]] = None, max_workers: Optional[int] = None):
        self.agents = tuple(agents) if agents is not None else default_agents()
        self.max_workers = max_workers or config.AGGREGATOR_MAX_WORKERS

    def select_agents(self, context: QueryContext) -> List[DatasetAgent]:
        """Agents to invoke for the context, in domain order."""
        selected = [agent for agent in self.agents if _should_invoke(agent, context)]
        return sorted(selected, key=lambda agent: DOMAIN_ORDER.index(agent.domain))

    def retrieve_relevant_data(self, context: QueryContext) -> DatasetResponse:
        try:
            selected = self.select_agents(context)
            logger.info(
                f"Dataset orchestrator: query_type={context.query_type.value}, "
                f"agents={[agent.domain.value for agent in selected]}"
            )

            response = DatasetResponse(last_updated=_now())
            if not selected:
                return response

            outcomes = self._run_agents(selected, context)

            for index, agent in enumerate(selected):
                succeeded, value = outcomes[index]
                if succeeded:
                    setattr(response, agent.field, value)
                    response.sources.append(agent.source)
                else:
                    response.errors.append({"agent": agent.domain.value, "error": str(value)})

            logger.info(f"Dataset orchestrator completed. Sources: {response.sources}")
            return response

        except Exception as e:
            logger.error(f"Error retrieving dataset information: {e}")
            return DatasetResponse(last_updated=_now())

    def _run_agents(self, agents: List[DatasetAgent], context: QueryContext) -> Dict[int, Tuple[bool, Any]]:
        """
        Run every agent on the thread pool and wait for all of them.

        Returns:
            Map of agent index to (succeeded, records or exception)
        """
        outcomes: Dict[int, Tuple[bool, Any]] = {}

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(agents))) as ex:
            futures_map = {ex.submit(agent.fetch, context): index for index, agent in enumerate(agents)}

            for fut in as_completed(futures_map):
                index = futures_map[fut]
                try:
                    outcomes[index] = (True, fut.result())
                except Exception as e:
                    logger.error(f"{type(agents[index]).__name__} failed: {e}")
                    outcomes[index] = (False, e)

        return outcomes


def _should_invoke(agent: DatasetAgent, context: QueryContext) -> bool:
    if context.query_type not in (agent.domain, QueryType.GENERAL):
        return False
    if agent.requires_location and context.location is None:
        return False
    return True


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# Lazy initialization
_orchestrator = None


def get_orchestrator() -> DatasetOrchestrator:
    """Lazily build the shared orchestrator over the built-in agents."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = DatasetOrchestrator()
    return _orchestrator


def aggregate(context: QueryContext) -> DatasetResponse:
    return get_orchestrator().retrieve_relevant_data(context)


def retrieve_for_query(query: str, language: str = "en") -> Dict[str, Any]:
    """
    Classify a farmer query and gather its dataset context.

    Returns:
        Dict with the query, language, parsed context and ``dataset_info``
        (the serialized DatasetResponse)
    """
    context = classify_query(query, language)
    response = aggregate(context)
    return {
        "query": query,
        "language": language,
        "context": context.to_dict(),
        "dataset_info": response.to_dict(),
    }
