"""
Unit tests for the dataset agents
"""

import pytest
from unittest.mock import patch

from farmer_advisory.agents.crop_advisory_agent import CropAdvisoryAgent
from farmer_advisory.agents.market_price_agent import MarketPriceAgent
from farmer_advisory.agents.scheme_agent import GovernmentSchemeAgent
from farmer_advisory.agents.schemas import (
    LocationInfo,
    QueryContext,
    QueryType,
    WeatherData,
)
from farmer_advisory.agents.soil_health_agent import SoilHealthAgent
from farmer_advisory.agents.weather_agent import WeatherAgent

ALLAHABAD = LocationInfo(district="Allahabad", state="Uttar Pradesh")
DELHI = LocationInfo(district="Delhi", state="Delhi")


def _context(query_type=QueryType.GENERAL, location=None, crop=None):
    return QueryContext(query_type=query_type, location=location, crop=crop)


class TestWeatherAgent:
    """Test cases for weather agent."""

    def test_matches_district(self):
        result = WeatherAgent().fetch(_context(QueryType.WEATHER, ALLAHABAD))

        assert len(result) == 1
        assert result[0].location == "Allahabad, UP"
        assert result[0].source == "Indian Meteorological Department"

    def test_matches_state(self):
        result = WeatherAgent().fetch(_context(location=LocationInfo("Andheri", "Maharashtra")))

        assert [r.location for r in result] == ["Mumbai, Maharashtra"]

    def test_no_match(self):
        assert WeatherAgent().fetch(_context(location=DELHI)) == []

    def test_requires_location(self):
        with pytest.raises(ValueError):
            WeatherAgent().fetch(_context(QueryType.WEATHER))

    def test_injected_records(self):
        record = WeatherData(
            location="Jaipur, Rajasthan", temperature=40, humidity=20, rainfall=0,
            wind_speed=15, forecast="Hot and dry", date="2024-05-01T00:00:00+00:00",
            source="Test Station",
        )
        agent = WeatherAgent(records=[record])

        assert agent.records == (record,)
        assert agent.fetch(_context(location=LocationInfo("Jaipur", "Rajasthan"))) == [record]

    @patch('farmer_advisory.agents.base.time')
    def test_simulated_latency(self, mock_time):
        WeatherAgent(simulate_latency=True).fetch(_context(location=ALLAHABAD))
        mock_time.sleep.assert_called_once_with(0.5)

    @patch('farmer_advisory.agents.base.time')
    def test_no_latency_by_default(self, mock_time):
        WeatherAgent(simulate_latency=False).fetch(_context(location=ALLAHABAD))
        mock_time.sleep.assert_not_called()


class TestCropAdvisoryAgent:
    """Test cases for crop advisory agent."""

    def test_no_filters_returns_all(self):
        result = CropAdvisoryAgent().fetch(_context(QueryType.CROP))
        assert [a.crop for a in result] == ["Paddy/Rice", "Wheat"]

    def test_filter_by_crop(self):
        result = CropAdvisoryAgent().fetch(_context(crop="wheat"))
        assert [a.region for a in result] == ["Punjab"]

    def test_filter_by_state(self):
        result = CropAdvisoryAgent().fetch(_context(location=ALLAHABAD))
        assert [a.crop for a in result] == ["Paddy/Rice"]
        assert result[0].pest_alerts == ("Brown Plant Hopper", "Stem Borer")

    def test_filter_by_state_and_crop(self):
        agent = CropAdvisoryAgent()
        assert len(agent.fetch(_context(location=ALLAHABAD, crop="rice"))) == 1
        assert agent.fetch(_context(location=ALLAHABAD, crop="wheat")) == []

    def test_unknown_state(self):
        result = CropAdvisoryAgent().fetch(_context(location=LocationInfo("Springfield", "Unknown")))
        assert result == []


class TestMarketPriceAgent:
    """Test cases for market price agent."""

    def test_filter_by_crop(self):
        result = MarketPriceAgent().fetch(_context(QueryType.MARKET, crop="wheat"))

        assert len(result) == 1
        assert result[0].market == "Delhi Mandi"
        assert result[0].price == 2200
        assert result[0].trend == "stable"

    def test_filter_by_location(self):
        result = MarketPriceAgent().fetch(_context(location=ALLAHABAD))
        assert [p.crop for p in result] == ["Rice"]

    def test_crop_then_location(self):
        agent = MarketPriceAgent()
        assert len(agent.fetch(_context(crop="wheat", location=DELHI))) == 1
        assert agent.fetch(_context(crop="wheat", location=ALLAHABAD)) == []

    def test_no_filters_returns_all(self):
        assert len(MarketPriceAgent().fetch(_context())) == 2


class TestSoilHealthAgent:
    """Test cases for soil health agent."""

    def test_matches_district(self):
        result = SoilHealthAgent().fetch(_context(QueryType.SOIL, ALLAHABAD))

        assert len(result) == 1
        assert result[0].ph == 7.2
        assert result[0].source == "Soil Health Card Scheme"

    def test_does_not_match_on_state(self):
        result = SoilHealthAgent().fetch(_context(location=LocationInfo("Lucknow", "Uttar Pradesh")))
        assert result == []

    def test_requires_location(self):
        with pytest.raises(ValueError):
            SoilHealthAgent().fetch(_context(QueryType.SOIL))


class TestGovernmentSchemeAgent:
    """Test cases for government scheme agent."""

    def test_returns_all_schemes(self):
        result = GovernmentSchemeAgent().fetch(_context(QueryType.SCHEME))
        assert [s.name for s in result] == ["PM-KISAN", "Pradhan Mantri Fasal Bima Yojana"]

    def test_ignores_context(self):
        agent = GovernmentSchemeAgent()
        assert agent.fetch(_context(location=DELHI, crop="cotton")) == agent.fetch(_context())

    def test_deadline_optional(self):
        result = GovernmentSchemeAgent().fetch(_context())
        assert all(s.deadline is None for s in result)
