"""Tests for the static tool registry."""

from __future__ import annotations

import pytest

from fantasypros_mcp.tools import TOOL_SPECS, get_tool_spec, list_tool_definitions

EXPECTED_REQUIRED = {
    "get_sport_news": ["sport"],
    "get_players": ["sport"],
    "get_rankings": ["sport"],
    "get_projections": ["sport", "season"],
    "get_all_news": [],
}

NEWS_CATEGORIES = ["injury", "recap", "transaction", "rumor", "breaking"]


@pytest.fixture
def tools_by_name():
    return {tool.name: tool for tool in list_tool_definitions()}


class TestToolListing:
    """Test list_tool_definitions()."""

    def test_exactly_five_tools(self, tools_by_name) -> None:
        """The registry holds exactly the five documented tools."""
        assert len(list_tool_definitions()) == 5
        assert set(tools_by_name) == set(EXPECTED_REQUIRED)

    def test_names_unique(self) -> None:
        """No two tools share a name."""
        names = [spec.name for spec in TOOL_SPECS]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("name,required", sorted(EXPECTED_REQUIRED.items()))
    def test_required_fields(self, tools_by_name, name, required) -> None:
        """Each schema declares its required fields."""
        schema = tools_by_name[name].inputSchema
        assert schema["type"] == "object"
        assert schema.get("required", []) == required

    def test_descriptions_present(self, tools_by_name) -> None:
        """Every tool has a description."""
        assert all(tool.description for tool in tools_by_name.values())

    def test_sport_enums(self, tools_by_name) -> None:
        """Sport enums differ per tool."""

        def sports(name):
            return tools_by_name[name].inputSchema["properties"]["sport"]["enum"]

        assert sports("get_sport_news") == ["nfl", "mlb", "nba", "nhl"]
        assert sports("get_players") == ["nfl", "mlb", "nba", "nhl"]
        assert sports("get_rankings") == ["nfl", "nba"]
        assert sports("get_projections") == ["nfl", "mlb", "nba"]
        assert "sport" not in tools_by_name["get_all_news"].inputSchema["properties"]

    @pytest.mark.parametrize("name", ["get_sport_news", "get_all_news"])
    def test_news_constraints(self, tools_by_name, name) -> None:
        """News tools bound limit to [1, 25] and enumerate categories."""
        props = tools_by_name[name].inputSchema["properties"]
        assert props["limit"]["minimum"] == 1
        assert props["limit"]["maximum"] == 25
        assert props["category"]["enum"] == NEWS_CATEGORIES

    def test_scoring_enum(self, tools_by_name) -> None:
        """Rankings scoring is STD, PPR or HALF."""
        props = tools_by_name["get_rankings"].inputSchema["properties"]
        assert props["scoring"]["enum"] == ["STD", "PPR", "HALF"]

    def test_player_id_property(self, tools_by_name) -> None:
        """Players take a string playerId."""
        props = tools_by_name["get_players"].inputSchema["properties"]
        assert props["playerId"]["type"] == "string"

    def test_projection_optional_fields(self, tools_by_name) -> None:
        """Projections declare sport, season, week and position."""
        props = tools_by_name["get_projections"].inputSchema["properties"]
        assert set(props) == {"sport", "season", "week", "position"}

    def test_no_defaults_in_schema(self, tools_by_name) -> None:
        """Defaults live in the builders, not the schemas."""
        for tool in tools_by_name.values():
            for prop in tool.inputSchema["properties"].values():
                assert "default" not in prop


class TestGetToolSpec:
    """Test lookup by name."""

    def test_known(self) -> None:
        """Registered names resolve to their spec."""
        assert get_tool_spec("get_players").name == "get_players"

    def test_unknown(self) -> None:
        """Unregistered names resolve to None."""
        assert get_tool_spec("get_weather") is None
