"""Static tool registry: names, descriptions and input schemas.

The schemas are what the MCP client sees on ``tools/list``. Defaults are not
declared here; the request builders apply them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from mcp.types import Tool

from .builders import (
    UpstreamRequest,
    build_all_news,
    build_players,
    build_projections,
    build_rankings,
    build_sport_news,
)
from .models import (
    MAX_NEWS_LIMIT,
    NEWS_CATEGORIES,
    PROJECTIONS_SPORTS,
    RANKINGS_SPORTS,
    SCORING_TYPES,
    SPORTS,
    AllNewsArgs,
    PlayersArgs,
    ProjectionsArgs,
    RankingsArgs,
    SportNewsArgs,
    ToolArgs,
)


def _limit_schema() -> dict[str, Any]:
    return {
        "type": "number",
        "description": f"Number of news items to return (max {MAX_NEWS_LIMIT})",
        "minimum": 1,
        "maximum": MAX_NEWS_LIMIT,
    }


def _category_schema(description: str) -> dict[str, Any]:
    return {"type": "string", "enum": list(NEWS_CATEGORIES), "description": description}


@dataclass(frozen=True)
class ToolSpec:
    """One registered tool: what the client sees plus how to build its request."""

    name: str
    description: str
    input_schema: dict[str, Any]
    args_model: type[ToolArgs]
    builder: Callable[[Any], UpstreamRequest]

    def definition(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_sport_news",
        description="Get news for a specific sport",
        input_schema={
            "type": "object",
            "properties": {
                "sport": {
                    "type": "string",
                    "enum": list(SPORTS),
                    "description": "Sport to get news for",
                },
                "limit": _limit_schema(),
                "category": _category_schema("Type of news to show"),
            },
            "required": ["sport"],
        },
        args_model=SportNewsArgs,
        builder=build_sport_news,
    ),
    ToolSpec(
        name="get_players",
        description="Get player information for a specific sport",
        input_schema={
            "type": "object",
            "properties": {
                "sport": {
                    "type": "string",
                    "enum": list(SPORTS),
                    "description": "Sport to get players for",
                },
                "playerId": {
                    "type": "string",
                    "description": "Filter by specific player ID",
                },
            },
            "required": ["sport"],
        },
        args_model=PlayersArgs,
        builder=build_players,
    ),
    ToolSpec(
        name="get_rankings",
        description="Get consensus rankings for a sport",
        input_schema={
            "type": "object",
            "properties": {
                "sport": {
                    "type": "string",
                    "enum": list(RANKINGS_SPORTS),
                    "description": "Sport to get rankings for",
                },
                "position": {
                    "type": "string",
                    "description": "Position to filter by",
                },
                "scoring": {
                    "type": "string",
                    "enum": list(SCORING_TYPES),
                    "description": "Scoring type (for NFL)",
                },
            },
            "required": ["sport"],
        },
        args_model=RankingsArgs,
        builder=build_rankings,
    ),
    ToolSpec(
        name="get_projections",
        description="Get player projections for a sport",
        input_schema={
            "type": "object",
            "properties": {
                "sport": {
                    "type": "string",
                    "enum": list(PROJECTIONS_SPORTS),
                    "description": "Sport to get projections for",
                },
                "season": {
                    "type": "string",
                    "description": "Season year",
                },
                "week": {
                    "type": "string",
                    "description": "Week number (for NFL)",
                },
                "position": {
                    "type": "string",
                    "description": "Position to filter by",
                },
            },
            "required": ["sport", "season"],
        },
        args_model=ProjectionsArgs,
        builder=build_projections,
    ),
    ToolSpec(
        name="get_all_news",
        description="Get all news from FantasyPros",
        input_schema={
            "type": "object",
            "properties": {
                "limit": _limit_schema(),
                "category": _category_schema("Type of news items to show"),
            },
        },
        args_model=AllNewsArgs,
        builder=build_all_news,
    ),
)

TOOLS_BY_NAME: dict[str, ToolSpec] = {spec.name: spec for spec in TOOL_SPECS}

if len(TOOLS_BY_NAME) != len(TOOL_SPECS):
    raise RuntimeError("duplicate tool name in TOOL_SPECS")


def get_tool_spec(name: str) -> ToolSpec | None:
    return TOOLS_BY_NAME.get(name)


def list_tool_definitions() -> list[Tool]:
    """All tools in registration order, as served on ``tools/list``."""
    return [spec.definition() for spec in TOOL_SPECS]
