"""Per-tool argument models.

Tool calls arrive as loose JSON mappings. Each tool gets an explicit model so
required fields, allowed values and bounds are checked before anything is sent
upstream. Optional fields are ``None`` when the caller left them out (or sent
an empty string), which is what the request builders key off.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NewsSport = Literal["nfl", "mlb", "nba", "nhl"]
RankingsSport = Literal["nfl", "nba"]
ProjectionsSport = Literal["nfl", "mlb", "nba"]
NewsCategory = Literal["injury", "recap", "transaction", "rumor", "breaking"]
Scoring = Literal["STD", "PPR", "HALF"]

SPORTS: tuple[str, ...] = ("nfl", "mlb", "nba", "nhl")
RANKINGS_SPORTS: tuple[str, ...] = ("nfl", "nba")
PROJECTIONS_SPORTS: tuple[str, ...] = ("nfl", "mlb", "nba")
NEWS_CATEGORIES: tuple[str, ...] = ("injury", "recap", "transaction", "rumor", "breaking")
SCORING_TYPES: tuple[str, ...] = ("STD", "PPR", "HALF")

MAX_NEWS_LIMIT = 25


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def _to_text(value: Any) -> Any:
    # ids, seasons and weeks may come in as JSON numbers
    value = _blank_to_none(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


class ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class _NewsArgs(ToolArgs):
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_NEWS_LIMIT)
    category: Optional[NewsCategory] = None

    @field_validator("limit", "category", mode="before")
    @classmethod
    def _drop_blank(cls, v: Any) -> Any:
        return _blank_to_none(v)


class SportNewsArgs(_NewsArgs):
    sport: NewsSport


class AllNewsArgs(_NewsArgs):
    pass


class PlayersArgs(ToolArgs):
    sport: NewsSport
    player_id: Optional[str] = Field(default=None, alias="playerId")

    @field_validator("player_id", mode="before")
    @classmethod
    def _normalize_player_id(cls, v: Any) -> Any:
        return _to_text(v)


class RankingsArgs(ToolArgs):
    sport: RankingsSport
    position: Optional[str] = None
    scoring: Optional[Scoring] = None

    @field_validator("position", "scoring", mode="before")
    @classmethod
    def _drop_blank(cls, v: Any) -> Any:
        return _blank_to_none(v)


class ProjectionsArgs(ToolArgs):
    sport: ProjectionsSport
    season: str
    week: Optional[str] = None
    position: Optional[str] = None

    @field_validator("season", "week", "position", mode="before")
    @classmethod
    def _normalize_text(cls, v: Any) -> Any:
        return _to_text(v)
