from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional

from .models import (
    AllNewsArgs,
    PlayersArgs,
    ProjectionsArgs,
    RankingsArgs,
    SportNewsArgs,
)

DEFAULT_NEWS_LIMIT = 25
DEFAULT_RANKINGS_POSITION = "ALL"
DEFAULT_SCORING = "STD"


@dataclass(frozen=True)
class UpstreamRequest:
    """One GET against the FantasyPros API, relative to the configured base URL."""

    path: str
    params: Dict[str, str] = field(default_factory=dict)


def current_year() -> int:
    """Year used for consensus rankings, taken from the wall clock at call time."""
    return date.today().year


def _news_params(limit: Optional[int], category: Optional[str]) -> Dict[str, str]:
    params = {"limit": str(limit if limit is not None else DEFAULT_NEWS_LIMIT)}
    if category:
        params["category"] = category
    return params


def build_sport_news(args: SportNewsArgs) -> UpstreamRequest:
    return UpstreamRequest(f"/{args.sport}/news", _news_params(args.limit, args.category))


def build_all_news(args: AllNewsArgs) -> UpstreamRequest:
    return UpstreamRequest("/json/all/news", _news_params(args.limit, args.category))


def build_players(args: PlayersArgs) -> UpstreamRequest:
    params: Dict[str, str] = {}
    if args.player_id:
        params["player"] = args.player_id
    return UpstreamRequest(f"/{args.sport}/players", params)


def build_rankings(args: RankingsArgs, *, year: Optional[int] = None) -> UpstreamRequest:
    season = year if year is not None else current_year()
    params = {
        "position": args.position or DEFAULT_RANKINGS_POSITION,
        "scoring": args.scoring or DEFAULT_SCORING,
    }
    return UpstreamRequest(f"/{args.sport}/{season}/consensus-rankings", params)


def build_projections(args: ProjectionsArgs) -> UpstreamRequest:
    params: Dict[str, str] = {}
    if args.week:
        params["week"] = args.week
    if args.position:
        params["position"] = args.position
    return UpstreamRequest(f"/{args.sport}/{args.season}/projections", params)
