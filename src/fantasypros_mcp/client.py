from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .builders import (
    UpstreamRequest,
    build_all_news,
    build_players,
    build_projections,
    build_rankings,
    build_sport_news,
)
from .config import Settings
from .http import request_json
from .models import AllNewsArgs, PlayersArgs, ProjectionsArgs, RankingsArgs, SportNewsArgs

log = logging.getLogger(__name__)


class FantasyProsClient:
    """
    Async wrapper around the FantasyPros public API (v2).

      - Base URL https://api.fantasypros.com/public/v2
      - x-api-key: <API_KEY> on every request
      - JSON bodies returned as-is
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            headers={"x-api-key": settings.api_key},
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "FantasyProsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def get_json(self, request: UpstreamRequest) -> Any:
        log.debug("GET %s params=%s", request.path, request.params)
        return await request_json(
            client=self._http,
            url=request.path,
            params=request.params or None,
        )

    # ---- endpoints ----

    async def news(
        self, *, sport: str, limit: Optional[int] = None, category: Optional[str] = None
    ) -> Any:
        args = SportNewsArgs(sport=sport, limit=limit, category=category)
        return await self.get_json(build_sport_news(args))

    async def all_news(self, *, limit: Optional[int] = None, category: Optional[str] = None) -> Any:
        return await self.get_json(build_all_news(AllNewsArgs(limit=limit, category=category)))

    async def players(self, *, sport: str, player_id: Optional[str] = None) -> Any:
        return await self.get_json(build_players(PlayersArgs(sport=sport, player_id=player_id)))

    async def rankings(
        self, *, sport: str, position: Optional[str] = None, scoring: Optional[str] = None
    ) -> Any:
        """Consensus rankings for the current calendar year."""
        args = RankingsArgs(sport=sport, position=position, scoring=scoring)
        return await self.get_json(build_rankings(args))

    async def projections(
        self,
        *,
        sport: str,
        season: str,
        week: Optional[str] = None,
        position: Optional[str] = None,
    ) -> Any:
        args = ProjectionsArgs(sport=sport, season=season, week=week, position=position)
        return await self.get_json(build_projections(args))
