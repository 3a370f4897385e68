from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from .client import FantasyProsClient
from .config import Settings
from .exceptions import FantasyProsError
from .mcp_server import format_validation_error
from .models import (
    NEWS_CATEGORIES,
    PROJECTIONS_SPORTS,
    RANKINGS_SPORTS,
    SCORING_TYPES,
    SPORTS,
)
from .tools import TOOL_SPECS, TOOLS_BY_NAME

log = logging.getLogger(__name__)

# subcommand -> registered tool name
COMMAND_TOOLS: Dict[str, str] = {
    "news": "get_sport_news",
    "all-news": "get_all_news",
    "players": "get_players",
    "rankings": "get_rankings",
    "projections": "get_projections",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fantasypros")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # News
    p_news = sub.add_parser("news", help="Fetch news for one sport")
    p_news.add_argument("--sport", choices=SPORTS, required=True)
    p_news.add_argument("--limit", type=int, help="Number of items, 1-25 (default: 25)")
    p_news.add_argument("--category", choices=NEWS_CATEGORIES)

    p_all = sub.add_parser("all-news", help="Fetch news across all sports")
    p_all.add_argument("--limit", type=int, help="Number of items, 1-25 (default: 25)")
    p_all.add_argument("--category", choices=NEWS_CATEGORIES)

    # Players, rankings, projections
    p_players = sub.add_parser("players", help="Fetch players for a sport")
    p_players.add_argument("--sport", choices=SPORTS, required=True)
    p_players.add_argument("--player-id", dest="playerId", help="Filter to one player ID")

    p_rank = sub.add_parser("rankings", help="Fetch current-year consensus rankings")
    p_rank.add_argument("--sport", choices=RANKINGS_SPORTS, required=True)
    p_rank.add_argument("--position", help="Position filter (default: ALL)")
    p_rank.add_argument("--scoring", choices=SCORING_TYPES, help="Scoring type (default: STD)")

    p_proj = sub.add_parser("projections", help="Fetch player projections for a season")
    p_proj.add_argument("--sport", choices=PROJECTIONS_SPORTS, required=True)
    p_proj.add_argument("--season", required=True, help="Season year, e.g. 2024")
    p_proj.add_argument("--week", help="Week number (NFL)")
    p_proj.add_argument("--position", help="Position filter")

    sub.add_parser("tools", help="List the tools exposed by the MCP server")

    return parser


def tool_arguments(ns: argparse.Namespace) -> Dict[str, Any]:
    """Turn parsed CLI flags into a tool argument mapping, dropping unset ones."""
    return {k: v for k, v in vars(ns).items() if k != "cmd" and v is not None}


def _describe_tools() -> str:
    lines = []
    for spec in TOOL_SPECS:
        required = ", ".join(spec.input_schema.get("required", [])) or "-"
        lines.append(f"{spec.name:<16} required: {required:<14} {spec.description}")
    return "\n".join(lines)


async def _fetch(settings: Settings, tool_name: str, arguments: Dict[str, Any]) -> Any:
    spec = TOOLS_BY_NAME[tool_name]
    request = spec.builder(spec.args_model.model_validate(arguments))
    async with FantasyProsClient(settings) as client:
        return await client.get_json(request)


def main(argv: Optional[Sequence[str]] = None) -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s"
    )

    args = build_parser().parse_args(argv)

    if args.cmd == "tools":
        print(_describe_tools())
        return

    tool_name = COMMAND_TOOLS[args.cmd]
    arguments = tool_arguments(args)

    try:
        settings = Settings.from_env()
        logging.getLogger().setLevel(settings.log_level)
        payload = asyncio.run(_fetch(settings, tool_name, arguments))
    except ValidationError as e:
        print(format_validation_error(tool_name, e), file=sys.stderr)
        raise SystemExit(1) from e
    except FantasyProsError as e:
        print(f"FantasyPros API error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
