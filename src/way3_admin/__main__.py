"""Command line entry point for the admin client."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sys
from typing import Any

import requests
from pydantic import BaseModel

from way3_admin.client import AdminClient, get_admin_client
from way3_admin.errors import AdminAPIError

USAGE = (
    "usage: python -m way3_admin "
    "{dashboard,players,merchants,items,monitoring,quests,skills,health} [key=value ...]"
)

# command -> (method name, accepts query params)
COMMANDS: dict[str, tuple[str, bool]] = {
    "dashboard": ("get_dashboard_data", False),
    "players": ("get_players", True),
    "merchants": ("get_merchants", True),
    "items": ("get_items", True),
    "monitoring": ("get_monitoring_data", False),
    "quests": ("get_quests", True),
    "skills": ("get_skills", True),
    "health": ("get_server_health", False),
}


def to_jsonable(value: Any) -> Any:
    """Convert models (and lists of them) into plain JSON data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def parse_params(args: list[str]) -> dict[str, str]:
    """Parse ``key=value`` arguments into query parameters."""
    params = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {arg!r}")
        params[key] = value
    return params


async def run_command(client: AdminClient, command: str, params: dict[str, str]) -> Any:
    method_name, accepts_params = COMMANDS[command]
    method = getattr(client, method_name)
    if accepts_params:
        return await method(params)
    return await method()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args or args[0] not in COMMANDS:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        params = parse_params(args[1:])
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    try:
        result = asyncio.run(run_command(get_admin_client(), args[0], params))
    except (AdminAPIError, requests.RequestException) as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(result), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
