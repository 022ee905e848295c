"""Inspect and maintain stored intel reports from the command line."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

from ..config import get_settings
from ..database import Repository, RepositoryConfig
from ..intel import IntelService, default_registry

logger = logging.getLogger(__name__)


async def _build_service(database_path: Optional[Path]) -> IntelService:
    settings = get_settings()
    path = database_path or settings.database_path
    repository = Repository()
    if path is not None:
        await repository.initialize(RepositoryConfig(database_path=path))
    else:
        logger.warning("No database path configured; persistence disabled")
    return IntelService(
        repository,
        default_registry(),
        expiration_hours=settings.intel_expiration_hours,
    )


async def cmd_list(args: argparse.Namespace) -> None:
    service = await _build_service(args.db)
    items = await service.list_intel(args.guild)
    if args.json:
        print(json.dumps([item.to_dict() for item in items], indent=2))
        return
    if not items:
        print("No intel reports.")
        return
    lines: List[str] = [f"{len(items)} intel report(s):"]
    for item in items:
        lines.append(f"  - {item.id} at {item.timestamp} by {item.intel_item.reporter}")
    print("\n".join(lines))


async def cmd_purge(args: argparse.Namespace) -> None:
    service = await _build_service(args.db)
    purged = await service.purge_stale(args.guild, args.hours)
    print(f"Purged {purged} stale report(s).")


async def cmd_delete(args: argparse.Namespace) -> None:
    service = await _build_service(args.db)
    deleted = await service.delete_intel(args.guild, args.type, args.id)
    print("Deleted." if deleted else f"No intel report with id {args.id}.")


async def cmd_types(args: argparse.Namespace) -> None:
    registry = default_registry()
    for intel_type in registry.registered_types():
        handler = registry.get_handler(intel_type)
        print(f"{intel_type}: {handler.description}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect and maintain stored intel reports.")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Path to the guild JSON document (default: from settings).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List current reports for a guild.")
    list_cmd.add_argument("guild", type=str, help="Guild id.")
    list_cmd.add_argument("--json", action="store_true", help="Output JSON for automation.")
    list_cmd.set_defaults(func=cmd_list)

    purge = subparsers.add_parser("purge", help="Remove expired reports for a guild.")
    purge.add_argument("guild", type=str, help="Guild id.")
    purge.add_argument(
        "--hours",
        type=float,
        default=None,
        help="Maximum report age in hours (default: configured expiration).",
    )
    purge.set_defaults(func=cmd_purge)

    delete = subparsers.add_parser("delete", help="Delete one report by id.")
    delete.add_argument("guild", type=str, help="Guild id.")
    delete.add_argument("type", type=str, help="Intel type (e.g., rift).")
    delete.add_argument("id", type=str, help="Intel id.")
    delete.set_defaults(func=cmd_delete)

    types = subparsers.add_parser("types", help="List registered intel types.")
    types.set_defaults(func=cmd_types)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO)
    parser = build_parser()
    args = parser.parse_args(argv)
    asyncio.run(args.func(args))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
