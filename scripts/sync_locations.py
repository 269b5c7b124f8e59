"""Sync DataForSEO location codes into the `locations` catalog.

Usage:
    python -m scripts.sync_locations [--dry-run] [--seed] [--country br]
"""

from __future__ import annotations

import argparse
import asyncio
import json

from adsradar.core.database import close_db, init_db
from adsradar.core.logging import setup_logging
from adsradar.services.location_sync import LocationSyncService


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report code changes without writing them",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert manually mapped capital cities missing from the catalog",
    )
    parser.add_argument("--country", default="br", help="DataForSEO country code")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> dict:
    await init_db()
    try:
        service = LocationSyncService(country=args.country)
        result = await service.sync(dry_run=args.dry_run, seed=args.seed)
    finally:
        await close_db()
    return result.to_dict()


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = _parse_args(argv)
    summary = asyncio.run(_run(args))
    print(json.dumps(summary, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
