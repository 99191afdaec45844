#!/usr/bin/env python3
"""
Seed the books table from JSON or CSV catalogue files.

Run with: python3 scripts/seed_books.py sample-books/
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path so we can import the app
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from app.services.importer import import_path
from core import CatalogueError

logger = logging.getLogger("seed_books")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Import book records from a catalogue file or directory."
    )
    parser.add_argument("path", type=Path, help="Catalogue file (.json/.csv) or directory")
    parser.add_argument(
        "--database-url",
        help="Database URL (defaults to $DATABASE_URL or sqlite:///app.db)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.path.exists():
        logger.error("Path not found: %s", args.path)
        return 1

    overrides = {}
    if args.database_url:
        overrides["SQLALCHEMY_DATABASE_URI"] = args.database_url

    app = create_app(overrides)
    with app.app_context():
        try:
            created, updated = import_path(args.path)
        except CatalogueError as e:
            logger.error("%s", e)
            return 1

    print(f"✓ {created} book(s) created, {updated} updated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
