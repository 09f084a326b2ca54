"""
Import subjects and specializations from the catalog CSV export.

Reads data.csv (or IMPORT_CSV_PATH) from the working directory, creates the
specializations of the target program (IMPORT_PROGRAM_ID), creates missing subjects and
links them to specializations per semester. Safe to re-run: existing rows are reused.

Usage:
  python -m catalog.scripts.import_csv
  catalog-import
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Sequence
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import Settings, get_settings
from catalog.core.exceptions import ImportConfigError
from catalog.db.session import build_engine, build_sessionmaker
from catalog.ingest.normalizer import read_catalog_rows
from catalog.ingest.reconciler import CatalogReconciler
from catalog.ingest.store import CatalogStore
from catalog.ingest.summary import ImportSummary

logger = logging.getLogger("catalog.import")


def load_csv_lines(path: Path) -> List[str]:
    """Physical lines of the CSV file. Raises ImportConfigError if missing or without data rows."""
    if not path.is_file():
        raise ImportConfigError(f"CSV file not found: {path}")
    lines = path.read_text(encoding="utf-8-sig").split("\n")
    if sum(1 for line in lines if line.strip()) < 2:
        raise ImportConfigError("CSV file is empty or has no data rows")
    return lines


def resolve_program_id(settings: Settings) -> UUID:
    try:
        return UUID(settings.import_program_id)
    except ValueError:
        raise ImportConfigError(f"IMPORT_PROGRAM_ID is not a valid UUID: {settings.import_program_id!r}")


async def import_catalog(db: AsyncSession, program_id: UUID, lines: Sequence[str]) -> ImportSummary:
    print("📊 Parsing CSV data...")
    rows = list(read_catalog_rows(lines))
    print(f"✅ Parsed {len(rows)} rows from CSV")

    summary = ImportSummary(rows_parsed=len(rows))
    reconciler = CatalogReconciler(CatalogStore(db), program_id, summary)
    print("📝 Creating specializations, subjects and links...")
    return await reconciler.reconcile(rows)


async def run_import(settings: Settings) -> ImportSummary:
    csv_path = Path.cwd() / settings.import_csv_path
    program_id = resolve_program_id(settings)

    print("📖 Reading CSV file...")
    lines = load_csv_lines(csv_path)

    url = make_url(settings.database_url)
    print(f"🔌 Database connection: {url.get_backend_name()} (host: {url.host or 'local'})")

    engine = build_engine(settings.database_url)
    try:
        async with build_sessionmaker(engine)() as db:
            return await import_catalog(db, program_id, lines)
    finally:
        await engine.dispose()


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError:
        print("❌ Error: DATABASE_URL environment variable is not set!", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = asyncio.run(run_import(settings))
    except ImportConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Fatal error during import")
        print(f"\n❌ Fatal error during import: {e}", file=sys.stderr)
        return 1

    print()
    print(summary.render())
    print("✅ Import completed successfully!")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
