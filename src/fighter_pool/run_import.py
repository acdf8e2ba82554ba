"""Import a fighter sheet into the local store.

Usage:
    python -m src.fighter_pool.run_import SOURCE [store_dir]

Examples:
    python -m src.fighter_pool.run_import data/raw/fighters.csv
    python -m src.fighter_pool.run_import https://example.com/fighters.json
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.fighter_pool.classification import classify_fighters
from src.fighter_pool.config import FIGHTERS_KEY
from src.fighter_pool.ingestion import FighterIngester
from src.fighter_pool.store import JsonStore
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_import(
    source: str,
    store_dir: Optional[Path] = None,
    ingester: Optional[FighterIngester] = None,
) -> int:
    """Read fighters from *source* and store them under ``FIGHTERS_KEY``.

    Returns:
        Number of fighters stored.

    Raises:
        IngestionError: If the source cannot be read.
    """
    ingester = ingester or FighterIngester()
    store = JsonStore(store_dir)

    logger.info("Importing fighters from %s", source)
    records = ingester.read_records(source)
    store.set_json(FIGHTERS_KEY, records)

    classified = classify_fighters(records)
    logger.info("Import complete: %d fighters stored", len(records))
    logger.info(
        "  Pool: %d, teams: %s",
        len(classified.pool),
        ", ".join(
            f"{name}={len(members)}"
            for name, members in classified.roster_groups.items()
        ) or "none",
    )
    return len(records)


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    source = sys.argv[1]
    store_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        count = run_import(source, store_dir)
        print(f"Imported {count} fighters")
    except Exception:
        logger.exception("Import failed")
        sys.exit(1)
