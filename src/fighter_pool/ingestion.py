"""Fighter ingestion from CSV/JSON exports or a remote sheet.

Every reader returns a cleaned pandas DataFrame with:
- All stat/record columns present and numeric
- A string ``Team`` column ("" for free agents)
- Rows without an ``ID`` removed
"""

import io
import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from src.fighter_pool.cleaning import FighterCleaner
from src.fighter_pool.proxy_fetch import ProxyFetcher, ProxyFetchError

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a fighter source cannot be read."""


def _records_frame(data) -> pd.DataFrame:
    """Accept either a bare list of records or ``{"fighters": [...]}``."""
    if isinstance(data, dict):
        data = data.get("fighters", [])
    if not isinstance(data, list):
        raise IngestionError(f"Expected a list of fighters, got {type(data).__name__}")
    return pd.DataFrame.from_records(data)


class FighterIngester:
    """Reads fighter sheets from local files or URLs."""

    def __init__(
        self,
        cleaner: Optional[FighterCleaner] = None,
        fetcher: Optional[ProxyFetcher] = None,
    ):
        self.cleaner = cleaner or FighterCleaner()
        self.fetcher = fetcher

    # ------------------------------------------------------------------
    # Local files
    # ------------------------------------------------------------------
    def read_csv(self, filepath: Path) -> pd.DataFrame:
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Expected file not found: {filepath}")
        logger.info("Reading fighter CSV: %s", filepath.name)

        df = pd.read_csv(filepath, quotechar='"', dtype={"Team": str})
        df = self.cleaner.clean(df)
        logger.info("Loaded %d fighters", len(df))
        return df

    def read_json(self, filepath: Path) -> pd.DataFrame:
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Expected file not found: {filepath}")
        logger.info("Reading fighter JSON: %s", filepath.name)

        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        df = self.cleaner.clean(_records_frame(data))
        logger.info("Loaded %d fighters", len(df))
        return df

    # ------------------------------------------------------------------
    # Remote sheets
    # ------------------------------------------------------------------
    def read_url(self, url: str) -> pd.DataFrame:
        """Fetch a sheet through the relay chain (CSV by extension, else JSON)."""
        if self.fetcher is None:
            self.fetcher = ProxyFetcher()

        def _log_attempt(index, total, proxy):
            logger.info("Fetching via %s (%d/%d)", proxy.name, index, total)

        if url.lower().split("?")[0].endswith(".csv"):
            response, _ = self.fetcher.fetch(url, on_attempt=_log_attempt)
            df = pd.read_csv(io.StringIO(response.text), dtype={"Team": str})
        else:
            data, _, _ = self.fetcher.fetch_json(url, on_attempt=_log_attempt)
            df = _records_frame(data)

        df = self.cleaner.clean(df)
        logger.info("Loaded %d fighters from %s", len(df), url)
        return df

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def read(self, source: str) -> pd.DataFrame:
        """Read fighters from a path or http(s) URL.

        Raises:
            IngestionError: if the source cannot be read or parsed.
        """
        try:
            if source.startswith(("http://", "https://")):
                return self.read_url(source)
            path = Path(source)
            if path.suffix.lower() == ".csv":
                return self.read_csv(path)
            return self.read_json(path)
        except IngestionError:
            raise
        except (OSError, ValueError, ProxyFetchError, pd.errors.ParserError) as e:
            raise IngestionError(f"Failed to read fighters from {source}: {e}") from e

    def read_records(self, source: str) -> list[dict]:
        """Read *source* and return JSON-ready fighter records."""
        return self.cleaner.to_records(self.read(source))
