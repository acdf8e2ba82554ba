"""Data cleaning for fighter records.

Handles the quirks of hand-maintained fighter sheets:
- Stat and record cells that are blank, text, or comma-formatted
- Team affiliations with stray whitespace
- Missing columns (every stat/record column defaults to 0)
"""

import logging
import math

import pandas as pd

from src.fighter_pool.config import RECORD_FIELDS, STAT_FIELDS

logger = logging.getLogger(__name__)


def safe_num(value) -> float:
    """Coerce *value* to a finite float, returning 0.0 for anything else.

    Examples:
        "80"     -> 80.0
        "1,204"  -> 1204.0
        None     -> 0.0
        "n/a"    -> 0.0
        nan/inf  -> 0.0
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        s = str(value).replace(",", "").strip()
        if s == "":
            return 0.0
        try:
            number = float(s)
        except ValueError:
            return 0.0
    return number if math.isfinite(number) else 0.0


class FighterCleaner:
    """Cleans and standardizes a fighter DataFrame before it is stored."""

    NUMERIC_COLUMNS = list(STAT_FIELDS.values()) + list(RECORD_FIELDS.values())

    def clean(self, df: pd.DataFrame) -> pd.DataFrame:
        """Return a cleaned copy of *df*.

        - Strips whitespace from string columns
        - Ensures every stat/record column exists, coerced to numbers (0 fallback)
        - Fills a missing ``Team`` column with "" (free agent)
        - Drops rows without an ``ID``
        """
        out = df.copy()

        for col in out.columns:
            if pd.api.types.is_object_dtype(out[col]) or pd.api.types.is_string_dtype(
                out[col]
            ):
                out[col] = out[col].apply(
                    lambda v: v.strip() if isinstance(v, str) else v
                )

        for col in self.NUMERIC_COLUMNS:
            if col not in out.columns:
                out[col] = 0.0
            else:
                out[col] = out[col].apply(safe_num)

        if "Team" not in out.columns:
            out["Team"] = ""
        out["Team"] = out["Team"].fillna("").astype(str)

        if "IsCustom" in out.columns:
            out["IsCustom"] = out["IsCustom"].apply(self._parse_flag)

        if "ID" in out.columns:
            missing = out["ID"].isna()
            if missing.any():
                logger.warning("Dropping %d fighters with no ID", int(missing.sum()))
                out = out[~missing]
        else:
            logger.warning("No ID column found; assigning row numbers as IDs")
            out["ID"] = range(1, len(out) + 1)

        return out.reset_index(drop=True)

    @staticmethod
    def _parse_flag(value) -> bool:
        """Interpret spreadsheet truthy cells ("TRUE", "yes", 1) as booleans."""
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return False
        if isinstance(value, str):
            return value.strip().lower() in {"true", "yes", "y", "1"}
        return bool(value)

    def to_records(self, df: pd.DataFrame) -> list[dict]:
        """Convert a cleaned DataFrame to JSON-ready record dicts."""
        records = []
        for row in df.to_dict(orient="records"):
            records.append({key: self._plain(val) for key, val in row.items()})
        return records

    @staticmethod
    def _plain(value):
        """Unwrap numpy scalars and map NaN to None so json.dump accepts it."""
        if hasattr(value, "item"):
            value = value.item()
        if isinstance(value, float) and math.isnan(value):
            return None
        return value
