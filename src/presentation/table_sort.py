"""Sortable table helper for ranking and results tables.

Cell text is coerced before comparing: blanks sort first, numeric strings
compare as numbers, ISO dates as timestamps, and everything else as
lower-cased text.
"""

from datetime import datetime
import re
from typing import Dict, List, Optional, Sequence, Union

_NUM_RE = re.compile(r"^-?\d+(?:\.\d+)?$")

SortKey = Union[str, float]


def coerce(value) -> SortKey:
    if value is None:
        return ""
    s = str(value).strip()
    if s == "":
        return ""
    if _NUM_RE.match(s):
        return float(s)
    try:
        return datetime.fromisoformat(s).timestamp()
    except ValueError:
        return s.lower()


def _rank(key: SortKey):
    """Total order over coerced keys: blanks, then numbers, then text."""
    if key == "":
        return (0, 0.0, "")
    if isinstance(key, float):
        return (1, key, "")
    return (2, 0.0, key)


def sort_rows(
    rows: Sequence[Dict],
    column: str,
    descending: bool = False,
) -> List[Dict]:
    """Return *rows* sorted by the coerced value of *column* (stable)."""
    return sorted(
        rows,
        key=lambda row: _rank(coerce(row.get(column))),
        reverse=descending,
    )


class TableSorter:
    """Remembers the active column and toggles asc/desc like a header click."""

    def __init__(self):
        self.column: Optional[str] = None
        self.direction = "none"

    def click(self, rows: Sequence[Dict], column: str) -> List[Dict]:
        if column == self.column and self.direction == "asc":
            self.direction = "desc"
        else:
            self.direction = "asc"
        self.column = column
        return sort_rows(rows, column, descending=self.direction == "desc")
