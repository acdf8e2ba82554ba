"""Draft export - final allocation summary as JSON and CSV."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from src.draft_manager.config import EXPORTS_DIR
from src.draft_manager.draft_state import DraftConfig, DraftResult

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["order", "team", "pre_draft_count", "id", "name"]


def build_export(result: DraftResult, config: Optional[DraftConfig] = None) -> Dict:
    """Read-only summary of a finished run.

    Each pick's ``order`` is its global pick number.
    """
    config = config or DraftConfig()
    order_of = {id(pick.fighter): pick.pick_number for pick in result.picks}

    return {
        "started_at": result.started_at,
        "pick_delay_seconds": config.pick_delay_seconds,
        "start_time": config.start_time.isoformat() if config.start_time else None,
        "teams": [
            {
                "name": slot.name,
                "pre_draft_count": slot.pre_draft_count,
                "picks": [
                    {
                        "order": order_of.get(id(fighter)),
                        "id": fighter.fighter_id,
                        "name": fighter.display_name,
                    }
                    for fighter in slot.picks
                ],
            }
            for slot in result.slots
        ],
    }


def export_frame(export: Dict) -> pd.DataFrame:
    """Flatten an export dict into one row per pick, in pick order."""
    rows = [
        {
            "order": pick["order"],
            "team": team["name"],
            "pre_draft_count": team["pre_draft_count"],
            "id": pick["id"],
            "name": pick["name"],
        }
        for team in export["teams"]
        for pick in team["picks"]
    ]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    if df.empty:
        return df
    return df.sort_values("order", kind="stable").reset_index(drop=True)


class DraftExporter:
    """Writes draft exports to disk."""

    def __init__(self, export_dir: Optional[Path] = None):
        self.export_dir = Path(export_dir) if export_dir else EXPORTS_DIR
        self.export_dir.mkdir(parents=True, exist_ok=True)

    def save(
        self,
        result: DraftResult,
        config: Optional[DraftConfig] = None,
        stem: Optional[str] = None,
    ) -> Dict[str, Path]:
        """Save JSON and CSV exports of *result*.

        Returns:
            ``{"json": path, "csv": path}``
        """
        export = build_export(result, config)
        stem = stem or "draft_" + result.started_at.replace(":", "").replace(".", "_")

        json_path = self.export_dir / f"{stem}.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(export, f, indent=2, default=str)

        csv_path = self.export_dir / f"{stem}.csv"
        export_frame(export).to_csv(csv_path, index=False)

        logger.info(
            "Exported %d picks for %d teams to %s",
            result.total_picks,
            len(result.slots),
            json_path,
        )
        return {"json": json_path, "csv": csv_path}
