"""
High-level runners for the Shop Quality Engine.

  run_simulation    — age an inventory N days, write report + final inventory
  replay_simulation — same run, then verify the final fingerprint
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from quality_engine.engine import QualityEngine
from quality_engine.inventory import load_inventory, save_inventory
from quality_engine.models import DayReport

logger = logging.getLogger(__name__)


def _simulate(inventory_path: str, days: int, report_path: str, output_path: str) -> str:
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")

    logger.info("Loading inventory from %s", inventory_path)
    items = load_inventory(inventory_path)
    engine = QualityEngine(items)

    reports: List[DayReport] = []
    for _ in range(days):
        reports.extend(engine.advance_day())

    logger.info("Simulated %d days over %d items", days, len(items))

    final_hash = save_inventory(items, output_path)
    logger.info("Inventory saved → %s (hash=%s)", output_path, final_hash)

    p = Path(report_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        for rec in reports:
            f.write(json.dumps(rec.to_dict(), sort_keys=True) + "\n")
    logger.info("Report saved → %s (%d records)", report_path, len(reports))

    return final_hash


def run_simulation(
    inventory_path: str,
    days: int,
    report_path: str,
    output_path: str,
) -> str:
    """
    Age the inventory by `days` days, write the daily report and the final
    inventory. Returns the final inventory hash.
    """
    return _simulate(inventory_path, days, report_path, output_path)


def replay_simulation(
    inventory_path: str,
    days: int,
    report_path: str,
    output_path: str,
    verify_hash_path: str,
) -> bool:
    """
    Re-run the simulation and check the final hash against the expected one.
    Returns True if hashes match.
    """
    logger.info("Replay mode: %d days from %s", days, inventory_path)
    final_hash = _simulate(inventory_path, days, report_path, output_path)

    with open(verify_hash_path, "r", encoding="utf-8") as f:
        expected_hash = f.read().strip()

    match = final_hash == expected_hash
    if match:
        logger.info("Replay PASSED: hash=%s", final_hash)
    else:
        logger.error(
            "Replay FAILED: expected=%s actual=%s", expected_hash, final_hash
        )

    return match
