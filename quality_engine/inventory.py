"""
Inventory file handling for the Shop Quality Engine.

Handles loading, saving, and SHA-256 fingerprinting of inventory.json.
The fingerprint is computed over a canonical JSON representation (sorted
keys, no whitespace, item order preserved) so two runs can be compared.
"""
from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from quality_engine.models import Item


def compute_inventory_hash(items: Sequence[Item]) -> str:
    """Compute SHA-256 of the canonical inventory JSON."""
    d = {"items": [item.to_dict() for item in items]}
    canonical = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def load_inventory(path: str) -> List[Item]:
    """Load items from disk; raise ValueError on malformed entries."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Inventory file not found: {path}")

    with open(p, "r", encoding="utf-8") as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Inventory {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise ValueError(f"Inventory {path} must contain an 'items' list")

    items: List[Item] = []
    for index, raw in enumerate(data["items"]):
        try:
            items.append(Item.from_dict(raw))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Invalid item at index {index}: {exc}") from exc

    return items


def save_inventory(items: Sequence[Item], path: str) -> str:
    """Persist items to disk and return the fingerprint."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with open(p, "w", encoding="utf-8") as f:
        json.dump({"items": [item.to_dict() for item in items]}, f, indent=2, sort_keys=True)

    return compute_inventory_hash(items)
