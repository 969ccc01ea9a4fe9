"""
Synthetic inventory generator for the Shop Quality Engine.

Produces inventory.json with a seeded mix of products (at least five
items, one per product kind) that exercises:
  - The constant-quality item (Mjolnir)
  - Aging cheese and concert tickets across all their windows
  - Magic (volatile) products next to ordinary ones
  - A few out-of-range qualities that trigger the clamping path
"""
from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Dict, List

from quality_engine.models import (
    AGING_ITEM_NAME,
    CONSTANT_ITEM_NAME,
    EVENT_ITEM_NAME,
    QUALITY_MAX,
)


ORDINARY_PRODUCTS = [
    "Bread", "Apple", "Milk", "Leather boots", "Wool scarf", "Lamp oil",
    "Rope", "Candles",
]

MAGIC_PRODUCTS = [
    "Magic Sword", "Magic Cake", "Cloak of magic", "MAGIC Wand",
]


def _make_item(name: str, quality: int, days_remaining: int) -> Dict[str, Any]:
    return {"name": name, "quality": quality, "days_remaining": days_remaining}


def generate_inventory(output_path: str, count: int = 20, seed: int = 42) -> None:
    """Generate a synthetic inventory covering every product kind."""
    rng = random.Random(seed)

    # One of each special product, always present
    items: List[Dict[str, Any]] = [
        _make_item(CONSTANT_ITEM_NAME, rng.randint(0, 100), rng.randint(-5, 30)),
        _make_item(AGING_ITEM_NAME, rng.randint(0, 40), rng.randint(1, 10)),
        _make_item(EVENT_ITEM_NAME, rng.randint(10, 40), rng.randint(11, 20)),
        _make_item(rng.choice(MAGIC_PRODUCTS), rng.randint(5, QUALITY_MAX), rng.randint(1, 10)),
        _make_item(rng.choice(ORDINARY_PRODUCTS), rng.randint(5, QUALITY_MAX), rng.randint(1, 10)),
    ]

    while len(items) < count:
        roll = rng.random()
        if roll < 0.1:
            # Out-of-range quality on either side
            quality = rng.choice([rng.randint(-10, -1), rng.randint(QUALITY_MAX + 1, 70)])
            name = rng.choice(ORDINARY_PRODUCTS + MAGIC_PRODUCTS)
        elif roll < 0.4:
            quality = rng.randint(0, QUALITY_MAX)
            name = rng.choice(MAGIC_PRODUCTS)
        else:
            quality = rng.randint(0, QUALITY_MAX)
            name = rng.choice(ORDINARY_PRODUCTS)
        items.append(_make_item(name, quality, rng.randint(-3, 20)))

    p = Path(output_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump({"items": items}, f, indent=2, sort_keys=True)


if __name__ == "__main__":
    generate_inventory("inventory.json", 20, 42)
    print("Generated inventory.json")
