"""
Data models for the Shop Quality Engine.

Quality and days-remaining are plain integers. Every item except the
constant-quality one lives in the closed range [QUALITY_MIN, QUALITY_MAX].
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
QUALITY_MIN: int = 0
QUALITY_MAX: int = 50
CONSTANT_QUALITY: int = 80                   # Mjolnir, never clamped

DECAY_RATE_DEFAULT: int = 1
DECAY_RATE_VOLATILE: int = 2

CONSTANT_ITEM_NAME = "Mjolnir"
AGING_ITEM_NAME    = "Blue cheese"
EVENT_ITEM_NAME    = "Concert tickets"
VOLATILE_MARKER    = "magic"                 # case-insensitive substring

FLAG_QUALITY_CLAMPED = "QUALITY_CLAMPED"
FLAG_EXPIRED         = "EXPIRED"


# ---------------------------------------------------------------------------
# Product kinds
# ---------------------------------------------------------------------------
class ProductKind(str, Enum):
    """Which quality rule an item follows."""

    CONSTANT       = "CONSTANT"
    AGING_POSITIVE = "AGING_POSITIVE"
    EVENT_BASED    = "EVENT_BASED"
    VOLATILE       = "VOLATILE"
    DEFAULT        = "DEFAULT"


def classify(name: str) -> ProductKind:
    """Resolve the product kind from an item name.

    The three special names match exactly; anything containing "magic"
    (any case) is volatile; everything else decays at the default rate.
    """
    if name == CONSTANT_ITEM_NAME:
        return ProductKind.CONSTANT
    if name == AGING_ITEM_NAME:
        return ProductKind.AGING_POSITIVE
    if name == EVENT_ITEM_NAME:
        return ProductKind.EVENT_BASED
    if VOLATILE_MARKER in name.lower():
        return ProductKind.VOLATILE
    return ProductKind.DEFAULT


# ---------------------------------------------------------------------------
# Item (caller-owned, mutated in place)
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class Item:
    """A named product with a quality score and a sell-by counter."""

    name:           str
    quality:        int
    days_remaining: int
    kind:           ProductKind = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.kind = classify(self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "quality": self.quality,
            "days_remaining": self.days_remaining,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Item":
        name = d["name"]
        quality = d["quality"]
        days_remaining = d["days_remaining"]
        if not isinstance(name, str):
            raise TypeError(f"name must be str, got {type(name).__name__}")
        # bool is an int subclass; reject it explicitly
        for label, value in (("quality", quality), ("days_remaining", days_remaining)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"{label} must be int, got {type(value).__name__}"
                )
        return Item(name=name, quality=quality, days_remaining=days_remaining)


# ---------------------------------------------------------------------------
# DayReport (output)
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class DayReport:
    """One line of the simulation report: an item's state after a day."""

    day:            int
    name:           str
    kind:           str
    quality:        int
    days_remaining: int
    flags:          List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "name": self.name,
            "kind": self.kind,
            "quality": self.quality,
            "days_remaining": self.days_remaining,
            "flags": list(self.flags),
        }
