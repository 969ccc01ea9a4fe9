"""
The Shop Quality Engine — daily quality/expiry update.

Rules per product kind:
  CONSTANT        quality pinned at 80, never ages
  AGING_POSITIVE  gains quality with age (+1, +2 once expired)
  EVENT_BASED     gains value as the event nears, 0 once past
  VOLATILE        generic decay at rate 2
  DEFAULT         generic decay at rate 1

Every non-constant quality stays inside [QUALITY_MIN, QUALITY_MAX].
"""
from __future__ import annotations

import logging
from typing import List, MutableSequence, Optional

from quality_engine.models import (
    CONSTANT_QUALITY,
    DECAY_RATE_DEFAULT,
    DECAY_RATE_VOLATILE,
    FLAG_EXPIRED,
    FLAG_QUALITY_CLAMPED,
    QUALITY_MAX,
    QUALITY_MIN,
    DayReport,
    Item,
    ProductKind,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def clamp_quality(quality: int) -> int:
    """Constrain quality into [QUALITY_MIN, QUALITY_MAX]."""
    if quality < QUALITY_MIN:
        return QUALITY_MIN
    if quality > QUALITY_MAX:
        return QUALITY_MAX
    return quality


def is_expired(days_remaining: int) -> bool:
    return days_remaining < 0


def _in_range(quality: int) -> bool:
    return QUALITY_MIN <= quality <= QUALITY_MAX


# ---------------------------------------------------------------------------
# Rule calculators (days_remaining is the value AFTER the daily decrement)
# ---------------------------------------------------------------------------
def aging_quality(quality: int, days_remaining: int) -> int:
    """Blue cheese: +1 per day, +2 per day once expired, capped at 50."""
    if is_expired(days_remaining):
        if quality <= QUALITY_MAX - 2:
            return quality + 2
        return QUALITY_MAX
    if quality <= QUALITY_MAX - 1:
        return quality + 1
    return QUALITY_MAX


def event_quality(quality: int, days_remaining: int) -> int:
    """Concert tickets: +1, then +2 inside 10 days, +3 inside 5, 0 after."""
    if is_expired(days_remaining):
        return QUALITY_MIN

    if 5 < days_remaining <= 10:
        step = 2
    elif days_remaining <= 5:
        step = 3
    else:
        step = 1

    if quality < QUALITY_MAX - step:
        return quality + step
    return QUALITY_MAX


def decay_quality(quality: int, days_remaining: int, rate: int) -> int:
    """Generic linear decay; the rate doubles once the item has expired."""
    if is_expired(days_remaining):
        step = 2 * rate
    else:
        step = rate

    if quality > QUALITY_MIN + step:
        return quality - step
    return QUALITY_MIN


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------
def update_item(item: Item) -> Optional[str]:
    """
    Advance a single item by one day, in place.

    Returns FLAG_QUALITY_CLAMPED when the item arrived with an out-of-range
    quality; in that case only the counter and the clamp are applied and the
    product rule is skipped for this call.
    """
    if item.kind is not ProductKind.CONSTANT and not _in_range(item.quality):
        # TODO: confirm with the shop owner whether skipping the rule on this
        # call is intended or should fall through to the normal update.
        old_quality = item.quality
        item.days_remaining -= 1
        item.quality = clamp_quality(item.quality)
        logger.warning(
            "Quality out of range: item=%r quality %d→%d (rule skipped)",
            item.name, old_quality, item.quality,
        )
        return FLAG_QUALITY_CLAMPED

    if item.kind is ProductKind.CONSTANT:
        item.quality = CONSTANT_QUALITY
        return None

    old_quality = item.quality
    item.days_remaining -= 1

    if item.kind is ProductKind.AGING_POSITIVE:
        item.quality = aging_quality(item.quality, item.days_remaining)
    elif item.kind is ProductKind.EVENT_BASED:
        item.quality = event_quality(item.quality, item.days_remaining)
    elif item.kind is ProductKind.VOLATILE:
        item.quality = decay_quality(item.quality, item.days_remaining, DECAY_RATE_VOLATILE)
    else:
        item.quality = decay_quality(item.quality, item.days_remaining, DECAY_RATE_DEFAULT)

    logger.debug(
        "Updated: item=%r kind=%s quality %d→%d days_remaining=%d",
        item.name, item.kind.value, old_quality, item.quality, item.days_remaining,
    )
    return None


def update_all(items: MutableSequence[Item]) -> None:
    """Advance every item by one day, in collection order, in place."""
    for item in items:
        update_item(item)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class QualityEngine:
    """
    Day-by-day driver around the caller's item list.

    Usage:
        engine = QualityEngine(items)
        for _ in range(days):
            reports = engine.advance_day()
        # items are updated in-place
    """

    def __init__(self, items: MutableSequence[Item]) -> None:
        # Held by reference; the caller keeps ownership.
        self.items: MutableSequence[Item] = items
        self.day: int = 0

    def advance_day(self) -> List[DayReport]:
        """Run one update pass and return a report line per item."""
        self.day += 1
        reports: List[DayReport] = []
        for item in self.items:
            flags: List[str] = []
            flag = update_item(item)
            if flag is not None:
                flags.append(flag)
            if item.kind is not ProductKind.CONSTANT and is_expired(item.days_remaining):
                flags.append(FLAG_EXPIRED)
            reports.append(DayReport(
                day=self.day,
                name=item.name,
                kind=item.kind.value,
                quality=item.quality,
                days_remaining=item.days_remaining,
                flags=flags,
            ))

        logger.debug("Day %d processed: %d items", self.day, len(reports))
        return reports
