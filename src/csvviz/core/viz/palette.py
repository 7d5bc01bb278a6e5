"""
Chart color slots.

Colors are referenced by slot name (``chart-1`` ... ``chart-N``) so the
renderer's theme decides the actual color. Slots beyond the theme's five
base colors fall back to the base slots (``chart-6`` -> ``chart-1``).
"""

from __future__ import annotations

import random
from typing import Sequence

BASE_SLOT_COUNT = 5

LINE_PALETTE: tuple[str, ...] = tuple(f"chart-{i}" for i in range(1, 6))
BAR_PALETTE: tuple[str, ...] = LINE_PALETTE
PIE_PALETTE: tuple[str, ...] = tuple(f"chart-{i}" for i in range(1, 9))

# Default theme colors for text renderers
SLOT_HEX = {
    "chart-1": "#e76e50",
    "chart-2": "#2a9d90",
    "chart-3": "#274754",
    "chart-4": "#e8c468",
    "chart-5": "#f4a462",
}


def _slot_number(slot: str) -> int:
    prefix, _, number = slot.rpartition("-")
    if prefix != "chart" or not number.isdigit() or int(number) < 1:
        raise ValueError(f"Unknown color slot: {slot!r}")
    return int(number)


def color_for(index: int, palette: Sequence[str] = LINE_PALETTE) -> str:
    """Slot for the ``index``-th series or item, cycling through ``palette``."""
    if not palette:
        raise ValueError("palette must not be empty")
    return palette[index % len(palette)]


def random_color(rng: random.Random, palette: Sequence[str] = BAR_PALETTE) -> str:
    """Uniformly random slot from ``palette``."""
    if not palette:
        raise ValueError("palette must not be empty")
    return palette[rng.randrange(len(palette))]


def resolve_slot_color(slot: str) -> str:
    """Base slot a slot resolves to when the theme lacks it."""
    number = _slot_number(slot)
    return f"chart-{(number - 1) % BASE_SLOT_COUNT + 1}"


def hex_for_slot(slot: str) -> str:
    return SLOT_HEX[resolve_slot_color(slot)]
