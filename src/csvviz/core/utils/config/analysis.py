"""Inference and chart configuration classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from .base import (
    BAR_COLOR_STRATEGIES,
    BAR_MAX_GROUPS,
    CATEGORICAL_RATIO,
    GEOGRAPHIC_MAX_DISTINCT,
    GEOGRAPHIC_MIN_DISTINCT,
    GEOGRAPHIC_NAME_HINTS,
    LINE_MAX_POINTS,
    NUMERIC_RATIO,
    PIE_MAX_SLICES,
    SEQUENTIAL_MAX_RATIO,
    SEQUENTIAL_MIN_DISTINCT,
    SEQUENTIAL_NAME_HINTS,
)


def _ratio(name: str, value: object, default: float) -> float:
    from csvviz.core.utils.logger import log_warning

    try:
        ratio = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        log_warning("CONFIG", f"Invalid {name} '{value}', using {default}")
        return default
    if not 0.0 <= ratio <= 1.0:
        log_warning("CONFIG", f"{name} {ratio} outside [0, 1], using {default}")
        return default
    return ratio


def _count(name: str, value: object, default: int, minimum: int = 0) -> int:
    from csvviz.core.utils.logger import log_warning

    try:
        count = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        log_warning("CONFIG", f"Invalid {name} '{value}', using {default}")
        return default
    if count < minimum:
        log_warning("CONFIG", f"{name} {count} < {minimum}, using {default}")
        return default
    return count


def _hints(name: str, value: object, default: tuple[str, ...]) -> tuple[str, ...]:
    from csvviz.core.utils.logger import log_warning

    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        log_warning("CONFIG", f"Invalid {name} '{value}', using defaults")
        return default
    hints = tuple(str(item).strip().lower() for item in value if str(item).strip())
    return hints or default


@dataclass
class InferenceConfig:
    """Thresholds and name hints used by column role inference."""

    numeric_ratio: float = NUMERIC_RATIO
    categorical_ratio: float = CATEGORICAL_RATIO
    sequential_min_distinct: int = SEQUENTIAL_MIN_DISTINCT
    sequential_max_ratio: float = SEQUENTIAL_MAX_RATIO
    geographic_min_distinct: int = GEOGRAPHIC_MIN_DISTINCT
    geographic_max_distinct: int = GEOGRAPHIC_MAX_DISTINCT
    sequential_name_hints: tuple[str, ...] = field(
        default_factory=lambda: SEQUENTIAL_NAME_HINTS
    )
    geographic_name_hints: tuple[str, ...] = field(
        default_factory=lambda: GEOGRAPHIC_NAME_HINTS
    )

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalize and validate thresholds (warn + default on invalid)."""
        self.numeric_ratio = _ratio("numeric_ratio", self.numeric_ratio, NUMERIC_RATIO)
        self.categorical_ratio = _ratio(
            "categorical_ratio", self.categorical_ratio, CATEGORICAL_RATIO
        )
        self.sequential_max_ratio = _ratio(
            "sequential_max_ratio", self.sequential_max_ratio, SEQUENTIAL_MAX_RATIO
        )
        self.sequential_min_distinct = _count(
            "sequential_min_distinct",
            self.sequential_min_distinct,
            SEQUENTIAL_MIN_DISTINCT,
        )
        self.geographic_min_distinct = _count(
            "geographic_min_distinct",
            self.geographic_min_distinct,
            GEOGRAPHIC_MIN_DISTINCT,
        )
        self.geographic_max_distinct = _count(
            "geographic_max_distinct",
            self.geographic_max_distinct,
            GEOGRAPHIC_MAX_DISTINCT,
        )
        if self.geographic_max_distinct < self.geographic_min_distinct:
            from csvviz.core.utils.logger import log_warning

            log_warning(
                "CONFIG",
                "geographic_max_distinct < geographic_min_distinct; using defaults",
            )
            self.geographic_min_distinct = GEOGRAPHIC_MIN_DISTINCT
            self.geographic_max_distinct = GEOGRAPHIC_MAX_DISTINCT
        self.sequential_name_hints = _hints(
            "sequential_name_hints", self.sequential_name_hints, SEQUENTIAL_NAME_HINTS
        )
        self.geographic_name_hints = _hints(
            "geographic_name_hints", self.geographic_name_hints, GEOGRAPHIC_NAME_HINTS
        )


@dataclass
class ChartLimitsConfig:
    """Output limits and color strategy for chart builders."""

    bar_max_groups: int = BAR_MAX_GROUPS
    pie_max_slices: int = PIE_MAX_SLICES
    line_max_points: int = LINE_MAX_POINTS
    bar_color_strategy: Literal["index", "random"] = "index"
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalize and validate limits (warn + default on invalid)."""
        from csvviz.core.utils.logger import log_warning

        self.bar_max_groups = _count(
            "bar_max_groups", self.bar_max_groups, BAR_MAX_GROUPS, minimum=1
        )
        self.pie_max_slices = _count(
            "pie_max_slices", self.pie_max_slices, PIE_MAX_SLICES, minimum=1
        )
        self.line_max_points = _count(
            "line_max_points", self.line_max_points, LINE_MAX_POINTS, minimum=1
        )

        strategy = str(self.bar_color_strategy).strip().lower()
        if strategy not in BAR_COLOR_STRATEGIES:
            log_warning(
                "CONFIG",
                f"Invalid bar_color_strategy '{self.bar_color_strategy}', using 'index'",
            )
            strategy = "index"
        self.bar_color_strategy = strategy  # type: ignore[assignment]

        if self.random_seed is not None:
            try:
                self.random_seed = int(self.random_seed)
            except (TypeError, ValueError):
                log_warning(
                    "CONFIG", f"Invalid random_seed '{self.random_seed}', ignoring"
                )
                self.random_seed = None
