"""Shared configuration constants."""

from __future__ import annotations

# Column-name fragments that mark a column as an ordered/temporal axis
SEQUENTIAL_NAME_HINTS = ("date", "time", "year", "month", "day")

# Column-name fragments that mark a column as a region/grouping key
GEOGRAPHIC_NAME_HINTS = (
    "state",
    "region",
    "country",
    "province",
    "location",
    "territory",
)

# Label used for rows whose grouping key is missing or empty
UNKNOWN_LABEL = "Unknown"

# Role inference thresholds
NUMERIC_RATIO = 0.8
CATEGORICAL_RATIO = 0.2
SEQUENTIAL_MIN_DISTINCT = 3
SEQUENTIAL_MAX_RATIO = 0.5
GEOGRAPHIC_MIN_DISTINCT = 2
GEOGRAPHIC_MAX_DISTINCT = 100

# Output size limits per chart type
BAR_MAX_GROUPS = 20
PIE_MAX_SLICES = 12
LINE_MAX_POINTS = 100

BAR_COLOR_STRATEGIES = ("index", "random")
