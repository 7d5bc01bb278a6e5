"""
Column role inference.

Every column of a dataset is tagged with zero or more roles in a single pass:

- NUMERIC: most cells are numbers (measure candidate)
- CATEGORICAL: not numeric, or very few distinct values (grouping candidate)
- SEQUENTIAL: date-like name, or a moderate number of distinct values
  (x-axis candidate for line charts)
- GEOGRAPHIC_KEY: region-like name, or a bounded number of distinct values
  (grouping column for line and pie charts)

Roles are not exclusive. They are recomputed from the dataset on demand and
carry no state of their own.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterator, Mapping, Optional

from csvviz.core.analysis.values import is_numeric, label_for
from csvviz.core.domain.dataset import Dataset
from csvviz.core.utils.config.analysis import InferenceConfig
from csvviz.core.utils.logger import log_debug, log_performance


class ColumnRole(str, Enum):
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    SEQUENTIAL = "sequential"
    GEOGRAPHIC_KEY = "geographic_key"


ColumnRoleSet = FrozenSet[ColumnRole]

_ROLE_ORDER = (
    ColumnRole.NUMERIC,
    ColumnRole.CATEGORICAL,
    ColumnRole.SEQUENTIAL,
    ColumnRole.GEOGRAPHIC_KEY,
)


@dataclass(frozen=True)
class ColumnProfile:
    """Counts the role decision was based on."""

    name: str
    row_count: int
    numeric_count: int
    distinct_count: int

    @property
    def numeric_fraction(self) -> float:
        if self.row_count == 0:
            return 0.0
        return self.numeric_count / self.row_count


@dataclass(frozen=True)
class RoleClassification:
    """Roles per column, in dataset column order."""

    columns: tuple[str, ...] = ()
    roles: Mapping[str, ColumnRoleSet] = field(default_factory=dict)
    profiles: Mapping[str, ColumnProfile] = field(default_factory=dict)

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def roles_for(self, column: str) -> ColumnRoleSet:
        return self.roles.get(column, frozenset())

    def has_role(self, column: str, role: ColumnRole) -> bool:
        return role in self.roles_for(column)

    def columns_with(self, role: ColumnRole) -> list[str]:
        return [column for column in self.columns if role in self.roles_for(column)]

    def first(self, role: ColumnRole) -> Optional[str]:
        for column in self.columns:
            if role in self.roles_for(column):
                return column
        return None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for column in self.columns:
            profile = self.profiles.get(column)
            result[column] = {
                "roles": [r.value for r in _ROLE_ORDER if r in self.roles_for(column)],
                "numeric_count": profile.numeric_count if profile else 0,
                "distinct_count": profile.distinct_count if profile else 0,
            }
        return result


@dataclass(frozen=True)
class ColumnDefaults:
    """Columns picked when the user has not chosen any."""

    category: Optional[str] = None
    sequence: Optional[str] = None
    measure: Optional[str] = None
    group: Optional[str] = None


def _name_matches(column: str, hints: tuple[str, ...]) -> bool:
    lowered = column.lower()
    return any(hint in lowered for hint in hints)


def _profile(dataset: Dataset, column: str) -> ColumnProfile:
    values = dataset.values(column)
    return ColumnProfile(
        name=column,
        row_count=len(values),
        numeric_count=sum(1 for value in values if is_numeric(value)),
        distinct_count=len(set(values)),
    )


def _roles(
    column: str, profile: ColumnProfile, inference: InferenceConfig
) -> ColumnRoleSet:
    rows = profile.row_count
    if rows == 0:
        return frozenset()

    distinct = profile.distinct_count
    roles: set[ColumnRole] = set()

    numeric = profile.numeric_count / rows >= inference.numeric_ratio
    if numeric:
        roles.add(ColumnRole.NUMERIC)
    if not numeric or distinct < inference.categorical_ratio * rows:
        roles.add(ColumnRole.CATEGORICAL)

    if _name_matches(column, inference.sequential_name_hints) or (
        distinct > inference.sequential_min_distinct
        and distinct <= inference.sequential_max_ratio * rows
    ):
        roles.add(ColumnRole.SEQUENTIAL)

    if _name_matches(column, inference.geographic_name_hints) or (
        inference.geographic_min_distinct
        <= distinct
        <= inference.geographic_max_distinct
    ):
        roles.add(ColumnRole.GEOGRAPHIC_KEY)

    return frozenset(roles)


def classify_columns(
    dataset: Dataset, inference: InferenceConfig | None = None
) -> RoleClassification:
    """Tag every column of ``dataset`` with its roles.

    Args:
        dataset: Dataset to inspect
        inference: Thresholds and name hints (defaults when omitted)

    Returns:
        RoleClassification covering every column, in dataset order
    """
    inference = inference or InferenceConfig()
    start = time.perf_counter()

    profiles: dict[str, ColumnProfile] = {}
    roles: dict[str, ColumnRoleSet] = {}
    for column in dataset.columns:
        profile = _profile(dataset, column)
        profiles[column] = profile
        roles[column] = _roles(column, profile, inference)
        log_debug(
            "ROLES",
            f"{column}: {sorted(r.value for r in roles[column])}",
            f"numeric={profile.numeric_count}/{profile.row_count}, "
            f"distinct={profile.distinct_count}",
        )

    log_performance(
        "classify_columns",
        time.perf_counter() - start,
        f"{dataset.column_count} columns, {dataset.row_count} rows",
    )
    return RoleClassification(columns=dataset.columns, roles=roles, profiles=profiles)


def default_columns(
    dataset: Dataset, roles: RoleClassification | None = None
) -> ColumnDefaults:
    """Pick default columns from the inferred roles.

    - category: first categorical column, else the first column
    - sequence: first sequential column, else the first column
    - measure: first numeric column, else the second column, else the first
    - group: first geographic key column, else None
    """
    columns = dataset.columns
    if not columns:
        return ColumnDefaults()
    roles = roles if roles is not None else classify_columns(dataset)

    first = columns[0]
    fallback_measure = columns[1] if len(columns) > 1 else first
    return ColumnDefaults(
        category=roles.first(ColumnRole.CATEGORICAL) or first,
        sequence=roles.first(ColumnRole.SEQUENTIAL) or first,
        measure=roles.first(ColumnRole.NUMERIC) or fallback_measure,
        group=roles.first(ColumnRole.GEOGRAPHIC_KEY),
    )


def group_options(dataset: Dataset, column: Optional[str]) -> list[str]:
    """Sorted distinct labels of ``column`` for the single-group chooser."""
    if not column or not dataset.has_column(column):
        return []
    return sorted({label_for(value) for value in dataset.values(column)})
