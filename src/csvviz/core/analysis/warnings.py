"""
Warning schema and helpers for chart building.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TypedDict


class ChartWarning(TypedDict, total=False):
    severity: str
    code: str
    message: str
    chart: str
    column: str
    details: Dict[str, Any]


def build_warning(
    *,
    code: str,
    message: str,
    chart: str,
    severity: str = "warning",
    column: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> ChartWarning:
    warning: ChartWarning = {
        "severity": severity,
        "code": code,
        "message": message,
        "chart": chart,
    }
    if column is not None:
        warning["column"] = column
    if details:
        warning["details"] = details
    return warning
