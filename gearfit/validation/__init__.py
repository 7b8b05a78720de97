"""Gear requirement validation engine.

Scores a piece of gear against one trip requirement:
- categories: category path compatibility and the severity table
- checks: per-field requirement checkers and key routing
- validator: score aggregation and status classification
- formatting: status to indicator/color/label mapping
"""

from gearfit.validation.categories import (
    CATEGORY_SEVERITY,
    SeverityTableError,
    check_category_match,
    load_severity_table,
    merge_severity_tables,
)
from gearfit.validation.checks import check_requirement, route_for_key
from gearfit.validation.formatting import (
    STATUS_BADGES,
    StatusBadge,
    StatusColor,
    format_validation_result,
)
from gearfit.validation.outcome import CheckOutcome
from gearfit.validation.validator import (
    RequirementValidator,
    classify_score,
    validate_gear_for_requirement,
)

__all__ = [
    "CATEGORY_SEVERITY",
    "SeverityTableError",
    "check_category_match",
    "load_severity_table",
    "merge_severity_tables",
    "check_requirement",
    "route_for_key",
    "STATUS_BADGES",
    "StatusBadge",
    "StatusColor",
    "format_validation_result",
    "CheckOutcome",
    "RequirementValidator",
    "classify_score",
    "validate_gear_for_requirement",
]
