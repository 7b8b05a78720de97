"""Display mapping from validation status to indicator, color and label."""

from dataclasses import dataclass
from enum import Enum

from gearfit.models.gear import ValidationResult, ValidationStatus


class StatusColor(str, Enum):
    """Color tokens for status display."""

    FOREST = "#2C5530"
    AMBER = "#CC5500"
    CHARCOAL = "#2B2B2B"


@dataclass(frozen=True)
class StatusBadge:
    """Glyph, color and label for one status tier."""

    indicator: str
    color: StatusColor
    label: str


STATUS_BADGES: dict[ValidationStatus, StatusBadge] = {
    ValidationStatus.SUITABLE: StatusBadge("●", StatusColor.FOREST, "SUITABLE"),
    ValidationStatus.MARGINAL: StatusBadge("◐", StatusColor.AMBER, "MARGINAL"),
    ValidationStatus.UNSUITABLE: StatusBadge("○", StatusColor.CHARCOAL, "UNSUITABLE"),
}


def format_validation_result(result: ValidationResult) -> StatusBadge:
    """Get the display badge for a validation result."""
    return STATUS_BADGES[result.status]
