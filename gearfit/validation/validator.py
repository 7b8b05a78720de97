"""Score aggregation for one gear/requirement pair.

Scoring starts at 100. The category check runs once, then every requirement
field runs in the order the trip listed them. Deductions are subtracted, the
reasons are concatenated in evaluation order, and the clamped score is
classified into a status tier.
"""

import logging
from typing import Optional

from gearfit.models.gear import (
    GearRequirement,
    UserGear,
    ValidationResult,
    ValidationStatus,
)
from gearfit.validation.categories import SeverityTable, check_category_match
from gearfit.validation.checks import check_requirement

logger = logging.getLogger(__name__)

PERFECT_SCORE = 100
SUITABLE_THRESHOLD = 80
MARGINAL_THRESHOLD = 50


def classify_score(score: int) -> ValidationStatus:
    """Map a final score to its status tier.

    Args:
        score: Final score (0-100)

    Returns:
        SUITABLE at 80 and up, MARGINAL at 50-79, UNSUITABLE below 50
    """
    if score >= SUITABLE_THRESHOLD:
        return ValidationStatus.SUITABLE
    if score >= MARGINAL_THRESHOLD:
        return ValidationStatus.MARGINAL
    return ValidationStatus.UNSUITABLE


class RequirementValidator:
    """Validates gear against trip requirements.

    Holds only the category severity table, which is never mutated, so one
    instance can be shared across threads.
    """

    def __init__(self, severity_table: Optional[SeverityTable] = None):
        """Initialize the validator.

        Args:
            severity_table: Subcategory severity table, defaults to the built-in one
        """
        self.severity_table = severity_table

    def validate(
        self, user_gear: UserGear, requirement: GearRequirement
    ) -> ValidationResult:
        """Score one piece of gear against one requirement.

        Args:
            user_gear: Owned or candidate gear
            requirement: Trip requirement

        Returns:
            ValidationResult with status, score and ordered reasons
        """
        score = PERFECT_SCORE
        reasons: list[str] = []

        category = check_category_match(user_gear, requirement, self.severity_table)
        if category.deduction > 0:
            score -= category.deduction
            reasons.extend(category.reasons)

        for key, required_value in (requirement.requirements or {}).items():
            outcome = check_requirement(user_gear, key, required_value)
            if outcome.deduction > 0:
                score -= outcome.deduction
                reasons.extend(outcome.reasons)

        score = max(0, score)
        status = classify_score(score)

        logger.debug(
            f"{user_gear.name} for {requirement.item}: {status.value} ({score})"
        )
        return ValidationResult(status=status, score=score, reasons=tuple(reasons))


_default_validator = RequirementValidator()


def validate_gear_for_requirement(
    user_gear: UserGear, requirement: GearRequirement
) -> ValidationResult:
    """Convenience function using the built-in severity table.

    Args:
        user_gear: Owned or candidate gear
        requirement: Trip requirement

    Returns:
        ValidationResult
    """
    return _default_validator.validate(user_gear, requirement)
