"""Trip readiness: a composite score over all requirement matches."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence

from gearfit.matching import GearMatch, check_unique_items
from gearfit.models.gear import GearRequirement, Priority, ValidationStatus
from gearfit.units import format_weight_smart

PRIORITY_WEIGHTS: dict[Optional[Priority], int] = {
    Priority.CRITICAL: 3,
    Priority.RECOMMENDED: 2,
    None: 2,
    Priority.OPTIONAL: 1,
}


class SystemLevel(str, Enum):
    """Overall readiness band."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


def classify_system_score(score: int) -> SystemLevel:
    """Map a system score to its readiness band."""
    if score >= 85:
        return SystemLevel.EXCELLENT
    if score >= 70:
        return SystemLevel.GOOD
    if score >= 50:
        return SystemLevel.FAIR
    return SystemLevel.POOR


@dataclass
class MatchWarning:
    """A matched item that is not fully suitable."""

    item: str
    gear: str
    status: ValidationStatus
    reason: str


@dataclass
class ReadinessReport:
    """Readiness of a gear selection for a whole trip."""

    system_score: int = 0
    system_level: SystemLevel = SystemLevel.POOR
    matched_count: int = 0
    requirement_count: int = 0
    gaps: list[str] = field(default_factory=list)
    critical_gaps: list[str] = field(default_factory=list)
    warnings: list[MatchWarning] = field(default_factory=list)
    total_weight_g: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "system_score": self.system_score,
            "system_level": self.system_level.value,
            "matched_count": self.matched_count,
            "requirement_count": self.requirement_count,
            "gaps": self.gaps,
            "critical_gaps": self.critical_gaps,
            "warnings": [
                {
                    "item": w.item,
                    "gear": w.gear,
                    "status": w.status.value,
                    "reason": w.reason,
                }
                for w in self.warnings
            ],
            "total_weight_g": self.total_weight_g,
            "total_weight": format_weight_smart(self.total_weight_g),
        }


def assess_readiness(
    requirements: Sequence[GearRequirement],
    matches: Mapping[str, Optional[GearMatch]],
) -> ReadinessReport:
    """Build a readiness report from per-requirement matches.

    The system score is the priority-weighted mean of match scores, with an
    unmatched requirement counting as zero.

    Args:
        requirements: Trip requirements
        matches: Requirement item -> best match (or None), as from match_inventory

    Returns:
        ReadinessReport

    Raises:
        ValueError: If two requirements share an item name
    """
    check_unique_items(requirements)
    report = ReadinessReport(requirement_count=len(requirements))
    if not requirements:
        return report

    weighted_total = 0
    weight_sum = 0
    counted_gear: list[int] = []

    for requirement in requirements:
        weight = PRIORITY_WEIGHTS[requirement.priority]
        weight_sum += weight
        match = matches.get(requirement.item)

        if match is None:
            report.gaps.append(requirement.item)
            if requirement.priority == Priority.CRITICAL:
                report.critical_gaps.append(requirement.item)
            continue

        report.matched_count += 1
        weighted_total += weight * match.score

        if match.result.status != ValidationStatus.SUITABLE:
            report.warnings.append(
                MatchWarning(
                    item=requirement.item,
                    gear=match.gear.display_name,
                    status=match.result.status,
                    reason=match.result.reasons[0] if match.result.reasons else "",
                )
            )

        # One item can fill several requirements when matching is not exclusive
        if id(match.gear) not in counted_gear:
            counted_gear.append(id(match.gear))
            if match.gear.specs and match.gear.specs.weight_g is not None:
                report.total_weight_g += match.gear.specs.weight_g

    report.system_score = round(weighted_total / weight_sum)
    report.system_level = classify_system_score(report.system_score)
    return report
