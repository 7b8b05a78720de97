"""Match a gear inventory against a trip's requirement list.

Every (gear, requirement) pair is validated independently. For each
requirement the highest-scoring item wins; ties go to the item whose name is
closest to the requirement's display name, then to inventory order.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from rapidfuzz import fuzz

from gearfit.models.gear import GearRequirement, Priority, UserGear, ValidationResult
from gearfit.validation.validator import MARGINAL_THRESHOLD, RequirementValidator

logger = logging.getLogger(__name__)

# Lower is served first; unspecified priority counts as recommended
PRIORITY_RANK: dict[Optional[Priority], int] = {
    Priority.CRITICAL: 0,
    Priority.RECOMMENDED: 1,
    None: 1,
    Priority.OPTIONAL: 2,
}


@dataclass
class GearMatch:
    """A validated pairing of one gear item with one requirement."""

    gear: UserGear
    requirement: GearRequirement
    result: ValidationResult

    @property
    def score(self) -> int:
        return self.result.score

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "requirement": self.requirement.item,
            "gear": self.gear.display_name,
            "status": self.result.status.value,
            "score": self.result.score,
            "reasons": list(self.result.reasons),
        }


def name_similarity(user_gear: UserGear, requirement: GearRequirement) -> float:
    """Fuzzy similarity (0-100) between gear name and requirement item."""
    return fuzz.WRatio(user_gear.display_name.lower(), requirement.item.lower())


def check_unique_items(requirements: Sequence[GearRequirement]) -> None:
    """Reject requirement lists where two entries share an item name.

    Matches are keyed by item name, so a repeated name would lose a match.

    Raises:
        ValueError: If an item name appears more than once
    """
    seen: set[str] = set()
    duplicates: list[str] = []
    for requirement in requirements:
        if requirement.item in seen and requirement.item not in duplicates:
            duplicates.append(requirement.item)
        seen.add(requirement.item)
    if duplicates:
        raise ValueError(
            f"Duplicate requirement items: {', '.join(duplicates)} "
            "(give each requirement a distinct item name)"
        )


def _rank_indexed(
    inventory: Sequence[UserGear],
    requirement: GearRequirement,
    validator: RequirementValidator,
) -> list[tuple[int, GearMatch]]:
    scored = []
    for index, gear in enumerate(inventory):
        result = validator.validate(gear, requirement)
        scored.append(
            (
                -result.score,
                -name_similarity(gear, requirement),
                index,
                GearMatch(gear=gear, requirement=requirement, result=result),
            )
        )
    scored.sort(key=lambda entry: entry[:3])
    return [(index, match) for _, _, index, match in scored]


def rank_gear(
    inventory: Sequence[UserGear],
    requirement: GearRequirement,
    validator: Optional[RequirementValidator] = None,
) -> list[GearMatch]:
    """Validate every item against a requirement, best first.

    Args:
        inventory: Candidate gear
        requirement: Trip requirement
        validator: Validator to use, defaults to the built-in severity table

    Returns:
        List of GearMatch sorted by score descending
    """
    validator = validator or RequirementValidator()
    return [match for _, match in _rank_indexed(inventory, requirement, validator)]


def match_inventory(
    inventory: Sequence[UserGear],
    requirements: Sequence[GearRequirement],
    validator: Optional[RequirementValidator] = None,
    exclusive: bool = True,
    min_score: int = MARGINAL_THRESHOLD,
) -> dict[str, Optional[GearMatch]]:
    """Pick the best inventory item for each requirement.

    Critical requirements are served first, then recommended, then optional.

    Args:
        inventory: Owned gear
        requirements: Trip requirements
        validator: Validator to use, defaults to the built-in severity table
        exclusive: If True, an item fills at most one requirement
        min_score: Lowest score that still counts as a match

    Returns:
        Dict of requirement item -> GearMatch (or None), in requirement order

    Raises:
        ValueError: If two requirements share an item name
    """
    check_unique_items(requirements)
    validator = validator or RequirementValidator()
    matches: dict[str, Optional[GearMatch]] = {req.item: None for req in requirements}
    used: set[int] = set()

    service_order = sorted(
        range(len(requirements)),
        key=lambda i: PRIORITY_RANK[requirements[i].priority],
    )

    for req_index in service_order:
        requirement = requirements[req_index]
        for gear_index, match in _rank_indexed(inventory, requirement, validator):
            if match.score < min_score:
                break
            if exclusive and gear_index in used:
                continue
            matches[requirement.item] = match
            used.add(gear_index)
            logger.info(
                f"Matched {match.gear.display_name} to {requirement.item} "
                f"({match.result.status.value}, {match.score})"
            )
            break

        if matches[requirement.item] is None:
            logger.info(f"No inventory match for {requirement.item} (min score {min_score})")

    return matches
