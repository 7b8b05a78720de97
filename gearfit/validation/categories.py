"""Category compatibility rules.

Categories are slash-delimited paths such as ``footwear/alpine_boots/4_season``.
A different top-level segment is close to disqualifying. A different
second-level segment is scored from ``CATEGORY_SEVERITY``, a table of how much
a given substitution matters (hiking boots offered for an alpine boot
requirement, and so on).
"""

import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from gearfit.models.gear import GearRequirement, UserGear
from gearfit.validation.outcome import PASS, CheckOutcome

logger = logging.getLogger(__name__)

TOP_LEVEL_MISMATCH_DEDUCTION = 60
DEFAULT_SUBCATEGORY_DEDUCTION = 20

SeverityTable = Mapping[str, Mapping[str, int]]

# required subcategory -> offered subcategory -> deduction
CATEGORY_SEVERITY: dict[str, dict[str, int]] = {
    "alpine_boots": {
        "hiking_boots": 40,
        "approach_shoes": 50,
        "trail_runners": 60,
    },
    "4_season": {
        "3_season": 30,
        "hiking_boots": 50,
    },
    "mountaineering": {
        "hiking_boots": 40,
        "backpacking": 35,
    },
}


class SeverityTableError(ValueError):
    """Raised when a severity table overlay is malformed."""


def _humanize(segment: str) -> str:
    return segment.replace("_", " ")


def subcategory_severity(
    required: str,
    actual: str,
    severity_table: Optional[SeverityTable] = None,
) -> CheckOutcome:
    """Score a second-level category substitution.

    Args:
        required: Required subcategory segment (lowercase)
        actual: Offered subcategory segment (lowercase)
        severity_table: Table to consult, defaults to CATEGORY_SEVERITY

    Returns:
        CheckOutcome with the mapped or default deduction
    """
    table = CATEGORY_SEVERITY if severity_table is None else severity_table
    deduction = table.get(required, {}).get(actual)

    if deduction is not None:
        return CheckOutcome.deduct(
            deduction,
            f"{_humanize(actual)} may not meet {_humanize(required)} requirements",
        )

    return CheckOutcome.deduct(
        DEFAULT_SUBCATEGORY_DEDUCTION,
        f"Category mismatch: {_humanize(actual)} vs {_humanize(required)}",
    )


def check_category_match(
    user_gear: UserGear,
    requirement: GearRequirement,
    severity_table: Optional[SeverityTable] = None,
) -> CheckOutcome:
    """Compare the gear's category path with the required one.

    Only the first applicable rule fires. Missing categories on either side
    are never penalized here.

    Args:
        user_gear: Gear being validated
        requirement: Trip requirement
        severity_table: Optional override for subcategory severities

    Returns:
        CheckOutcome (zero deduction when compatible or unknown)
    """
    if not requirement.category or not user_gear.category:
        return PASS

    required_path = requirement.category.lower()
    gear_path = user_gear.category.lower()

    if required_path == gear_path:
        return PASS

    required_parts = required_path.split("/")
    gear_parts = gear_path.split("/")

    if required_parts[0] != gear_parts[0]:
        logger.debug(
            f"Top-level category mismatch: {user_gear.category} vs {requirement.category}"
        )
        return CheckOutcome.deduct(
            TOP_LEVEL_MISMATCH_DEDUCTION,
            f"Wrong category: {user_gear.category} vs required {requirement.category}",
        )

    if (
        len(required_parts) > 1
        and len(gear_parts) > 1
        and required_parts[1] != gear_parts[1]
    ):
        return subcategory_severity(required_parts[1], gear_parts[1], severity_table)

    return PASS


def merge_severity_tables(
    base: SeverityTable, overrides: SeverityTable
) -> dict[str, dict[str, int]]:
    """Build a new table with overrides layered over base.

    Args:
        base: Starting table (left untouched)
        overrides: Entries to add or replace

    Returns:
        A fresh nested dict

    Raises:
        SeverityTableError: If an override is not a valid deduction
    """
    merged = {required: dict(actuals) for required, actuals in base.items()}

    for required, actuals in overrides.items():
        if not isinstance(actuals, Mapping):
            raise SeverityTableError(
                f"Entry for '{required}' must map subcategories to deductions"
            )
        target = merged.setdefault(required.lower(), {})
        for actual, deduction in actuals.items():
            if isinstance(deduction, bool) or not isinstance(deduction, int):
                raise SeverityTableError(
                    f"Deduction for {required}/{actual} must be an integer, got {deduction!r}"
                )
            if not 0 <= deduction <= 100:
                raise SeverityTableError(
                    f"Deduction for {required}/{actual} must be within 0-100, got {deduction}"
                )
            target[actual.lower()] = deduction

    return merged


def load_severity_table(
    path: Union[str, Path], base: Optional[SeverityTable] = None
) -> dict[str, dict[str, int]]:
    """Load a JSON severity overlay and merge it over the default table.

    Args:
        path: JSON file shaped ``{"required": {"actual": deduction}}``
        base: Table to extend, defaults to CATEGORY_SEVERITY

    Returns:
        The merged table

    Raises:
        SeverityTableError: If the file is not a JSON object of valid entries
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SeverityTableError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SeverityTableError(f"{path} must contain a JSON object")

    merged = merge_severity_tables(
        CATEGORY_SEVERITY if base is None else base, data
    )
    logger.info(f"Loaded category severity overlay from {path}")
    return merged
