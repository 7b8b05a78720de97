"""Per-field requirement checks.

Each requirement key on a trip (``temperature_rating``, ``crampon_compatibility``,
``max_weight`` ...) is routed to one checker by substring match on the key.
A checker compares the constraint text with the gear's specs and returns a
CheckOutcome.

Unknown specs are penalized with a checker-specific "unknown" deduction. A
constraint text that cannot be parsed gets the same deduction: a requirement
we cannot read is as unverifiable as a spec we do not have.
"""

import logging
import re
from typing import Callable, Optional

from gearfit.models.gear import GearSpec, UserGear
from gearfit.validation.outcome import PASS, CheckOutcome, format_number

logger = logging.getLogger(__name__)

TEMPERATURE_PATTERN = re.compile(r"-?\d+")
WATERPROOF_PATTERN = re.compile(r"(\d+)(?:[,.](\d{3}))?")
WEIGHT_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(kilograms?|kgs?|grams?|gms?|grs?|g)\b", re.IGNORECASE
)

# Unknown/unreadable deductions per checker
TEMPERATURE_UNKNOWN = 30
CRAMPON_UNKNOWN = 30
WATERPROOF_UNKNOWN = 25
MEMBRANE_UNKNOWN = 20
WEIGHT_UNKNOWN = 10
FEATURE_UNKNOWN = 10

Checker = Callable[[GearSpec, str], CheckOutcome]


def check_temperature_rating(specs: GearSpec, required: str) -> CheckOutcome:
    """Check a minimum temperature requirement such as "-15°C minimum".

    Args:
        specs: Gear specs
        required: Constraint text

    Returns:
        CheckOutcome graded on how much warmer the gear is rated
    """
    match = TEMPERATURE_PATTERN.search(required)
    if not match:
        return CheckOutcome.deduct(
            TEMPERATURE_UNKNOWN,
            f"Temperature requirement unreadable ('{required}')",
        )
    required_temp = int(match.group(0))

    if specs.temperature_rating_c is None:
        return CheckOutcome.deduct(
            TEMPERATURE_UNKNOWN,
            f"Unknown temperature rating ({required_temp}°C required)",
        )

    gear_temp = specs.temperature_rating_c
    # Positive means the gear is rated for warmer conditions than needed
    diff = gear_temp - required_temp
    gear_str = format_number(gear_temp)

    if diff <= 0:
        return PASS
    if diff <= 5:
        return CheckOutcome.deduct(
            25,
            f"Temperature rating {gear_str}°C vs {required_temp}°C required "
            f"({format_number(diff)}°C gap)",
        )
    if diff <= 10:
        return CheckOutcome.deduct(
            45,
            f"Temperature rating insufficient: {gear_str}°C vs {required_temp}°C required "
            f"({format_number(diff)}°C gap)",
        )
    return CheckOutcome.deduct(
        60,
        f"Temperature rating inadequate: {gear_str}°C vs {required_temp}°C required "
        f"({format_number(diff)}°C gap)",
    )


def check_crampon_compatibility(specs: GearSpec, required: str) -> CheckOutcome:
    """Check crampon compatibility.

    A boolean spec cannot tell strap, semi-automatic and automatic bindings
    apart, so a demand for an automatic-class binding is only partly met.
    """
    required_lower = required.lower()
    needs_semi_auto = "semi-auto" in required_lower or "semi auto" in required_lower
    needs_automatic = "automatic" in required_lower or "auto" in required_lower

    if specs.crampon_compatible is False:
        return CheckOutcome.deduct(50, "Not crampon compatible")

    if specs.crampon_compatible is None:
        return CheckOutcome.deduct(CRAMPON_UNKNOWN, "Crampon compatibility unknown")

    if needs_automatic:
        binding = "semi-automatic" if needs_semi_auto else "automatic"
        return CheckOutcome.deduct(
            15,
            f"Crampon compatible but binding type unverified ({binding} required)",
        )

    return PASS


def parse_waterproof_rating(required: str) -> Optional[int]:
    """Parse a hydrostatic head requirement in mm.

    "20,000mm" and "20000mm" give 20000. Values under 100 are read as
    thousands, so "20k" also gives 20000.

    Returns:
        Rating in mm, or None when the text has no number
    """
    match = WATERPROOF_PATTERN.search(required)
    if not match:
        return None

    rating = int(match.group(1))
    if match.group(2):
        rating = rating * 1000 + int(match.group(2))
    elif rating < 100:
        rating *= 1000
    return rating


def check_waterproof_rating(specs: GearSpec, required: str) -> CheckOutcome:
    """Check a hydrostatic head requirement such as "20,000mm+" or "20k"."""
    required_rating = parse_waterproof_rating(required)
    if required_rating is None:
        if "gore" in required.lower():
            return check_membrane(specs, required)
        return CheckOutcome.deduct(
            WATERPROOF_UNKNOWN,
            f"Waterproof requirement unreadable ('{required}')",
        )

    if specs.waterproof_rating_mm is None:
        if specs.gore_tex:
            # GORE-TEX fabrics are rated 28,000mm and up
            return PASS
        return CheckOutcome.deduct(
            WATERPROOF_UNKNOWN,
            f"Waterproof rating unknown ({required_rating}mm required)",
        )

    gear_rating = specs.waterproof_rating_mm
    gear_str = format_number(gear_rating)
    if gear_rating >= required_rating:
        return PASS
    if gear_rating >= required_rating * 0.7:
        return CheckOutcome.deduct(
            20, f"Waterproof {gear_str}mm vs {required_rating}mm recommended"
        )
    return CheckOutcome.deduct(
        40, f"Waterproof {gear_str}mm insufficient ({required_rating}mm required)"
    )


def check_membrane(specs: GearSpec, required: str) -> CheckOutcome:
    """Check for a GORE-TEX or equivalent membrane."""
    required_lower = required.lower()
    needs_gore_tex = "gore-tex" in required_lower or "gore tex" in required_lower

    if needs_gore_tex and specs.gore_tex is False:
        return CheckOutcome.deduct(
            25, "No Gore-Tex membrane (alternative membrane may suffice)"
        )

    if specs.gore_tex is None and specs.waterproof_rating_mm is None:
        return CheckOutcome.deduct(MEMBRANE_UNKNOWN, "Waterproof membrane unverified")

    return PASS


def parse_weight_limit(required: str) -> Optional[float]:
    """Parse a weight ceiling like "<400g", "under 500g" or "1.2kg" into grams."""
    match = WEIGHT_PATTERN.search(required)
    if not match:
        return None

    weight = float(match.group(1))
    if match.group(2).lower().startswith("k"):
        weight = round(weight * 1000, 3)
    return weight


def check_weight(specs: GearSpec, required: str) -> CheckOutcome:
    """Check a weight ceiling. Weight is comfort, not safety, so penalties are light."""
    limit = parse_weight_limit(required)
    if limit is None:
        return CheckOutcome.deduct(
            WEIGHT_UNKNOWN, f"Weight requirement unreadable ('{required}')"
        )

    if specs.weight_g is None:
        return CheckOutcome.deduct(WEIGHT_UNKNOWN, "Weight unverified")

    gear_weight = specs.weight_g
    gear_str = format_number(gear_weight)
    limit_str = format_number(limit)
    if gear_weight <= limit:
        return PASS
    if gear_weight <= limit * 1.2:
        return CheckOutcome.deduct(
            10, f"Weight {gear_str}g exceeds {limit_str}g target"
        )
    return CheckOutcome.deduct(
        20, f"Weight {gear_str}g significantly over {limit_str}g target"
    )


def normalize_feature_key(key: str) -> str:
    """Lowercase a requirement key and join its words with underscores."""
    return re.sub(r"\s+", "_", key.strip().lower())


def check_generic_feature(specs: GearSpec, key: str, required: str) -> CheckOutcome:
    """Look the requirement key up directly in the specs.

    Booleans are scored. Strings and numbers never deduct: free-form constraint
    text is too loose to compare reliably.
    """
    label = key.replace("_", " ")
    value = specs.lookup(normalize_feature_key(key))

    if value is None:
        return CheckOutcome.deduct(FEATURE_UNKNOWN, f"{label} unverified")

    if isinstance(value, bool):
        if value:
            return PASS
        return CheckOutcome.deduct(25, f"Missing: {label}")

    if isinstance(value, str) and required.lower() not in value.lower():
        logger.debug(f"Feature '{key}' value '{value}' does not mention '{required}'")

    return PASS


# Ordered: the first route whose keyword appears in the key wins
REQUIREMENT_ROUTES: tuple[tuple[str, tuple[str, ...], Checker], ...] = (
    ("temperature", ("temperature", "temp", "rating"), check_temperature_rating),
    ("crampon", ("crampon",), check_crampon_compatibility),
    ("waterproof", ("waterproof",), check_waterproof_rating),
    ("membrane", ("gore", "membrane"), check_membrane),
    ("weight", ("weight",), check_weight),
)

GENERIC_ROUTE = "feature"


def _find_route(key: str) -> tuple[str, Optional[Checker]]:
    key_lower = key.lower()
    for name, keywords, checker in REQUIREMENT_ROUTES:
        if any(keyword in key_lower for keyword in keywords):
            return name, checker
    return GENERIC_ROUTE, None


def route_for_key(key: str) -> str:
    """Name of the checker a requirement key is routed to."""
    return _find_route(key)[0]


def check_requirement(user_gear: UserGear, key: str, required_value: str) -> CheckOutcome:
    """Route one requirement field to its checker.

    Args:
        user_gear: Gear being validated
        key: Requirement key, e.g. "temperature_rating"
        required_value: Constraint text, e.g. "-15°C minimum"

    Returns:
        CheckOutcome from the routed checker
    """
    specs = user_gear.specs or GearSpec()
    name, checker = _find_route(key)

    if checker is None:
        outcome = check_generic_feature(specs, key, required_value)
    else:
        outcome = checker(specs, required_value)

    if outcome.deduction:
        logger.debug(
            f"{user_gear.name}: '{key}' ({name}) -{outcome.deduction}: {'; '.join(outcome.reasons)}"
        )
    return outcome
