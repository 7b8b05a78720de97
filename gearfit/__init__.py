"""gearfit: score outdoor gear against trip requirements.

Modules:
- models: GearSpec, UserGear, GearRequirement and ValidationResult records
- validation: the rule-based requirement matcher and display mapping
- matching: best inventory item per trip requirement
- readiness: composite trip readiness score
- units: weight formatting
- config: environment settings for the command line
"""

from gearfit.models.gear import (
    GearRequirement,
    GearSpec,
    Priority,
    UserGear,
    ValidationResult,
    ValidationStatus,
)
from gearfit.validation.formatting import format_validation_result
from gearfit.validation.validator import (
    RequirementValidator,
    validate_gear_for_requirement,
)

__all__ = [
    "GearRequirement",
    "GearSpec",
    "Priority",
    "UserGear",
    "ValidationResult",
    "ValidationStatus",
    "RequirementValidator",
    "format_validation_result",
    "validate_gear_for_requirement",
]
