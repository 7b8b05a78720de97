"""Data models for gear validation."""

from gearfit.models.gear import (
    GearRequirement,
    GearSpec,
    Priority,
    UserGear,
    ValidationResult,
    ValidationStatus,
)

__all__ = [
    "GearRequirement",
    "GearSpec",
    "Priority",
    "UserGear",
    "ValidationResult",
    "ValidationStatus",
]
