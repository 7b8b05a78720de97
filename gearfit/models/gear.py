"""Data models for gear, trip requirements and validation results."""

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Priority(str, Enum):
    """How important a requirement is for the trip."""

    CRITICAL = "critical"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


class ValidationStatus(str, Enum):
    """Suitability tier derived from the final score."""

    SUITABLE = "suitable"
    MARGINAL = "marginal"
    UNSUITABLE = "unsuitable"


class GearSpec(BaseModel):
    """Measurable attributes of a physical item.

    Every field is optional. A missing value means "unknown" and is never
    replaced with a default. Fields not declared here are kept as extras so
    the generic feature check can find them. Declared fields also accept
    their camelCase names (``temperatureRatingC``, ``goreTex``, ...).
    """

    model_config = ConfigDict(extra="allow")

    temperature_rating_c: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("temperature_rating_c", "temperatureRatingC"),
        description="Lowest comfortable/safe temperature in Celsius",
    )
    waterproof_rating_mm: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("waterproof_rating_mm", "waterproofRatingMm"),
        description="Hydrostatic head rating in millimeters",
    )
    weight_g: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("weight_g", "weightG"),
        description="Mass in grams",
    )
    crampon_compatible: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("crampon_compatible", "cramponCompatible"),
        description="Accepts crampons",
    )
    gore_tex: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("gore_tex", "goreTex"),
        description="Has a GORE-TEX-class membrane",
    )
    insulated: Optional[bool] = Field(None, description="Insulated")
    category: Optional[str] = Field(
        None, description="Informational only, not used for matching"
    )

    def lookup(self, key: str) -> Optional[Any]:
        """Return a declared or extra spec value by name.

        Args:
            key: Field name (snake_case)

        Returns:
            The value, or None when the spec does not know it
        """
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key)


class UserGear(BaseModel):
    """An owned or candidate piece of gear."""

    name: str = Field(..., description="Product name")
    manufacturer: Optional[str] = Field(None, description="Brand/manufacturer")
    category: Optional[str] = Field(
        None, description="Slash-delimited path, e.g. footwear/alpine_boots/4_season"
    )
    specs: Optional[GearSpec] = Field(None, description="Known specifications")

    @property
    def display_name(self) -> str:
        if self.manufacturer:
            return f"{self.manufacturer} {self.name}"
        return self.name


class GearRequirement(BaseModel):
    """A trip's need for one class of item."""

    item: str = Field(..., description="Display name of the needed item")
    category: Optional[str] = Field(None, description="Slash-delimited path")
    priority: Optional[Priority] = Field(None, description="Requirement priority")
    requirements: Optional[dict[str, str]] = Field(
        None, description="Constraint key to human-readable constraint text"
    )
    reasoning: Optional[str] = Field(
        None, description="Why the trip needs this (not scored)"
    )


class ValidationResult(BaseModel):
    """Graded verdict for one gear/requirement pair."""

    model_config = ConfigDict(frozen=True)

    status: ValidationStatus
    score: int = Field(..., ge=0, le=100)
    reasons: tuple[str, ...] = Field(default_factory=tuple)
