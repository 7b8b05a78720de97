"""Weight display helpers."""

from typing import Optional

GRAMS_PER_OZ = 28.35
GRAMS_PER_LB = 453.6


def format_weight(grams: Optional[float], unit: str = "g") -> str:
    """Format a weight for display.

    Args:
        grams: Weight in grams
        unit: One of "g", "kg", "oz", "lbs"

    Returns:
        Formatted string, or "" when the weight is missing or zero
    """
    if not grams:
        return ""

    if unit == "kg":
        return f"{grams / 1000:.2f}kg"
    if unit == "oz":
        return f"{grams / GRAMS_PER_OZ:.1f}oz"
    if unit == "lbs":
        return f"{grams / GRAMS_PER_LB:.2f}lbs"
    return f"{round(grams)}g"


def format_weight_smart(grams: Optional[float]) -> str:
    """Format in kg from 1000g up, grams below."""
    if not grams:
        return ""
    if grams >= 1000:
        return format_weight(grams, "kg")
    return format_weight(grams, "g")
