"""Result of a single deduction check."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CheckOutcome:
    """Points deducted by one check and the reasons shown to the user."""

    deduction: int = 0
    reasons: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def deduct(cls, deduction: int, reason: str) -> "CheckOutcome":
        return cls(deduction=deduction, reasons=(reason,))


PASS = CheckOutcome()


def format_number(value: float) -> str:
    """Render whole floats without a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
