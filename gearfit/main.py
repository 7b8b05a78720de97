"""
Command line entry point for gearfit.

Usage:
    gearfit check trip.json [--severity-table table.json] [--shared] [--json]

The trip file holds ``{"gear": [...], "requirements": [...]}`` using the
UserGear and GearRequirement field names. Spec keys may be snake_case or
camelCase (``weight_g`` or ``weightG``).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from gearfit.config import configure_logging, get_settings
from gearfit.matching import GearMatch, check_unique_items, match_inventory
from gearfit.models.gear import GearRequirement, UserGear
from gearfit.readiness import ReadinessReport, assess_readiness
from gearfit.validation.categories import SeverityTableError, load_severity_table
from gearfit.validation.formatting import format_validation_result
from gearfit.validation.validator import RequirementValidator

logger = logging.getLogger(__name__)


def load_trip_file(path: Path) -> tuple[list[UserGear], list[GearRequirement]]:
    """Read gear and requirements from a JSON trip file.

    Args:
        path: Path to the JSON file

    Returns:
        Tuple of (gear list, requirement list)

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not JSON
        ValueError: If the top level is not an object or requirement items repeat
        ValidationError: If a record does not match its model
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")

    gear = [UserGear.model_validate(item) for item in data.get("gear", [])]
    requirements = [
        GearRequirement.model_validate(item) for item in data.get("requirements", [])
    ]
    check_unique_items(requirements)
    return gear, requirements


def print_report(
    requirements: Sequence[GearRequirement],
    matches: dict[str, Optional[GearMatch]],
    report: ReadinessReport,
) -> None:
    """Print matches and readiness in a human-readable form."""
    print("gearfit - Trip Gear Check")
    print("=" * 55)

    for requirement in requirements:
        priority = requirement.priority.value if requirement.priority else "recommended"
        print(f"\n{requirement.item} [{priority}]")

        match = matches.get(requirement.item)
        if match is None:
            print("  ○ No suitable gear in inventory")
            continue

        badge = format_validation_result(match.result)
        print(
            f"  {badge.indicator} {match.gear.display_name}: "
            f"{badge.label} ({match.result.score})"
        )
        for reason in match.result.reasons:
            print(f"    - {reason}")

    print("\n" + "=" * 55)
    print(
        f"Readiness: {report.system_level.value.upper()} ({report.system_score}/100), "
        f"{report.matched_count}/{report.requirement_count} items matched"
    )
    if report.total_weight_g:
        print(f"Matched weight: {report.to_dict()['total_weight']}")
    if report.critical_gaps:
        print(f"Critical gaps: {', '.join(report.critical_gaps)}")
    elif report.gaps:
        print(f"Gaps: {', '.join(report.gaps)}")


def run_check(args: argparse.Namespace) -> int:
    """Run the ``check`` command.

    Returns:
        Process exit code
    """
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    configure_logging(settings.log_level)

    table_path = args.severity_table or settings.severity_table_path
    min_score = args.min_score if args.min_score is not None else settings.min_match_score

    try:
        severity_table = load_severity_table(table_path) if table_path else None
        gear, requirements = load_trip_file(Path(args.trip_file))
    except (
        OSError,
        json.JSONDecodeError,
        SeverityTableError,
        ValidationError,
        ValueError,
    ) as e:
        logger.debug(f"Check aborted: {e}")
        print(f"Error: {e}")
        return 1

    validator = RequirementValidator(severity_table)
    matches = match_inventory(
        gear,
        requirements,
        validator=validator,
        exclusive=not args.shared,
        min_score=min_score,
    )
    report = assess_readiness(requirements, matches)

    if args.json:
        print(
            json.dumps(
                {
                    "matches": {
                        item: match.to_dict() if match else None
                        for item, match in matches.items()
                    },
                    "readiness": report.to_dict(),
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        print_report(requirements, matches, report)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gearfit",
        description="Check gear against trip requirements",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Match an inventory against a trip")
    check.add_argument("trip_file", help="JSON file with 'gear' and 'requirements'")
    check.add_argument(
        "--severity-table",
        help="JSON overlay for category severities (or set GEARFIT_SEVERITY_TABLE)",
    )
    check.add_argument(
        "--min-score",
        type=int,
        default=None,
        help="Lowest score that counts as a match (or set GEARFIT_MIN_MATCH_SCORE)",
    )
    check.add_argument(
        "--shared",
        action="store_true",
        help="Allow one item to fill several requirements",
    )
    check.add_argument("--json", action="store_true", help="Print JSON output")
    check.set_defaults(handler=run_check)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the gearfit command line."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
