"""Pytest configuration and fixtures for gearfit tests."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables
load_dotenv(project_root / ".env")

from gearfit.models.gear import GearRequirement, GearSpec, Priority, UserGear  # noqa: E402


@pytest.fixture(autouse=True)
def clean_gearfit_env(monkeypatch):
    """Keep local GEARFIT_* settings out of the tests."""
    for var in (
        "GEARFIT_LOG_LEVEL",
        "GEARFIT_SEVERITY_TABLE",
        "GEARFIT_MIN_MATCH_SCORE",
    ):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def alpine_boot():
    """A 4-season mountaineering boot with full specs."""
    return UserGear(
        name="Nepal Cube GTX",
        manufacturer="La Sportiva",
        category="footwear/alpine_boots/4_season",
        specs=GearSpec(
            temperature_rating_c=-20,
            crampon_compatible=True,
            gore_tex=True,
            weight_g=1050,
            insulated=True,
        ),
    )


@pytest.fixture
def hiking_boot():
    """A 3-season hiking boot."""
    return UserGear(
        name="Renegade GTX Mid",
        manufacturer="Lowa",
        category="footwear/hiking_boots/3_season",
        specs=GearSpec(
            temperature_rating_c=-5,
            crampon_compatible=False,
            gore_tex=True,
            weight_g=590,
        ),
    )


@pytest.fixture
def hardshell():
    """A waterproof shell jacket."""
    return UserGear(
        name="Beta AR",
        manufacturer="Arc'teryx",
        category="clothing/shells/hardshell",
        specs=GearSpec(waterproof_rating_mm=28000, gore_tex=True, weight_g=460),
    )


@pytest.fixture
def boot_requirement():
    """Mountaineering boot requirement for a winter alpine route."""
    return GearRequirement(
        item="Mountaineering boots",
        category="footwear/alpine_boots/4_season",
        priority=Priority.CRITICAL,
        requirements={
            "temperature_rating": "-15°C minimum",
            "crampon_compatibility": "semi-automatic",
        },
        reasoning="Glacier travel in winter conditions",
    )


@pytest.fixture
def shell_requirement():
    """Waterproof shell requirement."""
    return GearRequirement(
        item="Waterproof shell",
        category="clothing/shells/hardshell",
        priority=Priority.RECOMMENDED,
        requirements={"waterproof": "20,000mm+", "max_weight": "<500g"},
    )
