"""Unit tests for inventory matching."""

import logging

import pytest

from gearfit.matching import GearMatch, match_inventory, rank_gear
from gearfit.models.gear import GearRequirement, GearSpec, Priority, UserGear
from gearfit.validation.validator import RequirementValidator


def test_rank_gear_orders_by_score(alpine_boot, hiking_boot, hardshell, boot_requirement):
    """The best-scoring item is ranked first."""
    ranked = rank_gear([hardshell, hiking_boot, alpine_boot], boot_requirement)

    assert ranked[0].gear is alpine_boot
    assert ranked[0].score == 85
    assert [m.score for m in ranked] == sorted((m.score for m in ranked), reverse=True)
    assert all(isinstance(m, GearMatch) for m in ranked)


def test_rank_gear_breaks_ties_by_name():
    """Equal scores prefer the item whose name resembles the requirement."""
    bottle = UserGear(name="Nalgene bottle")
    headlamp = UserGear(name="Tikka headlamp", manufacturer="Petzl")
    requirement = GearRequirement(item="Headlamp")

    ranked = rank_gear([bottle, headlamp], requirement)

    assert ranked[0].score == ranked[1].score == 100
    assert ranked[0].gear is headlamp


def test_rank_gear_empty_inventory(boot_requirement):
    """An empty inventory ranks nothing."""
    assert rank_gear([], boot_requirement) == []


def test_match_inventory_picks_best_per_requirement(
    alpine_boot, hiking_boot, hardshell, boot_requirement, shell_requirement
):
    """Each requirement gets its best item."""
    matches = match_inventory(
        [hiking_boot, hardshell, alpine_boot], [boot_requirement, shell_requirement]
    )

    assert list(matches) == ["Mountaineering boots", "Waterproof shell"]
    assert matches["Mountaineering boots"].gear is alpine_boot
    assert matches["Waterproof shell"].gear is hardshell
    assert matches["Waterproof shell"].score == 100


def test_match_inventory_serves_critical_first():
    """With exclusive matching, a critical requirement claims the item first."""
    boot = UserGear(name="Boot", category="footwear/alpine_boots")
    camp_shoes = GearRequirement(
        item="Camp shoes", category="footwear/camp_shoes", priority=Priority.OPTIONAL
    )
    boots = GearRequirement(
        item="Mountaineering boots",
        category="footwear/alpine_boots",
        priority=Priority.CRITICAL,
    )

    matches = match_inventory([boot], [camp_shoes, boots])

    assert list(matches) == ["Camp shoes", "Mountaineering boots"]
    assert matches["Mountaineering boots"].gear is boot
    assert matches["Camp shoes"] is None


def test_match_inventory_shared():
    """Non-exclusive matching lets one item fill several requirements."""
    boot = UserGear(name="Boot", category="footwear/alpine_boots")
    camp_shoes = GearRequirement(item="Camp shoes", category="footwear/camp_shoes")
    boots = GearRequirement(item="Mountaineering boots", category="footwear/alpine_boots")

    matches = match_inventory([boot], [camp_shoes, boots], exclusive=False)

    assert matches["Camp shoes"].gear is boot
    assert matches["Camp shoes"].score == 80
    assert matches["Mountaineering boots"].score == 100


def test_match_inventory_min_score():
    """Items below the minimum score are not matched."""
    shell = UserGear(name="Shell", category="clothing/shells/hardshell")
    boots = GearRequirement(item="Boots", category="footwear/alpine_boots")

    assert match_inventory([shell], [boots])["Boots"] is None
    assert match_inventory([shell], [boots], min_score=40)["Boots"].score == 40


def test_match_inventory_skips_used_item_for_next_best():
    """An exclusive match falls back to the next best unused item."""
    plastic = UserGear(
        name="Plastic double",
        category="footwear/alpine_boots",
        specs=GearSpec(temperature_rating_c=-30),
    )
    leather = UserGear(
        name="Leather boot",
        category="footwear/alpine_boots",
        specs=GearSpec(temperature_rating_c=-10),
    )
    summit = GearRequirement(
        item="Summit boots",
        category="footwear/alpine_boots",
        priority=Priority.CRITICAL,
        requirements={"temperature_rating": "-25°C"},
    )
    approach = GearRequirement(
        item="Approach boots",
        category="footwear/alpine_boots",
        requirements={"temperature_rating": "-10°C"},
    )

    matches = match_inventory([leather, plastic], [approach, summit])

    assert matches["Summit boots"].gear is plastic
    assert matches["Approach boots"].gear is leather


def test_match_inventory_uses_custom_validator():
    """A validator with a custom severity table changes what matches."""
    sandal = UserGear(name="Sandal", category="footwear/sandals")
    boots = GearRequirement(item="Boots", category="footwear/alpine_boots")
    strict = RequirementValidator({"alpine_boots": {"sandals": 90}})

    assert match_inventory([sandal], [boots])["Boots"] is not None
    assert match_inventory([sandal], [boots], validator=strict)["Boots"] is None


def test_match_inventory_logs_assignments(caplog, alpine_boot, boot_requirement):
    """Assignments are logged at INFO."""
    with caplog.at_level(logging.INFO, logger="gearfit.matching"):
        match_inventory([alpine_boot], [boot_requirement])

    assert "Matched La Sportiva Nepal Cube GTX to Mountaineering boots" in caplog.text


def test_gear_match_to_dict(alpine_boot, boot_requirement):
    """Matches serialize with display name and plain reasons."""
    match = rank_gear([alpine_boot], boot_requirement)[0]

    assert match.to_dict() == {
        "requirement": "Mountaineering boots",
        "gear": "La Sportiva Nepal Cube GTX",
        "status": "suitable",
        "score": 85,
        "reasons": [
            "Crampon compatible but binding type unverified (semi-automatic required)"
        ],
    }


def test_match_inventory_rejects_duplicate_items():
    """Two requirements with the same item name cannot both be keyed."""
    light_socks = UserGear(name="Light socks", specs=GearSpec(weight_g=100))
    heavy_socks = UserGear(name="Heavy socks", specs=GearSpec(weight_g=200))
    socks = [GearRequirement(item="Socks"), GearRequirement(item="Socks")]

    with pytest.raises(ValueError, match="Duplicate requirement items: Socks"):
        match_inventory([light_socks, heavy_socks], socks)


def test_distinct_items_keep_every_match():
    """Distinctly named requirements each keep their own match."""
    light_socks = UserGear(name="Light socks", specs=GearSpec(weight_g=100))
    heavy_socks = UserGear(name="Heavy socks", specs=GearSpec(weight_g=200))
    socks = [GearRequirement(item="Socks (day)"), GearRequirement(item="Socks (spare)")]

    matches = match_inventory([light_socks, heavy_socks], socks)

    assert len(matches) == 2
    assert {matches[r.item].gear.name for r in socks} == {"Light socks", "Heavy socks"}
