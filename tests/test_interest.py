"""Tests for passive interest accrual."""

from hexrealm.engine.interest import accrue, process_interest
from hexrealm.models import Region
from hexrealm.utils import Point


def test_accrue_rounds_down():
    region = Region(location=Point(0, 0), deposit=150)
    assert accrue(region, 1, 1000) == 1
    assert region.deposit == 151


def test_accrue_caps_at_max_deposit():
    region = Region(location=Point(0, 0), deposit=990)
    accrue(region, 5, 1000)
    assert region.deposit == 1000


def test_accrue_empty_region_stays_empty():
    region = Region(location=Point(0, 0))
    assert accrue(region, 50, 1000) == 0
    assert region.deposit == 0


def test_process_interest_applies_to_every_region_regardless_of_owner(engine_factory):
    engine = engine_factory(interest_percentage=10, max_deposit=10000)
    territory = engine.game.territory
    territory[4].update_deposit(100)  # p1 city center
    territory[7].update_deposit(200)  # p2 city center
    territory[0].update_deposit(300)  # neutral

    total = process_interest(engine.game)

    assert total == 60
    assert territory[4].deposit == 110
    assert territory[7].deposit == 220
    assert territory[0].deposit == 330
