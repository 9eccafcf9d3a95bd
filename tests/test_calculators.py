"""Tests for the dive-planning calculators."""
import math

import pytest

from divepal.calculators import (
    NDL_TABLE,
    gas_duration,
    max_operating_depth,
    pressure_factor,
    sac_rate,
    sac_rating,
    starting_weight,
)
from divepal.models import GasDurationInput, ModInput, SacInput, WeightInput


class TestGasDuration:
    def test_reference_case(self):
        """12 L, 200→50 bar at 20 m: 1800 L / (20 × 3) = 30 min."""
        data = GasDurationInput(tank_size=12, start_pressure=200, end_pressure=50, depth=20)
        assert gas_duration(data) == 30

    def test_shallow_dive(self):
        """10 L, 200→50 bar at 10 m: 1500 L / (20 × 2) = 37.5 → 38 min."""
        data = GasDurationInput(tank_size=10, start_pressure=200, end_pressure=50, depth=10)
        assert gas_duration(data) == 38

    def test_rounds_half_up(self):
        # 10 × 10 / (20 × 2) = 2.5
        data = GasDurationInput(tank_size=10, start_pressure=60, end_pressure=50, depth=10)
        assert gas_duration(data) == 3

    @pytest.mark.parametrize(
        "tank,start,end,depth",
        [
            (None, 200, 50, 20),
            (12, None, 50, 20),
            (12, 200, None, 20),
            (12, 200, 50, None),
            (0, 200, 50, 20),
            (12, 200, 200, 20),
            (12, 50, 200, 20),
            (12, 200, -1, 20),
            (12, 200, 0, 20),
            (12, 200, 50, 0),
            (12, 200, 50, -5),
            (12, math.nan, 50, 20),
        ],
    )
    def test_insufficient_input_gives_no_result(self, tank, start, end, depth):
        data = GasDurationInput(tank_size=tank, start_pressure=start, end_pressure=end, depth=depth)
        assert gas_duration(data) is None

    def test_idempotent(self):
        data = GasDurationInput(tank_size=11.1, start_pressure=207, end_pressure=35, depth=18)
        assert gas_duration(data) == gas_duration(data)


class TestSacRate:
    def test_reference_case(self):
        """1800 L over 45 min at 15 m: 1800 / 45 / 2.5 = 16.0 L/min."""
        assert sac_rate(SacInput(air_used=1800, depth=15, time=45)) == 16.0

    def test_one_decimal(self):
        assert sac_rate(SacInput(air_used=1000, depth=10, time=30)) == 16.7

    @pytest.mark.parametrize(
        "air,depth,time",
        [(None, 15, 45), (1800, 0, 45), (1800, 15, 0), (-1, 15, 45), (1800, 15, None)],
    )
    def test_insufficient_input_gives_no_result(self, air, depth, time):
        assert sac_rate(SacInput(air_used=air, depth=depth, time=time)) is None

    @pytest.mark.parametrize(
        "sac,expected",
        [
            (12.0, "excellent"),
            (15.0, "good"),
            (19.9, "good"),
            (20.0, "average"),
            (24.9, "average"),
            (25.0, "needs improvement"),
        ],
    )
    def test_rating_bands(self, sac, expected):
        assert sac_rating(sac) == expected


class TestMaxOperatingDepth:
    def test_reference_case(self):
        """EAN32 at PPO2 1.4: (1.4 / 0.32 − 1) × 10 = 33.75 → 34 m."""
        assert max_operating_depth(ModInput(oxygen_percentage=32, max_ppo2=1.4)) == 34

    def test_standard_limit(self):
        # (1.6 / 0.36 - 1) * 10 = 34.4
        assert max_operating_depth(ModInput(oxygen_percentage=36, max_ppo2=1.6)) == 34

    def test_default_ppo2_is_conservative(self):
        assert max_operating_depth(ModInput(oxygen_percentage=32)) == 34

    @pytest.mark.parametrize("o2", [None, 0, -21, 101, math.inf])
    def test_out_of_domain_oxygen(self, o2):
        assert max_operating_depth(ModInput(oxygen_percentage=o2)) is None

    def test_non_positive_ppo2(self):
        assert max_operating_depth(ModInput(oxygen_percentage=32, max_ppo2=0)) is None


class TestStartingWeight:
    def test_reference_case(self):
        """70 kg, 5 mm, beginner, salt: 7 + 4 + 2 + 2 = 15 kg."""
        data = WeightInput(body_weight=70, suit_type="wetsuit-5mm", experience="beginner", saltwater=True)
        assert starting_weight(data) == 15

    def test_freshwater_drops_salt_offset(self):
        data = WeightInput(body_weight=70, suit_type="wetsuit-5mm", experience="beginner", saltwater=False)
        assert starting_weight(data) == 13

    @pytest.mark.parametrize(
        "suit,offset",
        [("swimsuit", 0), ("wetsuit-3mm", 2), ("wetsuit-5mm", 4), ("wetsuit-7mm", 6), ("drysuit", 8)],
    )
    def test_suit_offsets(self, suit, offset):
        data = WeightInput(body_weight=80, suit_type=suit, experience="intermediate", saltwater=False)
        assert starting_weight(data) == 8 + offset

    def test_advanced_diver_needs_less(self):
        data = WeightInput(body_weight=80, suit_type="drysuit", experience="advanced", saltwater=True)
        assert starting_weight(data) == 16

    @pytest.mark.parametrize(
        "body,suit,experience",
        [
            (None, "drysuit", "beginner"),
            (0, "drysuit", "beginner"),
            (70, None, "beginner"),
            (70, "semidry", "beginner"),
            (70, "drysuit", ""),
        ],
    )
    def test_insufficient_input_gives_no_result(self, body, suit, experience):
        data = WeightInput(body_weight=body, suit_type=suit, experience=experience)
        assert starting_weight(data) is None


def test_pressure_factor():
    assert pressure_factor(0) == 1
    assert pressure_factor(20) == 3


def test_ndl_table_is_sorted_by_depth():
    depths = [depth for depth, _ in NDL_TABLE]
    assert depths == sorted(depths)
    assert dict(NDL_TABLE)[30] == "20 min"


@pytest.mark.parametrize(
    "calculator,data",
    [
        (gas_duration, GasDurationInput(tank_size=11.1, start_pressure=207, end_pressure=35, depth=18)),
        (sac_rate, SacInput(air_used=1350, depth=12.5, time=41)),
        (max_operating_depth, ModInput(oxygen_percentage=36, max_ppo2=1.6)),
        (starting_weight, WeightInput(body_weight=63.5, suit_type="wetsuit-7mm", experience="beginner")),
    ],
)
def test_calculators_are_idempotent(calculator, data):
    first = calculator(data)
    assert first is not None
    assert all(calculator(data) == first for _ in range(3))
