"""Tests for pension divisor lookup."""

import pytest
from quit_sim_bj.divisor import PENSION_DIVISOR_TABLE, pension_divisor


class TestPensionDivisor:
    def test_age_60(self):
        assert pension_divisor(60) == 139

    def test_age_50(self):
        assert pension_divisor(50) == 195

    def test_fractional_age_floors(self):
        """52.6 → 52 → 185"""
        assert pension_divisor(52.6) == 185
        assert pension_divisor(52.99) == 185

    def test_below_table_clamps(self):
        assert pension_divisor(39.9) == 233
        assert pension_divisor(-5) == 233

    def test_above_table_clamps(self):
        assert pension_divisor(70.9) == 56
        assert pension_divisor(100) == 56

    def test_monotonic_non_increasing(self):
        values = [pension_divisor(age) for age in range(40, 71)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_table_covers_40_to_70(self):
        assert sorted(PENSION_DIVISOR_TABLE) == list(range(40, 71))

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PENSION_DIVISOR_TABLE[60] = 1
