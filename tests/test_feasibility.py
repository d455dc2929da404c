"""Tests for the feasibility scorer."""

import sys
import os
import math
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.site import WindSite
from models.feasibility import (
    WEIGHTS,
    ScoringDefaults,
    FeasibilityBreakdown,
    round_half_up,
    ramp_score,
    environmental_score,
    classify_feasibility,
    weighted_total,
    calculate_feasibility_breakdown,
    score_sites,
)


def _site(**kwargs):
    defaults = dict(id="s", name="S", coordinates=(54.0, 3.0))
    defaults.update(kwargs)
    return WindSite(**defaults)


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(67.5) == 68

    def test_below_half_rounds_down(self):
        assert round_half_up(2.49) == 2


class TestRampScore:
    @pytest.mark.parametrize("depth", [0, 10, 29.9, 30])
    def test_depth_at_or_below_start_is_100(self, depth):
        assert ramp_score(depth, 30, 150) == 100

    @pytest.mark.parametrize("depth", [150, 151, 400, 10_000])
    def test_depth_at_or_beyond_end_is_0(self, depth):
        assert ramp_score(depth, 30, 150) == 0

    def test_depth_midpoint(self):
        assert ramp_score(90, 30, 150) == 50

    def test_distance_midpoint(self):
        assert ramp_score(110, 20, 200) == 50

    def test_capex_quarter(self):
        assert ramp_score(3.5, 3.0, 5.0) == 75

    def test_negative_input_clamps_to_100(self):
        assert ramp_score(-500, 30, 150) == 100


class TestEnvironmentalScore:
    @pytest.mark.parametrize("category,expected", [
        ("low", 100),
        ("medium", 66),
        ("high", 33),
        ("critical", 0),
    ])
    def test_known_categories(self, category, expected):
        assert environmental_score(category) == expected

    @pytest.mark.parametrize("category", ["unknown", "", "LOW", None])
    def test_unknown_category_is_neutral(self, category):
        assert environmental_score(category) == 50


class TestWeights:
    def test_weights_sum_to_one(self):
        assert math.isclose(sum(WEIGHTS.values()), 1.0)

    def test_uniform_80_totals_exactly_80(self):
        assert weighted_total(80, 80, 80, 80, 80) == 80

    @pytest.mark.parametrize("value", [0, 33, 50, 66, 100])
    def test_uniform_subscores_total_to_same_value(self, value):
        assert weighted_total(value, value, value, value, value) == value


class TestClassification:
    @pytest.mark.parametrize("total,expected", [
        (100, "excellent"),
        (75, "excellent"),
        (74, "good"),
        (60, "good"),
        (59, "moderate"),
        (45, "moderate"),
        (44, "challenging"),
        (0, "challenging"),
    ])
    def test_thresholds(self, total, expected):
        assert classify_feasibility(total) == expected


class TestBreakdown:
    def test_ideal_site_scores_100(self, ideal_site):
        b = calculate_feasibility_breakdown(ideal_site)
        assert b == FeasibilityBreakdown(
            depth_score=100,
            port_distance_score=100,
            grid_distance_score=100,
            capex_score=100,
            environmental_score=100,
            total_score=100,
        )
        assert b.feasibility_class == "excellent"

    def test_worst_site_scores_0(self, worst_site):
        b = calculate_feasibility_breakdown(worst_site)
        assert b.as_dict() == {
            "depth_score": 0,
            "port_distance_score": 0,
            "grid_distance_score": 0,
            "capex_score": 0,
            "environmental_score": 0,
            "total_score": 0,
        }
        assert b.feasibility_class == "challenging"

    def test_missing_attributes_use_defaults(self):
        site = _site(water_depth=30, environmental_impact="low")
        b = calculate_feasibility_breakdown(site)
        # 100 km on a 20-200 ramp, 4.0 on a 3-5 ramp
        assert b.port_distance_score == 56
        assert b.grid_distance_score == 56
        assert b.capex_score == 50

    def test_custom_defaults(self):
        site = _site(water_depth=30, environmental_impact="low")
        defaults = ScoringDefaults(
            distance_to_port_km=20,
            distance_to_grid_km=20,
            capex_eur_m_per_mw=3.0,
        )
        assert calculate_feasibility_breakdown(site, defaults).total_score == 100

    def test_explicit_zero_distance_is_not_replaced(self):
        site = _site(water_depth=30, distance_to_port_km=0)
        assert calculate_feasibility_breakdown(site).port_distance_score == 100

    def test_extreme_inputs_stay_in_range(self):
        site = _site(
            water_depth=10_000,
            distance_to_port_km=-50,
            distance_to_grid_km=1e9,
            capex_eur_m_per_mw=99,
            environmental_impact="catastrophic",
        )
        for value in calculate_feasibility_breakdown(site).as_dict().values():
            assert 0 <= value <= 100

    def test_mixed_site_total(self):
        # depth 100, port 39, grid 6, capex 90, env 100 -> 67.5 -> 68
        site = _site(
            water_depth=25,
            distance_to_port_km=130,
            distance_to_grid_km=190,
            capex_eur_m_per_mw=3.2,
            environmental_impact="low",
        )
        b = calculate_feasibility_breakdown(site)
        assert (b.depth_score, b.port_distance_score, b.grid_distance_score,
                b.capex_score, b.environmental_score) == (100, 39, 6, 90, 100)
        assert b.total_score == 68

    def test_scorer_does_not_mutate_site(self, ideal_site):
        before = ideal_site.to_dict()
        calculate_feasibility_breakdown(ideal_site)
        assert ideal_site.to_dict() == before


class TestScoreSites:
    def test_preserves_order(self, mock_sites):
        scored = score_sites(mock_sites)
        assert [s.id for s, _ in scored] == [s.id for s in mock_sites]

    def test_all_mock_sites_score_in_range(self, mock_sites):
        for _, b in score_sites(mock_sites):
            assert 0 <= b.total_score <= 100

    def test_empty_input(self):
        assert score_sites([]) == []
