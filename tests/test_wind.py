"""Tests for the synthetic wind-pattern generator."""

import sys
import os
import logging
from datetime import date
import pytest
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.site import WindSite
from models.noise import HashNoise, GeneratorNoise
from fields.wind import (
    WindVector,
    wind_direction,
    wind_speed,
    generate_wind_pattern,
    generate_wind_pattern_data,
    prevailing_wind,
    format_month,
    get_wind_score,
    get_wind_color,
)


def _generate(sites, multiplier=1.0, seed=1, direction_seed=0):
    return generate_wind_pattern(
        sites,
        month_multiplier=multiplier,
        noise=HashNoise(seed=seed),
        direction_noise=GeneratorNoise(direction_seed),
    )


class TestGenerateWindPattern:
    def test_point_count_per_site(self, north_sea_site):
        points, vectors = _generate([north_sea_site])
        assert len(points) == len(vectors) == 317

    def test_points_per_site_are_independent(self, north_sea_site, mock_sites):
        points, _ = _generate(mock_sites[:3])
        assert len(points) == 3 * 317

    def test_seeded_intensity_is_bit_identical(self, north_sea_site):
        first, _ = _generate([north_sea_site], direction_seed=0)
        second, _ = _generate([north_sea_site], direction_seed=99)
        assert first == second

    def test_intensity_depends_on_position_not_site_order(self, mock_sites):
        a, _ = _generate(mock_sites[:2])
        b, _ = _generate(list(reversed(mock_sites[:2])))
        assert sorted(a) == sorted(b)

    def test_locality(self, mock_sites):
        _, vectors = _generate(mock_sites)
        per_site = 317
        for i, site in enumerate(mock_sites):
            chunk = vectors[i * per_site:(i + 1) * per_site]
            for v in chunk:
                assert np.hypot(v.lat - site.lat, v.lng - site.lng) <= 2.5 + 1e-9

    def test_intensity_clamped(self, ideal_site, worst_site):
        for multiplier in (0.1, 0.55, 1.15, 5.0):
            points, _ = _generate([ideal_site, worst_site], multiplier=multiplier)
            intensities = np.array([p[2] for p in points])
            assert intensities.min() >= 0.1
            assert intensities.max() <= 1.0

    def test_edge_cells_hit_the_floor(self, north_sea_site):
        """Distance factor is 0 on the radius, so those cells clamp to 0.1."""
        points, _ = _generate([north_sea_site])
        edge = [p for p in points if p[0] == north_sea_site.lat + 2.5]
        assert edge and all(p[2] == pytest.approx(0.1) for p in edge)

    def test_centre_intensity(self, north_sea_site):
        """score 80, distance 0: 0.8 * (0.6 + 0.2u) lies in [0.48, 0.64)."""
        points, _ = _generate([north_sea_site])
        centre = [p for p in points if (p[0], p[1]) == north_sea_site.coordinates]
        assert len(centre) == 1
        assert 0.48 <= centre[0][2] < 0.64

    def test_speed_follows_intensity(self, north_sea_site):
        _, vectors = _generate([north_sea_site])
        for v in vectors:
            assert v.speed == pytest.approx(v.intensity * 15 + 3)

    def test_empty_sites(self):
        assert _generate([]) == ([], [])

    def test_invalid_coordinates_skipped(self, north_sea_site, caplog):
        bad = WindSite(id="bad", name="Bad", coordinates=(float("nan"), 3.0), overall_score=80)
        with caplog.at_level(logging.WARNING):
            points, _ = _generate([bad, north_sea_site])
        assert len(points) == 317
        assert "bad" in caplog.text


class TestWindDirection:
    @pytest.mark.parametrize("lat,lng,lo,hi", [
        (55.0, 3.0, 45, 75),       # North Sea
        (60.0, 4.0, 30, 70),       # Northern
        (50.0, -6.0, 80, 120),     # Atlantic
        (55.0, 13.0, 180, 270),    # Eastern
    ])
    def test_band_ranges(self, lat, lng, lo, hi):
        jitter = np.linspace(0, 0.999, 20)
        d = wind_direction(np.full(20, lat), np.full(20, lng), jitter)
        assert np.all((d >= lo) & (d <= hi))

    def test_north_sea_band_checked_before_northern(self):
        d = wind_direction(np.array([58.0]), np.array([4.0]), np.array([0.0]))
        assert d[0] == 45.0

    def test_mediterranean_spans_full_circle(self):
        d = wind_direction(np.full(3, 43.0), np.full(3, 4.0), np.array([0.0, 0.5, 0.999]))
        np.testing.assert_allclose(d, [0.0, 180.0, 359.64])

    def test_default_direction(self):
        d = wind_direction(np.array([30.0]), np.array([40.0]), np.array([0.7]))
        assert d[0] == 90.0

    def test_speed(self):
        np.testing.assert_allclose(wind_speed(np.array([0.1, 1.0])), [4.5, 18.0])


class TestPrevailingWind:
    def test_empty(self):
        assert prevailing_wind([]) == (90.0, 0.0)

    def test_circular_mean_wraps_north(self):
        vectors = [
            WindVector(lat=0, lng=0, intensity=1.0, direction=350.0, speed=10.0),
            WindVector(lat=0, lng=0, intensity=1.0, direction=10.0, speed=20.0),
        ]
        direction, speed = prevailing_wind(vectors)
        assert min(direction, 360.0 - direction) == pytest.approx(0.0, abs=1e-9)
        assert speed == pytest.approx(15.0)

    def test_weighted_by_intensity(self):
        vectors = [
            WindVector(lat=0, lng=0, intensity=1.0, direction=90.0, speed=5.0),
            WindVector(lat=0, lng=0, intensity=0.1, direction=180.0, speed=5.0),
        ]
        direction, _ = prevailing_wind(vectors)
        assert 90.0 < direction < 135.0


class TestMonthBatch:
    def test_empty_input_gives_no_months(self):
        assert generate_wind_pattern_data([]) == []

    def test_three_months_with_literal_averages(self, north_sea_site):
        months = generate_wind_pattern_data(
            [north_sea_site], today=date(2025, 3, 14), direction_noise=GeneratorNoise(0)
        )
        assert [m.day for m in months] == ["Month 1", "Month 2", "Month 3"]
        assert [m.average_score for m in months] == [68, 72, 75]

    def test_month_labels(self, north_sea_site):
        months = generate_wind_pattern_data(
            [north_sea_site], today=date(2025, 2, 10), direction_noise=GeneratorNoise(0)
        )
        assert [m.date for m in months] == ["December 2024", "January 2025", "February 2025"]

    def test_averages_do_not_follow_data(self, ideal_site, worst_site):
        low = generate_wind_pattern_data([worst_site], today=date(2025, 3, 1))
        high = generate_wind_pattern_data([ideal_site], today=date(2025, 3, 1))
        assert [m.average_score for m in low] == [m.average_score for m in high]

    def test_multipliers_order_intensity(self, north_sea_site):
        months = generate_wind_pattern_data(
            [north_sea_site], today=date(2025, 3, 1), direction_noise=GeneratorNoise(0)
        )
        sums = [sum(p[2] for p in m.points) for m in months]
        assert sums[0] < sums[1] < sums[2]

    def test_reproducible_with_fixed_seeds(self, mock_sites):
        a = generate_wind_pattern_data(mock_sites, today=date(2025, 3, 1),
                                       direction_noise=GeneratorNoise(5))
        b = generate_wind_pattern_data(mock_sites, today=date(2025, 3, 1),
                                       direction_noise=GeneratorNoise(5))
        assert [m.points for m in a] == [m.points for m in b]
        assert [m.vectors for m in a] == [m.vectors for m in b]

    def test_seed_offset_changes_points(self, north_sea_site):
        a = generate_wind_pattern_data([north_sea_site], today=date(2025, 3, 1))
        b = generate_wind_pattern_data([north_sea_site], today=date(2025, 3, 1), seed_offset=10.0)
        assert a[1].points != b[1].points


class TestScoreAndColor:
    def test_format_month(self):
        assert format_month(date(2025, 3, 1)) == "March 2025"

    @pytest.mark.parametrize("intensity,expected", [(0.0, 0), (0.456, 46), (0.5, 50), (1.0, 100)])
    def test_wind_score(self, intensity, expected):
        assert get_wind_score(intensity) == expected

    @pytest.mark.parametrize("intensity,expected", [
        (0.9, "#dc2626"),
        (0.8, "#dc2626"),
        (0.7, "#f59e0b"),
        (0.5, "#eab308"),
        (0.35, "#3b82f6"),
        (0.2, "#6b7280"),
    ])
    def test_wind_color(self, intensity, expected):
        assert get_wind_color(intensity) == expected
