"""
Synthetic wind-pattern heatmap data.

For every site, samples a circular neighbourhood and assigns each cell an
intensity that decays linearly with distance from the site and scales
with the site's overall score and a month multiplier:

    intensity = clamp(score/100 * (1 - d/R) * (0.6 + 0.2 * u) * m, 0.1, 1.0)

where ``u`` is position-keyed noise in [0, 1).  Each cell also gets a
decorative compass direction from coarse regional bands and a speed
derived from intensity.  This is presentation data, not a wind model.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import streamlit as st

from models.noise import NoiseSource, HashNoise, GeneratorNoise
from models.site import WindSite
from models.feasibility import round_half_up
from fields.sweep import site_footprint, valid_coordinates
from config import (
    FIELD_RADIUS_DEG,
    FIELD_STEP_DEG,
    WIND_BASE_VARIATION,
    WIND_NOISE_AMPLITUDE,
    WIND_MIN_INTENSITY,
    WIND_MAX_INTENSITY,
    WIND_SPEED_SCALE,
    WIND_SPEED_OFFSET,
    DEFAULT_WIND_DIRECTION_DEG,
    WIND_MONTH_SCENARIOS,
    WIND_COLOR_BANDS,
    WIND_COLOR_FALLBACK,
    CACHE_MAX_ENTRIES,
)

log = logging.getLogger(__name__)


@dataclass
class WindVector:
    """One wind heatmap sample with its decorative direction and speed."""

    lat: float
    lng: float
    intensity: float
    direction: float     # Compass degrees
    speed: float         # m/s


@dataclass
class MonthWindData:
    """One synthetic month of wind heatmap data."""

    day: str
    date: str
    points: List[Tuple[float, float, float]] = field(default_factory=list)
    vectors: List[WindVector] = field(default_factory=list)
    average_score: int = 0


def wind_direction(
    lat: np.ndarray,
    lng: np.ndarray,
    jitter: np.ndarray,
) -> np.ndarray:
    """
    Heuristic compass direction keyed on coarse lat/lng bands.

    Bands are checked in order, first match wins:
        North Sea     53<=lat<=58, -2<=lng<=8   ->  45 + 30j
        Northern      lat>=58, 0<=lng<=8        ->  30 + 40j
        Atlantic      -10<=lng<=-2              ->  80 + 40j
        Eastern       10<=lng<=20               -> 180 + 90j
        Mediterranean 42<=lat<=45               -> 360j
        otherwise                               ->  90

    Args:
        lat: Latitudes (degrees).
        lng: Longitudes (degrees).
        jitter: Uniform values in [0, 1), same shape.

    Returns:
        Directions in [0, 360).
    """
    lat = np.asarray(lat, dtype=float)
    lng = np.asarray(lng, dtype=float)
    jitter = np.asarray(jitter, dtype=float)

    conditions = [
        (lat >= 53) & (lat <= 58) & (lng >= -2) & (lng <= 8),
        (lat >= 58) & (lng >= 0) & (lng <= 8),
        (lng >= -10) & (lng <= -2),
        (lng >= 10) & (lng <= 20),
        (lat >= 42) & (lat <= 45),
    ]
    choices = [
        45 + jitter * 30,
        30 + jitter * 40,
        80 + jitter * 40,
        180 + jitter * 90,
        jitter * 360,
    ]
    direction = np.select(conditions, choices, default=DEFAULT_WIND_DIRECTION_DEG)
    return np.mod(direction, 360.0)


def wind_speed(intensity: np.ndarray) -> np.ndarray:
    """Speed derived linearly from intensity: ``intensity * 15 + 3``."""
    return np.asarray(intensity) * WIND_SPEED_SCALE + WIND_SPEED_OFFSET


def generate_wind_pattern(
    sites: Iterable[WindSite],
    month_multiplier: float,
    noise: NoiseSource,
    direction_noise: Optional[NoiseSource] = None,
    radius: float = FIELD_RADIUS_DEG,
    step: float = FIELD_STEP_DEG,
) -> Tuple[List[Tuple[float, float, float]], List[WindVector]]:
    """
    Generate wind heatmap points for one synthetic month.

    Points from different sites are emitted independently; overlapping
    footprints are not merged.

    Args:
        sites: Sites to centre the footprints on.
        month_multiplier: Scenario scale applied before clamping.
        noise: Source for the intensity variation.
        direction_noise: Source for direction jitter.  Defaults to fresh
                         OS entropy, matching the decorative intent.
        radius: Footprint radius in degrees.
        step: Sweep step in degrees.

    Returns:
        (points, vectors) — ``points`` are (lat, lng, intensity) triples
        for the heat layer; ``vectors`` carry direction and speed too.
    """
    if direction_noise is None:
        direction_noise = GeneratorNoise()

    points: List[Tuple[float, float, float]] = []
    vectors: List[WindVector] = []

    for site in sites:
        if not valid_coordinates(site.lat, site.lng):
            log.warning("Skipping site %s: invalid coordinates %s", site.id, site.coordinates)
            continue

        lats, lngs, distance = site_footprint(site.lat, site.lng, radius, step)

        site_strength = site.overall_score / 100.0
        distance_factor = 1.0 - distance / radius
        variation = noise.sample(lats, lngs) * WIND_NOISE_AMPLITUDE
        intensity = site_strength * distance_factor * (WIND_BASE_VARIATION + variation)
        intensity = np.clip(intensity * month_multiplier, WIND_MIN_INTENSITY, WIND_MAX_INTENSITY)

        directions = wind_direction(lats, lngs, direction_noise.sample(lats, lngs))
        speeds = wind_speed(intensity)

        for lat, lng, inten, direc, spd in zip(
            lats.tolist(), lngs.tolist(), intensity.tolist(),
            directions.tolist(), speeds.tolist(),
        ):
            points.append((lat, lng, inten))
            vectors.append(WindVector(lat=lat, lng=lng, intensity=inten,
                                      direction=direc, speed=spd))

    log.debug("Wind pattern x%.2f: %d points", month_multiplier, len(points))
    return points, vectors


def prevailing_wind(vectors: Sequence[WindVector]) -> Tuple[float, float]:
    """
    Intensity-weighted circular mean direction and mean speed.

    Returns:
        (direction_deg, speed); (DEFAULT_WIND_DIRECTION_DEG, 0.0) for no vectors.
    """
    if not vectors:
        return DEFAULT_WIND_DIRECTION_DEG, 0.0
    rad = np.radians([v.direction for v in vectors])
    weights = np.array([v.intensity for v in vectors])
    x = float(np.sum(weights * np.sin(rad)))
    y = float(np.sum(weights * np.cos(rad)))
    direction = float(np.degrees(np.arctan2(x, y)) % 360.0)
    speed = float(np.mean([v.speed for v in vectors]))
    return direction, speed


def _month_start(today: date, months_ago: int) -> date:
    month_index = today.year * 12 + (today.month - 1) - months_ago
    return date(month_index // 12, month_index % 12 + 1, 1)


def format_month(d: date) -> str:
    """Format a date as e.g. 'March 2025'."""
    return f"{d.strftime('%B')} {d.year}"


def generate_wind_pattern_data(
    sites: Sequence[WindSite],
    today: Optional[date] = None,
    seed_offset: float = 0.0,
    direction_noise: Optional[NoiseSource] = None,
) -> List[MonthWindData]:
    """
    Package three synthetic months of wind data.

    Months use multipliers 0.55 / 0.80 / 1.15 and hash-noise seeds 1 / 2 / 3
    (plus ``seed_offset``).  Each month carries a literal average score
    (68 / 72 / 75) that is not derived from the generated points.

    Args:
        sites: Sites to generate around.  Empty input gives an empty list.
        today: Reference date; months are two months ago, last month and
               this month.  Defaults to today's date.
        seed_offset: Added to every month's hash seed.
        direction_noise: Source for direction jitter (see
                         ``generate_wind_pattern``).

    Returns:
        List of three MonthWindData, oldest first.
    """
    if len(sites) == 0:
        return []

    today = today or date.today()
    months = []
    for scenario in WIND_MONTH_SCENARIOS:
        points, vectors = generate_wind_pattern(
            sites,
            month_multiplier=scenario["multiplier"],
            noise=HashNoise(seed=scenario["seed"] + seed_offset),
            direction_noise=direction_noise,
        )
        months.append(
            MonthWindData(
                day=scenario["day"],
                date=format_month(_month_start(today, scenario["months_ago"])),
                points=points,
                vectors=vectors,
                average_score=scenario["average_score"],
            )
        )
    return months


def get_wind_score(intensity: float) -> int:
    """Wind score on a 0-100 scale."""
    return round_half_up(intensity * 100)


def get_wind_color(intensity: float) -> str:
    """Legend colour for a wind intensity."""
    for lower_bound, color in WIND_COLOR_BANDS:
        if intensity >= lower_bound:
            return color
    return WIND_COLOR_FALLBACK


@st.cache_data(max_entries=CACHE_MAX_ENTRIES)
def cached_wind_pattern_data(
    sites_key: Tuple[Tuple, ...],
    today: date,
    seed_offset: float = 0.0,
    direction_seed: Optional[int] = None,
) -> List[MonthWindData]:
    """
    Cached wrapper around generate_wind_pattern_data.

    Accepts a hashable *sites_key* of ``(id, lat, lng, overall_score)``
    tuples so Streamlit can hash the arguments for its cache.
    """
    sites = [
        WindSite(id=s[0], name=s[0], coordinates=(s[1], s[2]), overall_score=s[3])
        for s in sites_key
    ]
    direction_noise = None if direction_seed is None else GeneratorNoise(direction_seed)
    return generate_wind_pattern_data(
        sites,
        today=today,
        seed_offset=seed_offset,
        direction_noise=direction_noise,
    )
