"""
Synthetic water-depth heatmap data.

Each site's water depth is spread over its circular neighbourhood with
uniform noise and a slight deepening towards the edge:

    depth     = max(20, water_depth + (u - 0.5) * 25 + (d/R) * 15)
    intensity = min(depth / 150, 1) * (1 - 0.3 * d/R)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np
import streamlit as st

from models.noise import NoiseSource, GeneratorNoise
from models.site import WindSite
from fields.sweep import site_footprint, valid_coordinates
from config import (
    FIELD_RADIUS_DEG,
    FIELD_STEP_DEG,
    DEPTH_NOISE_AMPLITUDE_M,
    DEPTH_DISTANCE_GAIN_M,
    DEPTH_FLOOR_M,
    DEPTH_MAX_M,
    DEPTH_FALLOFF,
    DEPTH_COLOR_BANDS,
    DEPTH_COLOR_FALLBACK,
    DEPTH_GRADIENT,
    CACHE_MAX_ENTRIES,
)

log = logging.getLogger(__name__)


@dataclass
class DepthPoint:
    """One depth heatmap sample."""

    lat: float
    lng: float
    depth: float         # meters
    intensity: float     # [0, 1]

    def as_triple(self) -> Tuple[float, float, float]:
        return (self.lat, self.lng, self.intensity)


def depth_to_intensity(depth: np.ndarray, max_depth: float = DEPTH_MAX_M) -> np.ndarray:
    """Normalize depth to [0, 1], saturating at ``max_depth``."""
    return np.minimum(np.asarray(depth, dtype=float) / max_depth, 1.0)


def generate_depth_data(
    sites: Iterable[WindSite],
    noise: Optional[NoiseSource] = None,
    radius: float = FIELD_RADIUS_DEG,
    step: float = FIELD_STEP_DEG,
) -> List[DepthPoint]:
    """
    Generate depth heatmap points around every site.

    Args:
        sites: Sites to centre the footprints on.
        noise: Source for the depth variation.  Defaults to an unseeded
               generator, so repeated calls differ; pass ``HashNoise`` or a
               seeded ``GeneratorNoise`` for reproducible output.
        radius: Footprint radius in degrees.
        step: Sweep step in degrees.

    Returns:
        List of DepthPoint, site by site in sweep order.
    """
    if noise is None:
        noise = GeneratorNoise()

    points: List[DepthPoint] = []
    for site in sites:
        if not valid_coordinates(site.lat, site.lng):
            log.warning("Skipping site %s: invalid coordinates %s", site.id, site.coordinates)
            continue

        lats, lngs, distance = site_footprint(site.lat, site.lng, radius, step)
        distance_factor = distance / radius

        variation = (noise.sample(lats, lngs) - 0.5) * DEPTH_NOISE_AMPLITUDE_M
        depth = np.maximum(
            DEPTH_FLOOR_M,
            site.water_depth + variation + distance_factor * DEPTH_DISTANCE_GAIN_M,
        )
        falloff = 1.0 - distance_factor * DEPTH_FALLOFF
        intensity = depth_to_intensity(depth) * falloff

        points.extend(
            DepthPoint(lat=la, lng=ln, depth=d, intensity=i)
            for la, ln, d, i in zip(
                lats.tolist(), lngs.tolist(), depth.tolist(), intensity.tolist()
            )
        )

    log.debug("Depth field: %d points", len(points))
    return points


def get_depth_color(intensity: float) -> str:
    """Legend colour for a depth intensity."""
    for lower_bound, color in DEPTH_COLOR_BANDS:
        if intensity >= lower_bound:
            return color
    return DEPTH_COLOR_FALLBACK


def depth_colorscale() -> List[list]:
    """Depth gradient as a Plotly colorscale."""
    return [[stop, color] for stop, color in sorted(DEPTH_GRADIENT.items())]


@st.cache_data(max_entries=CACHE_MAX_ENTRIES)
def cached_depth_data(
    sites_key: Tuple[Tuple, ...],
    seed: Optional[int] = None,
) -> List[DepthPoint]:
    """
    Cached wrapper around generate_depth_data.

    Accepts a hashable *sites_key* of ``(id, lat, lng, water_depth)``
    tuples.  With ``seed=None`` the cache still pins one random draw per
    key until it is evicted.
    """
    sites = [
        WindSite(id=s[0], name=s[0], coordinates=(s[1], s[2]), water_depth=s[3])
        for s in sites_key
    ]
    return generate_depth_data(sites, noise=GeneratorNoise(seed))
