"""
Circular neighbourhood sweep around a site.

Both heatmap generators sample a square of side 2R around the site in
fixed steps and keep the cells whose degree-space Euclidean distance to
the centre is at most R.  Distances are planar in degrees, not geodesic.
"""

import logging
import math
from typing import Tuple

import numpy as np

from config import FIELD_RADIUS_DEG, FIELD_STEP_DEG

log = logging.getLogger(__name__)


def circle_offsets(
    radius: float = FIELD_RADIUS_DEG,
    step: float = FIELD_STEP_DEG,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Offsets of the sweep cells that fall inside the radius.

    Offsets are built by index (``-radius + i * step``) rather than by
    repeated addition, so the footprint does not drift with float error.

    Args:
        radius: Neighbourhood radius in degrees.
        step: Sweep step in degrees.

    Returns:
        (d_lat, d_lng, distance) — flat arrays in row-major sweep order
        (latitude outer, longitude inner).

    Raises:
        ValueError: If radius or step is not positive.
    """
    if radius <= 0 or step <= 0:
        raise ValueError(f"Sweep radius and step must be positive, got {radius}, {step}")

    n = int(math.floor(2 * radius / step + 1e-9)) + 1
    axis = -radius + np.arange(n) * step
    d_lat, d_lng = np.meshgrid(axis, axis, indexing="ij")
    distance = np.sqrt(d_lat ** 2 + d_lng ** 2)
    inside = distance <= radius
    return d_lat[inside], d_lng[inside], distance[inside]


def valid_coordinates(lat: float, lng: float) -> bool:
    """True if (lat, lng) is finite and within geographic bounds."""
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


def site_footprint(
    lat: float,
    lng: float,
    radius: float = FIELD_RADIUS_DEG,
    step: float = FIELD_STEP_DEG,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Absolute sample positions around one site.

    Returns:
        (lats, lngs, distance) — flat arrays, one entry per kept cell.
    """
    d_lat, d_lng, distance = circle_offsets(radius, step)
    return lat + d_lat, lng + d_lng, distance
