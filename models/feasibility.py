"""
Feasibility Scorer.

Converts a site's physical and economic attributes into five sub-scores
and a weighted 0-100 total:

    total = 0.25 * depth + 0.20 * port + 0.20 * grid
            + 0.15 * capex + 0.20 * environmental

Numeric sub-scores are linear ramps (100 at or below the ramp start,
0 at or beyond the ramp end).  The environmental sub-score is a lookup
over a closed set of categories with a neutral fallback.  Each sub-score
and the total are rounded half-up after clamping.

The scorer is total: missing optional attributes take the values of an
explicit ``ScoringDefaults`` and unknown categories score neutrally.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Tuple

from models.site import WindSite
from config import (
    WEIGHT_DEPTH,
    WEIGHT_PORT_DISTANCE,
    WEIGHT_GRID_DISTANCE,
    WEIGHT_CAPEX,
    WEIGHT_ENVIRONMENTAL,
    DEPTH_RAMP_M,
    PORT_DISTANCE_RAMP_KM,
    GRID_DISTANCE_RAMP_KM,
    CAPEX_RAMP_EUR_M_PER_MW,
    DEFAULT_DISTANCE_TO_PORT_KM,
    DEFAULT_DISTANCE_TO_GRID_KM,
    DEFAULT_CAPEX_EUR_M_PER_MW,
    ENVIRONMENTAL_SCORES,
    UNKNOWN_CATEGORY_SCORE,
    FEASIBILITY_CLASS_THRESHOLDS,
    FALLBACK_FEASIBILITY_CLASS,
)

WEIGHTS = {
    "depth": WEIGHT_DEPTH,
    "port_distance": WEIGHT_PORT_DISTANCE,
    "grid_distance": WEIGHT_GRID_DISTANCE,
    "capex": WEIGHT_CAPEX,
    "environmental": WEIGHT_ENVIRONMENTAL,
}

if not math.isclose(sum(WEIGHTS.values()), 1.0):
    raise ValueError(f"Feasibility weights must sum to 1.0, got {sum(WEIGHTS.values())}")


@dataclass(frozen=True)
class ScoringDefaults:
    """Fallback values for optional site attributes."""

    distance_to_port_km: float = DEFAULT_DISTANCE_TO_PORT_KM
    distance_to_grid_km: float = DEFAULT_DISTANCE_TO_GRID_KM
    capex_eur_m_per_mw: float = DEFAULT_CAPEX_EUR_M_PER_MW


DEFAULT_SCORING = ScoringDefaults()


@dataclass(frozen=True)
class FeasibilityBreakdown:
    """Per-factor sub-scores and the weighted total, all in [0, 100]."""

    depth_score: int
    port_distance_score: int
    grid_distance_score: int
    capex_score: int
    environmental_score: int
    total_score: int

    @property
    def feasibility_class(self) -> str:
        return classify_feasibility(self.total_score)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives."""
    return int(math.floor(value + 0.5))


def ramp_score(value: float, start: float, end: float) -> int:
    """
    Linear ramp: 100 at ``value <= start``, 0 at ``value >= end``.

    Computed as ``100 - (value - start) * 100 / (end - start)``, clamped to
    [0, 100] and rounded half-up.
    """
    raw = 100.0 - (value - start) * 100.0 / (end - start)
    return round_half_up(max(0.0, min(100.0, raw)))


def environmental_score(category: Optional[str]) -> int:
    """Score an environmental impact category; unknown values score 50."""
    if category in ENVIRONMENTAL_SCORES:
        return ENVIRONMENTAL_SCORES[category]
    return UNKNOWN_CATEGORY_SCORE


def classify_feasibility(total_score: float) -> str:
    """Bucket a total score into excellent / good / moderate / challenging."""
    for label, lower_bound in FEASIBILITY_CLASS_THRESHOLDS:
        if total_score >= lower_bound:
            return label
    return FALLBACK_FEASIBILITY_CLASS


def weighted_total(
    depth: float,
    port_distance: float,
    grid_distance: float,
    capex: float,
    environmental: float,
) -> int:
    """Combine five sub-scores with the fixed feasibility weights."""
    total = (
        depth * WEIGHTS["depth"]
        + port_distance * WEIGHTS["port_distance"]
        + grid_distance * WEIGHTS["grid_distance"]
        + capex * WEIGHTS["capex"]
        + environmental * WEIGHTS["environmental"]
    )
    # Float sums such as 80 * 0.25 + ... land a hair off the integer
    return round_half_up(round(total, 9))


def _or_default(value: Optional[float], default: float) -> float:
    return default if value is None else value


def calculate_feasibility_breakdown(
    site: WindSite,
    defaults: ScoringDefaults = DEFAULT_SCORING,
) -> FeasibilityBreakdown:
    """
    Score a single site.

    Args:
        site: Site to score.
        defaults: Fallbacks for missing port distance, grid distance and capex.

    Returns:
        FeasibilityBreakdown with five sub-scores and the weighted total.
    """
    depth = ramp_score(site.water_depth, *DEPTH_RAMP_M)
    port = ramp_score(
        _or_default(site.distance_to_port_km, defaults.distance_to_port_km),
        *PORT_DISTANCE_RAMP_KM,
    )
    grid = ramp_score(
        _or_default(site.distance_to_grid_km, defaults.distance_to_grid_km),
        *GRID_DISTANCE_RAMP_KM,
    )
    capex = ramp_score(
        _or_default(site.capex_eur_m_per_mw, defaults.capex_eur_m_per_mw),
        *CAPEX_RAMP_EUR_M_PER_MW,
    )
    env = environmental_score(site.environmental_impact)

    return FeasibilityBreakdown(
        depth_score=depth,
        port_distance_score=port,
        grid_distance_score=grid,
        capex_score=capex,
        environmental_score=env,
        total_score=weighted_total(depth, port, grid, capex, env),
    )


def score_sites(
    sites: Iterable[WindSite],
    defaults: ScoringDefaults = DEFAULT_SCORING,
) -> List[Tuple[WindSite, FeasibilityBreakdown]]:
    """Score every site, preserving input order."""
    return [(site, calculate_feasibility_breakdown(site, defaults)) for site in sites]
