"""
Offshore wind site record.

A candidate site carries identity, a coordinate pair, physical and
economic attributes, and categorical risk assessments.  Categorical
values are kept as plain strings: unknown values are preserved and
scored neutrally downstream instead of being rejected.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

FEASIBILITY_LEVELS = ("excellent", "good", "moderate", "challenging")
IMPACT_LEVELS = ("low", "medium", "high", "critical")
RISK_LEVELS = ("low", "medium", "high")

# camelCase keys used by the web client, mapped to field names
_CAMEL_TO_FIELD = {
    "capacityFactor": "capacity_factor",
    "waterDepth": "water_depth",
    "environmentalImpact": "environmental_impact",
    "birdMigrationRisk": "bird_migration_risk",
    "whaleMigrationRisk": "whale_migration_risk",
    "seaFloorImpact": "sea_floor_impact",
    "overallScore": "overall_score",
    "lastAssessment": "last_assessment",
    "estimatedCapacity": "estimated_capacity",
    "distanceToPortKm": "distance_to_port_km",
    "distanceToGridKm": "distance_to_grid_km",
    "capexEurMPerMw": "capex_eur_m_per_mw",
}


@dataclass
class WindSite:
    """A candidate offshore wind farm location.

    Args:
        id: Unique site identifier.
        name: Display name.
        country: Country or region label.
        coordinates: (latitude, longitude) in degrees.
        capacity_factor: Expected share of nameplate output (percent, 0-100).
        water_depth: Water depth (meters).
        feasibility: Stored feasibility class (excellent/good/moderate/challenging).
        environmental_impact: low/medium/high/critical.
        bird_migration_risk: low/medium/high.
        whale_migration_risk: low/medium/high.
        sea_floor_impact: low/medium/high.
        overall_score: Stored overall score (0-100), drives wind intensity.
        last_assessment: ISO date of the last assessment.
        estimated_capacity: Capacity label, e.g. "1200 MW".
        location: Optional sea area label.
        distance_to_port_km: Optional distance to the nearest port (km).
        distance_to_grid_km: Optional distance to the nearest grid connection (km).
        capex_eur_m_per_mw: Optional capital cost (EUR million per MW).
    """

    id: str
    name: str
    coordinates: Tuple[float, float]
    country: str = ""
    capacity_factor: float = 0.0
    water_depth: float = 0.0
    feasibility: str = "moderate"
    environmental_impact: str = "medium"
    bird_migration_risk: str = "medium"
    whale_migration_risk: str = "medium"
    sea_floor_impact: str = "medium"
    overall_score: float = 0.0
    last_assessment: str = ""
    estimated_capacity: str = ""
    location: Optional[str] = None
    distance_to_port_km: Optional[float] = None
    distance_to_grid_km: Optional[float] = None
    capex_eur_m_per_mw: Optional[float] = None

    def __post_init__(self):
        lat, lng = self.coordinates
        self.coordinates = (float(lat), float(lng))

    @property
    def lat(self) -> float:
        return self.coordinates[0]

    @property
    def lng(self) -> float:
        return self.coordinates[1]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["coordinates"] = list(self.coordinates)
        return data


def site_from_record(record: Dict[str, Any]) -> WindSite:
    """Build a WindSite from a database row or a camelCase client record.

    Unknown keys are ignored; missing optional attributes stay ``None`` so
    the scorer can apply its fallbacks.
    """
    fields = set(WindSite.__dataclass_fields__)
    kwargs = {}
    for key, value in record.items():
        name = _CAMEL_TO_FIELD.get(key, key)
        if name in fields:
            kwargs[name] = value
    kwargs["coordinates"] = tuple(kwargs["coordinates"])
    kwargs["id"] = str(kwargs["id"])
    return WindSite(**kwargs)
