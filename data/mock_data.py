"""
Mock Data for the Offshore Wind Siting Dashboard.

Eight candidate sites across European seas, shaped like rows of the
``wind_sites`` table.  Designed to be swapped out for a real database
feed later.
"""

from typing import List

from models.site import WindSite, site_from_record


def get_wind_site_records() -> List[dict]:
    """
    Return candidate sites as database-style rows (snake_case columns).

    Returns:
        List of fresh dicts; callers may mutate them.
    """
    return [
        {
            "id": "site-1",
            "name": "Dogger Bank",
            "location": "North Sea",
            "country": "United Kingdom",
            "coordinates": [54.75, 2.25],
            "capacity_factor": 52,
            "water_depth": 25,
            "feasibility": "excellent",
            "environmental_impact": "low",
            "bird_migration_risk": "medium",
            "whale_migration_risk": "low",
            "sea_floor_impact": "low",
            "overall_score": 92,
            "last_assessment": "2025-01-15",
            "estimated_capacity": "3600 MW",
            "distance_to_port_km": 130,
            "distance_to_grid_km": 190,
            "capex_eur_m_per_mw": 3.2,
        },
        {
            "id": "site-2",
            "name": "Celtic Sea Floating Zone",
            "location": "Celtic Sea",
            "country": "United Kingdom",
            "coordinates": [50.9, -6.4],
            "capacity_factor": 48,
            "water_depth": 85,
            "feasibility": "good",
            "environmental_impact": "medium",
            "bird_migration_risk": "medium",
            "whale_migration_risk": "medium",
            "sea_floor_impact": "low",
            "overall_score": 78,
            "last_assessment": "2025-01-20",
            "estimated_capacity": "1500 MW",
            "distance_to_port_km": 60,
            "distance_to_grid_km": 75,
            "capex_eur_m_per_mw": 4.4,
        },
        {
            "id": "site-3",
            "name": "Bay of Biscay South Brittany",
            "location": "Bay of Biscay",
            "country": "France",
            "coordinates": [47.3, -3.6],
            "capacity_factor": 44,
            "water_depth": 110,
            "feasibility": "moderate",
            "environmental_impact": "medium",
            "bird_migration_risk": "high",
            "whale_migration_risk": "medium",
            "sea_floor_impact": "medium",
            "overall_score": 68,
            "last_assessment": "2025-01-18",
            "estimated_capacity": "750 MW",
            "distance_to_port_km": 35,
            "distance_to_grid_km": 40,
            "capex_eur_m_per_mw": 4.6,
        },
        {
            "id": "site-4",
            "name": "Utsira Nord",
            "location": "Norwegian Sea",
            "country": "Norway",
            "coordinates": [59.3, 4.5],
            "capacity_factor": 55,
            "water_depth": 265,
            "feasibility": "challenging",
            "environmental_impact": "low",
            "bird_migration_risk": "low",
            "whale_migration_risk": "medium",
            "sea_floor_impact": "low",
            "overall_score": 74,
            "last_assessment": "2025-01-22",
            "estimated_capacity": "1500 MW",
            "distance_to_port_km": 25,
            "distance_to_grid_km": 30,
            "capex_eur_m_per_mw": 4.9,
        },
        {
            "id": "site-5",
            "name": "Kriegers Flak North",
            "location": "Baltic Sea",
            "country": "Sweden",
            "coordinates": [55.2, 13.1],
            "capacity_factor": 46,
            "water_depth": 30,
            "feasibility": "excellent",
            "environmental_impact": "medium",
            "bird_migration_risk": "high",
            "whale_migration_risk": "low",
            "sea_floor_impact": "medium",
            "overall_score": 81,
            "last_assessment": "2025-01-10",
            "estimated_capacity": "640 MW",
            "distance_to_port_km": 30,
            "distance_to_grid_km": 25,
            "capex_eur_m_per_mw": 3.1,
        },
        {
            "id": "site-6",
            "name": "Gulf of Lion",
            "location": "Mediterranean - Gulf of Lion",
            "country": "France",
            "coordinates": [43.1, 3.9],
            "capacity_factor": 41,
            "water_depth": 95,
            "feasibility": "moderate",
            "environmental_impact": "high",
            "bird_migration_risk": "high",
            "whale_migration_risk": "high",
            "sea_floor_impact": "medium",
            "overall_score": 61,
            "last_assessment": "2025-01-25",
            "estimated_capacity": "750 MW",
            "distance_to_port_km": 20,
            "distance_to_grid_km": 30,
            "capex_eur_m_per_mw": 4.8,
        },
        {
            "id": "site-7",
            "name": "Irish Sea East",
            "location": "Irish Sea",
            "country": "Ireland",
            "coordinates": [53.4, -5.6],
            "capacity_factor": 45,
            "water_depth": 40,
            "feasibility": "good",
            "environmental_impact": "medium",
            "bird_migration_risk": "medium",
            "whale_migration_risk": "low",
            "sea_floor_impact": "medium",
            "overall_score": 76,
            "last_assessment": "2025-01-28",
            "estimated_capacity": "900 MW",
            "distance_to_port_km": 15,
            "distance_to_grid_km": 20,
        },
        {
            "id": "site-8",
            "name": "German Bight Cluster",
            "location": "German Bight",
            "country": "Germany",
            "coordinates": [54.3, 7.3],
            "capacity_factor": 47,
            "water_depth": 38,
            "feasibility": "good",
            "environmental_impact": "critical",
            "bird_migration_risk": "high",
            "whale_migration_risk": "high",
            "sea_floor_impact": "high",
            "overall_score": 64,
            "last_assessment": "2025-01-12",
            "estimated_capacity": "2000 MW",
            "capex_eur_m_per_mw": 3.5,
        },
    ]


def get_wind_sites() -> List[WindSite]:
    """
    Return candidate offshore wind sites.

    Some sites deliberately omit port distance, grid distance or capex to
    exercise the scorer's fallbacks.

    Returns:
        List of WindSite, freshly built on every call.
    """
    return [site_from_record(row) for row in get_wind_site_records()]
