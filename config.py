"""
Global configuration and constants for the Offshore Wind Siting Dashboard.
"""

import os

# --- Logging ---
LOG_LEVEL = os.environ.get("WIND_SITING_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s │ %(name)-24s │ %(levelname)-8s │ %(message)s"

# --- Feasibility Weights ---
# Must sum to 1.0 (checked in models.feasibility)
WEIGHT_DEPTH = 0.25
WEIGHT_PORT_DISTANCE = 0.20
WEIGHT_GRID_DISTANCE = 0.20
WEIGHT_CAPEX = 0.15
WEIGHT_ENVIRONMENTAL = 0.20

WEIGHTS_CAPTION = "Weights: Depth 25%, Port 20%, Grid 20%, CAPEX 15%, Env 20%"

# --- Feasibility Ramps ---
# Each ramp scores 100 at or below its start and 0 at or beyond its end
DEPTH_RAMP_M = (30.0, 150.0)
PORT_DISTANCE_RAMP_KM = (20.0, 200.0)
GRID_DISTANCE_RAMP_KM = (20.0, 200.0)
CAPEX_RAMP_EUR_M_PER_MW = (3.0, 5.0)

# Fallbacks for optional site attributes
DEFAULT_DISTANCE_TO_PORT_KM = 100.0
DEFAULT_DISTANCE_TO_GRID_KM = 100.0
DEFAULT_CAPEX_EUR_M_PER_MW = 4.0

ENVIRONMENTAL_SCORES = {
    "low": 100,
    "medium": 66,
    "high": 33,
    "critical": 0,
}
UNKNOWN_CATEGORY_SCORE = 50

# Feasibility class lower bounds on the total score, best class first
FEASIBILITY_CLASS_THRESHOLDS = (
    ("excellent", 75),
    ("good", 60),
    ("moderate", 45),
)
FALLBACK_FEASIBILITY_CLASS = "challenging"

# --- Spatial Field Sweep ---
FIELD_RADIUS_DEG = 2.5         # Neighbourhood radius around each site (degrees)
FIELD_STEP_DEG = 0.25          # Sweep step in latitude and longitude (degrees)

# --- Wind Pattern ---
WIND_BASE_VARIATION = 0.6      # Constant part of the (0.6 + noise) factor
WIND_NOISE_AMPLITUDE = 0.2     # Seeded noise spans [0, 0.2)
WIND_MIN_INTENSITY = 0.1
WIND_MAX_INTENSITY = 1.0
WIND_SPEED_SCALE = 15.0        # speed = intensity * scale + offset
WIND_SPEED_OFFSET = 3.0
DEFAULT_WIND_DIRECTION_DEG = 90.0

# Three synthetic months, oldest first.  Average scores are presentation
# constants shown alongside the data and are not derived from it.
WIND_MONTH_SCENARIOS = (
    {"day": "Month 1", "multiplier": 0.55, "seed": 1, "average_score": 68, "months_ago": 2},
    {"day": "Month 2", "multiplier": 0.80, "seed": 2, "average_score": 72, "months_ago": 1},
    {"day": "Month 3", "multiplier": 1.15, "seed": 3, "average_score": 75, "months_ago": 0},
)

# Hash-noise coefficients: frac(sin(lat * A + lng * B + seed) * C)
HASH_NOISE_LAT_COEF = 12.9898
HASH_NOISE_LNG_COEF = 78.233
HASH_NOISE_SCALE = 43758.5453

# --- Depth Field ---
DEPTH_NOISE_AMPLITUDE_M = 25.0     # Uniform noise spans [-12.5, +12.5] m
DEPTH_DISTANCE_GAIN_M = 15.0       # Added depth at the edge of the radius
DEPTH_FLOOR_M = 20.0
DEPTH_MAX_M = 150.0                # Depth mapped to intensity 1.0
DEPTH_FALLOFF = 0.3                # Intensity reduction at the edge of the radius

# --- Colour Bands ---
WIND_COLOR_BANDS = (
    (0.8, "#dc2626"),
    (0.65, "#f59e0b"),
    (0.5, "#eab308"),
    (0.35, "#3b82f6"),
)
WIND_COLOR_FALLBACK = "#6b7280"

DEPTH_COLOR_BANDS = (
    (0.8, "#1e3a5f"),
    (0.6, "#1e4d8c"),
    (0.4, "#2563eb"),
    (0.2, "#60a5fa"),
)
DEPTH_COLOR_FALLBACK = "#93c5fd"

DEPTH_GRADIENT = {
    0.0: "#dbeafe",
    0.2: "#93c5fd",
    0.4: "#60a5fa",
    0.6: "#2563eb",
    0.8: "#1e40af",
    1.0: "#1e3a5f",
}

FEASIBILITY_COLORS = {
    "excellent": "#10b981",
    "good": "#3b82f6",
    "moderate": "#f59e0b",
    "challenging": "#ef4444",
}
ENVIRONMENTAL_COLORS = {
    "low": "#10b981",
    "medium": "#f59e0b",
    "high": "#ef4444",
    "critical": "#dc2626",
}
UNKNOWN_COLOR = "#6b7280"

SCORE_BAR_COLORS = (
    (75, "#22c55e"),
    (50, "#eab308"),
    (25, "#f97316"),
)
SCORE_BAR_FALLBACK = "#ef4444"

# --- Map View ---
MAP_CENTER = (54.0, 3.0)       # European seas
MAP_ZOOM = 4
MAP_STYLE = "carto-positron"

# --- Site Queries ---
DEFAULT_SEARCH_LIMIT = 5
PRIORITY_SITE_COUNT = 3

# --- Cache ---
CACHE_MAX_ENTRIES = 16
