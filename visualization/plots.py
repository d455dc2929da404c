"""
Visualization module for the Offshore Wind Siting Dashboard.

Provides Plotly-based interactive maps and charts for the Streamlit interface.
"""

from typing import Dict, List, Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from models.site import WindSite
from models.feasibility import FeasibilityBreakdown
from fields.wind import MonthWindData, get_wind_score
from fields.depth import DepthPoint, depth_colorscale
from config import (
    FEASIBILITY_COLORS,
    ENVIRONMENTAL_COLORS,
    UNKNOWN_COLOR,
    SCORE_BAR_COLORS,
    SCORE_BAR_FALLBACK,
    WIND_COLOR_BANDS,
    WIND_COLOR_FALLBACK,
    WEIGHTS_CAPTION,
    MAP_CENTER,
    MAP_ZOOM,
    MAP_STYLE,
)

BREAKDOWN_LABELS = (
    ("depth_score", "Depth"),
    ("port_distance_score", "Port Dist"),
    ("grid_distance_score", "Grid Dist"),
    ("capex_score", "CAPEX"),
    ("environmental_score", "Environ."),
)


# ── Colour helpers ──────────────────────────────────────────────────────────

def get_feasibility_color(feasibility: str) -> str:
    """Marker colour for a stored feasibility class."""
    return FEASIBILITY_COLORS.get(feasibility, UNKNOWN_COLOR)


def get_environmental_color(impact: str) -> str:
    """Badge colour for an environmental impact level."""
    return ENVIRONMENTAL_COLORS.get(impact, UNKNOWN_COLOR)


def get_score_bar_color(score: float) -> str:
    """Bar colour for a 0-100 sub-score."""
    for lower_bound, color in SCORE_BAR_COLORS:
        if score >= lower_bound:
            return color
    return SCORE_BAR_FALLBACK


def wind_colorscale() -> List[list]:
    """Stepped Plotly colorscale matching the wind legend bands."""
    edges = [0.0] + sorted(b for b, _ in WIND_COLOR_BANDS) + [1.0]
    colors = [WIND_COLOR_FALLBACK] + [c for _, c in sorted(WIND_COLOR_BANDS)]
    scale = []
    for lo, hi, color in zip(edges[:-1], edges[1:], colors):
        scale.append([lo, color])
        scale.append([hi, color])
    return scale


def _apply_map_layout(fig: go.Figure, height: int) -> None:
    fig.update_layout(
        map=dict(
            style=MAP_STYLE,
            center=dict(lat=MAP_CENTER[0], lon=MAP_CENTER[1]),
            zoom=MAP_ZOOM,
        ),
        height=height,
        margin=dict(l=0, r=0, t=30, b=0),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=0.01,
            xanchor="left",
            x=0.01,
        ),
    )


def _add_site_markers(
    fig: go.Figure,
    sites: Sequence[WindSite],
    highlighted_ids: Sequence[str] = (),
) -> None:
    """Feasibility-coloured site markers; highlighted sites are drawn larger."""
    if not sites:
        return
    highlighted = set(highlighted_ids)
    fig.add_trace(
        go.Scattermap(
            lat=[s.lat for s in sites],
            lon=[s.lng for s in sites],
            mode="markers+text",
            marker=dict(
                size=[22 if s.id in highlighted else 14 for s in sites],
                color=[get_feasibility_color(s.feasibility) for s in sites],
            ),
            text=[s.name for s in sites],
            textposition="top center",
            customdata=[
                [s.country, s.capacity_factor, s.water_depth, s.feasibility,
                 s.environmental_impact, s.overall_score, s.estimated_capacity]
                for s in sites
            ],
            hovertemplate=(
                "<b>%{text}</b><br>%{customdata[0]}<br>"
                "Capacity factor: %{customdata[1]}%<br>"
                "Water depth: %{customdata[2]} m<br>"
                "Feasibility: %{customdata[3]}<br>"
                "Environmental impact: %{customdata[4]}<br>"
                "Score: %{customdata[5]}/100<br>"
                "Capacity: %{customdata[6]}<extra></extra>"
            ),
            name="Candidate Sites",
        )
    )


# ── Maps ────────────────────────────────────────────────────────────────────

def create_site_map_figure(
    sites: Sequence[WindSite],
    highlighted_ids: Sequence[str] = (),
    height: int = 650,
) -> go.Figure:
    """Map of candidate sites coloured by feasibility."""
    fig = go.Figure()
    _add_site_markers(fig, sites, highlighted_ids)
    _apply_map_layout(fig, height)
    return fig


def create_wind_heatmap_figure(
    month: Optional[MonthWindData],
    sites: Sequence[WindSite] = (),
    highlighted_ids: Sequence[str] = (),
    height: int = 650,
) -> go.Figure:
    """
    Wind-intensity density layer for one synthetic month, with site markers
    on top.  Overlapping site footprints blend additively in the layer.
    """
    fig = go.Figure()

    if month is not None and month.points:
        lats, lngs, intensities = (list(col) for col in zip(*month.points))
        speeds = [v.speed for v in month.vectors]
        directions = [v.direction for v in month.vectors]
        fig.add_trace(
            go.Densitymap(
                lat=lats,
                lon=lngs,
                z=intensities,
                radius=18,
                zmin=0,
                zmax=1,
                colorscale=wind_colorscale(),
                opacity=0.6,
                colorbar=dict(title="Wind intensity"),
                customdata=np.column_stack([speeds, directions]),
                hovertemplate=(
                    "Intensity: %{z:.2f}<br>"
                    "Speed: %{customdata[0]:.1f} m/s<br>"
                    "Direction: %{customdata[1]:.0f}°<extra></extra>"
                ),
                name=month.day,
            )
        )
        fig.update_layout(title=f"{month.day} ({month.date}) | average score {month.average_score}")

    _add_site_markers(fig, sites, highlighted_ids)
    _apply_map_layout(fig, height)
    return fig


def create_depth_heatmap_figure(
    points: Sequence[DepthPoint],
    sites: Sequence[WindSite] = (),
    highlighted_ids: Sequence[str] = (),
    height: int = 650,
) -> go.Figure:
    """Water-depth density layer with site markers on top."""
    fig = go.Figure()

    if points:
        fig.add_trace(
            go.Densitymap(
                lat=[p.lat for p in points],
                lon=[p.lng for p in points],
                z=[p.intensity for p in points],
                radius=18,
                zmin=0,
                zmax=1,
                colorscale=depth_colorscale(),
                opacity=0.6,
                colorbar=dict(title="Depth (norm.)"),
                customdata=[p.depth for p in points],
                hovertemplate="Depth: %{customdata:.0f} m<extra></extra>",
                name="Water depth",
            )
        )

    _add_site_markers(fig, sites, highlighted_ids)
    _apply_map_layout(fig, height)
    return fig


# ── Charts ──────────────────────────────────────────────────────────────────

def create_breakdown_figure(
    breakdown: FeasibilityBreakdown,
    title: Optional[str] = None,
) -> go.Figure:
    """Horizontal score bars for the five feasibility factors, weights in the caption."""
    values = breakdown.as_dict()
    labels = [label for _, label in BREAKDOWN_LABELS]
    scores = [values[key] for key, _ in BREAKDOWN_LABELS]

    fig = go.Figure(
        go.Bar(
            x=scores,
            y=labels,
            orientation="h",
            marker_color=[get_score_bar_color(s) for s in scores],
            text=scores,
            textposition="outside",
            hovertemplate="%{y}: %{x}/100<extra></extra>",
        )
    )
    fig.update_layout(
        title=title or f"Feasibility Breakdown | {breakdown.total_score}/100",
        xaxis=dict(range=[0, 110], title="Score"),
        yaxis=dict(autorange="reversed"),
        height=260,
        margin=dict(l=80, r=20, t=40, b=60),
        annotations=[
            dict(
                text=WEIGHTS_CAPTION,
                xref="paper", yref="paper",
                x=0, y=-0.32,
                showarrow=False,
                font=dict(size=10),
            )
        ],
    )
    return fig


def create_month_score_profile(months: Sequence[MonthWindData]) -> go.Figure:
    """Bar chart of the three months' average scores and peak wind scores."""
    if not months:
        fig = go.Figure()
        fig.add_annotation(text="No wind data available", showarrow=False)
        return fig

    labels = [f"{m.day} ({m.date})" for m in months]
    peaks = [
        max((get_wind_score(p[2]) for p in m.points), default=0)
        for m in months
    ]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=labels,
            y=[m.average_score for m in months],
            name="Average score",
            marker_color="#3b82f6",
        )
    )
    fig.add_trace(
        go.Bar(
            x=labels,
            y=peaks,
            name="Peak wind score",
            marker_color="#f59e0b",
        )
    )
    fig.update_layout(
        title="Wind Conditions by Month",
        yaxis=dict(range=[0, 100], title="Score"),
        barmode="group",
        height=300,
    )
    return fig


def create_comparison_figure(
    scored: Sequence[tuple],
) -> go.Figure:
    """Grouped bars of the five factors for several (site, breakdown) pairs."""
    fig = go.Figure()
    labels = [label for _, label in BREAKDOWN_LABELS]
    for site, breakdown in scored:
        values = breakdown.as_dict()
        fig.add_trace(
            go.Bar(
                x=labels,
                y=[values[key] for key, _ in BREAKDOWN_LABELS],
                name=f"{site.name} ({breakdown.total_score})",
            )
        )
    fig.update_layout(
        title="Feasibility Factors",
        yaxis=dict(range=[0, 100], title="Score"),
        barmode="group",
        height=380,
    )
    return fig


def breakdown_table(scored: Sequence[tuple]) -> List[Dict[str, object]]:
    """Rows for a tabular comparison of scored sites."""
    rows = []
    for site, breakdown in scored:
        row = {"Site": site.name, "Country": site.country}
        values = breakdown.as_dict()
        for key, label in BREAKDOWN_LABELS:
            row[label] = values[key]
        row["Total"] = breakdown.total_score
        row["Class"] = breakdown.feasibility_class
        rows.append(row)
    return rows
