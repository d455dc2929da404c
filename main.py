"""
Offshore Wind Siting Dashboard — Streamlit Interface.

Run with:  streamlit run main.py
"""

import sys
import os
import logging
from datetime import date

# Ensure the project root is on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import streamlit as st
import streamlit.components.v1 as components

from data.interfaces import MockSiteProvider, FileSiteProvider
from data.site_queries import search_sites, get_priority_sites
from models.feasibility import calculate_feasibility_breakdown, score_sites
from fields.wind import (
    cached_wind_pattern_data,
    generate_wind_pattern_data,
    prevailing_wind,
    get_wind_color,
)
from fields.depth import cached_depth_data, generate_depth_data
from models.site import IMPACT_LEVELS, FEASIBILITY_LEVELS
from visualization.plots import (
    create_site_map_figure,
    create_wind_heatmap_figure,
    create_depth_heatmap_figure,
    create_breakdown_figure,
    create_month_score_profile,
    get_environmental_color,
)
from visualization.compass_widget import compass_html
from config import (
    LOG_LEVEL,
    LOG_FORMAT,
    WEIGHTS_CAPTION,
    PRIORITY_SITE_COUNT,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt="%H:%M:%S")
log = logging.getLogger("main")

# ── Page Config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Offshore Wind Siting",
    page_icon="🌬️",
    layout="wide",
)

st.title("Floating Offshore Wind Planning")
st.markdown(
    "Ranks candidate offshore wind sites across European seas by technical, "
    "economic and environmental feasibility, with synthetic wind and depth "
    "layers around each site."
)

# ── Data ─────────────────────────────────────────────────────────────────────

sites_path = os.environ.get("WIND_SITING_SITES_FILE")
provider = FileSiteProvider(sites_path) if sites_path else MockSiteProvider()
all_sites = provider.get_sites()
log.info("Loaded %d candidate sites from %s", len(all_sites), type(provider).__name__)
st.session_state["wind_sites"] = all_sites

# ── Sidebar Controls ─────────────────────────────────────────────────────────

st.sidebar.header("Site Filters")

query = st.sidebar.text_input(
    "Search",
    value="",
    help="Matches site name, sea area or country. Leave empty to list "
         "every site that passes the filters.",
)

max_depth = st.sidebar.slider(
    "Max Water Depth (m)",
    min_value=20,
    max_value=300,
    value=300,
    step=10,
)

min_cf = st.sidebar.slider(
    "Min Capacity Factor (%)",
    min_value=0,
    max_value=60,
    value=0,
    step=1,
)

impact_levels = st.sidebar.multiselect(
    "Environmental Impact",
    options=list(IMPACT_LEVELS),
    default=list(IMPACT_LEVELS),
)

feasibility_levels = st.sidebar.multiselect(
    "Feasibility",
    options=list(FEASIBILITY_LEVELS),
    default=list(FEASIBILITY_LEVELS),
)

sort_by = st.sidebar.selectbox(
    "Sort By",
    ["overall_score", "capacity_factor", "water_depth", "environmental_impact"],
)

result_limit = st.sidebar.slider(
    "Sites Shown",
    min_value=1,
    max_value=max(1, len(all_sites)),
    value=max(1, len(all_sites)),
)

# ── Layer Settings ──────────────────────────────────────────────────────────

st.sidebar.header("Map Layers")

layer = st.sidebar.radio(
    "Layer",
    ["Sites", "Wind Pattern", "Sea Depth"],
    help="**Wind Pattern**: synthetic monthly wind intensity around each site. "
         "**Sea Depth**: synthetic bathymetry interpolated around each site.",
)

reproducible = st.sidebar.checkbox(
    "Reproducible layers",
    value=True,
    help="Seed every noise source so layers are identical between reruns. "
         "When off, depth noise and wind directions are redrawn on every rerun.",
)
seed = 0
if reproducible:
    seed = int(st.sidebar.number_input("Seed", value=0, min_value=0, step=1))

# ── Filtering ────────────────────────────────────────────────────────────────

filters = {
    "max_water_depth": max_depth,
    "min_capacity_factor": min_cf,
    "environmental_impact": impact_levels,
    "feasibility": feasibility_levels,
}
result = search_sites(all_sites, query=query, filters=filters, sort_by=sort_by, limit=result_limit)
shown_ids = [s["id"] for s in result["sites"]]
shown_sites = [s for s in all_sites if s.id in shown_ids]
shown_sites.sort(key=lambda s: shown_ids.index(s.id))

scored = score_sites(shown_sites)

# ── Summary Metrics Banner ───────────────────────────────────────────────────

m1, m2, m3, m4 = st.columns(4)
m1.metric("Sites Shown", f"{len(shown_sites)} / {len(all_sites)}")
if scored:
    best_site, best = max(scored, key=lambda pair: pair[1].total_score)
    m2.metric("Best Feasibility", f"{best.total_score}/100", delta=best_site.name, delta_color="off")
    m3.metric(
        "Mean Capacity Factor",
        f"{sum(s.capacity_factor for s in shown_sites) / len(shown_sites):.0f}%",
    )
    m4.metric(
        "Mean Water Depth",
        f"{sum(s.water_depth for s in shown_sites) / len(shown_sites):.0f} m",
    )
else:
    st.info("No sites match the current filters.")

# ── Map ──────────────────────────────────────────────────────────────────────

highlighted_ids = [s.id for s in get_priority_sites(shown_sites)]
sites_key_wind = tuple((s.id, s.lat, s.lng, float(s.overall_score)) for s in shown_sites)
sites_key_depth = tuple((s.id, s.lat, s.lng, float(s.water_depth)) for s in shown_sites)

map_col, list_col = st.columns([2, 1])

with map_col:
    if layer == "Wind Pattern":
        with st.spinner("Generating wind pattern..."):
            if reproducible:
                months = cached_wind_pattern_data(
                    sites_key=sites_key_wind,
                    today=date.today().replace(day=1),
                    seed_offset=float(seed),
                    direction_seed=seed,
                )
            else:
                months = generate_wind_pattern_data(shown_sites)
        if months:
            month_labels = [f"{m.day} ({m.date})" for m in months]
            month_idx = st.select_slider(
                "Month",
                options=list(range(len(months))),
                value=len(months) - 1,
                format_func=lambda i: month_labels[i],
            )
            month = months[month_idx]
            st.plotly_chart(
                create_wind_heatmap_figure(month, shown_sites, highlighted_ids),
                width="stretch",
            )
            st.plotly_chart(create_month_score_profile(months), width="stretch")

            direction, speed = prevailing_wind(month.vectors)
            st.sidebar.markdown("---")
            st.sidebar.caption("Prevailing wind (intensity-weighted)")
            with st.sidebar:
                components.html(compass_html(direction, speed, caption=month.day), height=200)
        else:
            st.plotly_chart(create_wind_heatmap_figure(None), width="stretch")

    elif layer == "Sea Depth":
        with st.spinner("Generating depth layer..."):
            if reproducible:
                depth_points = cached_depth_data(sites_key_depth, seed=seed)
            else:
                depth_points = generate_depth_data(shown_sites)
        st.plotly_chart(
            create_depth_heatmap_figure(depth_points, shown_sites, highlighted_ids),
            width="stretch",
        )

    else:
        st.plotly_chart(
            create_site_map_figure(shown_sites, highlighted_ids),
            width="stretch",
        )

# ── Priority List ────────────────────────────────────────────────────────────

with list_col:
    st.subheader("Top Priority Sites")
    if not shown_sites:
        st.caption("Nothing to rank.")
    for rank, site in enumerate(get_priority_sites(shown_sites, PRIORITY_SITE_COUNT), start=1):
        breakdown = calculate_feasibility_breakdown(site)
        with st.container(border=True):
            st.markdown(f"**{rank}. {site.name}**  \n{site.country}")
            c1, c2 = st.columns(2)
            c1.metric("Capacity Factor", f"{site.capacity_factor}%")
            c2.metric("Depth", f"{site.water_depth} m")
            env_color = get_environmental_color(site.environmental_impact)
            st.markdown(
                f"Feasibility: **{site.feasibility}** | Score: **{site.overall_score}/100**  \n"
                f"Environmental impact: <span style='color:{env_color}'>"
                f"**{site.environmental_impact}**</span>  \n{site.estimated_capacity}",
                unsafe_allow_html=True,
            )
            with st.expander(f"Feasibility breakdown ({breakdown.total_score}/100)"):
                st.plotly_chart(create_breakdown_figure(breakdown), width="stretch")

# ── Site Table ──────────────────────────────────────────────────────────────

st.subheader("All Matching Sites")

if scored:
    for site, breakdown in scored:
        col1, col2, col3, col4, col5 = st.columns(5)
        col1.metric(site.name, site.country or "—")
        col2.metric("Feasibility Score", f"{breakdown.total_score}/100",
                    delta=breakdown.feasibility_class, delta_color="off")
        col3.metric("Capacity Factor", f"{site.capacity_factor}%")
        col4.metric("Water Depth", f"{site.water_depth} m")
        col5.metric("Stored Score", f"{site.overall_score}/100")
    st.caption(WEIGHTS_CAPTION)

# ── Info Panel ───────────────────────────────────────────────────────────────

with st.expander("About the Model"):
    st.markdown(
        f"""
        **Feasibility Score** — weighted sum of five factor scores, each on a
        0–100 scale. {WEIGHTS_CAPTION}.

        - *Depth*: 100 at ≤30 m, falling linearly to 0 at 150 m.
        - *Port / Grid distance*: 100 at ≤20 km, 0 at 200 km (100 km assumed when unknown).
        - *CAPEX*: 100 at ≤3.0 M€/MW, 0 at 5.0 M€/MW (4.0 assumed when unknown).
        - *Environmental*: low 100, medium 66, high 33, critical 0, unknown 50.

        **Wind Pattern** — synthetic intensity around each site, scaled by the
        site's overall score and decaying with distance over a 2.5° radius.
        Three months use multipliers 0.55 / 0.80 / 1.15. Directions are
        decorative regional approximations, not a forecast. Legend colours:
        <span style='color:{get_wind_color(0.9)}'>■</span> ≥0.8,
        <span style='color:{get_wind_color(0.7)}'>■</span> ≥0.65,
        <span style='color:{get_wind_color(0.55)}'>■</span> ≥0.5,
        <span style='color:{get_wind_color(0.4)}'>■</span> ≥0.35,
        <span style='color:{get_wind_color(0.0)}'>■</span> below.

        **Sea Depth** — site depth spread over the same radius with ±12.5 m
        noise, deepening slightly towards the edge (minimum 20 m).

        ---
        *Site data is currently mock unless `WIND_SITING_SITES_FILE` points to
        a JSON export of the sites table.*
        """,
        unsafe_allow_html=True,
    )
