"""
Site Comparison Page — side-by-side feasibility of selected sites.

Reads the site list from st.session_state (set by main.py) and presents:
  - Multi-select of sites to compare
  - Grouped factor bars and a breakdown table
  - Qualitative attributes from the compare tool
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import streamlit as st

from data.interfaces import MockSiteProvider
from data.site_queries import compare_sites, FOCUS_CRITERIA
from models.feasibility import score_sites
from visualization.plots import create_comparison_figure, breakdown_table
from config import WEIGHTS_CAPTION, PRIORITY_SITE_COUNT

st.set_page_config(page_title="Site Comparison", page_icon="⚖️", layout="wide")

st.title("Site Comparison")

# main.py stores the loaded sites; fall back to the mock set when this page
# is opened directly
sites = st.session_state.get("wind_sites") or MockSiteProvider().get_sites()
names = [s.name for s in sites]

selected = st.multiselect(
    "Sites to compare",
    options=names,
    default=names[:PRIORITY_SITE_COUNT],
)
focus = st.multiselect("Focus criteria", options=list(FOCUS_CRITERIA), default=[])

if not selected:
    st.info("Select at least one site.")
    st.stop()

chosen = [s for s in sites if s.name in selected]
scored = score_sites(chosen)

st.plotly_chart(create_comparison_figure(scored), width="stretch")
st.dataframe(breakdown_table(scored), width="stretch", hide_index=True)
st.caption(WEIGHTS_CAPTION)

result = compare_sites(sites, [s.id for s in chosen], focus)

st.subheader("Attributes")
if "error" in result:
    st.warning(result["error"])
else:
    st.dataframe(result["comparison"], width="stretch", hide_index=True)
    if result["focus_criteria"]:
        st.caption("Focus: " + ", ".join(result["focus_criteria"]))
