"""
Site queries backing the planning assistant's tools and the dashboard filters.

Implements the three assistant tools (search, details, compare) as pure
functions over an in-memory list of sites, plus the JSON tool schemas and
a dispatcher that turns a tool call into a JSON-serialisable payload.
Lookup failures are reported as ``{"error": ...}`` payloads, never raised,
so the assistant can relay them to the user.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from models.site import WindSite, IMPACT_LEVELS
from config import DEFAULT_SEARCH_LIMIT, PRIORITY_SITE_COUNT

log = logging.getLogger(__name__)

SORT_KEYS = ("capacity_factor", "environmental_impact", "overall_score", "water_depth")
FOCUS_CRITERIA = ("energy", "environmental_impact", "feasibility", "cost", "ecology")


# ---------------------------------------------------------------------------
# Tool schemas
# ---------------------------------------------------------------------------

TOOLS: List[Dict[str, Any]] = [
    {
        "type": "function",
        "function": {
            "name": "search_sites",
            "description": (
                "Search and filter offshore wind sites based on flexible criteria "
                "including location, environmental impact, capacity, feasibility, "
                "and more. Use this for broad queries like 'Spanish waters', "
                "'low environmental impact sites', 'sites near France', or "
                "'best wind potential'."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": (
                            "Text matched against site name, sea area and country "
                            "(e.g., 'France', 'North Sea', 'Dogger'). A query that "
                            "matches nothing returns no sites; pass an empty string "
                            "to rank the filtered set."
                        ),
                    },
                    "filters": {
                        "type": "object",
                        "description": "Optional filters to narrow results",
                        "properties": {
                            "min_capacity_factor": {
                                "type": "number",
                                "description": "Minimum capacity factor %",
                            },
                            "max_water_depth": {
                                "type": "number",
                                "description": "Maximum water depth in meters",
                            },
                            "environmental_impact": {
                                "type": "array",
                                "items": {"type": "string", "enum": list(IMPACT_LEVELS)},
                                "description": "Acceptable environmental impact levels",
                            },
                            "feasibility": {
                                "type": "array",
                                "items": {
                                    "type": "string",
                                    "enum": ["excellent", "good", "moderate", "challenging"],
                                },
                                "description": "Acceptable feasibility levels",
                            },
                            "countries": {
                                "type": "array",
                                "items": {"type": "string"},
                                "description": "Countries or regions to include",
                            },
                        },
                    },
                    "sort_by": {
                        "type": "string",
                        "enum": list(SORT_KEYS),
                        "description": "Criteria to sort results by",
                        "default": "overall_score",
                    },
                    "limit": {
                        "type": "integer",
                        "description": "Maximum number of sites to return",
                        "default": DEFAULT_SEARCH_LIMIT,
                    },
                },
                "required": ["query"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_site_details",
            "description": "Get detailed information about a specific offshore wind site by name or ID",
            "parameters": {
                "type": "object",
                "properties": {
                    "site_identifier": {
                        "type": "string",
                        "description": "Site name or ID (e.g., 'Dogger Bank', 'Norwegian Sea', 'site-1')",
                    },
                },
                "required": ["site_identifier"],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "compare_sites",
            "description": "Compare multiple offshore wind sites side-by-side",
            "parameters": {
                "type": "object",
                "properties": {
                    "site_identifiers": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "List of site names or IDs to compare",
                    },
                    "focus_criteria": {
                        "type": "array",
                        "items": {"type": "string", "enum": list(FOCUS_CRITERIA)},
                        "description": "Which criteria to emphasize in the comparison",
                    },
                },
                "required": ["site_identifiers"],
            },
        },
    },
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle.lower() in haystack.lower()


def _impact_rank(level: str) -> int:
    """Severity rank of an impact level; unknown levels sort last."""
    if level in IMPACT_LEVELS:
        return IMPACT_LEVELS.index(level)
    return len(IMPACT_LEVELS)


def _summary(site: WindSite) -> Dict[str, Any]:
    return {
        "id": site.id,
        "name": site.name,
        "location": site.location,
        "capacity_factor": site.capacity_factor,
        "water_depth": site.water_depth,
        "feasibility": site.feasibility,
        "environmental_impact": site.environmental_impact,
        "overall_score": site.overall_score,
        "estimated_capacity_mw": site.estimated_capacity,
        "last_assessment": site.last_assessment,
        "coordinates": list(site.coordinates),
    }


def _matches_identifier(site: WindSite, identifier: str) -> bool:
    if not identifier:
        return False
    return site.id == identifier or _contains(site.name, identifier)


def _apply_filters(sites: Sequence[WindSite], filters: Dict[str, Any]) -> List[WindSite]:
    result = list(sites)
    if filters.get("min_capacity_factor"):
        result = [s for s in result if s.capacity_factor >= filters["min_capacity_factor"]]
    if filters.get("max_water_depth"):
        result = [s for s in result if s.water_depth <= filters["max_water_depth"]]
    if filters.get("environmental_impact"):
        allowed = set(filters["environmental_impact"])
        result = [s for s in result if s.environmental_impact in allowed]
    if filters.get("feasibility"):
        allowed = set(filters["feasibility"])
        result = [s for s in result if s.feasibility in allowed]
    if filters.get("countries"):
        countries = filters["countries"]
        result = [s for s in result if any(_contains(s.country, c) for c in countries)]
    return result


def sort_sites(sites: Sequence[WindSite], sort_by: str = "overall_score") -> List[WindSite]:
    """
    Sort sites by a tool sort key.

    capacity_factor and overall_score sort highest first, water_depth
    shallowest first, environmental_impact least severe first.  Unknown
    keys fall back to overall_score.
    """
    if sort_by == "capacity_factor":
        return sorted(sites, key=lambda s: s.capacity_factor, reverse=True)
    if sort_by == "water_depth":
        return sorted(sites, key=lambda s: s.water_depth)
    if sort_by == "environmental_impact":
        return sorted(sites, key=lambda s: _impact_rank(s.environmental_impact))
    return sorted(sites, key=lambda s: s.overall_score, reverse=True)


# ---------------------------------------------------------------------------
# Tool handlers
# ---------------------------------------------------------------------------

def search_sites(
    sites: Sequence[WindSite],
    query: str = "",
    filters: Optional[Dict[str, Any]] = None,
    sort_by: str = "overall_score",
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> Dict[str, Any]:
    """
    Filter, match and rank sites.

    Structured filters narrow the set first.  The free-text query then
    keeps sites whose name, location or country contains it, so a query
    that matches no site text returns no sites.

    Returns:
        ``{"query", "total_found", "sites"}`` with site summaries.
    """
    candidates = _apply_filters(sites, filters or {})

    if query:
        candidates = [
            s for s in candidates
            if _contains(s.name, query) or _contains(s.location, query)
            or _contains(s.country, query)
        ]
        if not candidates:
            log.debug("Query %r matched no site text", query)

    ranked = sort_sites(candidates, sort_by)[:max(0, int(limit))]
    return {
        "query": query,
        "total_found": len(ranked),
        "sites": [_summary(s) for s in ranked],
    }


def get_site_details(sites: Sequence[WindSite], site_identifier: str) -> Dict[str, Any]:
    """Full record of the first site matching an id or a name fragment."""
    for site in sites:
        if _matches_identifier(site, site_identifier):
            details = _summary(site)
            details.update(
                bird_migration_risk=site.bird_migration_risk,
                whale_migration_risk=site.whale_migration_risk,
                seafloor_impact=site.sea_floor_impact,
                country=site.country,
            )
            return details
    log.info("Site not found: %s", site_identifier)
    return {"error": f"Site not found: {site_identifier}"}


def compare_sites(
    sites: Sequence[WindSite],
    site_identifiers: Sequence[str],
    focus_criteria: Sequence[str] = (),
) -> Dict[str, Any]:
    """Side-by-side attributes for every site matching one of the identifiers.

    A bare string is treated as a single identifier.
    """
    if isinstance(site_identifiers, str):
        site_identifiers = [site_identifiers]
    chosen = [
        s for s in sites
        if any(_matches_identifier(s, ident) for ident in site_identifiers)
    ]
    if not chosen:
        return {"error": "No sites found matching the identifiers"}

    comparison = []
    for site in chosen:
        row = _summary(site)
        row.update(
            bird_migration_risk=site.bird_migration_risk,
            whale_migration_risk=site.whale_migration_risk,
        )
        for key in ("estimated_capacity_mw", "last_assessment", "coordinates"):
            row.pop(key)
        comparison.append(row)
    return {"comparison": comparison, "focus_criteria": list(focus_criteria)}


def get_priority_sites(
    sites: Sequence[WindSite],
    limit: int = PRIORITY_SITE_COUNT,
) -> List[WindSite]:
    """Top sites by overall score, without mutating the input."""
    return sort_sites(sites, "overall_score")[:limit]


def handle_tool_call(name: str, arguments: Any, sites: Sequence[WindSite]) -> Dict[str, Any]:
    """
    Dispatch one assistant tool call.

    Args:
        name: Tool name from ``TOOLS``.
        arguments: JSON string or already-parsed dict of tool arguments.
        sites: Sites to query.

    Returns:
        JSON-serialisable result payload; unknown tools and malformed
        arguments produce ``{"error": ...}``.
    """
    if arguments is None:
        arguments = {}
    elif isinstance(arguments, str):
        try:
            arguments = json.loads(arguments) if arguments.strip() else {}
        except json.JSONDecodeError as e:
            log.warning("Malformed arguments for tool %s: %s", name, e)
            return {"error": f"Invalid arguments for {name}: {e.msg}"}
    if not isinstance(arguments, dict):
        log.warning("Non-object arguments for tool %s: %r", name, arguments)
        return {"error": f"Invalid arguments for {name}: expected an object"}

    log.info("Executing tool: %s %s", name, arguments)

    if name == "search_sites":
        return search_sites(
            sites,
            query=arguments.get("query", ""),
            filters=arguments.get("filters"),
            sort_by=arguments.get("sort_by", "overall_score"),
            limit=arguments.get("limit", DEFAULT_SEARCH_LIMIT),
        )
    if name == "get_site_details":
        return get_site_details(sites, arguments.get("site_identifier", ""))
    if name == "compare_sites":
        return compare_sites(
            sites,
            arguments.get("site_identifiers", []),
            arguments.get("focus_criteria", []),
        )

    log.warning("Unknown tool: %s", name)
    return {"error": f"Unknown tool: {name}"}
