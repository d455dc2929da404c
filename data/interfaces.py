"""
Abstract Data Provider interface for pluggable site sources.

Allows swapping mock data for a managed database or exported JSON
without changing downstream code.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import List

from models.site import WindSite, site_from_record

log = logging.getLogger(__name__)


class SiteProvider(ABC):
    """Abstract base class for site sources.

    All methods return *fresh* objects; callers may mutate them freely.
    """

    @abstractmethod
    def get_sites(self) -> List[WindSite]:
        """Return candidate sites, ordered by overall score (highest first)."""
        ...


class MockSiteProvider(SiteProvider):
    """Wraps existing mock_data.py functions."""

    def get_sites(self) -> List[WindSite]:
        from data.mock_data import get_wind_sites
        sites = get_wind_sites()
        return sorted(sites, key=lambda s: s.overall_score, reverse=True)


class FileSiteProvider(SiteProvider):
    """Load sites from a JSON file on disk.

    The file holds an array of rows using the ``wind_sites`` column names
    (snake_case) or the web client's camelCase names.

    Args:
        sites_path: Path to a JSON file with an array of site rows.

    Raises:
        ValueError: If the file is not a non-empty array, a row misses a
                    required key, or coordinates are not a pair.
        FileNotFoundError: If the file does not exist.
    """

    _REQUIRED_KEYS = {"id", "name", "coordinates"}

    def __init__(self, sites_path: str):
        self._rows = self._load_rows(sites_path)
        log.info("Loaded %d sites from %s", len(self._rows), sites_path)

    @classmethod
    def _load_rows(cls, path: str) -> List[dict]:
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, list) or len(data) == 0:
            raise ValueError(f"Sites file must contain a non-empty JSON array: {path}")
        for i, row in enumerate(data):
            if not isinstance(row, dict):
                raise ValueError(f"Site #{i} is not an object in {path}")
            missing = cls._REQUIRED_KEYS - set(row.keys())
            if missing:
                raise ValueError(f"Site #{i} missing required keys {missing} in {path}")
            coords = row["coordinates"]
            if not isinstance(coords, (list, tuple)) or len(coords) != 2:
                raise ValueError(
                    f"Site #{i} coordinates must be a [lat, lng] pair in {path}"
                )
        return data

    def get_sites(self) -> List[WindSite]:
        sites = [site_from_record(dict(row)) for row in self._rows]
        return sorted(sites, key=lambda s: s.overall_score, reverse=True)
