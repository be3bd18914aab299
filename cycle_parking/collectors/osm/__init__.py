"""
OpenStreetMap data collection module

Modular OSM data collector with separate components for:
- API client: Overpass API communication
- Models: Data structures (OSMElement)
- Parser: Response parsing
- Collector: Main orchestrator class
"""

from .models import OSMElement, GeometryContractError
from .collector import OSMCollector

__all__ = [
    "OSMElement",
    "GeometryContractError",
    "OSMCollector",
]
