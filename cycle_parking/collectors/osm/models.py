"""
OSM data models

Data class for representing Overpass elements returned with 'out center'
"""

from typing import List, Dict, Optional
from dataclasses import dataclass, field


class GeometryContractError(ValueError):
    """Raised when an element carries neither a center nor its own lat/lon"""


@dataclass(frozen=True)
class OSMElement:
    """Represents an OSM node, way or relation"""
    type: str
    id: int
    tags: Dict[str, str] = field(default_factory=dict)
    lat: Optional[float] = None
    lon: Optional[float] = None
    center: Optional[Dict[str, float]] = None  # Ways and relations with 'out center'

    def get_coordinates(self) -> List[float]:
        """Get coordinates as [lon, lat]"""
        # Prefer the centroid if Overpass supplied one
        if self.center is not None:
            lat = self.center.get("lat")
            lon = self.center.get("lon")
        else:
            lat, lon = self.lat, self.lon

        if lat is None or lon is None:
            raise GeometryContractError(f"OSM {self.type}/{self.id} has no coordinates")
        return [lon, lat]
