"""
Data collectors for the Cycle Parking GeoJSON Generator

- OSMCollector: amenity=bicycle_parking elements from OpenStreetMap
- PanoramaxClient: picture thumbnails and licensing from Panoramax
"""

from .osm import OSMCollector
from .panoramax import PanoramaxClient

__all__ = [
    "OSMCollector",
    "PanoramaxClient",
]
