"""
Cycle Parking GeoJSON Generator

Turns OpenStreetMap bicycle parking into a described GeoJSON
FeatureCollection for MapComplete.
"""

__version__ = "1.0.0"
