"""
Pydantic models for the cycle parking GeoJSON output
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field


# ============================================================
# GeoJSON Types
# ============================================================

class GeoJSONPoint(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: List[float]  # [longitude, latitude]


# ============================================================
# Feature Models
# ============================================================

class ParkingProperties(BaseModel):
    access: Optional[str] = None  # Raw access tag, uninterpreted
    text: str = Field(min_length=1)
    is_hub: bool
    is_hangar: bool


class ParkingFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: GeoJSONPoint
    properties: ParkingProperties


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[ParkingFeature] = Field(default_factory=list)


# ============================================================
# Panoramax
# ============================================================

class ImageMetadata(BaseModel):
    """Thumbnail and licensing for one Panoramax picture"""
    thumbnail_href: str
    license: str
    producers: List[str]  # Presentation order (reverse of the API's providers)
