"""
OSM response parser

Parses Overpass API responses into OSMElement objects
"""

from typing import Dict, Any, List
from .models import OSMElement


class OSMResponseParser:
    """Parses Overpass API responses"""

    @staticmethod
    def parse_elements(data: Dict[str, Any]) -> List[OSMElement]:
        """
        Parse Overpass response into elements, preserving response order

        Args:
            data: JSON response from Overpass API

        Returns:
            List of OSMElement

        Raises:
            ValueError: If the response has no usable 'elements' array
        """
        if not isinstance(data, dict):
            raise ValueError(f"Overpass response is not a JSON object: {type(data).__name__}")

        raw_elements = data.get("elements")
        if not isinstance(raw_elements, list):
            raise ValueError("Overpass response must contain an 'elements' array")

        elements = []
        for element in raw_elements:
            if not isinstance(element, dict) or "type" not in element or "id" not in element:
                raise ValueError(f"Malformed Overpass element: {element!r}")

            elements.append(OSMElement(
                type=element["type"],
                id=element["id"],
                tags=element.get("tags") or {},
                lat=element.get("lat"),
                lon=element.get("lon"),
                center=element.get("center")
            ))

        return elements
