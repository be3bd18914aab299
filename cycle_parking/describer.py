"""
Feature description for bicycle parking

Builds the markdown-ish text shown in the map popup for one element,
plus the hub/hangar flags used for styling.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from urllib.parse import quote
from loguru import logger

from .config import get_config, PipelineConfig
from .collectors.osm import OSMElement
from .collectors.panoramax import PanoramaxClient
from .tags import (
    normalize_boolean_like,
    resolve_access_label,
    is_hangar_operator,
    implies_covered,
)


WALL_LOOPS_WARNING = "**Wheel benders - not recommended for use**\n"


@dataclass
class ParkingDescription:
    """Description lines and classification flags for one element"""
    lines: List[str] = field(default_factory=list)
    is_hub: bool = False
    is_hangar: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def is_hub(tags: Dict[str, str]) -> bool:
    """Non-private parking buildings are shown as hubs"""
    return tags.get("bicycle_parking") == "building" and tags.get("access") != "private"


def title_for(tags: Dict[str, str]) -> str:
    """Pick the heading for an element; first matching rule wins"""
    if tags.get("name"):
        return tags["name"]
    if tags.get("bicycle_parking") == "informal":
        return "Informal bike parking"
    if is_hangar_operator(tags.get("operator")):
        return "Bike hangar"
    if tags.get("location") == "underground":
        return "Underground bike parking"
    return "Bike parking"


def format_property(name: str, value: str) -> str:
    return f"**{name}:** {value}"


class ParkingDescriber:
    """
    Describe bicycle parking elements

    Usage:
        describer = ParkingDescriber()
        description = describer.describe(element)
        description.text
    """

    def __init__(self, config: Optional[PipelineConfig] = None, image_client: Optional[PanoramaxClient] = None):
        self.config = config or get_config()
        self.image_client = image_client or PanoramaxClient(self.config)

    def describe(self, element: OSMElement) -> ParkingDescription:
        """
        Build description lines for one element

        May block on a Panoramax lookup when the element has a panoramax tag.

        Args:
            element: Parsed Overpass element

        Returns:
            ParkingDescription with at least the title line
        """
        tags = element.tags
        description = ParkingDescription(
            is_hub=is_hub(tags),
            is_hangar=is_hangar_operator(tags.get("operator")),
        )
        lines = description.lines

        lines.append(f"# {title_for(tags)}")

        if tags.get("bicycle_parking") == "wall_loops":
            lines.append(WALL_LOOPS_WARNING)

        if tags.get("description"):
            lines.append(tags["description"])

        access = resolve_access_label(tags.get("access"), tags.get("private"))
        if access:
            lines.append(format_property("Access", access))

        if tags.get("fee") == "yes":
            lines.append(format_property("Fee", normalize_boolean_like(tags["fee"])))
            if tags.get("charge"):
                lines.append(format_property("Cost", tags["charge"]))

        if tags.get("covered") and not implies_covered(tags.get("bicycle_parking")):
            lines.append(format_property("Covered", normalize_boolean_like(tags["covered"])))

        if tags.get("capacity"):
            lines.append(format_property("Capacity", tags["capacity"]))

        if tags.get("operator"):
            lines.append(format_property("Operated by", tags["operator"]))

        if tags.get("website"):
            lines.append(f"**[[{tags['website']}|Website]]**")

        if tags.get("panoramax"):
            lines.extend(self._image_lines(tags["panoramax"]))

        if self.config.include_editor_link:
            lines.append(self.editor_link(element))

        return description

    def _image_lines(self, image_id: str) -> List[str]:
        metadata = self.image_client.get_image_metadata(image_id)
        if metadata is None:
            return []

        logger.debug(f"Panoramax {image_id}: {metadata.license} by {metadata.producers}")
        return [
            f"{{{{{metadata.thumbnail_href}}}}}",
            f"Image is licensed by {', '.join(metadata.producers)} under {metadata.license}",
        ]

    def editor_link(self, element: OSMElement) -> str:
        """MapComplete link centred on the element, with our layer loaded"""
        lon, lat = element.get_coordinates()
        layer = quote(self.config.map_layer_reference, safe="")
        url = (
            f"{self.config.api.editor_url}?z={self.config.editor_zoom}"
            f"&lat={lat}&lon={lon}&userlayout={layer}"
            f"#{element.type}/{element.id}"
        )
        return f"[[{url}|Edit]]"
