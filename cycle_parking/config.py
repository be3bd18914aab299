"""
Configuration settings for the Cycle Parking GeoJSON Generator
"""

from dataclasses import dataclass, field
from typing import Optional


# Sheffield, as an Overpass area id (relation 106956 + 3600000000)
DEFAULT_AREA_ID = 3600106956

DEFAULT_LAYER_REFERENCE = (
    "https://studio.mapcomplete.org/12363857/layers/"
    "sheffield_cycle_parking/sheffield_cycle_parking.json"
)


@dataclass
class APIConfig:
    """API endpoints and configuration"""
    # Overpass API (OSM)
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    overpass_timeout: int = 25  # Server-side [timeout:] in the query

    # Panoramax street-level imagery search
    panoramax_search_url: str = "https://api.panoramax.xyz/api/search"

    # MapComplete editor, linked from every feature description
    editor_url: str = "https://mapcomplete.org/theme.html"

    # Request settings
    request_timeout: int = 30

    # User agent for API requests
    user_agent: str = "CycleParkingGenerator/1.0"


@dataclass
class PipelineConfig:
    """Pipeline configuration"""
    # Append an "Edit" link to every description
    include_editor_link: bool = True

    # MapComplete layer definition passed to the editor as userlayout
    map_layer_reference: str = DEFAULT_LAYER_REFERENCE

    # Overpass area to search for amenity=bicycle_parking
    query_area_id: int = DEFAULT_AREA_ID

    # Output settings
    output_path: str = "out.geojson"

    # Parallel per-element processing (Panoramax lookups)
    max_workers: int = 8

    # Zoom level used in editor links
    editor_zoom: int = 18

    # API config
    api: APIConfig = field(default_factory=APIConfig)


# Global config instance
config = PipelineConfig()


def get_config() -> PipelineConfig:
    """Get global configuration"""
    return config


def validate_config(config: Optional[PipelineConfig]) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []

    if config is None:
        raise ValueError("Configuration validation failed:\n  - config is required but not set")

    if not isinstance(config.query_area_id, int) or isinstance(config.query_area_id, bool):
        errors.append(f"query_area_id must be an integer, got {config.query_area_id!r}")
    elif config.query_area_id <= 0:
        errors.append(f"query_area_id must be positive, got {config.query_area_id}")

    if not config.output_path:
        errors.append("output_path is required in config but not set")

    if config.max_workers is None or config.max_workers < 1:
        errors.append(f"max_workers must be at least 1, got {config.max_workers}")

    if config.include_editor_link and not config.map_layer_reference:
        errors.append("map_layer_reference is required when include_editor_link is enabled")

    if config.api is None:
        errors.append("api configuration is required but not set")
    else:
        if not config.api.overpass_url:
            errors.append("api.overpass_url is required but not set")
        if not config.api.panoramax_search_url:
            errors.append("api.panoramax_search_url is required but not set")
        if config.include_editor_link and not config.api.editor_url:
            errors.append("api.editor_url is required when include_editor_link is enabled")
        if config.api.request_timeout is None or config.api.request_timeout <= 0:
            errors.append(f"api.request_timeout must be positive, got {config.api.request_timeout}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
