"""
Main OSM Collector

Fetches every amenity=bicycle_parking element inside the configured area
"""

from typing import List, Optional
from loguru import logger

from .api_client import OverpassAPIClient
from .models import OSMElement
from .parser import OSMResponseParser
from ...config import get_config, PipelineConfig


class OSMCollector:
    """
    Collect bicycle parking from OpenStreetMap via Overpass API

    Uses a single 'out center' query so that ways and relations come back
    with a centroid and every element resolves to one point.
    """

    def __init__(self, config: Optional[PipelineConfig] = None, api_client: Optional[OverpassAPIClient] = None):
        self.config = config or get_config()
        self.api_client = api_client or OverpassAPIClient(self.config)
        self.parser = OSMResponseParser()

    def build_query(self) -> str:
        """Overpass QL for all bicycle parking within the configured area"""
        return f"""
[out:json][timeout:{self.config.api.overpass_timeout}];
area(id:{self.config.query_area_id})->.searchArea;
nwr["amenity"="bicycle_parking"](area.searchArea);
out center;
"""

    def fetch_parking(self) -> List[OSMElement]:
        """
        Fetch all bicycle parking elements

        Returns:
            Elements in Overpass response order

        Raises:
            RuntimeError: If the query fails or the response is malformed
        """
        logger.info(f"Fetching bicycle parking in Overpass area {self.config.query_area_id}")

        try:
            data = self.api_client.query(self.build_query())
            elements = self.parser.parse_elements(data)
        except Exception as e:
            logger.error(f"OSM API query failed: {e}")
            logger.error("Cannot proceed without OSM data. Please retry the request.")
            raise RuntimeError(f"Failed to fetch OSM data from Overpass API: {e}") from e

        logger.info(f"Fetched {len(elements)} bicycle parking elements")
        return elements
