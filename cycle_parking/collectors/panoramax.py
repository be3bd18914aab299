"""
Panoramax image metadata collector

Looks up a single street-level picture by id and returns its thumbnail,
license and producers. Any failure means no image for that element.
"""

from typing import Optional
import requests
from loguru import logger

from ..config import get_config, PipelineConfig
from ..models import ImageMetadata


class PanoramaxClient:
    """Collect picture metadata from the Panoramax search API"""

    def __init__(self, config: Optional[PipelineConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or get_config()
        self.search_url = self.config.api.panoramax_search_url
        self.session = session or requests.Session()

    def get_image_metadata(self, image_id: str) -> Optional[ImageMetadata]:
        """
        Get thumbnail and licensing for one picture
        Returns None if the lookup fails or finds nothing
        """
        try:
            response = self.session.get(
                self.search_url,
                params={"limit": 1, "ids": image_id},
                headers={
                    "Accept": "application/geo+json",
                    "User-Agent": self.config.api.user_agent
                },
                timeout=self.config.api.request_timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Panoramax request failed for {image_id}: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Response {response.status_code} from panoramax {image_id}")
            return None

        try:
            features = response.json().get("features") or []
            if not features:
                logger.warning(f"No features for panoramax {image_id}")
                return None

            feature = features[0]
            # Credited in reverse of the order Panoramax lists them
            producers = [provider["name"] for provider in feature["providers"]]
            producers.reverse()

            return ImageMetadata(
                thumbnail_href=feature["assets"]["thumb"]["href"],
                license=feature["properties"]["license"],
                producers=producers
            )
        except Exception as e:
            logger.warning(f"Malformed panoramax response for {image_id}: {e}")
            return None
