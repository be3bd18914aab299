"""
Overpass API client

Handles communication with Overpass API. A failed request is fatal for
the run: there is no retry.
"""

import requests
from typing import Dict, Any, Optional
from loguru import logger

from ...config import get_config, PipelineConfig


class OverpassAPIClient:
    """Client for interacting with Overpass API"""

    def __init__(self, config: Optional[PipelineConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or get_config()
        self.overpass_url = self.config.api.overpass_url
        self.timeout = self.config.api.request_timeout
        self.session = session or requests.Session()

    def query(self, query: str) -> Dict[str, Any]:
        """
        Execute Overpass API query

        Args:
            query: Overpass QL query string

        Returns:
            JSON response from Overpass API

        Raises:
            RuntimeError: If the request fails or the body is not JSON
        """
        headers = {
            "User-Agent": self.config.api.user_agent,
            "Content-Type": "application/x-www-form-urlencoded"
        }

        try:
            response = self.session.post(
                self.overpass_url,
                data={"data": query},
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"OSM API failed: HTTP {e.response.status_code}")
            raise RuntimeError(f"Overpass API HTTP error {e.response.status_code}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"OSM API failed: {e}")
            raise RuntimeError(f"Overpass API request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"OSM API returned a non-JSON body ({len(response.content)} bytes)")
            raise RuntimeError(f"Overpass API returned non-JSON response: {e}") from e
