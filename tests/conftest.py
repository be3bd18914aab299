"""Shared fixtures for the cycle parking tests."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from cycle_parking.collectors.osm import OSMElement
from cycle_parking.config import PipelineConfig
from cycle_parking.describer import ParkingDescriber
from cycle_parking.models import ImageMetadata


class FakeImageClient:
    """Stands in for PanoramaxClient; returns canned metadata by id."""

    def __init__(self, results: Optional[Dict[str, ImageMetadata]] = None) -> None:
        self.results = results or {}
        self.calls: List[str] = []

    def get_image_metadata(self, image_id: str) -> Optional[ImageMetadata]:
        self.calls.append(image_id)
        return self.results.get(image_id)


def make_element(tags: Optional[Dict[str, str]] = None, **kwargs) -> OSMElement:
    fields = {"type": "node", "id": 1, "lat": 53.38, "lon": -1.47}
    fields.update(kwargs)
    return OSMElement(tags=tags or {}, **fields)


@pytest.fixture()
def config() -> PipelineConfig:
    return PipelineConfig()


@pytest.fixture()
def image_client() -> FakeImageClient:
    return FakeImageClient()


@pytest.fixture()
def describer(config: PipelineConfig, image_client: FakeImageClient) -> ParkingDescriber:
    return ParkingDescriber(config, image_client=image_client)
