"""Tests for the Panoramax image metadata lookup."""

from __future__ import annotations

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
import requests

from cycle_parking.collectors.panoramax import PanoramaxClient


def _response(status_code: int = 200, payload: Any = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


def _feature(providers=("A", "B", "C")) -> Dict[str, Any]:
    return {
        "assets": {"thumb": {"href": "https://panoramax.example/thumb.jpg"}},
        "properties": {"license": "CC-BY-SA-4.0"},
        "providers": [{"name": name, "roles": ["producer"]} for name in providers],
    }


@pytest.fixture()
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture()
def client(config, session: MagicMock) -> PanoramaxClient:
    return PanoramaxClient(config, session=session)


class TestGetImageMetadata:
    def test_success(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.return_value = _response(payload={"features": [_feature()]})

        result = client.get_image_metadata("pic-1")

        assert result is not None
        assert result.thumbnail_href == "https://panoramax.example/thumb.jpg"
        assert result.license == "CC-BY-SA-4.0"
        assert result.producers == ["C", "B", "A"]

    def test_request_shape(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.return_value = _response(payload={"features": [_feature()]})

        client.get_image_metadata("pic-1")

        args, kwargs = session.get.call_args
        assert args[0] == "https://api.panoramax.xyz/api/search"
        assert kwargs["params"] == {"limit": 1, "ids": "pic-1"}
        assert kwargs["headers"]["Accept"] == "application/geo+json"

    def test_non_200_returns_none(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.return_value = _response(status_code=404)
        assert client.get_image_metadata("pic-1") is None

    def test_empty_features_returns_none(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.return_value = _response(payload={"type": "FeatureCollection", "features": []})
        assert client.get_image_metadata("pic-1") is None

    def test_malformed_feature_returns_none(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.return_value = _response(payload={"features": [{"properties": {}}]})
        assert client.get_image_metadata("pic-1") is None

    def test_network_error_returns_none(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.side_effect = requests.exceptions.ConnectionError("unreachable")
        assert client.get_image_metadata("pic-1") is None

    def test_single_attempt(self, client: PanoramaxClient, session: MagicMock) -> None:
        session.get.return_value = _response(status_code=503)
        client.get_image_metadata("pic-1")
        assert session.get.call_count == 1
