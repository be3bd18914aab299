"""
Main Pipeline Orchestrator for the cycle parking GeoJSON

  1. Fetch amenity=bicycle_parking from Overpass (one request)
  2. Describe every element in parallel (Panoramax lookups as needed)
  3. Assemble Point features
  4. Sort so hubs come last
  5. Write the FeatureCollection atomically

Data Sources:
  - OpenStreetMap (Overpass API): Parking locations and tags
  - Panoramax: Street-level picture thumbnails
"""

import json
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional
from loguru import logger

from .config import get_config, validate_config, PipelineConfig
from .models import FeatureCollection, GeoJSONPoint, ParkingFeature, ParkingProperties
from .collectors import OSMCollector
from .collectors.osm import OSMElement
from .describer import ParkingDescriber


class CycleParkingPipeline:
    """
    Pipeline to generate the cycle parking FeatureCollection

    Usage:
        pipeline = CycleParkingPipeline()
        collection = pipeline.run()
        pipeline.save(collection, "out.geojson")
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        osm_collector: Optional[OSMCollector] = None,
        describer: Optional[ParkingDescriber] = None
    ):
        self.config = config or get_config()
        validate_config(self.config)

        self.osm_collector = osm_collector or OSMCollector(self.config)
        self.describer = describer or ParkingDescriber(self.config)

    def run(self) -> FeatureCollection:
        """
        Fetch, describe and sort every bicycle parking element

        Returns:
            FeatureCollection ready to save

        Raises:
            RuntimeError: If the Overpass fetch fails
            GeometryContractError: If an element has no coordinates
        """
        elements = self.osm_collector.fetch_parking()
        features = self.build_features(elements)
        features = self.sort_features(features)

        hubs = sum(1 for f in features if f.properties.is_hub)
        hangars = sum(1 for f in features if f.properties.is_hangar)
        logger.info(f"Assembled {len(features)} features ({hubs} hubs, {hangars} hangars)")

        return FeatureCollection(features=features)

    def build_features(self, elements: List[OSMElement]) -> List[ParkingFeature]:
        """
        Build one feature per element, in input order

        Elements are processed concurrently; executor.map yields results
        in submission order and re-raises the first worker exception.
        """
        if not elements:
            return []

        workers = min(self.config.max_workers, len(elements))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.build_feature, elements))

    def build_feature(self, element: OSMElement) -> ParkingFeature:
        """Assemble the Point feature for one element"""
        coordinates = element.get_coordinates()
        description = self.describer.describe(element)

        return ParkingFeature(
            geometry=GeoJSONPoint(coordinates=coordinates),
            properties=ParkingProperties(
                access=element.tags.get("access"),
                text=description.text,
                is_hub=description.is_hub,
                is_hangar=description.is_hangar
            )
        )

    @staticmethod
    def sort_features(features: List[ParkingFeature]) -> List[ParkingFeature]:
        """
        Stable sort with hubs last

        Hubs end up at the end of the array, which keeps them on top only
        when the renderer draws later features above earlier ones.
        """
        return sorted(features, key=lambda f: f.properties.is_hub)

    def save(self, collection: FeatureCollection, output_path: Optional[str] = None) -> str:
        """Save the FeatureCollection, replacing any previous file in one step"""
        output_path = output_path or self.config.output_path
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)

        tmp_path = f"{output_path}.tmp-{os.getpid()}-{int(time.time() * 1000)}"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(collection.model_dump(exclude_none=True), f, ensure_ascii=False)
            os.replace(tmp_path, output_path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.info(f"Saved {len(collection.features)} features to {output_path}")
        return output_path
