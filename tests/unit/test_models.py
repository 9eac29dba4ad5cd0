"""Tests for the domain models and static catalogs.

Covers:
- Feature / BoundingBox / Region / TimelineEvent invariants
- Dict serialisation round trips for Feature
- Pydantic MediaWiki payload models
- Body lookup, curated catalog and region tables
"""

from __future__ import annotations

import math

import pytest

from planetary_atlas.catalogs.bodies import BodyConfig, get_body, list_bodies
from planetary_atlas.catalogs.curated import CURATED_FEATURES, curated_features
from planetary_atlas.catalogs.regions import REGIONS, regions_for
from planetary_atlas.catalogs.timelines import structured_timeline
from planetary_atlas.core.exceptions import UnknownBodyError
from planetary_atlas.models.feature import Feature, FeatureSource
from planetary_atlas.models.knowledge import OpenSearchResponse, ProviderConfig, QueryResponse
from planetary_atlas.models.region import BoundingBox, Region
from planetary_atlas.models.timeline import Confidence, TimelineEvent
from planetary_atlas.models.validation import ModelValidationError


class TestFeature:
    def test_defaults(self) -> None:
        feature = Feature("Gale")
        assert feature.feature_type == "Unknown"
        assert feature.source is FeatureSource.ARCHIVE
        assert feature.diameter_km is None

    def test_latitude_out_of_range(self) -> None:
        with pytest.raises(ModelValidationError):
            Feature("X", latitude=91.0)

    def test_non_positive_diameter(self) -> None:
        with pytest.raises(ModelValidationError):
            Feature("X", diameter_km=0.0)

    def test_with_region_keeps_existing(self) -> None:
        feature = Feature("X", within_region="Tharsis Bulge")
        assert feature.with_region("Olympus Mons") is feature

    def test_with_region_sets(self) -> None:
        assert Feature("X").with_region("Hellas Planitia").within_region == "Hellas Planitia"

    def test_dict_round_trip(self) -> None:
        feature = Feature("Gale", "Crater", -5.4, 137.8, 154.0, "Walter Gale", "1991",
                          FeatureSource.CURATED, "Elysium Planitia")
        assert Feature.from_dict(feature.to_dict()) == feature

    def test_from_dict_defaults(self) -> None:
        assert Feature.from_dict({}) == Feature("")

    def test_from_dict_unknown_source(self) -> None:
        with pytest.raises(ValueError):
            Feature.from_dict({"name": "X", "source": "telescope"})


class TestRegionModels:
    def test_south_above_north_rejected(self) -> None:
        with pytest.raises(ModelValidationError):
            BoundingBox(north=0.0, south=10.0, east=1.0, west=0.0)

    def test_crosses_antimeridian(self) -> None:
        assert BoundingBox(north=1.0, south=0.0, east=-170.0, west=170.0).crosses_antimeridian

    def test_bounding_box_dict(self) -> None:
        box = BoundingBox(north=1.0, south=0.0, east=2.0, west=-2.0)
        assert BoundingBox.from_dict(box.to_dict()) == box

    def test_region_requires_name(self) -> None:
        with pytest.raises(ModelValidationError):
            Region(" ", "Mare", BoundingBox(1.0, 0.0, 1.0, 0.0))


class TestTimelineEvent:
    def test_negative_years_rejected(self) -> None:
        with pytest.raises(ModelValidationError):
            TimelineEvent("Formation", -1.0, "d", "s")

    def test_non_finite_years_rejected(self) -> None:
        with pytest.raises(ModelValidationError):
            TimelineEvent("Formation", math.inf, "d", "s")

    def test_blank_phase_rejected(self) -> None:
        with pytest.raises(ModelValidationError):
            TimelineEvent("", 1.0, "d", "s")

    def test_to_dict(self) -> None:
        event = TimelineEvent("Formation", 3.7e9, "d", "s", confidence=Confidence.HIGH)
        d = event.to_dict()
        assert d["timeframe"] == "3.7 billion years ago"
        assert d["confidence"] == "high"
        assert d["url"] is None


class TestKnowledgeModels:
    def test_opensearch_first_page(self) -> None:
        payload = OpenSearchResponse.model_validate(
            ["Gale", ["Gale (crater)"], [""], ["https://en.wikipedia.org/wiki/Gale_(crater)"]]
        )
        ref = payload.first_page
        assert ref is not None
        assert ref.title == "Gale (crater)"

    def test_opensearch_empty(self) -> None:
        assert OpenSearchResponse.model_validate(["Zzz", [], [], []]).first_page is None

    def test_query_skips_missing_pages(self) -> None:
        payload = QueryResponse.model_validate(
            {"query": {"pages": [{"title": "A", "missing": True}, {"title": "B", "extract": "t"}]}}
        )
        page = payload.first_page
        assert page is not None
        assert page.title == "B"
        assert page.wikitext == ""

    def test_query_without_pages(self) -> None:
        assert QueryResponse.model_validate({}).first_page is None

    def test_provider_config_requires_name(self) -> None:
        with pytest.raises(ModelValidationError):
            ProviderConfig(name="")


class TestBodies:
    @pytest.mark.parametrize("identifier", ["Mars", "MARS", "mars", " Mars "])
    def test_lookup_aliases(self, identifier: str) -> None:
        assert get_body(identifier) == BodyConfig("Mars", "MARS")

    @pytest.mark.parametrize("identifier", ["Pluto", "", None, 42])
    def test_unknown(self, identifier: object) -> None:
        with pytest.raises(UnknownBodyError):
            get_body(identifier)

    def test_archive_name(self) -> None:
        assert get_body("Moon").archive_name == "MOON_nomenclature_center_pts.kmz"

    def test_list_bodies(self) -> None:
        assert list_bodies()[:2] == ["Moon", "Mars"]


class TestCatalogs:
    def test_curated_features_are_curated(self) -> None:
        for features in CURATED_FEATURES.values():
            assert all(f.source is FeatureSource.CURATED for f in features)

    def test_curated_names_unique_per_body(self) -> None:
        for features in CURATED_FEATURES.values():
            names = [f.name for f in features]
            assert len(names) == len(set(names))

    def test_curated_for_unknown_body(self) -> None:
        assert curated_features("Pluto") == []

    def test_curated_returns_copy(self) -> None:
        features = curated_features("Moon")
        features.clear()
        assert curated_features("Moon")

    def test_region_bounds_valid(self) -> None:
        for regions in REGIONS.values():
            for region in regions:
                assert region.bounds.south <= region.bounds.north

    def test_regions_for_uncatalogued_body(self) -> None:
        assert regions_for("Io") == ()

    def test_structured_timeline_lookup(self) -> None:
        events = structured_timeline("MOON", "Tycho")
        assert events is not None
        assert events[-1].years == 0
        assert structured_timeline("MOON", "Gale") is None
