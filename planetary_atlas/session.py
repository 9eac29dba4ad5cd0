"""Caller-facing session: feature loading, area selection and timelines.

An ``AtlasSession`` owns everything that used to be process-global: the
HTTP client, the knowledge-base provider and the timeline cache. Use it
as an async context manager::

    async with AtlasSession(AtlasConfig.from_env()) as session:
        result = await session.load_features("Mars")
        visible = session.filter_by_area(result.features, box)
        events = await session.resolve_timeline(visible[0], "Mars")

Archive and knowledge-base failures never raise from here; they degrade
the result. Only caller mistakes (unknown body or unnamed feature passed
to ``resolve_timeline``) raise.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from planetary_atlas.activities.fetch_archive import ArchiveFetchError, archive_url, fetch_archive
from planetary_atlas.activities.hierarchy import organize_feature_hierarchy
from planetary_atlas.activities.parse_kmz import parse_kmz
from planetary_atlas.activities.reconcile import assign_regions, is_notable_feature, reconcile
from planetary_atlas.catalogs.bodies import get_body
from planetary_atlas.catalogs.curated import curated_features
from planetary_atlas.catalogs.regions import regions_for
from planetary_atlas.core.config import AtlasConfig
from planetary_atlas.core.exceptions import UnknownBodyError
from planetary_atlas.geometry.bounds import filter_by_bounds, find_intersecting_regions
from planetary_atlas.models.feature import FeatureSource
from planetary_atlas.models.knowledge import ProviderConfig
from planetary_atlas.providers.factory import get_provider
from planetary_atlas.timeline.engine import TimelineEngine

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import TracebackType

    from planetary_atlas.activities.hierarchy import FeatureGroup
    from planetary_atlas.activities.parse_kmz import AuxiliaryAsset
    from planetary_atlas.models.feature import Feature
    from planetary_atlas.models.region import BoundingBox, Region
    from planetary_atlas.models.timeline import TimelineEvent
    from planetary_atlas.providers.base import KnowledgeBaseProvider

logger = logging.getLogger("planetary_atlas.session")


@dataclass(slots=True)
class FeatureLoadResult:
    """Outcome of loading one body's features.

    Attributes:
        features: Reconciled, sorted features with regions assigned.
        kmz_count: Features that came from the archive.
        famous_count: Curated features kept (not shadowed by the archive).
        total: ``len(features)``.
        skipped_count: Malformed archive placemarks dropped.
        degraded: True when the archive was unavailable and only curated
            data was used.
        auxiliary_assets: Images embedded in the archive.
    """

    features: list[Feature] = field(default_factory=list)
    kmz_count: int = 0
    famous_count: int = 0
    total: int = 0
    skipped_count: int = 0
    degraded: bool = False
    auxiliary_assets: list[AuxiliaryAsset] = field(default_factory=list)


class AtlasSession:
    """One caller's working context.

    Args:
        config: Atlas configuration. Defaults to built-in values.
        client: Shared HTTP client. When omitted the session creates one
            and closes it on exit.
        provider: Knowledge-base adapter. When omitted one is created
            from ``config.knowledge_base_provider``.
    """

    def __init__(
        self,
        config: AtlasConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        provider: KnowledgeBaseProvider | None = None,
    ) -> None:
        self._config = config or AtlasConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": self._config.user_agent},
            follow_redirects=True,
        )
        if provider is None:
            provider = get_provider(
                self._config.knowledge_base_provider,
                ProviderConfig(
                    name=self._config.knowledge_base_provider,
                    api_base_url=self._config.knowledge_base_url,
                    timeout_s=self._config.knowledge_base_timeout_s,
                    user_agent=self._config.user_agent,
                ),
                client=self._client,
            )
        self._provider = provider
        self._engine = TimelineEngine(provider)

    @property
    def config(self) -> AtlasConfig:
        return self._config

    @property
    def engine(self) -> TimelineEngine:
        return self._engine

    async def __aenter__(self) -> AtlasSession:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the provider and, if the session created it, the HTTP client."""
        await self._provider.aclose()
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    async def load_features(
        self, body: str, curated: Iterable[Feature] | None = None
    ) -> FeatureLoadResult:
        """Load, reconcile and region-tag the features of *body*.

        Args:
            body: Body key or USGS identifier.
            curated: Curated features to merge. Defaults to the built-in
                curated catalog of the body.

        An unavailable or unreadable archive yields a degraded result
        built from the curated features alone.
        """
        try:
            body_config = get_body(body)
        except UnknownBodyError:
            logger.warning("Cannot load features for unknown body %r", body)
            return FeatureLoadResult(degraded=True)

        curated_list = list(curated) if curated is not None else curated_features(body_config.key)
        regions = regions_for(body_config.key)
        url = archive_url(self._config.archive_base_url, body_config.usgs_name)

        try:
            blob = await fetch_archive(self._client, url, timeout_s=self._config.archive_timeout_s)
        except ArchiveFetchError as exc:
            logger.warning(
                "Archive unavailable for %s, using %d curated feature(s): %s",
                body_config.key,
                len(curated_list),
                exc,
            )
            return _curated_only(curated_list, regions)

        contents = await asyncio.to_thread(parse_kmz, blob)
        if contents.error is not None:
            logger.warning(
                "Archive unreadable for %s, using %d curated feature(s): %s",
                body_config.key,
                len(curated_list),
                contents.error,
            )
            result = _curated_only(curated_list, regions)
            result.auxiliary_assets = contents.auxiliary_assets
            return result

        features = assign_regions(reconcile(contents.features, curated_list), regions)
        kmz_count = sum(1 for f in features if f.source is FeatureSource.ARCHIVE)
        result = FeatureLoadResult(
            features=features,
            kmz_count=kmz_count,
            famous_count=len(features) - kmz_count,
            total=len(features),
            skipped_count=contents.skipped_count,
            auxiliary_assets=contents.auxiliary_assets,
        )
        logger.info(
            "Loaded %d feature(s) for %s (%d from archive + %d curated, %d skipped)",
            result.total,
            body_config.key,
            result.kmz_count,
            result.famous_count,
            result.skipped_count,
        )
        return result

    def filter_by_area(self, features: Iterable[Feature], box: BoundingBox) -> list[Feature]:
        """Return the features inside *box*, preserving order."""
        return filter_by_bounds(features, box)

    def group_features(self, features: Sequence[Feature]) -> list[FeatureGroup]:
        """Nest lettered satellite features under their parents."""
        return organize_feature_hierarchy(features)

    def is_notable(self, feature: Feature) -> bool:
        """Whether *feature* merits a timeline under this session's threshold."""
        return is_notable_feature(feature, self._config.notable_diameter_km)

    # ------------------------------------------------------------------
    # Regions
    # ------------------------------------------------------------------

    def regions_for(self, body: str) -> tuple[Region, ...]:
        """Return the region catalog of *body*; empty for unknown bodies."""
        try:
            return regions_for(get_body(body).key)
        except UnknownBodyError:
            logger.warning("No regions for unknown body %r", body)
            return ()

    def find_regions(self, body: str, box: BoundingBox) -> list[Region]:
        """Return the regions of *body* overlapping *box*, in catalog order.

        Selections and regions may cross the antimeridian.
        """
        return find_intersecting_regions(box, self.regions_for(body))

    # ------------------------------------------------------------------
    # Timelines
    # ------------------------------------------------------------------

    async def resolve_timeline(self, feature: Feature, body: str) -> list[TimelineEvent]:
        """Resolve the timeline of *feature* on *body* (memoised, single-flight).

        Raises:
            UnknownBodyError: If *body* is not a configured body.
            FeatureContractError: If *feature* has no name.
        """
        return await self._engine.resolve_timeline(feature, body)

    def clear_timeline_cache(self) -> None:
        """Forget resolved timelines, e.g. when starting a new comparison."""
        self._engine.clear_cache()


def _curated_only(curated: Sequence[Feature], regions: Sequence[Region]) -> FeatureLoadResult:
    features = assign_regions(reconcile([], curated), regions)
    return FeatureLoadResult(
        features=features,
        kmz_count=0,
        famous_count=len(features),
        total=len(features),
        degraded=True,
    )
