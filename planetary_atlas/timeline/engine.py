"""Timeline engine: three-tier evidence cascade with memoisation.

Tiers, tried in order until one returns a ``Hit``:

1. Structured override from the curated timeline catalog.
2. Knowledge base: page lookup through a ``KnowledgeBaseProvider`` and
   event extraction from its infobox and text.
3. Estimation model, which always hits.

Environmental failures inside a tier become a ``Miss``. Only caller
contract violations (unknown body, unnamed feature) raise, and they do so
before any tier runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from planetary_atlas.catalogs.bodies import get_body
from planetary_atlas.catalogs.timelines import structured_timeline
from planetary_atlas.core.exceptions import AtlasError, FeatureContractError
from planetary_atlas.models.feature import Feature
from planetary_atlas.models.timeline import Hit, Miss, TimelineTier
from planetary_atlas.timeline.cache import TimelineCache
from planetary_atlas.timeline.estimation import estimate_timeline
from planetary_atlas.timeline.extraction import build_knowledge_base_events

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from planetary_atlas.catalogs.bodies import BodyConfig
    from planetary_atlas.models.timeline import TierOutcome, TimelineEvent
    from planetary_atlas.providers.base import KnowledgeBaseProvider

    Tier = Callable[[Feature, BodyConfig], Awaitable[TierOutcome]]

logger = logging.getLogger("planetary_atlas.timeline.engine")


async def first_hit(tiers: Sequence[Tier], feature: Feature, body: BodyConfig) -> TierOutcome:
    """Run *tiers* in order and return the first ``Hit``.

    If every tier misses, the last ``Miss`` is returned.
    """
    outcome: TierOutcome = Miss(TimelineTier.ESTIMATED, "no tiers configured")
    for tier in tiers:
        outcome = await tier(feature, body)
        if isinstance(outcome, Hit):
            logger.info(
                "Timeline for %s on %s resolved by %s tier",
                feature.name,
                body.key,
                outcome.tier.value,
            )
            return outcome
        logger.info(
            "Timeline tier %s missed for %s on %s: %s",
            outcome.tier.value,
            feature.name,
            body.key,
            outcome.reason,
        )
    return outcome


class TimelineEngine:
    """Resolves and memoises feature timelines.

    Args:
        provider: Knowledge-base adapter; ``None`` skips that tier.
        cache: Cache to use. A fresh one is created when omitted.
    """

    def __init__(
        self,
        provider: KnowledgeBaseProvider | None = None,
        *,
        cache: TimelineCache | None = None,
    ) -> None:
        self._provider = provider
        self._cache = cache if cache is not None else TimelineCache()
        self._tiers: tuple[Tier, ...] = (
            self._structured_tier,
            self._knowledge_base_tier,
            self._estimation_tier,
        )

    @property
    def cache(self) -> TimelineCache:
        return self._cache

    async def resolve_timeline(self, feature: Feature, body: object) -> list[TimelineEvent]:
        """Return the timeline of *feature* on *body*, in creation order.

        Raises:
            UnknownBodyError: If *body* is not a configured body.
            FeatureContractError: If *feature* is not a named ``Feature``.
        """
        body_config = get_body(body)
        if not isinstance(feature, Feature) or not feature.name.strip():
            msg = f"Timeline requested for a feature without a name: {feature!r}"
            raise FeatureContractError(msg, key=body_config.key)

        key = (body_config.usgs_name, feature.name)
        events = await self._cache.get_or_resolve(key, lambda: self._resolve(feature, body_config))
        return list(events)

    def clear_cache(self) -> None:
        """Forget every resolved timeline."""
        self._cache.clear()

    async def _resolve(self, feature: Feature, body: BodyConfig) -> tuple[TimelineEvent, ...]:
        outcome = await first_hit(self._tiers, feature, body)
        if isinstance(outcome, Hit):
            return outcome.events
        # Unreachable while the estimation tier is last
        return estimate_timeline(feature, body.usgs_name)

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------

    async def _structured_tier(self, feature: Feature, body: BodyConfig) -> TierOutcome:
        events = structured_timeline(body.usgs_name, feature.name)
        if not events:
            return Miss(TimelineTier.STRUCTURED, "no curated timeline")
        return Hit(TimelineTier.STRUCTURED, tuple(events))

    async def _knowledge_base_tier(self, feature: Feature, body: BodyConfig) -> TierOutcome:
        if self._provider is None:
            return Miss(TimelineTier.KNOWLEDGE_BASE, "no provider configured")
        try:
            page = await self._provider.lookup(feature.name)
            if page is None:
                return Miss(TimelineTier.KNOWLEDGE_BASE, "no matching page")
            if not (page.full_text or page.intro):
                return Miss(TimelineTier.KNOWLEDGE_BASE, f"page {page.title!r} has no text")
            events = build_knowledge_base_events(page, feature, body.usgs_name)
        except (AtlasError, httpx.HTTPError) as exc:
            logger.warning(
                "Knowledge-base lookup failed for %s on %s: %s", feature.name, body.key, exc
            )
            return Miss(TimelineTier.KNOWLEDGE_BASE, str(exc))
        return Hit(TimelineTier.KNOWLEDGE_BASE, events)

    async def _estimation_tier(self, feature: Feature, body: BodyConfig) -> TierOutcome:
        return Hit(TimelineTier.ESTIMATED, estimate_timeline(feature, body.usgs_name))
