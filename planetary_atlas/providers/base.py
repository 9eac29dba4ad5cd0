"""KnowledgeBaseProvider abstract base class.

Defines the contract every knowledge-base adapter implements. The
timeline engine talks only to this interface and never knows which
concrete service is behind it.

Read operations:
    1. ``search_title(name)``         find the canonical page for a name.
    2. ``fetch_infobox(title)``       semi-structured attributes of a page.
    3. ``fetch_extract(title, ...)``  plain text, intro only or full page.

``lookup(name)`` composes them: search first, then the infobox, full text
and intro concurrently. Results are attributed by position, never by
arrival order.
"""

from __future__ import annotations

import abc
import asyncio
import logging
from typing import TYPE_CHECKING

from planetary_atlas.core.exceptions import AtlasError, ContractError

if TYPE_CHECKING:
    from planetary_atlas.models.knowledge import KnowledgeBasePage, PageRef, ProviderConfig

logger = logging.getLogger(__name__)


class KnowledgeBaseProvider(abc.ABC):
    """Abstract base class for knowledge-base adapters.

    The constructor receives a ``ProviderConfig`` carrying the API URL,
    timeout and provider-specific parameters.

    Example usage::

        provider = get_provider("wikipedia", client=client)
        page = await provider.lookup("Olympus Mons")
    """

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config

    @property
    def name(self) -> str:
        """Return the provider name from configuration."""
        return self._config.name

    @property
    def config(self) -> ProviderConfig:
        """Return the provider configuration (read-only)."""
        return self._config

    # ------------------------------------------------------------------
    # Abstract methods: every adapter implements these
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def search_title(self, name: str) -> PageRef | None:
        """Find the canonical page for a feature name.

        Returns:
            The best matching page, or ``None`` when nothing matches.

        Raises:
            KnowledgeBaseError: On transport failure or a malformed response.
        """

    @abc.abstractmethod
    async def fetch_infobox(self, title: str) -> dict[str, str]:
        """Fetch the selected infobox fields of page *title*.

        Returns:
            Field name to raw value; ``{}`` when the page has no infobox.

        Raises:
            KnowledgeBaseError: On transport failure or a malformed response.
        """

    @abc.abstractmethod
    async def fetch_extract(self, title: str, *, intro_only: bool = False) -> str:
        """Fetch the plain-text content of page *title*.

        Args:
            title: Canonical page title.
            intro_only: Return only the introduction instead of the whole page.

        Raises:
            KnowledgeBaseError: On transport failure or a malformed response.
        """

    async def aclose(self) -> None:  # noqa: B027
        """Release any resources held by the adapter."""

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    async def lookup(self, name: str) -> KnowledgeBasePage | None:
        """Resolve *name* to a page with its text and infobox.

        A missing infobox degrades to ``{}`` and a missing intro to the
        full text. Failure of the search or of the full-text request
        fails the whole lookup.

        Returns:
            The page, or ``None`` when the search finds nothing.

        Raises:
            KnowledgeBaseError: When the page cannot be read.
        """
        from planetary_atlas.models.knowledge import KnowledgeBasePage

        ref = await self.search_title(name)
        if ref is None:
            logger.info("No %s page for %r", self.name, name)
            return None

        infobox, full_text, intro = await asyncio.gather(
            self.fetch_infobox(ref.title),
            self.fetch_extract(ref.title),
            self.fetch_extract(ref.title, intro_only=True),
            return_exceptions=True,
        )

        if isinstance(full_text, BaseException):
            _reraise_fatal(full_text)
            if isinstance(full_text, KnowledgeBaseError):
                raise full_text
            msg = f"Full text fetch failed: {full_text}"
            raise KnowledgeBaseError(self.name, msg, key=ref.title) from full_text
        if isinstance(infobox, BaseException):
            _reraise_fatal(infobox)
            logger.warning("Infobox fetch failed for %r: %s", ref.title, infobox)
            infobox = {}
        if isinstance(intro, BaseException):
            _reraise_fatal(intro)
            logger.warning("Intro fetch failed for %r: %s", ref.title, intro)
            intro = full_text

        return KnowledgeBasePage(
            title=ref.title,
            url=ref.url,
            intro=intro,
            full_text=full_text,
            infobox=infobox,
        )


def _reraise_fatal(exc: BaseException) -> None:
    # Cancellation and interpreter exits are never degraded to a fallback.
    if not isinstance(exc, Exception):
        raise exc


# ---------------------------------------------------------------------------
# Provider exceptions
# ---------------------------------------------------------------------------


class ProviderError(AtlasError):
    """Base exception for knowledge-base adapter errors.

    Attributes:
        provider: Name of the provider that raised the error.
        message: Human-readable error description.
        retryable: Whether the caller could retry the operation.
    """

    default_stage = "knowledge_base"
    default_code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        retryable: bool = False,
        key: str = "",
    ) -> None:
        self.provider = provider
        super().__init__(
            message,
            retryable=retryable,
            code=self.default_code,
            stage=self.default_stage,
            key=key,
        )

    def __str__(self) -> str:
        return f"[{self.provider}] {self.message}"


class KnowledgeBaseError(ProviderError):
    """A knowledge-base read failed (transport, status or payload shape)."""

    default_code = "KNOWLEDGE_BASE_FAILED"


class KnowledgeBaseContractError(KnowledgeBaseError, ContractError):
    """The service answered with a payload that does not match the expected shape."""

    default_code = "KNOWLEDGE_BASE_CONTRACT_VIOLATION"
