"""Models for the knowledge-base provider layer.

- ``ProviderConfig``: Configuration for a specific knowledge-base provider
- ``PageRef``: Canonical page title and URL found for a feature name
- ``KnowledgeBasePage``: Everything the extractor needs from one page
- ``OpenSearchResponse`` / ``QueryResponse``: pydantic models validating
  raw MediaWiki API payloads before anything reads them
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field, RootModel

from planetary_atlas.core.constants import DEFAULT_USER_AGENT
from planetary_atlas.models.validation import check_min, check_non_empty


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Configuration for a knowledge-base provider.

    Attributes:
        name: Provider name (e.g. ``"wikipedia"``).
        api_base_url: API endpoint. Empty means the adapter's default.
        timeout_s: Upper bound in seconds for one request.
        user_agent: ``User-Agent`` header for outbound requests.
        extra_params: Provider-specific parameters.
    """

    name: str
    api_base_url: str = ""
    timeout_s: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    extra_params: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_non_empty("ProviderConfig", "name", self.name)
        check_min("ProviderConfig", "timeout_s", self.timeout_s, 0)


@dataclass(frozen=True, slots=True)
class PageRef:
    """Canonical page found for a search term."""

    title: str
    url: str = ""


@dataclass(frozen=True, slots=True)
class KnowledgeBasePage:
    """Content of one knowledge-base page used for timeline extraction.

    Attributes:
        title: Canonical page title.
        url: Public URL of the page.
        intro: Plain-text introduction.
        full_text: Plain-text body of the whole page.
        infobox: Selected infobox fields (``age``, ``formed``, ``last_eruption``).
    """

    title: str
    url: str
    intro: str
    full_text: str
    infobox: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# MediaWiki payloads
# ---------------------------------------------------------------------------


class OpenSearchResponse(RootModel[tuple[str, list[str], list[str], list[str]]]):
    """``action=opensearch`` payload: ``[query, titles, descriptions, urls]``."""

    @property
    def first_page(self) -> PageRef | None:
        _, titles, _, urls = self.root
        if not titles:
            return None
        return PageRef(title=titles[0], url=urls[0] if urls else "")


class RevisionSlot(BaseModel):
    content: str = ""


class Revision(BaseModel):
    slots: dict[str, RevisionSlot] = Field(default_factory=dict)


class QueryPage(BaseModel):
    """One page of an ``action=query`` response (``formatversion=2``)."""

    title: str = ""
    missing: bool = False
    extract: str = ""
    revisions: list[Revision] = Field(default_factory=list)

    @property
    def wikitext(self) -> str:
        """Main-slot wikitext of the latest revision, or ``""``."""
        if not self.revisions:
            return ""
        main = self.revisions[0].slots.get("main")
        return main.content if main else ""


class QueryBody(BaseModel):
    pages: list[QueryPage] = Field(default_factory=list)


class QueryResponse(BaseModel):
    """``action=query`` payload."""

    query: QueryBody = Field(default_factory=QueryBody)

    @property
    def first_page(self) -> QueryPage | None:
        pages = [page for page in self.query.pages if not page.missing]
        return pages[0] if pages else None
