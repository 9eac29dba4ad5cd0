"""MediaWiki (Wikipedia) knowledge-base adapter.

Concrete ``KnowledgeBaseProvider`` backed by the MediaWiki action API:

- ``action=opensearch`` (``limit=1``) to find the canonical title.
- ``action=query&prop=revisions`` (main slot) for infobox wikitext.
- ``action=query&prop=extracts&explaintext`` for plain text, with
  ``exintro`` for the introduction only.

Every request carries the configured timeout. Payloads are validated
with pydantic before use, so a shape change in the API surfaces as a
``KnowledgeBaseContractError`` instead of an ``AttributeError`` deep in parsing.

Configuration:
    The endpoint defaults to ``https://en.wikipedia.org/w/api.php``.
    Override via ``ProviderConfig.api_base_url`` (``ATLAS_KNOWLEDGE_BASE_URL``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from planetary_atlas.core.constants import DEFAULT_KNOWLEDGE_BASE_URL
from planetary_atlas.models.knowledge import OpenSearchResponse, QueryResponse
from planetary_atlas.providers.base import (
    KnowledgeBaseContractError,
    KnowledgeBaseError,
    KnowledgeBaseProvider,
)
from planetary_atlas.timeline.extraction import parse_infobox

if TYPE_CHECKING:
    from planetary_atlas.models.knowledge import PageRef, ProviderConfig

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# Statuses worth retrying later
_RETRYABLE_STATUS = frozenset({408, 429, 500, 502, 503, 504})


class WikipediaAdapter(KnowledgeBaseProvider):
    """MediaWiki action API adapter.

    Args:
        config: Provider configuration.
        client: Shared ``httpx.AsyncClient``. When omitted the adapter
            creates its own and closes it in ``aclose``.
    """

    def __init__(self, config: ProviderConfig, *, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(config)
        self._api_url = config.api_base_url or DEFAULT_KNOWLEDGE_BASE_URL
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={"User-Agent": config.user_agent},
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # KnowledgeBaseProvider interface
    # ------------------------------------------------------------------

    async def search_title(self, name: str) -> PageRef | None:
        payload = await self._get(
            {"action": "opensearch", "search": name, "limit": "1", "namespace": "0"},
            OpenSearchResponse,
            key=name,
        )
        return payload.first_page

    async def fetch_infobox(self, title: str) -> dict[str, str]:
        payload = await self._get(
            {
                "action": "query",
                "titles": title,
                "prop": "revisions",
                "rvprop": "content",
                "rvslots": "main",
            },
            QueryResponse,
            key=title,
        )
        page = payload.first_page
        if page is None:
            return {}
        return parse_infobox(page.wikitext)

    async def fetch_extract(self, title: str, *, intro_only: bool = False) -> str:
        params = {"action": "query", "titles": title, "prop": "extracts", "explaintext": "1"}
        if intro_only:
            params["exintro"] = "1"
        payload = await self._get(params, QueryResponse, key=title)
        page = payload.first_page
        if page is None:
            msg = f"Page {title!r} not found"
            raise KnowledgeBaseError(self.name, msg, key=title)
        return page.extract

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _get(self, params: dict[str, str], model: type[_ModelT], *, key: str) -> _ModelT:
        """GET the API with *params* and validate the JSON body as *model*."""
        query: dict[str, Any] = {**self.config.extra_params, **params, "format": "json"}
        if params.get("action") == "query":
            query["formatversion"] = "2"

        try:
            response = await self._client.get(
                self._api_url, params=query, timeout=self.config.timeout_s
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            msg = f"HTTP {status} for {params.get('action')} {key!r}"
            raise KnowledgeBaseError(
                self.name, msg, retryable=status in _RETRYABLE_STATUS, key=key
            ) from exc
        except httpx.TimeoutException as exc:
            msg = f"Timed out after {self.config.timeout_s}s for {key!r}"
            raise KnowledgeBaseError(self.name, msg, retryable=True, key=key) from exc
        except httpx.HTTPError as exc:
            msg = f"Request failed for {key!r}: {exc}"
            raise KnowledgeBaseError(self.name, msg, retryable=True, key=key) from exc

        try:
            return model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            msg = f"Malformed {params.get('action')} response for {key!r}: {exc}"
            raise KnowledgeBaseContractError(self.name, msg, key=key) from exc
