"""Tests for the MediaWiki adapter, driven through ``httpx.MockTransport``.

Covers:
- Request parameters for search, infobox and extracts
- Payload validation and error mapping
- lookup() composition and partial-failure degradation
"""

from __future__ import annotations

import httpx
import pytest

from planetary_atlas.models.knowledge import ProviderConfig
from planetary_atlas.providers.base import KnowledgeBaseContractError, KnowledgeBaseError
from planetary_atlas.providers.wikipedia import WikipediaAdapter

API = "https://wiki.test/w/api.php"

WIKITEXT = "{{Infobox volcano\n| name = Olympus Mons\n| age = 3.5 billion years\n}}\nText"


def _handler(*, infobox_status: int = 200, extract_status: int = 200, search_titles=None):
    titles = ["Olympus Mons"] if search_titles is None else search_titles

    def handle(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        if params["action"] == "opensearch":
            urls = [f"https://en.wikipedia.org/wiki/{t.replace(' ', '_')}" for t in titles]
            return httpx.Response(200, json=[params["search"], titles, [""] * len(titles), urls])
        if params.get("prop") == "revisions":
            if infobox_status != 200:
                return httpx.Response(infobox_status)
            revision = {"slots": {"main": {"content": WIKITEXT}}}
            return httpx.Response(
                200, json={"query": {"pages": [{"title": "Olympus Mons", "revisions": [revision]}]}}
            )
        if params.get("prop") == "extracts":
            if extract_status != 200:
                return httpx.Response(extract_status)
            text = "Intro sentence." if params.get("exintro") else "Intro sentence. More text."
            return httpx.Response(
                200, json={"query": {"pages": [{"title": "Olympus Mons", "extract": text}]}}
            )
        return httpx.Response(400)

    return handle


def _adapter(handler) -> WikipediaAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return WikipediaAdapter(ProviderConfig(name="wikipedia", api_base_url=API), client=client)


class TestRequests:
    @pytest.mark.asyncio()
    async def test_search_parameters(self) -> None:
        seen: list[httpx.Request] = []
        inner = _handler()

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return inner(request)

        ref = await _adapter(handler).search_title("Olympus Mons")
        assert ref is not None
        assert ref.title == "Olympus Mons"
        params = seen[0].url.params
        assert str(seen[0].url).startswith(API)
        assert params["limit"] == "1"
        assert params["format"] == "json"
        assert "formatversion" not in params

    @pytest.mark.asyncio()
    async def test_query_uses_formatversion_2(self) -> None:
        seen: list[httpx.Request] = []
        inner = _handler()

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return inner(request)

        await _adapter(handler).fetch_extract("Olympus Mons", intro_only=True)
        params = seen[0].url.params
        assert params["formatversion"] == "2"
        assert params["exintro"] == "1"
        assert params["explaintext"] == "1"

    @pytest.mark.asyncio()
    async def test_search_no_results(self) -> None:
        assert await _adapter(_handler(search_titles=[])).search_title("Nothing") is None

    @pytest.mark.asyncio()
    async def test_infobox(self) -> None:
        assert await _adapter(_handler()).fetch_infobox("Olympus Mons") == {
            "age": "3.5 billion years"
        }

    @pytest.mark.asyncio()
    async def test_missing_page_extract_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            pages = [{"title": "Nope", "missing": True}]
            return httpx.Response(200, json={"query": {"pages": pages}})

        with pytest.raises(KnowledgeBaseError, match="not found"):
            await _adapter(handler).fetch_extract("Nope")


class TestErrorMapping:
    @pytest.mark.asyncio()
    async def test_server_error_retryable(self) -> None:
        with pytest.raises(KnowledgeBaseError) as exc_info:
            await _adapter(lambda request: httpx.Response(503)).search_title("X")
        assert exc_info.value.retryable is True
        assert str(exc_info.value).startswith("[wikipedia]")

    @pytest.mark.asyncio()
    async def test_client_error_not_retryable(self) -> None:
        with pytest.raises(KnowledgeBaseError) as exc_info:
            await _adapter(lambda request: httpx.Response(404)).search_title("X")
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio()
    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(KnowledgeBaseError) as exc_info:
            await _adapter(handler).search_title("X")
        assert exc_info.value.retryable is True

    @pytest.mark.asyncio()
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(KnowledgeBaseError, match="Timed out"):
            await _adapter(handler).search_title("X")

    @pytest.mark.asyncio()
    async def test_malformed_payload(self) -> None:
        with pytest.raises(KnowledgeBaseContractError, match="Malformed") as exc_info:
            await _adapter(lambda request: httpx.Response(200, json={"x": 1})).search_title("X")
        assert exc_info.value.category == "contract"
        assert exc_info.value.retryable is False
        assert isinstance(exc_info.value, KnowledgeBaseError)

    @pytest.mark.asyncio()
    async def test_non_json_body(self) -> None:
        with pytest.raises(KnowledgeBaseError, match="Malformed"):
            await _adapter(lambda request: httpx.Response(200, text="<html>")).search_title("X")


class TestLookup:
    @pytest.mark.asyncio()
    async def test_full_lookup(self) -> None:
        page = await _adapter(_handler()).lookup("Olympus Mons")
        assert page is not None
        assert page.title == "Olympus Mons"
        assert page.url == "https://en.wikipedia.org/wiki/Olympus_Mons"
        assert page.intro == "Intro sentence."
        assert page.full_text == "Intro sentence. More text."
        assert page.infobox == {"age": "3.5 billion years"}

    @pytest.mark.asyncio()
    async def test_no_page(self) -> None:
        assert await _adapter(_handler(search_titles=[])).lookup("Nothing") is None

    @pytest.mark.asyncio()
    async def test_infobox_failure_degrades(self) -> None:
        page = await _adapter(_handler(infobox_status=500)).lookup("Olympus Mons")
        assert page is not None
        assert page.infobox == {}
        assert page.full_text

    @pytest.mark.asyncio()
    async def test_extract_failure_fails_lookup(self) -> None:
        with pytest.raises(KnowledgeBaseError):
            await _adapter(_handler(extract_status=500)).lookup("Olympus Mons")

    @pytest.mark.asyncio()
    async def test_shared_client_not_closed(self) -> None:
        client = httpx.AsyncClient(transport=httpx.MockTransport(_handler()))
        adapter = WikipediaAdapter(ProviderConfig(name="wikipedia"), client=client)
        await adapter.aclose()
        assert not client.is_closed
        await client.aclose()
