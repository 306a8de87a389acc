import asyncio

import httpx
import pytest

from controllers.word_list import WordListController

from helpers import proxy_client, summary


def page_of(n: int, prefix: str = "w") -> list[dict]:
    return [summary(f"{prefix}{i}", f"t{i}") for i in range(n)]


@pytest.mark.anyio
async def test_all_sentinel_omits_letter_segment():
    urls = []

    async def handler(request):
        urls.append(str(request.url))
        return httpx.Response(200, json=page_of(3))

    async with proxy_client(handler) as client:
        words = WordListController(client, language="en")
        assert words.selected_letter == "All"
        await words.select_letter("All")

        assert urls == ["http://app.test/api/dictionary/words?lang=en&page=1&limit=12"]
        assert len(words.words) == 3


@pytest.mark.anyio
async def test_turkish_sentinel_and_letter():
    paths = []

    async def handler(request):
        paths.append(request.url.path)
        return httpx.Response(200, json=[])

    async with proxy_client(handler) as client:
        words = WordListController(client, language="tr")
        assert words.selected_letter == "Tümü"
        await words.start()
        await words.select_letter("Ş")

        assert paths == ["/api/dictionary/words", "/api/dictionary/words/ş"]


@pytest.mark.anyio
async def test_pagination_stops_on_short_page():
    pages = []

    async def handler(request):
        page = int(request.url.params["page"])
        pages.append(page)
        return httpx.Response(200, json=page_of(12 if page == 1 else 5, prefix=f"p{page}-"))

    async with proxy_client(handler) as client:
        words = WordListController(client)
        await words.start()
        assert words.has_more is True
        assert len(words.words) == 12

        await words.load_more()
        assert words.has_more is False
        assert len(words.words) == 17
        assert words.words[12].word == "p2-0"

        await words.load_more()
        await words.load_more()
        assert pages == [1, 2]
        assert words.page == 2
        assert words.has_more is False


@pytest.mark.anyio
async def test_empty_first_page():
    async def handler(request):
        return httpx.Response(200, json=[])

    async with proxy_client(handler) as client:
        words = WordListController(client)
        await words.start()
        assert words.words == []
        assert words.has_more is False
        assert words.error is None


@pytest.mark.anyio
async def test_letter_change_resets_before_fetch():
    observed = []
    words = None

    async def handler(request):
        observed.append((request.url.path, words.page, list(words.words), words.has_more))
        return httpx.Response(200, json=page_of(12 if request.url.path.endswith("words") else 4))

    async with proxy_client(handler) as client:
        words = WordListController(client)
        await words.start()
        await words.load_more()
        assert words.page == 2
        assert len(words.words) == 24

        await words.select_letter("B")

        path, page, seen_words, has_more = observed[-1]
        assert path == "/api/dictionary/words/b"
        assert (page, seen_words, has_more) == (1, [], True)
        assert words.page == 1
        assert len(words.words) == 4
        assert words.has_more is False


@pytest.mark.anyio
async def test_stale_letter_response_is_discarded():
    gate = asyncio.Event()
    seen = []

    async def handler(request):
        seen.append(request.url.path)
        if request.url.path.endswith("/a"):
            await gate.wait()
            return httpx.Response(200, json=[summary("apple", "elma")])
        return httpx.Response(200, json=[summary("ball", "top")])

    async with proxy_client(handler) as client:
        words = WordListController(client)
        slow = asyncio.create_task(words.select_letter("A"))
        while not seen:
            await asyncio.sleep(0.005)
        assert words.loading is True

        await words.select_letter("B")
        assert [w.word for w in words.words] == ["ball"]

        gate.set()
        await slow

        assert words.selected_letter == "B"
        assert [w.word for w in words.words] == ["ball"]
        assert words.loading is False
        assert words.has_more is False


@pytest.mark.anyio
async def test_concurrent_fetch_is_a_no_op():
    gate = asyncio.Event()
    calls = []

    async def handler(request):
        calls.append(1)
        await gate.wait()
        return httpx.Response(200, json=page_of(12))

    async with proxy_client(handler) as client:
        words = WordListController(client)
        first = asyncio.create_task(words.start())
        while not calls:
            await asyncio.sleep(0.005)

        await words.fetch_page()
        await words.load_more()
        gate.set()
        await first

        assert calls == [1]
        assert len(words.words) == 12
        assert words.page == 1


@pytest.mark.anyio
async def test_failed_page_leaves_state_untouched():
    fail = {"on": False}
    pages = []

    async def handler(request):
        pages.append(int(request.url.params["page"]))
        if fail["on"]:
            return httpx.Response(500, json={"error": "Failed to fetch words"})
        return httpx.Response(200, json=page_of(12))

    async with proxy_client(handler) as client:
        words = WordListController(client)
        await words.start()
        before = list(words.words)

        fail["on"] = True
        await words.load_more()
        assert words.words == before
        assert words.has_more is True
        assert words.error == "Failed to fetch words"
        assert words.loading is False
        assert words.page == 1

        fail["on"] = False
        await words.load_more()
        assert pages == [1, 2, 2]
        assert words.error is None
        assert len(words.words) == 24


@pytest.mark.anyio
async def test_language_change_resets_letter():
    urls = []

    async def handler(request):
        urls.append((request.url.path, request.url.params["lang"]))
        return httpx.Response(200, json=page_of(2))

    async with proxy_client(handler) as client:
        words = WordListController(client, language="en")
        await words.select_letter("C")
        await words.set_language("tr")

        assert words.selected_letter == "Tümü"
        assert urls[-1] == ("/api/dictionary/words", "tr")
        assert len(words.words) == 2


@pytest.mark.anyio
async def test_foreign_sentinel_means_all():
    urls = []

    async def handler(request):
        urls.append(request.url.path)
        return httpx.Response(200, json=[])

    async with proxy_client(handler) as client:
        words = WordListController(client, language="en")
        await words.select_letter("Tümü")
        assert words.selected_letter == "All"

        await words.set_language("tr")
        await words.select_letter("All")
        assert words.selected_letter == "Tümü"

        await words.select_letter("Q")
        assert words.selected_letter == "Tümü"

        assert urls == ["/api/dictionary/words"] * 4
