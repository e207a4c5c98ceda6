"""Tests for the upstream fetch boundary, against a local aiohttp server."""
import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as LocalServer

from santos_lineup import config
from santos_lineup.fetcher import UpstreamError, decode_stream, fetch_records, fetch_tables

from conftest import lineup_page


def _run(handler, coro_factory):
    async def scenario():
        app = web.Application()
        app.router.add_get("/lineup", handler)
        async with LocalServer(app) as server:
            return await coro_factory(str(server.make_url("/lineup")))

    return asyncio.run(scenario())


class TestFetchTables:

    def test_streams_tables(self, headered_page):
        async def handler(request):
            assert request.headers["User-Agent"] == config.USER_AGENT
            return web.Response(text=headered_page, content_type="text/html")

        tables = _run(handler, fetch_tables)
        assert [t.index for t in tables] == [0, 1]
        assert tables[1].rows[0][0] == "MSC ANNA"

    def test_meta_charset_is_honoured(self):
        page = lineup_page([]).replace("charset='utf-8'", "charset='iso-8859-1'")

        async def handler(request):
            return web.Response(body=page.encode("iso-8859-1"), headers={"Content-Type": "text/html"})

        tables = _run(handler, fetch_tables)
        assert tables[0].rows == [("Início", "Operações")]

    def test_records(self, headered_page):
        async def handler(request):
            return web.Response(text=headered_page, content_type="text/html")

        records = _run(handler, fetch_records)
        assert [r.ship for r in records] == ["MSC ANNA", "STENA IMPERO"]

    def test_non_success_status(self):
        async def handler(request):
            return web.Response(status=503, text="maintenance")

        with pytest.raises(UpstreamError) as info:
            _run(handler, fetch_tables)
        assert info.value.status == 503
        assert "upstream 503" in str(info.value)

    def test_unreachable(self):
        with pytest.raises(UpstreamError) as info:
            asyncio.run(fetch_tables("http://127.0.0.1:1/lineup"))
        assert info.value.status is None
        assert info.value.__cause__ is not None


class TestDecodeStream:

    def test_multibyte_characters_split_across_chunks(self):
        data = "<p>Agência</p>".encode("utf-8")
        cut = data.index(b"\xc3") + 1

        async def chunks():
            yield data[:cut]
            yield data[cut:]

        async def collect():
            return "".join([text async for text in decode_stream(chunks(), "utf-8")])

        assert asyncio.run(collect()) == "<p>Agência</p>"

    def test_unknown_charset_falls_back(self):
        async def chunks():
            yield b"<p>ok</p>"

        async def collect():
            return "".join([text async for text in decode_stream(chunks(), "x-no-such-codec")])

        assert asyncio.run(collect()) == "<p>ok</p>"
