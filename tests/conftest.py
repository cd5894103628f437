# File: tests/conftest.py
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Dict

import pytest
import pytest_asyncio
from aiohttp import web

from registry_scraper.models import PageData

SAMPLE_HTML = """
<html>
  <body>
    <nav><a class="govuk-link" href="/browse">Browse</a></nav>
    <div class="govspeak">
      <h2>A</h2>
      <p><a class="govuk-link" href="https://example.af/registry">  Afghanistan </a></p>
      <p><a class="govuk-link" href="/albania">Albania</a></p>
      <ul>
        <li><a class="govuk-link" rel="external">Algeria</a></li>
      </ul>
    </div>
    <footer><a class="govuk-link" href="/help">Help</a></footer>
  </body>
</html>
"""


@pytest.fixture()
def sample_html() -> str:
    """Page with three govspeak links and two links outside the container."""
    return SAMPLE_HTML


@pytest.fixture()
def sample_page(sample_html) -> PageData:
    return PageData(url="https://www.gov.uk/registries", content=sample_html, content_type="text/html; charset=utf-8")


@pytest.fixture()
def config_files(tmp_path) -> Dict[str, Path]:
    """
    Create temporary YAML and JSON config files for tests.
    """
    yaml_file = tmp_path / "config.yaml"
    json_file = tmp_path / "config.json"
    yaml_file.write_text(
        "url: https://example.com/registries\nselector: '.content a'\n", encoding="utf-8"
    )
    json_file.write_text(
        '{"url": "https://example.com/registries", "user_agent": "TestAgent/1.0"}', encoding="utf-8"
    )
    return {"yaml": yaml_file, "json": json_file}


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


EMPTY_HTML = '<html><body><div class="govspeak"><p>No links yet.</p></div></body></html>'


@pytest_asyncio.fixture
async def registry_server(unused_tcp_port: int, sample_html: str) -> AsyncIterator[str]:
    """Local site with a registries page plus a few failure routes."""
    app = web.Application()

    async def handle_registries(_):
        return web.Response(text=sample_html, content_type="text/html")

    async def handle_empty(_):
        return web.Response(text=EMPTY_HTML, content_type="text/html")

    async def handle_moved(_):
        raise web.HTTPFound("/registries")

    async def handle_json(_):
        return web.json_response({"Country": "nowhere"})

    async def handle_broken_charset(_):
        return web.Response(
            body=b"<p class='govspeak'>\xff\xfe\xfa</p>",
            headers={"Content-Type": "text/html; charset=utf-8"},
        )

    async def handle_agent(request):
        agent = request.headers.get("User-Agent", "")
        return web.Response(
            text=f'<div class="govspeak"><a class="govuk-link" href="/ua">{agent}</a></div>',
            content_type="text/html",
        )

    async def handle_error(_):
        return web.Response(status=500, text="boom")

    app.router.add_get("/registries", handle_registries)
    app.router.add_get("/empty", handle_empty)
    app.router.add_get("/moved", handle_moved)
    app.router.add_get("/data.json", handle_json)
    app.router.add_get("/broken", handle_broken_charset)
    app.router.add_get("/error", handle_error)
    app.router.add_get("/agent", handle_agent)

    async for url in serve_app(app, unused_tcp_port):
        yield url
