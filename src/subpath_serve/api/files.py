"""File serving endpoint.

``/`` lists every served file; any other path is resolved by suffix match
and answered with the matching file's contents.
"""

import asyncio
import logging
from pathlib import Path
from urllib.parse import quote

from aiohttp import web

from subpath_serve.app_keys import config_key, link_label_key
from subpath_serve.core.renderer import ExternalLink, PageInfo, render
from subpath_serve.core.resolver import resolve
from subpath_serve.core.walker import format_index, list_files

logger = logging.getLogger(__name__)

FILEPATH_HEADER = "X-Filepath"


def create_files_routes() -> list[web.RouteDef]:
    return [
        web.get("/{path:.*}", serve_path),
    ]


async def serve_path(request: web.Request) -> web.StreamResponse:
    dark = "dark" in request.query
    if request.path == "/":
        return await get_index(request, dark=dark)
    return await get_file(request, dark=dark)


async def get_index(request: web.Request, *, dark: bool) -> web.Response:
    serve = request.app[config_key].serve

    try:
        paths = await asyncio.to_thread(list_files, serve.folder, serve.ignore)
    except OSError as e:
        logger.exception(f"Failed to list {serve.folder}")
        return _respond(PageInfo(title="Server Error", contents=str(e)), dark, status=500)

    # lines are only needed to build links in the HTML view
    page = PageInfo(
        title="Index",
        contents=format_index(paths),
        lines=tuple(paths) if dark else None,
    )
    return _respond(page, dark)


async def get_file(request: web.Request, *, dark: bool) -> web.Response:
    config = request.app[config_key]
    serve = config.serve
    requested = request.path[1:]
    query = requested.rstrip("/")

    try:
        found = await asyncio.to_thread(resolve, serve.folder, query, serve.ignore)
    except OSError as e:
        logger.exception(f"Failed to search {serve.folder} for '{query}'")
        return _respond(PageInfo(title="Server Error", contents=str(e)), dark, status=500)

    if found is None:
        page = PageInfo(
            title="404 - Not Found",
            contents=f"Could not find a match for {requested}\n",
        )
        return _respond(page, dark, status=404)

    prefix = serve.git_http_prefix
    if "redirect" in request.query:
        if prefix:
            raise web.HTTPFound(f"{prefix}/{_header_value(found)}")
        logger.warning(f"Tried to redirect to /{found} but no git-http-prefix is set")

    try:
        contents = await asyncio.to_thread(_read_text, serve.folder / found)
    except OSError as e:
        logger.exception(f"Failed to read {found}")
        return _respond(PageInfo(title="Server Error", contents=str(e)), dark, status=500)

    external_link = None
    if prefix:
        external_link = ExternalLink(url=f"{prefix}/{found}", label=request.app[link_label_key])

    page = PageInfo(title=found, contents=contents, external_link=external_link)
    response = _respond(page, dark)
    response.headers[FILEPATH_HEADER] = _header_value(found)
    return response


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _header_value(path: str) -> str:
    # undecodable file names arrive with surrogate escapes
    if path.isprintable():
        return path
    return quote(path, safe="/", errors="surrogateescape")


def _respond(page: PageInfo, dark: bool, *, status: int = 200) -> web.Response:
    # surrogateescape writes undecodable file names back as their original bytes
    return web.Response(
        body=render(page, dark).encode("utf-8", "surrogateescape"),
        status=status,
        content_type="text/html" if dark else "text/plain",
        charset="utf-8",
    )
