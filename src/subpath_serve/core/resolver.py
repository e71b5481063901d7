"""Suffix-based file resolution.

A request for ``nvim/init.lua`` is answered by the first file found whose
relative path ends with ``nvim/init.lua`` and whose name is exactly
``init.lua``. ``.config/nvim/init.lua`` matches, ``nvim/init.lua.bak`` and
``nvim/xinit.lua`` do not. Only the last segment is compared whole, so
``xnvim/init.lua`` matches as well.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from subpath_serve.core.types import RelativePath
from subpath_serve.core.walker import walk_files

logger = logging.getLogger(__name__)


def matches(path: str, query: str) -> bool:
    """Check whether a relative file path satisfies a suffix query.

    The path must end with the query, and the last segment of the query
    must equal the file name. An empty query never matches, since no file
    has an empty name.
    """
    if not path.endswith(query):
        return False
    query_name = query.rsplit("/", 1)[-1]
    return query_name == path.rsplit("/", 1)[-1]


def resolve(root: Path, query: str, ignore: Iterable[str] = ()) -> RelativePath | None:
    """Find the first file under root matching query.

    The walk stops at the first match. When several files share the
    queried name (``a/config`` and ``b/config`` for ``config``), the one
    visited first wins, which depends on directory-entry order; callers
    wanting a specific file should query with enough leading segments to
    make it unique.

    Args:
        root: Served folder
        query: Request path without leading slash or trailing slashes
        ignore: Entry names excluded from the walk

    Returns:
        Path of the matching file relative to root, or None if nothing matches

    Raises:
        OSError: If the walk fails
    """
    files = walk_files(root, ignore)
    try:
        for path in files:
            if matches(path, query):
                logger.debug(f"Resolved '{query}' to {path}")
                return path
    finally:
        files.close()

    logger.debug(f"No match for '{query}'")
    return None
