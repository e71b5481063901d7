"""Ignore-aware traversal of the served folder.

Walks the tree depth-first in directory-entry order and yields the regular
files it finds. The walk is a generator, so callers that only need the first
few entries stop it by no longer iterating; open directory handles are closed
when the generator is closed or garbage collected.
"""

import os
from collections.abc import Generator, Iterable, Iterator
from pathlib import Path

from subpath_serve.core.types import RelativePath


def walk_files(
    root: Path,
    ignore: Iterable[str] = (),
) -> Generator[RelativePath, None, None]:
    """Yield every regular file under root as a path relative to root.

    Entries whose name appears in ignore are skipped together with their
    whole subtree. Symlinks are neither yielded nor followed, and other
    non-regular entries (sockets, fifos, devices) are left out.

    Order follows os.scandir, which is filesystem dependent and not sorted.

    Args:
        root: Directory to walk
        ignore: Entry names to exclude from the walk

    Yields:
        "/"-separated paths relative to root

    Raises:
        OSError: If any directory cannot be read
    """
    ignored = frozenset(ignore)
    yield from _walk(root, "", ignored)


def _walk(directory: Path | str, prefix: str, ignored: frozenset[str]) -> Iterator[RelativePath]:
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name in ignored:
                continue
            relative = f"{prefix}{entry.name}"
            if entry.is_dir(follow_symlinks=False):
                yield from _walk(entry.path, f"{relative}/", ignored)
            elif entry.is_file(follow_symlinks=False):
                yield RelativePath(relative)


def list_files(root: Path, ignore: Iterable[str] = ()) -> list[RelativePath]:
    """Return all regular files under root, in traversal order.

    Raises:
        OSError: If any directory cannot be read
    """
    return list(walk_files(root, ignore))


def format_index(paths: Iterable[str]) -> str:
    """Join paths into the plain-text index body, one path per line."""
    return "".join(f"{path}\n" for path in paths)
