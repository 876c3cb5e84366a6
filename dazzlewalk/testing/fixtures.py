"""Test fixtures for DazzleWalk consumers.

These fixtures provide in-memory trees with injectable failures and
delays, plus a helper to materialize a tree on disk. They make it easy
to exercise error aggregation and completion order without touching
permissions on a real filesystem.

Layouts are nested dicts: a dict value is a directory, anything else is
a file whose content is ``str(value)`` (``None`` for an empty file).

Example:
    tree = InMemoryTree({'a': {'x': None}, 'b': None},
                        list_errors={'/mem/a': PermissionError(13, 'denied', '/mem/a')})
    adapter = AsyncInMemoryWalkAdapter(tree)
    await walk_async('/mem', worker, completion, adapter=adapter)
"""

import asyncio
import errno
import os
import posixpath
import stat as stat_module
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from .._common.stats import EntryStats
from ..aio.core import AsyncWalkAdapter
from ..sync.core import WalkAdapter

Layout = Dict[str, Any]

# foo/ with a/, b/, c/ holding the files g..z, plus plain files d, e, f
FOO_LAYOUT: Layout = {
    'a': {name: None for name in 'ghijkl'},
    'b': {name: None for name in 'mnopqr'},
    'c': {name: None for name in 'stuvwxyz'},
    'd': None,
    'e': None,
    'f': None,
}


def build_tree(root: Path, layout: Layout) -> Path:
    """Create ``layout`` below ``root`` on disk.

    Args:
        root: Directory to create (parents included)
        layout: Nested dict describing the tree

    Returns:
        The root path
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        if isinstance(value, dict):
            build_tree(root / name, value)
        else:
            (root / name).write_text('' if value is None else str(value))
    return root


def _make_stat(is_dir: bool, size: int) -> os.stat_result:
    mode = (stat_module.S_IFDIR | 0o755) if is_dir else (stat_module.S_IFREG | 0o644)
    now = time.time()
    return os.stat_result((mode, 0, 0, 1, 0, 0, size, now, now, now))


class InMemoryTree:
    """A read-only tree held in memory, addressed by posix paths.

    Args:
        layout: Nested dict describing the tree below ``root``
        root: Path of the tree's root directory
        stat_errors: Path -> exception raised when that path is stat'ed
        list_errors: Path -> exception raised when that directory is listed
        delays: Path -> seconds to wait before answering a stat
    """

    def __init__(
        self,
        layout: Layout,
        root: str = '/mem',
        stat_errors: Optional[Dict[str, BaseException]] = None,
        list_errors: Optional[Dict[str, BaseException]] = None,
        delays: Optional[Dict[str, float]] = None
    ):
        self.layout = layout
        self.root = root.rstrip('/') or '/'
        self.stat_errors = stat_errors or {}
        self.list_errors = list_errors or {}
        self.delays = delays or {}
        self.stat_calls: List[str] = []
        self.list_dir_calls: List[str] = []

    def _lookup(self, path: str) -> Any:
        if path == self.root:
            return self.layout
        prefix = self.root.rstrip('/') + '/'
        if not path.startswith(prefix):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        node: Any = self.layout
        for part in path[len(prefix):].split('/'):
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
            node = node[part]
        return node

    def stat(self, path: str) -> EntryStats:
        self.stat_calls.append(path)
        if path in self.stat_errors:
            raise self.stat_errors[path]
        node = self._lookup(path)
        if isinstance(node, dict):
            return EntryStats(path, _make_stat(True, 0))
        return EntryStats(path, _make_stat(False, len('' if node is None else str(node))))

    def list_dir(self, path: str) -> List[str]:
        self.list_dir_calls.append(path)
        if path in self.list_errors:
            raise self.list_errors[path]
        node = self._lookup(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        return list(node)

    def join(self, parent: str, name: str) -> str:
        return posixpath.join(parent, name)


class InMemoryWalkAdapter(WalkAdapter):
    """Blocking adapter over an InMemoryTree."""

    def __init__(self, tree: InMemoryTree):
        self.tree = tree

    def stat(self, path: str) -> EntryStats:
        delay = self.tree.delays.get(path)
        if delay:
            time.sleep(delay)
        return self.tree.stat(path)

    def list_dir(self, path: str) -> List[str]:
        return self.tree.list_dir(path)

    def join(self, parent: str, name: str) -> str:
        return self.tree.join(parent, name)


class AsyncInMemoryWalkAdapter(AsyncWalkAdapter):
    """Async adapter over an InMemoryTree.

    Every call yields to the event loop at least once, so sibling
    branches interleave the way real I/O would.
    """

    def __init__(self, tree: InMemoryTree):
        self.tree = tree

    async def stat(self, path: str) -> EntryStats:
        await asyncio.sleep(self.tree.delays.get(path, 0))
        return self.tree.stat(path)

    async def list_dir(self, path: str) -> List[str]:
        await asyncio.sleep(0)
        return self.tree.list_dir(path)

    def join(self, parent: str, name: str) -> str:
        return self.tree.join(parent, name)
