"""Testing utilities for DazzleWalk consumers."""

from .fixtures import (
    FOO_LAYOUT,
    build_tree,
    InMemoryTree,
    InMemoryWalkAdapter,
    AsyncInMemoryWalkAdapter,
)

__all__ = [
    'FOO_LAYOUT',
    'build_tree',
    'InMemoryTree',
    'InMemoryWalkAdapter',
    'AsyncInMemoryWalkAdapter',
]
