"""DazzleWalk - Async directory walker with worker-controlled recursion.

A walk visits a seed path and its descendants, calls a worker for every
entry below the seed, and only descends into a directory when the worker
returns a truthy value for it. Completion is reported exactly once.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Asynchronous (default):
    from dazzlewalk import walk, walk_async

Threaded:
    from dazzlewalk.sync import walk, walk_sync
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.2.0"

# Re-export submodules for convenient access
from . import sync
from . import aio

from .aio import walk, walk_async
from ._common import (
    EntryStats,
    WalkConfig,
    ErrorMode,
    ErrorPolicy,
    FirstErrorPolicy,
    LastCompletedPolicy,
    CollectErrorsPolicy,
    WalkError,
    WalkArgumentError,
    WorkerError,
    WalkErrorGroup,
)

__all__ = [
    "__version__",
    "sync",
    "aio",
    "walk",
    "walk_async",
    "EntryStats",
    "WalkConfig",
    "ErrorMode",
    "ErrorPolicy",
    "FirstErrorPolicy",
    "LastCompletedPolicy",
    "CollectErrorsPolicy",
    "WalkError",
    "WalkArgumentError",
    "WorkerError",
    "WalkErrorGroup",
]
