"""High-level threaded API for DazzleWalk.

``walk`` starts a walk on a thread pool and returns immediately.
``walk_sync`` blocks until the walk is done and raises its error.
"""

import threading
from typing import Any, List, Optional

from .._common.config import WalkConfig
from .._common.error_policies import ErrorPolicy, Outcome
from .._common.validation import check_arguments, deliver, resolve_completion
from .adapters import FileSystemAdapter
from .core import ThreadedWalker, WalkAdapter


def walk(
    path: Any,
    worker: Any,
    completion: Any = None,
    *,
    adapter: Optional[WalkAdapter] = None,
    policy: Optional[ErrorPolicy] = None,
    config: Optional[WalkConfig] = None,
    max_workers: Optional[int] = None
) -> None:
    """Walk ``path`` on a thread pool and return immediately.

    Argument problems are reported synchronously through ``completion``.
    Otherwise ``completion`` runs later on its own thread; if it is not
    callable, a failure surfaces through ``threading.excepthook``.

    Args:
        path: Seed path (str or os.PathLike); never passed to the worker
        worker: ``worker(path, stats)``; falsy prunes the entry's subtree.
            Called concurrently from several threads.
        completion: ``completion()`` on success, ``completion(error)`` on failure
        adapter: Filesystem collaborator (FileSystemAdapter if None)
        policy: Sibling error aggregation (from ``config`` if None)
        config: Walk configuration
        max_workers: Thread pool size, overrides ``config.max_workers``
    """
    completion = resolve_completion(completion)

    seed, problem = check_arguments(path, worker)
    if problem is not None:
        deliver(completion, problem)
        return

    config = (config or WalkConfig()).validate()
    if adapter is None:
        adapter = FileSystemAdapter(follow_symlinks=config.follow_symlinks)
    if max_workers is None:
        max_workers = config.max_workers

    walker = ThreadedWalker(
        adapter,
        policy or config.make_policy(),
        max_workers=max_workers,
    )
    walker.start(seed, worker, lambda error: deliver(completion, error))


def walk_sync(path: Any, worker: Any, **options) -> None:
    """Walk ``path`` and block until every branch is done.

    Takes the same keyword options as ``walk``.

    Raises:
        WalkArgumentError: If ``path`` or ``worker`` has the wrong shape
        OSError / WalkError: The walk's final error, if any
    """
    finished = threading.Event()
    outcome: List[Outcome] = []

    def completion(error: Outcome = None) -> None:
        outcome.append(error)
        finished.set()

    walk(path, worker, completion, **options)
    finished.wait()

    if outcome[0] is not None:
        raise outcome[0]
