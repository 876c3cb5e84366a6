"""High-level async API for DazzleWalk.

Two entry points share one contract:

- ``walk_async`` is awaited and returns once the completion handler ran.
- ``walk`` starts the same walk in the background and returns at once.

In both, argument problems and traversal errors reach the caller only
through the completion handler, which is called exactly once.
"""

import asyncio
import logging
import threading
from typing import Any, Optional, Set

from .._common.config import WalkConfig
from .._common.error_policies import ErrorPolicy
from .._common.errors import WorkerError
from .._common.validation import check_arguments, deliver, resolve_completion
from .adapters import AsyncFileSystemAdapter
from .core import AsyncWalkAdapter, AsyncWalker

logger = logging.getLogger(__name__)

# Background walks started from inside a running loop. The loop only keeps
# weak references to tasks.
_background_walks: Set[asyncio.Task] = set()


async def walk_async(
    path: Any,
    worker: Any,
    completion: Any = None,
    *,
    adapter: Optional[AsyncWalkAdapter] = None,
    policy: Optional[ErrorPolicy] = None,
    config: Optional[WalkConfig] = None
) -> None:
    """Walk ``path`` and everything the worker lets through.

    Args:
        path: Seed path (str or os.PathLike). Always entered, never passed
            to the worker.
        worker: ``worker(path, stats)`` called for every other visited
            entry. A falsy result prunes that entry's subtree.
        completion: ``completion()`` on success or ``completion(error)`` on
            failure. If not callable, failures are re-raised instead.
        adapter: Filesystem collaborator (AsyncFileSystemAdapter if None)
        policy: Sibling error aggregation (from ``config`` if None)
        config: Walk configuration

    Example:
        >>> def worker(path, stats):
        ...     print(path)
        ...     return stats.is_dir() and not path.endswith('.git')
        >>> await walk_async('/src', worker, lambda error=None: print(error))
    """
    completion = resolve_completion(completion)

    seed, problem = check_arguments(path, worker)
    if problem is not None:
        deliver(completion, problem)
        return

    config = (config or WalkConfig()).validate()
    if adapter is None:
        adapter = AsyncFileSystemAdapter(follow_symlinks=config.follow_symlinks)
    walker = AsyncWalker(adapter, policy or config.make_policy())

    try:
        error = await walker.walk(seed, worker)
    except WorkerError as failure:
        error = failure

    logger.debug("walk of %s finished: %r", seed, error)
    deliver(completion, error)


def walk(
    path: Any,
    worker: Any,
    completion: Any = None,
    **options
) -> None:
    """Start a walk in the background and return immediately.

    Inside a running event loop the walk becomes a task on that loop.
    Otherwise it runs on a fresh event loop in a new thread. Either way
    an error escaping the walk, such as the default completion re-raising,
    is reported like any other uncaught error: through the loop's
    exception handler or ``threading.excepthook``.

    Takes the same arguments as ``walk_async``.
    """
    walk_coro = walk_async(path, worker, completion, **options)

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        thread = threading.Thread(
            target=asyncio.run,
            args=(walk_coro,),
            name='dazzlewalk-walk',
        )
        thread.start()
        return

    task = loop.create_task(walk_coro)
    _background_walks.add(task)
    task.add_done_callback(_finish_background_walk)


def _finish_background_walk(task: asyncio.Task) -> None:
    _background_walks.discard(task)
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        task.get_loop().call_exception_handler({
            'message': 'Unhandled error in background walk',
            'exception': error,
            'task': task,
        })
