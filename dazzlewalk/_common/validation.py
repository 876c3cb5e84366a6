"""Argument checks and the default completion handler.

Argument problems are reported through the completion handler, the same
channel as traversal errors, so the entry points never raise for them.
"""

import os
from typing import Any, Callable, Optional, Tuple

from .errors import WalkArgumentError


def default_completion(error: Optional[BaseException] = None) -> None:
    """Completion used when the caller supplies none.

    Success is ignored. A failure is re-raised so it cannot go unnoticed.
    """
    if error is not None:
        raise error


def resolve_completion(completion: Any) -> Callable[..., None]:
    """Return ``completion`` if it is callable, else the default handler."""
    if callable(completion):
        return completion
    return default_completion


def check_arguments(path: Any, worker: Any) -> Tuple[Optional[str], Optional[WalkArgumentError]]:
    """Validate the seed path and the worker.

    ``str`` and ``os.PathLike`` objects naming a ``str`` path are textual;
    everything else, ``bytes`` included, is rejected.

    Returns:
        Tuple of (normalized path, None) on success or (None, error)
    """
    try:
        normalized = os.fspath(path)
    except TypeError:
        normalized = None
    if not isinstance(normalized, str):
        return None, WalkArgumentError('path', path, 'a str or os.PathLike')

    if not callable(worker):
        return None, WalkArgumentError('worker', worker, 'callable')

    return normalized, None


def deliver(completion: Callable[..., None], error: Optional[BaseException]) -> None:
    """Invoke a completion handler the way callers expect.

    Success calls ``completion()`` with no argument, failure calls
    ``completion(error)``.
    """
    if error is None:
        completion()
    else:
        completion(error)
