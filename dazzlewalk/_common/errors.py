"""
Exception types raised or delivered by DazzleWalk.

Filesystem failures are never wrapped: the ``OSError`` raised by an adapter
reaches the completion handler unchanged so callers can match on
``FileNotFoundError``, ``PermissionError`` and friends.
"""

from typing import Any, Iterable, Iterator, List, Optional


class WalkError(Exception):
    """Base class for errors produced by DazzleWalk itself."""


class WalkArgumentError(WalkError, TypeError):
    """
    A walk was started with an argument of the wrong shape.

    Delivered through the completion handler, never raised by ``walk``
    itself, unless the caller supplied no completion handler.
    """

    def __init__(self, argument: str, value: Any, expected: str):
        super().__init__(
            f"{argument} must be {expected}, got {type(value).__name__}"
        )
        self.argument = argument
        self.value = value


class WorkerError(WalkError):
    """
    The worker raised while deciding about an entry.

    The original exception is available as ``__cause__``. A worker failure
    aborts the whole walk.
    """

    def __init__(self, path: str, original: BaseException):
        super().__init__(f"worker failed for '{path}': {original!r}")
        self.path = path
        self.__cause__ = original


class WalkErrorGroup(WalkError):
    """
    Several branches of a walk failed.

    Produced by ``CollectErrorsPolicy``. Nested groups from deeper
    directories are flattened, so ``errors`` only holds leaf failures.
    """

    def __init__(self, errors: Iterable[BaseException]):
        self.errors: List[BaseException] = list(errors)
        super().__init__(f"{len(self.errors)} error(s) during walk")

    @property
    def paths(self) -> List[Optional[str]]:
        """Paths reported by the grouped errors, where they carry one."""
        return [
            getattr(error, 'filename', None) or getattr(error, 'path', None)
            for error in self.errors
        ]

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
