"""Per-directory bookkeeping shared by the aio and sync walkers."""

from enum import Enum
from typing import List

from .error_policies import ErrorPolicy, Outcome


class StepKind(Enum):
    """Whether a traversal step consults the worker.

    The seed of a walk is always entered; every other entry is offered
    to the worker first.
    """
    ROOT = "root"
    CHILD = "child"


class PendingCount:
    """Counts the in-flight children of one directory.

    Created when a directory's children are listed and owned by that
    directory's step. Each child completion is recorded with ``complete``;
    the call that brings the count to zero returns True, after which
    ``result`` gives the directory's own outcome.

    Not thread-safe. The threaded walker guards it with a lock.
    """

    def __init__(self, total: int, policy: ErrorPolicy):
        if total < 1:
            raise ValueError(f"a fan-out needs at least one child, got {total}")
        self.pending = total
        self.outcomes: List[Outcome] = []
        self._policy = policy

    def complete(self, error: Outcome = None) -> bool:
        """Record one child's outcome.

        Returns:
            True if this was the last child to complete
        """
        if self.pending == 0:
            raise RuntimeError("more completions than children")
        self.outcomes.append(error)
        self.pending -= 1
        return self.pending == 0

    def result(self) -> Outcome:
        """Outcome of the whole fan-out, as chosen by the policy."""
        return self._policy.resolve(self.outcomes)

    def __repr__(self) -> str:
        return f"PendingCount(pending={self.pending}, completed={len(self.outcomes)})"
