"""Configuration system for DazzleWalk.

This module defines how callers tune a walk: symlink handling, how errors
from sibling branches are combined, and the thread pool size used by the
synchronous implementation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .error_policies import (
    ErrorPolicy,
    FirstErrorPolicy,
    LastCompletedPolicy,
    CollectErrorsPolicy,
)


class ErrorMode(Enum):
    """How a directory combines the outcomes of its children.

    Selects one of the aggregation policies in ``error_policies``.
    """
    FIRST = "first"         # First failure to complete wins
    LAST = "last"           # Outcome of the last child to complete
    COLLECT = "collect"     # Every failure, grouped


_POLICIES = {
    ErrorMode.FIRST: FirstErrorPolicy,
    ErrorMode.LAST: LastCompletedPolicy,
    ErrorMode.COLLECT: CollectErrorsPolicy,
}


@dataclass
class WalkConfig:
    """Configuration for a single walk.

    Attributes:
        follow_symlinks: Stat the target of a symlink instead of the link itself.
            With ``False`` a link to a directory is reported as a link and
            never descended into.
        error_mode: Aggregation rule for errors from sibling branches.
        max_workers: Thread pool size for the synchronous walker
            (``None`` uses the executor default).
    """

    follow_symlinks: bool = True
    error_mode: Union[ErrorMode, str] = ErrorMode.FIRST
    max_workers: Optional[int] = None

    def __post_init__(self):
        # Accept the plain string form, e.g. WalkConfig(error_mode="collect")
        if not isinstance(self.error_mode, ErrorMode):
            self.error_mode = ErrorMode(self.error_mode)

    def validate(self) -> 'WalkConfig':
        """Check the configuration for nonsensical values.

        Returns:
            self, so calls can be chained

        Raises:
            ValueError: If a value is out of range
        """
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        return self

    def make_policy(self) -> ErrorPolicy:
        """Create the error policy selected by ``error_mode``."""
        return _POLICIES[self.error_mode]()
