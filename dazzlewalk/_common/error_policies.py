"""
Error aggregation policies for DazzleWalk.

When a directory fans out over its children, every child walk completes
with either nothing or an error. A policy decides which single outcome the
directory reports to its own parent once the last child has completed.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .errors import WalkErrorGroup


Outcome = Optional[BaseException]


class ErrorPolicy(ABC):
    """
    Base class for error aggregation policies.

    Subclasses implement different rules for combining the outcomes of a
    directory's children.
    """

    @abstractmethod
    def resolve(self, outcomes: Sequence[Outcome]) -> Outcome:
        """
        Pick the outcome a directory reports upward.

        Args:
            outcomes: Child outcomes in completion order, ``None`` for a
                child that succeeded. Never empty.

        Returns:
            ``None`` for success, otherwise the error to propagate.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class LastCompletedPolicy(ErrorPolicy):
    """
    Report whatever the last child to complete reported.

    This is the classic counter-based behavior: an earlier sibling failure
    is lost if the final child succeeds.
    """

    def resolve(self, outcomes: Sequence[Outcome]) -> Outcome:
        return outcomes[-1]


class FirstErrorPolicy(ErrorPolicy):
    """
    Report the first failure to complete, or success if no child failed.

    A failure is never replaced by a later success. This is the default.
    """

    def resolve(self, outcomes: Sequence[Outcome]) -> Outcome:
        for outcome in outcomes:
            if outcome is not None:
                return outcome
        return None


class CollectErrorsPolicy(ErrorPolicy):
    """
    Report every failure below a directory as one ``WalkErrorGroup``.

    Useful when the caller wants the full list of unreadable paths at the
    end of a walk instead of just one of them.
    """

    def resolve(self, outcomes: Sequence[Outcome]) -> Outcome:
        errors: List[BaseException] = []
        for outcome in outcomes:
            if isinstance(outcome, WalkErrorGroup):
                errors.extend(outcome.errors)
            elif outcome is not None:
                errors.append(outcome)
        if not errors:
            return None
        return WalkErrorGroup(errors)
