"""Async recursive walker with worker-controlled recursion.

Each directory spawns one task per child and waits for all of them,
so every step's outcome is a return value rather than a callback.
"""

import asyncio
import logging
from typing import Any, Callable, List, Optional

from ..._common.error_policies import ErrorPolicy, FirstErrorPolicy, Outcome
from ..._common.errors import WorkerError
from ..._common.frames import PendingCount, StepKind
from ..._common.stats import EntryStats
from .adapter import AsyncWalkAdapter

logger = logging.getLogger(__name__)

Worker = Callable[[str, EntryStats], Any]


class AsyncWalker:
    """Walks a tree through an AsyncWalkAdapter.

    The seed is always entered. Every other entry is offered to the
    worker, and a directory is only listed when the worker returns a
    truthy value for it.
    """

    def __init__(self, adapter: AsyncWalkAdapter, policy: Optional[ErrorPolicy] = None):
        """Initialize walker.

        Args:
            adapter: Provides stat, list_dir and join
            policy: Combines sibling outcomes (defaults to FirstErrorPolicy)
        """
        self.adapter = adapter
        self.policy = policy or FirstErrorPolicy()

    async def walk(self, root: str, worker: Worker) -> Outcome:
        """Walk everything reachable from ``root``.

        Returns:
            None on success, otherwise the error chosen by the policy

        Raises:
            WorkerError: If the worker raised; the walk is aborted
        """
        return await self._step(root, worker, StepKind.ROOT)

    async def _step(self, path: str, worker: Worker, kind: StepKind) -> Outcome:
        """Visit one entry and, if allowed, everything below it."""
        try:
            stats = await self.adapter.stat(path)
        except Exception as error:
            logger.debug("stat failed for %s: %s", path, error)
            return error

        if kind is StepKind.CHILD and not self._consult(worker, path, stats):
            logger.debug("pruned %s", path)
            return None

        if not stats.is_dir():
            return None

        try:
            names = await self.adapter.list_dir(path)
        except Exception as error:
            logger.debug("list_dir failed for %s: %s", path, error)
            return error

        if not names:
            return None

        return await self._fan_out(path, names, worker)

    async def _fan_out(self, path: str, names: List[str], worker: Worker) -> Outcome:
        """Walk all children of ``path`` concurrently and combine outcomes."""
        logger.debug("descending into %s (%d children)", path, len(names))
        pending = PendingCount(len(names), self.policy)
        tasks = [
            asyncio.ensure_future(
                self._step(self.adapter.join(path, name), worker, StepKind.CHILD)
            )
            for name in names
        ]

        try:
            for next_done in asyncio.as_completed(tasks):
                if pending.complete(await next_done):
                    return pending.result()
        except BaseException:
            # Worker failure or outer cancellation: take the subtree down
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        raise RuntimeError(f"fan-out of {path} ended with {pending!r}")

    @staticmethod
    def _consult(worker: Worker, path: str, stats: EntryStats) -> bool:
        try:
            return bool(worker(path, stats))
        except Exception as error:
            raise WorkerError(path, error) from error
