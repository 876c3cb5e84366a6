"""Threaded recursive walker with worker-controlled recursion.

Steps run on a thread pool and are chained by callbacks: a step never
blocks waiting for its children, so a bounded pool cannot deadlock. Each
directory owns a lock-guarded PendingCount that its children decrement.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from ..._common.error_policies import ErrorPolicy, FirstErrorPolicy, Outcome
from ..._common.errors import WorkerError
from ..._common.frames import PendingCount, StepKind
from ..._common.stats import EntryStats
from .adapter import WalkAdapter

logger = logging.getLogger(__name__)

Worker = Callable[[str, EntryStats], Any]
OnDone = Callable[[Outcome], None]

# Returned by a step whose children will call on_done
_FANNED_OUT = object()


class LockedPendingCount(PendingCount):
    """PendingCount whose decrement-and-check is atomic across threads."""

    def __init__(self, total: int, policy: ErrorPolicy):
        super().__init__(total, policy)
        self._lock = threading.Lock()

    def complete(self, error: Outcome = None) -> bool:
        with self._lock:
            return super().complete(error)


class _WalkRun:
    """State shared by every step of one walk.

    Holds the executor and the first worker failure, if any. Nothing
    else is shared between directory frames.
    """

    def __init__(self, executor: ThreadPoolExecutor, worker: Worker):
        self.executor = executor
        self.worker = worker
        self.aborted: Optional[WorkerError] = None
        self._abort_lock = threading.Lock()

    def abort(self, path: str, error: Exception) -> None:
        with self._abort_lock:
            if self.aborted is None:
                self.aborted = WorkerError(path, error)

    def submit(self, fn: Callable[..., None], *args) -> None:
        future = self.executor.submit(fn, *args)
        future.add_done_callback(_report_crashed_step)


def _report_crashed_step(future: Future) -> None:
    error = future.exception()
    if error is not None:
        logger.error("walk step crashed", exc_info=error)


class ThreadedWalker:
    """Walks a tree through a WalkAdapter on a thread pool.

    ``start`` returns immediately; the completion handler is called once,
    from a dedicated thread, after the last step finished.
    """

    def __init__(
        self,
        adapter: WalkAdapter,
        policy: Optional[ErrorPolicy] = None,
        max_workers: Optional[int] = None
    ):
        """Initialize walker.

        Args:
            adapter: Provides stat, list_dir and join
            policy: Combines sibling outcomes (defaults to FirstErrorPolicy)
            max_workers: Thread pool size (executor default if None)
        """
        self.adapter = adapter
        self.policy = policy or FirstErrorPolicy()
        self.max_workers = max_workers

    def start(self, root: str, worker: Worker, on_done: OnDone) -> None:
        """Begin walking ``root`` in the background.

        Args:
            root: Seed path; entered without consulting the worker
            worker: Decides for every other entry whether to go on
            on_done: Called with the final outcome (None on success)
        """
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix='dazzlewalk',
        )
        run = _WalkRun(executor, worker)

        def finish(error: Outcome = None) -> None:
            executor.shutdown(wait=False)
            outcome = run.aborted if run.aborted is not None else error
            logger.debug("walk of %s finished: %r", root, outcome)
            # Own thread, so an exception from on_done reaches threading.excepthook
            threading.Thread(
                target=on_done,
                args=(outcome,),
                name='dazzlewalk-completion',
            ).start()

        try:
            run.submit(self._step, run, root, StepKind.ROOT, finish)
        except BaseException:
            executor.shutdown(wait=False)
            raise

    def _step(self, run: _WalkRun, path: str, kind: StepKind, on_done: OnDone) -> None:
        """Visit one entry; report through ``on_done`` exactly once.

        Anything raised while visiting becomes this branch's outcome, so
        the parent's pending count always reaches zero.
        """
        try:
            outcome = self._visit(run, path, kind, on_done)
        except Exception as error:
            logger.debug("step for %s failed", path, exc_info=error)
            outcome = error
        if outcome is not _FANNED_OUT:
            on_done(outcome)

    def _visit(self, run: _WalkRun, path: str, kind: StepKind, on_done: OnDone) -> Any:
        """Do one step's work.

        Returns the step's outcome, or ``_FANNED_OUT`` once the children
        have taken over calling ``on_done``.
        """
        if run.aborted is not None:
            return None

        try:
            stats = self.adapter.stat(path)
        except Exception as error:
            logger.debug("stat failed for %s: %s", path, error)
            return error

        if kind is StepKind.CHILD:
            try:
                proceed = bool(run.worker(path, stats))
            except Exception as error:
                run.abort(path, error)
                return None
            if not proceed:
                logger.debug("pruned %s", path)
                return None

        if not stats.is_dir():
            return None

        try:
            names = self.adapter.list_dir(path)
        except Exception as error:
            logger.debug("list_dir failed for %s: %s", path, error)
            return error

        if not names:
            return None

        children = [self.adapter.join(path, name) for name in names]
        logger.debug("descending into %s (%d children)", path, len(children))
        pending = LockedPendingCount(len(children), self.policy)

        def child_done(error: Outcome = None) -> None:
            if pending.complete(error):
                on_done(_resolve(pending))

        for child in children:
            run.submit(self._step, run, child, StepKind.CHILD, child_done)
        return _FANNED_OUT


def _resolve(pending: PendingCount) -> Outcome:
    try:
        return pending.result()
    except Exception as error:
        logger.debug("error policy failed", exc_info=error)
        return error
