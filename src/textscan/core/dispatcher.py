"""Dispatcher — fans file scans out over a worker pool and streams batches.

One producer thread walks the tree and submits a scan task per discovered
file to a bounded ``ThreadPoolExecutor``.  Each task pushes exactly one
``FileScanBatch`` onto an unbounded queue.  The end-of-stream sentinel is
enqueued once, after the walk has finished *and* the pool has drained, so
the consumer sees every batch before the stream closes.

Batches arrive in completion order, not discovery order.
"""

from __future__ import annotations

import logging
import os
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterator

from textscan.core.discover import walk
from textscan.core.scanner import scan_file
from textscan.model import FileScanBatch

logger = logging.getLogger(__name__)

_CLOSED = object()


class _DispatchState:
    """Bookkeeping for one dispatch run, shared with the producer thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.launched = 0
        self.producer_error: BaseException | None = None
        self.task_errors: list[BaseException] = []

    def record(self, future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            with self._lock:
                self.task_errors.append(exc)


class ScanDispatcher:
    """Scan every file under a root concurrently.

    Parameters
    ----------
    pattern:
        Literal substring to search for.
    max_workers:
        Size of the worker pool.  ``None`` uses the ``ThreadPoolExecutor``
        default, which tracks the available CPUs.
    follow_symlinks:
        Passed through to the tree walker.
    walker:
        Discovery function; defaults to ``walk``.
    """

    def __init__(
        self,
        pattern: str,
        *,
        max_workers: int | None = None,
        follow_symlinks: bool = False,
        walker: Callable[..., Iterator[Path]] | None = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.pattern = pattern
        self.max_workers = max_workers
        self.follow_symlinks = follow_symlinks
        self._walker = walker if walker is not None else walk

    def dispatch(self, root: str | os.PathLike[str]) -> Iterator[FileScanBatch]:
        """Yield one ``FileScanBatch`` per discovered file until exhausted.

        Unreadable files arrive as failed batches and do not stop the run.
        After the last batch, a walk failure (``WalkError``) or an unexpected
        exception from a scan task is re-raised here.  Work starts on the
        first ``next()``.
        """
        results: queue.Queue = queue.Queue()
        state = _DispatchState()
        producer = threading.Thread(
            target=self._produce,
            args=(root, results, state),
            name="textscan-dispatch",
            daemon=True,
        )
        producer.start()

        delivered = 0
        while True:
            item = results.get()
            if item is _CLOSED:
                break
            delivered += 1
            yield item
        producer.join()

        logger.debug(f"Delivered {delivered} of {state.launched} batch(es) from {root}")
        if state.task_errors:
            raise state.task_errors[0]
        if state.producer_error is not None:
            raise state.producer_error

    # ── producer side ───────────────────────────────────────────────

    def _produce(self, root, results: queue.Queue, state: _DispatchState) -> None:
        logger.debug(
            f"Dispatching scans under {root} "
            f"(workers={self.max_workers or 'default'})"
        )
        try:
            # Leaving the ``with`` block waits for every submitted task,
            # including when the walk raises part-way.
            with ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="textscan-scan",
            ) as pool:
                for path in self._walker(root, follow_symlinks=self.follow_symlinks):
                    future = pool.submit(self._scan_task, path, results)
                    future.add_done_callback(state.record)
                    state.launched += 1
        except Exception as exc:
            logger.debug(f"Walk of {root} aborted: {exc}")
            state.producer_error = exc
        finally:
            results.put(_CLOSED)

    def _scan_task(self, path: Path, results: queue.Queue) -> None:
        name = str(path)
        try:
            batch = FileScanBatch(path=name, matches=tuple(scan_file(path, self.pattern)))
        except OSError as exc:
            logger.debug(f"Could not read {name}: {exc}")
            batch = FileScanBatch.failed(name, exc)
        results.put(batch)


def dispatch(
    root: str | os.PathLike[str],
    pattern: str,
    *,
    max_workers: int | None = None,
    follow_symlinks: bool = False,
) -> Iterator[FileScanBatch]:
    """Convenience wrapper around ``ScanDispatcher(...).dispatch(root)``."""
    dispatcher = ScanDispatcher(
        pattern, max_workers=max_workers, follow_symlinks=follow_symlinks
    )
    return dispatcher.dispatch(root)
