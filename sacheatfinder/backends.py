"""Parallel cheat finders and the factory that picks one by compute mode."""

from __future__ import annotations

import threading
from concurrent.futures import ProcessPoolExecutor
from typing import Iterator, Union

from .finder import CheatFinder, ComputeType, max_thread_support
from .result import Result


class UnsupportedModeError(ValueError):
    """Raised when a compute mode is known but not available in this build."""


def _blocks(low: int, high: int, count: int) -> Iterator[tuple[int, int]]:
    """Split the inclusive range [low, high] into at most ``count`` half-open blocks."""
    total = high - low + 1
    count = max(1, min(count, total))
    size, extra = divmod(total, count)
    start = low
    for block in range(count):
        stop = start + size + (1 if block < extra else 0)
        yield start, stop
        start = stop


def _scan_block(start: int, stop: int) -> list[Result]:
    """Check every index in [start, stop) and return the matches found."""
    finder = CheatFinder(thread_count=1)
    for i in range(start, stop):
        finder.runner(i)
    return finder.results


class ThreadFinder(CheatFinder):
    """Splits the range into blocks and checks each block on its own thread."""

    mode_name = "thread"

    def _worker_count(self) -> int:
        return self.thread_count if self.thread_count > 0 else max_thread_support()

    def _search(self) -> None:
        lock = threading.Lock()

        def scan(start: int, stop: int) -> None:
            found = _scan_block(start, stop)
            with lock:
                self.results.extend(found)

        threads = [
            threading.Thread(target=scan, args=block, daemon=True)
            for block in _blocks(self.min_range, self.max_range, self._worker_count())
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    def run(self) -> None:
        """Search the range with a pool of threads, then sort and print the matches."""
        super().run()


class ProcessFinder(CheatFinder):
    """Splits the range into blocks and checks them in separate worker processes."""

    mode_name = "multiprocess"

    def _worker_count(self) -> int:
        return self.thread_count if self.thread_count > 0 else max_thread_support()

    def _search(self) -> None:
        blocks = list(_blocks(self.min_range, self.max_range, self._worker_count()))
        if len(blocks) == 1:
            self.results.extend(_scan_block(*blocks[0]))
            return
        starts = [start for start, _ in blocks]
        stops = [stop for _, stop in blocks]
        with ProcessPoolExecutor(max_workers=len(blocks)) as pool:
            for found in pool.map(_scan_block, starts, stops):
                self.results.extend(found)

    def run(self) -> None:
        """Search the range with worker processes, then sort and print the matches."""
        super().run()


def create_finder(mode: Union[int, ComputeType]) -> CheatFinder:
    """Return a new finder for ``mode``; unknown modes fall back to threads."""
    value = int(mode)
    if value == ComputeType.CUDA:
        raise UnsupportedModeError("CUDA not supported")
    if value == ComputeType.OPENCL:
        raise UnsupportedModeError("OPENCL not supported")
    if value == ComputeType.OPENMP:
        return ProcessFinder()
    return ThreadFinder()