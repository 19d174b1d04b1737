"""Front-end state for a cheat search: settings, compute mode and result table."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional, TextIO

from .backends import ProcessFinder, ThreadFinder, create_finder
from .finder import CheatFinder, ComputeType, max_thread_support
from .tablemodel import TableModel

RESULT_HEADER = ("Index", "Code", "JamCRC", "Associated code")
IDLE_BUTTON_TEXT = "  Launch Bruteforce   "
BUSY_BUTTON_TEXT = "Bruteforce in progress"

Listener = Callable[[str, Any], None]


class FinderController:
    """Holds the selected finder and a table model, and runs searches into the table.

    Listeners registered in ``listeners`` are called with the name of a setting
    and its new value whenever that setting changes.
    """

    def __init__(
        self,
        finder: Optional[CheatFinder] = None,
        table: Optional[TableModel] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.finder = finder if finder is not None else ThreadFinder()
        if out is not None:
            self.finder.out = out
        self.table = table if table is not None else TableModel()
        self.listeners: list[Listener] = []
        self.last_error: Optional[BaseException] = None
        self._button_value = "Launch Bruteforce"
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    def _notify(self, name: str, value: Any) -> None:
        for listener in list(self.listeners):
            listener(name, value)

    def _ensure_idle(self, what: str) -> None:
        if self.finder.is_running:
            raise RuntimeError(f"Can't change {what} while running")

    @property
    def min_range(self) -> int:
        return self.finder.min_range

    @min_range.setter
    def min_range(self, value: int) -> None:
        self._ensure_idle("min range")
        self.finder.min_range = value
        self._notify("min_range", value)

    @property
    def max_range(self) -> int:
        return self.finder.max_range

    @max_range.setter
    def max_range(self, value: int) -> None:
        self._ensure_idle("max range")
        self.finder.max_range = value
        self._notify("max_range", value)

    @property
    def thread_count(self) -> int:
        return self.finder.thread_count

    @thread_count.setter
    def thread_count(self, value: int) -> None:
        self._ensure_idle("number of thread")
        self.finder.thread_count = value
        self._notify("thread_count", value)

    @property
    def cuda_block_size(self) -> int:
        return self.finder.cuda_block_size

    @cuda_block_size.setter
    def cuda_block_size(self, value: int) -> None:
        self._ensure_idle("cuda block size")
        self.finder.cuda_block_size = value
        self._notify("cuda_block_size", value)

    @property
    def button_value(self) -> str:
        return self._button_value

    @button_value.setter
    def button_value(self, value: str) -> None:
        if value == self._button_value:
            return
        self._button_value = value
        self._notify("button_value", value)

    @property
    def calc_mode(self) -> int:
        """Return the compute mode of the selected finder."""
        if type(self.finder) is ProcessFinder:
            return int(ComputeType.OPENMP)
        return int(ComputeType.STD_THREAD)

    def set_calc_mode(self, value: int) -> None:
        """Switch to the finder for ``value``, keeping the current settings.

        Raises RuntimeError while a search runs and UnsupportedModeError for
        modes this build cannot provide. Selecting the current mode does nothing.
        """
        self._ensure_idle("compute type")
        replacement = create_finder(value)
        if type(replacement) is type(self.finder):
            return
        replacement.min_range = self.finder.min_range
        replacement.max_range = self.finder.max_range
        replacement.thread_count = self.finder.thread_count
        replacement.cuda_block_size = self.finder.cuda_block_size
        replacement.out = self.finder.out
        self.finder = replacement
        self._notify("calc_mode", value)

    def max_thread_support(self) -> int:
        return max_thread_support()

    @property
    def built_with_openmp(self) -> bool:
        return self.finder.built_with_openmp

    @property
    def built_with_cuda(self) -> bool:
        return self.finder.built_with_cuda

    @property
    def built_with_opencl(self) -> bool:
        return self.finder.built_with_opencl

    def run_search(self) -> None:
        """Run the selected finder and fill the table with a header and its results.

        An invalid range is raised after the table has been reset to its header.
        """
        with self._lock:
            self.finder.clear()
            self.table.clear()
            try:
                self.finder.run()
            finally:
                self.table.add_row(RESULT_HEADER)
                for found in self.finder.results:
                    self.table.add_row(
                        (
                            str(found.index),
                            found.code,
                            f"0x{found.jamcrc:x}",
                            found.associated_code,
                        )
                    )
                self.button_value = IDLE_BUTTON_TEXT

    def _run_in_background(self) -> None:
        try:
            self.run_search()
        except Exception as error:  # kept for the caller to inspect
            self.last_error = error

    def start(self) -> threading.Thread:
        """Start a search on a background thread and return that thread."""
        self.last_error = None
        self.button_value = BUSY_BUTTON_TEXT
        thread = threading.Thread(target=self._run_in_background, daemon=True)
        self._threads.append(thread)
        thread.start()
        return thread

    def join(self) -> None:
        """Wait for every background search to finish."""
        while self._threads:
            self._threads.pop(0).join()