from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
import logging
from typing import Callable, Protocol

LOGGER = logging.getLogger(__name__)


class Executor(Protocol):
    def execute(self, command: Callable[[], None]) -> None:
        """Run the command, now or later, on some execution context."""


class SynchronousExecutor:
    """Runs every command inline on the calling thread."""

    def execute(self, command: Callable[[], None]) -> None:
        command()


def _report_uncaught(future: Future[None]) -> None:
    exc = future.exception()
    if exc is not None:
        LOGGER.error("Uncaught error in background command", exc_info=exc)


class BackgroundExecutor:
    def __init__(self, max_workers: int = 4, thread_name_prefix: str = "photobrowser-http") -> None:
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=thread_name_prefix)
        self.closed = False

    def execute(self, command: Callable[[], None]) -> None:
        future = self._pool.submit(command)
        future.add_done_callback(_report_uncaught)

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)
        self.closed = True

    def __enter__(self) -> BackgroundExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
