"""Tasks with a priority and a duration, run side by side by an executor."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, TextIO

_write_lock = threading.Lock()


def _emit(output: TextIO | None, text: str) -> None:
    stream = sys.stdout if output is None else output
    with _write_lock:
        stream.write(f"{text}\n")
        stream.flush()


class Task:
    """A named unit of work that takes ``duration`` seconds to run."""

    def __init__(
        self,
        name: str = "undefined",
        priority: int = 0,
        duration: int = 1,
        *,
        sleep: Callable[[float], None] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.id = 0
        self._name = name
        self._priority = priority
        self._duration = duration
        self._sleep = sleep
        self._output = output

    def __repr__(self) -> str:
        return (
            f"Task(name={self._name!r}, priority={self._priority}, "
            f"duration={self._duration})"
        )

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        self._name = f"[modified] {new_name}"

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, new_priority: int) -> None:
        if new_priority < 0:
            raise ValueError("Invalid priority: must be >= 0")
        self._priority = new_priority

    @property
    def duration(self) -> int:
        return self._duration

    @duration.setter
    def duration(self, new_duration: int) -> None:
        if new_duration <= 0:
            raise ValueError("Invalid duration: must be > 0")
        self._duration = new_duration

    def execute(self) -> None:
        """Announce the task, wait for its duration and announce completion."""
        _emit(
            self._output,
            f"[Task] Executing: {self._name} (Priority: {self._priority}, "
            f"Duration: {self._duration}s)",
        )
        sleep = self._sleep if self._sleep is not None else time.sleep
        sleep(self._duration)
        _emit(self._output, f"[Task] Finished: {self._name}")


class Executor:
    """Collects tasks and runs them all in parallel threads."""

    def __init__(self, output: TextIO | None = None) -> None:
        self.queue: list[Task] = []
        self._output = output

    def add_task(self, task: Task) -> None:
        self.queue.append(task)

    def process_tasks(self) -> None:
        """Run every queued task in its own thread and wait for all of them."""
        _emit(self._output, f"[Executor] Starting {len(self.queue)} tasks in parallel...")
        threads = [threading.Thread(target=task.execute) for task in self.queue]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        _emit(self._output, "[Executor] All tasks completed.")


def _say_hello() -> None:
    _emit(None, "Hello from thread!")


def _execute_tasks() -> None:
    executor = Executor()
    executor.add_task(Task("Compression", 1, 2))
    executor.add_task(Task("Sync", 2, 1))
    executor.add_task(Task("Encryption", 3, 3))
    executor.process_tasks()


def main(argv=None) -> int:
    """Run the task queue demonstration."""
    parser = argparse.ArgumentParser(description="Run a few timed tasks in parallel.")
    parser.parse_args(argv)

    Task("Email backup", 2, 3).execute()

    thread = threading.Thread(target=_say_hello)
    thread.start()
    thread.join()
    _emit(None, "Main thread done.")

    _execute_tasks()
    return 0


if __name__ == "__main__":
    sys.exit(main())