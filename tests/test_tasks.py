import io
from unittest import mock

import pytest

from practiceapps.tasks import Executor, Task, main


def test_default_task_values():
    task = Task()
    assert (task.id, task.name, task.priority, task.duration) == (0, "undefined", 0, 1)


def test_name_setter_marks_modified():
    task = Task("Sync", 2, 1)
    task.name = "Backup"
    assert task.name == "[modified] Backup"


def test_negative_priority_rejected_and_kept():
    task = Task("Sync", 2, 1)
    with pytest.raises(ValueError):
        task.priority = -1
    assert task.priority == 2


def test_zero_priority_allowed():
    task = Task("Sync", 2, 1)
    task.priority = 0
    assert task.priority == 0


@pytest.mark.parametrize("bad", [0, -5])
def test_non_positive_duration_rejected(bad):
    task = Task("Sync", 2, 4)
    with pytest.raises(ValueError):
        task.duration = bad
    assert task.duration == 4


def test_execute_writes_and_sleeps():
    slept = []
    out = io.StringIO()
    task = Task("Email backup", 2, 3, sleep=slept.append, output=out)
    task.execute()
    assert slept == [3]
    assert out.getvalue().splitlines() == [
        "[Task] Executing: Email backup (Priority: 2, Duration: 3s)",
        "[Task] Finished: Email backup",
    ]


def test_executor_runs_every_task():
    slept = []
    out = io.StringIO()
    executor = Executor(output=out)
    for name, priority, duration in [("Compression", 1, 2), ("Sync", 2, 1), ("Encryption", 3, 3)]:
        executor.add_task(Task(name, priority, duration, sleep=slept.append, output=out))
    executor.process_tasks()

    assert sorted(slept) == [1, 2, 3]
    lines = out.getvalue().splitlines()
    assert lines[0] == "[Executor] Starting 3 tasks in parallel..."
    assert lines[-1] == "[Executor] All tasks completed."
    finished = {line for line in lines if line.startswith("[Task] Finished: ")}
    assert finished == {
        "[Task] Finished: Compression",
        "[Task] Finished: Sync",
        "[Task] Finished: Encryption",
    }


def test_executor_with_no_tasks():
    out = io.StringIO()
    executor = Executor(output=out)
    executor.process_tasks()
    assert out.getvalue().splitlines() == [
        "[Executor] Starting 0 tasks in parallel...",
        "[Executor] All tasks completed.",
    ]


def test_main_runs_demo(capsys):
    with mock.patch("practiceapps.tasks.time.sleep") as fake_sleep:
        assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[Task] Executing: Email backup (Priority: 2, Duration: 3s)"
    assert "Hello from thread!" in lines
    assert lines.index("Hello from thread!") < lines.index("Main thread done.")
    assert "[Executor] Starting 3 tasks in parallel..." in lines
    assert lines[-1] == "[Executor] All tasks completed."
    assert sorted(call.args[0] for call in fake_sleep.call_args_list) == [1, 2, 3, 3]