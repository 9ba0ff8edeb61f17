import sys
from pathlib import Path

import pytest

from auralib.system.process import Event, Process, ProcessExitedEventArgs


def python(code: str) -> Process:
    return Process(sys.executable, ["-c", code])


def test_event_handlers_receive_args():
    count = 0

    def on_true(state: bool) -> None:
        nonlocal count
        if state:
            count += 1

    def on_false(state: bool) -> None:
        nonlocal count
        if not state:
            count -= 1

    event: Event[bool] = Event()
    first_id = event.subscribe(on_true)
    second_id = event.subscribe(on_false)
    assert len(event) == 2
    assert not first_id == second_id
    event(True)
    event(False)
    event.invoke(True)
    assert count == 1


def test_event_unsubscribe():
    calls = []
    event: Event[int] = Event()
    handler_id = event.subscribe(calls.append)
    assert event.unsubscribe(handler_id) is True
    assert event.unsubscribe(handler_id) is False
    event.invoke(5)
    assert calls == []
    assert len(event) == 0


def test_path_is_kept():
    process = Process(sys.executable)
    assert process.path == Path(sys.executable)


def test_missing_executable_raises():
    with pytest.raises(FileNotFoundError):
        Process("auralib-no-such-program-anywhere")


def test_initial_state():
    process = python("pass")
    assert process.is_running is False
    assert process.has_completed is False
    assert process.exit_code == -1
    assert process.output == ""


def test_wait_before_start_raises():
    with pytest.raises(RuntimeError):
        python("pass").wait_for_exit()


def test_output_and_exit_code():
    process = python("import sys; sys.stdout.write('done'); sys.exit(3)")
    assert process.start() is True
    assert process.wait_for_exit() == 3
    assert process.output == "done"
    assert process.has_completed is True
    assert process.is_running is False


def test_stderr_is_collected():
    process = python(
        "import sys; sys.stdout.write('out'); sys.stdout.flush(); sys.stderr.write('err')"
    )
    process.start()
    assert process.wait_for_exit() == 0
    assert "out" in process.output
    assert "err" in process.output


def test_exited_event_fires():
    received = []
    process = python("import sys; sys.stdout.write('done'); sys.exit(3)")
    process.exited.subscribe(received.append)
    process.start()
    process.wait_for_exit()
    assert received == [ProcessExitedEventArgs(3, "done")]


def test_start_after_completion_returns_false():
    process = python("pass")
    assert process.start() is True
    process.wait_for_exit()
    assert process.start() is False


def test_kill_running_process():
    process = python("import time; time.sleep(30)")
    assert process.kill() is False
    process.start()
    assert process.start() is True
    assert process.kill() is True
    assert process.is_running is False
    assert process.has_completed is True
    assert process.wait_for_exit() == -1
    assert process.kill() is False


def test_context_manager_waits():
    with python("import sys; sys.exit(2)") as process:
        process.start()
    assert process.has_completed is True
    assert process.exit_code == 2