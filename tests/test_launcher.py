import sys
import threading
from pathlib import Path

from ress.constants import RUNTIME
from ress.launcher import ProcessLauncher, launch_process

# The "runtime" in these tests is a Python script run through the current
# interpreter, so the same tests work on every OS.
PY = [sys.executable]


def _write_runtime(folder: Path, body: str) -> Path:
    exe = folder / RUNTIME
    exe.write_text(body, encoding="utf-8")
    return exe


def test_command_uses_runner_prefix_and_full_path(tmp_path):
    pl = ProcessLauncher(str(tmp_path), RUNTIME, runner=["wine"])
    assert pl.command() == ["wine", str(tmp_path / RUNTIME)]
    assert ProcessLauncher(str(tmp_path), RUNTIME).command() == [str(tmp_path / RUNTIME)]


def test_exit_code_and_working_directory(tmp_path):
    _write_runtime(tmp_path, (
        "import os, sys\n"
        "open('cwd.txt', 'w', encoding='utf-8').write(os.getcwd())\n"
        "sys.exit(3)\n"
    ))
    calls = []
    result = launch_process(str(tmp_path), RUNTIME, notify=lambda t, b: calls.append((t, b)), runner=PY)

    assert result.exit_code == 3
    assert result.error is None
    assert not result.ok
    assert Path((tmp_path / "cwd.txt").read_text(encoding="utf-8")).resolve() == tmp_path.resolve()
    assert calls == [(RUNTIME, "Process exited with status code: 3")]


def test_clean_exit_is_ok(tmp_path):
    _write_runtime(tmp_path, "pass\n")
    result = launch_process(str(tmp_path), RUNTIME, runner=PY)
    assert result.exit_code == 0
    assert result.ok


def test_spawn_failure_is_returned_not_raised(tmp_path):
    calls = []
    missing = tmp_path / "not-there"
    result = launch_process(str(missing), RUNTIME, notify=lambda t, b: calls.append((t, b)))
    assert result.error
    assert result.exit_code is None
    assert not result.ok
    assert len(calls) == 1
    assert calls[0][0] == RUNTIME
    assert calls[0][1].startswith(f"Could not start {RUNTIME}")


def test_cancel_terminates_running_child(tmp_path):
    _write_runtime(tmp_path, "import time\ntime.sleep(60)\n")
    pl = ProcessLauncher(str(tmp_path), RUNTIME, runner=PY)
    assert pl.start() is None
    assert pl.running

    results = []
    t = threading.Thread(target=lambda: results.append(pl.wait()))
    t.start()
    pl.cancel()
    t.join(timeout=30)

    assert not t.is_alive()
    assert results[0].cancelled
    assert not results[0].ok
    assert not pl.running


def test_cancel_before_start_never_spawns(tmp_path):
    _write_runtime(tmp_path, "open('ran.txt', 'w').write('x')\n")
    pl = ProcessLauncher(str(tmp_path), RUNTIME, runner=PY)
    pl.cancel()
    result = pl.run()
    assert result.cancelled
    assert result.exit_code is None
    assert not (tmp_path / "ran.txt").exists()
