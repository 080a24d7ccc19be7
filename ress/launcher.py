#===============================================================================
#  RE:[SSO] Launcher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Starts the runtime from inside its own folder and waits for it to exit.
#  A failed spawn is reported back as a LaunchResult instead of raising.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import threading
from pathlib import Path
from typing import Callable, Optional, Sequence

from .models import LaunchResult

logger = logging.getLogger(__name__)

NotifyFn = Callable[[str, str], None]


class ProcessLauncher:
    """One launch of `executable` with `directory` as its working directory.

    No existence check is done here; callers check the folder first.
    """

    def __init__(self, directory: str, executable: str, notify: Optional[NotifyFn] = None,
                 runner: Sequence[str] = ()):
        self.directory = directory
        self.executable = executable
        self.notify = notify
        self.runner = list(runner)

        self._proc: Optional[subprocess.Popen] = None
        self._cancelled = False
        self._lock = threading.Lock()

    def command(self) -> list[str]:
        # The runtime insists on being started from its own folder, so cwd is
        # set and the full path is passed (no args).
        return self.runner + [str(Path(self.directory) / self.executable)]

    @property
    def running(self) -> bool:
        return self._proc is not None and self._proc.poll() is None

    def start(self) -> Optional[LaunchResult]:
        """Spawn the child. Returns a failed LaunchResult if it couldn't start."""
        cmd = self.command()
        logger.info("Starting %s in %s", cmd, self.directory)
        with self._lock:
            if self._cancelled:
                return self._finish(LaunchResult(self.directory, self.executable, cancelled=True))
            try:
                self._proc = subprocess.Popen(cmd, cwd=self.directory)
            except (OSError, ValueError) as e:
                logger.error("Error starting %s: %s", self.executable, e)
                return self._finish(LaunchResult(self.directory, self.executable, error=str(e)))
        return None

    def wait(self) -> LaunchResult:
        """Block until the child exits and report its status code."""
        if self._proc is None:
            raise RuntimeError("wait() called before a successful start()")
        code = self._proc.wait()
        logger.info("%s exited with status code: %s", self.executable, code)
        return self._finish(
            LaunchResult(self.directory, self.executable, exit_code=code, cancelled=self._cancelled)
        )

    def run(self) -> LaunchResult:
        failed = self.start()
        if failed is not None:
            return failed
        return self.wait()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self.running:
                logger.info("Terminating %s (pid %s)", self.executable, self._proc.pid)
                self._proc.terminate()

    def _finish(self, result: LaunchResult) -> LaunchResult:
        if self.notify is not None:
            self.notify(self.executable, result.describe())
        return result


def launch_process(directory: str, executable: str, notify: Optional[NotifyFn] = None,
                   runner: Sequence[str] = ()) -> LaunchResult:
    """Start `executable` from `directory`, wait for it, notify the status."""
    return ProcessLauncher(directory, executable, notify=notify, runner=runner).run()
