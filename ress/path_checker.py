#===============================================================================
#  RE:[SSO] Launcher | path_checker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Checks whether the runtime executable sits directly under a folder.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path

from .constants import RUNTIME, WAITING_TEXT
from .models import PathState


def target_exists(path: str, target: str = RUNTIME) -> bool:
    """True when `target` is a regular file directly inside `path`."""
    try:
        return (Path(path) / target).is_file()
    except (OSError, ValueError):
        # e.g. embedded NUL bytes or a path the OS refuses to stat
        return False


def check_path(path: str, target: str = RUNTIME) -> PathState:
    if path == "":
        return PathState.EMPTY
    if target_exists(path, target):
        return PathState.READY
    return PathState.INVALID


def status_text(path: str, state: PathState, target: str = RUNTIME) -> str:
    if state is PathState.EMPTY:
        return WAITING_TEXT
    if state is PathState.READY:
        return f"Path: '{path}' contains '{target}', ready to launch!"
    return f"Path '{path}' does not contain '{target}', please try a different path!"
