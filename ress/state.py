#===============================================================================
#  RE:[SSO] Launcher | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Session state owned by the main window (current path field + launch flag).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass

from .constants import RUNTIME
from .models import PathState
from .path_checker import check_path


@dataclass
class SessionState:
    path: str = ""
    target: str = RUNTIME
    launching: bool = False

    def set_path(self, text: str) -> None:
        self.path = text

    def path_state(self) -> PathState:
        # Always re-checked; the folder can change under us between calls.
        return check_path(self.path, self.target)

    def can_launch(self) -> bool:
        return not self.launching and self.path_state() is PathState.READY
