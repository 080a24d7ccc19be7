#===============================================================================
#  RE:[SSO] Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PathState(Enum):
    """What the launch area shows for the current path field."""
    EMPTY = "empty"        # nothing typed yet
    INVALID = "invalid"    # runtime not found under the path
    READY = "ready"        # runtime found, Launch is offered


@dataclass(frozen=True)
class LaunchResult:
    directory: str
    executable: str
    exit_code: Optional[int] = None
    error: Optional[str] = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.cancelled and self.exit_code == 0

    def describe(self) -> str:
        if self.error is not None:
            return f"Could not start {self.executable}: {self.error}"
        if self.cancelled:
            if self.exit_code is None:
                return f"{self.executable} was cancelled"
            return f"{self.executable} was cancelled (status code: {self.exit_code})"
        return f"Process exited with status code: {self.exit_code}"
