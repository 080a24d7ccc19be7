#===============================================================================
#  RE:[SSO] Launcher | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of launcher settings (runtime name, cache file, runner prefix...).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Any

from .constants import CACHE_FILE_NAME, LAUNCH_MESSAGE, RUNTIME

logger = logging.getLogger(__name__)


def default_settings() -> Dict[str, Any]:
    return {
        "target_executable": RUNTIME,
        "cache_file": CACHE_FILE_NAME,
        "runner": [],                     # command prefix, e.g. ["wine"]
        "notification_timeout_ms": 5000,
        "recheck_interval_ms": 1000,      # how often the folder is re-checked
        "launch_message": LAUNCH_MESSAGE,
    }


def _valid(key: str, value: Any, default: Any) -> bool:
    if key == "runner":
        return isinstance(value, list) and all(isinstance(part, str) and part for part in value)
    if isinstance(default, int):
        # bool is an int subclass; reject it for numeric settings
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if isinstance(default, str):
        return isinstance(value, str) and value != ""
    return True


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Load settings from disk (or fall back to defaults)."""
    d = default_settings()
    if not settings_path.exists():
        return d
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring settings file %s: %s", settings_path, e)
        return d
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", settings_path)
        return d
    if isinstance(data.get("runner"), str):
        data["runner"] = [data["runner"]] if data["runner"] else []
    for k in d:
        if k not in data:
            data[k] = d[k]
        elif not _valid(k, data[k], d[k]):
            logger.warning("Ignoring setting %s=%r in %s, using %r", k, data[k], settings_path, d[k])
            data[k] = d[k]
    return data


def save_settings(settings_path: Path, settings: Dict[str, Any]) -> None:
    """Persist settings to disk."""
    settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
