#===============================================================================
#  RE:[SSO] Launcher | cache.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Single-value cache of the last launched game folder (plain UTF-8 file).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .constants import CACHE_FILE_NAME

logger = logging.getLogger(__name__)

NotifyFn = Callable[[str, str], None]

CACHE_TITLE = "Cache"


def _report(notify: Optional[NotifyFn], message: str) -> None:
    logger.warning(message)
    if notify is not None:
        notify(CACHE_TITLE, message)


def save_cache(text: str, cache_path: Path = Path(CACHE_FILE_NAME), notify: Optional[NotifyFn] = None) -> bool:
    """Overwrite the cache file with `text`.

    Failures are logged and reported through `notify`; the caller carries on.
    """
    try:
        # newline="" keeps the value byte-for-byte (no \n -> \r\n on Windows)
        with open(cache_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        _report(notify, f"Could not write cache file '{cache_path}': {e}")
        return False
    logger.debug("Cached path %r in %s", text, cache_path)
    return True


def load_cache(cache_path: Path = Path(CACHE_FILE_NAME), notify: Optional[NotifyFn] = None) -> str:
    """Return the cached text, or "" when there is none or it can't be read."""
    if not Path(cache_path).is_file():
        return ""
    try:
        with open(cache_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        _report(notify, f"Could not read cache file '{cache_path}': {e}")
        return ""
