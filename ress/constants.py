#===============================================================================
#  RE:[SSO] Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for window sizing, theme, and file naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSize

APP_TITLE = "RE:[SSO] Launcher"
RUNTIME = "PXStudioRuntimeMMO.exe"
CACHE_FILE_NAME = "cache.dat"
SETTINGS_FILE_NAME = "launcher_settings.json"

LAUNCH_MESSAGE = "Launching, please open POS.22.exe as soon as you see the loading screen!"
WAITING_TEXT = "Waiting..."

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
LOGO_PATH = ASSETS_DIR / "logo.png"

# Fixed, non-resizable window
WINDOW_SIZE = QSize(520, 320)
LOGO_SIZE = QSize(424, 151)

TEXT_COLOR = "#FFFFFF"
DARK_BG = "#1b1b1b"
TITLE_FONT_PT = 42
SUBTITLE_FONT_PT = 22
