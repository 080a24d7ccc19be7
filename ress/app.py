#===============================================================================
#  RE:[SSO] Launcher | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Entry point: command line, logging, settings and the Qt event loop.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from .constants import APP_TITLE, SETTINGS_FILE_NAME
from .main_window import MainWindow
from .settings import load_settings, save_settings

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="ress", description=APP_TITLE)
    ap.add_argument("--settings", type=Path, default=Path(SETTINGS_FILE_NAME),
                    help=f"settings JSON file (default: ./{SETTINGS_FILE_NAME})")
    ap.add_argument("--debug", action="store_true", help="verbose logging")
    ap.add_argument("--write-settings", action="store_true",
                    help="write the effective settings to the settings file and exit")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    settings = load_settings(args.settings)
    logger.debug("Settings: %s", settings)

    if args.write_settings:
        save_settings(args.settings, settings)
        logger.info("Wrote settings to %s", args.settings)
        return 0

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_TITLE)
    w = MainWindow(settings)
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
