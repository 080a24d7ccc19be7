#===============================================================================
#  RE:[SSO] Launcher | notifier.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Best-effort desktop notifications through the system tray balloon.
#  Failing to show one is logged and never reaches the caller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication, QStyle, QSystemTrayIcon

from .constants import APP_TITLE

logger = logging.getLogger(__name__)


class Notifier:
    """Shows title + body notifications. Must be used from the GUI thread."""

    def __init__(self, app_name: str = APP_TITLE, icon: Optional[QIcon] = None,
                 timeout_ms: int = 5000, parent=None):
        self.app_name = app_name
        self.timeout_ms = timeout_ms
        self._tray: Optional[QSystemTrayIcon] = None

        if not QSystemTrayIcon.isSystemTrayAvailable():
            logger.info("System tray not available; notifications will only be logged")
            return

        if icon is None or icon.isNull():
            icon = QApplication.style().standardIcon(QStyle.SP_ComputerIcon)
        self._tray = QSystemTrayIcon(icon, parent)
        self._tray.setToolTip(app_name)
        self._tray.show()

    @property
    def available(self) -> bool:
        return self._tray is not None and self._tray.supportsMessages()

    def notify(self, title: str, body: str) -> None:
        logger.info("Notification: %s - %s", title, body)
        if not self.available:
            return
        try:
            self._tray.showMessage(title, body, QSystemTrayIcon.Information, self.timeout_ms)
        except Exception as e:
            logger.warning("Could not display notification '%s': %s", title, e)

    def close(self) -> None:
        if self._tray is not None:
            self._tray.hide()
            self._tray = None
