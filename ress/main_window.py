#===============================================================================
#  RE:[SSO] Launcher | ress/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Single-screen launcher window:
#    - Logo + headings + path field
#    - Status line: Waiting / not found / ready to launch
#    - Launch button (only when the runtime is found), Cancel while running
#  The runtime is waited on from a worker thread; the result comes back to
#  the GUI thread through LaunchSignals.
#===============================================================================

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from PySide6.QtCore import Qt, QObject, QTimer, Signal, Slot
from PySide6.QtGui import QFont, QIcon, QPixmap
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .cache import load_cache, save_cache
from .constants import (
    APP_TITLE,
    DARK_BG,
    LOGO_PATH,
    LOGO_SIZE,
    SUBTITLE_FONT_PT,
    TEXT_COLOR,
    TITLE_FONT_PT,
    WINDOW_SIZE,
)
from .launcher import ProcessLauncher
from .models import LaunchResult, PathState
from .notifier import Notifier
from .path_checker import status_text
from .settings import default_settings
from .state import SessionState

logger = logging.getLogger(__name__)


class LaunchSignals(QObject):
    notify = Signal(str, str)
    finished = Signal(object)  # LaunchResult


def _heading(text: str, point_size: int) -> QLabel:
    label = QLabel(text)
    label.setAlignment(Qt.AlignHCenter)
    f = QFont()
    f.setPointSize(point_size)
    label.setFont(f)
    return label


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.setWindowTitle(APP_TITLE)

        self.settings = settings if settings is not None else default_settings()
        self.cache_path = Path(self.settings["cache_file"])
        self.state = SessionState(target=self.settings["target_executable"])

        self._launcher: Optional[ProcessLauncher] = None
        self._launch_thread: Optional[threading.Thread] = None
        self.last_result: Optional[LaunchResult] = None

        self.logo = QPixmap(str(LOGO_PATH))
        if self.logo.isNull():
            logger.warning("Logo image missing or unreadable: %s", LOGO_PATH)
        else:
            self.setWindowIcon(QIcon(self.logo))

        self.notifier = Notifier(
            APP_TITLE,
            icon=self.windowIcon(),
            timeout_ms=int(self.settings["notification_timeout_ms"]),
            parent=self,
        )

        self._signals = LaunchSignals()
        self._signals.notify.connect(self._show_notification)
        self._signals.finished.connect(self._on_launch_finished)

        self._build_ui()

        cached = load_cache(self.cache_path, notify=self.notifier.notify)
        if cached:
            logger.info("Restored cached path %r", cached)
        self.path_edit.setText(cached)
        self.state.set_path(cached)

        # Folder contents can change while the window is open.
        self.recheck_timer = QTimer(self)
        self.recheck_timer.setInterval(int(self.settings["recheck_interval_ms"]))
        self.recheck_timer.timeout.connect(self.refresh)
        self.recheck_timer.start()

        self.refresh()

    def _build_ui(self) -> None:
        self.setFixedSize(WINDOW_SIZE)
        self.setStyleSheet(f"""
        QMainWindow {{ background: {DARK_BG}; }}
        QLabel {{ color: {TEXT_COLOR}; }}
        QLineEdit {{ color: {TEXT_COLOR}; background: #101010; border: 1px solid #2a2a2a; padding: 3px; }}
        QPushButton {{
            color: {TEXT_COLOR};
            background: #2a2a2a;
            border: 1px solid #3a3a3a;
            padding: 4px 14px;
        }}
        QPushButton:hover {{ background: #333; }}
        QPushButton:pressed {{ background: #3a3a3a; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(10, 6, 10, 6)
        layout.setSpacing(4)

        self.logo_label = QLabel()
        self.logo_label.setAlignment(Qt.AlignHCenter)
        if not self.logo.isNull():
            self.logo_label.setPixmap(
                self.logo.scaled(LOGO_SIZE, Qt.KeepAspectRatio, Qt.SmoothTransformation)
            )
        layout.addWidget(self.logo_label)

        layout.addWidget(_heading(APP_TITLE, TITLE_FONT_PT))
        layout.addWidget(_heading("Enter the path to the old game files.", SUBTITLE_FONT_PT))

        self.path_edit = QLineEdit()
        self.path_edit.textChanged.connect(self._on_path_edited)
        layout.addWidget(self.path_edit)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignHCenter)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        self.btn_launch = QPushButton("Launch")
        self.btn_launch.clicked.connect(self.launch)
        buttons.addWidget(self.btn_launch)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self.cancel_launch)
        buttons.addWidget(self.btn_cancel)
        buttons.addStretch(1)
        layout.addLayout(buttons)

        self.result_label = QLabel()
        self.result_label.setAlignment(Qt.AlignHCenter)
        layout.addWidget(self.result_label)

    # ----------------------------
    # State -> widgets
    # ----------------------------
    def _on_path_edited(self, text: str) -> None:
        self.state.set_path(text)
        self.refresh()

    def refresh(self) -> PathState:
        path_state = self.state.path_state()
        self.status_label.setText(status_text(self.state.path, path_state, self.state.target))

        launching = self.state.launching
        self.btn_launch.setVisible(path_state is PathState.READY)
        self.btn_launch.setEnabled(not launching)
        self.btn_cancel.setVisible(launching)
        self.path_edit.setReadOnly(launching)
        return path_state

    # ----------------------------
    # Launch
    # ----------------------------
    def launch(self) -> None:
        if not self.state.can_launch():
            self.refresh()
            return

        path = self.state.path
        target = self.state.target
        save_cache(path, self.cache_path, notify=self.notifier.notify)
        self.notifier.notify(target, self.settings["launch_message"])

        self._launcher = ProcessLauncher(
            path,
            target,
            notify=self._signals.notify.emit,
            runner=self.settings["runner"],
        )
        self.state.launching = True
        self.result_label.setText(f"Running {target}...")
        self.refresh()

        launcher = self._launcher

        def worker():
            try:
                result = launcher.run()
            except Exception as e:
                logger.exception("Launch of %s failed", target)
                result = LaunchResult(path, target, error=str(e))
            self._signals.finished.emit(result)

        self._launch_thread = threading.Thread(target=worker, daemon=True)
        self._launch_thread.start()

    def cancel_launch(self) -> None:
        if self._launcher is not None and self.state.launching:
            self.result_label.setText("Cancelling...")
            self._launcher.cancel()

    @Slot(str, str)
    def _show_notification(self, title: str, body: str) -> None:
        self.notifier.notify(title, body)

    @Slot(object)
    def _on_launch_finished(self, result: LaunchResult) -> None:
        if result.ok:
            logger.info("Launch finished: %s", result.describe())
        else:
            logger.warning("Launch finished: %s", result.describe())
        self.last_result = result
        self.state.launching = False
        self._launcher = None
        self.result_label.setText(result.describe())
        self.refresh()

    def closeEvent(self, event):
        if self.state.launching:
            logger.info("Window closed while %s is running; terminating it", self.state.target)
            self.cancel_launch()
        self.recheck_timer.stop()
        self.notifier.close()
        super().closeEvent(event)
