import logging

from ress.notifier import Notifier


class _BrokenTray:
    """Stands in for a tray icon whose balloon can't be shown."""

    def __init__(self):
        self.hidden = False

    def supportsMessages(self):
        return True

    def showMessage(self, *args):
        raise RuntimeError("balloon refused")

    def hide(self):
        self.hidden = True


def test_without_tray_messages_are_only_logged(qapp, caplog):
    # the offscreen platform has no system tray
    n = Notifier("RE:[SSO] Launcher")
    assert not n.available
    with caplog.at_level(logging.INFO, logger="ress.notifier"):
        n.notify("PXStudioRuntimeMMO.exe", "Launching")
    assert "Launching" in caplog.text
    n.close()


def test_display_failure_is_logged_and_swallowed(qapp, caplog):
    n = Notifier("RE:[SSO] Launcher")
    tray = _BrokenTray()
    n._tray = tray
    assert n.available
    with caplog.at_level(logging.WARNING, logger="ress.notifier"):
        n.notify("Cache", "Could not write cache file")
    assert "balloon refused" in caplog.text

    n.close()
    assert tray.hidden
    assert not n.available
    n.notify("after close", "still fine")
