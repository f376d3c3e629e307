"""
Release Watcher
Application-wide listener for mouse-button releases.

A drag may end with the pointer far outside the slider, so the release has to
be observed on the QApplication rather than on the slider widget.
"""
import logging
from typing import Callable

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QApplication

logger = logging.getLogger(__name__)


class ReleaseWatcher(QObject):
    def __init__(self, on_release: Callable[[], None], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._on_release = on_release
        self._app: QApplication | None = None

    @property
    def is_installed(self) -> bool:
        return self._app is not None

    def install(self) -> None:
        """Register as an application event filter. Repeated calls are no-ops."""
        if self._app is not None:
            return
        app = QApplication.instance()
        if app is None:
            raise RuntimeError("ReleaseWatcher requires a running QApplication.")
        app.installEventFilter(self)
        self._app = app
        logger.debug("Release watcher installed")

    def remove(self) -> None:
        if self._app is None:
            return
        self._app.removeEventFilter(self)
        self._app = None
        logger.debug("Release watcher removed")

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.MouseButtonRelease:
            self._on_release()
        # Never consume the event
        return False
