"""Interactive PySide6 window for the gasket.

Releasing Space runs one subdivision step; Escape or closing the window
quits. The widget repaints the driver's circle snapshot at ``FRAME_RATE``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .. import settings
from ..core import GasketConfig, GasketDriver

log = logging.getLogger("apollogasket.gui")

try:
    from PySide6.QtCore import QPointF, Qt, QTimer
    from PySide6.QtGui import QColor, QPainter, QPen
    from PySide6.QtWidgets import QApplication, QWidget

    HAS_GUI = True
except Exception:  # pragma: no cover - optional GUI deps missing
    HAS_GUI = False
    QWidget = object  # type: ignore


class GasketWidget(QWidget):
    """Square canvas drawing every accepted circle as a transparent outline."""

    def __init__(self, driver: GasketDriver, parent=None) -> None:
        super().__init__(parent)
        self.driver = driver
        self._circles = driver.snapshot()
        size = int(driver.config.canvas_size)
        self.setFixedSize(size, size)
        self.setWindowTitle(settings.WINDOW_TITLE)
        self.setFocusPolicy(Qt.StrongFocus)

        self._pen = QPen(QColor(settings.STROKE_COLOR))
        self._pen.setWidthF(settings.STROKE_WIDTH)

        self._timer = QTimer(self)
        self._timer.setInterval(int(1000 / settings.FRAME_RATE))
        self._timer.timeout.connect(self.update)
        self._timer.start()

    def subdivide(self) -> int:
        """Advance the driver one level and refresh the drawn snapshot."""
        added = self.driver.step()
        self._circles = self.driver.snapshot()
        self.setWindowTitle(f"{settings.WINDOW_TITLE} ({len(self._circles)} circles)")
        self.update()
        return len(added)

    def keyReleaseEvent(self, event) -> None:
        if event.isAutoRepeat():
            return
        k = event.key()
        if k == Qt.Key_Space:
            if self.driver.exhausted:
                log.info("Gasket exhausted; nothing left to subdivide")
            else:
                self.subdivide()
        elif k == Qt.Key_Escape:
            self.close()
        else:
            super().keyReleaseEvent(event)

    def paintEvent(self, event) -> None:
        qp = QPainter(self)
        qp.setRenderHint(QPainter.Antialiasing)
        qp.fillRect(0, 0, self.width(), self.height(), QColor(settings.BACKGROUND_COLOR))
        qp.setPen(self._pen)
        qp.setBrush(Qt.NoBrush)
        for circle in self._circles:
            x, y = circle.center
            r = circle.radius
            qp.drawEllipse(QPointF(x, y), r, r)
        qp.end()


def main(driver: Optional[GasketDriver] = None) -> int:  # pragma: no cover - GUI integration
    """Open the viewer window; returns the Qt exit code."""
    if not HAS_GUI:
        raise RuntimeError("PySide6 not available")

    app = QApplication.instance() or QApplication([])
    w = GasketWidget(driver or GasketDriver(GasketConfig()))
    w.show()
    log.info("Press Space to subdivide, Escape to quit")
    return int(app.exec())


if __name__ == "__main__":  # pragma: no cover - script mode
    raise SystemExit(main())
