from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPainter, QWheelEvent
from PyQt5.QtWidgets import QGraphicsView

ZOOM_STEP = 1.1


class CustomGraphicsView(QGraphicsView):
    """
    Canvas for the chain, which grows horizontally:
    - normal wheel: horizontal panning along the chain
    - Ctrl + wheel: zoom around the cursor
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

    def wheelEvent(self, event: QWheelEvent):
        delta = event.angleDelta().y()
        if event.modifiers() & Qt.ControlModifier:
            factor = ZOOM_STEP if delta > 0 else 1 / ZOOM_STEP
            self.scale(factor, factor)
        else:
            bar = self.horizontalScrollBar()
            bar.setValue(bar.value() - int(delta * 0.5))
        event.accept()
