from PyQt5.QtCore import QObject, QRectF, Qt, pyqtSignal
from PyQt5.QtWidgets import QGraphicsScene

from core.animation import AnimationToolkit


class BaseStructureView(QObject):
    """
    Base class for structure views, providing:
    - a QGraphicsScene owned by the view
    - the animation toolkit and references to running animations
    - interaction locking so controllers ignore input while animating
    """

    interactionLocked = pyqtSignal(bool)

    def __init__(self, global_ctrl):
        super().__init__()
        self.scene = QGraphicsScene()
        self.scene.setSceneRect(-200, -200, 1200, 600)
        self.anim = AnimationToolkit(global_ctrl)
        self._locked = False
        self._running = []
        self._canvas = None
        self._base_scene_rect = QRectF(self.scene.sceneRect())
        self._max_view_scale = 1.0

    def bind_canvas(self, view):
        self._canvas = view
        if view:
            view.setScene(self.scene)
            view.resetTransform()

    def fit_view(self, padding=120):
        """Grow the scene rect around the items and scale the canvas to show it."""
        items_rect = self.scene.itemsBoundingRect()
        if items_rect.isNull():
            target_rect = QRectF(self._base_scene_rect)
        else:
            target_rect = items_rect.adjusted(-padding, -padding, padding, padding)
            target_rect = target_rect.united(self._base_scene_rect)
        self.scene.setSceneRect(target_rect)

        if not self._canvas:
            return
        self._canvas.fitInView(target_rect, Qt.KeepAspectRatio)
        # do not blow up a short chain beyond its natural size
        if self._canvas.transform().m11() > self._max_view_scale:
            self._canvas.resetTransform()
            self._canvas.centerOn(target_rect.center())

    def lock_interactions(self):
        if not self._locked:
            self._locked = True
            self.interactionLocked.emit(True)

    def unlock_interactions(self):
        if self._locked:
            self._locked = False
            self.interactionLocked.emit(False)

    def stop_animations(self):
        for animation in list(self._running):
            animation.stop()
        self._running.clear()
        self.unlock_interactions()

    def _track_animation(self, animation, finalizer=None):
        """
        Keeps references so that animations are not garbage collected.
        Optionally runs a callback after completion.
        """
        if animation is None:
            if finalizer:
                finalizer()
            return

        self.lock_interactions()
        self._running.append(animation)

        def _cleanup():
            if animation in self._running:
                self._running.remove(animation)
            if not self._running:
                self.unlock_interactions()
            if finalizer:
                finalizer()

        animation.finished.connect(_cleanup)
        animation.start()
