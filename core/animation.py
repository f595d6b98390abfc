from PyQt5.QtCore import (
    QEasingCurve,
    QParallelAnimationGroup,
    QPropertyAnimation,
    QSequentialAnimationGroup,
    QVariantAnimation,
)
from PyQt5.QtGui import QColor


class AnimationToolkit:
    """
    Factory for the animations the list view plays. Every duration goes
    through the GlobalController so the speed slider affects all of them.
    """

    def __init__(self, global_ctrl):
        self.global_ctrl = global_ctrl

    def _duration(self, base_ms):
        return self.global_ctrl.scale_duration(base_ms)

    def _property(self, item, name, end, duration, start=None, easing=QEasingCurve.InOutQuad):
        anim = QPropertyAnimation(item, name)
        anim.setDuration(self._duration(duration))
        if start is not None:
            anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(easing)
        return anim

    def _color_step(self, setter, start_color, end_color, duration):
        anim = QVariantAnimation()
        anim.setDuration(self._duration(duration))
        anim.setStartValue(QColor(start_color))
        anim.setEndValue(QColor(end_color))
        anim.setEasingCurve(QEasingCurve.InOutQuad)

        def _update(value):
            if isinstance(value, QColor):
                setter(value)

        anim.valueChanged.connect(_update)
        return anim

    def move_item(self, item, end_pos, duration=700):
        return self._property(item, b"pos", end_pos, duration, easing=QEasingCurve.InOutCubic)

    def fade_item(self, item, start=0.0, end=1.0, duration=600):
        return self._property(item, b"opacity", end, duration, start=start)

    def flash_brush(self, setter, start_color, end_color, duration=400, loops=1):
        """
        Blend ``start_color`` → ``end_color`` → ``start_color`` ``loops`` times.
        ``setter`` receives each intermediate QColor (e.g. node.setFillColor).
        """
        seq = QSequentialAnimationGroup()
        for _ in range(max(1, loops)):
            seq.addAnimation(self._color_step(setter, start_color, end_color, duration))
            seq.addAnimation(self._color_step(setter, end_color, start_color, duration))
        return seq

    def pause(self, duration=150):
        pause = QVariantAnimation()
        pause.setDuration(self._duration(duration))
        pause.setStartValue(0)
        pause.setEndValue(0)
        return pause

    @staticmethod
    def parallel(*animations):
        group = QParallelAnimationGroup()
        for anim in animations:
            if anim:
                group.addAnimation(anim)
        return group

    @staticmethod
    def sequential(*animations):
        group = QSequentialAnimationGroup()
        for anim in animations:
            if anim:
                group.addAnimation(anim)
        return group
