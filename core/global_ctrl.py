import logging
import os

from PyQt5.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

MIN_SPEED = 0.5
MAX_SPEED = 3.0


class GlobalController(QObject):
    """
    Runtime settings shared by every view and controller:
    - playback speed multiplier, used to scale animation durations
    - operation log, broadcast so the main window can display it
    """

    speedChanged = pyqtSignal(float)
    messageLogged = pyqtSignal(str)

    def __init__(self, speed: float = None):
        super().__init__()
        if speed is None:
            speed = self._speed_from_env()
        self._speed = self._clamp(speed)

    @property
    def speed(self) -> float:
        return self._speed

    def set_speed(self, value: float):
        """Clamp and broadcast speed multiplier (0.5× – 3×)."""
        value = self._clamp(value)
        if abs(value - self._speed) > 1e-3:
            self._speed = value
            self.speedChanged.emit(self._speed)

    def scale_duration(self, base_ms: int) -> int:
        """Higher speed → shorter duration."""
        if self._speed <= 0:
            return base_ms
        return max(1, int(base_ms / self._speed))

    def log(self, message: str):
        self.messageLogged.emit(message)

    @staticmethod
    def _clamp(value: float) -> float:
        return max(MIN_SPEED, min(MAX_SPEED, value))

    @staticmethod
    def _speed_from_env() -> float:
        raw = os.environ.get("LISTVIZ_SPEED")
        if not raw:
            return 1.0
        try:
            return float(raw)
        except ValueError:
            logger.warning("Ignoring invalid LISTVIZ_SPEED=%r", raw)
            return 1.0
