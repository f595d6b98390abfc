import logging
import os
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from core.global_ctrl import GlobalController
from linklist.sl_ctrl import LinkedListController
from widgets.graphics_view import CustomGraphicsView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main window: chain canvas and operation panel on the left, operation log on the right."""

    def __init__(self, global_ctrl: GlobalController = None):
        super().__init__()
        self.setWindowTitle("Recursive List Visualizer")
        self.resize(1280, 760)

        self.global_ctrl = global_ctrl or GlobalController()
        self.controller = LinkedListController(self.global_ctrl)

        self._build_ui()
        self._connect_signals()

        self.controller.on_activate(self.graphics_view)

    def _build_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QHBoxLayout(central)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(8)

        left_panel = QWidget()
        left_layout = QVBoxLayout(left_panel)
        left_layout.setContentsMargins(0, 0, 0, 0)
        left_layout.setSpacing(6)

        self.graphics_view = CustomGraphicsView()
        left_layout.addWidget(self.graphics_view, 1)

        speed_layout = QHBoxLayout()
        self.speed_value_label = QLabel(self._speed_text(self.global_ctrl.speed))
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(50, 300)  # maps to 0.5x – 3x
        self.speed_slider.setValue(int(round(self.global_ctrl.speed * 100)))
        speed_layout.addWidget(QLabel("Animation Speed"))
        speed_layout.addWidget(self.speed_slider, 1)
        speed_layout.addWidget(self.speed_value_label)
        left_layout.addLayout(speed_layout)

        left_layout.addWidget(self.controller.build_panel(), 0)

        right_panel = QWidget()
        right_layout = QVBoxLayout(right_panel)
        right_layout.setContentsMargins(0, 0, 0, 0)
        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setPlaceholderText("Operations and their results appear here.")
        right_layout.addWidget(QLabel("Operation Log"))
        right_layout.addWidget(self.log_view, 1)

        root_layout.addWidget(left_panel, 14)
        root_layout.addWidget(right_panel, 6)

    def _connect_signals(self):
        self.speed_slider.valueChanged.connect(self._on_speed_slider_changed)
        self.global_ctrl.messageLogged.connect(self.log_view.appendPlainText)

    def _on_speed_slider_changed(self, value):
        speed = value / 100.0
        self.speed_value_label.setText(self._speed_text(speed))
        self.global_ctrl.set_speed(speed)

    @staticmethod
    def _speed_text(speed):
        return f"{speed:.1f}×"


def configure_logging():
    level_name = os.environ.get("LISTVIZ_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main():
    configure_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    logger.info("Visualizer started")
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
