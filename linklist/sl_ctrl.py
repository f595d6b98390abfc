import logging
from contextlib import contextmanager

from PyQt5.QtWidgets import (
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from core.global_ctrl import GlobalController
from linklist.sl_model import LinkedListModel
from linklist.sl_view import LinkedListView
from structures.errors import ListError

logger = logging.getLogger(__name__)


class LinkedListController(QWidget):
    """
    Controller builds the operation panel and wires UI events -> model -> view.

    Errors raised by the list are caught here, written to the operation log
    and otherwise ignored; the list guarantees a rejected call changed nothing.
    """

    def __init__(self, global_ctrl: GlobalController):
        super().__init__()
        self.global_ctrl = global_ctrl
        self.model = LinkedListModel()
        self.view = LinkedListView(global_ctrl)
        self._iterator = None
        self._iter_position = 0
        self._iter_order = []

        self._build_inputs()
        self.panel = self._create_panel()

        self.view.interactionLocked.connect(self._on_lock_state)
        self._refresh_spins()

    # ---------- Panel UI ----------

    def _create_panel(self):
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)

        self.insert_first_btn = self._button("Insert First", self._on_insert_first)
        self.insert_last_btn = self._button("Insert Last", self._on_insert_last)
        self.insert_at_btn = self._button("Insert At", self._on_insert_at)
        insert_group = self._form_group(
            "Insert",
            [("Index:", self.insert_index_spin), ("Value:", self.insert_value_edit)],
            [self.insert_first_btn, self.insert_last_btn, self.insert_at_btn],
        )
        layout.addWidget(insert_group, 0, 0)

        self.remove_first_btn = self._button("Remove First", self._on_remove_first)
        self.remove_last_btn = self._button("Remove Last", self._on_remove_last)
        self.remove_at_btn = self._button("Remove At", self._on_remove_at)
        self.remove_value_btn = self._button("Remove Value", self._on_remove_value)
        remove_group = self._form_group(
            "Remove",
            [("Index:", self.remove_index_spin), ("Value:", self.remove_value_edit)],
            [self.remove_first_btn, self.remove_last_btn, self.remove_at_btn, self.remove_value_btn],
        )
        layout.addWidget(remove_group, 0, 1)

        self.get_first_btn = self._button("Get First", self._on_get_first)
        self.get_last_btn = self._button("Get Last", self._on_get_last)
        self.get_btn = self._button("Get", self._on_get)
        self.index_of_btn = self._button("Index Of", self._on_index_of)
        query_group = self._form_group(
            "Query",
            [("Index:", self.query_index_spin), ("Value:", self.query_value_edit)],
            [self.get_first_btn, self.get_last_btn, self.get_btn, self.index_of_btn],
        )
        layout.addWidget(query_group, 1, 0)

        self.new_iter_btn = self._button("New Iterator", self._on_new_iterator)
        self.next_btn = self._button("Next", self._on_iterator_next)
        self.clear_btn = self._button("Clear", self._on_clear)
        self.iter_state_label = QLabel("no iterator")
        iterate_group = self._form_group(
            "Iterate",
            [("State:", self.iter_state_label)],
            [self.new_iter_btn, self.next_btn, self.clear_btn],
        )
        layout.addWidget(iterate_group, 1, 1)

        layout.setRowStretch(2, 1)
        return container

    @staticmethod
    def _button(title, slot):
        button = QPushButton(title)
        button.clicked.connect(slot)
        return button

    @staticmethod
    def _form_group(title, rows, buttons):
        group = QGroupBox(title)
        group.setStyleSheet("QGroupBox { color: white; }")
        form = QFormLayout()
        form.setContentsMargins(12, 8, 12, 12)
        form.setSpacing(6)
        for label, widget in rows:
            form.addRow(label, widget)
        button_row = QHBoxLayout()
        button_row.setSpacing(6)
        for button in buttons:
            button_row.addWidget(button)
        outer = QVBoxLayout(group)
        outer.addLayout(form)
        outer.addLayout(button_row)
        return group

    def _build_inputs(self):
        self.insert_index_spin = QSpinBox()
        self.insert_value_edit = QLineEdit()
        self.insert_value_edit.setPlaceholderText("Value")

        self.remove_index_spin = QSpinBox()
        self.remove_value_edit = QLineEdit()
        self.remove_value_edit.setPlaceholderText("Value to remove")

        self.query_index_spin = QSpinBox()
        self.query_value_edit = QLineEdit()
        self.query_value_edit.setPlaceholderText("Value to find")

        # one past the valid range on purpose so bounds errors can be shown
        for spin in (self.insert_index_spin, self.remove_index_spin, self.query_index_spin):
            spin.setRange(-1, 0)

    def _refresh_spins(self):
        length = self.model.length
        self.insert_index_spin.setMaximum(length + 1)
        for spin in (self.remove_index_spin, self.query_index_spin):
            spin.setMaximum(length)

    def _all_buttons(self):
        return (
            self.insert_first_btn,
            self.insert_last_btn,
            self.insert_at_btn,
            self.remove_first_btn,
            self.remove_last_btn,
            self.remove_at_btn,
            self.remove_value_btn,
            self.get_first_btn,
            self.get_last_btn,
            self.get_btn,
            self.index_of_btn,
            self.new_iter_btn,
            self.next_btn,
            self.clear_btn,
        )

    # ---------- Controller lifecycle ----------

    def on_activate(self, graphics_view):
        self.view.bind_canvas(graphics_view)
        self.view.fit_view()

    def build_panel(self):
        return self.panel

    # ---------- Insertion ----------

    def _on_insert_first(self):
        value = self._coerce_value(self.insert_value_edit.text())
        with self._guard("insert_first"):
            node_id = self.model.insert_first(value)
            self._after_insert(node_id, 0, f"insert_first({value!r})")

    def _on_insert_last(self):
        value = self._coerce_value(self.insert_value_edit.text())
        with self._guard("insert_last"):
            index = self.model.length
            node_id = self.model.insert_last(value)
            self._after_insert(node_id, index, f"insert_last({value!r})")

    def _on_insert_at(self):
        index = self.insert_index_spin.value()
        value = self._coerce_value(self.insert_value_edit.text())
        with self._guard(f"insert_at({index})"):
            node_id = self.model.insert_at(index, value)
            self._after_insert(node_id, index, f"insert_at({index}, {value!r})")

    def _after_insert(self, node_id, index, description):
        self.view.animate_insert(self.model.snapshot(), node_id, index)
        self._after_mutation(f"{description} → size {self.model.length}")

    # ---------- Removal ----------

    def _on_remove_first(self):
        with self._guard("remove_first"):
            removed = self.model.remove_first()
            self._after_remove(removed, 0, "remove_first()")

    def _on_remove_last(self):
        with self._guard("remove_last"):
            index = self.model.length - 1
            removed = self.model.remove_last()
            self._after_remove(removed, index, "remove_last()")

    def _on_remove_at(self):
        index = self.remove_index_spin.value()
        with self._guard(f"remove_at({index})"):
            removed = self.model.remove_at(index)
            self._after_remove(removed, index, f"remove_at({index})")

    def _on_remove_value(self):
        value = self._coerce_value(self.remove_value_edit.text())
        with self._guard("remove"):
            removed = self.model.remove_value(value)
            if removed is None:
                self.view.animate_search(-1)
                self._log(f"remove({value!r}) → False")
                return
            self._after_remove(removed, removed["index"], f"remove({value!r}) → True;")

    def _after_remove(self, removed, index, description):
        self.view.animate_delete(self.model.snapshot(), removed["id"], index)
        self._after_mutation(f"{description} returned {removed['value']!r}, size {self.model.length}")

    def _after_mutation(self, message):
        self.view.hide_cursor()
        self._refresh_spins()
        self._log(message)

    # ---------- Queries ----------

    def _on_get_first(self):
        with self._guard("get_first"):
            found = self.model.get_first()
            self.view.animate_lookup(0)
            self._log(f"get_first() → {found['value']!r}")

    def _on_get_last(self):
        with self._guard("get_last"):
            found = self.model.get_last()
            self.view.animate_lookup(self.model.length - 1)
            self._log(f"get_last() → {found['value']!r}")

    def _on_get(self):
        index = self.query_index_spin.value()
        with self._guard(f"get({index})"):
            found = self.model.get(index)
            self.view.animate_lookup(index)
            self._log(f"get({index}) → {found['value']!r}")

    def _on_index_of(self):
        value = self._coerce_value(self.query_value_edit.text())
        with self._guard("index_of"):
            index = self.model.index_of(value)
            self.view.animate_search(index)
            self._log(f"index_of({value!r}) → {index}")

    # ---------- Iteration ----------

    def _on_new_iterator(self):
        self._iterator = self.model.iterator()
        self._iter_order = [info["id"] for info in self.model.snapshot()]
        self._iter_position = 0
        self._show_iterator_state()
        self._log("iterator() created at head")

    def _on_iterator_next(self):
        if self._iterator is None:
            self._log("next(): create an iterator first")
            return
        try:
            cell = self._iterator.next()
        except StopIteration:
            logger.warning("next() called on an exhausted iterator")
            self._log("next() ✗ iterator exhausted")
            return
        except ListError as exc:
            self._reject("next()", exc)
            self._iterator = None
            self.view.hide_cursor()
            self.iter_state_label.setText("no iterator")
            return
        self._iter_position += 1
        self._show_iterator_state()
        self._log(f"next() → {cell.value!r}")

    def _show_iterator_state(self):
        if self._iter_position < len(self._iter_order):
            self.view.show_cursor(self._iter_order[self._iter_position])
        else:
            self.view.show_cursor(None)
        self.iter_state_label.setText(f"has_next() = {self._iterator.has_next()}")

    # ---------- Misc ----------

    def _on_clear(self):
        self.model.clear()
        self.view.reset()
        self._iterator = None
        self.iter_state_label.setText("no iterator")
        self._refresh_spins()
        self._log("cleared")

    def _on_lock_state(self, locked):
        for button in self._all_buttons():
            button.setDisabled(locked)

    @contextmanager
    def _guard(self, operation):
        try:
            yield
        except ListError as exc:
            self._reject(operation, exc)

    def _reject(self, operation, exc):
        logger.warning("%s rejected: %s", operation, exc)
        self._log(f"{operation} ✗ {type(exc).__name__}: {exc}")

    def _log(self, message):
        logger.info(message)
        self.global_ctrl.log(message)

    # ---------- Helpers ----------

    @staticmethod
    def _coerce_value(value):
        """Empty input means "no element"; numbers become int/float."""
        value = value.strip() if isinstance(value, str) else value
        if value is None or value == "":
            return None
        try:
            return int(value)
        except ValueError:
            try:
                return float(value)
            except ValueError:
                return value

