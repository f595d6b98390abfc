"""Tests for LinkedListController driven through its slots on an offscreen QApplication."""

import pytest

from core.global_ctrl import GlobalController


@pytest.fixture
def ctrl(qapp):
    from linklist.sl_ctrl import LinkedListController

    controller = LinkedListController(GlobalController(speed=3.0))
    controller.messages = []
    controller.global_ctrl.messageLogged.connect(controller.messages.append)
    yield controller
    controller.view.stop_animations()


def values(ctrl):
    return [node["value"] for node in ctrl.model.snapshot()]


def insert_last(ctrl, text):
    ctrl.insert_value_edit.setText(text)
    ctrl._on_insert_last()


def test_insert_buttons_update_model(ctrl):
    insert_last(ctrl, "2")
    ctrl.insert_value_edit.setText("1")
    ctrl._on_insert_first()
    ctrl.insert_value_edit.setText("hello")
    ctrl.insert_index_spin.setValue(1)
    ctrl._on_insert_at()
    assert values(ctrl) == [1, "hello", 2]
    assert ctrl.messages[-1] == "insert_at(1, 'hello') → size 3"


def test_numeric_text_is_coerced(ctrl):
    insert_last(ctrl, "2.5")
    insert_last(ctrl, "7")
    assert values(ctrl) == [2.5, 7]


def test_blank_value_is_rejected(ctrl):
    insert_last(ctrl, "   ")
    assert ctrl.model.length == 0
    assert "NullElementError" in ctrl.messages[-1]


def test_remove_first_on_empty_list_is_reported(ctrl):
    ctrl._on_remove_first()
    assert "EmptyListError" in ctrl.messages[-1]
    assert ctrl.model.length == 0


def test_out_of_range_index_is_reported(ctrl):
    insert_last(ctrl, "1")
    ctrl.query_index_spin.setValue(ctrl.query_index_spin.maximum())
    assert ctrl.query_index_spin.value() == 1
    ctrl._on_get()
    assert "ListIndexError" in ctrl.messages[-1]

    ctrl.insert_index_spin.setValue(-1)
    ctrl._on_insert_at()
    assert "ListIndexError" in ctrl.messages[-1]
    assert values(ctrl) == [1]


def test_remove_and_query_scenario(ctrl):
    for text in ("1", "2", "3"):
        insert_last(ctrl, text)

    ctrl.remove_index_spin.setValue(1)
    ctrl._on_remove_at()
    assert values(ctrl) == [1, 3]
    assert ctrl.messages[-1] == "remove_at(1) returned 2, size 2"

    ctrl.query_value_edit.setText("3")
    ctrl._on_index_of()
    assert ctrl.messages[-1] == "index_of(3) → 1"

    ctrl.remove_value_edit.setText("9")
    ctrl._on_remove_value()
    assert ctrl.messages[-1] == "remove(9) → False"
    assert values(ctrl) == [1, 3]


def test_get_first_and_last(ctrl):
    for text in ("a", "b"):
        insert_last(ctrl, text)
    ctrl._on_get_first()
    assert ctrl.messages[-1] == "get_first() → 'a'"
    ctrl._on_get_last()
    assert ctrl.messages[-1] == "get_last() → 'b'"


def test_iterator_steps_and_exhausts(ctrl):
    for text in ("1", "2"):
        insert_last(ctrl, text)
    ctrl._on_new_iterator()
    ctrl._on_iterator_next()
    ctrl._on_iterator_next()
    assert ctrl.messages[-2:] == ["next() → 1", "next() → 2"]
    assert ctrl.iter_state_label.text() == "has_next() = False"

    ctrl._on_iterator_next()
    assert "exhausted" in ctrl.messages[-1]


def test_iterator_is_invalidated_by_mutation(ctrl):
    insert_last(ctrl, "1")
    ctrl._on_new_iterator()
    insert_last(ctrl, "2")
    ctrl._on_iterator_next()
    assert "StaleIteratorError" in ctrl.messages[-1]
    assert ctrl.iter_state_label.text() == "no iterator"


def test_clear_resets_everything(ctrl):
    insert_last(ctrl, "1")
    ctrl._on_clear()
    assert ctrl.model.length == 0
    assert ctrl.view.order == []
    assert ctrl.remove_index_spin.maximum() == 0


def test_view_follows_model_after_interrupted_animations(ctrl):
    for text in ("1", "2", "3"):
        insert_last(ctrl, text)
    ctrl._on_remove_last()
    ctrl.view.sync(ctrl.model.snapshot())
    assert ctrl.view.order == [node["id"] for node in ctrl.model.snapshot()]
    assert len(ctrl.view.arrow_items) == 1
