"""Pytest configuration and fixtures."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for every GUI test, rendered offscreen."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def numbers():
    """[1, 2, 3] built with insert_last."""
    from structures.recursive_list import RecursiveList

    lst = RecursiveList()
    for value in (1, 2, 3):
        lst.insert_last(value)
    return lst
