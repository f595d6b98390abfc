import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from structures.list_iterator import ListIterator
from structures.recursive_list import RecursiveList


@dataclass
class Cell:
    """List element tagged with a stable id for the view; compares by value only."""

    value: Any
    id: int = field(default=-1, compare=False)

    def as_dict(self) -> Dict:
        return {"id": self.id, "value": self.value}


class LinkedListModel:
    """
    Data side of the visualizer: a RecursiveList of id-tagged cells.
    Keeps no Qt objects so the list semantics stay testable on their own.
    """

    def __init__(self):
        self._id_iter = itertools.count()
        self._list: RecursiveList[Cell] = RecursiveList()

    @property
    def length(self) -> int:
        return self._list.size()

    def clear(self):
        self._list = RecursiveList()

    def snapshot(self) -> List[Dict]:
        return [cell.as_dict() for cell in self._list]

    def iterator(self) -> ListIterator[Cell]:
        return self._list.iterator()

    # ---------- Insertion (returns new node id) ----------

    def insert_first(self, value) -> int:
        cell = self._wrap(value)
        self._list.insert_first(cell)
        return cell.id

    def insert_last(self, value) -> int:
        cell = self._wrap(value)
        self._list.insert_last(cell)
        return cell.id

    def insert_at(self, index: int, value) -> int:
        cell = self._wrap(value)
        self._list.insert_at(index, cell)
        return cell.id

    # ---------- Removal (returns removed node info) ----------

    def remove_first(self) -> Dict:
        return self._list.remove_first().as_dict()

    def remove_last(self) -> Dict:
        return self._list.remove_last().as_dict()

    def remove_at(self, index: int) -> Dict:
        return self._list.remove_at(index).as_dict()

    def remove_value(self, value) -> Optional[Dict]:
        """
        Remove the first cell equal to ``value``; None when absent.
        The matching cell is read first because the view animates by id and index.
        """
        probe = self._probe(value)
        index = self._list.index_of(probe)
        removed = self._list.get(index).as_dict() if index != -1 else None
        if not self._list.remove(probe):
            return None
        removed["index"] = index
        return removed

    # ---------- Lookup ----------

    def get(self, index: int) -> Dict:
        return self._list.get(index).as_dict()

    def get_first(self) -> Dict:
        return self._list.get_first().as_dict()

    def get_last(self) -> Dict:
        return self._list.get_last().as_dict()

    def index_of(self, value) -> int:
        return self._list.index_of(self._probe(value))

    # ---------- Helpers ----------

    def _wrap(self, value) -> Optional[Cell]:
        # None passes through so the list rejects it before an id is spent
        if value is None:
            return None
        return Cell(value, next(self._id_iter))

    @staticmethod
    def _probe(value) -> Optional[Cell]:
        return None if value is None else Cell(value)
