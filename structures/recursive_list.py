from typing import Generic, Optional, TypeVar

from structures.errors import EmptyListError, ListIndexError, NullElementError
from structures.list_iterator import Generation, ListIterator
from structures.node import Node

T = TypeVar("T")


class RecursiveList(Generic[T]):
    """
    Singly linked list that owns its head node and caches its length.

    Every public operation validates its arguments first (element, then index,
    then emptiness) so a rejected call leaves the chain untouched. Positional
    work is delegated to two walkers:

    - ``_node_before(distance)`` stops one step early (distance == 1) and is
      used for relinking, since a new or removed node is the successor of the
      node it stops on.
    - ``_node_at(distance)`` stops on the target itself (distance == 0) and is
      used for reads.

    Iterators handed out by ``iterator()`` are invalidated by any later
    structural change; see ``ListIterator``.
    """

    def __init__(self):
        self._head: Optional[Node[T]] = None
        self._size = 0
        self._generation = Generation()

    # ---------- Size ----------

    def size(self) -> int:
        """Number of elements, O(1)."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self):
        return self._size

    # ---------- Insertion ----------

    def insert_first(self, elem: T) -> "RecursiveList[T]":
        """Add ``elem`` at the front in O(1) time."""
        self._require_element(elem)
        return self.insert_at(0, elem)

    def insert_last(self, elem: T) -> "RecursiveList[T]":
        """Add ``elem`` at the end in O(size) time."""
        self._require_element(elem)
        return self.insert_at(self._size, elem)

    def insert_at(self, index: int, elem: T) -> "RecursiveList[T]":
        """
        Insert ``elem`` so that a following ``get(index)`` returns it.
        ``index`` may range over ``[0, size]``; runs in O(index) time.
        """
        self._require_element(elem)
        self._require_index(index, self._size + 1)

        node = Node(elem)
        if index == 0:
            node.link(self._head)
            self._head = node
        else:
            previous = self._node_before(index)
            node.link(previous.next)
            previous.link(node)

        self._size += 1
        self._invalidate_iterators()
        return self

    # ---------- Removal ----------

    def remove_first(self) -> T:
        self._require_non_empty()
        return self.remove_at(0)

    def remove_last(self) -> T:
        self._require_non_empty()
        return self.remove_at(self._size - 1)

    def remove_at(self, i: int) -> T:
        """Remove and return the element at ``i`` in O(i) time."""
        self._require_index(i, self._size)

        if i == 0:
            removed = self._head
            self._head = removed.detach()
        else:
            previous = self._node_before(i)
            removed = previous.next
            # when ``removed`` is the tail its successor is None, which
            # leaves ``previous`` as the new tail
            previous.link(removed.detach())

        self._size -= 1
        self._invalidate_iterators()
        return removed.data

    def remove(self, elem: T) -> bool:
        """
        Remove the lowest-index element equal to ``elem``.
        Returns True if the list was altered.
        """
        self._require_element(elem)
        index = self.index_of(elem)
        if index == -1:
            return False
        self.remove_at(index)
        return True

    # ---------- Lookup ----------

    def get_first(self) -> T:
        self._require_non_empty()
        return self.get(0)

    def get_last(self) -> T:
        self._require_non_empty()
        return self.get(self._size - 1)

    def get(self, i: int) -> T:
        self._require_index(i, self._size)
        return self._node_at(i).data

    def index_of(self, elem: T) -> int:
        """Smallest index holding a value equal to ``elem``, or -1."""
        self._require_element(elem)
        current = self._head
        index = 0
        while current is not None and index < self._size:
            if current.data == elem:
                return index
            current = current.next
            index += 1
        return -1

    # ---------- Iteration ----------

    def iterator(self) -> ListIterator[T]:
        return ListIterator(self._head, self._generation)

    def __iter__(self):
        return self.iterator()

    def __repr__(self):
        items = ", ".join(repr(value) for value in self)
        return f"RecursiveList([{items}])"

    # ---------- Traversal ----------

    def _node_before(self, distance: int) -> Node[T]:
        # stops on the node whose successor sits at ``distance``
        current = self._head
        while distance != 1:
            current = current.next
            distance -= 1
        return current

    def _node_at(self, distance: int) -> Node[T]:
        current = self._head
        while distance != 0:
            current = current.next
            distance -= 1
        return current

    def _invalidate_iterators(self):
        self._generation.stale = True
        self._generation = Generation()

    # ---------- Validation ----------

    @staticmethod
    def _require_element(elem):
        if elem is None:
            raise NullElementError()

    @staticmethod
    def _require_index(index, upper: int):
        """Accept ``0 <= index < upper``."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= upper:
            raise ListIndexError()

    def _require_non_empty(self):
        if self._size == 0:
            raise EmptyListError()
