from typing import Iterator, Optional, TypeVar

from structures.errors import StaleIteratorError
from structures.node import Node

T = TypeVar("T")


class Generation:
    """
    Point-in-time token shared between a list and the iterators created from it.
    The list marks it stale on its next structural change.
    """

    __slots__ = ("stale",)

    def __init__(self):
        self.stale = False


class ListIterator(Iterator[T]):
    """
    Forward-only cursor over a chain of nodes.

    The iterator keeps no reference to the list itself, only to the node it
    will yield next and to the generation token captured at creation. Once
    the owning list mutates its chain, ``next()`` raises StaleIteratorError.
    """

    def __init__(self, top: Optional[Node[T]], generation: Optional[Generation] = None):
        self._cursor = top
        self._generation = generation if generation is not None else Generation()

    def has_next(self) -> bool:
        return self._cursor is not None

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration
        if self._generation.stale:
            raise StaleIteratorError()
        node = self._cursor
        self._cursor = node.next
        return node.data

    def __next__(self) -> T:
        return self.next()

    def __iter__(self):
        return self
