from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """
    One cell of the chain: an element plus the owning link to its successor.
    A node is only ever referenced by its predecessor (or the list head).
    """

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: "Optional[Node[T]]" = None):
        self.data = data
        self.next = next

    def link(self, successor: "Optional[Node[T]]"):
        """Splice ``successor`` (and everything after it) in behind this node."""
        self.next = successor

    def detach(self) -> "Optional[Node[T]]":
        """Cut this node out of the chain and hand back its former successor."""
        successor = self.next
        self.next = None
        return successor

    def __repr__(self):
        return f"Node({self.data!r})"
