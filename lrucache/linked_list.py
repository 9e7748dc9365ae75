import dataclasses
from typing import Any, Iterator, Optional


@dataclasses.dataclass(eq=False)
class Node:
    """Entry in a RecencyList.

    Args:
        key: Cache key the node belongs to.
        value: Value stored for the key.
    """

    key: Any = None
    value: Any = None
    prev: Optional["Node"] = dataclasses.field(default=None, repr=False)
    next: Optional["Node"] = dataclasses.field(default=None, repr=False)


class RecencyList:
    """Doubly-linked list ordered from most to least recently used.

    The front of the list is the most recently used end, the back is the
    least recently used end. Two sentinel nodes bound the list so linking
    and unlinking never have to check for missing neighbours.
    """

    def __init__(self):
        self._head = Node()
        self._tail = Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self._head.next
        while node is not self._tail:
            yield node
            node = node.next

    def __reversed__(self) -> Iterator[Node]:
        node = self._tail.prev
        while node is not self._head:
            yield node
            node = node.prev

    def push_front(self, node: Node) -> None:
        """Link a detached node at the most recently used end."""
        node.prev = self._head
        node.next = self._head.next
        self._head.next.prev = node
        self._head.next = node
        self._size += 1

    def unlink(self, node: Node) -> None:
        """Detach a node from wherever it sits in the list."""
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def move_to_front(self, node: Node) -> None:
        if self._head.next is node:
            return
        self.unlink(node)
        self.push_front(node)

    def back(self) -> Optional[Node]:
        """Least recently used node, None if the list is empty."""
        if self._size == 0:
            return None
        return self._tail.prev

    def pop_back(self) -> Node:
        """Unlink and return the least recently used node.

        Raises:
            IndexError: If the list is empty.
        """
        node = self.back()
        if node is None:
            raise IndexError("pop from empty RecencyList")
        self.unlink(node)
        return node

    def clear(self) -> None:
        # Nodes are dropped wholesale, callers discard their handles too.
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
