"""Slot arena owning the real nodes of a list, addressed by stable indices."""

import logging
from typing import Generic, Iterator

from cursorlist.errors import InvalidPositionError
from cursorlist.types import Position, V

log = logging.getLogger(__name__)


class Node(Generic[V]):
    """A real node: one payload plus links to its neighbours."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: V, prev: Position, next: Position) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"<Node {self.value!r}: prev={self.prev!r} next={self.next!r}>"


class NodeArena(Generic[V]):
    """
    Growable table of node slots with free-list reuse.

    Released indices are handed out again, most recently released first,
    so an index is only meaningful while its node is alive.
    """

    __slots__ = ("_slots", "_free", "_live")

    def __init__(self) -> None:
        self._slots: list[Node[V] | None] = []
        self._free: list[int] = []
        self._live = 0

    def allocate(self, value: V, prev: Position, next: Position) -> int:
        """Store a new node and return its index. O(1) amortized."""
        node = Node(value, prev, next)
        if self._free:
            index = self._free.pop()
            log.debug("Reusing arena slot %d", index)
            self._slots[index] = node
        else:
            index = len(self._slots)
            self._slots.append(node)
        self._live += 1
        return index

    def release(self, index: int) -> V:
        """Free the slot at ``index`` and return the payload it held. O(1)."""
        node = self[index]
        self._slots[index] = None
        self._free.append(index)
        self._live -= 1
        return node.value

    def __getitem__(self, index: int) -> Node[V]:
        if index not in self:
            raise InvalidPositionError(f"No live node at position {index!r}")
        return self._slots[index]  # type: ignore[return-value]

    def __contains__(self, index: object) -> bool:
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._slots)
            and self._slots[index] is not None
        )

    def __iter__(self) -> Iterator[int]:
        """Iterate over live indices in slot order (not chain order)."""
        for index, node in enumerate(self._slots):
            if node is not None:
                yield index

    def __len__(self) -> int:
        """Return the number of live nodes."""
        return self._live

    @property
    def capacity(self) -> int:
        """Number of slots ever allocated, live or free."""
        return len(self._slots)
