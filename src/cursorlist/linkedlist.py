"""Guard-bounded doubly-linked list with an edit cursor and draining iteration."""

import logging
from typing import Any, Generic, Iterable, Iterator

from cursorlist.arena import NodeArena
from cursorlist.errors import GuardBoundaryError, ListClosedError
from cursorlist.types import Guard, Position, V

log = logging.getLogger(__name__)

# Returned by _take() when the consuming protocol has nothing left
_MISSING: Any = object()


class CursorList(Generic[V]):
    """
    Doubly-linked list bounded by a front and a back guard.

    Nodes live in a NodeArena and link to each other by index. The list
    carries one movable cursor for navigation and editing, and two
    traversal marks that drain the list from either end. The two concerns
    are independent: the marks are only read by take_front()/take_back().

    Not thread-safe. Share an instance across threads only behind an
    external lock.
    """

    def __init__(self, values: Iterable[V] = ()) -> None:
        """
        Initialize the list.

        Args:
            values: Optional payloads appended in order.
        """
        self._nodes = NodeArena[V]()
        # Front guard's next link and back guard's prev link
        self._first: Position = Guard.BACK
        self._last: Position = Guard.FRONT
        self._cursor: Position = Guard.FRONT
        self._forward_mark: Position = Guard.FRONT
        self._backward_mark: Position = Guard.BACK
        self._exhausted = False
        self._closed = False

        for value in values:
            self.append(value)

    def __enter__(self) -> "CursorList[V]":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()

    # Links

    def _next(self, position: Position) -> Position:
        if position is Guard.FRONT:
            return self._first
        if position is Guard.BACK:
            raise GuardBoundaryError("The back guard has no next node")
        return self._nodes[position].next

    def _prev(self, position: Position) -> Position:
        if position is Guard.BACK:
            return self._last
        if position is Guard.FRONT:
            raise GuardBoundaryError("The front guard has no previous node")
        return self._nodes[position].prev

    def _link(self, left: Position, right: Position) -> None:
        """Make ``right`` follow ``left``."""
        if left is Guard.FRONT:
            self._first = right
        else:
            self._nodes[left].next = right
        if right is Guard.BACK:
            self._last = left
        else:
            self._nodes[right].prev = left

    def _check_open(self) -> None:
        if self._closed:
            raise ListClosedError("Cannot modify a closed list")

    # Structural primitives

    def _splice(self, left: Position, right: Position, value: V) -> int:
        index = self._nodes.allocate(value, left, right)
        self._link(left, index)
        self._link(index, right)

        # Marks always sit one step inside their guard
        if left is Guard.FRONT:
            self._forward_mark = index
        if right is Guard.BACK:
            self._backward_mark = index

        self._cursor = index
        return index

    def insert_before(self, target: Position, value: V) -> int:
        """
        Insert ``value`` immediately before ``target``. O(1).

        The cursor moves onto the new node.

        Args:
            target: Guard.BACK or the index of a live node

        Returns:
            Arena index of the new node

        Raises:
            GuardBoundaryError: If target is the front guard
            InvalidPositionError: If target is not a live node
            ListClosedError: If the list is closed
        """
        self._check_open()
        if target is Guard.FRONT:
            raise GuardBoundaryError("Cannot insert before the front guard")
        return self._splice(self._prev(target), target, value)

    def insert_after(self, target: Position, value: V) -> int:
        """
        Insert ``value`` immediately after ``target``. O(1).

        The cursor moves onto the new node.

        Args:
            target: Guard.FRONT or the index of a live node

        Returns:
            Arena index of the new node

        Raises:
            GuardBoundaryError: If target is the back guard
            InvalidPositionError: If target is not a live node
            ListClosedError: If the list is closed
        """
        self._check_open()
        if target is Guard.BACK:
            raise GuardBoundaryError("Cannot insert after the back guard")
        return self._splice(target, self._next(target), value)

    def remove_at(self, position: Position) -> V | None:
        """
        Unlink the node at ``position`` and return its payload. O(1).

        The cursor moves to the removed node's former predecessor. A
        traversal mark on the removed node steps outward past it.

        Returns:
            The removed payload, or None if position is a guard

        Raises:
            InvalidPositionError: If position is not a live node
            ListClosedError: If the list is closed
        """
        self._check_open()
        if isinstance(position, Guard):
            return None

        node = self._nodes[position]
        left, right = node.prev, node.next
        self._link(left, right)

        if self._forward_mark == position:
            self._forward_mark = right
        if self._backward_mark == position:
            self._backward_mark = left

        self._cursor = left
        return self._nodes.release(position)

    # Cursor-relative operations

    def append(self, value: V) -> None:
        """Add value at the back of the list. O(1)."""
        self.insert_before(Guard.BACK, value)

    def prepend(self, value: V) -> None:
        """Add value at the front of the list. O(1)."""
        self.insert_after(Guard.FRONT, value)

    def insert(self, value: V) -> None:
        """Insert value right after the cursor and move the cursor onto it."""
        self.insert_after(self._cursor, value)

    def edit(self, value: V) -> None:
        """
        Replace the node under the cursor with a new node holding value.

        The new node takes the same place in the chain and the cursor ends
        up on it. Does nothing while the cursor is on a guard.
        """
        self._check_open()
        if self.at_guard:
            return
        self.remove()
        self.insert(value)

    def remove(self) -> V | None:
        """Remove the node under the cursor; see remove_at()."""
        return self.remove_at(self._cursor)

    def forward(self) -> None:
        self._check_open()
        if self._cursor is not Guard.BACK:
            self._cursor = self._next(self._cursor)

    def backward(self) -> None:
        self._check_open()
        if self._cursor is not Guard.FRONT:
            self._cursor = self._prev(self._cursor)

    def begin(self) -> None:
        """Move the cursor before all elements."""
        self._check_open()
        self._cursor = Guard.FRONT

    def end(self) -> None:
        """Move the cursor after all elements."""
        self._check_open()
        self._cursor = Guard.BACK

    def get(self) -> V | None:
        """Return the payload under the cursor, or None on a guard."""
        if self.at_guard:
            return None
        return self._nodes[self._cursor].value  # type: ignore[index]

    def replace(self, value: V) -> V | None:
        """
        Overwrite the payload under the cursor in place.

        Returns:
            The previous payload, or None (and no change) on a guard
        """
        self._check_open()
        if self.at_guard:
            return None
        node = self._nodes[self._cursor]  # type: ignore[index]
        old, node.value = node.value, value
        return old

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def at_guard(self) -> bool:
        return isinstance(self._cursor, Guard)

    # Consuming iteration

    def _take(self, from_back: bool) -> Any:
        self._check_open()
        if self._exhausted or self.is_empty():
            return _MISSING

        if self._forward_mark == self._backward_mark:
            self._exhausted = True
            log.debug("Traversal marks converged on %r, list exhausted", self._forward_mark)

        mark = self._backward_mark if from_back else self._forward_mark
        # remove_at() steps the mark past the removed node
        return self.remove_at(mark)

    def take_front(self) -> V | None:
        """
        Remove and return the node at the forward mark. O(1).

        Once the forward and backward marks have met, this and
        take_back() report completion for the rest of the list's life,
        even if new values are added afterwards.

        Returns:
            The payload, or None when exhausted or empty
        """
        value = self._take(from_back=False)
        return None if value is _MISSING else value

    def take_back(self) -> V | None:
        """Remove and return the node at the backward mark; see take_front()."""
        value = self._take(from_back=True)
        return None if value is _MISSING else value

    def __iter__(self) -> "CursorList[V]":
        """Iterating a list drains it from the front."""
        return self

    def __next__(self) -> V:
        value = self._take(from_back=False)
        if value is _MISSING:
            raise StopIteration
        return value

    def __reversed__(self) -> Iterator[V]:
        """Drain the list from the back."""
        while True:
            value = self._take(from_back=True)
            if value is _MISSING:
                return
            yield value

    @property
    def forward_mark(self) -> Position:
        return self._forward_mark

    @property
    def backward_mark(self) -> Position:
        return self._backward_mark

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    # Teardown

    def close(self) -> int:
        """
        Release every remaining node and close the list.

        Runs the consuming protocol to completion, then releases any nodes
        it can no longer reach (values added after exhaustion). Calling
        close() again does nothing.

        Returns:
            Number of nodes released
        """
        if self._closed:
            return 0

        released = 0
        for _ in self:
            released += 1
        while not self.is_empty():
            self.remove_at(self._first)
            released += 1

        self._cursor = Guard.FRONT
        self._forward_mark = Guard.FRONT
        self._backward_mark = Guard.BACK
        self._closed = True
        log.debug("Closed list, released %d node(s)", released)
        return released

    @property
    def closed(self) -> bool:
        return self._closed

    # Inspection

    def positions(self) -> Iterator[Position]:
        """Yield the arena index of every real node, front to back."""
        position = self._first
        while position is not Guard.BACK:
            yield position
            position = self._nodes[position].next  # type: ignore[index]

    def values(self) -> Iterator[V]:
        """Yield every payload front to back without consuming anything."""
        for position in self.positions():
            yield self._nodes[position].value  # type: ignore[index]

    def is_empty(self) -> bool:
        return self._first is Guard.BACK

    def __len__(self) -> int:
        """Return the number of real nodes in the list."""
        return len(self._nodes)

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return not self.is_empty()

    def __str__(self) -> str:
        return "[" + ", ".join(repr(value) for value in self.values()) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"
