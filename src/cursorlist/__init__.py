"""cursorlist - Guard-bounded doubly-linked list with a cursor and two-ended draining."""

from cursorlist.arena import Node, NodeArena
from cursorlist.errors import (
    CursorListError,
    GuardBoundaryError,
    InvalidPositionError,
    ListClosedError,
)
from cursorlist.linkedlist import CursorList
from cursorlist.types import Guard, Position

__version__ = "0.0.1"

__all__ = [
    "CursorList",
    "Guard",
    "Position",
    "Node",
    "NodeArena",
    "CursorListError",
    "GuardBoundaryError",
    "InvalidPositionError",
    "ListClosedError",
]
