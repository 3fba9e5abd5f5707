"""Type definitions for cursorlist."""

import enum
from typing import TypeAlias, TypeVar

# Payload type stored in list nodes
V = TypeVar("V")


class Guard(enum.Enum):
    """Permanent boundary positions of a list. They never carry a payload."""

    FRONT = "front"
    BACK = "back"

    def __repr__(self) -> str:
        return f"Guard.{self.name}"


# A position in the chain: either a guard or the arena index of a real node
Position: TypeAlias = Guard | int
