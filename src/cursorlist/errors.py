"""Exception classes for cursorlist."""


class CursorListError(Exception):
    """Base exception for all cursorlist errors."""


class GuardBoundaryError(CursorListError):
    """Raised when inserting before the front guard or after the back guard."""


class InvalidPositionError(CursorListError, LookupError):
    """Raised when a position index does not refer to a live node."""


class ListClosedError(CursorListError):
    """Raised when operations are attempted on a closed list."""
