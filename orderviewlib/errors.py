"""Exceptions raised by OrderViewLib."""

from typing import Any


class OrderViewError(Exception):
    """Base class for all OrderViewLib errors."""
    pass


class NotFoundError(OrderViewError, LookupError):
    """Raised when removing a value the container does not hold."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Element was not found in the container: {value!r}")


class OutOfBoundsError(OrderViewError, IndexError):
    """Raised when a cursor is used at or past its terminal position."""

    def __init__(self, index: int, length: int, action: str = "dereference"):
        self.index = index
        self.length = length
        self.action = action
        super().__init__(
            f"Cannot {action} cursor at index {index}: view has {length} element(s)"
        )
