"""Core abstractions for OrderViewLib.

This module contains the container, the view ordering strategies and the
view/cursor types they produce.
"""

from .orderings import (
    ViewOrdering,
    InsertionOrdering,
    ReverseOrdering,
    AscendingOrdering,
    DescendingOrdering,
    SideCrossOrdering,
    MiddleOutOrdering,
    create_ordering,
)
from .view import OrderView, ViewCursor
from .container import OrderedContainer

__all__ = [
    "ViewOrdering",
    "InsertionOrdering",
    "ReverseOrdering",
    "AscendingOrdering",
    "DescendingOrdering",
    "SideCrossOrdering",
    "MiddleOutOrdering",
    "create_ordering",
    "OrderView",
    "ViewCursor",
    "OrderedContainer",
]
