"""OrderViewLib - Ordered Container with Multiple Traversal Views.

OrderViewLib stores a sequence of comparable values in insertion order and
exposes six ways of walking it without ever reordering the stored data.

Views:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    order              insertion order
    reverse_order      last added first
    ascending_order    smallest to largest
    descending_order   largest to smallest
    side_cross_order   smallest, largest, 2nd smallest, 2nd largest, ...
    middle_out_order   positional middle, then alternating outward
━━━━━━━━━━━━━━━━━━━━━━━━━━

    from orderviewlib import OrderedContainer

    container = OrderedContainer([7, 15, 6, 1, 2])
    it, end = container.begin_side_cross_order(), container.end_side_cross_order()
"""

__version__ = "0.1.0"

from .config import ViewStrategy, AdvancePolicy, ContainerConfig, parse_strategy
from .errors import OrderViewError, NotFoundError, OutOfBoundsError
from .core import (
    ViewOrdering,
    InsertionOrdering,
    ReverseOrdering,
    AscendingOrdering,
    DescendingOrdering,
    SideCrossOrdering,
    MiddleOutOrdering,
    create_ordering,
    OrderView,
    ViewCursor,
    OrderedContainer,
)
from .api import traverse_view, collect_views, render_view, view_strategies

__all__ = [
    "__version__",
    # Config
    "ViewStrategy",
    "AdvancePolicy",
    "ContainerConfig",
    "parse_strategy",
    # Errors
    "OrderViewError",
    "NotFoundError",
    "OutOfBoundsError",
    # Core
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
    # API
    "traverse_view",
    "collect_views",
    "render_view",
    "view_strategies",
]
