"""High-level API for OrderViewLib.

This module provides simple, functional interfaces for common view
operations. These functions wrap OrderedContainer for the case where a
caller just has some values and wants them in a given traversal order.
"""

from typing import Dict, Iterable, Iterator, List, TypeVar, Union

from .config import ViewStrategy, parse_strategy
from .core.container import OrderedContainer

T = TypeVar('T')


def _as_container(values: Union[OrderedContainer[T], Iterable[T]]) -> OrderedContainer[T]:
    if isinstance(values, OrderedContainer):
        return values
    return OrderedContainer(values)


def view_strategies() -> List[ViewStrategy]:
    """All available strategies, in declaration order."""
    return list(ViewStrategy)


def traverse_view(
    values: Union[OrderedContainer[T], Iterable[T]],
    strategy: Union[ViewStrategy, str] = ViewStrategy.INSERTION,
) -> Iterator[T]:
    """Simple interface for ordered traversal.

    Args:
        values: An OrderedContainer or any iterable of comparable values
        strategy: Traversal strategy (order, reverse, asc, desc,
            side_cross, middle_out, ...)

    Yields:
        The values in the requested order

    Example:
        >>> list(traverse_view([10, 20, 30, 40, 50], "middle_out"))
        [30, 20, 40, 10, 50]
    """
    # Resolve before the first next() so bad names fail at the call site
    view = _as_container(values).view(parse_strategy(strategy))
    return iter(view)


def collect_views(
    values: Union[OrderedContainer[T], Iterable[T]],
) -> Dict[ViewStrategy, List[T]]:
    """Compute every strategy's ordering of the same snapshot.

    Args:
        values: An OrderedContainer or any iterable of comparable values

    Returns:
        Dictionary mapping each ViewStrategy to its ordering as a list
    """
    container = _as_container(values)
    return {
        strategy: container.view(strategy).to_list()
        for strategy in ViewStrategy
    }


def render_view(
    values: Union[OrderedContainer[T], Iterable[T]],
    strategy: Union[ViewStrategy, str] = ViewStrategy.INSERTION,
) -> str:
    """Render one view in the container's ``[e1, e2, ...]`` format."""
    view = _as_container(values).view(strategy)
    return "[" + ", ".join(str(element) for element in view) + "]"
