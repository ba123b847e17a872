"""View ordering strategies for OrderViewLib.

Orderings implement the algorithms that turn a container snapshot into
the sequence a traversal yields. They are pure functions of the snapshot:
the input is never modified and a new list is always returned.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Type, TypeVar, Union

from ..config import ViewStrategy, parse_strategy

T = TypeVar('T')


class ViewOrdering(ABC):
    """Abstract base class for view ordering strategies.

    Each subclass computes one traversal order (insertion, reverse,
    ascending, etc.) over a snapshot. The complete ordering is
    materialized up front, so the first element of a view never depends
    on how far a cursor has travelled.
    """

    strategy: ViewStrategy

    @abstractmethod
    def order(self, snapshot: Sequence[T]) -> List[T]:
        """Compute the ordering for a snapshot.

        Args:
            snapshot: Container elements in insertion order

        Returns:
            New list holding the snapshot's elements in traversal order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class InsertionOrdering(ViewOrdering):
    """Elements in the order they were added."""

    strategy = ViewStrategy.INSERTION

    def order(self, snapshot: Sequence[T]) -> List[T]:
        return list(snapshot)


class ReverseOrdering(ViewOrdering):
    """Elements from the most recently added to the first added."""

    strategy = ViewStrategy.REVERSE

    def order(self, snapshot: Sequence[T]) -> List[T]:
        return list(reversed(snapshot))


class AscendingOrdering(ViewOrdering):
    """Elements sorted non-decreasing.

    Python's sort is stable, so equal elements keep their insertion order.
    """

    strategy = ViewStrategy.ASCENDING

    def order(self, snapshot: Sequence[T]) -> List[T]:
        return sorted(snapshot)


class DescendingOrdering(ViewOrdering):
    """Elements sorted non-increasing, duplicates retained."""

    strategy = ViewStrategy.DESCENDING

    def order(self, snapshot: Sequence[T]) -> List[T]:
        return sorted(snapshot, reverse=True)


class SideCrossOrdering(ViewOrdering):
    """Alternate between both ends of the ascending order.

    Yields smallest, largest, second smallest, second largest, and so on
    toward the middle. The two ends never cross: when they meet on a single
    remaining element it is emitted exactly once.

    Example:
        [7, 15, 6, 1, 2] -> [1, 15, 2, 7, 6]
    """

    strategy = ViewStrategy.SIDE_CROSS

    def order(self, snapshot: Sequence[T]) -> List[T]:
        ascending = sorted(snapshot)
        result: List[T] = []

        left, right = 0, len(ascending) - 1
        while left <= right:
            result.append(ascending[left])
            left += 1
            if left <= right:
                result.append(ascending[right])
                right -= 1

        return result


class MiddleOutOrdering(ViewOrdering):
    """Start at the positional middle and alternate outward.

    The middle index is ``len(snapshot) // 2``, so for even lengths it is
    the second of the two central positions and the left side holds one
    element more than the right. Offsets falling outside the snapshot are
    skipped rather than ending the walk.

    Example:
        [10, 20, 30, 40, 50] -> [30, 20, 40, 10, 50]
        [5, 15, 25, 35]      -> [25, 15, 35, 5]
    """

    strategy = ViewStrategy.MIDDLE_OUT

    def order(self, snapshot: Sequence[T]) -> List[T]:
        n = len(snapshot)
        if n == 0:
            return []

        mid = n // 2
        result = [snapshot[mid]]

        # Left then right, moving toward the edges
        for offset in range(1, mid + 1):
            result.append(snapshot[mid - offset])
            if mid + offset < n:
                result.append(snapshot[mid + offset])

        return result


_ORDERINGS: Dict[ViewStrategy, Type[ViewOrdering]] = {
    ordering.strategy: ordering
    for ordering in (
        InsertionOrdering,
        ReverseOrdering,
        AscendingOrdering,
        DescendingOrdering,
        SideCrossOrdering,
        MiddleOutOrdering,
    )
}


def create_ordering(strategy: Union[ViewStrategy, str]) -> ViewOrdering:
    """Create an ordering instance by strategy.

    Args:
        strategy: ViewStrategy or any name accepted by parse_strategy

    Returns:
        ViewOrdering instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _ORDERINGS[parse_strategy(strategy)]()
