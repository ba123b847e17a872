"""Materialized views and cursors for OrderViewLib.

An OrderView owns an immutable copy of one computed ordering. A
ViewCursor is a bounds-checked position into a view. Both are
independent of the container they came from: mutating the container
after a view is built never changes what the view yields.
"""

from typing import Any, Generic, Iterable, List, Tuple, TypeVar

from ..config import AdvancePolicy, ViewStrategy
from ..errors import OutOfBoundsError

T = TypeVar('T')


class OrderView(Generic[T]):
    """An ordered, immutable sequence produced by one view strategy.

    Views are restartable: every ``iter(view)`` or ``view.begin()`` call
    returns a fresh cursor at index 0 over the same data.

    Attributes:
        strategy: ViewStrategy that produced the ordering
        owner_token: Identity token of the container the snapshot came from
        advance_policy: Policy applied by cursors advanced past the end
    """

    __slots__ = ('_elements', 'strategy', 'owner_token', 'advance_policy')

    def __init__(self,
                 elements: Iterable[T],
                 strategy: ViewStrategy,
                 owner_token: int,
                 advance_policy: AdvancePolicy = AdvancePolicy.RAISE):
        """Initialize view over a computed ordering.

        Args:
            elements: Ordered elements; copied into an owned tuple
            strategy: Strategy that produced the ordering
            owner_token: Identity token of the originating container
            advance_policy: Policy for cursors advanced past the end
        """
        self._elements: Tuple[T, ...] = tuple(elements)
        self.strategy = strategy
        self.owner_token = owner_token
        self.advance_policy = advance_policy

    @property
    def elements(self) -> Tuple[T, ...]:
        """The computed ordering."""
        return self._elements

    def begin(self) -> 'ViewCursor[T]':
        """Cursor at the first element."""
        return ViewCursor(self, 0)

    def end(self) -> 'ViewCursor[T]':
        """Cursor at the terminal position."""
        return ViewCursor(self, len(self._elements))

    def cursor(self, index: int = 0) -> 'ViewCursor[T]':
        """Cursor at an arbitrary position.

        Args:
            index: Position in ``[0, len(view)]``

        Raises:
            OutOfBoundsError: If index lies outside the view
        """
        if index < 0 or index > len(self._elements):
            raise OutOfBoundsError(index, len(self._elements), action="position")
        return ViewCursor(self, index)

    def to_list(self) -> List[T]:
        """Return the ordering as a new list."""
        return list(self._elements)

    def same_ordering(self, other: 'OrderView[Any]') -> bool:
        """Check if another view came from the same container and ordering."""
        if self is other:
            return True
        return (self.owner_token == other.owner_token
                and self.strategy == other.strategy
                and self._elements == other._elements)

    def __iter__(self) -> 'ViewCursor[T]':
        return self.begin()

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(strategy={self.strategy.name}, "
                f"elements={list(self._elements)!r})")


class ViewCursor(Generic[T]):
    """Forward-only position into an OrderView.

    The cursor follows the begin/end discipline (compare against the
    view's end cursor) and also implements the Python iterator protocol,
    so ``for value in cursor`` yields the remaining elements.

    Example:
        >>> it, end = container.begin_ascending_order(), container.end_ascending_order()
        >>> while it != end:
        ...     print(it.current())
        ...     it.advance()
    """

    __slots__ = ('_view', '_index')

    def __init__(self, view: OrderView[T], index: int = 0):
        self._view = view
        self._index = index

    @property
    def view(self) -> OrderView[T]:
        return self._view

    @property
    def index(self) -> int:
        return self._index

    def current(self) -> T:
        """Return the element at the cursor.

        Raises:
            OutOfBoundsError: If the cursor is at the terminal position
        """
        if self._index >= len(self._view):
            raise OutOfBoundsError(self._index, len(self._view))
        return self._view[self._index]

    def advance(self) -> 'ViewCursor[T]':
        """Move forward one position.

        Advancing from the terminal position raises OutOfBoundsError under
        AdvancePolicy.RAISE and leaves the cursor in place under
        AdvancePolicy.CLAMP.

        Returns:
            This cursor, to allow chaining
        """
        if self.at_end():
            if self._view.advance_policy is AdvancePolicy.RAISE:
                raise OutOfBoundsError(self._index, len(self._view), action="advance")
            return self
        self._index += 1
        return self

    def at_end(self) -> bool:
        """True if the cursor is at the terminal position."""
        return self._index == len(self._view)

    def __iter__(self) -> 'ViewCursor[T]':
        return self

    def __next__(self) -> T:
        if self.at_end():
            raise StopIteration
        value = self._view[self._index]
        self._index += 1
        return value

    def __eq__(self, other: object) -> bool:
        """Cursors are equal if they index the same ordering of the same container."""
        if not isinstance(other, ViewCursor):
            return NotImplemented
        return (self._index == other._index
                and self._view.same_ordering(other._view))

    def __hash__(self) -> int:
        return hash((self._view.owner_token, self._view.strategy, self._index))

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(strategy={self._view.strategy.name}, "
                f"index={self._index}, length={len(self._view)})")
