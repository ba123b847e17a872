"""OrderedContainer: insertion-ordered storage with six traversal views.

The container owns a plain list of elements. Views are computed from a
snapshot of that list on request and memoized until the next mutation,
so a ``begin_<strategy>()`` / ``end_<strategy>()`` pair built between two
mutations shares a single OrderView instance.
"""

import copy as _copy
import itertools
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from cachetools import LRUCache

from ..config import ContainerConfig, ViewStrategy, parse_strategy
from ..errors import NotFoundError
from .orderings import create_ordering
from .view import OrderView, ViewCursor

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Process-wide source of container identity tokens
_tokens = itertools.count(1)


class OrderedContainer(Generic[T]):
    """Ordered collection of comparable elements.

    Elements keep their insertion order and duplicates are allowed. Six
    traversal strategies are exposed through paired accessors that return
    cursors at the start and at the terminal position of each view:

    - ``begin_order`` / ``end_order``: insertion order
    - ``begin_reverse_order`` / ``end_reverse_order``
    - ``begin_ascending_order`` / ``end_ascending_order``
    - ``begin_descending_order`` / ``end_descending_order``
    - ``begin_side_cross_order`` / ``end_side_cross_order``
    - ``begin_middle_out_order`` / ``end_middle_out_order``

    Copies (``copy()``, ``copy.copy``, ``copy.deepcopy``) have value
    semantics and a fresh identity, so their cursors never compare equal
    to the original's.

    Example:
        >>> container = OrderedContainer([7, 15, 6, 1, 2])
        >>> list(container.view("side_cross"))
        [1, 15, 2, 7, 6]
    """

    def __init__(self,
                 values: Optional[Iterable[T]] = None,
                 config: Optional[ContainerConfig] = None):
        """Create a container.

        Args:
            values: Initial elements, added in order
            config: Container behavior (defaults to ContainerConfig())

        Raises:
            ValueError: If config is invalid
        """
        self.config = config or ContainerConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self._elements: List[T] = list(values) if values is not None else []
        self._token = next(_tokens)
        self._generation = 0
        self._views: LRUCache = LRUCache(maxsize=self.config.view_cache_size)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    # Mutation

    def add(self, value: T) -> None:
        """Append a value to the end of the container."""
        self._elements.append(value)
        self._mutated()
        logger.debug("container %s: added %r (size=%s)", self._token, value, len(self._elements))

    def remove(self, value: T) -> None:
        """Remove every element equal to value.

        Raises:
            NotFoundError: If no element equals value; nothing is removed
        """
        remaining = [element for element in self._elements if element != value]
        removed = len(self._elements) - len(remaining)
        if removed == 0:
            raise NotFoundError(value)

        self._elements = remaining
        self._mutated()
        logger.debug("container %s: removed %s occurrence(s) of %r", self._token, removed, value)

    def assign(self, other: 'OrderedContainer[T]') -> 'OrderedContainer[T]':
        """Replace this container's elements with a copy of other's.

        Identity is kept: cursors from this container still belong to it.
        Assigning a container to itself does nothing.

        Returns:
            This container
        """
        if other is self:
            return self
        self._elements = list(other._elements)
        self._mutated()
        return self

    def _mutated(self) -> None:
        self._generation += 1
        self._views.clear()

    # Queries

    def size(self) -> int:
        """Number of elements currently stored."""
        return len(self._elements)

    def render(self) -> str:
        """Render elements in insertion order as ``[e1, e2, ..., en]``."""
        return "[" + ", ".join(str(element) for element in self._elements) + "]"

    @property
    def token(self) -> int:
        """Identity token shared by every view built from this container."""
        return self._token

    @property
    def generation(self) -> int:
        """Number of successful mutations so far."""
        return self._generation

    # Copying

    def copy(self) -> 'OrderedContainer[T]':
        """Independent container with an equal element sequence."""
        return self.__class__(self._elements, config=_copy.copy(self.config))

    def __copy__(self) -> 'OrderedContainer[T]':
        return self.copy()

    def __deepcopy__(self, memo) -> 'OrderedContainer[T]':
        return self.__class__(_copy.deepcopy(self._elements, memo),
                              config=_copy.copy(self.config))

    # Views

    def view(self, strategy: Union[ViewStrategy, str] = ViewStrategy.INSERTION) -> OrderView[T]:
        """Return the view of the current contents for a strategy.

        Args:
            strategy: ViewStrategy or any name accepted by parse_strategy

        Returns:
            OrderView owning its own copy of the computed ordering

        Raises:
            ValueError: If strategy name is not recognized
            TypeError: If a comparison-based strategy meets unorderable elements
        """
        strategy = parse_strategy(strategy)

        if self.config.cache_views:
            cached = self._views.get(strategy)
            if cached is not None:
                self.cache_hits += 1
                return cached
            self.cache_misses += 1

        snapshot = tuple(self._elements)
        view = OrderView(
            create_ordering(strategy).order(snapshot),
            strategy,
            self._token,
            advance_policy=self.config.advance_policy,
        )
        logger.debug("container %s: materialized %s view of %s element(s)",
                     self._token, strategy.name, len(view))

        if self.config.cache_views:
            self._views[strategy] = view
        return view

    def traverse(self, strategy: Union[ViewStrategy, str] = ViewStrategy.INSERTION) -> Iterator[T]:
        """Iterate over the elements of one view."""
        return iter(self.view(strategy))

    def begin(self, strategy: Union[ViewStrategy, str]) -> ViewCursor[T]:
        """Cursor at the start of a strategy's view."""
        return self.view(strategy).begin()

    def end(self, strategy: Union[ViewStrategy, str]) -> ViewCursor[T]:
        """Cursor at the terminal position of a strategy's view."""
        return self.view(strategy).end()

    def begin_order(self) -> ViewCursor[T]:
        return self.begin(ViewStrategy.INSERTION)

    def end_order(self) -> ViewCursor[T]:
        return self.end(ViewStrategy.INSERTION)

    def begin_reverse_order(self) -> ViewCursor[T]:
        return self.begin(ViewStrategy.REVERSE)

    def end_reverse_order(self) -> ViewCursor[T]:
        return self.end(ViewStrategy.REVERSE)

    def begin_ascending_order(self) -> ViewCursor[T]:
        return self.begin(ViewStrategy.ASCENDING)

    def end_ascending_order(self) -> ViewCursor[T]:
        return self.end(ViewStrategy.ASCENDING)

    def begin_descending_order(self) -> ViewCursor[T]:
        return self.begin(ViewStrategy.DESCENDING)

    def end_descending_order(self) -> ViewCursor[T]:
        return self.end(ViewStrategy.DESCENDING)

    def begin_side_cross_order(self) -> ViewCursor[T]:
        return self.begin(ViewStrategy.SIDE_CROSS)

    def end_side_cross_order(self) -> ViewCursor[T]:
        return self.end(ViewStrategy.SIDE_CROSS)

    def begin_middle_out_order(self) -> ViewCursor[T]:
        return self.begin(ViewStrategy.MIDDLE_OUT)

    def end_middle_out_order(self) -> ViewCursor[T]:
        return self.end(ViewStrategy.MIDDLE_OUT)

    # Python protocols

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self.view(ViewStrategy.INSERTION))

    def __contains__(self, value: object) -> bool:
        return value in self._elements

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._elements!r})"
