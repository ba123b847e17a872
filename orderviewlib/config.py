"""Configuration system for OrderViewLib.

This module defines how users name traversal strategies and how a
container behaves when building views and moving cursors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class ViewStrategy(Enum):
    """How to order a container snapshot.

    The enum value doubles as the suffix of the container's
    ``begin_<value>`` / ``end_<value>`` accessors.
    """
    INSERTION = "order"                  # As added
    REVERSE = "reverse_order"            # Last added first
    ASCENDING = "ascending_order"        # Smallest to largest
    DESCENDING = "descending_order"      # Largest to smallest
    SIDE_CROSS = "side_cross_order"      # Smallest, largest, 2nd smallest, ...
    MIDDLE_OUT = "middle_out_order"      # Positional middle, then outward


class AdvancePolicy(Enum):
    """What a cursor does when advanced from the terminal position."""
    RAISE = "raise"     # OutOfBoundsError
    CLAMP = "clamp"     # Stay at the terminal position


# Short names accepted by parse_strategy in addition to enum names/values
_STRATEGY_ALIASES = {
    'insertion': ViewStrategy.INSERTION,
    'insertion_order': ViewStrategy.INSERTION,
    'reverse': ViewStrategy.REVERSE,
    'asc': ViewStrategy.ASCENDING,
    'ascending': ViewStrategy.ASCENDING,
    'desc': ViewStrategy.DESCENDING,
    'descending': ViewStrategy.DESCENDING,
    'side_cross': ViewStrategy.SIDE_CROSS,
    'sidecross': ViewStrategy.SIDE_CROSS,
    'middle_out': ViewStrategy.MIDDLE_OUT,
    'middleout': ViewStrategy.MIDDLE_OUT,
}


def parse_strategy(strategy: Union[ViewStrategy, str]) -> ViewStrategy:
    """Resolve a strategy given as enum member, enum name, value or alias.

    Args:
        strategy: ViewStrategy or a string such as "asc", "SIDE_CROSS"
            or "middle_out_order"

    Returns:
        The matching ViewStrategy

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, ViewStrategy):
        return strategy

    key = str(strategy).strip().lower().replace('-', '_')
    for member in ViewStrategy:
        if key in (member.value, member.name.lower()):
            return member
    if key in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[key]

    choices = [member.value for member in ViewStrategy] + sorted(_STRATEGY_ALIASES)
    raise ValueError(
        f"Unknown view strategy: {strategy}. "
        f"Choose from: {', '.join(choices)}"
    )


@dataclass
class ContainerConfig:
    """Behavioral configuration for an OrderedContainer.

    Attributes:
        cache_views: Reuse a materialized view until the container changes
        view_cache_size: Maximum number of memoized views per container
        advance_policy: Cursor behavior when advanced past its end
    """

    cache_views: bool = True
    view_cache_size: int = len(ViewStrategy)
    advance_policy: AdvancePolicy = AdvancePolicy.RAISE

    @classmethod
    def uncached(cls) -> 'ContainerConfig':
        """Create config that recomputes every view on request."""
        return cls(cache_views=False)

    @classmethod
    def lenient(cls) -> 'ContainerConfig':
        """Create config whose cursors ignore advances past the end."""
        return cls(advance_policy=AdvancePolicy.CLAMP)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.view_cache_size, int) or isinstance(self.view_cache_size, bool):
            errors.append("view_cache_size must be an integer")
        elif self.view_cache_size <= 0:
            errors.append("view_cache_size must be positive")

        if not isinstance(self.advance_policy, AdvancePolicy):
            errors.append(
                f"advance_policy must be an AdvancePolicy, got {self.advance_policy!r}"
            )

        return errors
