"""Tests for memoized views.

Views are cached per container until the next mutation, so begin/end
accessor pairs share one materialized ordering.
"""

import logging

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderviewlib import OrderedContainer, ContainerConfig, AdvancePolicy, ViewStrategy


@pytest.fixture
def container():
    return OrderedContainer([7, 15, 6, 1, 2])


def test_begin_and_end_share_view(container):
    begin = container.begin_side_cross_order()
    end = container.end_side_cross_order()
    assert begin.view is end.view
    assert container.cache_misses == 1
    assert container.cache_hits == 1


def test_string_and_enum_hit_same_entry(container):
    assert container.view("asc") is container.view(ViewStrategy.ASCENDING)


def test_add_invalidates_cache(container):
    before = container.view("order")
    container.add(3)
    after = container.view("order")
    assert before is not after
    assert after.to_list() == [7, 15, 6, 1, 2, 3]
    assert before.to_list() == [7, 15, 6, 1, 2]


def test_remove_invalidates_cache(container):
    before = container.view("desc")
    container.remove(15)
    assert container.view("desc").to_list() == [7, 6, 2, 1]
    assert before.to_list() == [15, 7, 6, 2, 1]


def test_failed_remove_keeps_cache(container):
    before = container.view("desc")
    with pytest.raises(LookupError):
        container.remove(99)
    assert container.view("desc") is before


def test_assign_invalidates_cache(container):
    before = container.view("order")
    container.assign(OrderedContainer([1]))
    assert container.view("order") is not before
    assert container.view("order").to_list() == [1]


def test_uncached_config():
    container = OrderedContainer([2, 1], config=ContainerConfig.uncached())
    assert container.view("asc") is not container.view("asc")
    assert container.cache_hits == 0
    assert container.cache_misses == 0


def test_small_cache_evicts_least_recently_used():
    container = OrderedContainer([2, 1, 3], config=ContainerConfig(view_cache_size=1))
    first = container.view("asc")
    container.view("desc")
    assert container.view("asc") is not first
    assert container.view("asc").to_list() == [1, 2, 3]


def test_views_carry_advance_policy():
    container = OrderedContainer([1], config=ContainerConfig(advance_policy=AdvancePolicy.CLAMP))
    assert container.view("order").advance_policy is AdvancePolicy.CLAMP


class TestConfigValidation:
    """Test ContainerConfig.validate."""

    def test_default_is_valid(self):
        assert ContainerConfig().validate() == []

    def test_default_cache_holds_every_strategy(self):
        assert ContainerConfig().view_cache_size == len(ViewStrategy)

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_cache_size(self, size):
        assert "view_cache_size must be positive" in ContainerConfig(view_cache_size=size).validate()

    def test_non_integer_cache_size(self):
        assert "view_cache_size must be an integer" in ContainerConfig(view_cache_size=2.5).validate()

    def test_bad_policy(self):
        errors = ContainerConfig(advance_policy="clamp").validate()
        assert len(errors) == 1
        assert "advance_policy" in errors[0]

    def test_presets(self):
        assert ContainerConfig.uncached().cache_views is False
        assert ContainerConfig.lenient().advance_policy is AdvancePolicy.CLAMP


def test_materialization_is_logged(caplog):
    container = OrderedContainer([2, 1])
    with caplog.at_level(logging.DEBUG, logger="orderviewlib.core.container"):
        container.view("side_cross")
        container.view("side_cross")
    messages = [r.getMessage() for r in caplog.records if "materialized" in r.getMessage()]
    assert messages == [f"container {container.token}: materialized SIDE_CROSS view of 2 element(s)"]
