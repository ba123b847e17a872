"""Tests for the high-level functional API."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderviewlib import (
    OrderedContainer,
    ViewStrategy,
    traverse_view,
    collect_views,
    render_view,
    view_strategies,
)


def test_traverse_view_from_list():
    assert list(traverse_view([10, 20, 30, 40, 50], "middle_out")) == [30, 20, 40, 10, 50]


def test_traverse_view_default_is_insertion():
    assert list(traverse_view((3, 1, 2))) == [3, 1, 2]


def test_traverse_view_from_container():
    container = OrderedContainer([5, 15, 25, 35])
    assert list(traverse_view(container, ViewStrategy.MIDDLE_OUT)) == [25, 15, 35, 5]


def test_traverse_view_rejects_unknown_strategy_eagerly():
    with pytest.raises(ValueError):
        traverse_view([1, 2], "spiral")


def test_collect_views():
    views = collect_views([7, 15, 6, 1, 2])
    assert set(views) == set(ViewStrategy)
    assert views[ViewStrategy.INSERTION] == [7, 15, 6, 1, 2]
    assert views[ViewStrategy.REVERSE] == [2, 1, 6, 15, 7]
    assert views[ViewStrategy.ASCENDING] == [1, 2, 6, 7, 15]
    assert views[ViewStrategy.DESCENDING] == [15, 7, 6, 2, 1]
    assert views[ViewStrategy.SIDE_CROSS] == [1, 15, 2, 7, 6]
    assert views[ViewStrategy.MIDDLE_OUT] == [6, 15, 1, 7, 2]


def test_collect_views_empty():
    assert all(ordering == [] for ordering in collect_views([]).values())


def test_render_view():
    assert render_view([3, 1, 2], "asc") == "[1, 2, 3]"
    assert render_view([], "desc") == "[]"


def test_view_strategies():
    assert view_strategies() == list(ViewStrategy)
    assert len(view_strategies()) == 6
