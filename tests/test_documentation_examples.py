"""Test that the shipped examples run and print what they promise."""

import importlib.util
from pathlib import Path

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def load_example(name):
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_basic_views_example(capsys):
    example = load_example("basic_views")
    assert example.main() == 0

    output = capsys.readouterr().out
    assert "Size of container:  5" in output
    assert "Container contents: [7, 15, 6, 1, 2]" in output
    assert "Ascending order:   1 2 6 7 15" in output
    assert "Descending order:  15 7 6 2 1" in output
    assert "Side cross order:  1 15 2 7 6" in output
    assert "Reverse order:     2 1 6 15 7" in output
    assert "Regular order:     7 15 6 1 2" in output
    assert "Middle out order:  6 15 1 7 2" in output
    assert "Side cross order:  C++ World Fun Programming Hello Is" in output
    assert "After removing 15:  [7, 6, 1, 2]" in output
    assert "Removing 99 failed: Element was not found in the container: 99" in output
