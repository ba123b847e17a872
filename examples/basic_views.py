#!/usr/bin/env python3
"""
Basic example showing every traversal view of an OrderedContainer.

This example demonstrates:
- Adding and removing values
- Walking each view with begin/end cursors
- Using the same container with strings
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderviewlib import OrderedContainer, NotFoundError


def print_traversal(label, it, end):
    """Walk a cursor pair and print the elements on one line."""
    values = []
    while it != end:
        values.append(str(it.current()))
        it.advance()
    print(f"{label + ':':<19}{' '.join(values)}")


def show_all(container):
    print(f"Size of container:  {container.size()}")
    print(f"Container contents: {container}")
    print_traversal("Ascending order", container.begin_ascending_order(), container.end_ascending_order())
    print_traversal("Descending order", container.begin_descending_order(), container.end_descending_order())
    print_traversal("Side cross order", container.begin_side_cross_order(), container.end_side_cross_order())
    print_traversal("Reverse order", container.begin_reverse_order(), container.end_reverse_order())
    print_traversal("Regular order", container.begin_order(), container.end_order())
    print_traversal("Middle out order", container.begin_middle_out_order(), container.end_middle_out_order())


def main():
    """Demonstrate the six views on numbers and strings."""
    numbers = OrderedContainer()
    for value in (7, 15, 6, 1, 2):
        numbers.add(value)

    show_all(numbers)
    print("-" * 50)

    words = OrderedContainer(["Hello", "World", "C++", "Programming", "Is", "Fun"])
    show_all(words)
    print("-" * 50)

    numbers.remove(15)
    print(f"After removing 15:  {numbers}")
    try:
        numbers.remove(99)
    except NotFoundError as e:
        print(f"Removing 99 failed: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
