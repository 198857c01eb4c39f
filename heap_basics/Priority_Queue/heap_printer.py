"""
Console renderings of a PriorityQueueHeap, for debugging only.
"""

from typing import List

from .priority_queue_heap import PriorityQueueHeap

RULER = "=" * 90
LEADING_BLANKS = 32


def format_heap_array(heap: PriorityQueueHeap) -> str:
    """Priorities of the populated slots in storage order."""
    return "Heap array: " + "".join(f"{entry.priority} " for entry in heap.entries())


def format_heap_tree(heap: PriorityQueueHeap) -> str:
    """
    Lay the priorities out level by level: one node on the first row, then
    two, four and so on, with the indentation halved on every level.

    Returns:
    - str: The rows framed above and below by a ruler of '=' characters.
    """
    priorities = [entry.priority for entry in heap.entries()]
    parts: List[str] = []

    n_blanks = LEADING_BLANKS
    nodes_per_row = 1
    column = 0

    for index, priority in enumerate(priorities):
        if column == 0:
            parts.append(" " * n_blanks)
        parts.append(str(priority))

        if index == len(priorities) - 1:
            break

        column += 1
        if column == nodes_per_row:
            # end of level
            n_blanks //= 2
            nodes_per_row *= 2
            column = 0
            parts.append("\n\n")
        else:
            parts.append(" " * (n_blanks * 2 - 2))

    return f"{RULER}\n{''.join(parts)}\n{RULER}"


def show_heap(heap: PriorityQueueHeap) -> None:
    print(format_heap_array(heap))
    print(format_heap_tree(heap))
