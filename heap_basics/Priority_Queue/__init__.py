from .priority_queue_heap import PriorityQueueHeap, Entry
from .errors import InvalidArgumentError, EmptyQueueError
from .heap_printer import (
    format_heap_array,
    format_heap_tree,
    show_heap
)

__all__ = [
    "PriorityQueueHeap",
    "Entry",
    "InvalidArgumentError",
    "EmptyQueueError",
    "format_heap_array",
    "format_heap_tree",
    "show_heap"
]
