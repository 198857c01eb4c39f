from .Priority_Queue import (
    PriorityQueueHeap,
    Entry,
    InvalidArgumentError,
    EmptyQueueError,
    format_heap_array,
    format_heap_tree,
    show_heap
)
from .utils import tee_stdout

__all__ = [
    "PriorityQueueHeap",
    "Entry",
    "InvalidArgumentError",
    "EmptyQueueError",
    "format_heap_array",
    "format_heap_tree",
    "show_heap",
    "tee_stdout"
]
