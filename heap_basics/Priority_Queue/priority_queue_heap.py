"""
Max-priority queue on an array-backed binary heap.

Features:
- Explicit integer priorities, highest priority extracted first
- Implicit binary tree over a single list of (item, priority) entries
- Sift-up on insertion, sift-down on extraction, both O(log n)
- Storage capacity doubled on demand and never shrunk

Usage:

heap = PriorityQueueHeap(capacity = 4)  # creates an empty heap
heap.insert(item, priority)             # pushes a new item with its priority
item = heap.extract_max()               # pops the highest-priority item
item = heap.peek_max()                  # highest-priority item without popping it
"""

from typing import (
    Generic,
    List,
    NamedTuple,
    Optional,
    TypeVar
)

from .errors import InvalidArgumentError, EmptyQueueError

E = TypeVar("E")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


class Entry(NamedTuple):
    item: object
    priority: int


class PriorityQueueHeap(Generic[E]):
    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        verbose: bool = False,
    ):
        """
        Create an empty heap.

        Parameters:
        - capacity (int): Initial number of storage slots, must be non-negative.
        - verbose (bool): Print a line whenever the storage grows.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity)}")
        if capacity < 0:
            raise InvalidArgumentError(f"capacity must be non-negative, got {capacity}")

        self._entries: List[Optional[Entry]] = [None] * capacity
        self._size = 0
        self.verbose = verbose

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"PriorityQueueHeap(size={self._size}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return self._size == 0


    def insert(self, item: E, priority: int) -> None:
        """
        Add `item` with the given priority, growing the storage when it is full.

        Steps:
        1. Validate the priority before touching any state.
        2. Double the capacity if every slot is populated.
        3. Store the entry at index `size` and sift it up toward the root.

        Parameters:
        - item (E): The element to store, no requirements on its type.
        - priority (int): Non-negative integer priority, larger comes out first.
        """
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError(f"priority must be an int, got {type(priority)}")
        if priority < 0:
            raise InvalidArgumentError(f"priority must be non-negative, got {priority}")

        if self._size >= self.capacity:
            self._grow()

        index = self._size
        self._entries[index] = Entry(item, priority)
        self._size += 1
        self._sift_up(index)

    def extract_max(self) -> E:
        """
        Remove and return the item with the highest priority.

        The last entry replaces the root and is sifted down until both of its
        children have a priority no greater than its own.

        Returns:
        - E: The item that was stored at the root.
        """
        if self._size == 0:
            raise EmptyQueueError("extract_max from an empty heap")

        root = self._entries[0]
        last_index = self._size - 1

        # move the last entry to the root
        self._entries[0] = self._entries[last_index]
        self._entries[last_index] = None
        self._size -= 1

        self._sift_down(0)
        return root.item

    def peek_max(self) -> E:
        if self._size == 0:
            raise EmptyQueueError("peek_max from an empty heap")
        return self._entries[0].item


    def _grow(self) -> None:
        old_capacity = self.capacity
        new_capacity = max(1, old_capacity * GROWTH_FACTOR)
        self._entries.extend([None] * (new_capacity - old_capacity))
        if self.verbose:
            print(f"_grow: capacity {old_capacity} -> {new_capacity} (size {self._size})")

    def _sift_up(self, index: int) -> None:
        entries = self._entries
        while index > 0:
            parent = self.parent_index(index)
            # ties stay put
            if entries[index].priority <= entries[parent].priority:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        entries = self._entries
        while True:
            left = self.left_child_index(index)
            right = self.right_child_index(index)

            if right < self._size and entries[right].priority > entries[left].priority:
                greater_child = right
            elif left < self._size:
                greater_child = left
            else:
                return # leaf

            if entries[greater_child].priority <= entries[index].priority:
                return
            self._swap(index, greater_child)
            index = greater_child

    def _swap(self, i: int, j: int) -> None:
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]


    @staticmethod
    def parent_index(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def left_child_index(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def right_child_index(index: int) -> int:
        return 2 * index + 2

    def _item_at(self, index: int) -> Optional[E]:
        if 0 <= index < self._size:
            return self._entries[index].item
        return None

    def parent_of(self, index: int) -> Optional[E]:
        """Item stored at the parent of `index`, or None for the root or an empty slot."""
        if index <= 0 or index >= self._size:
            return None
        return self._item_at(self.parent_index(index))

    def left_child_of(self, index: int) -> Optional[E]:
        if index < 0 or index >= self._size:
            return None
        return self._item_at(self.left_child_index(index))

    def right_child_of(self, index: int) -> Optional[E]:
        if index < 0 or index >= self._size:
            return None
        return self._item_at(self.right_child_index(index))


    def entries(self) -> List[Entry]:
        """Copy of the populated entries in storage (level) order."""
        return list(self._entries[:self._size])

    def is_heap_ordered(self) -> bool:
        entries = self._entries
        return all(
            entries[self.parent_index(i)].priority >= entries[i].priority
            for i in range(1, self._size)
        )
