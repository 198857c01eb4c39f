import os
import io
from contextlib import ExitStack, redirect_stdout
import unittest

from heap_basics.Priority_Queue import PriorityQueueHeap # implementation of the heap
from heap_basics.Priority_Queue import (
    format_heap_array,
    format_heap_tree,
    show_heap
)
from heap_basics.utils import tee_stdout # Utility to tee stdout to a file


LOG_PATH = os.path.join(os.path.dirname(__file__), "test_02_heap_printer.txt")
RULER = "=" * 90


class TestHeapPrinter(unittest.TestCase):
    """
    Unit tests for the debug renderings of a heap
    """
    @classmethod
    def setUpClass(cls):
        """
        class setup: tee stdout to a log file
        """
        cls._stack = ExitStack()
        cls._stack.enter_context(tee_stdout(LOG_PATH))

    @classmethod
    def tearDownClass(cls):
        """
        class teardown: restore stdout and close log file
        """
        cls._stack.close()


    def _example_heap(self) -> PriorityQueueHeap:
        heap = PriorityQueueHeap(capacity = 4)
        for item, priority in [("A", 5), ("B", 9), ("C", 3), ("D", 7)]:
            heap.insert(item, priority)
        return heap


    def test_01_heap_array(self):
        print(f"\n[{self._testMethodName}]")
        heap = self._example_heap()
        rendered = format_heap_array(heap)
        print(rendered)
        self.assertEqual(rendered, "Heap array: 9 7 3 5 ")

        self.assertEqual(format_heap_array(PriorityQueueHeap(capacity = 0)), "Heap array: ")


    def test_02_heap_tree(self):
        """
        Storage [9, 7, 3, 5] renders as

                                        9

                        7                              3

                5
        """
        print(f"\n[{self._testMethodName}]")
        heap = self._example_heap()
        rendered = format_heap_tree(heap)
        print(rendered)

        expected_body = (
            " " * 32 + "9" + "\n\n"
            + " " * 16 + "7" + " " * 30 + "3" + "\n\n"
            + " " * 8 + "5"
        )
        self.assertEqual(rendered, f"{RULER}\n{expected_body}\n{RULER}")


    def test_03_empty_and_single(self):
        print(f"\n[{self._testMethodName}]")
        heap = PriorityQueueHeap(capacity = 0)
        self.assertEqual(format_heap_tree(heap), f"{RULER}\n\n{RULER}")

        heap.insert("x", 42)
        self.assertEqual(format_heap_tree(heap), f"{RULER}\n{' ' * 32}42\n{RULER}")


    def test_04_show_heap(self):
        print(f"\n[{self._testMethodName}]")
        heap = self._example_heap()
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            show_heap(heap)

        output = buffer.getvalue()
        print(output)
        self.assertTrue(output.startswith("Heap array: 9 7 3 5 \n"))
        self.assertIn(format_heap_tree(heap), output)
        # rendering never mutates the heap
        self.assertEqual(heap.size, 4)
        self.assertEqual(heap.extract_max(), "B")


if __name__ == '__main__':
    unittest.main()
