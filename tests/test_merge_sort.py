import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from seqmerge.merge_sort import merge_sort


class TestMergeSort(unittest.TestCase):
    """Tests for the merge sort built on the ordered merge."""

    def test_empty_list(self):
        self.assertEqual(merge_sort([]), [])

    def test_single_element(self):
        self.assertEqual(merge_sort([42]), [42])

    def test_sorted_list(self):
        self.assertEqual(merge_sort([1, 2, 3, 4, 5]), [1, 2, 3, 4, 5])

    def test_reverse_sorted(self):
        self.assertEqual(merge_sort([5, 4, 3, 2, 1]), [1, 2, 3, 4, 5])

    def test_duplicates(self):
        self.assertEqual(merge_sort([3, 1, 4, 1, 5, 9, 2, 6]), [1, 1, 2, 3, 4, 5, 6, 9])

    def test_with_key(self):
        data = ["banana", "apple", "cherry"]
        result = merge_sort(data, key=lambda x: x[0])
        self.assertEqual(result, ["apple", "banana", "cherry"])

    def test_stability(self):
        """Equal elements keep original order."""
        data = [(1, 'a'), (2, 'b'), (1, 'c'), (2, 'd'), (1, 'e')]
        result = merge_sort(data, key=lambda x: x[0])
        self.assertEqual(result, [(1, 'a'), (1, 'c'), (1, 'e'), (2, 'b'), (2, 'd')])

    def test_input_not_mutated(self):
        data = [3, 1, 2]
        merge_sort(data)
        self.assertEqual(data, [3, 1, 2])

    def test_set_input(self):
        self.assertEqual(merge_sort({5, 3, 1, 4, 2}), [1, 2, 3, 4, 5])

    def test_matches_sorted(self):
        data = [(i * 7919) % 101 for i in range(300)]
        self.assertEqual(merge_sort(data), sorted(data))


if __name__ == '__main__':
    unittest.main()
