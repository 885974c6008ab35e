import unittest
import sys
import os
import io
from collections import deque
from contextlib import redirect_stdout
from operator import itemgetter

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import seqmerge.ordered_merge as merge_mod
from seqmerge.ordered_merge import merge, merge_all
from seqmerge.validators import is_non_decreasing
from seqmerge.generators.sorted_runs import random_run_pair


class TestMerge(unittest.TestCase):
    """Tests for the two-pointer ordered merge."""

    def test_duplicates_on_both_sides(self):
        self.assertEqual(
            merge([2, 4, 6, 6, 7], [1, 2, 9, 11, 11, 13]),
            [1, 2, 2, 4, 6, 6, 7, 9, 11, 11, 13],
        )

    def test_interleaved(self):
        self.assertEqual(merge([1, 3, 5], [2, 4, 6]), [1, 2, 3, 4, 5, 6])

    def test_empty_first(self):
        self.assertEqual(merge([], [3, 1, 2]), [3, 1, 2])

    def test_empty_second(self):
        self.assertEqual(merge([4, 5, 6], []), [4, 5, 6])

    def test_both_empty(self):
        self.assertEqual(merge([], []), [])

    def test_tie_takes_from_second(self):
        result = merge([(5, "a")], [(5, "b")], key=itemgetter(0))
        self.assertEqual(result, [(5, "b"), (5, "a")])

    def test_tie_run_all_second_first(self):
        """Every equal element of the second input precedes those of the first."""
        a = [(1, "a1"), (1, "a2")]
        b = [(1, "b1"), (1, "b2")]
        result = merge(a, b, key=itemgetter(0))
        self.assertEqual(result, [(1, "b1"), (1, "b2"), (1, "a1"), (1, "a2")])

    def test_key_function(self):
        result = merge(["bb", "dddd"], ["a", "ccc"], key=len)
        self.assertEqual(result, ["a", "bb", "ccc", "dddd"])

    def test_result_is_new_list(self):
        a = [1, 2]
        result = merge(a, [])
        self.assertIsInstance(result, list)
        self.assertIsNot(result, a)

    def test_inputs_drained(self):
        a = [1, 4, 9]
        b = deque([2, 3])
        merge(a, b)
        self.assertEqual(a, [])
        self.assertEqual(len(b), 0)

    def test_deque_inputs(self):
        self.assertEqual(merge(deque([1, 3]), deque([2, 4])), [1, 2, 3, 4])

    def test_tuple_inputs_untouched(self):
        a = (1, 3)
        b = (2,)
        self.assertEqual(merge(a, b), [1, 2, 3])
        self.assertEqual(a, (1, 3))

    def test_ordered_dict_keys_input(self):
        """Insertion-ordered dict works like an ordered set and is cleared."""
        a = dict.fromkeys([2, 4, 6, 7])
        b = [1, 2, 9]
        self.assertEqual(merge(a, b), [1, 2, 2, 4, 6, 7, 9])
        self.assertEqual(a, {})

    def test_same_list_for_both_arguments(self):
        a = [1, 2, 3]
        self.assertEqual(merge(a, a), [1, 2, 3])
        self.assertEqual(a, [])

    def test_failed_comparison_keeps_list_input(self):
        a = [1, 2, 3]
        b = ["x"]
        with self.assertRaises(TypeError):
            merge(a, b)
        self.assertEqual(a, [1, 2, 3])
        self.assertEqual(b, ["x"])

    def test_failed_key_keeps_dict_input(self):
        a = dict.fromkeys([1, 2])
        with self.assertRaises(ZeroDivisionError):
            merge(a, [0], key=lambda x: 1 / x)
        self.assertEqual(list(a), [1, 2])

    def test_same_deque_for_both_arguments(self):
        d = deque([1, 2, 3])
        self.assertEqual(merge(d, d), [1, 2, 3])
        self.assertEqual(len(d), 0)

    def test_merge_with_empty_twice(self):
        original = [1, 1, 2, 5]
        first = merge(list(original), [])
        second = merge(list(original), [])
        self.assertEqual(first, original)
        self.assertEqual(second, original)

    def test_unsorted_input_keeps_every_element(self):
        result = merge([5, 1], [3, 2])
        self.assertEqual(sorted(result), [1, 2, 3, 5])
        self.assertEqual(len(result), 4)

    def test_random_pairs(self):
        for seed in range(20):
            a, b = random_run_pair(seed * 3, 50 - seed, seed=seed)
            result = merge(list(a), list(b))
            self.assertTrue(is_non_decreasing(result))
            self.assertEqual(sorted(a + b), result)

    def test_debug_trace(self):
        old = merge_mod.DEBUG_MODE
        merge_mod.DEBUG_MODE = True
        try:
            buf = io.StringIO()
            with redirect_stdout(buf):
                merge([1], [2])
        finally:
            merge_mod.DEBUG_MODE = old
        out = buf.getvalue()
        self.assertIn("[MERGE DEBUG] step 0: took 1 from first", out)
        self.assertIn("tail: 0 from first, 1 from second", out)

    def test_silent_by_default(self):
        old = merge_mod.DEBUG_MODE
        merge_mod.DEBUG_MODE = False
        try:
            buf = io.StringIO()
            with redirect_stdout(buf):
                merge([1, 2], [0, 3])
        finally:
            merge_mod.DEBUG_MODE = old
        self.assertEqual(buf.getvalue(), "")


class TestMergeAll(unittest.TestCase):

    def test_three_sequences(self):
        self.assertEqual(merge_all([[1, 4], [2, 5], [3, 6]]), [1, 2, 3, 4, 5, 6])

    def test_no_sequences(self):
        self.assertEqual(merge_all([]), [])

    def test_later_sequences_win_ties(self):
        seqs = [[(1, "x")], [(1, "y")], [(1, "z")]]
        result = merge_all(seqs, key=itemgetter(0))
        self.assertEqual(result, [(1, "z"), (1, "y"), (1, "x")])

    def test_all_inputs_drained(self):
        seqs = [[1], [2, 3], deque([0])]
        merge_all(seqs)
        self.assertTrue(all(len(s) == 0 for s in seqs))


if __name__ == '__main__':
    unittest.main()
