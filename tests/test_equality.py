"""Tests for deep equality."""

from __future__ import annotations

import unittest

from template_runtime import UNDEFINED, is_equal


class IsEqualTests(unittest.TestCase):
    def test_identical_values_are_equal(self) -> None:
        items = [1, [2, {"a": 3}]]
        self.assertTrue(is_equal(items, items))
        marker = object()
        self.assertTrue(is_equal(marker, marker))

    def test_scalars_compare_by_value_within_one_kind(self) -> None:
        self.assertTrue(is_equal("abc", "".join(["a", "bc"])))
        self.assertTrue(is_equal(1, 1.0))
        self.assertFalse(is_equal(float("nan"), float("nan")))

    def test_no_cross_kind_coercion(self) -> None:
        self.assertFalse(is_equal(1, "1"))
        self.assertFalse(is_equal(1, True))
        self.assertFalse(is_equal(0, False))
        self.assertFalse(is_equal(None, UNDEFINED))
        self.assertFalse(is_equal([], {}))

    def test_arrays_compare_by_position(self) -> None:
        self.assertTrue(is_equal([1, [2, 3]], [1, [2, 3]]))
        self.assertTrue(is_equal([1, 2], (1, 2)))
        self.assertFalse(is_equal([1, 2], [2, 1]))
        self.assertFalse(is_equal([1, 2], [1, 2, 3]))

    def test_mappings_ignore_key_order(self) -> None:
        self.assertTrue(is_equal({"a": 1, "b": [1]}, {"b": [1], "a": 1}))
        self.assertFalse(is_equal({"a": 1}, {"a": 2}))
        self.assertFalse(is_equal({"a": 1}, {"a": 1, "b": 2}))

    def test_missing_key_fails_even_with_equal_counts(self) -> None:
        self.assertFalse(is_equal({"a": UNDEFINED}, {"b": UNDEFINED}))

    def test_equality_is_symmetric(self) -> None:
        pairs = [
            ([1, {"x": [2]}], [1, {"x": [2]}]),
            ([1, 2], [1, 3]),
            ({"a": 1}, {"a": 1, "b": 1}),
            ("1", 1),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(is_equal(a, b), is_equal(b, a))

    def test_distinct_opaque_objects_are_not_equal(self) -> None:
        self.assertFalse(is_equal(object(), object()))


if __name__ == "__main__":
    unittest.main()
