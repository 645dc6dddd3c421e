"""Tests for value classification and text coercion."""

from __future__ import annotations

import unittest
from collections import OrderedDict
from decimal import Decimal

from template_runtime import UNDEFINED, Kind, classify, to_text


class ClassifyTests(unittest.TestCase):
    def test_collections_are_split_into_arrays_and_objects(self) -> None:
        self.assertIs(classify([]), Kind.ARRAY)
        self.assertIs(classify((1, 2)), Kind.ARRAY)
        self.assertIs(classify({}), Kind.OBJECT)
        self.assertIs(classify(OrderedDict(a=1)), Kind.OBJECT)

    def test_booleans_are_not_numbers(self) -> None:
        self.assertIs(classify(True), Kind.BOOLEAN)
        self.assertIs(classify(False), Kind.BOOLEAN)
        self.assertIs(classify(0), Kind.NUMBER)
        self.assertIs(classify(2.5), Kind.NUMBER)
        self.assertIs(classify(Decimal("1.5")), Kind.NUMBER)

    def test_text_is_never_an_array(self) -> None:
        self.assertIs(classify(""), Kind.STRING)
        self.assertIs(classify("abc"), Kind.STRING)
        self.assertIs(classify(b"abc"), Kind.OTHER)

    def test_null_and_undefined_share_a_kind(self) -> None:
        self.assertIs(classify(None), Kind.NULL)
        self.assertIs(classify(UNDEFINED), Kind.NULL)

    def test_unrecognized_values_degrade_to_other(self) -> None:
        self.assertIs(classify(object()), Kind.OTHER)
        self.assertIs(classify({1, 2}), Kind.OTHER)
        self.assertIs(classify(len), Kind.OTHER)


class UndefinedTests(unittest.TestCase):
    def test_undefined_is_a_falsy_singleton(self) -> None:
        self.assertFalse(UNDEFINED)
        self.assertIs(type(UNDEFINED)(), UNDEFINED)
        self.assertEqual(repr(UNDEFINED), "UNDEFINED")


class ToTextTests(unittest.TestCase):
    def test_scalars_render_like_the_template_language(self) -> None:
        self.assertEqual(to_text("x"), "x")
        self.assertEqual(to_text(True), "true")
        self.assertEqual(to_text(False), "false")
        self.assertEqual(to_text(None), "null")
        self.assertEqual(to_text(UNDEFINED), "undefined")

    def test_numbers_drop_integral_fraction(self) -> None:
        self.assertEqual(to_text(3), "3")
        self.assertEqual(to_text(3.0), "3")
        self.assertEqual(to_text(3.5), "3.5")
        self.assertEqual(to_text(float("nan")), "NaN")
        self.assertEqual(to_text(float("-inf")), "-Infinity")

    def test_exponents_are_not_zero_padded(self) -> None:
        self.assertEqual(to_text(1e-7), "1e-7")
        self.assertEqual(to_text(-2.5e-8), "-2.5e-8")
        self.assertEqual(to_text(1e21), "1e+21")
        self.assertEqual(to_text(1.5e300), "1.5e+300")

    def test_small_fractions_stay_positional(self) -> None:
        self.assertEqual(to_text(1e-5), "0.00001")
        self.assertEqual(to_text(0.000123), "0.000123")
        self.assertEqual(to_text(0.1), "0.1")

    def test_collections(self) -> None:
        self.assertEqual(to_text([1, None, "a", True]), "1,,a,true")
        self.assertEqual(to_text({"a": 1}), "[object Object]")


if __name__ == "__main__":
    unittest.main()
