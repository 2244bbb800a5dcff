from unittest import TestCase

import numpy as np

from masplit.data.normalize import (
    decode_value,
    normalize_attr_strings,
    normalize_attr_values,
    to_text,
)


class NormalizeAttrValuesTests(TestCase):
    def test_multi_dimensional_string_arrays(self):
        a = np.array([["a"], ["b"]], dtype=object)

        b = normalize_attr_strings(a)
        np.testing.assert_array_equal(b, [[b"a"], [b"b"]])

    def test_missing_strings(self):
        a = np.array(["7,2", None, np.nan], dtype=object)

        np.testing.assert_array_equal(normalize_attr_values(a), [b"7,2", b"", b""])

    def test_non_ascii(self):
        self.assertEqual(normalize_attr_values("é"), b"&#233;")

    def test_numbers_and_bools(self):
        np.testing.assert_array_equal(normalize_attr_values(np.array([1.5, 2])), [1.5, 2.0])
        self.assertEqual(normalize_attr_values(True), 1)
        self.assertEqual(normalize_attr_values(np.array([True, False])).dtype, np.ubyte)


class DecodeValueTests(TestCase):
    def test_bytes(self):
        decoded = decode_value(np.array([b"a", b"&#233;"]))
        self.assertEqual(list(decoded), ["a", "é"])

    def test_scalar(self):
        self.assertEqual(decode_value(np.array(b",")), ",")
        self.assertEqual(decode_value(np.array(3)), 3)

    def test_numbers(self):
        a = np.array([[1.0, np.nan]])
        np.testing.assert_array_equal(decode_value(a), a)


class ToTextTests(TestCase):
    def test_to_text(self):
        self.assertEqual(to_text("7,2"), "7,2")
        self.assertEqual(to_text(b"7,2"), "7,2")
        self.assertEqual(to_text(7), "7")
