from unittest import TestCase

import numpy as np
import pandas as pd

from masplit.data import Matrix, read_tsv, write_tsv
from masplit.split import masplit
from masplit.tests.base import TEST_AD, get_temp_writable_path


class ReadTsvTests(TestCase):
    def test_read(self):
        matrix = read_tsv(TEST_AD)

        self.assertEqual(matrix.name, "ad")
        self.assertEqual(matrix.shape, (3, 3))
        self.assertEqual(list(matrix.row_names), ["Variant_1", "Variant_2", "Variant_3"])
        self.assertEqual(list(matrix.col_names), ["Sample_1", "Sample_2", "Sample_3"])
        self.assertEqual(matrix.values[0, 0], "9,23,12")

    def test_missing_markers(self):
        result = masplit(read_tsv(TEST_AD))

        np.testing.assert_array_equal(
            result.values, [[23.0, 7.0, 20.0], [19.0, 22.0, 18.0], [np.nan, 21.0, np.nan]]
        )

    def test_custom_missing_markers(self):
        matrix = read_tsv(TEST_AD, na_values=["NA"])
        self.assertEqual(matrix.values[2, 2], ".")

    def test_row_names_are_not_missing(self):
        with get_temp_writable_path(suffix=".tsv") as filename:
            with open(filename, "w") as f:
                f.write("id\tS1\nNA\t7,2\n.\t3\n")
            matrix = read_tsv(filename)

        self.assertEqual(list(matrix.row_names), ["NA", "."])
        np.testing.assert_array_equal(masplit(matrix).values, [[7.0], [3.0]])

    def test_without_row_names(self):
        matrix = read_tsv(TEST_AD, row_names=False)

        self.assertEqual(matrix.shape, (3, 4))
        self.assertEqual(list(matrix.row_names), [0, 1, 2])


class WriteTsvTests(TestCase):
    def test_missing_values_are_written_as_na(self):
        result = masplit(read_tsv(TEST_AD))

        with get_temp_writable_path(suffix=".tsv") as filename:
            write_tsv(result, filename)
            frame = pd.read_csv(filename, sep="\t", index_col=0)

        self.assertEqual(list(frame.index), ["Variant_1", "Variant_2", "Variant_3"])
        self.assertEqual(list(frame.columns), ["Sample_1", "Sample_2", "Sample_3"])
        np.testing.assert_array_equal(frame.values, result.values)

    def test_without_labels(self):
        with get_temp_writable_path(suffix=".tsv") as filename:
            write_tsv(Matrix(np.array([[1.0, np.nan]])), filename)
            with open(filename) as f:
                self.assertEqual(f.read(), "1.0\tNA\n")
