from unittest import TestCase

import h5py
import numpy as np

from masplit.constants import (
    COL_ATTRS,
    DATE_CREATED,
    ID,
    LAYERS,
    MATRICES,
    METADATA,
    ROW_ATTRS,
    SDK_VERSION,
    VALUES,
)
from masplit.data import H5Reader, H5Writer, Matrix
from masplit.exceptions import UserError, ValidationError
from masplit.split import masplit
from masplit.tests.base import allele_depths, get_temp_writable_path


class H5WriterTests(TestCase):
    def test_store_file_metadata(self):
        with get_temp_writable_path() as filename:
            with H5Writer(filename):
                pass

            with h5py.File(filename, "r") as f:
                self.assertIn(SDK_VERSION, f[METADATA])
                self.assertIn(DATE_CREATED, f[METADATA])

    def test_store_layers_and_attrs(self):
        result = masplit(allele_depths())
        result.name = "max_depth"

        with get_temp_writable_path() as filename:
            with H5Writer(filename) as writer:
                writer.write(result)

            with h5py.File(filename, "r") as f:
                group = f[MATRICES]["max_depth"]
                np.testing.assert_array_equal(group[LAYERS][VALUES][()], result.values)
                np.testing.assert_array_equal(
                    group[ROW_ATTRS][ID][()], [b"Variant_1", b"Variant_2", b"Variant_3"]
                )
                np.testing.assert_array_equal(
                    group[COL_ATTRS][ID][()], [b"Sample_1", b"Sample_2", b"Sample_3"]
                )
                for key in ["delimiter", "count", "record", "sort", "decreasing"]:
                    self.assertIn(key, group[METADATA])

    def test_matrix_without_labels(self):
        with get_temp_writable_path() as filename:
            with H5Writer(filename) as writer:
                writer.write(Matrix(np.zeros((2, 3))))

            with h5py.File(filename, "r") as f:
                group = f[MATRICES]["split"]
                self.assertEqual(len(group[ROW_ATTRS]), 0)
                self.assertEqual(len(group[COL_ATTRS]), 0)

    def test_existing_file(self):
        with get_temp_writable_path(file_exists=True) as filename:
            with self.assertRaises(OSError):
                H5Writer(filename)

    def test_invalid_mode(self):
        with get_temp_writable_path() as filename:
            with self.assertRaises(ValueError):
                H5Writer(filename, mode="r")


class H5ReaderTests(TestCase):
    def test_read_written_matrix(self):
        result = masplit(allele_depths(), sort=False, record=2)

        with get_temp_writable_path(suffix=".h5") as filename:
            with H5Writer(filename) as writer:
                writer.write(result)

            with H5Reader(filename) as reader:
                self.assertEqual(reader.matrices(), ["AD"])
                matrix = reader.read("AD")

        np.testing.assert_array_equal(matrix.values, result.values)
        self.assertEqual(list(matrix.row_names), ["Variant_1", "Variant_2", "Variant_3"])
        self.assertEqual(list(matrix.col_names), ["Sample_1", "Sample_2", "Sample_3"])
        self.assertEqual(matrix.metadata["delimiter"], ",")
        self.assertEqual(matrix.metadata["record"], 2)
        self.assertEqual(matrix.metadata["n_parse_failures"], 0)

    def test_read_missing_matrix(self):
        with get_temp_writable_path() as filename:
            with H5Writer(filename):
                pass

            with H5Reader(filename) as reader:
                self.assertEqual(reader.matrices(), [])
                with self.assertRaises(UserError):
                    reader.read("AD")

    def test_invalid_file(self):
        with get_temp_writable_path() as filename:
            with h5py.File(filename, "w") as f:
                f.create_group("data")

            with self.assertRaises(ValidationError):
                H5Reader(filename)

    def test_invalid_matrix(self):
        with get_temp_writable_path() as filename:
            with H5Writer(filename) as writer:
                writer.write(Matrix(np.zeros((2, 3)), name="broken"))

            with h5py.File(filename, "r+") as f:
                f[MATRICES]["broken"][ROW_ATTRS][ID] = np.array([b"a"])

            with self.assertRaises(ValidationError):
                H5Reader(filename)
