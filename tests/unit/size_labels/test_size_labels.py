"""Tests for human-readable size labels and report row layout."""

from __future__ import annotations

import unittest

from dirsize.size_labels import ERROR_LABEL, format_report_row, human_readable_size


class HumanReadableSizeTests(unittest.TestCase):
    def test_unit_boundaries(self) -> None:
        cases = {
            0: "0 bytes",
            1: "1 bytes",
            1023: "1023 bytes",
            1024: "1.00 KB",
            1536: "1.50 KB",
            1048575: "1024.00 KB",
            1048576: "1.00 MB",
            1073741824: "1.00 GB",
        }
        for size_bytes, expected in cases.items():
            with self.subTest(size_bytes=size_bytes):
                self.assertEqual(human_readable_size(size_bytes), expected)

    def test_gigabytes_is_the_largest_unit(self) -> None:
        self.assertEqual(human_readable_size(5 * 1024**4), "5120.00 GB")

    def test_negative_sizes_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            human_readable_size(-1)


class FormatReportRowTests(unittest.TestCase):
    def test_pads_name_and_size_columns(self) -> None:
        row = format_report_row("alpha", "2.00 KB")

        self.assertEqual(row, "alpha" + " " * 25 + " Size: " + "2.00 KB" + " " * 3)

    def test_error_label_uses_same_shape(self) -> None:
        row = format_report_row("beta", ERROR_LABEL)

        self.assertEqual(row, "beta" + " " * 26 + " Size: Error     ")

    def test_long_names_are_not_truncated(self) -> None:
        name = "n" * 40

        row = format_report_row(name, "1 bytes")

        self.assertTrue(row.startswith(name + " Size: 1 bytes"))


if __name__ == "__main__":
    unittest.main()
