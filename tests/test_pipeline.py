"""
Tests for the CSV pipeline and command-line interface.
"""

import csv
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

import pandas as pd

from geonorm.config import OUTPUT_COLUMNS
from geonorm.errors import ErrorKind, MalformedNumberError
from geonorm.main import main, render_summary
from geonorm.notation import Notation
from geonorm.pipeline import (
    MissingHeaderError,
    ProcessingConfig,
    ProcessingReport,
    RowError,
    build_record,
    iter_records,
    process_csv,
)

HEADER = ["name_a", "lat_a", "lon_a", "name_b", "lat_b", "lon_b"]

DMS_ROWS = [
    ["Eiffel Tower", "48°51'29\"N", "2°17'40\"E", "Louvre", "48°51'40\"N", "2°20'15\"E"],
    ["Paris", "48°51'24\"N", "2°21'8\"E", "Paris", "48°51'24\"N", "2°21'8\"E"],
]

DD_ROW = ["Paris", "48.8566", "2.3522", "London", "51.5074", "-0.1278"]


def write_csv(path, header, rows):
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)


def read_output(path):
    return pd.read_csv(path, dtype=str, keep_default_na=False)


class TestBuildRecord(unittest.TestCase):
    """Test single-row normalization."""

    def test_dd_row(self):
        row = dict(zip(HEADER, ["Paris", "48.8566", "2.3522", "London", "51.5074", "-0.1278"]))
        record = build_record(1, row, Notation.DD)
        self.assertEqual(record.a.lat.dd, 48.8566)
        self.assertEqual(record.b.lon.dms, "0°7'40.1\"W")
        self.assertAlmostEqual(record.distance.km, 344, delta=1)
        self.assertFalse(record.nearly.both)

        flat = record.to_row()
        self.assertEqual(list(flat), list(OUTPUT_COLUMNS))
        self.assertEqual(flat["lat_a_in"], "48.8566")
        self.assertEqual(flat["nearly_lat"], "false")


class TestIterRecords(unittest.TestCase):
    """Test row iteration and the strict/permissive policy."""

    def setUp(self):
        self.frame = pd.DataFrame(
            [
                DMS_ROWS[0],
                ["Bad", "48.858056", "2.294444", "Row", "48°51'40\"N", "2°20'15\"E"],
                DMS_ROWS[1],
            ],
            columns=HEADER,
        )

    def test_permissive_skips_bad_rows(self):
        report = ProcessingReport()
        records = list(iter_records(self.frame, Notation.DMS, report))
        self.assertEqual([r.id for r in records], [1, 2])
        self.assertEqual(report.written, 2)
        self.assertEqual(report.skipped, 1)
        self.assertEqual(report.total, 3)
        self.assertEqual(report.errors[0].line, 3)
        self.assertIs(report.errors[0].source.kind, ErrorKind.STRUCTURAL_MISMATCH)

    def test_strict_raises_with_line_number(self):
        report = ProcessingReport()
        with self.assertRaises(RowError) as ctx:
            list(iter_records(self.frame, Notation.DMS, report, strict=True))
        self.assertEqual(ctx.exception.line, 3)
        self.assertIs(ctx.exception.notation, Notation.DMS)
        self.assertIn("Line 3", str(ctx.exception))

    def test_missing_header(self):
        frame = self.frame.drop(columns=["lon_b"])
        with self.assertRaises(MissingHeaderError) as ctx:
            list(iter_records(frame, Notation.DMS, ProcessingReport()))
        self.assertEqual(ctx.exception.column, "lon_b")

    def test_header_order_and_extra_columns(self):
        frame = self.frame[list(reversed(HEADER))].assign(comment="x")
        report = ProcessingReport()
        records = list(iter_records(frame, Notation.DMS, report))
        self.assertEqual(len(records), 2)


class TestProcessCsv(unittest.TestCase):
    """Test the file-to-file run."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.input_path = Path(self.tmpdir.name) / "input.csv"
        self.output_path = Path(self.tmpdir.name) / "output.csv"

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_dms_file(self):
        write_csv(self.input_path, HEADER, DMS_ROWS)
        report = process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DMS))

        self.assertEqual(report.written, 2)
        self.assertEqual(report.skipped, 0)

        out = read_output(self.output_path)
        self.assertEqual(list(out.columns), list(OUTPUT_COLUMNS))
        first = out.iloc[0]
        self.assertEqual(first["id"], "1")
        self.assertEqual(first["lat_a_in"], "48°51'29\"N")
        self.assertEqual(first["lat_a_dd"], "48.858056")
        self.assertEqual(first["lon_a_dd"], "2.294444")
        self.assertEqual(first["lat_a_dms"], "48°51'29.0\"N")

        second = out.iloc[1]
        self.assertEqual(second["distance_km"], "0.0")
        self.assertEqual(second["distance_miles"], "0.0")
        self.assertEqual(second["nearly_both"], "true")

    def test_ddm_file_with_unicode_markers(self):
        rows = [["A", "48° 51.492′ N", "2° 17.652′ E", "B", "40° 41.358′ N", "74° 2.646′ O"]]
        write_csv(self.input_path, HEADER, rows)
        process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DDM))

        out = read_output(self.output_path)
        self.assertTrue(out.iloc[0]["lon_b_dms"].endswith("W"))
        self.assertAlmostEqual(float(out.iloc[0]["distance_km"]), 5837.0, delta=5.0)

    def test_strict_run_writes_nothing(self):
        write_csv(self.input_path, HEADER, [DMS_ROWS[0], ["x", "91°0'0\"N", "0°0'0\"E", "y", "0°0'0\"N", "0°0'0\"E"]])
        with self.assertRaises(RowError) as ctx:
            process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DMS, strict=True))
        self.assertIs(ctx.exception.source.kind, ErrorKind.OUT_OF_RANGE)
        self.assertFalse(self.output_path.exists())

    def test_empty_input_writes_header(self):
        write_csv(self.input_path, HEADER, [])
        report = process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DD))
        self.assertEqual(report.total, 0)
        self.assertEqual(list(read_output(self.output_path).columns), list(OUTPUT_COLUMNS))

    def test_overlong_row_skipped_in_permissive_mode(self):
        rows = [DD_ROW, ["X", "1", "2", "Y", "3", "4", "extra"], DD_ROW]
        write_csv(self.input_path, HEADER, rows)
        with self.assertLogs("geonorm.pipeline.processor", level="WARNING"):
            report = process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DD))

        self.assertEqual(report.written, 2)
        self.assertEqual(report.skipped, 1)
        self.assertEqual(report.errors[0].line, 3)
        self.assertIs(report.errors[0].source.kind, ErrorKind.STRUCTURAL_MISMATCH)
        self.assertEqual(list(read_output(self.output_path)["id"]), ["1", "2"])

    def test_overlong_first_row(self):
        write_csv(self.input_path, HEADER, [["X", "1", "2", "Y", "3", "4", "extra"], DD_ROW])
        report = process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DD))
        self.assertEqual((report.written, report.skipped), (1, 1))
        self.assertEqual(read_output(self.output_path).iloc[0]["name_a"], "Paris")

    def test_overlong_row_strict(self):
        write_csv(self.input_path, HEADER, [DD_ROW, DD_ROW + ["extra"]])
        with self.assertRaises(RowError) as ctx:
            process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DD, strict=True))
        self.assertEqual(ctx.exception.line, 3)
        self.assertIn("expected 6 fields, saw 7", str(ctx.exception))
        self.assertFalse(self.output_path.exists())

    def test_short_row_skipped(self):
        write_csv(self.input_path, HEADER, [DD_ROW, ["X", "1", "2"]])
        report = process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DD))
        self.assertEqual((report.written, report.skipped), (1, 1))
        self.assertIs(report.errors[0].source.kind, ErrorKind.MALFORMED_NUMBER)

    def test_blank_lines_ignored(self):
        with open(self.input_path, "w", encoding="utf-8") as f:
            f.write(",".join(HEADER) + "\n\n" + ",".join(DD_ROW) + "\n\n")
        report = process_csv(ProcessingConfig(self.input_path, self.output_path, Notation.DD))
        self.assertEqual((report.written, report.skipped), (1, 0))


class TestMain(unittest.TestCase):
    """Test the command-line entry point."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.tmpdir.name, "input.csv")
        self.output_path = os.path.join(self.tmpdir.name, "output.csv")

    def tearDown(self):
        self.tmpdir.cleanup()

    def run_main(self, *args):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            code = main(["-i", self.input_path, "-o", self.output_path, *args])
        return code, stderr.getvalue()

    def test_success_reports_ignored_lines(self):
        write_csv(self.input_path, HEADER, DMS_ROWS + [["x", "bad", "bad", "y", "bad", "bad"]])
        code, err = self.run_main("-f", "dms")
        self.assertEqual(code, 0)
        self.assertIn("1 ignored line(s)", err)
        self.assertEqual(len(read_output(self.output_path)), 2)

    def test_strict_failure_exit_code(self):
        write_csv(self.input_path, HEADER, [["x", "bad", "bad", "y", "bad", "bad"]])
        code, err = self.run_main("-f", "dms", "--strict")
        self.assertEqual(code, 1)
        self.assertIn("Line 2", err)

    def test_missing_header_exit_code(self):
        write_csv(self.input_path, HEADER[:-1], [["a", "1", "2", "b", "3"]])
        code, err = self.run_main("-f", "dd")
        self.assertEqual(code, 1)
        self.assertIn("lon_b", err)

    def test_missing_input_file(self):
        code, _ = self.run_main("-f", "dd")
        self.assertEqual(code, 1)

    def test_overlong_row_does_not_abort_run(self):
        write_csv(self.input_path, HEADER, [DD_ROW, ["X", "1", "2", "Y", "3", "4", "extra"], DD_ROW])
        code, err = self.run_main("-f", "dd")
        self.assertEqual(code, 0)
        self.assertIn("1 ignored line(s)", err)
        self.assertEqual(len(read_output(self.output_path)), 2)

    def test_empty_input_file(self):
        open(self.input_path, "w").close()
        code, err = self.run_main("-f", "dd")
        self.assertEqual(code, 1)
        self.assertIn("no header line", err)

    def test_custom_tolerance(self):
        write_csv(self.input_path, HEADER, [["a", "10.0", "20.0", "b", "10.005", "20.005"]])
        code, _ = self.run_main("-f", "dd", "--tolerance", "0.01")
        self.assertEqual(code, 0)
        self.assertEqual(read_output(self.output_path).iloc[0]["nearly_both"], "true")

    def test_summary_panel(self):
        write_csv(self.input_path, HEADER, DMS_ROWS + [["x", "bad", "bad", "y", "bad", "bad"]])
        code, err = self.run_main("-f", "dms", "--summary")
        self.assertEqual(code, 0)
        self.assertIn("Rows Written", err)
        self.assertIn("StructuralMismatch", err)

    def test_render_summary_truncates_errors(self):
        report = ProcessingReport(written=1)
        for line in range(2, 10):
            report.skipped += 1
            report.errors.append(RowError(line, Notation.DD, MalformedNumberError("empty value", "")))
        config = ProcessingConfig(Path(self.input_path), Path(self.output_path), Notation.DD)
        panel = render_summary(config, report)
        self.assertEqual(panel.renderable.row_count, 5 + 5 + 1)


if __name__ == '__main__':
    unittest.main()
