"""CSV driver: read point pairs, normalize them, write enriched rows.

The driver owns everything the coordinate engine deliberately does not:
file I/O, header checks, row numbering and the strict/permissive policy.
Each row is independent; the only state kept across rows is the output
counter and the report.

Input columns (any order, extra columns ignored)::

    name_a, lat_a, lon_a, name_b, lat_b, lon_b

Output columns are listed in :data:`geonorm.config.OUTPUT_COLUMNS`.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Mapping

import pandas as pd

from geonorm.config import DEFAULT_TOLERANCE_DEG, OUTPUT_COLUMNS, REQUIRED_HEADERS
from geonorm.distance import compute_distance
from geonorm.errors import ParseError, StructuralMismatchError
from geonorm.geo import Axis, CoordinatePair
from geonorm.notation import Notation, parse_coordinate
from geonorm.proximity import evaluate_proximity

from .records import NormalizedPoint, OutputRecord

logger = logging.getLogger(__name__)

# first data row sits on line 2, below the header
_FIRST_DATA_LINE = 2


class PipelineError(Exception):
    """Base class for failures of the CSV driver."""


class MissingHeaderError(PipelineError):
    """A required column is absent from the input header."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Missing header field '{column}'")


class RowError(PipelineError):
    """A row could not be normalized.

    Attributes:
        line (int): 1-based line number in the input file.
        notation (Notation): Notation the row was parsed under.
        source (ParseError): The underlying parse failure.
    """

    def __init__(self, line: int, notation: Notation, source: ParseError):
        self.line = line
        self.notation = notation
        self.source = source
        super().__init__(f"Line {line}: invalid {notation.name} ({source})")


@dataclass(frozen=True)
class ProcessingConfig:
    """Settings for one run. The notation applies to every row."""

    input_path: Path
    output_path: Path
    notation: Notation
    strict: bool = False
    tolerance: float = DEFAULT_TOLERANCE_DEG


@dataclass
class ProcessingReport:
    """Counts of written and skipped rows, plus the skipped rows' errors."""

    written: int = 0
    skipped: int = 0
    errors: list[RowError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.written + self.skipped


def _field_count_error(fields: list[str], width: int) -> StructuralMismatchError:
    msg = f"expected {width} fields, saw {len(fields)}"
    return StructuralMismatchError(msg, ",".join(fields))


def validate_headers(columns: Iterable[str]) -> None:
    """Raise :class:`MissingHeaderError` for the first required column not present."""
    present = {str(column).strip() for column in columns}
    for column in REQUIRED_HEADERS:
        if column not in present:
            raise MissingHeaderError(column)


def parse_point(name: str, lat_raw: str, lon_raw: str, notation: Notation) -> CoordinatePair:
    """Parse one point's two fields under ``notation``."""
    latitude = parse_coordinate(lat_raw, Axis.LATITUDE, notation)
    longitude = parse_coordinate(lon_raw, Axis.LONGITUDE, notation)
    return CoordinatePair(latitude, longitude, name)


def build_record(
    row_id: int,
    row: dict[str, str],
    notation: Notation,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
) -> OutputRecord:
    """Turn one input row into an :class:`OutputRecord`.

    Distance and proximity use the parsed values; the ``*_dd`` output
    columns are rounded to six decimals for display only.

    Raises:
        ParseError: If any of the four coordinate fields fails to parse.
    """
    point_a = parse_point(row["name_a"], row["lat_a"], row["lon_a"], notation)
    point_b = parse_point(row["name_b"], row["lat_b"], row["lon_b"], notation)

    return OutputRecord(
        id=row_id,
        a=NormalizedPoint.from_pair(point_a, row["lat_a"], row["lon_a"]),
        b=NormalizedPoint.from_pair(point_b, row["lat_b"], row["lon_b"]),
        distance=compute_distance(point_a, point_b),
        nearly=evaluate_proximity(point_a, point_b, tolerance),
    )


def iter_records(
    frame: pd.DataFrame,
    notation: Notation,
    report: ProcessingReport,
    strict: bool = False,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    overlong: Mapping[int, list[str]] | None = None,
) -> Iterator[OutputRecord]:
    """Yield output records for every row of ``frame`` that parses.

    In strict mode the first failing row raises :class:`RowError`. Otherwise
    the row is skipped, logged and counted in ``report``. Rows listed in
    ``overlong`` (data index to raw fields, see :func:`read_input`) fail the
    same way.
    """
    frame = frame.rename(columns=lambda column: str(column).strip())
    validate_headers(frame.columns)

    overlong = overlong or {}
    next_id = 1
    for index, row in enumerate(frame.to_dict(orient="records")):
        line = index + _FIRST_DATA_LINE
        try:
            if index in overlong:
                raise _field_count_error(overlong[index], len(frame.columns))
            record = build_record(next_id, row, notation, tolerance)
        except ParseError as exc:
            error = RowError(line, notation, exc)
            if strict:
                raise error from exc
            logger.warning("Skipping %s", error)
            report.skipped += 1
            report.errors.append(error)
            continue

        report.written += 1
        next_id += 1
        yield record


def read_input(path: Path) -> tuple[pd.DataFrame, dict[int, list[str]]]:
    """Read the input CSV with every cell kept as text.

    Blank lines are skipped. Short rows are padded with empty cells. A row
    with more fields than the header is kept as an empty row and its raw
    fields are returned by data index, so the caller can reject it without
    shifting later line numbers.

    Raises:
        PipelineError: If the file has no header line.
    """
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if not header:
            msg = f"{path} has no header line"
            raise PipelineError(msg)

        width = len(header)
        rows: list[list[str]] = []
        overlong: dict[int, list[str]] = {}
        for fields in reader:
            if not fields:
                continue
            if len(fields) > width:
                overlong[len(rows)] = fields
                fields = []
            rows.append(fields + [""] * (width - len(fields)))

    return pd.DataFrame(rows, columns=header, dtype=str), overlong


def write_output(records: Iterable[OutputRecord], path: Path) -> None:
    rows = [record.to_row() for record in records]
    pd.DataFrame(rows, columns=list(OUTPUT_COLUMNS)).to_csv(path, index=False, encoding="utf-8")


def process_csv(config: ProcessingConfig) -> ProcessingReport:
    """Run the whole CSV-to-CSV normalization described by ``config``.

    Nothing is written when a strict run aborts.

    Returns:
        ProcessingReport: Written/skipped counts.

    Raises:
        PipelineError: If the input has no header line.
        MissingHeaderError: If a required column is missing.
        RowError: In strict mode, for the first invalid row.
        OSError: If the input cannot be read or the output cannot be written.
    """
    logger.info(
        "Reading %s as %s (%s mode)",
        config.input_path,
        config.notation.name,
        "strict" if config.strict else "permissive",
    )
    frame, overlong = read_input(Path(config.input_path))
    logger.debug("Loaded %d row(s) with columns %s", len(frame), list(frame.columns))

    report = ProcessingReport()
    records = list(
        iter_records(frame, config.notation, report, config.strict, config.tolerance, overlong)
    )
    write_output(records, Path(config.output_path))

    logger.info("Wrote %d row(s) to %s, skipped %d", report.written, config.output_path, report.skipped)
    return report
