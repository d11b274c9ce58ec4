"""CSV processing around the coordinate engine.

Exports:
    ProcessingConfig: Run settings (paths, notation, strict flag, tolerance)
    ProcessingReport: Written/skipped counts returned by a run
    process_csv: Read, normalize and write a whole file
    iter_records: Row-by-row normalization of an in-memory DataFrame
    build_record: Normalize a single row mapping
    PipelineError, MissingHeaderError, RowError: Driver failures
"""

from .processor import (
    MissingHeaderError,
    PipelineError,
    ProcessingConfig,
    ProcessingReport,
    RowError,
    build_record,
    iter_records,
    process_csv,
    validate_headers,
)
from .records import NormalizedCoord, NormalizedPoint, OutputRecord

__all__ = [
    "ProcessingConfig",
    "ProcessingReport",
    "process_csv",
    "iter_records",
    "build_record",
    "validate_headers",
    "PipelineError",
    "MissingHeaderError",
    "RowError",
    "NormalizedCoord",
    "NormalizedPoint",
    "OutputRecord",
]
