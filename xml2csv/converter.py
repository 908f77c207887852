"""
xml2csv/converter.py
Directory → CSV orchestration.

ORDERING:
- Candidate files are collected recursively, de-duplicated, and sorted
  by absolute path string, so the output does not depend on the order
  the file system lists directories in.
- Rows follow file order, then document order inside each file.

FAILURE:
- Any parse or I/O error aborts the whole run. The output handle is
  closed on every exit path; rows of files already processed stay in
  whatever was flushed.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from xml2csv.detectors.ruling_detector import classify_record
from xml2csv.exporters.csv_exporter import DEFAULT_FORMAT, CsvFormat, write_header, write_record
from xml2csv.parsers.row_parser import DEFAULT_ROW_TAG, iter_records

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    files:  List[Path] = field(default_factory=list)
    rows:   int        = 0
    output: Optional[Path] = None


def list_xml_files(directory: Union[str, Path], extension: str = '.xml') -> List[Path]:
    """
    Every regular file under `directory` (any depth) whose name ends with
    `extension`, case-insensitively. Absolute paths, sorted as strings.
    """
    root = Path(directory).absolute()
    if not root.is_dir():
        raise NotADirectoryError(f"Input directory not found: {root}")

    suffix = extension.lower()
    found  = {
        p for p in root.rglob('*')
        if p.is_file() and p.name.lower().endswith(suffix)
    }
    files = sorted(found, key=str)
    logger.debug(f"{len(files)} candidate file(s) under {root}")
    return files


def process_file(
    path:    Path,
    out:     TextIO,
    fmt:     CsvFormat = DEFAULT_FORMAT,
    row_tag: str       = DEFAULT_ROW_TAG,
) -> int:
    """Stream one XML file into `out`. Returns the number of rows written."""
    logger.info(f"{path}")
    rows = 0
    with open(path, 'rb') as fh:
        try:
            for record in iter_records(fh, row_tag=row_tag):
                write_record(out, record, classify_record(record), fmt)
                rows += 1
        except ET.ParseError as e:
            logger.error(f"XML parse error in {path}: {e}")
            raise
    logger.info(f"{rows} row(s) from {path.name}")
    return rows


def convert_directory(
    directory:   Union[str, Path],
    csv_path:    Union[str, Path],
    fmt:         CsvFormat          = DEFAULT_FORMAT,
    row_tag:     str                = DEFAULT_ROW_TAG,
    encoding:    str                = 'utf-8',
    extension:   str                = '.xml',
    progress_cb: Optional[Callable] = None,
) -> ConversionResult:
    """
    Convert every XML file under `directory` into one CSV at `csv_path`.
    The output is truncated, the header written first, then one line
    per record. progress_cb: optional callable(path) called before each file.
    """
    files    = list_xml_files(directory, extension=extension)
    csv_path = Path(csv_path)
    result   = ConversionResult(files=files, output=csv_path)

    with open(csv_path, 'w', encoding=encoding, newline='') as out:
        write_header(out, fmt)
        for path in files:
            if progress_cb:
                progress_cb(path)
            result.rows += process_file(path, out, fmt=fmt, row_tag=row_tag)
        out.flush()

    logger.info(
        f"CSV export complete → {csv_path}\n"
        f"  Files: {len(files)} | Rows: {result.rows}"
    )
    return result
