"""
xml2csv/exporters/csv_exporter.py
Line-oriented CSV writer for the flattened rows.

FORMAT NOTES:
- Embedded double quotes are doubled (RFC 4180). Nothing else is
  escaped: separators and newlines inside a value are written as-is.
- With a quote character configured, every cell is wrapped in it;
  without one, cells are written bare.
- None becomes an empty cell. Lines end with a single '\\n'.
- A separator or quote of None, or a single space, selects the default
  (';' and no quoting), so a space can never be used for either.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO

from xml2csv.models.record import ClassificationFlags, Record

DEFAULT_SEPARATOR = ';'

CSV_HEADER: List[str] = [
    'numProcCompl', 'numProcComplAnt', 'descr', 'codLoc', 'indCit',
    'dtIndCit', 'dtFimIndCit', 'codAssProc', 'codClass', 'valCausa',
    'dtAutua', 'codTipoAutuac', 'nome', 'numDocPess', 'cda',
    'ementa', 'darProvimento', 'negarProvimento', 'parcialProvimento',
    'negarSeguimento', 'naoConhecido',
]

# Record attributes in column order (dt_val_causa is not exported)
RECORD_COLUMNS: List[str] = [
    'num_proc_compl', 'num_proc_compl_ant', 'descr', 'cod_loc', 'ind_cit',
    'dt_ind_cit', 'dt_fim_ind_cit', 'cod_ass_proc', 'cod_class', 'val_causa',
    'dt_autua', 'cod_tipo_autuac', 'nome', 'num_doc_pess', 'cda',
]

FLAG_COLUMNS: List[str] = [
    'ementa', 'dar_provimento', 'negar_provimento', 'parcial_provimento',
    'negar_seguimento', 'nao_conhecido',
]


@dataclass(frozen=True)
class CsvFormat:
    """Separator and optional quote character for written lines."""
    separator: Optional[str] = None
    quote:     Optional[str] = None

    def __post_init__(self):
        for name in ('separator', 'quote'):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, str) or len(value) != 1):
                raise ValueError(f"CSV {name} must be a single character, got {value!r}")

    @property
    def resolved_separator(self) -> str:
        if self.separator is None or self.separator == ' ':
            return DEFAULT_SEPARATOR
        return self.separator

    @property
    def resolved_quote(self) -> Optional[str]:
        if self.quote is None or self.quote == ' ':
            return None
        return self.quote


DEFAULT_FORMAT = CsvFormat()


def escape_cell(value: Optional[str]) -> str:
    if value is None:
        return ''
    return value.replace('"', '""')


def format_line(values: Iterable[Optional[str]], fmt: CsvFormat = DEFAULT_FORMAT) -> str:
    separator = fmt.resolved_separator
    quote     = fmt.resolved_quote
    if quote is None:
        cells = [escape_cell(v) for v in values]
    else:
        cells = [f"{quote}{escape_cell(v)}{quote}" for v in values]
    return separator.join(cells) + '\n'


def write_line(
    fh:     TextIO,
    values: Iterable[Optional[str]],
    fmt:    CsvFormat = DEFAULT_FORMAT,
) -> None:
    fh.write(format_line(values, fmt))


def write_header(fh: TextIO, fmt: CsvFormat = DEFAULT_FORMAT) -> None:
    write_line(fh, CSV_HEADER, fmt)


def record_to_cells(record: Record, flags: ClassificationFlags) -> List[Optional[str]]:
    """15 raw fields followed by the 6 flags as 'S' / 'N'."""
    cells: List[Optional[str]] = [getattr(record, attr) for attr in RECORD_COLUMNS]
    cells.extend('S' if getattr(flags, flag) else 'N' for flag in FLAG_COLUMNS)
    return cells


def write_record(
    fh:     TextIO,
    record: Record,
    flags:  ClassificationFlags,
    fmt:    CsvFormat = DEFAULT_FORMAT,
) -> None:
    write_line(fh, record_to_cells(record, flags), fmt)
