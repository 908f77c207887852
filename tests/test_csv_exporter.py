"""
tests/test_csv_exporter.py
CSV line formatting: escaping, quoting, separator defaults.
"""

import io

import pytest

from xml2csv.exporters.csv_exporter import (
    CSV_HEADER,
    CsvFormat,
    escape_cell,
    format_line,
    record_to_cells,
    write_header,
    write_record,
)
from xml2csv.models.record import ClassificationFlags, Record


class TestFormatLine:

    def test_default_separator_unquoted(self):
        assert format_line(['a', 'b', 'c']) == 'a;b;c\n'

    def test_quote_doubled(self):
        assert escape_cell('diz "sim"') == 'diz ""sim""'
        assert format_line(['diz "sim"', 'x']) == 'diz ""sim"";x\n'

    def test_none_is_empty(self):
        assert format_line([None, 'x', None]) == ';x;\n'

    def test_custom_separator(self):
        assert format_line(['a', 'b'], CsvFormat(separator=',')) == 'a,b\n'

    def test_quote_wraps_every_cell(self):
        fmt = CsvFormat(quote='"')
        assert format_line(['a', '', 'b"c'], fmt) == '"a";"";"b""c"\n'

    def test_space_selects_defaults(self):
        fmt = CsvFormat(separator=' ', quote=' ')
        assert format_line(['a', 'b'], fmt) == 'a;b\n'

    def test_separator_inside_value_not_escaped(self):
        assert format_line(['a;b', 'c']) == 'a;b;c\n'

    def test_single_quote_char_wraps_but_escapes_double_quotes(self):
        fmt = CsvFormat(quote="'")
        assert format_line(['it"s'], fmt) == "'it\"\"s'\n"

    def test_non_string_separator_rejected(self):
        with pytest.raises(ValueError):
            CsvFormat(separator=5)

    def test_multi_char_separator_rejected(self):
        with pytest.raises(ValueError):
            CsvFormat(separator=';;')

    def test_unescaped_separators_split_cleanly(self):
        line  = format_line(['x "1"', 'y'])
        cells = line.rstrip('\n').split(';')
        assert cells == ['x ""1""', 'y']


class TestRecordCells:

    def test_header_has_21_columns(self):
        assert len(CSV_HEADER) == 21
        assert CSV_HEADER[0]  == 'numProcCompl'
        assert CSV_HEADER[-1] == 'naoConhecido'

    def test_cells_follow_header(self):
        record = Record(num_proc_compl='123', cda='X', dt_val_causa='2020-01-01')
        cells  = record_to_cells(record, ClassificationFlags(negar_provimento=True))
        assert len(cells) == 21
        assert cells[0]  == '123'
        assert cells[14] == 'X'
        assert cells[15:] == ['N', 'N', 'S', 'N', 'N', 'N']
        assert '2020-01-01' not in cells

    def test_write_header_and_record(self):
        buf = io.StringIO()
        write_header(buf)
        write_record(buf, Record(nome='Ana'), ClassificationFlags(ementa=True))
        lines = buf.getvalue().split('\n')
        assert lines[0] == ';'.join(CSV_HEADER)
        assert lines[1] == ';' * 12 + 'Ana;;;S;N;N;N;N;N'
        assert lines[2] == ''
