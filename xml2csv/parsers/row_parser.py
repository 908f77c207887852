"""
xml2csv/parsers/row_parser.py
Streams <ROW> records out of XML dumps with ET.iterparse.
Only the current row lives in memory: rows and fields are cleared once
read and the root is emptied between top-level children, so files of
any size stream in constant space.

Field elements are read with read_element_text(): positioned on a
start event, it pulls events forward to the matching end event and
returns the element's text (nested text nodes concatenated in order).

Parse failures are NOT swallowed here: a malformed or truncated file
raises ET.ParseError and the caller aborts the run.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Optional, Union

from xml2csv.models.record import Record

DEFAULT_ROW_TAG = 'ROW'

# XML element name → Record attribute
FIELD_TAGS: Dict[str, str] = {
    'NUMPROCCOMPL':    'num_proc_compl',
    'NUMPROCCOMPLANT': 'num_proc_compl_ant',
    'DESCR':           'descr',
    'CODLOC':          'cod_loc',
    'TXT':             'txt',
    'INDCIT':          'ind_cit',
    'DTINDCIT':        'dt_ind_cit',
    'DTFIMINDCIT':     'dt_fim_ind_cit',
    'CODASSPROC':      'cod_ass_proc',
    'CODCLASS':        'cod_class',
    'VALCAUSA':        'val_causa',
    'DTVALCAUSA':      'dt_val_causa',
    'DTAUTUA':         'dt_autua',
    'CODTIPATUAC':     'cod_tipo_autuac',
    'NOME':            'nome',
    'NUMDOCPESS':      'num_doc_pess',
    'CDA':             'cda',
}


class XmlCursor:
    """
    Forward-only cursor over ('start' | 'end', element) events.
    advance() moves to the next event and returns False at end of stream.
    """

    def __init__(self, source: Union[str, Path, BinaryIO]):
        self._events  = ET.iterparse(source, events=('start', 'end'))
        self.event:   Optional[str]        = None
        self.element: Optional[ET.Element] = None
        self.root:    Optional[ET.Element] = None

    def advance(self) -> bool:
        try:
            self.event, self.element = next(self._events)
        except StopIteration:
            self.event, self.element = None, None
            return False
        if self.root is None:
            self.root = self.element
        return True

    @property
    def name(self) -> str:
        if self.element is None:
            return ''
        return local_name(self.element.tag)

    @property
    def is_start(self) -> bool:
        return self.event == 'start'

    @property
    def is_end(self) -> bool:
        return self.event == 'end'


def local_name(tag: str) -> str:
    """Remove XML namespace from tag name."""
    if '}' in tag:
        return tag.split('}', 1)[1]
    return tag


def read_element_text(cursor: XmlCursor, current: Optional[str], name: str) -> Optional[str]:
    """
    If the cursor sits on the start of element `name`, consume events up to
    its end and return its concatenated text. Otherwise return `current`.
    A stream that ends before the closing tag yields whatever text was seen.
    """
    if not (cursor.is_start and cursor.name == name):
        return current

    element = cursor.element
    while cursor.advance():
        if cursor.is_end and cursor.element is element:
            break
    return ''.join(element.itertext())


def iter_records(
    source:  Union[str, Path, BinaryIO],
    row_tag: str = DEFAULT_ROW_TAG,
) -> Iterator[Record]:
    """
    Yield one Record per row element, in document order.
    A record is handed off when the next row element opens or the stream ends.
    Elements outside any row, and unknown element names, are ignored.
    """
    return stream_records(XmlCursor(source), row_tag=row_tag)


def stream_records(cursor: XmlCursor, row_tag: str = DEFAULT_ROW_TAG) -> Iterator[Record]:
    """
    Row state machine over an existing cursor.
    Field elements are cleared once read, and the document root is emptied
    each time a top-level child closes, so memory stays flat whether rows
    nest their fields or act as bare <ROW/> markers between them.
    """
    record: Optional[Record] = None
    depth = 0

    while cursor.advance():
        if cursor.is_end:
            depth -= 1
            if cursor.name == row_tag:
                cursor.element.clear()
            if depth == 1:
                cursor.root.clear()
            continue

        depth += 1
        name = cursor.name
        if name == row_tag:
            if record is not None:
                yield record
            record = Record()
            continue

        if record is None:
            continue

        attr = FIELD_TAGS.get(name)
        if attr:
            element = cursor.element
            setattr(record, attr, read_element_text(cursor, getattr(record, attr), name))
            element.clear()
            depth -= 1
            if depth == 1:
                cursor.root.clear()

    if record is not None:
        yield record
