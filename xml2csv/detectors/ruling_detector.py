"""
xml2csv/detectors/ruling_detector.py
Flags court decision texts by the outcome phrases they contain.
Pure Python, zero dependencies.

Each pattern only looks at a window of the text: the heading ("EMENTA")
is searched in the first characters, the ruling phrases in the last ones,
where the decision is stated. Windows are character counts taken before
upper-casing; a text shorter than the window is searched whole.
"""

import re
from typing import Dict, Optional, Tuple

from xml2csv.models.record import ClassificationFlags, Record

HEAD_WINDOW = 100
TAIL_WINDOW = 700

# ── RULING PATTERNS ──────────────────────────────────────────
# Keys match ClassificationFlags fields. Value: (pattern, 'head' | 'tail')

RULING_PATTERNS: Dict[str, Tuple[re.Pattern, str]] = {
    'ementa':             (re.compile(r'E ?M ?E ?N ?T ?A'),   'head'),
    'dar_provimento':     (re.compile(r'DAR PROVIMENTO'),     'tail'),
    'negar_provimento':   (re.compile(r'NEGAR PROVIMENTO'),   'tail'),
    'parcial_provimento': (re.compile(r'PARCIAL PROVIMENTO'), 'tail'),
    'negar_seguimento':   (re.compile(r'NEGAR SEGUIMENTO'),   'tail'),
    'nao_conhecido':      (re.compile(r'N[AÃ]O CONHECER'),    'tail'),
}


def head(text: str, size: int = HEAD_WINDOW) -> str:
    return text[:size].upper()


def tail(text: str, size: int = TAIL_WINDOW) -> str:
    return text[-size:].upper() if len(text) > size else text.upper()


def _matches(flag: str, text: Optional[str]) -> bool:
    if text is None:
        return False
    pattern, window = RULING_PATTERNS[flag]
    target = head(text) if window == 'head' else tail(text)
    return pattern.search(target) is not None


def is_ementa(text: Optional[str]) -> bool:
    return _matches('ementa', text)


def is_dar_provimento(text: Optional[str]) -> bool:
    return _matches('dar_provimento', text)


def is_negar_provimento(text: Optional[str]) -> bool:
    return _matches('negar_provimento', text)


def is_parcial_provimento(text: Optional[str]) -> bool:
    return _matches('parcial_provimento', text)


def is_negar_seguimento(text: Optional[str]) -> bool:
    return _matches('negar_seguimento', text)


def is_nao_conhecido(text: Optional[str]) -> bool:
    return _matches('nao_conhecido', text)


def classify(text: Optional[str]) -> ClassificationFlags:
    """
    Evaluate every ruling pattern against `text`.
    All flags are independent; missing text yields all False.
    """
    if text is None:
        return ClassificationFlags()
    return ClassificationFlags(**{flag: _matches(flag, text) for flag in RULING_PATTERNS})


def classify_record(record: Record) -> ClassificationFlags:
    return classify(record.txt)
