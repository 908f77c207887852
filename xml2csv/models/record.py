"""
xml2csv/models/record.py
Shared dataclass schema. Parser, detector and exporter
use these types. Do not add logic here — data only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Record:
    """One <ROW> element, filled field by field while the XML streams past."""
    num_proc_compl:      Optional[str] = None
    num_proc_compl_ant:  Optional[str] = None
    descr:               Optional[str] = None
    cod_loc:             Optional[str] = None
    txt:                 Optional[str] = None     # free text, input of the classifier
    ind_cit:             Optional[str] = None
    dt_ind_cit:          Optional[str] = None
    dt_fim_ind_cit:      Optional[str] = None
    cod_ass_proc:        Optional[str] = None
    cod_class:           Optional[str] = None
    val_causa:           Optional[str] = None
    dt_val_causa:        Optional[str] = None     # extracted, never exported
    dt_autua:            Optional[str] = None
    cod_tipo_autuac:     Optional[str] = None
    nome:                Optional[str] = None
    num_doc_pess:        Optional[str] = None
    cda:                 Optional[str] = None


@dataclass(frozen=True)
class ClassificationFlags:
    """Outcome of the ruling patterns for one record's free text."""
    ementa:              bool = False
    dar_provimento:      bool = False
    negar_provimento:    bool = False
    parcial_provimento:  bool = False
    negar_seguimento:    bool = False
    nao_conhecido:       bool = False
