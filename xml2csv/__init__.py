"""Grognet Xml2Csv — flatten directories of XML row dumps into one CSV."""

from xml2csv.converter import ConversionResult, convert_directory
from xml2csv.models.record import ClassificationFlags, Record

__all__ = [
    "ClassificationFlags",
    "ConversionResult",
    "Record",
    "convert_directory",
]
