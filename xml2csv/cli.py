"""
xml2csv/cli.py
Command-line interface for Grognet Xml2Csv.

USAGE:
  python -m xml2csv.cli C:\\XMLs\\ C:\\temp\\teste.csv
  xml2csv ./xmls ./saida.csv --separator , --quote '"'
  xml2csv ./xmls ./saida.csv --config ./xml2csv_config.json --verbose
"""

import argparse
import codecs
import logging
import sys
import time
import xml.etree.ElementTree as ET
from pathlib import Path

from xml2csv.config import csv_format_from_config, load_config
from xml2csv.converter import convert_directory

logger = logging.getLogger(__name__)

GREEN  = '\033[92m'
RED    = '\033[91m'
CYAN   = '\033[96m'
RESET  = '\033[0m'
BOLD   = '\033[1m'

USAGE_TEXT = """
Parâmetro 1: diretório onde estão os arquivos XML
Parâmetro 2: nome do arquivo CSV que será gerado

Exemplo: grognet-xml2csv c:\\XMLs\\ c:\\temp\\teste.csv
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog        = 'xml2csv',
        description = 'Grognet Xml2Csv',
        formatter_class = argparse.RawDescriptionHelpFormatter,
        epilog      = USAGE_TEXT,
    )

    parser.add_argument(
        'xml_dir',
        type = Path,
        help = 'Directory containing the XML files (searched recursively)',
    )
    parser.add_argument(
        'output',
        type = Path,
        help = 'CSV file to create (overwritten if it exists)',
    )
    parser.add_argument(
        '--separator', '-s',
        default = None,
        help    = 'Field separator (default: ;)',
    )
    parser.add_argument(
        '--quote', '-q',
        default = None,
        help    = 'Quote character wrapped around every cell (default: none)',
    )
    parser.add_argument(
        '--row-tag',
        default = None,
        help    = 'Element name delimiting one record (default: ROW)',
    )
    parser.add_argument(
        '--encoding',
        default = None,
        help    = 'Output file encoding (default: utf-8)',
    )
    parser.add_argument(
        '--config', '-c',
        type    = Path,
        default = None,
        help    = 'JSON config file (default: ./xml2csv_config.json if present)',
    )
    parser.add_argument(
        '--verbose', '-v',
        action  = 'store_true',
        help    = 'Enable debug logging',
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # ── LOGGING SETUP ────────────────────────────────────────
    logging.basicConfig(
        level   = logging.DEBUG if args.verbose else logging.INFO,
        format  = '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt = '%H:%M:%S',
    )

    # ── CONFIG ───────────────────────────────────────────────
    config = load_config(args.config)
    for key in ('separator', 'quote', 'row_tag', 'encoding'):
        value = getattr(args, key)
        if value is not None:
            config[key] = value

    try:
        fmt = csv_format_from_config(config)
        codecs.lookup(config['encoding'])
    except (ValueError, LookupError, TypeError) as e:
        _print(f"{RED}Error: {e}{RESET}")
        return 1

    if not args.xml_dir.is_dir():
        _print(f"{RED}Error: Directory not found: {args.xml_dir}{RESET}")
        return 1

    _print(f"\n{BOLD}{CYAN}  Grognet Xml2Csv{RESET}\n")
    _print(f"Source directory : {CYAN}{args.xml_dir}{RESET}")
    _print(f"Output CSV       : {CYAN}{args.output}{RESET}")
    _print("")

    # ── CONVERT ──────────────────────────────────────────────
    _step("Converting XML files...")
    t0 = time.time()
    try:
        result = convert_directory(
            args.xml_dir,
            args.output,
            fmt         = fmt,
            row_tag     = config['row_tag'],
            encoding    = config['encoding'],
            extension   = config['extension'],
            progress_cb = lambda path: _step(str(path)),
        )
    except ET.ParseError as e:
        _print(f"{RED}Error: invalid XML — {e}{RESET}")
        return 1
    except (OSError, ValueError) as e:
        _print(f"{RED}Error: {e}{RESET}")
        return 1

    _ok(f"{result.rows} rows from {len(result.files)} files in {_elapsed(t0)}")
    _print(f"\n{BOLD}{GREEN}✓ Complete{RESET}")
    _print(f"  Files : {len(result.files):,}")
    _print(f"  Rows  : {result.rows:,}")
    _print(f"  CSV   : {result.output.resolve()}\n")
    return 0


# ── PRINT HELPERS ────────────────────────────────────────────

def _step(msg):  _print(f"  {CYAN}→{RESET} {msg}")
def _ok(msg):    _print(f"  {GREEN}✓{RESET} {msg}")
def _print(msg): print(msg)

def _elapsed(t0: float) -> str:
    s = time.time() - t0
    return f"{s:.1f}s" if s < 60 else f"{int(s//60)}m {int(s%60)}s"


if __name__ == '__main__':
    sys.exit(main())
