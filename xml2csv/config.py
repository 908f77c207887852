"""
xml2csv/config.py
Optional JSON config (xml2csv_config.json). Missing keys fall back to
DEFAULT_CONFIG; command-line flags override both.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from xml2csv.exporters.csv_exporter import DEFAULT_SEPARATOR, CsvFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "xml2csv_config.json"

DEFAULT_CONFIG = {
    "separator": DEFAULT_SEPARATOR,
    "quote": None,
    "row_tag": "ROW",
    "encoding": "utf-8",
    "extension": ".xml",
}


def _config_path(path: Optional[Path] = None) -> Path:
    return Path(path) if path else Path.cwd() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load config from xml2csv_config.json. Returns defaults if missing."""
    config_path = _config_path(path)
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
            return {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, ValueError, OSError) as e:
            logger.warning(f"Config load failed: {e}")
    return dict(DEFAULT_CONFIG)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Persist config to xml2csv_config.json."""
    config_path = _config_path(path)
    config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return config_path


def csv_format_from_config(config: Dict[str, Any]) -> CsvFormat:
    """Raises ValueError for a separator or quote longer than one character."""
    return CsvFormat(
        separator=config.get("separator") or None,
        quote=config.get("quote") or None,
    )
