"""
tests/test_config.py
JSON config merge and CsvFormat construction.
"""

import json

import pytest

from xml2csv.config import DEFAULT_CONFIG, csv_format_from_config, load_config, save_config


class TestConfig:

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(tmp_path / 'absent.json') == DEFAULT_CONFIG

    def test_partial_file_merged_over_defaults(self, tmp_path):
        path = tmp_path / 'cfg.json'
        path.write_text(json.dumps({'separator': ','}), encoding='utf-8')
        config = load_config(path)
        assert config['separator'] == ','
        assert config['row_tag']   == 'ROW'

    def test_invalid_json_falls_back(self, tmp_path):
        path = tmp_path / 'cfg.json'
        path.write_text('{not json', encoding='utf-8')
        assert load_config(path) == DEFAULT_CONFIG

    def test_save_then_load(self, tmp_path):
        path = tmp_path / 'cfg.json'
        save_config({**DEFAULT_CONFIG, 'quote': '"'}, path)
        assert load_config(path)['quote'] == '"'

    def test_default_format(self):
        fmt = csv_format_from_config(DEFAULT_CONFIG)
        assert fmt.resolved_separator == ';'
        assert fmt.resolved_quote is None

    def test_bad_separator_rejected(self):
        with pytest.raises(ValueError):
            csv_format_from_config({**DEFAULT_CONFIG, 'separator': '||'})
