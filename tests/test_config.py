"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest

from countdown.config import EVENTS_FILE, Config, load_config


@pytest.fixture
def conf_file(tmp_path):
    return tmp_path / "countdown.conf"


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.events_file == str(EVENTS_FILE)
        assert config.default_order == "time-asc"
        assert config.default_limit is None

    def test_reads_all_keys(self, conf_file):
        conf_file.write_text(
            "# countdown settings\n"
            "EVENTS_FILE=/tmp/my-events.json\n"
            "DEFAULT_ORDER=time-desc\n"
            "DEFAULT_LIMIT=3\n"
        )
        config = load_config(conf_file)
        assert config.events_file == "/tmp/my-events.json"
        assert config.default_order == "time-desc"
        assert config.default_limit == 3

    def test_quoted_values_and_inline_comments(self, conf_file):
        conf_file.write_text(
            'EVENTS_FILE="/tmp/with # hash.json"  # quoted\n'
            "DEFAULT_ORDER = shuffle # unquoted comment\n"
            "DEFAULT_LIMIT='5'\n"
        )
        config = load_config(conf_file)
        assert config.events_file == "/tmp/with # hash.json"
        assert config.default_order == "shuffle"
        assert config.default_limit == 5

    def test_ignores_unknown_keys_and_junk_lines(self, conf_file):
        conf_file.write_text("SOMETHING_ELSE=1\nnot a setting\n\n")
        assert load_config(conf_file) == Config()

    def test_unknown_order_keeps_default(self, conf_file, caplog):
        conf_file.write_text("DEFAULT_ORDER=sideways\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(conf_file)
        assert config.default_order == "time-asc"
        assert "DEFAULT_ORDER" in caplog.text

    @pytest.mark.parametrize("value", ["many", "-2"])
    def test_bad_limit_keeps_default(self, conf_file, caplog, value):
        conf_file.write_text(f"DEFAULT_LIMIT={value}\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(conf_file)
        assert config.default_limit is None
        assert "DEFAULT_LIMIT" in caplog.text

    def test_zero_limit_is_allowed(self, conf_file):
        conf_file.write_text("DEFAULT_LIMIT=0\n")
        assert load_config(conf_file).default_limit == 0


class TestConfig:
    def test_events_path_expands_user(self):
        config = Config(events_file="~/events.json")
        assert config.events_path() == Path.home() / "events.json"
