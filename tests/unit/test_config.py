"""Tests for tally.config."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from tally import TallyConfig, TallyConfigError, load_config


class TestLoadConfigFromMapping:
    def test_defaults_when_nothing_set(self):
        assert load_config({}) == TallyConfig(verbose=False, fancy=False, color=None)

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "on"])
    def test_truthy_values(self, raw):
        config = load_config({"TALLY_VERBOSE": raw, "TALLY_FANCY": raw, "TALLY_COLOR": raw})

        assert config.verbose is True
        assert config.fancy is True
        assert config.color is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "off"])
    def test_falsy_values(self, raw):
        config = load_config({"TALLY_VERBOSE": raw, "TALLY_COLOR": raw})

        assert config.verbose is False
        assert config.color is False

    def test_empty_value_keeps_default(self):
        config = load_config({"TALLY_VERBOSE": "  ", "TALLY_COLOR": ""})

        assert config.verbose is False
        assert config.color is None

    def test_invalid_value_names_the_variable(self):
        with pytest.raises(TallyConfigError, match="TALLY_FANCY") as exc_info:
            load_config({"TALLY_FANCY": "sometimes"})

        assert exc_info.value.variable == "TALLY_FANCY"
        assert exc_info.value.value == "sometimes"
        assert exc_info.value.cause is not None


class TestLoadConfigFromEnvironment:
    def test_reads_process_environment(self, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TALLY_VERBOSE", "true")
        monkeypatch.delenv("TALLY_FANCY", raising=False)
        monkeypatch.delenv("TALLY_COLOR", raising=False)

        config = load_config()

        assert config.verbose is True
        assert config.fancy is False

    def test_reads_dotenv_file(self, monkeypatch, tmp_path: Path):
        (tmp_path / ".env").write_text("TALLY_FANCY=yes\n")
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, clear=False):
            os.environ.pop("TALLY_FANCY", None)
            config = load_config()

        assert config.fancy is True

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path: Path):
        (tmp_path / ".env").write_text("TALLY_FANCY=yes\n")
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {"TALLY_FANCY": "no"}):
            config = load_config()

        assert config.fancy is False
