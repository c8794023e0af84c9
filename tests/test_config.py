"""Tests for the MLA 9 configuration system."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from mla_checker.config.loader import _DEFAULT_CONFIG_PATH, clear_cache, get_config, load_config
from mla_checker.config.models import KNOWN_RULE_IDS, MLAConfig
from mla_checker.domain.errors import ConfigurationError
from mla_checker.domain.models import RuleCategory, Severity


def _default_raw() -> dict:
    return json.loads(_DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"))


def _write(tmp_path, raw: dict, name: str = "custom.json"):
    path = tmp_path / name
    path.write_text(json.dumps(raw), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Default config loading
# ---------------------------------------------------------------------------


class TestDefaultConfig:
    """Tests for loading the built-in mla9_default.json."""

    def test_loads_without_error(self):
        assert isinstance(load_config(), MLAConfig)

    def test_metadata(self):
        cfg = load_config()
        assert cfg.metadata.standard == "MLA"
        assert cfg.metadata.edition == "9th"

    def test_defines_every_known_rule(self):
        cfg = load_config()
        assert {r.id for r in cfg.rules} == KNOWN_RULE_IDS

    def test_severities_and_categories(self):
        cfg = load_config()
        assert cfg.rule("font-family").severity == Severity.ERROR
        assert cfg.rule("header-format").severity == Severity.WARNING
        assert cfg.rule("in-text-citations").category == RuleCategory.CITATIONS

    def test_unknown_rule_lookup(self):
        with pytest.raises(KeyError):
            load_config().rule("nope")


# ---------------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------------


class TestCache:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_clear_cache(self):
        first = get_config()
        clear_cache()
        assert get_config() is not first


# ---------------------------------------------------------------------------
# Custom config files
# ---------------------------------------------------------------------------


class TestCustomConfig:
    def test_custom_names_and_severities(self, tmp_path):
        raw = _default_raw()
        for rule in raw["rules"]:
            if rule["id"] == "paper-size":
                rule["name"] = "Letter Paper"
                rule["severity"] = "info"
        cfg = load_config(_write(tmp_path, raw))
        assert cfg.rule("paper-size").name == "Letter Paper"
        assert cfg.rule("paper-size").severity == Severity.INFO

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_string_path(self, tmp_path):
        path = _write(tmp_path, _default_raw())
        assert load_config(str(path)) is load_config(path)

    def test_directory_is_not_a_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)

    def test_invalid_json_raises_error(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_config(bad)

    def test_missing_rule(self, tmp_path):
        raw = _default_raw()
        raw["rules"] = [r for r in raw["rules"] if r["id"] != "margins"]
        with pytest.raises(ValidationError, match="Missing rule definitions: margins"):
            load_config(_write(tmp_path, raw))

    def test_unknown_rule(self, tmp_path):
        raw = _default_raw()
        raw["rules"].append(dict(raw["rules"][0], id="double-check"))
        with pytest.raises(ValidationError, match="Unknown rule ids: double-check"):
            load_config(_write(tmp_path, raw))

    def test_duplicate_rule(self, tmp_path):
        raw = _default_raw()
        raw["rules"].append(raw["rules"][0])
        with pytest.raises(ValidationError, match="Duplicate rule ids"):
            load_config(_write(tmp_path, raw))

    def test_invalid_severity(self, tmp_path):
        raw = _default_raw()
        raw["rules"][0]["severity"] = "fatal"
        with pytest.raises(ValidationError):
            load_config(_write(tmp_path, raw))
