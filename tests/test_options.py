"""Tests for ndutil.options."""

import dataclasses
import json

import pytest

from ndutil.options import DEFAULT_OPTIONS, FormatOptions, load_options


class TestFormatOptions:
    def test_defaults(self):
        assert DEFAULT_OPTIONS == FormatOptions(precision=5, lower=0.0001, upper=1_000_000)

    def test_negative_precision(self):
        with pytest.raises(ValueError):
            FormatOptions(precision=-1)

    def test_inverted_bounds(self):
        with pytest.raises(ValueError):
            FormatOptions(lower=10, upper=1)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.precision = 2

    def test_from_mapping_ignores_unknown_keys(self):
        opts = FormatOptions.from_mapping({"precision": 3, "colour": "red"})
        assert opts == FormatOptions(precision=3)


class TestLoadOptions:
    def test_toml_section(self, tmp_path):
        path = tmp_path / "format.toml"
        path.write_text("[ndutil]\nprecision = 2\nupper = 1e3\n", encoding="utf-8")
        assert load_options(path) == FormatOptions(precision=2, upper=1000.0)

    def test_toml_top_level(self, tmp_path):
        path = tmp_path / "format.toml"
        path.write_text("lower = 0.01\n", encoding="utf-8")
        assert load_options(path) == FormatOptions(lower=0.01)

    def test_json(self, tmp_path):
        path = tmp_path / "format.json"
        path.write_text(json.dumps({"precision": 3, "unknown": 1}), encoding="utf-8")
        assert load_options(str(path)) == FormatOptions(precision=3)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "nope.toml")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "format.yaml"
        path.write_text("precision: 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            load_options(path)
