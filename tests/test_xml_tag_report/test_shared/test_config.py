"""Tests for report configuration."""

import json
from pathlib import Path

import pytest

from xml_tag_report.shared import (
    DEFAULT_FILES,
    DEFAULT_TAGS,
    ConfigError,
    ConfigValidationError,
    ReportConfig,
)
from xml_tag_report.shared.config import DATA_DIR


class TestReportConfig:
    """Test defaults and validation."""

    def test_default_configuration(self) -> None:
        """Test default values match the built-in lists."""
        config = ReportConfig()

        assert config.files == DEFAULT_FILES
        assert config.tags == ["cd_corretor", "nm_usuario", "cd_usuario"]
        assert config.base_dir == DATA_DIR
        assert config.placeholder == "N/A"
        assert config.separator == ", "
        assert config.concurrent is False
        assert config.output_format == "text"

    def test_defaults_are_not_shared(self) -> None:
        """Test each instance gets its own lists."""
        config = ReportConfig()
        config.tags.append("extra")

        assert ReportConfig().tags == DEFAULT_TAGS
        assert "extra" not in DEFAULT_TAGS

    def test_shipped_sample_exists(self) -> None:
        for name in DEFAULT_FILES:
            assert (DATA_DIR / name).is_file()

    @pytest.mark.parametrize(
        "kwargs, field_name",
        [
            ({"tags": []}, "tags"),
            ({"tags": ["a", " "]}, "tags"),
            ({"tags": ["a", "a"]}, "tags"),
            ({"placeholder": ""}, "placeholder"),
            ({"output_format": "xml"}, "output_format"),
            ({"files": "usuarios.xml"}, "files"),
            ({"files": [1]}, "files"),
            ({"tags": "abc"}, "tags"),
            ({"tags": ["a", 2]}, "tags"),
            ({"placeholder": 5}, "placeholder"),
            ({"separator": None}, "separator"),
            ({"output_format": None}, "output_format"),
            ({"concurrent": "yes"}, "concurrent"),
            ({"base_dir": None}, "base_dir"),
        ],
    )
    def test_validation_errors(self, kwargs, field_name) -> None:
        """Test invalid values raise ConfigValidationError naming the field."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ReportConfig(**kwargs)

        assert exc_info.value.field_name == field_name

    def test_values_are_normalized(self, tmp_path: Path) -> None:
        config = ReportConfig(files=[tmp_path / "a.xml"], base_dir=str(tmp_path))

        assert config.files == [str(tmp_path / "a.xml")]
        assert config.base_dir == tmp_path


class TestConfigLoading:
    """Test dictionary and file loading."""

    def test_round_trip_through_dict(self) -> None:
        config = ReportConfig(tags=["a"], concurrent=True, output_format="csv")

        assert ReportConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="unknown configuration keys"):
            ReportConfig.from_dict({"tagz": ["a"]})

    def test_from_dict_rejects_non_path_base_dir(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            ReportConfig.from_dict({"base_dir": None})

        assert exc_info.value.field_name == "base_dir"
        assert str(exc_info.value) == "base_dir must be a path string"

    def test_from_file_resolves_against_config_dir(self, tmp_path: Path) -> None:
        """Test a config file without base_dir uses its own directory."""
        config_path = tmp_path / "report.json"
        config_path.write_text(json.dumps({
            "files": ["a.xml", "b.xml"],
            "tags": ["x", "y"],
            "placeholder": "-",
        }), encoding="utf-8")

        config = ReportConfig.from_file(config_path)

        assert config.files == ["a.xml", "b.xml"]
        assert config.tags == ["x", "y"]
        assert config.placeholder == "-"
        assert config.base_dir == tmp_path.resolve()

    def test_from_file_relative_base_dir(self, tmp_path: Path) -> None:
        config_path = tmp_path / "report.json"
        config_path.write_text(json.dumps({"base_dir": "xml"}), encoding="utf-8")

        config = ReportConfig.from_file(config_path)

        assert config.base_dir == tmp_path.resolve() / "xml"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Could not read config file"):
            ReportConfig.from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "report.json"
        config_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="not valid JSON"):
            ReportConfig.from_file(config_path)

    def test_non_object_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "report.json"
        config_path.write_text("[]", encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            ReportConfig.from_file(config_path)

    def test_from_file_without_paths_keeps_sample(self, tmp_path: Path) -> None:
        """Test a config file setting neither files nor base_dir keeps the sample."""
        config_path = tmp_path / "report.json"
        config_path.write_text(json.dumps({"tags": ["cd_corretor"]}), encoding="utf-8")

        config = ReportConfig.from_file(config_path)

        assert config.files == DEFAULT_FILES
        assert config.base_dir == DATA_DIR
        assert config.tags == ["cd_corretor"]

    def test_from_file_rejects_null_base_dir(self, tmp_path: Path) -> None:
        config_path = tmp_path / "report.json"
        config_path.write_text(json.dumps({"base_dir": None}), encoding="utf-8")

        with pytest.raises(ConfigValidationError, match="base_dir must be a path string"):
            ReportConfig.from_file(config_path)
