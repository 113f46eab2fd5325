"""Unit tests for layout file loading."""

import json
from pathlib import Path
from typing import Any

import pytest

from blocklayout.application.config import (
    ConfigError,
    load_config,
    load_config_from_dict,
    save_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_layout(self, layout_file: Path) -> None:
        config = load_config(layout_file)
        assert config.schema_version == "1.0"
        assert [b.id for b in config.blocks] == ["A"]

    def test_loads_fixture_with_settings(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "corner_wall.json")
        assert len(config.blocks) == 3
        assert config.settings.snap_threshold == 150

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] >= 1
        assert "column" in error.details[0]

    def test_validation_error_paths(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_rotation.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "blocks[0].rotation"
        assert error.details[0]["value"] == 45
        assert "Layout validation failed:" in error.message
        assert "(got: 45)" in error.message

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type in ("file_read_error", "permission_denied")


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self, layout_data: dict[str, Any]) -> None:
        assert len(load_config_from_dict(layout_data).blocks) == 1

    def test_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "blocks": [{"id": "A"}]})
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path is None
        paths = {d["path"] for d in error.details}
        assert "blocks[0].type" in paths
        assert "blocks[0].position" in paths


class TestSaveConfig:
    """Tests for save_config."""

    def test_writes_indented_json(self, layout_file: Path, tmp_path: Path) -> None:
        config = load_config(layout_file)
        out = tmp_path / "out.json"
        save_config(config, out)

        text = out.read_text(encoding="utf-8")
        assert text.endswith("\n")
        data = json.loads(text)
        assert data["blocks"][0]["type"] == "standard"
        assert data["settings"]["grid_size"] == 8.0
        assert load_config(out) == config
