"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from pydantic import ValidationError

from shapecheck.config.discovery import CONFIG_FILENAME, find_config
from shapecheck.config.models import ValidatorConfig


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        assert find_config(tmp_path) == config.resolve()

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        child = tmp_path / "sub" / "deeper"
        child.mkdir(parents=True)
        assert find_config(child) == config.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "other.toml"
        other.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("SHAPECHECK_CONFIG", str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPECHECK_CONFIG", str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None

    def test_nearest_config_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "schemas"
        inner.mkdir()
        (inner / CONFIG_FILENAME).write_text("")
        assert find_config(inner / ".") == (inner / CONFIG_FILENAME).resolve()

    def test_directory_named_like_config_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        child = tmp_path / "child"
        (child / CONFIG_FILENAME).mkdir(parents=True)
        assert find_config(child) == (tmp_path / CONFIG_FILENAME).resolve()


class TestValidatorConfig:
    def test_options_follow_section(self) -> None:
        options = ValidatorConfig(validate_model=True, max_depth=5).options()
        assert options.validate_model is True
        assert options.max_depth == 5

    @pytest.mark.parametrize("field,value", [("max_depth", 0), ("cache_size", -1)])
    def test_rejects_out_of_range(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            ValidatorConfig(**{field: value})
