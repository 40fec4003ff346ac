"""
Tests for configuration models and YAML loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_xen.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    FormattingConfig,
    NotationConfig,
    XenConfig,
    default_config_path,
    load_config,
)
from chuk_mcp_xen.constants import DEFAULT_NUMBER_OF_COMPONENTS
from chuk_mcp_xen.exceptions import ConfigurationError, XenError


class TestConfigModels:
    """Tests for the pydantic models."""

    def test_defaults(self) -> None:
        config = XenConfig()
        assert config.notation.number_of_components == DEFAULT_NUMBER_OF_COMPONENTS
        assert config.notation.separators == ":;&|,"
        assert config.notation.vector_open == "["
        assert config.notation.vector_close == ">"
        assert config.formatting.fraction_digits == 3
        assert config == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        config = NotationConfig()
        with pytest.raises(ValidationError):
            config.number_of_components = 5  # type: ignore[misc]

    def test_component_bounds(self) -> None:
        with pytest.raises(ValidationError):
            NotationConfig(number_of_components=0)
        with pytest.raises(ValidationError):
            NotationConfig(number_of_components=101)

    @pytest.mark.parametrize("separators", [":+", "/", "-", "."])
    def test_separators_exclude_notation(self, separators: str) -> None:
        with pytest.raises(ValidationError):
            NotationConfig(separators=separators)

    def test_custom_separators(self) -> None:
        assert NotationConfig(separators="#").separators == "#"

    def test_formatting_bounds(self) -> None:
        with pytest.raises(ValidationError):
            FormattingConfig(fraction_digits=-1)
        with pytest.raises(ValidationError):
            FormattingConfig(prefix_step_up=1)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file(self, temp_dir: Path) -> None:
        assert load_config(temp_dir / "absent.yaml") == DEFAULT_CONFIG

    def test_empty_file(self, temp_dir: Path) -> None:
        path = temp_dir / "xen.yaml"
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_override(self, temp_dir: Path) -> None:
        path = temp_dir / "xen.yaml"
        path.write_text(
            "notation:\n"
            "  number_of_components: 12\n"
            "  separators: ':;'\n"
            "formatting:\n"
            "  fraction_digits: 2\n"
        )
        config = load_config(path)
        assert config.notation.number_of_components == 12
        assert config.notation.separators == ":;"
        assert config.formatting.fraction_digits == 2
        assert config.formatting.prefix_step_up == 100000

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "xen.yaml"
        path.write_text("notation: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "xen.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config(path)

    def test_invalid_values(self, temp_dir: Path) -> None:
        path = temp_dir / "xen.yaml"
        path.write_text("notation:\n  number_of_components: 0\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert str(path) in str(exc_info.value)
        assert isinstance(exc_info.value, XenError)


class TestDefaultConfigPath:
    """Tests for locating the configuration file."""

    def test_working_directory(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(temp_dir)
        assert default_config_path() == Path.cwd() / "xen.yaml"

    def test_environment_override(
        self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path
    ) -> None:
        """An explicit file wins over an invalid ./xen.yaml."""
        (temp_dir / "xen.yaml").write_text("notation: [unclosed\n")
        good = temp_dir / "good.yaml"
        good.write_text("formatting:\n  fraction_digits: 1\n")
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(good))

        assert default_config_path() == good
        assert load_config(default_config_path()).formatting.fraction_digits == 1

    def test_empty_override_ignored(
        self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path
    ) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, "")
        monkeypatch.chdir(temp_dir)
        assert default_config_path() == Path.cwd() / "xen.yaml"
