"""
Configuration models.

Configuration is immutable and passed explicitly to the parser and
formatter. Defaults are module-level frozen instances; a YAML file can
override them:

    notation:
      number_of_components: 12
      separators: ":;&|"
    formatting:
      fraction_digits: 2
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from chuk_mcp_xen.constants import DEFAULT_NUMBER_OF_COMPONENTS, ErrorMessages
from chuk_mcp_xen.exceptions import ConfigurationError


class NotationConfig(BaseModel):
    """Settings for the interval notation parser."""

    number_of_components: int = Field(
        DEFAULT_NUMBER_OF_COMPONENTS,
        ge=1,
        le=100,
        description="Length of the prime basis for monzo vectors",
    )
    separators: str = Field(":;&|,", description="Characters separating chord tones")
    vector_open: str = Field("[", min_length=1, max_length=1)
    vector_close: str = Field(">", min_length=1, max_length=1)

    model_config = {"frozen": True}

    @field_validator("separators")
    @classmethod
    def _no_operator_separators(cls, value: str) -> str:
        reserved = set("+-/\\.[]<>") & set(value)
        if reserved:
            raise ValueError(f"Separators may not include notation characters: {sorted(reserved)}")
        return value


class FormattingConfig(BaseModel):
    """Settings for number and frequency display."""

    fraction_digits: int = Field(3, ge=0, le=20)
    exponential_threshold: float = Field(
        10000, gt=0, description="Magnitude at which scientific notation starts"
    )
    prefix_step_up: float = Field(
        100000, gt=1, description="Magnitude at which the next larger SI prefix is used"
    )

    model_config = {"frozen": True}


class XenConfig(BaseModel):
    """Top level configuration."""

    notation: NotationConfig = Field(default_factory=NotationConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)

    model_config = {"frozen": True}


DEFAULT_NOTATION_CONFIG = NotationConfig()
DEFAULT_FORMATTING_CONFIG = FormattingConfig()
DEFAULT_CONFIG = XenConfig()

# Environment variable naming the configuration file
CONFIG_ENV_VAR = "XEN_CONFIG"


def default_config_path() -> Path:
    """The file named by $XEN_CONFIG, else ./xen.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.cwd() / "xen.yaml"


def load_config(path: Path) -> XenConfig:
    """
    Load configuration from a YAML file.

    A missing file yields the defaults.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file is not valid YAML or has invalid values
    """
    if not path.exists():
        return DEFAULT_CONFIG

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(ErrorMessages.INVALID_CONFIG.format(path=path, reason=e)) from e

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigurationError(
            ErrorMessages.INVALID_CONFIG.format(path=path, reason="expected a mapping")
        )

    try:
        return XenConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(ErrorMessages.INVALID_CONFIG.format(path=path, reason=e)) from e
