"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shapecheck.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from shapecheck.domain.result import ValidateOptions

# --- shapecheck.toml sections ---


class ValidatorConfig(BaseModel):
    """[validator] section."""

    model_config = {"frozen": True}

    validate_model: bool = False
    max_depth: int = Field(default=64, ge=1)
    cache_size: int = Field(default=0, ge=0)

    def options(self) -> ValidateOptions:
        """Per-call options derived from this section."""
        return ValidateOptions(validate_model=self.validate_model, max_depth=self.max_depth)


class DefinitionsConfig(BaseModel):
    """[definitions] section.

    ``files`` are JSON/YAML documents merged (in order) into the
    definitions table; relative paths resolve against the config file.
    """

    model_config = {"frozen": True}

    files: list[str] = Field(default_factory=list)

