"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CompletionParams,
    DefaultConfig,
    DeploymentParams,
    LoggingParams,
    SimulationParams,
    ToolchainParams,
    get_default_config,
)
from .validation import ConfigIssue, ConfigValidator

CONFIG_FILENAME = "contract_builder.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig
    config_file: Optional[Path] = None

    @classmethod
    def create(
        cls,
        config_dir: Optional[Path] = None,
        config_file: Optional[Path] = None
    ) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
            config_file=Path(config_file) if config_file else None,
        )

    @property
    def file_path(self) -> Path:
        """Path of the YAML file consulted for the middle tier."""
        return self.config_file or self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file."""
        path = self.file_path

        if not path.exists():
            # Only an explicitly requested file must exist
            if self.config_file is not None:
                raise ConfigurationError(
                    f"Configuration file not found: {path}",
                    source=str(path)
                )
            return {}

        try:
            with open(path) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {path}: {e}",
                source=str(path)
            ) from e

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Top level of {path} must be a mapping",
                source=str(path)
            )
        return loaded

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML configuration file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build the typed configuration."""
        merged = self.merge_config(overrides)

        issues = ConfigValidator.validate_config(merged)
        issues.extend(self._unknown_keys(merged))
        if issues:
            details = "; ".join(f"{i.field}: {i.message} (got: {i.value!r})" for i in issues)
            raise ConfigurationError(
                f"Invalid configuration: {details}",
                source=str(self.file_path),
                issues=issues
            )

        return DefaultConfig(
            logging=LoggingParams(**merged["logging"]),
            deployment=DeploymentParams(**merged["deployment"]),
            simulation=SimulationParams(**merged["simulation"]),
            toolchain=ToolchainParams(**merged["toolchain"]),
            completion=CompletionParams(**merged["completion"]),
        )

    def _unknown_keys(self, merged: dict[str, Any]) -> list[ConfigIssue]:
        """Report sections and fields that no dataclass declares."""
        known = self._dataclass_to_dict(self.defaults)
        issues = []

        for section, params in merged.items():
            if section not in known:
                issues.append(ConfigIssue(field=section, message="Unknown section", value=params))
                continue
            if not isinstance(params, dict):
                continue
            for name, value in params.items():
                if name not in known[section]:
                    issues.append(ConfigIssue(
                        field=f"{section}.{name}",
                        message="Unknown field",
                        value=value
                    ))

        return issues

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
