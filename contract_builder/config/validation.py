"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..networks.profiles import NETWORK_PROFILES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate logging parameters."""
        issues = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                issues.append(ConfigIssue(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                issues.append(ConfigIssue(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return issues

    @staticmethod
    def validate_deployment_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate deployment parameters."""
        issues = []

        if "default_network" in params:
            value = params["default_network"]
            if not isinstance(value, str) or value not in NETWORK_PROFILES:
                issues.append(ConfigIssue(
                    field="deployment.default_network",
                    message=f"Must be one of {', '.join(NETWORK_PROFILES)}",
                    value=value
                ))

        return issues

    @staticmethod
    def validate_simulation_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate simulated collaborator latencies."""
        issues = []

        for name, value in params.items():
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                issues.append(ConfigIssue(
                    field=f"simulation.{name}",
                    message="Must be a non-negative number",
                    value=value
                ))

        return issues

    @staticmethod
    def validate_toolchain_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate toolchain parameters."""
        issues = []

        for name in ("build_command", "crate_name", "framework_version"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    issues.append(ConfigIssue(
                        field=f"toolchain.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "max_output_bytes" in params:
            value = params["max_output_bytes"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                issues.append(ConfigIssue(
                    field="toolchain.max_output_bytes",
                    message="Must be a positive integer",
                    value=value
                ))

        return issues

    @staticmethod
    def validate_completion_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate prompt completion parameters."""
        issues = []

        if "api_url" in params:
            value = params["api_url"]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                issues.append(ConfigIssue(
                    field="completion.api_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "max_tokens" in params:
            value = params["max_tokens"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                issues.append(ConfigIssue(
                    field="completion.max_tokens",
                    message="Must be a positive integer",
                    value=value
                ))

        if "temperature" in params:
            value = params["temperature"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 2:
                issues.append(ConfigIssue(
                    field="completion.temperature",
                    message="Must be a number between 0 and 2",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                issues.append(ConfigIssue(
                    field="completion.timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return issues

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        issues = []

        sections = {
            "logging": ConfigValidator.validate_logging_params,
            "deployment": ConfigValidator.validate_deployment_params,
            "simulation": ConfigValidator.validate_simulation_params,
            "toolchain": ConfigValidator.validate_toolchain_params,
            "completion": ConfigValidator.validate_completion_params,
        }

        for section, validate in sections.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                issues.append(ConfigIssue(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            issues.extend(validate(params))

        return issues
