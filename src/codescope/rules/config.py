from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from codescope.rules.base import RuleRegistry, parse_severity
from codescope.rules.complexity import ComplexityRule
from codescope.rules.coupling import CouplingRule
from codescope.rules.file_size import FileSizeRule
from codescope.rules.function_size import FunctionSizeRule
from codescope.rules.structure_stats import StructureStatsRule

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".codescope.toml"

DEFAULT_CONFIG_TOML = """\
# codescope configuration file

[rules]
# File size thresholds
max_file_loc = 300              # Maximum lines of code per file
max_function_loc = 40           # Maximum lines per function

# Complexity threshold
max_complexity = 10             # Maximum branching complexity per function

# Structure thresholds
max_functions_per_file = 20     # Maximum number of functions per file
max_types_per_file = 30         # Maximum type definitions per file

# Coupling thresholds
max_fan_out = 7                 # Maximum number of dependencies
max_imports = 15                # Maximum number of import statements

# Severity levels for rule violations
[rules.severity]
max_file_loc = "Warning"        # Options: "Info", "Warning", "Error"
max_function_loc = "Warning"
max_complexity = "Warning"
max_fan_out = "Warning"
structure = "Warning"
"""


class SeverityConfig(BaseModel):
    """Severity applied by each rule when its threshold is breached.

    Values are case-insensitive; unrecognized names resolve to info.
    """

    model_config = ConfigDict(extra="forbid")

    max_file_loc: str = Field(default="Warning")
    max_function_loc: str = Field(default="Warning")
    max_complexity: str = Field(default="Warning")
    max_fan_out: str = Field(default="Warning")
    structure: str = Field(
        default="Warning",
        description="Severity for function and type definition counts",
    )


class RulesConfig(BaseModel):
    """Numeric thresholds for the built-in quality rules."""

    model_config = ConfigDict(extra="forbid")

    max_file_loc: int = Field(default=300, ge=0)
    max_function_loc: int = Field(default=40, ge=0)
    max_complexity: int = Field(default=10, ge=0)
    max_functions_per_file: int = Field(default=20, ge=0)
    max_types_per_file: int = Field(default=30, ge=0)
    max_fan_out: int = Field(default=7, ge=0)
    max_imports: int = Field(default=15, ge=0)
    severity: SeverityConfig = Field(default_factory=SeverityConfig)


class CodeScopeConfig(BaseModel):
    """Configuration for codescope analysis."""

    model_config = ConfigDict(extra="forbid")

    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all supported files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )
    rules: RulesConfig = Field(default_factory=RulesConfig)


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def build_registry(rules: RulesConfig) -> RuleRegistry:
    """Construct the built-in rules from configured thresholds and severities."""
    severity = rules.severity
    registry = RuleRegistry()
    registry.register(
        FileSizeRule(rules.max_file_loc, parse_severity(severity.max_file_loc))
    )
    registry.register(
        FunctionSizeRule(
            rules.max_function_loc, parse_severity(severity.max_function_loc)
        )
    )
    registry.register(
        ComplexityRule(rules.max_complexity, parse_severity(severity.max_complexity))
    )
    registry.register(
        CouplingRule(
            rules.max_fan_out,
            rules.max_imports,
            parse_severity(severity.max_fan_out),
        )
    )
    registry.register(
        StructureStatsRule(
            rules.max_functions_per_file,
            rules.max_types_per_file,
            parse_severity(severity.structure),
        )
    )
    return registry


def find_config(start: Path) -> Path | None:
    """Return the config file next to ``start`` (or inside it, for directories)."""
    directory = start if start.is_dir() else start.parent
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(config_path: Path) -> CodeScopeConfig:
    """Load configuration from a TOML file.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or does
            not match the configuration schema.
    """
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        msg = f"Cannot read {config_path}: {e}"
        raise ConfigError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return CodeScopeConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


def load_config_or_default(config_path: Path | None) -> CodeScopeConfig:
    """Load configuration, falling back to defaults when it is missing or bad."""
    if config_path is None:
        return CodeScopeConfig()
    try:
        return load_config(config_path)
    except ConfigError as e:
        log.warning("%s; using default configuration", e)
        return CodeScopeConfig()


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG_TOML",
    "CodeScopeConfig",
    "ConfigError",
    "RulesConfig",
    "SeverityConfig",
    "build_registry",
    "find_config",
    "load_config",
    "load_config_or_default",
]
