"""Quality rules and their configuration."""

from codescope.rules.base import (
    QualityRule,
    RuleRegistry,
    parse_severity,
)
from codescope.rules.complexity import ComplexityRule
from codescope.rules.config import (
    CodeScopeConfig,
    ConfigError,
    RulesConfig,
    SeverityConfig,
    build_registry,
    load_config,
    load_config_or_default,
)
from codescope.rules.coupling import CouplingRule
from codescope.rules.file_size import FileSizeRule
from codescope.rules.function_size import FunctionSizeRule
from codescope.rules.structure_stats import StructureStatsRule
from codescope.rules.suggestions import generate_suggestions

__all__ = [
    "CodeScopeConfig",
    "ComplexityRule",
    "ConfigError",
    "CouplingRule",
    "FileSizeRule",
    "FunctionSizeRule",
    "QualityRule",
    "RuleRegistry",
    "RulesConfig",
    "SeverityConfig",
    "StructureStatsRule",
    "build_registry",
    "generate_suggestions",
    "load_config",
    "load_config_or_default",
    "parse_severity",
]
