"""Configuration schema and loading for cut list plans.

Public API:
    - CutlistConfiguration: Root configuration model
    - BoardStockSchema / CutSpecSchema / SearchConfigSchema: Nested models
    - load_config / load_config_from_dict: Load and validate a configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides
    - validate_config / ValidationResult: Plan-level checks
    - config_to_plan_input / config_to_search_config: Domain conversion

Example:
    >>> from pathlib import Path
    >>> from cutlist.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("shelf-plan.json"))
    ...     print(f"{len(config.cutlist)} cut specs on {len(config.boards)} stock sizes")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutlist.application.config.adapter import (
    config_to_plan_input,
    config_to_search_config,
)
from cutlist.application.config.loader import (
    ConfigError,
    format_json_path,
    load_config,
    load_config_from_dict,
)
from cutlist.application.config.merger import merge_config_with_cli
from cutlist.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoardStockSchema,
    CutlistConfiguration,
    CutSpecSchema,
    FitPolicyConfig,
    SearchConfigSchema,
)
from cutlist.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoardStockSchema",
    "ConfigError",
    "CutlistConfiguration",
    "CutSpecSchema",
    "FitPolicyConfig",
    "SearchConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_plan_input",
    "config_to_search_config",
    "format_json_path",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
