"""Layout file schema and loading.

Public API:
    - LayoutConfiguration: Root configuration model
    - BlockConfig: Placed block model
    - SnapSettingsConfig: Snap settings model
    - load_config / load_config_from_dict / save_config
    - ConfigError: Exception for configuration errors
    - ValidationResult / validate_config: layout advisories
    - config_to_blocks / config_to_snapper / append_block: adapters

Example:
    >>> from pathlib import Path
    >>> from blocklayout.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("house.json"))
    ...     print(f"{len(config.blocks)} blocks placed")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from blocklayout.application.config.adapter import (
    append_block,
    block_to_config,
    config_to_blocks,
    config_to_snapper,
)
from blocklayout.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    save_config,
)
from blocklayout.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)
from blocklayout.application.config.schema import (
    BlockConfig,
    LayoutConfiguration,
    PositionConfig,
    SUPPORTED_VERSIONS,
    SnapSettingsConfig,
)

__all__ = [
    "BlockConfig",
    "ConfigError",
    "LayoutConfiguration",
    "PositionConfig",
    "SUPPORTED_VERSIONS",
    "SnapSettingsConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "append_block",
    "block_to_config",
    "config_to_blocks",
    "config_to_snapper",
    "load_config",
    "load_config_from_dict",
    "save_config",
    "validate_config",
]
