"""Configuration module for hkid-ops."""

from hkid_ops.config.settings import (
    HKIDOpsConfig,
    load_config,
    load_config_from_env,
    load_config_from_yaml,
    load_config_safe,
)

__all__ = [
    "HKIDOpsConfig",
    "load_config",
    "load_config_from_env",
    "load_config_from_yaml",
    "load_config_safe",
]
