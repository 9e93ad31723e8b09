"""YAML and environment configuration for hkid-ops.

Example YAML configuration:

    hkid_ops:
      must_be_known: true
      default_prefix: WX
      count: 5
      parenthesize: true
      log_level: INFO
      log_format: text

Environment variables (HKID_OPS_*) override values loaded from YAML.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from hkid_ops.core.patterns import is_valid_prefix_format


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"json", "text"}

# Top-level key in YAML configuration files
CONFIG_SECTION = "hkid_ops"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class HKIDOpsConfig:
    """Runtime options for hkid-ops.

    Attributes:
        must_be_known: Require prefixes to be known when validating/generating.
        default_prefix: Prefix used for generation when none is given.
        count: Number of HKIDs to generate per request.
        parenthesize: Wrap check digits of generated HKIDs in parentheses.
        log_level: Logging level name.
        log_format: "json" or "text".
    """

    must_be_known: bool = False
    default_prefix: Optional[str] = None
    count: int = 1
    parenthesize: bool = True
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.default_prefix is not None and not is_valid_prefix_format(self.default_prefix):
            raise ValueError(
                f"default_prefix must be 1 or 2 uppercase letters, got {self.default_prefix!r}"
            )
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"count must be a positive integer, got {self.count!r}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.log_level!r}")
        self.log_format = str(self.log_format).lower()
        if self.log_format not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {self.log_format!r}")


def _parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_int(name: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _coerce(values: dict[str, Any]) -> dict[str, Any]:
    coerced = dict(values)
    for key in ("must_be_known", "parenthesize"):
        if key in coerced:
            coerced[key] = _parse_bool(key, coerced[key])
    if "count" in coerced:
        coerced["count"] = _parse_int("count", coerced["count"])
    if coerced.get("default_prefix") == "":
        coerced["default_prefix"] = None
    return coerced


def load_config_from_yaml(path: Path | str) -> HKIDOpsConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        HKIDOpsConfig. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML structure or a value is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return HKIDOpsConfig()

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    section = data.get(CONFIG_SECTION, {})
    if section is None:
        return HKIDOpsConfig()
    if not isinstance(section, dict):
        raise ValueError(
            f"Invalid '{CONFIG_SECTION}' section: expected dict, got {type(section).__name__}"
        )

    known = {f.name for f in fields(HKIDOpsConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    return HKIDOpsConfig(**_coerce(section))


def load_config_from_env(base: Optional[HKIDOpsConfig] = None) -> HKIDOpsConfig:
    """Overlay HKID_OPS_* environment variables on ``base``.

    Args:
        base: Starting configuration. Defaults to HKIDOpsConfig().

    Returns:
        A new HKIDOpsConfig.

    Raises:
        ValueError: If an environment value is invalid.
    """
    base = base if base is not None else HKIDOpsConfig()

    overrides: dict[str, Any] = {}
    for f in fields(HKIDOpsConfig):
        raw = os.getenv(f"HKID_OPS_{f.name.upper()}")
        if raw is not None:
            overrides[f.name] = raw

    if not overrides:
        return base
    return replace(base, **_coerce(overrides))


def load_config(path: Optional[Path | str] = None) -> HKIDOpsConfig:
    """Load configuration from an optional YAML file, then the environment."""
    base = load_config_from_yaml(path) if path is not None else None
    return load_config_from_env(base)


def load_config_safe(path: Optional[Path | str] = None) -> tuple[HKIDOpsConfig, Optional[str]]:
    """Load configuration, returning an error message instead of raising.

    Returns:
        Tuple of (config, error_message). On failure the config is the
        defaults and error_message describes the problem.
    """
    try:
        return load_config(path), None
    except FileNotFoundError as e:
        return HKIDOpsConfig(), str(e)
    except ValueError as e:
        return HKIDOpsConfig(), f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return HKIDOpsConfig(), f"YAML parsing error: {e}"
