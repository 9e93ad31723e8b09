"""Unit tests for configuration loading."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from hkid_ops.config.settings import (
    HKIDOpsConfig,
    load_config,
    load_config_from_env,
    load_config_from_yaml,
    load_config_safe,
)


def _write_yaml(content: str) -> Path:
    with tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False, encoding="utf-8") as f:
        f.write(content)
        return Path(f.name)


class TestHKIDOpsConfig:
    """Tests for HKIDOpsConfig dataclass."""

    def test_default_values(self):
        """Test default configuration values."""
        config = HKIDOpsConfig()
        assert config.must_be_known is False
        assert config.default_prefix is None
        assert config.count == 1
        assert config.parenthesize is True
        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_normalizes_case(self):
        """Test case normalization of log settings."""
        config = HKIDOpsConfig(log_level="debug", log_format="TEXT")
        assert config.log_level == "DEBUG"
        assert config.log_format == "text"

    def test_invalid_prefix(self):
        """Test rejecting a malformed default prefix."""
        with pytest.raises(ValueError, match="default_prefix"):
            HKIDOpsConfig(default_prefix="abc")

    def test_invalid_count(self):
        """Test rejecting a negative count."""
        with pytest.raises(ValueError, match="count"):
            HKIDOpsConfig(count=0)

    def test_invalid_log_level(self):
        """Test rejecting an unknown log level."""
        with pytest.raises(ValueError, match="log_level"):
            HKIDOpsConfig(log_level="LOUD")

    def test_invalid_log_format(self):
        """Test rejecting an unknown log format."""
        with pytest.raises(ValueError, match="log_format"):
            HKIDOpsConfig(log_format="xml")


class TestLoadConfigFromYaml:
    """Tests for YAML loading."""

    def test_load_valid_yaml(self):
        """Test loading a valid YAML file."""
        path = _write_yaml(
            "hkid_ops:\n"
            "  must_be_known: true\n"
            "  default_prefix: WX\n"
            "  count: 5\n"
            "  parenthesize: false\n"
            "  log_level: warning\n"
            "  log_format: text\n"
        )
        try:
            config = load_config_from_yaml(path)
        finally:
            path.unlink()

        assert config.must_be_known is True
        assert config.default_prefix == "WX"
        assert config.count == 5
        assert config.parenthesize is False
        assert config.log_level == "WARNING"
        assert config.log_format == "text"

    def test_empty_file_gives_defaults(self):
        """Test that an empty file gives the defaults."""
        path = _write_yaml("")
        try:
            assert load_config_from_yaml(path) == HKIDOpsConfig()
        finally:
            path.unlink()

    def test_file_not_found(self):
        """Test loading a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config_from_yaml("/nonexistent/hkid_ops.yaml")

    def test_not_a_mapping(self):
        """Test a YAML document that is not a mapping."""
        path = _write_yaml("- just\n- a list\n")
        try:
            with pytest.raises(ValueError, match="expected dict"):
                load_config_from_yaml(path)
        finally:
            path.unlink()

    def test_unknown_keys(self):
        """Test rejecting unknown configuration keys."""
        path = _write_yaml("hkid_ops:\n  colour: blue\n")
        try:
            with pytest.raises(ValueError, match="colour"):
                load_config_from_yaml(path)
        finally:
            path.unlink()

    def test_malformed_yaml(self):
        """Test loading malformed YAML."""
        path = _write_yaml("hkid_ops: [unclosed\n")
        try:
            with pytest.raises(yaml.YAMLError):
                load_config_from_yaml(path)
        finally:
            path.unlink()


class TestLoadConfigFromEnv:
    """Tests for environment overrides."""

    def test_no_env(self):
        """Test loading with no environment variables set."""
        with patch.dict("os.environ", {}, clear=True):
            assert load_config_from_env() == HKIDOpsConfig()

    def test_env_overrides(self):
        """Test environment variables overriding defaults."""
        with patch.dict(
            "os.environ",
            {
                "HKID_OPS_MUST_BE_KNOWN": "yes",
                "HKID_OPS_DEFAULT_PREFIX": "K",
                "HKID_OPS_COUNT": "3",
                "HKID_OPS_PARENTHESIZE": "0",
                "HKID_OPS_LOG_LEVEL": "error",
            },
            clear=True,
        ):
            config = load_config_from_env()

        assert config.must_be_known is True
        assert config.default_prefix == "K"
        assert config.count == 3
        assert config.parenthesize is False
        assert config.log_level == "ERROR"

    def test_env_overlays_base(self):
        """Test environment variables overlaying a base config."""
        base = HKIDOpsConfig(count=9, default_prefix="A")
        with patch.dict("os.environ", {"HKID_OPS_COUNT": "2"}, clear=True):
            config = load_config_from_env(base)
        assert config.count == 2
        assert config.default_prefix == "A"

    def test_invalid_env_value(self):
        """Test an invalid environment value."""
        with patch.dict("os.environ", {"HKID_OPS_COUNT": "many"}, clear=True):
            with pytest.raises(ValueError, match="count"):
                load_config_from_env()

    def test_invalid_env_bool(self):
        """Test an invalid boolean environment value."""
        with patch.dict("os.environ", {"HKID_OPS_MUST_BE_KNOWN": "maybe"}, clear=True):
            with pytest.raises(ValueError, match="must_be_known"):
                load_config_from_env()


class TestLoadConfigSafe:
    """Tests for the non-raising loader."""

    def test_success(self):
        """Test safe loading of a valid file."""
        with patch.dict("os.environ", {}, clear=True):
            config, error = load_config_safe()
        assert error is None
        assert config == HKIDOpsConfig()

    def test_missing_file(self):
        """Test safe loading of a missing file."""
        config, error = load_config_safe("/nonexistent/hkid_ops.yaml")
        assert config == HKIDOpsConfig()
        assert "not found" in error

    def test_invalid_value(self):
        """Test safe loading of an invalid value."""
        path = _write_yaml("hkid_ops:\n  count: -1\n")
        try:
            with patch.dict("os.environ", {}, clear=True):
                config, error = load_config_safe(path)
        finally:
            path.unlink()
        assert error.startswith("Configuration error:")

    def test_load_config_yaml_then_env(self):
        """Test that environment variables win over the YAML file."""
        path = _write_yaml("hkid_ops:\n  count: 4\n  default_prefix: XA\n")
        try:
            with patch.dict("os.environ", {"HKID_OPS_DEFAULT_PREFIX": "EC"}, clear=True):
                config = load_config(path)
        finally:
            path.unlink()
        assert config.count == 4
        assert config.default_prefix == "EC"
