"""Tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from superai.core.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader
from superai.core.exceptions.errors import ConfigurationError


class TestConfigLoader:
    """Tests for ConfigLoader class."""

    def test_load_without_path(self) -> None:
        """Test loading with no path gives an empty config."""
        assert ConfigLoader().load() == {}

    def test_load_mapping(self, temp_dir: Path) -> None:
        """Test loading nested sections."""
        path = temp_dir / "config.yaml"
        path.write_text("git:\n  remote: upstream\n  branches: [trunk]\n")

        config = ConfigLoader(path).load()

        assert config == {"git": {"remote": "upstream", "branches": ["trunk"]}}

    def test_get_section(self, temp_dir: Path) -> None:
        """Test whole sections and non-mapping sections."""
        path = temp_dir / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\ngit: origin\n")
        loader = ConfigLoader(path)
        loader.load()

        assert loader.get_section("logging") == {"level": "DEBUG"}
        assert loader.get_section("git") == {}
        assert loader.get_section("installer") == {}

    def test_empty_file(self, temp_dir: Path) -> None:
        """Test an empty or fully commented file loads as empty."""
        path = temp_dir / "config.yaml"
        path.write_text("# nothing here\n")

        assert ConfigLoader(path).load() == {}

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader(temp_dir / "nope.yaml").load()

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test malformed YAML raises ConfigurationError."""
        path = temp_dir / "config.yaml"
        path.write_text("git: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(path).load()

    def test_non_mapping_root(self, temp_dir: Path) -> None:
        """Test a list at the root is rejected."""
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            ConfigLoader(path).load()

    def test_shipped_default_config_loads(self) -> None:
        """Test the bundled default.yaml is valid."""
        assert DEFAULT_CONFIG_PATH.is_file()
        assert isinstance(ConfigLoader(DEFAULT_CONFIG_PATH).load(), dict)
