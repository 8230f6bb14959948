"""Tests for the configuration module."""

from pathlib import Path

import pytest

from relgraph import ConfigError, Graph, GraphValidationError, RelgraphConfig, get_config, load_config
from relgraph._config import find_pyproject_toml


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject


class TestLoadConfig:
    """Tests for loading the [tool.relgraph] section."""

    def test_no_tool_relgraph_section(self, tmp_path: Path) -> None:
        """Should return defaults when there is no [tool.relgraph] section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[project]
name = "test"
""",
        )

        config = load_config(pyproject)

        assert config == RelgraphConfig()
        assert config.strict is False
        assert config.warn_on_empty_roots is True

    def test_full_configuration(self, tmp_path: Path) -> None:
        """Should parse every supported key."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.relgraph]
strict = true
warn_on_empty_roots = false
""",
        )

        config = load_config(pyproject)

        assert config.strict is True
        assert config.warn_on_empty_roots is False

    def test_unknown_key_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for keys the config does not define."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.relgraph]
stric = true
""",
        )

        with pytest.raises(ConfigError, match=r"Invalid \[tool.relgraph\] configuration"):
            load_config(pyproject)

    def test_wrong_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when a flag is not a boolean."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.relgraph]
strict = "yes"
""",
        )

        with pytest.raises(ConfigError, match="strict"):
            load_config(pyproject)

    def test_section_not_a_table_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when tool.relgraph is not a table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool]
relgraph = 1
""",
        )

        with pytest.raises(ConfigError, match="Expected a table"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for invalid TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.relgraph\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for discovering configuration from the working directory."""

    def test_reads_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.relgraph]\nstrict = true\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().strict is True


class TestConfigOnGraph:
    """Tests for how configuration changes Graph behavior."""

    def test_config_is_frozen(self) -> None:
        config = RelgraphConfig()
        with pytest.raises(ValueError, match="frozen"):
            config.strict = True  # type: ignore[misc]

    def test_strict_rejects_unknown_endpoints(self) -> None:
        with pytest.raises(GraphValidationError, match="unknown vertices") as exc_info:
            Graph({1}, {(1, 2)}, config=RelgraphConfig(strict=True))
        assert len(exc_info.value.errors) == 1

    def test_strict_rejects_unsupported_vertices(self) -> None:
        with pytest.raises(GraphValidationError, match="not comparable"):
            Graph({1, "x"}, set(), config=RelgraphConfig(strict=True))

    def test_strict_accepts_valid_graph(self) -> None:
        graph = Graph({1, 2}, {(1, 2)}, config=RelgraphConfig(strict=True))
        assert graph.config.strict is True

    def test_default_is_not_strict(self) -> None:
        graph = Graph({1}, {(1, 2)})
        assert graph.validate() == ["Edge 1 -> 2 references unknown vertices: [2]"]
