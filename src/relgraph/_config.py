"""Configuration loading from pyproject.toml."""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Error in relgraph configuration."""


class RelgraphConfig(BaseModel):
    """Behavior switches for `Graph`, read from `[tool.relgraph]`.

    Attributes:
        strict: Validate vertices and edges when a graph is constructed.
        warn_on_empty_roots: Log a warning when a traversal has no root to start from.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict: bool = False
    warn_on_empty_roots: bool = True


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> RelgraphConfig:
    """Load and validate [tool.relgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed RelgraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("relgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.relgraph] configuration. Expected a table."
        raise ConfigError(msg)

    try:
        config = RelgraphConfig.model_validate(section, strict=True)
    except ValidationError as e:
        msg = f"Invalid [tool.relgraph] configuration in {pyproject_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("Loaded relgraph config from %s: %r", pyproject_path, config)
    return config


def get_config() -> RelgraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        RelgraphConfig (defaults if no pyproject.toml or no [tool.relgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return RelgraphConfig()
    return load_config(pyproject_path)
