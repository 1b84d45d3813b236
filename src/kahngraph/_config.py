"""Configuration loading from pyproject.toml."""

import logging
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, ValidationError

from ._errors import ConfigError

logger = logging.getLogger(__name__)


class SortStrategy(StrEnum):
    """How Graph.sort tracks which nodes have no incoming edges left."""

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new enum member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    INDEGREE = (
        "indegree",
        "Keep an integer counter of incoming edges per node.",
    )
    REVERSE = (
        "reverse",
        "Keep a destructible reversed copy of the graph alongside a working copy.",
    )


class GraphConfig(BaseModel):
    """Settings shared by a graph and the graphs derived from it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: SortStrategy = SortStrategy.INDEGREE


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


def load_config(pyproject_path: Path) -> GraphConfig:
    """Load and validate [tool.kahngraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphConfig (defaults when the table is absent)

    Raises:
        ConfigError: If the file is not valid TOML or the table is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("kahngraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.kahngraph] configuration: expected a table"
        raise ConfigError(msg)

    try:
        config = GraphConfig.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.kahngraph] configuration in {pyproject_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("Loaded config from %s: %r", pyproject_path, config)
    return config


def get_config() -> GraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphConfig (defaults if no pyproject.toml or no [tool.kahngraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphConfig()
    return load_config(pyproject_path)
