"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DELIMITER = ":"
DEFAULT_SEPARATOR = ","


class ConfigError(Exception):
    """Error in topo configuration."""


@dataclass(slots=True, frozen=True)
class TopoConfig:
    """Configuration loaded from the ``[tool.topo]`` section of pyproject.toml.

    Attributes:
        delimiter: Splits a node from its successors in an edge argument (``a:b,c``).
        separator: Splits successors from each other.
        project_root: Directory containing the pyproject.toml, if one was found.

    """

    delimiter: str = DEFAULT_DELIMITER
    separator: str = DEFAULT_SEPARATOR
    project_root: Path | None = None


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


def _parse_token(section: dict[str, object], key: str, default: str) -> str:
    if key not in section:
        return default
    value = section[key]
    if not isinstance(value, str) or not value:
        msg = f"Invalid [tool.topo].{key}: expected non-empty string"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> TopoConfig:
    """Load and validate [tool.topo] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed TopoConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    topo_section = data.get("tool", {}).get("topo", {})
    if not topo_section:
        return TopoConfig(project_root=project_root)

    delimiter = _parse_token(topo_section, "delimiter", DEFAULT_DELIMITER)
    separator = _parse_token(topo_section, "separator", DEFAULT_SEPARATOR)
    if delimiter == separator:
        msg = f"Invalid [tool.topo]: delimiter and separator must differ (both are {delimiter!r})"
        raise ConfigError(msg)

    return TopoConfig(delimiter=delimiter, separator=separator, project_root=project_root)


def get_config() -> TopoConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        TopoConfig (defaults if no pyproject.toml or no [tool.topo] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return TopoConfig()
    return load_config(pyproject_path)
