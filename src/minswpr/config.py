"""
Configuration for Minesweeper.

Provides the difficulty presets and loading of the TOML configuration
file. The file may be specialised per operating system by naming it
``minswpr.<os>.toml``; otherwise ``minswpr.toml`` is used.
"""
import logging
import platform
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .board import BoardConfig, InvalidConfiguration


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "minswpr.toml"


# ============================================================================
# Difficulty Presets
# ============================================================================

BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or applied."""


@dataclass
class GameConfig:
    """
    Top-level application configuration.

    Attributes:
        board: Dimensions and mine count of the board.
        difficulty: Optional preset name; overrides ``board`` when applied.
    """

    board: BoardConfig = field(default_factory=BoardConfig)
    difficulty: Optional[str] = None


def apply_difficulty(config: GameConfig, difficulty: str) -> GameConfig:
    """
    Apply a difficulty preset to a configuration in place.

    Raises:
        ConfigError: If the difficulty is not known.
    """
    preset = DIFFICULTIES.get(difficulty)
    if preset is None:
        raise ConfigError(f"unknown difficulty: `{difficulty}`")
    config.board = BoardConfig(preset.width, preset.height, preset.num_mines)
    config.difficulty = difficulty
    return config


# ============================================================================
# File Loading
# ============================================================================

def read_config(
    path: Union[str, Path], difficulty: Optional[str] = None
) -> GameConfig:
    """
    Read a configuration file.

    Args:
        path: Path to a TOML file.
        difficulty: Preset overriding the one in the file, if any.

    Returns:
        The parsed configuration, with its difficulty preset applied.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"could not read configuration file `{path}`: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in `{path}`: {e}") from e

    logger.debug("Loaded configuration from %s", path)
    return parse_config(data, difficulty)


def parse_config(
    data: Dict[str, Any], difficulty: Optional[str] = None
) -> GameConfig:
    """
    Build a GameConfig from already-parsed TOML data.

    Args:
        data: Parsed TOML document.
        difficulty: Preset overriding the one in ``data``, if any.

    A difficulty replaces the ``[board]`` values before they are
    validated, so a preset always wins over an unusable board table.
    """
    board = data.get("board", {})
    if not isinstance(board, dict):
        raise ConfigError("`board` must be a table")

    defaults = BoardConfig()
    width = _read_int(board, "width", defaults.width)
    height = _read_int(board, "height", defaults.height)
    num_mines = _read_int(board, "num_mines", defaults.num_mines)

    difficulty = difficulty or data.get("difficulty")
    if difficulty is not None:
        return apply_difficulty(GameConfig(), str(difficulty))
    return GameConfig(board=board_config(width, height, num_mines))


def board_config(width: int, height: int, num_mines: int) -> BoardConfig:
    """
    Validate board values.

    Raises:
        ConfigError: If the values do not describe a valid board.
    """
    try:
        return BoardConfig(width, height, num_mines)
    except InvalidConfiguration as e:
        raise ConfigError(f"invalid board configuration: {e}") from e


def _read_int(table: Dict[str, Any], key: str, default: int) -> int:
    value = table.get(key, default)
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"`board.{key}` must be an integer, got {value!r}")
    return value


def resolve(directory: Union[str, Path] = ".") -> Path:
    """
    Find the configuration file to use.

    A file named ``minswpr.<os>.toml`` takes precedence over the default
    ``minswpr.toml`` when it exists.
    """
    directory = Path(directory)
    os_name = platform.system().lower()
    candidate = directory / f"minswpr.{os_name}.toml"
    if candidate.exists():
        logger.debug("Using OS specific configuration %s", candidate)
        return candidate
    return directory / DEFAULT_CONFIG
