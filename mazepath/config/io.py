"""
Reading and writing ``MazepathConfig`` as YAML.

Example file::

    maze:
      width: 30
      height: 20
      seed: 42
    search:
      algorithm: astar
      goal: [19, 29]
    logging:
      level: INFO

Missing sections and keys take their model defaults; an empty file is the
default configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

if TYPE_CHECKING:
    from .core import MazepathConfig


def _read_yaml(path: Path) -> dict:
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e
    return {} if data is None else data


def load_config(path: str | Path) -> MazepathConfig:
    """
    Load and validate a configuration file.

    Raises:
        FileNotFoundError: If ``path`` is not an existing file
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the content does not describe a valid configuration
    """
    from .core import MazepathConfig

    path = Path(path)
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration in {path}: expected a mapping, got {type(data).__name__}")

    try:
        return MazepathConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_config(config: MazepathConfig, path: str | Path) -> None:
    """Write ``config`` to ``path`` as YAML, creating parent directories; unset values are omitted."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = config.model_dump(mode="json", exclude_none=True)
    path.write_text(yaml.safe_dump(payload, sort_keys=False, default_flow_style=False, allow_unicode=True))


def validate_yaml_config(path: str | Path) -> tuple[bool, str]:
    """Check a configuration file without raising; returns ``(is_valid, message)``."""
    try:
        load_config(path)
    except FileNotFoundError as e:
        return False, str(e)
    except yaml.YAMLError as e:
        return False, f"YAML syntax error: {e}"
    except ValueError as e:
        return False, f"Validation error: {e}"
    return True, "Configuration is valid"
