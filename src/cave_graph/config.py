"""
Enumeration configuration.

Limits and dead-end handling for the traversal engine, with defaults
matching the handler safety limits and an optional YAML loader.

Example config file:
    enumeration:
      max_rounds: 40
      max_visits: 1000
      dead_end: park
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Literal

import yaml

DEAD_END_MODES = ("discard", "park")


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid."""

    pass


@dataclass
class EnumerationConfig:
    """Configuration for enumeration behavior."""

    # Safety parameters
    max_rounds: int = 30  # Abort if the frontier is still active after this
    max_visits: int = 1000  # Hard cap on visits to one node within a path

    # Paths stuck at a non-end node with no outgoing edges
    dead_end: Literal["discard", "park"] = "discard"

    def __post_init__(self):
        for name in ("max_rounds", "max_visits"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.dead_end not in DEAD_END_MODES:
            raise ConfigError(
                f"dead_end must be one of {', '.join(DEAD_END_MODES)}, got {self.dead_end!r}"
            )

    @property
    def parks_dead_ends(self) -> bool:
        return self.dead_end == "park"


def load_config(path: Path | str | None = None) -> EnumerationConfig:
    """
    Load enumeration settings from a YAML file.

    Settings may sit at the top level or under an "enumeration" key.
    Omitted settings keep their defaults.

    Args:
        path: YAML file to read (None = defaults)

    Returns:
        EnumerationConfig with the file's overrides applied

    Raises:
        ConfigError: If the file is unreadable, not a mapping, or holds
            unknown or invalid settings
    """
    if path is None:
        return EnumerationConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return EnumerationConfig()
    if isinstance(data, dict) and "enumeration" in data:
        data = data["enumeration"]
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a mapping of settings")

    known = {f.name for f in fields(EnumerationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return EnumerationConfig(**data)
