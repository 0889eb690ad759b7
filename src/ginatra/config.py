"""Configuration loader for ginatra."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML, YAMLError


@dataclass
class GinatraConfig:
    """ginatra configuration."""

    # Base path the site is mounted under ("" = site root)
    prefix: str = ""

    # Default Gravatar size in pixels
    gravatar_size: int = 40

    # Default truncation length for commit messages
    truncate_length: int = 30


CONFIG_SEARCH_PATHS = [
    "ginatra.yaml",
    "ginatra.yml",
    ".ginatra.yaml",
    ".ginatra.yml",
]

SECTION = "ginatra"

INT_FIELDS = {"gravatar_size", "truncate_length"}

KNOWN_KEYS = INT_FIELDS | {"prefix"}


def find_config_path() -> Path | None:
    """Find the active config file path, or None if no config file exists."""
    for name in CONFIG_SEARCH_PATHS:
        path = Path.cwd() / name
        if path.exists():
            return path
    return None


def _section(data):
    """Return the ginatra section of a loaded document, or the document itself.

    A section left empty (``ginatra:`` with no keys) counts as an empty mapping.
    """
    if isinstance(data, dict) and SECTION in data:
        if data[SECTION] is None:
            data[SECTION] = {}
        return data[SECTION]
    return data


def _read_yaml(config_path: Path):
    yaml = YAML()
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.load(f)


def coerce_value(key: str, value):
    """Convert a raw config value to the type its field expects.

    Raises:
        KeyError: For unknown keys
        ValueError: For non-integer values of integer fields
    """
    if key not in KNOWN_KEYS:
        raise KeyError(key)
    if key in INT_FIELDS:
        try:
            return int(value)
        except (ValueError, TypeError):
            raise ValueError(f"'{key}' must be an integer, got: {value}") from None
    # A null prefix means the site root
    return "" if value is None else str(value)


def save_config_value(config_path: Path, key: str, value: str) -> None:
    """Set a single key in the YAML config file, preserving comments.

    The value lands in the ``ginatra:`` section when the file has one,
    otherwise at the top level.
    """
    yaml = YAML()
    yaml.preserve_quotes = True

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.load(f)

    if data is None:
        data = {}

    _section(data)[key] = coerce_value(key, value)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)


def validate_config(config_path: Path) -> list[str]:
    """Validate a config file and return a list of error messages (empty = valid)."""
    try:
        data = _section(_read_yaml(config_path))
    except YAMLError as e:
        return [f"Invalid YAML syntax: {e}"]
    except OSError as e:
        return [f"Cannot read file: {e}"]

    if data is None:
        return []

    if not isinstance(data, dict):
        return [f"Config must be a YAML mapping, got {type(data).__name__}"]

    errors: list[str] = []
    for key, value in data.items():
        try:
            coerce_value(key, value)
        except KeyError:
            errors.append(f"Unknown key: '{key}'")
        except ValueError as e:
            errors.append(str(e))
    return errors


def load_config(config_path: str | Path | None = None) -> GinatraConfig:
    """Load configuration file.

    Unknown keys are ignored here; ``validate_config`` reports them.
    """
    config = GinatraConfig()
    explicit = config_path is not None

    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return config  # Return default config

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        return config

    try:
        data = _section(_read_yaml(config_path))
    except YAMLError as e:
        print(f"Error: Invalid YAML in {config_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read config file {config_path}: {e}", file=sys.stderr)
        sys.exit(1)

    if data is None:
        return config

    if not isinstance(data, dict):
        print(f"Error: Config must be a YAML mapping, got {type(data).__name__}", file=sys.stderr)
        sys.exit(1)

    for key in sorted(KNOWN_KEYS & set(data)):
        try:
            setattr(config, key, coerce_value(key, data[key]))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    return config


def get_default_config_yaml() -> str:
    """Return default YAML config template."""
    return '''# ginatra configuration
# Place this file as ginatra.yaml in your working directory

ginatra:
  # Base path the site is served under, e.g. /git
  # Leave empty when serving from the site root
  prefix: ""

  # Default Gravatar size in pixels
  gravatar_size: 40

  # Default truncation length for commit messages
  truncate_length: 30
'''
