"""
Load BuilderOptions from a config file and the environment.

A config file keeps builder options in a ``builder`` table:

    # cssforge.toml
    [builder]
    strict_combinators = true
    allowed_combinators = ">+"

Environment variables use the ``CSSFORGE_`` prefix, e.g.
``CSSFORGE_STRICT_COMBINATORS=true``. Raw strings are handed to
BuilderOptions, which does the type coercion.
"""

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from .defaults import CONFIG_SECTION, ENV_PREFIX
from .options import BuilderOptions

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Configuration file cannot be read or has the wrong shape."""

    pass


def _parse_yaml(text: str) -> Any:
    try:
        import yaml
    except ImportError:
        raise ConfigurationError(
            "PyYAML is required to load YAML config files. "
            "Install with: pip install pyyaml"
        )

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}") from e


_PARSERS: dict[str, Callable[[str], Any]] = {
    ".json": json.loads,
    ".toml": tomllib.loads,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read the builder table of a JSON, TOML or YAML config file.

    Args:
        path: Path to the config file.

    Returns:
        Raw option values; empty if the file has no builder table.

    Raises:
        ConfigurationError: If the format is unsupported, the file cannot
            be read or parsed, or the file or its builder table is not a
            mapping.
    """
    path = Path(path)
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    try:
        data = parser(text)
    except ValueError as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e

    # An empty YAML document loads as None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path}: expected a mapping at top level, got {type(data).__name__}"
        )

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"{path}: [{CONFIG_SECTION}] must be a mapping, got {type(section).__name__}"
        )

    logger.debug("Loaded builder options from %s", path)
    return section


def read_env_options(environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Collect ``CSSFORGE_<OPTION>`` variables for known builder options.

    Args:
        environ: Variables to read, defaults to os.environ.

    Returns:
        Raw string values keyed by option name.
    """
    if environ is None:
        environ = os.environ

    values = {}
    for name in BuilderOptions.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw
    return values


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    use_env: bool = True,
) -> BuilderOptions:
    """Build BuilderOptions from defaults, a file, the environment and overrides.

    Later sources win: file < environment < overrides.

    Raises:
        ConfigurationError: If the file cannot be used.
        pydantic.ValidationError: If an option value is invalid or unknown.
    """
    values: dict[str, Any] = {}

    if path is not None:
        values.update(read_config_file(path))
    if use_env:
        values.update(read_env_options())
    if overrides:
        values.update(overrides)

    return BuilderOptions(**values)
