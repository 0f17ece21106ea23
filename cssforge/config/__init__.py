"""
Configuration for cssforge builders.

Example usage:
    from cssforge.config import BuilderOptions, load_config

    # File values, overridden by CSSFORGE_* environment variables
    options = load_config("cssforge.toml")

    # Created programmatically
    options = BuilderOptions(strict_combinators=True)

Environment variables:
    CSSFORGE_STRICT_COMBINATORS=true
    CSSFORGE_ALLOWED_COMBINATORS=">+"
"""

from .defaults import (
    CONFIG_SECTION,
    CSS_COMBINATORS,
    DEFAULT_ALLOWED_COMBINATORS,
    DEFAULT_STRICT_COMBINATORS,
    ENV_PREFIX,
)
from .loader import ConfigurationError, load_config, read_config_file, read_env_options
from .options import BuilderOptions

__all__ = [
    "BuilderOptions",
    "ConfigurationError",
    "load_config",
    "read_config_file",
    "read_env_options",
    "CONFIG_SECTION",
    "CSS_COMBINATORS",
    "DEFAULT_ALLOWED_COMBINATORS",
    "DEFAULT_STRICT_COMBINATORS",
    "ENV_PREFIX",
]
