"""
Default configuration values for cssforge.
"""

DEFAULT_STRICT_COMBINATORS = False
DEFAULT_ALLOWED_COMBINATORS: list[str] = [" ", ">", "+", "~"]

# Symbols any allowed-combinators list is restricted to
CSS_COMBINATORS = frozenset(DEFAULT_ALLOWED_COMBINATORS)

# Table holding builder options inside a config file
CONFIG_SECTION = "builder"

ENV_PREFIX = "CSSFORGE_"
