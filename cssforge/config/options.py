"""
Builder options for cssforge.

Options are a pydantic model so values read from files or the environment
are coerced and validated before a builder ever sees them.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    CSS_COMBINATORS,
    DEFAULT_ALLOWED_COMBINATORS,
    DEFAULT_STRICT_COMBINATORS,
)


class BuilderOptions(BaseModel):
    """Options applied to every SelectorBuilder.

    With default values a builder follows the plain grammar rules only;
    ``strict_combinators`` additionally rejects unknown combinators.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    strict_combinators: bool = Field(
        DEFAULT_STRICT_COMBINATORS,
        description="Reject combinators outside allowed_combinators",
    )
    allowed_combinators: list[str] = Field(
        default_factory=lambda: DEFAULT_ALLOWED_COMBINATORS.copy(),
        description="Combinator symbols accepted in strict mode",
    )

    @field_validator("allowed_combinators", mode="before")
    @classmethod
    def parse_allowed_combinators(cls, v: Any) -> Any:
        """Accept a bare string of symbols, e.g. ``" >+"``."""
        if isinstance(v, str):
            return list(v)
        return v

    @field_validator("allowed_combinators")
    @classmethod
    def validate_allowed_combinators(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("allowed_combinators must not be empty")
        unknown = [c for c in v if c not in CSS_COMBINATORS]
        if unknown:
            raise ValueError(f"Unknown combinators: {unknown!r}")
        return v
