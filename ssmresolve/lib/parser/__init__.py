"""
Parser package for ssmresolve placeholder handling.

Provides extraction of parameter references from `{{ ... }}` placeholders and
the substitution of resolved values back into the text.
"""

from .base import (
    PlaceholderParser,
    PARAMETER_PLACEHOLDER,
    SECURE_PARAMETER_PLACEHOLDER,
    placeholder_pattern,
)
from .substitute import substitute

__all__ = [
    "PlaceholderParser",
    "PARAMETER_PLACEHOLDER",
    "SECURE_PARAMETER_PLACEHOLDER",
    "placeholder_pattern",
    "substitute",
]
