"""
dataModel.py

This module defines the data models used throughout ssmresolve. The models
leverage Pydantic for validation and type safety.

Features:
- Enum of parameter store types
- Immutable resolved parameter information
- Resolve options passed by callers into every operation

Usage:
Import these models to validate and structure data used in the application.
"""

from enum import Enum
from typing import Dict, Final
from pydantic import BaseModel, ConfigDict, Field

SSM_SECURE_PREFIX: Final[str] = "ssm-secure:"
SSM_PLAIN_PREFIX: Final[str] = "ssm:"


class ParameterType(str, Enum):
    """
    Parameter types as reported by the parameter store.
    """

    STRING = "String"
    STRING_LIST = "StringList"
    SECURE_STRING = "SecureString"


class ParameterInfo(BaseModel):
    """Resolved state of a single parameter reference.

    Attributes:
        name: Store-side parameter name the reference resolved to
        value: The parameter value (StringList values stay comma separated)
        type: The stored parameter type
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Parameter name in the store.")
    value: str = Field(..., description="Parameter value.")
    type: ParameterType = Field(..., description="Stored parameter type.")

    @property
    def is_secure(self) -> bool:
        return self.type == ParameterType.SECURE_STRING


class ResolveOptions(BaseModel):
    """Caller-supplied policy for a resolve operation.

    Attributes:
        resolve_secure_parameters: Whether secure parameters may be resolved.
            Accepted as `ResolveSecureParameters` too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resolve_secure_parameters: bool = Field(
        default=False, alias="ResolveSecureParameters"
    )


# Parameter reference -> resolved info
ResolutionMap = Dict[str, ParameterInfo]
