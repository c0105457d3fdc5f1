"""ssmresolve exceptions.

Every operation raises one of these instead of terminating the process. The
CLI maps them to exit codes through `exit_code`.
"""

from typing import Iterable


class ResolverError(Exception):
    """Base class for all resolution failures."""

    exit_code: int = 1


class PolicyViolationError(ResolverError):
    """A secure parameter was encountered without permission."""

    exit_code = 3

    def __init__(self, references: Iterable[str] = ()):
        self.references = sorted(references)
        message = "resolving secure parameters is not allowed"
        if self.references:
            message += f": {', '.join(self.references)}"
        super().__init__(message)


class StoreError(ResolverError):
    """The parameter store could not be reached or rejected the lookup."""

    exit_code = 4


class InputError(ResolverError):
    """Missing, unreadable or oversized input."""

    exit_code = 2


class OutputError(ResolverError):
    """The resolved document could not be written."""

    exit_code = 5
