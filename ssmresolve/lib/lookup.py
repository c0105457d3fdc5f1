"""
Parameter lookup port.

The resolve operations depend only on this protocol. The AWS implementation
lives in `ssmresolve.lib.ssm`; tests substitute their own.
"""

from typing import Protocol, runtime_checkable
from ssmresolve.models.dataModel import (
    ResolutionMap,
    SSM_PLAIN_PREFIX,
    SSM_SECURE_PREFIX,
)


@runtime_checkable
class ParameterLookup(Protocol):
    """Protocol for fetching parameter values from a store.

    Implementations receive a set of unique references and return the info
    of every reference they resolved, keyed by the reference exactly as
    given. Any failure (unreachable store, unknown reference) is raised,
    preferably as `StoreError`; callers treat it as fatal.
    """

    def fetch(self, references: set[str]) -> ResolutionMap:
        """Resolve references to parameter info.

        Args:
            references: Unique parameter references, possibly tagged with
                "ssm:" or "ssm-secure:"

        Returns:
            Mapping of reference to ParameterInfo

        Raises:
            StoreError: If the store is unreachable or a reference is unknown
        """
        ...


def reference_toName(reference: str) -> str:
    """Strip the placeholder tag from a reference to get the store name."""
    for prefix in (SSM_SECURE_PREFIX, SSM_PLAIN_PREFIX):
        if reference.startswith(prefix):
            return reference[len(prefix) :]
    return reference
