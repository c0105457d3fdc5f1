"""
Security policy filter for resolved parameters.

A parameter counts as secure when its reference carries the "ssm-secure:" tag
or when the store reports it as a SecureString. The two signals are checked
independently: a plain placeholder may point at a parameter that has since
been changed to SecureString.
"""

from ssmresolve.exceptions import PolicyViolationError
from ssmresolve.lib.log import LOG
from ssmresolve.models.dataModel import (
    ResolutionMap,
    ResolveOptions,
    SSM_SECURE_PREFIX,
)


def secure_references(resolution_map: ResolutionMap) -> set[str]:
    """
    Collect the references of every secure entry in the map.

    :param resolution_map: Reference to resolved parameter info.
    :return: References tagged secure or stored as SecureString.
    """
    return {
        reference
        for reference, info in resolution_map.items()
        if reference.startswith(SSM_SECURE_PREFIX) or info.is_secure
    }


def policy_enforce(resolution_map: ResolutionMap, options: ResolveOptions) -> None:
    """
    Reject the whole map if it holds secure entries that are not permitted.

    :param resolution_map: Reference to resolved parameter info.
    :param options: Resolve options of the current operation.
    :raises PolicyViolationError: If secure resolution is disabled and any
        entry is secure.
    """
    if options.resolve_secure_parameters:
        return

    offending: set[str] = secure_references(resolution_map)
    if offending:
        LOG(f"Rejecting {len(offending)} secure parameter(s): {sorted(offending)}")
        raise PolicyViolationError(offending)
