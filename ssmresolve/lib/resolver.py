"""
Parameter resolution operations.

Each operation composes the same stages:

    parse placeholders -> fetch from the lookup port -> enforce the secure
    parameter policy -> substitute values

and stops at the first error. Nothing is partially resolved: callers get a
complete, policy-checked result or an exception.

Example:
    service = SsmParameterService()
    options = ResolveOptions(resolve_secure_parameters=True)
    text = text_resolve(service, "Host: {{ db/host }}", options)
"""

from typing import Iterable, Optional
from ssmresolve.config.settings import appsettings
from ssmresolve.lib.fileio import file_validate, text_read, text_write
from ssmresolve.lib.log import LOG
from ssmresolve.lib.lookup import ParameterLookup
from ssmresolve.lib.parser import PlaceholderParser, substitute
from ssmresolve.lib.policy import policy_enforce
from ssmresolve.exceptions import InputError
from ssmresolve.models.dataModel import ResolutionMap, ResolveOptions

placeholder_parser: PlaceholderParser = PlaceholderParser()


def references_fetch(
    lookup: ParameterLookup, references: set[str], options: ResolveOptions
) -> ResolutionMap:
    """Fetch a set of unique references and apply the secure parameter policy."""
    if not references:
        return {}

    LOG(f"Resolving {len(references)} parameter reference(s)")
    resolution_map: ResolutionMap = lookup.fetch(references)
    policy_enforce(resolution_map, options)
    return resolution_map


def parameters_extractFromText(
    lookup: ParameterLookup, text: str, options: ResolveOptions
) -> ResolutionMap:
    """Resolve every parameter referenced by a placeholder in `text`.

    Args:
        lookup: Parameter lookup port
        text: Document containing placeholders
        options: Resolve options

    Returns:
        Mapping of reference to ParameterInfo; empty if no placeholders

    Raises:
        PolicyViolationError: If a secure parameter is not permitted
        StoreError: If the lookup fails
    """
    references: set[str] = placeholder_parser.parse(text, options)
    return references_fetch(lookup, references, options)


def parameterList_resolve(
    lookup: ParameterLookup, references: Iterable[str], options: ResolveOptions
) -> ResolutionMap:
    """Resolve an explicit list of references, duplicates allowed.

    Raises:
        PolicyViolationError: If a secure parameter is not permitted
        StoreError: If the lookup fails
    """
    return references_fetch(lookup, set(references), options)


def text_resolve(lookup: ParameterLookup, text: str, options: ResolveOptions) -> str:
    """Return `text` with every placeholder replaced by its parameter value.

    Text without placeholders is returned unchanged.

    Raises:
        PolicyViolationError: If a secure parameter is not permitted
        StoreError: If the lookup fails
    """
    resolution_map: ResolutionMap = parameters_extractFromText(lookup, text, options)
    return substitute(text, resolution_map)


def file_resolve(
    lookup: ParameterLookup,
    input_file: str,
    output_file: str,
    options: ResolveOptions,
    max_size: Optional[int] = None,
) -> None:
    """Resolve placeholders in `input_file` and write the result to `output_file`.

    The output file is written atomically, and only once resolution has
    fully succeeded. `input_file` and `output_file` may be the same path.

    Args:
        lookup: Parameter lookup port
        input_file: Document to read
        output_file: Destination of the resolved document
        options: Resolve options
        max_size: Input size limit in bytes; defaults to the configured one

    Raises:
        InputError: If a file name is missing or the input is invalid
        PolicyViolationError: If a secure parameter is not permitted
        StoreError: If the lookup fails
        OutputError: If the output cannot be written
    """
    if not input_file:
        raise InputError("input file name is not provided")

    if not output_file:
        raise InputError("output file name is not provided")

    if max_size is None:
        max_size = appsettings.maxFileSize

    file_validate(input_file, max_size)
    unresolved: str = text_read(input_file)
    resolved: str = text_resolve(lookup, unresolved, options)
    text_write(resolved, output_file)
