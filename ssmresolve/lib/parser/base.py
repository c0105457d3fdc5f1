r"""
Placeholder parser for parameter references.

Two placeholder forms are recognized, both wrapped in double braces with
optional whitespace inside the braces:

- plain:  {{ db/host }}  or  {{ ssm:db/host }}
- secure: {{ ssm-secure:db/password }}

Reference names consist of word characters, "/", "-" and ".". The plain form
never admits a ":" after its optional "ssm:" tag, so a secure placeholder is
never also a plain match.

Example:
    parser = PlaceholderParser()
    refs = parser.parse("Host: {{ db/host }}", ResolveOptions())
    # refs == {"db/host"}
"""

import re
from typing import Final, Self
from re import Pattern
from ssmresolve.exceptions import PolicyViolationError
from ssmresolve.lib.log import LOG
from ssmresolve.models.dataModel import (
    ResolveOptions,
    SSM_PLAIN_PREFIX,
    SSM_SECURE_PREFIX,
)

REFERENCE_CHARS: Final[str] = r"[\w/\-.]+"


def placeholder_wrap(reference_regex: str) -> str:
    """Wrap a reference regex in the placeholder delimiters as group 1."""
    return r"{{\s*(" + reference_regex + r")\s*}}"


PARAMETER_PLACEHOLDER: Final[Pattern[str]] = re.compile(
    placeholder_wrap(r"(?:" + re.escape(SSM_PLAIN_PREFIX) + r")?" + REFERENCE_CHARS)
)
SECURE_PARAMETER_PLACEHOLDER: Final[Pattern[str]] = re.compile(
    placeholder_wrap(re.escape(SSM_SECURE_PREFIX) + REFERENCE_CHARS)
)


def placeholder_pattern(reference: str) -> Pattern[str]:
    """Compile a pattern matching the placeholder for exactly `reference`.

    Args:
        reference: Parameter reference as written inside the braces

    Returns:
        Pattern matching `{{ reference }}` with any interior whitespace
    """
    return re.compile(placeholder_wrap(re.escape(reference)))


class PlaceholderParser:
    """Extracts the set of parameter references from a document.

    Attributes:
        plain: Pattern for plain placeholders
        secure: Pattern for secure placeholders
    """

    def __init__(
        self: Self,
        plain: Pattern[str] = PARAMETER_PLACEHOLDER,
        secure: Pattern[str] = SECURE_PARAMETER_PLACEHOLDER,
    ) -> None:
        self.plain: Pattern[str] = plain
        self.secure: Pattern[str] = secure

    def plain_find(self: Self, text: str) -> list[str]:
        """References of all plain placeholders, in order, with repeats."""
        return [match.group(1) for match in self.plain.finditer(text)]

    def secure_find(self: Self, text: str) -> list[str]:
        """References of all secure placeholders, in order, with repeats."""
        return [match.group(1) for match in self.secure.finditer(text)]

    def parse(self: Self, text: str, options: ResolveOptions) -> set[str]:
        """Collect the deduplicated references found in `text`.

        Args:
            text: Document to scan
            options: Resolve options; secure placeholders require
                `resolve_secure_parameters`

        Returns:
            Set of plain and secure references; empty when none are present

        Raises:
            PolicyViolationError: If a secure placeholder is present while
                secure resolution is disabled
        """
        if not text:
            return set()

        secure_refs: list[str] = self.secure_find(text)
        if secure_refs and not options.resolve_secure_parameters:
            LOG("Secure placeholder(s) found with secure resolution disabled")
            raise PolicyViolationError(set(secure_refs))

        references: set[str] = set(self.plain_find(text))
        references.update(secure_refs)
        LOG(f"Found {len(references)} unique parameter reference(s)")
        return references
