"""
Substitution of resolved parameter values into text.

All mapped references are folded into one compiled alternation and the text
is rewritten in a single pass:
- the result does not depend on the iteration order of the map
- a substituted value is never scanned again, so values that themselves look
  like placeholders are left as they are
- values are inserted literally, backslashes included
"""

import re
from re import Match, Pattern
from ssmresolve.lib.parser.base import placeholder_wrap
from ssmresolve.models.dataModel import ResolutionMap


def placeholders_compile(references: list[str]) -> Pattern[str]:
    """Compile a pattern matching the placeholder of any of `references`."""
    # Longest first, so no reference shadows a longer one sharing its prefix
    ordered: list[str] = sorted(references, key=lambda ref: (-len(ref), ref))
    alternation: str = "|".join(re.escape(ref) for ref in ordered)
    return re.compile(placeholder_wrap(alternation))


def substitute(text: str, resolution_map: ResolutionMap) -> str:
    """Replace every placeholder of a mapped reference with its value.

    Args:
        text: Document containing placeholders
        resolution_map: Reference to resolved parameter info

    Returns:
        The rewritten text. Placeholders whose reference is not in the map
        are left untouched.
    """
    if not text or not resolution_map:
        return text

    pattern: Pattern[str] = placeholders_compile(list(resolution_map))

    def value_lookup(match: Match[str]) -> str:
        return resolution_map[match.group(1)].value

    return pattern.sub(value_lookup, text)
