"""
Character confusion table for OCR digit recovery.

OCR engines regularly report digit-shaped glyphs as letters and the other
way round: 1 and I share a glyph in many serif fonts, I and l in many sans
fonts, 0 and O are near-identical almost everywhere, and pairs such as
s/S or o/O only differ in size. The table maps each such character to ONE
alternate and is directional (s -> S, but never S -> s). Lookups are
capped at two hops.
"""

from __future__ import annotations

from types import MappingProxyType

# Characters a normalized phone number may consist of
ALLOWED_CHARACTERS = frozenset("0123456789()-_")

# Two hops are enough for s -> S -> 5 and o -> O -> 0
MAX_SUBSTITUTIONS = 2

CONFUSION_TABLE = MappingProxyType(
    {
        "s": "S",
        "S": "5",
        "5": "S",
        "o": "O",
        "Q": "O",
        "O": "0",
        "0": "O",
        "l": "I",
        "I": "1",
        "1": "I",
        "B": "8",
        "8": "B",
    }
)


def resolve_character(
    char: str,
    allowed: frozenset[str] = ALLOWED_CHARACTERS,
    max_substitutions: int = MAX_SUBSTITUTIONS,
) -> str:
    """
    Swap a character for a look-alike until it falls in the allowed set.

    Characters already allowed are returned untouched. Otherwise the
    confusion table is followed for at most ``max_substitutions`` hops,
    stopping early once the character is allowed or has no table entry.

    Args:
        char: Single character to resolve.
        allowed: Set of acceptable characters.
        max_substitutions: Maximum number of table hops.

    Returns:
        The resolved character. It may still lie outside ``allowed``;
        callers must check.

    Example:
        >>> resolve_character("l")
        '1'
        >>> resolve_character("x")
        'x'
    """
    current = char
    hops = 0
    while current not in allowed and hops < max_substitutions:
        alternate = CONFUSION_TABLE.get(current)
        if alternate is None:
            break
        current = alternate
        hops += 1
    return current
