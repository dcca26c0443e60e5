"""
Phone number extraction from single OCR strings.

Finds the first US-style phone number shape in a recognized string and
normalizes it to 10 characters, repairing letter/digit confusions with the
confusion table.

The shape pattern deliberately accepts word characters rather than digits:
OCR often reports a digit as a letter ("5S5-l23-4567"), and those are
recovered afterwards. Validity is enforced by the allowed-alphabet check,
not by the pattern.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from phonetrack.confusion import (
    ALLOWED_CHARACTERS,
    MAX_SUBSTITUTIONS,
    resolve_character,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Matches, among others:
#   xxx-xxx-xxxx   xxx xxx xxxx   (xxx) xxx-xxxx   xxx.xxx.xxxx
#   xxx xxx-xxxx   xxx/xxx.xxxx   +1-xxx-xxx-xxxx
PHONE_NUMBER_PATTERN = re.compile(
    r"""
    (?:\+1-?)?      # international prefix, may be followed by -
    [(]?            # opening (
    \b(\w{3})       # area code
    [)]?            # closing )
    [ \-./]?        # separator
    (\w{3})         # exchange
    [ \-./]?        # separator
    (\w{4})\b       # line number
    """,
    re.VERBOSE,
)

PHONE_NUMBER_LENGTH = 10


# =============================================================================
# DATA STRUCTURES
# =============================================================================


class ExtractionFailure(Enum):
    """Why a string did not yield a phone number."""

    NO_SHAPE_MATCH = "no_shape_match"
    UNRESOLVABLE_CHARACTER = "unresolvable_character"


@dataclass(frozen=True)
class PhoneNumberMatch:
    """A normalized phone number found in a recognized string."""

    number: str  # 10 characters from ALLOWED_CHARACTERS
    span: tuple[int, int]  # (start, end) of the whole match in the source text
    raw: str  # Concatenated groups before correction

    @property
    def corrections(self) -> int:
        """Number of characters changed by confusion correction."""
        return sum(1 for a, b in zip(self.raw, self.number) if a != b)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of analyzing one string: a match, or the reason there is none."""

    text: str
    match: PhoneNumberMatch | None = None
    failure: ExtractionFailure | None = None

    @property
    def number(self) -> str | None:
        return self.match.number if self.match else None


@dataclass
class ExtractionStats:
    """Statistics for extraction."""

    texts_seen: int = 0
    matches: int = 0
    no_shape_match: int = 0
    unresolvable: int = 0
    characters_corrected: int = 0


# =============================================================================
# EXTRACTION
# =============================================================================


def analyze_phone_number(
    text: str, max_substitutions: int = MAX_SUBSTITUTIONS
) -> ExtractionResult:
    """
    Locate and normalize the first phone number in ``text``.

    Args:
        text: One recognized string.
        max_substitutions: Confusion-table hops allowed per character.

    Returns:
        ExtractionResult with either ``match`` or ``failure`` set.
    """
    shape = PHONE_NUMBER_PATTERN.search(text)
    if shape is None:
        return ExtractionResult(text, failure=ExtractionFailure.NO_SHAPE_MATCH)

    raw = "".join(shape.groups())
    if len(raw) != PHONE_NUMBER_LENGTH:
        return ExtractionResult(text, failure=ExtractionFailure.UNRESOLVABLE_CHARACTER)

    resolved = []
    for char in raw:
        char = resolve_character(char, ALLOWED_CHARACTERS, max_substitutions)
        if char not in ALLOWED_CHARACTERS:
            return ExtractionResult(text, failure=ExtractionFailure.UNRESOLVABLE_CHARACTER)
        resolved.append(char)

    match = PhoneNumberMatch(number="".join(resolved), span=shape.span(), raw=raw)
    return ExtractionResult(text, match=match)


def extract_phone_number(
    text: str, max_substitutions: int = MAX_SUBSTITUTIONS
) -> PhoneNumberMatch | None:
    """
    Return the first phone number in ``text``, or None.

    Pure function: safe to call from any thread.

    Example:
        >>> extract_phone_number("call 5S5-l23-4567").number
        '5551234567'
        >>> extract_phone_number("no number here") is None
        True
    """
    return analyze_phone_number(text, max_substitutions).match


class PhoneNumberExtractor:
    """
    Phone number extractor that keeps running statistics.

    Wraps :func:`analyze_phone_number` for callers that want to know how
    often strings fail and why. Results are identical to the plain
    function; only the counters differ.

    Attributes:
        max_substitutions: Confusion-table hops allowed per character.
        stats: Running ExtractionStats.

    Example:
        >>> extractor = PhoneNumberExtractor()
        >>> extractor.extract("Call 555-123-4567 now")
        '5551234567'
        >>> extractor.stats.matches
        1
    """

    def __init__(self, max_substitutions: int = MAX_SUBSTITUTIONS):
        self.max_substitutions = max_substitutions
        self.stats = ExtractionStats()

    def analyze(self, text: str) -> ExtractionResult:
        """Analyze one string and update statistics."""
        result = analyze_phone_number(text, self.max_substitutions)
        self.stats.texts_seen += 1

        if result.match is not None:
            self.stats.matches += 1
            self.stats.characters_corrected += result.match.corrections
            logger.debug("Extracted %s from %r", result.match.number, text)
        elif result.failure is ExtractionFailure.NO_SHAPE_MATCH:
            self.stats.no_shape_match += 1
        else:
            self.stats.unresolvable += 1
            logger.debug("Rejected %r: unresolvable character", text)

        return result

    def extract(self, text: str) -> str | None:
        """Return the normalized number in ``text``, or None."""
        return self.analyze(text).number

    def reset_stats(self) -> None:
        """Reset statistics."""
        self.stats = ExtractionStats()
