"""
PhoneTrack: stable phone numbers from noisy OCR frame streams.

A recognizer reading a phone number through a camera produces a slightly
different string every frame, and confuses look-alike glyphs (0/O, 1/I/l,
5/S, 8/B). PhoneTrack extracts a normalized 10-digit US number from each
recognized string and votes across frames until one number has been seen
often enough to trust.

Example:
    >>> import phonetrack
    >>> phonetrack.extract_phone_number("call 5S5-l23-4567").number
    '5551234567'

    >>> session = phonetrack.ScanSession()
    >>> for texts in frames:  # strings recognized per frame
    ...     number = session.process_frame(texts)
    ...     if number:
    ...         break
"""

from phonetrack.config import TrackerConfig, load_config
from phonetrack.confusion import (
    ALLOWED_CHARACTERS,
    CONFUSION_TABLE,
    resolve_character,
)
from phonetrack.exceptions import (
    ConfigurationError,
    PhoneTrackError,
    SessionError,
    TranscriptError,
)
from phonetrack.extractor import (
    ExtractionFailure,
    ExtractionResult,
    ExtractionStats,
    PhoneNumberExtractor,
    PhoneNumberMatch,
    analyze_phone_number,
    extract_phone_number,
)
from phonetrack.session import ScanSession, SessionStats
from phonetrack.stabilizer import StringObservation, TemporalStabilizer
from phonetrack.transcript import (
    ReplayResult,
    Transcript,
    load_transcript,
    replay_transcript,
)

__version__ = "0.1.0"
__all__ = [
    # Extraction
    "extract_phone_number",
    "analyze_phone_number",
    "PhoneNumberExtractor",
    "PhoneNumberMatch",
    "ExtractionResult",
    "ExtractionFailure",
    "ExtractionStats",
    # Confusion table
    "CONFUSION_TABLE",
    "ALLOWED_CHARACTERS",
    "resolve_character",
    # Stabilization
    "TemporalStabilizer",
    "StringObservation",
    # Session
    "ScanSession",
    "SessionStats",
    # Transcripts
    "Transcript",
    "ReplayResult",
    "load_transcript",
    "replay_transcript",
    # Configuration
    "TrackerConfig",
    "load_config",
    # Exceptions
    "PhoneTrackError",
    "ConfigurationError",
    "TranscriptError",
    "SessionError",
]
