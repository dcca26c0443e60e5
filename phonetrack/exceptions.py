"""
Exception classes for PhoneTrack.

All PhoneTrack exceptions inherit from PhoneTrackError,
making it easy to catch all library errors.

Extraction and stabilization never raise: a frame without a usable
phone number is a normal outcome, reported as ``None``.

Example:
    >>> try:
    ...     transcript = phonetrack.load_transcript("frames.yaml")
    ... except phonetrack.TranscriptError as e:
    ...     print(f"Bad transcript: {e}")
    ... except phonetrack.PhoneTrackError as e:
    ...     print(f"PhoneTrack error: {e}")
"""


class PhoneTrackError(Exception):
    """
    Base exception for all PhoneTrack errors.

    Catch this to handle any PhoneTrack-specific error.
    """

    pass


class ConfigurationError(PhoneTrackError, ValueError):
    """
    Raised for invalid configuration.

    Example:
        >>> TrackerConfig(stable_count=-1)
        ConfigurationError: stable_count must be >= 0, got -1
    """

    pass


class TranscriptError(PhoneTrackError):
    """
    Raised when a recorded frame transcript cannot be loaded.

    Covers missing files, YAML syntax errors and documents whose
    structure is not a list of frames.
    """

    pass


class SessionError(PhoneTrackError):
    """
    Raised when a scan session is used out of order.

    Example:
        >>> ScanSession().reject()
        SessionError: No result has been reported; nothing to reject
    """

    pass
