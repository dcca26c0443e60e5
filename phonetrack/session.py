"""
Scan session: per-frame orchestration of extraction and stabilization.

Each frame the recognizer hands over the strings it read. The session runs
every string through the extractor, records the numbers found as one frame
of sightings, and checks for a stable result. Once a result is reported the
session stops consuming frames until the caller either accepts it (and
discards the session) or rejects it to keep listening.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from phonetrack.config import TrackerConfig
from phonetrack.exceptions import SessionError
from phonetrack.extractor import PhoneNumberExtractor, PhoneNumberMatch
from phonetrack.stabilizer import TemporalStabilizer

logger = logging.getLogger(__name__)


@dataclass
class SessionStats:
    """Aggregate statistics for a scan session."""

    frames_processed: int = 0
    texts_seen: int = 0
    candidates_extracted: int = 0
    results_rejected: int = 0


@dataclass
class ScanSession:
    """
    One recognition session, from the first frame to a reported number.

    Attributes:
        config: TrackerConfig used for extraction and stabilization.
        extractor: PhoneNumberExtractor for single strings.
        stabilizer: TemporalStabilizer voting over frames.
        result: The reported number, or None while still listening.
        last_matches: Matches from the most recent processed frame, with
            source spans for callers that highlight them.
        stats: Running SessionStats.

    Example:
        >>> session = ScanSession()
        >>> for _ in range(11):
        ...     number = session.process_frame(["Call 555-123-4567"])
        >>> number
        '5551234567'
        >>> session.finished
        True
    """

    config: TrackerConfig = field(default_factory=TrackerConfig)
    extractor: PhoneNumberExtractor | None = field(default=None)
    stabilizer: TemporalStabilizer | None = field(default=None)
    result: str | None = field(default=None, init=False)
    last_matches: list[PhoneNumberMatch] = field(default_factory=list, init=False)
    stats: SessionStats = field(default_factory=SessionStats, init=False)

    def __post_init__(self) -> None:
        """Initialize components from the config."""
        if self.extractor is None:
            self.extractor = PhoneNumberExtractor(self.config.max_substitutions)
        if self.stabilizer is None:
            self.stabilizer = TemporalStabilizer.from_config(self.config)
        self._lock = threading.Lock()

    @property
    def finished(self) -> bool:
        """True once a stable result has been reported."""
        return self.result is not None

    def process_frame(self, texts: Iterable[str]) -> str | None:
        """
        Process the strings recognized in one frame.

        Frames that arrive after a result has been reported are ignored.

        Args:
            texts: Raw recognized strings for this frame, in any order.

        Returns:
            The stable number once available, else None.
        """
        if isinstance(texts, str):
            raise TypeError("texts must be an iterable of strings, not a single str")

        with self._lock:
            if self.result is not None:
                return self.result

            matches = []
            for text in texts:
                self.stats.texts_seen += 1
                match = self.extractor.analyze(text).match
                if match is not None:
                    matches.append(match)

            self.last_matches = matches
            self.stats.candidates_extracted += len(matches)
            self.stabilizer.observe_frame(m.number for m in matches)
            self.stats.frames_processed += 1

            self.result = self.stabilizer.stable_result()
            if self.result is not None:
                logger.info(
                    "Stable phone number %s after %d frame(s)",
                    self.result,
                    self.stats.frames_processed,
                )
            return self.result

    def reject(self) -> None:
        """
        Reject the reported number and resume listening.

        Raises:
            SessionError: If no result has been reported.
        """
        with self._lock:
            if self.result is None:
                raise SessionError("No result has been reported; nothing to reject")
            logger.info("Rejected phone number %s", self.result)
            self.stabilizer.reset(self.result)
            self.result = None
            self.stats.results_rejected += 1
