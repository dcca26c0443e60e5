"""
Temporal stabilization of per-frame phone number candidates.

A single OCR frame is unreliable; the same number is read slightly
differently from frame to frame. The stabilizer keeps a ledger of every
distinct candidate with the frame it was last seen in and how many times it
has been seen again since, forgets candidates that disappear for too long,
and reports the most-seen candidate once its count crosses the threshold.

Frames must be observed in arrival order: staleness is measured in frames,
not wall-clock time. The stabilizer does no locking of its own; callers
feeding frames from several threads must serialize ``observe_frame`` and
``reset`` (ScanSession does).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from phonetrack.config import DEFAULT_STABLE_COUNT, DEFAULT_STALE_AFTER_FRAMES

if TYPE_CHECKING:
    from phonetrack.config import TrackerConfig

logger = logging.getLogger(__name__)


@dataclass
class StringObservation:
    """Ledger entry for one candidate."""

    last_seen: int
    count: int  # Repeat sightings beyond the first


class TemporalStabilizer:
    """
    Votes over per-frame candidates until one is seen often enough.

    A new candidate enters the ledger with ``count == 0``; every later frame
    that contains it adds one. With the default ``stable_count`` of 10 a
    candidate therefore needs 11 sightings, which need not be consecutive as
    long as it is never missing for more than ``stale_after_frames`` frames.

    Attributes:
        stale_after_frames: Frames a candidate may go unseen before eviction.
        stable_count: Count at which the best candidate is reported.

    Example:
        >>> stabilizer = TemporalStabilizer()
        >>> for _ in range(11):
        ...     stabilizer.observe_frame(["5551234567"])
        >>> stabilizer.stable_result()
        '5551234567'
    """

    def __init__(
        self,
        stale_after_frames: int = DEFAULT_STALE_AFTER_FRAMES,
        stable_count: int = DEFAULT_STABLE_COUNT,
    ):
        self.stale_after_frames = stale_after_frames
        self.stable_count = stable_count

        self._frame_index = 0
        self._observations: dict[str, StringObservation] = {}
        self._best_count = 0
        self._best_candidate: str | None = None

    @classmethod
    def from_config(cls, config: TrackerConfig) -> TemporalStabilizer:
        return cls(
            stale_after_frames=config.stale_after_frames,
            stable_count=config.stable_count,
        )

    @property
    def frame_index(self) -> int:
        """Index the next observed frame will get."""
        return self._frame_index

    @property
    def best_count(self) -> int:
        return self._best_count

    @property
    def best_candidate(self) -> str | None:
        return self._best_candidate

    def __len__(self) -> int:
        return len(self._observations)

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._observations

    def observation(self, candidate: str) -> StringObservation | None:
        """Return a copy of the ledger entry for ``candidate``, if tracked."""
        obs = self._observations.get(candidate)
        return replace(obs) if obs is not None else None

    def observe_frame(self, candidates: Iterable[str]) -> None:
        """
        Record one frame worth of candidates.

        Duplicates within the frame count as a single sighting. An empty
        frame is valid and still advances the frame index.

        Args:
            candidates: Normalized candidate strings extracted this frame.
        """
        if isinstance(candidates, str):
            raise TypeError("candidates must be an iterable of strings, not a single str")

        for candidate in dict.fromkeys(candidates):
            obs = self._observations.get(candidate)
            if obs is None:
                obs = self._observations[candidate] = StringObservation(last_seen=0, count=-1)
            obs.last_seen = self._frame_index
            obs.count += 1
            logger.debug("Seen %s %d times", candidate, obs.count)

        # Single pass: collect stale entries and find the best live one.
        # A stale entry is never eligible, even in the frame it is evicted.
        horizon = self._frame_index - self.stale_after_frames
        stale = []
        for candidate, obs in self._observations.items():
            if obs.last_seen < horizon:
                stale.append(candidate)
            elif obs.count > self._best_count:
                self._best_count = obs.count
                self._best_candidate = candidate

        for candidate in stale:
            del self._observations[candidate]
        if stale:
            logger.debug("Evicted %d stale candidate(s): %s", len(stale), ", ".join(stale))

        self._frame_index += 1

    def stable_result(self) -> str | None:
        """Return the best candidate once its count reaches ``stable_count``."""
        if self._best_count >= self.stable_count:
            return self._best_candidate
        return None

    def reset(self, candidate: str) -> None:
        """
        Forget ``candidate`` and the current best, keep listening.

        Used after a reported result has been rejected. The frame index and
        all other ledger entries are left alone.
        """
        self._observations.pop(candidate, None)
        self._best_count = 0
        self._best_candidate = None
