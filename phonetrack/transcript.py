"""
Recorded frame transcripts and offline replay.

A transcript captures what a recognizer produced for each frame of a scan,
so that a session can be replayed without a camera. Transcripts are YAML:

    expected: "5551234567"        # optional
    frames:
      - ["Call 555-123-4567"]     # strings recognized in one frame
      - []                        # a frame where nothing was read
      - texts: ["555-l23-4567"]   # shorthand for a run of identical frames
        repeat: 12

Usage:
    >>> transcript = load_transcript("tests/fixtures/transcripts/clean.yaml")
    >>> replay_transcript(transcript).result
    '5551234567'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from phonetrack.config import TrackerConfig
from phonetrack.exceptions import TranscriptError
from phonetrack.session import ScanSession, SessionStats

# Keys allowed in a repeated-frame mapping
FRAME_KEYS = frozenset({"texts", "repeat"})


@dataclass
class Transcript:
    """Per-frame recognizer output for one scan."""

    frames: list[list[str]] = field(default_factory=list)
    expected: str | None = None
    source: Path | None = None

    @property
    def name(self) -> str:
        return self.source.name if self.source else "<transcript>"


@dataclass
class ReplayResult:
    """Outcome of replaying a transcript through a scan session."""

    result: str | None
    frames_processed: int
    stable_at_frame: int | None  # 1-based frame count when the result appeared
    expected: str | None
    stats: SessionStats

    @property
    def matches_expected(self) -> bool | None:
        """Whether the result equals ``expected``; None if nothing is expected."""
        if self.expected is None:
            return None
        return self.result == self.expected


def _parse_texts(value: Any, path: str) -> list[str]:
    if not isinstance(value, list):
        raise TranscriptError(f"{path}: frame must be a list of strings")
    texts = []
    for i, text in enumerate(value):
        if not isinstance(text, str):
            raise TranscriptError(f"{path}[{i}]: expected a string, got {type(text).__name__}")
        texts.append(text)
    return texts


def _parse_frames(raw_frames: Any) -> list[list[str]]:
    if not isinstance(raw_frames, list):
        raise TranscriptError("'frames' must be a list")

    frames: list[list[str]] = []
    for i, entry in enumerate(raw_frames):
        path = f"frames[{i}]"
        if entry is None:
            frames.append([])
        elif isinstance(entry, dict):
            unknown = sorted(str(key) for key in entry if key not in FRAME_KEYS)
            if unknown:
                raise TranscriptError(
                    f"{path}: unknown key(s) {', '.join(unknown)}; "
                    f"valid keys: {', '.join(sorted(FRAME_KEYS))}"
                )
            repeat = entry.get("repeat", 1)
            if isinstance(repeat, bool) or not isinstance(repeat, int) or repeat < 1:
                raise TranscriptError(f"{path}.repeat: must be an integer >= 1, got {repeat!r}")
            texts = _parse_texts(entry.get("texts", []), f"{path}.texts")
            frames.extend(list(texts) for _ in range(repeat))
        else:
            frames.append(_parse_texts(entry, path))
    return frames


def parse_transcript(data: Any, source: Path | None = None) -> Transcript:
    """
    Build a Transcript from already-loaded YAML data.

    Raises:
        TranscriptError: If the data is not a transcript mapping.
    """
    if not isinstance(data, dict):
        raise TranscriptError("Transcript must be a mapping with a 'frames' list")
    if "frames" not in data:
        raise TranscriptError("Transcript is missing the 'frames' list")

    expected = data.get("expected")
    if expected is not None and not isinstance(expected, str):
        raise TranscriptError(
            f"'expected' must be a quoted string, got {type(expected).__name__} {expected!r}"
        )

    return Transcript(frames=_parse_frames(data["frames"]), expected=expected, source=source)


def load_transcript(path: str | Path) -> Transcript:
    """
    Load a transcript YAML file.

    Args:
        path: Path to the transcript file.

    Returns:
        Parsed Transcript.

    Raises:
        TranscriptError: If the file is missing, malformed, or not a transcript.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise TranscriptError(f"Transcript not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise TranscriptError(f"Invalid YAML in {path}: {exc}") from exc

    try:
        return parse_transcript(data, source=path)
    except TranscriptError as exc:
        raise TranscriptError(f"{path}: {exc}") from exc


def replay_transcript(
    transcript: Transcript,
    config: TrackerConfig | None = None,
) -> ReplayResult:
    """
    Feed a transcript through a fresh ScanSession.

    Replay stops at the first stable result, the way a live scan stops
    the camera.

    Args:
        transcript: Frames to replay.
        config: Optional TrackerConfig for the session.

    Returns:
        ReplayResult describing when (and whether) a number stabilized.
    """
    session = ScanSession(config or TrackerConfig())
    stable_at = None
    for texts in transcript.frames:
        if session.process_frame(texts) is not None:
            stable_at = session.stats.frames_processed
            break

    return ReplayResult(
        result=session.result,
        frames_processed=session.stats.frames_processed,
        stable_at_frame=stable_at,
        expected=transcript.expected,
        stats=session.stats,
    )
