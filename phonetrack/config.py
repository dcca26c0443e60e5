"""
Configuration for PhoneTrack scanning.

The defaults reproduce the tuned behaviour of the frame tracker: a
candidate goes stale after 30 frames without a sighting (about one second
of video), and must be seen 11 times (a repeat count of 10) before it is
reported.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from phonetrack.exceptions import ConfigurationError

DEFAULT_STALE_AFTER_FRAMES = 30
DEFAULT_STABLE_COUNT = 10
DEFAULT_MAX_SUBSTITUTIONS = 2

# best_count starts at 0 and only rises on a strictly higher count
_MINIMUMS = {"stable_count": 1}


@dataclass
class TrackerConfig:
    """
    Configuration for extraction and temporal stabilization.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = TrackerConfig(stale_after_frames=60)
        >>> session = ScanSession(config)
    """

    # Frames a candidate may go unseen before it is evicted from the ledger
    stale_after_frames: int = DEFAULT_STALE_AFTER_FRAMES

    # Repeat sightings (beyond the first) required for a stable result
    stable_count: int = DEFAULT_STABLE_COUNT

    # Confusion-table hops allowed per character (s -> S -> 5 needs two)
    max_substitutions: int = DEFAULT_MAX_SUBSTITUTIONS

    def __post_init__(self):
        """Validate configuration."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{f.name} must be an integer, got {type(value).__name__}"
                )
            minimum = _MINIMUMS.get(f.name, 0)
            if value < minimum:
                raise ConfigurationError(f"{f.name} must be >= {minimum}, got {value}")

    def to_dict(self) -> dict[str, int]:
        """Return the configuration as a plain mapping."""
        return asdict(self)


def load_config(path: str | Path) -> TrackerConfig:
    """
    Load a TrackerConfig from a YAML file.

    The file holds a mapping with any of the TrackerConfig fields.
    An empty file yields the defaults.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated TrackerConfig.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML,
            is not a mapping, names unknown options or holds invalid values.
    """
    cfg_path = Path(path)
    try:
        with open(cfg_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file not found: {cfg_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {cfg_path}: {exc}") from exc

    if data is None:
        return TrackerConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {cfg_path} must be a mapping, got {type(data).__name__}"
        )

    known = {f.name for f in fields(TrackerConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) in {cfg_path}: {', '.join(unknown)}. "
            f"Valid options: {', '.join(sorted(known))}"
        )

    return TrackerConfig(**data)
