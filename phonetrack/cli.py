"""
Command-line interface for PhoneTrack.

Usage:
    phonetrack extract "Call 555-123-4567 now" "tel 5S5-l23-4567"
    phonetrack replay tests/fixtures/transcripts/*.yaml
    phonetrack replay session.yaml --config tracker.yaml --strict
"""

from __future__ import annotations

import argparse
import logging
import sys

from phonetrack.config import TrackerConfig, load_config
from phonetrack.exceptions import PhoneTrackError
from phonetrack.extractor import PhoneNumberExtractor
from phonetrack.transcript import load_transcript, replay_transcript


def _cmd_extract(args: argparse.Namespace, config: TrackerConfig) -> int:
    extractor = PhoneNumberExtractor(config.max_substitutions)
    all_matched = True

    for text in args.texts:
        result = extractor.analyze(text)
        if result.match is not None:
            print(f"{result.match.number}\t{text}")
        else:
            all_matched = False
            print(f"no match ({result.failure.value})\t{text}")

    return 0 if all_matched else 1


def _cmd_replay(args: argparse.Namespace, config: TrackerConfig) -> int:
    failures = 0

    for path in args.transcripts:
        print(f"\n{'=' * 60}")
        print(f"Replaying: {path}")
        print("=" * 60)

        try:
            transcript = load_transcript(path)
        except PhoneTrackError as e:
            print(f"  ERROR: {e}")
            failures += 1
            continue

        replay = replay_transcript(transcript, config)
        stats = replay.stats
        print(f"  Frames: {replay.frames_processed}/{len(transcript.frames)}")
        print(f"  Texts: {stats.texts_seen}, candidates extracted: {stats.candidates_extracted}")

        if replay.result is None:
            print("  Result: none")
        else:
            print(f"  Result: {replay.result} (stable at frame {replay.stable_at_frame})")

        if replay.matches_expected is False:
            print(f"  FAILED: expected {replay.expected}")
            failures += 1
        elif replay.result is None and args.strict:
            print("  FAILED: no stable result")
            failures += 1

    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonetrack",
        description="Extract stable phone numbers from noisy OCR output",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="YAML file with TrackerConfig options")

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser("extract", help="Extract a phone number from each text")
    extract.add_argument("texts", nargs="+", help="Recognized text(s)")
    extract.set_defaults(func=_cmd_extract)

    replay = subparsers.add_parser("replay", help="Replay recorded frame transcripts")
    replay.add_argument("transcripts", nargs="+", help="Transcript YAML file(s)")
    replay.add_argument(
        "--strict", action="store_true", help="Treat transcripts without a result as failures"
    )
    replay.set_defaults(func=_cmd_replay)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else TrackerConfig()
    except PhoneTrackError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
