#!/usr/bin/env python3
"""
Basic PhoneTrack Usage Example

This example demonstrates the core workflow:
1. Extract a phone number from a single OCR string
2. Feed simulated frames through a scan session
3. Reject a wrong result and keep listening
4. Replay a recorded transcript
"""

from pathlib import Path

from phonetrack import (
    ScanSession,
    TrackerConfig,
    extract_phone_number,
    load_transcript,
    replay_transcript,
)


def simulated_frames():
    """Yield the strings a recognizer might read from a shaky business card."""
    reads = [
        ["ACME Plumbing", "Call 5S5-l23-4567"],
        ["ACME Plumbing"],
        ["Call 555-123-4567", "24/7 service"],
        ["Ca11 555-I23-4567"],
        [],
    ]
    while True:
        yield from reads


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Single string
    # ─────────────────────────────────────────────────────────────────────────

    match = extract_phone_number("call 5S5-l23-4567")
    if match:
        print(f"Extracted {match.number} from span {match.span} ({match.corrections} fixed)")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Frame stream
    # ─────────────────────────────────────────────────────────────────────────

    session = ScanSession(TrackerConfig(stale_after_frames=30, stable_count=10))
    for texts in simulated_frames():
        number = session.process_frame(texts)
        if number:
            print(f"Stable after {session.stats.frames_processed} frames: {number}")
            break

    # ─────────────────────────────────────────────────────────────────────────
    # 3. User says the number is wrong
    # ─────────────────────────────────────────────────────────────────────────

    session.reject()
    print(f"Listening again (finished={session.finished})")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Recorded transcript
    # ─────────────────────────────────────────────────────────────────────────

    path = Path(__file__).parent.parent / "tests" / "fixtures" / "transcripts" / "noisy.yaml"
    replay = replay_transcript(load_transcript(path))
    print(f"{path.name}: {replay.result} at frame {replay.stable_at_frame}")


if __name__ == "__main__":
    main()
