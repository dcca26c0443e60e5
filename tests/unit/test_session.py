"""
Tests for ScanSession frame orchestration.
"""

import threading

import pytest

from phonetrack import ScanSession, SessionError, TrackerConfig

CARD = "Call 555-123-4567"
NUMBER = "5551234567"


def feed(session, texts, frames):
    """Feed the same texts for several frames, returning the last result."""
    result = None
    for _ in range(frames):
        result = session.process_frame(texts)
    return result


class TestProcessFrame:
    """Tests for ScanSession.process_frame()."""

    def test_result_after_eleven_frames(self, session):
        """A number read in 11 frames is reported on the 11th."""
        assert feed(session, [CARD], 10) is None
        assert not session.finished
        assert session.process_frame([CARD]) == NUMBER
        assert session.finished
        assert session.result == NUMBER

    def test_noise_strings_ignored(self, session):
        """Strings without a number do not disturb voting."""
        texts = ["OPEN 9-5", CARD, "Best pizza in town"]
        assert feed(session, texts, 11) == NUMBER

    def test_confused_reads_vote_together(self, session):
        """Different misreads of the same number count as one candidate."""
        reads = ["555-123-4567", "5S5-l23-4567", "(555) I23-4567", "555.123.4S67"]
        for i in range(10):
            assert session.process_frame([reads[i % len(reads)]]) is None
        assert session.process_frame([reads[0]]) == NUMBER

    def test_duplicate_reads_in_frame_count_once(self, session):
        """Two strings yielding the same number in a frame are one sighting."""
        assert feed(session, ["555-123-4567", "(555) 123-4567"], 10) is None

    def test_last_matches_keep_spans(self, session):
        """Matches from the latest frame are kept for highlighting."""
        session.process_frame(["nothing", CARD])
        assert len(session.last_matches) == 1
        match = session.last_matches[0]
        assert match.number == NUMBER
        assert CARD[match.span[0] : match.span[1]] == "555-123-4567"

        session.process_frame([])
        assert session.last_matches == []

    def test_frames_ignored_after_result(self, session):
        """Once finished, frames no longer reach the stabilizer."""
        feed(session, [CARD], 11)
        frame_index = session.stabilizer.frame_index

        assert session.process_frame(["(800) 555-1212"]) == NUMBER
        assert session.stabilizer.frame_index == frame_index
        assert session.stats.frames_processed == 11

    def test_bare_string_rejected(self, session):
        """A single string must be wrapped in a list to form a frame."""
        with pytest.raises(TypeError):
            session.process_frame(CARD)
        assert session.stats.frames_processed == 0
        assert session.stats.texts_seen == 0

    def test_stats(self, session):
        """Statistics count frames, texts and candidates."""
        session.process_frame([CARD, "hello"])
        session.process_frame([])
        session.process_frame(["55x-123-4567"])

        assert session.stats.frames_processed == 3
        assert session.stats.texts_seen == 3
        assert session.stats.candidates_extracted == 1
        assert session.extractor.stats.unresolvable == 1

    def test_config_applied(self):
        """Config values reach extractor and stabilizer."""
        session = ScanSession(TrackerConfig(stable_count=2, max_substitutions=1))
        assert session.extractor.max_substitutions == 1
        assert session.stabilizer.stable_count == 2
        assert feed(session, [CARD], 3) == NUMBER


class TestReject:
    """Tests for ScanSession.reject()."""

    def test_reject_without_result(self, session):
        """Rejecting before anything was reported is an error."""
        with pytest.raises(SessionError):
            session.reject()

    def test_reject_resumes_listening(self, session):
        """After rejecting, the session needs a fresh run of sightings."""
        feed(session, [CARD], 11)
        session.reject()

        assert session.result is None
        assert not session.finished
        assert NUMBER not in session.stabilizer
        assert session.stats.results_rejected == 1

        assert feed(session, [CARD], 10) is None
        assert session.process_frame([CARD]) == NUMBER

    def test_reject_lets_another_number_win(self, session):
        """A different number can be reported after a rejection."""
        feed(session, [CARD, "(800) 555-1212"], 11)
        assert session.result == NUMBER
        session.reject()
        assert session.process_frame(["(800) 555-1212"]) == "8005551212"


class TestConcurrency:
    """Tests for serialized frame processing."""

    def test_concurrent_frames_all_counted(self):
        """Frames fed from several threads are each counted once."""
        session = ScanSession(TrackerConfig(stable_count=1000))
        threads = [
            threading.Thread(target=feed, args=(session, [CARD], 50)) for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert session.stats.frames_processed == 200
        assert session.stabilizer.frame_index == 200
        assert session.stabilizer.observation(NUMBER).count == 199
