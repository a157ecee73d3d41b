"""
Tests for AttemptHistory.
Run: python -m pytest tests/test_history.py -v
"""

import random

from flashdrill.history import AttemptHistory, HISTORY_CAPACITY


class TestAttemptHistory:

    def test_starts_empty(self):
        history = AttemptHistory()
        assert history.total_attempts == 0
        assert history.total_correct == 0
        assert history.recent_attempts() == 0
        assert history.recently_correct() == 0
        assert history.render_history('Y', 'N') == ''
        assert history.recent_percent() == 100.0

    def test_record_updates_counters_and_register(self):
        history = AttemptHistory()
        history.record(True)
        history.record(False)
        history.record(True)
        assert history.total_attempts == 3
        assert history.total_correct == 2
        assert history.wrong_attempts() == 1
        assert history.recent_bits == 0b101

    def test_counters_hold_for_random_sequences(self):
        rng = random.Random(7)
        history = AttemptHistory()
        for _ in range(200):
            history.record(rng.random() < 0.5)
            assert history.total_correct <= history.total_attempts
            assert history.recent_attempts() == min(64, history.total_attempts)
            assert history.recently_correct() <= history.recent_attempts()

    def test_register_forgets_attempts_older_than_capacity(self):
        history = AttemptHistory()
        for _ in range(6):
            history.record(True)
        for _ in range(HISTORY_CAPACITY):
            history.record(False)

        assert history.total_attempts == 70
        assert history.total_correct == 6
        assert history.recent_attempts() == 64
        assert history.recently_correct() == 0
        assert history.recent_bits < (1 << 64)

    def test_render_history_is_oldest_first(self):
        history = AttemptHistory()
        history.record(False)
        history.record(True)
        history.record(True)
        assert history.render_history('✔', '✗') == '✗✔✔'

    def test_render_history_length_matches_recent_attempts(self):
        history = AttemptHistory()
        for i in range(100):
            history.record(i % 3 == 0)
        rendered = history.render_history('+', '-')
        assert len(rendered) == history.recent_attempts() == 64
        # attempt 99 is the newest and 99 % 3 == 0
        assert rendered[-1] == '+'
        assert rendered.count('+') == history.recently_correct()

    def test_recent_percent(self):
        history = AttemptHistory()
        history.record(True)
        history.record(False)
        history.record(False)
        history.record(True)
        assert history.recent_percent() == 50.0
