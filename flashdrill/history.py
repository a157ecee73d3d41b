"""
Attempt history for a single card or a whole session.
"""

from typing import Dict

HISTORY_CAPACITY = 64
_HISTORY_MASK = (1 << HISTORY_CAPACITY) - 1


class AttemptHistory:
    """Cumulative counters plus a 64-bit register of the most recent outcomes.

    The newest outcome lives in bit 0. Each attempt shifts the register left
    by one, so anything older than 64 attempts falls off the top.
    """

    def __init__(self):
        self.total_attempts = 0
        self.total_correct = 0
        self.recent_bits = 0

    def record(self, correct: bool):
        """Record one attempt"""
        self.total_attempts += 1
        self.recent_bits = (self.recent_bits << 1) & _HISTORY_MASK
        if correct:
            self.total_correct += 1
            self.recent_bits |= 1

    def recent_attempts(self) -> int:
        """How many attempts the recent register covers"""
        return min(HISTORY_CAPACITY, self.total_attempts)

    def recently_correct(self) -> int:
        """How many of the recent attempts were correct"""
        return bin(self.recent_bits).count('1')

    def wrong_attempts(self) -> int:
        return self.total_attempts - self.total_correct

    def recent_percent(self) -> float:
        """Recent accuracy as a percentage; 100.0 before the first attempt."""
        recent = self.recent_attempts()
        if recent == 0:
            return 100.0
        return self.recently_correct() / recent * 100.0

    def render_history(self, correct_symbol: str, incorrect_symbol: str) -> str:
        """Render the recent register oldest first, one symbol per attempt."""
        symbols = []
        for i in range(self.recent_attempts() - 1, -1, -1):
            if (self.recent_bits >> i) & 1:
                symbols.append(correct_symbol)
            else:
                symbols.append(incorrect_symbol)
        return ''.join(symbols)

    def to_dict(self) -> Dict[str, float]:
        return {
            'attempts': self.total_attempts,
            'correct': self.total_correct,
            'wrong': self.wrong_attempts(),
            'recent_percent': self.recent_percent()
        }

    def __repr__(self):
        return (f'AttemptHistory(attempts={self.total_attempts}, '
                f'correct={self.total_correct}, recent={self.recent_bits:#x})')
