from typing import Optional
from dataclasses import dataclass, field, fields
from pathlib import Path
import json

from .normalization import MatchPolicy


# Predefined match policies
DEFAULT_POLICY = MatchPolicy()

STRICT_POLICY = MatchPolicy(
    normalize_whitespace=False,
    ignore_case=False,
    ignore_accents=False,
    ignore_nonalphabetic=False
)


@dataclass
class QuizConfig:
    """Configuration for a drilling session"""
    policy: MatchPolicy = field(default_factory=MatchPolicy)
    correct_symbol: str = '✔'
    incorrect_symbol: str = '✗'
    quit_token: str = 'q'
    hardest_count: int = 10   # Default n for the "hardest n cards" menu command
    close_threshold: float = 0.8  # Similarity above which a wrong answer is "close"

    def __post_init__(self):
        if not isinstance(self.policy, MatchPolicy):
            raise ValueError(f"policy must be a MatchPolicy, got {type(self.policy).__name__}")
        for name in ('correct_symbol', 'incorrect_symbol', 'quit_token'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-blank string, got {value!r}")
        # Input is stripped before it is compared with the token
        self.quit_token = self.quit_token.strip()
        if isinstance(self.hardest_count, bool) or not isinstance(self.hardest_count, int):
            raise ValueError(f"hardest_count must be an integer, got {self.hardest_count!r}")
        if self.hardest_count < 1:
            raise ValueError(f"hardest_count must be at least 1, got {self.hardest_count}")
        if isinstance(self.close_threshold, bool) or not isinstance(self.close_threshold, (int, float)):
            raise ValueError(f"close_threshold must be a number, got {self.close_threshold!r}")

    def to_dict(self) -> dict:
        return {
            'policy': self.policy.to_dict(),
            'correct_symbol': self.correct_symbol,
            'incorrect_symbol': self.incorrect_symbol,
            'quit_token': self.quit_token,
            'hardest_count': self.hardest_count,
            'close_threshold': self.close_threshold
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'QuizConfig':
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(sorted(unknown))}")

        data = dict(data)
        if 'policy' in data:
            data['policy'] = MatchPolicy.from_dict(data['policy'])
        return cls(**data)


def load_config(filepath: Optional[str] = None) -> QuizConfig:
    """Load a QuizConfig from a JSON file, or the defaults if no path is given"""
    if filepath is None:
        return QuizConfig()
    with open(Path(filepath), 'r', encoding='utf-8') as f:
        return QuizConfig.from_dict(json.load(f))


def save_config(config: QuizConfig, filepath: str):
    with open(Path(filepath), 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
