import heapq
import logging
import random
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from .history import AttemptHistory

logger = logging.getLogger(__name__)


class DeckLoadError(ValueError):
    """Raised when card data cannot be turned into a deck"""


class Card:

    def __init__(self, front: str, back: str):
        self._front = front
        self._back = back
        self.history = AttemptHistory()

    @property
    def front(self) -> str:
        return self._front

    @property
    def back(self) -> str:
        return self._back

    def to_dict(self) -> dict:
        return {'front': self.front, 'back': self.back, **self.history.to_dict()}

    def __str__(self):
        return f'{self.front} -> {self.back}'

    def __repr__(self):
        return f'Card({self.front!r}, {self.back!r})'


class Deck:
    """All loaded cards, the selection being drilled and a cursor into it.

    The selection holds indices into ``cards``. Cards are never added or
    removed after load; only the selection is replaced.
    """

    def __init__(self, cards: List[Card], rng: Optional[random.Random] = None):
        if not cards:
            raise DeckLoadError("Cannot build a deck from zero cards")
        self.cards = list(cards)
        self.selection: List[int] = []
        self.cursor = 0
        self.aggregate = AttemptHistory()
        self.flipped = False
        self._rng = rng or random.Random()
        self.select_all()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]], **kwargs) -> 'Deck':
        cards = []
        for i, pair in enumerate(pairs):
            if len(pair) != 2:
                raise DeckLoadError(f"Record {i + 1} has {len(pair)} fields, expected 2")
            front, back = pair
            cards.append(Card(str(front), str(back)))
        return cls(cards, **kwargs)

    @classmethod
    def from_csv(cls, filepath: str, **kwargs) -> 'Deck':
        """Load a deck from a two-column UTF-8 CSV file with no header row.

        Every record needs a non-empty front and back. Only empty fields count
        as missing, so text like "NA" or "null" loads as-is.
        """
        try:
            df = pd.read_csv(filepath, header=None, dtype=str, encoding='utf-8',
                             keep_default_na=False, na_values=[''])
        except FileNotFoundError as e:
            raise DeckLoadError(f"Card file not found: {filepath}") from e
        except UnicodeDecodeError as e:
            raise DeckLoadError(f"Card file {filepath} is not valid UTF-8: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DeckLoadError(f"Card file is empty: {filepath}") from e
        except pd.errors.ParserError as e:
            raise DeckLoadError(f"Malformed card file {filepath}: {e}") from e

        if len(df.columns) != 2:
            raise DeckLoadError(
                f"Card file {filepath} has {len(df.columns)} columns, expected 2 (front, back)")

        missing = df.isna().any(axis=1)
        if missing.any():
            row = int(missing.idxmax()) + 1
            raise DeckLoadError(f"Record {row} in {filepath} has a missing or empty field")

        deck = cls.from_pairs(df.itertuples(index=False, name=None), **kwargs)
        logger.info("Loaded %d cards from %s", len(deck.cards), filepath)
        return deck

    # Selection

    def select_all(self):
        self.selection = list(range(len(self.cards)))
        self.cursor = 0

    def shuffle_selection(self):
        self._rng.shuffle(self.selection)
        self.cursor = 0

    def select_hardest(self, n: int):
        """
        Narrow the current selection to the n cards answered wrong most often.
        Ties are broken arbitrarily.
        """
        if n < 1:
            raise ValueError(f"Must select at least one card, got {n}")
        self.selection = heapq.nlargest(
            n, self.selection, key=lambda i: self.cards[i].history.wrong_attempts())
        self.cursor = 0
        logger.debug("Selected %d hardest cards: %s", len(self.selection), self.selection)

    def flip(self):
        """Swap which side is asked and which side is the answer"""
        self.flipped = not self.flipped

    # Cursor

    def current_index(self) -> int:
        if not self.selection:
            raise RuntimeError("No cards are selected")
        return self.selection[self.cursor]

    def current(self) -> Card:
        return self.cards[self.current_index()]

    def prompt(self) -> str:
        card = self.current()
        return card.back if self.flipped else card.front

    def answer(self) -> str:
        card = self.current()
        return card.front if self.flipped else card.back

    def position(self) -> Tuple[int, int]:
        """1-based position in the selection and the selection size"""
        return self.cursor + 1, len(self.selection)

    def advance(self):
        if not self.selection:
            raise RuntimeError("No cards are selected")
        self.cursor = (self.cursor + 1) % len(self.selection)

    def record_attempt(self, correct: bool):
        """Record an attempt on the current card and in the session aggregate"""
        card = self.current()
        card.history.record(correct)
        self.aggregate.record(correct)

    # Reporting

    def summary(self) -> pd.DataFrame:
        """Per-card statistics, one row per card in load order"""
        return pd.DataFrame(
            [card.to_dict() for card in self.cards],
            columns=['front', 'back', 'attempts', 'correct', 'wrong', 'recent_percent'])

    def __len__(self):
        return len(self.cards)
