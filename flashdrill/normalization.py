"""
Answer normalization and matching for typed flashcard answers.
"""

from dataclasses import dataclass, asdict, fields
from difflib import SequenceMatcher

from unidecode import unidecode


def collapse_whitespace(text: str) -> str:
    """Split on any whitespace run and rejoin with single spaces."""
    return ' '.join(text.split())


def strip_accents(text: str) -> str:
    """Transliterate to the nearest plain-ASCII form (café -> cafe, ß -> ss)."""
    return unidecode(text)


def remove_nonalphabetic(text: str) -> str:
    return ''.join(ch for ch in text if ch.isalpha())


@dataclass(frozen=True)
class MatchPolicy:
    """Decides whether a typed answer is equivalent to the reference answer.

    Both strings go through the same pipeline and are then compared exactly.
    Enabled steps always run in this order:
    1. trim surrounding whitespace
    2. collapse internal whitespace runs to single spaces
    3. lowercase
    4. strip accents (ASCII transliteration)
    5. drop everything that is not a letter

    Under the default policy an answer made only of punctuation normalizes
    to the empty string, so it matches any other punctuation-only reference.

    Normalizing twice gives the same result for text in scripts that have
    case. Transliteration runs after lowercasing, so scripts without case can
    come out mixed-case: 北京 normalizes to "BeiJing", and normalizing that
    again gives "beijing".
    """
    trim_whitespace: bool = True
    normalize_whitespace: bool = True
    ignore_case: bool = True
    ignore_accents: bool = True
    ignore_nonalphabetic: bool = True

    def normalize(self, text: str) -> str:
        if self.trim_whitespace:
            text = text.strip()
        if self.normalize_whitespace:
            text = collapse_whitespace(text)
        if self.ignore_case:
            text = text.lower()
        if self.ignore_accents:
            text = strip_accents(text)
        if self.ignore_nonalphabetic:
            text = remove_nonalphabetic(text)
        return text

    def matches(self, reference: str, candidate: str) -> bool:
        return self.normalize(reference) == self.normalize(candidate)

    def similarity(self, reference: str, candidate: str) -> float:
        """
        Similarity ratio (0-1) of the normalized forms.
        Only used to hint that a wrong answer was close; never decides a match.
        """
        return SequenceMatcher(None,
                               self.normalize(reference),
                               self.normalize(candidate)).ratio()

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'MatchPolicy':
        if not isinstance(data, dict):
            raise ValueError(f"Match policy must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown match policy option(s): {', '.join(sorted(unknown))}")
        for name, value in data.items():
            if not isinstance(value, bool):
                raise ValueError(f"Match policy option {name} must be true or false, got {value!r}")
        return cls(**data)
