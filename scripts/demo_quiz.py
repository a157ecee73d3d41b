#!/usr/bin/env python3

from flashdrill import Deck
from flashdrill.config import DEFAULT_POLICY, STRICT_POLICY

def main():
    deck = Deck.from_pairs([
        ("coffee (French)", "café"),
        ("apostrophe example", "don't"),
        ("greeting", "hello world"),
    ])
    print(f"Loaded {len(deck)} demo cards\n")

    answers = ["CAFE", "dont", "  hello   world  ", "helo world"]
    for card, answer in zip(deck.cards + deck.cards[-1:], answers):
        default = DEFAULT_POLICY.matches(card.back, answer)
        strict = STRICT_POLICY.matches(card.back, answer)
        similarity = DEFAULT_POLICY.similarity(card.back, answer)
        print(f"{card.back!r} vs {answer!r}: default={default} strict={strict} similarity={similarity:.2f}")

    print("\nTo start an actual quiz, run:")
    print("  python scripts/start_quiz.py cards.csv")

if __name__ == "__main__":
    main()
