#!/usr/bin/env python3

import argparse
import logging
import sys

from flashdrill import Deck, DeckLoadError
from flashdrill.config import load_config
from flashdrill.quiz import QuizSession, run_quiz

def main():
    parser = argparse.ArgumentParser(description="Drill flashcards from a two-column CSV file")
    parser.add_argument("csv_path", help="CSV file with one card per line: front,back")
    parser.add_argument("--config", help="JSON file with quiz and match policy settings")
    parser.add_argument("--shuffle", action="store_true", help="Shuffle the cards before starting")
    parser.add_argument("--flip", action="store_true", help="Ask the back of each card instead of the front")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    try:
        config = load_config(args.config)
        deck = Deck.from_csv(args.csv_path)
    except (OSError, ValueError) as e:
        print(f"Could not start quiz: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(deck)} cards")
    if args.shuffle:
        deck.shuffle_selection()
    if args.flip:
        deck.flip()

    run_quiz(QuizSession(deck, config))

if __name__ == "__main__":
    main()
