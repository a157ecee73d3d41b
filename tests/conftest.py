import os
import sys

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashdrill import Deck


@pytest.fixture
def three_card_deck():
    return Deck.from_pairs([
        ('bonjour', 'hello'),
        ('merci', 'thank you'),
        ('café', 'coffee'),
    ])


@pytest.fixture
def scripted_input():
    """Build an input function that replays lines and then signals EOF"""
    def build(lines):
        remaining = list(lines)

        def fake_input(prompt=''):
            if not remaining:
                raise EOFError
            return remaining.pop(0)
        return fake_input
    return build
