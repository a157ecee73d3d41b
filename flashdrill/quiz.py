"""
Drilling session for a deck of flashcards, plus a simple terminal front end.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from . import Deck
from .config import QuizConfig

logger = logging.getLogger(__name__)

MENU_HELP = """Menu
r: Return to quiz.
a: Select all cards, in load order.
s: Shuffle the selected cards.
w [n]: Keep only the n cards answered wrong most often.
f: Flip the cards (answer with the front side).
h: Show this help.
q: Quit."""


class SessionState(Enum):
    QUIZZING = 'quizzing'
    AT_MENU = 'menu'
    QUIT = 'quit'


@dataclass
class TurnView:
    """Everything the front end needs to show the current card"""
    prompt: str
    card_history: str
    aggregate_history: str
    recent_percent: float
    position: Tuple[int, int]


@dataclass
class AnswerOutcome:
    state: SessionState
    correct: Optional[bool] = None   # None when the input was a command, not an answer
    reference: Optional[str] = None
    similarity: Optional[float] = None
    close: bool = False


@dataclass
class MenuOutcome:
    state: SessionState
    recognized: bool
    message: str = ''


@dataclass
class SessionReport:
    total_attempts: int
    total_correct: int
    percent_correct: Optional[float]   # None until something was attempted


class QuizSession:
    """State machine for one drilling session.

    QUIZZING: show the current card and judge answers. A wrong answer keeps
    the same card until it is answered correctly. A blank line goes to the
    menu and the quit token ends the session.
    AT_MENU: reselect cards, flip, resume or quit.
    QUIT: terminal.
    """

    def __init__(self, deck: Deck, config: Optional[QuizConfig] = None):
        self.deck = deck
        self.config = config or QuizConfig()
        self.state = SessionState.QUIZZING

    @property
    def policy(self):
        return self.config.policy

    def _require(self, state: SessionState):
        if self.state != state:
            raise RuntimeError(f"Session is {self.state.value}, expected {state.value}")

    def current_turn(self) -> TurnView:
        self._require(SessionState.QUIZZING)
        history = self.deck.current().history
        return TurnView(
            prompt=self.deck.prompt(),
            card_history=history.render_history(self.config.correct_symbol,
                                                self.config.incorrect_symbol),
            aggregate_history=self.deck.aggregate.render_history(self.config.correct_symbol,
                                                                 self.config.incorrect_symbol),
            recent_percent=history.recent_percent(),
            position=self.deck.position()
        )

    def submit_answer(self, text: str) -> AnswerOutcome:
        """Handle one line of input while quizzing"""
        self._require(SessionState.QUIZZING)

        if not text.strip():
            self.state = SessionState.AT_MENU
            return AnswerOutcome(self.state)
        if text.strip() == self.config.quit_token:
            self.state = SessionState.QUIT
            return AnswerOutcome(self.state)

        reference = self.deck.answer()
        correct = self.policy.matches(reference, text)
        self.deck.record_attempt(correct)
        logger.debug("Card %d answered %s", self.deck.current_index(),
                     'correctly' if correct else 'incorrectly')

        if correct:
            self.deck.advance()
            return AnswerOutcome(self.state, correct=True, reference=reference)

        similarity = self.policy.similarity(reference, text)
        return AnswerOutcome(self.state, correct=False, reference=reference,
                             similarity=similarity,
                             close=similarity >= self.config.close_threshold)

    def menu_command(self, text: str) -> MenuOutcome:
        """Handle one line of input at the menu"""
        self._require(SessionState.AT_MENU)
        parts = text.strip().split()
        if not parts:
            return MenuOutcome(self.state, False, "Enter a command, or type h for help")

        cmd = parts[0].lower()
        args = parts[1:]

        if cmd == 'q' and not args:
            self.state = SessionState.QUIT
            return MenuOutcome(self.state, True)
        elif cmd == 'r' and not args:
            self.state = SessionState.QUIZZING
            return MenuOutcome(self.state, True)
        elif cmd == 'h' and not args:
            return MenuOutcome(self.state, True, MENU_HELP)
        elif cmd == 'a' and not args:
            self.deck.select_all()
            return MenuOutcome(self.state, True, f"Selected all {len(self.deck)} cards")
        elif cmd == 's' and not args:
            self.deck.shuffle_selection()
            return MenuOutcome(self.state, True, f"Shuffled {len(self.deck.selection)} cards")
        elif cmd == 'f' and not args:
            self.deck.flip()
            side = 'back' if self.deck.flipped else 'front'
            return MenuOutcome(self.state, True, f"Now asking the {side} of each card")
        elif cmd == 'w' and len(args) <= 1:
            n = self.config.hardest_count
            if args:
                try:
                    n = int(args[0])
                except ValueError:
                    return MenuOutcome(self.state, False, f"Not a number: {args[0]}")
            if n < 1:
                return MenuOutcome(self.state, False, "Select at least one card")
            self.deck.select_hardest(n)
            return MenuOutcome(self.state, True,
                               f"Selected the {len(self.deck.selection)} hardest cards")

        return MenuOutcome(self.state, False, f"Unknown command {text.strip()}")

    def report(self) -> SessionReport:
        aggregate = self.deck.aggregate
        percent = None
        if aggregate.total_attempts > 0:
            percent = aggregate.total_correct / aggregate.total_attempts * 100.0
        return SessionReport(aggregate.total_attempts, aggregate.total_correct, percent)


def _print_turn(turn: TurnView, output_func: Callable[[str], None]):
    current, total = turn.position
    output_func('')
    output_func(f"-{current:->3}/{total:-<3}--{turn.card_history:-<64}-{turn.recent_percent:->5.1f}%-")
    output_func(f"|  {turn.prompt:76}  |")
    output_func(f"--{turn.aggregate_history:->78}--")
    output_func('')


def _print_report(session: QuizSession, output_func: Callable[[str], None],
                  hardest: int = 5):
    report = session.report()
    output_func(f"Attempts: {report.total_attempts:5}")
    if report.percent_correct is None:
        output_func(f"Correct:  {report.total_correct:5}")
    else:
        output_func(f"Correct:  {report.total_correct:5}, {report.percent_correct:.0f}%")

    summary = session.deck.summary()
    missed = summary[summary['wrong'] > 0].sort_values('wrong', ascending=False).head(hardest)
    if not missed.empty:
        output_func("Most missed:")
        for _, row in missed.iterrows():
            output_func(f"  {row['front']} -> {row['back']} ({row['wrong']} wrong)")
    output_func("Goodbye!")


def run_quiz(session: QuizSession,
             input_func: Callable[[str], str] = input,
             output_func: Callable[[str], None] = print) -> SessionReport:
    """Drive a session from line-based input until the user quits"""
    quit_token = session.config.quit_token

    try:
        while session.state != SessionState.QUIT:
            if session.state == SessionState.QUIZZING:
                _print_turn(session.current_turn(), output_func)
                while session.state == SessionState.QUIZZING:
                    answer = input_func(
                        f"(Type answer, press enter for menu, or type {quit_token} to quit) ")
                    outcome = session.submit_answer(answer)
                    if outcome.correct is None:
                        break
                    if outcome.correct:
                        output_func(f"{session.config.correct_symbol} Correct!")
                        output_func('')
                        break
                    output_func(f"{session.config.incorrect_symbol} Correct answer: {outcome.reference}")
                    if outcome.close:
                        output_func(f"Very close! Similarity: {outcome.similarity:.2f}")
                    output_func('')
            else:
                output_func(MENU_HELP)
                while session.state == SessionState.AT_MENU:
                    outcome = session.menu_command(input_func("(Enter a command, or type h for help) "))
                    if outcome.message:
                        output_func(outcome.message)
    except EOFError:
        session.state = SessionState.QUIT

    _print_report(session, output_func)
    return session.report()
