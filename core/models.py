"""Domain models for hangman application."""

from enum import Enum

from .config import ALPHABET, MAX_MISTAKES


class RoundOutcome(str, Enum):
    """Outcome of a round, derived from the phrase and the attempted letters."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class Challenge:
    """A secret phrase with its optional category and clue."""

    def __init__(self, phrase: str, category: str = '', clue: str = '', source: str = 'human'):
        self.phrase = phrase
        self.category = category or ''
        self.clue = clue or ''
        self.source = source

    def to_dict(self) -> dict:
        return {
            'phrase': self.phrase,
            'category': self.category,
            'clue': self.clue,
            'source': self.source
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Challenge':
        return cls(
            data['phrase'],
            data.get('category', ''),
            data.get('clue', ''),
            data.get('source', 'human')
        )

    def __repr__(self) -> str:
        return f"Challenge({self.phrase!r}, category={self.category!r}, source={self.source!r})"


class HangmanRound:
    """One playthrough of a validated phrase.

    The only mutable state is the list of attempted letters. Correct and
    incorrect letters, the mistake count and the outcome are recomputed from
    it on every call.
    """

    def __init__(self, challenge: Challenge | str, max_mistakes: int = MAX_MISTAKES):
        if isinstance(challenge, str):
            challenge = Challenge(challenge)
        self.challenge = challenge
        self.max_mistakes = max_mistakes
        self.attempted = []

    @property
    def phrase(self) -> str:
        return self.challenge.phrase

    @property
    def phrase_letters(self) -> set[str]:
        return {c for c in self.phrase if c != ' '}

    def attempt_letter(self, letter: str) -> bool:
        """Record a guess. Returns True if the letter was recorded.

        Anything that is not a single uppercase A-Z letter, a repeated letter
        and any guess after the round has ended are ignored.
        """
        if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
            return False
        if letter in self.attempted:
            return False
        if self.is_over:
            return False
        self.attempted.append(letter)
        return True

    def correct_letters(self) -> list[str]:
        """Attempted letters present in the phrase, in guess order."""
        letters = self.phrase_letters
        return [l for l in self.attempted if l in letters]

    def incorrect_letters(self) -> list[str]:
        """Attempted letters absent from the phrase, in guess order."""
        letters = self.phrase_letters
        return [l for l in self.attempted if l not in letters]

    def mistake_count(self) -> int:
        return len(self.incorrect_letters())

    def mistakes_remaining(self) -> int:
        return max(self.max_mistakes - self.mistake_count(), 0)

    def outcome(self) -> RoundOutcome:
        # Won is checked first so a completing guess always wins
        letters = self.phrase_letters
        if letters and letters.issubset(self.attempted):
            return RoundOutcome.WON
        if self.mistake_count() >= self.max_mistakes:
            return RoundOutcome.LOST
        return RoundOutcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self.outcome() is RoundOutcome.WON

    @property
    def is_lost(self) -> bool:
        return self.outcome() is RoundOutcome.LOST

    @property
    def is_over(self) -> bool:
        return self.outcome() is not RoundOutcome.IN_PROGRESS

    def revealed_display(self) -> list[tuple[int, int, str | None]]:
        """Per-letter display as (word_index, char_index, char or None).

        A character is shown once it has been attempted, and every character
        is shown after a loss. Spaces only separate words and are never blank.
        """
        reveal_all = self.is_lost
        display = []
        for word_index, word in enumerate(self.phrase.split(' ')):
            for char_index, char in enumerate(word):
                shown = char if reveal_all or char in self.attempted else None
                display.append((word_index, char_index, shown))
        return display

    def snapshot(self) -> 'HangmanRound':
        """Copy of the round that later guesses will not affect."""
        copy = HangmanRound(self.challenge, self.max_mistakes)
        copy.attempted = list(self.attempted)
        return copy

    def masked(self, blank: str = '_') -> str:
        """Render the display as text, e.g. 'C _ T   _ O _'."""
        words = {}
        for word_index, _, shown in self.revealed_display():
            words.setdefault(word_index, []).append(shown or blank)
        return '   '.join(' '.join(chars) for chars in words.values())

    def to_dict(self, reveal: bool = False) -> dict:
        outcome = self.outcome()
        return {
            'outcome': outcome.value,
            'category': self.challenge.category,
            'clue': self.challenge.clue,
            'source': self.challenge.source,
            'attempted': list(self.attempted),
            'correct_letters': self.correct_letters(),
            'incorrect_letters': self.incorrect_letters(),
            'mistake_count': self.mistake_count(),
            'max_mistakes': self.max_mistakes,
            'word_lengths': [len(w) for w in self.phrase.split(' ')],
            'display': [list(entry) for entry in self.revealed_display()],
            'masked': self.masked(),
            'phrase': self.phrase if reveal or outcome is not RoundOutcome.IN_PROGRESS else None
        }
