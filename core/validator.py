"""Phrase normalization and validation applied when a round is set up."""

import re

from .config import MAX_WORD_LENGTH, MAX_TOTAL_LENGTH
from .exceptions import EmptyPhraseError, WordTooLongError, PhraseTooLongError

_DISALLOWED = re.compile(r'[^A-Z ]')


def normalize(raw: str | None) -> str:
    """Uppercase the input and drop everything except A-Z and spaces."""
    return _DISALLOWED.sub('', (raw or '').upper())


def validate(candidate: str, max_word_length: int = MAX_WORD_LENGTH,
             max_total_length: int = MAX_TOTAL_LENGTH) -> str:
    """Check a candidate phrase and return it ready to play.

    Raises WordTooLongError, EmptyPhraseError or PhraseTooLongError, checked
    in that order, so a blank candidate always reports empty. Empty words
    produced by repeated spaces are ignored. The returned phrase has its
    outer spaces stripped, so validating it again gives the same result.
    """
    phrase = normalize(candidate)

    for word in phrase.split(' '):
        if len(word) > max_word_length:
            raise WordTooLongError(max_word_length)

    if not phrase.strip():
        raise EmptyPhraseError()

    if len(phrase) > max_total_length:
        raise PhraseTooLongError(max_total_length)

    return phrase.strip()


class ChallengeValidator:
    """Validator bound to a pair of length limits."""

    def __init__(self, max_word_length: int = MAX_WORD_LENGTH,
                 max_total_length: int = MAX_TOTAL_LENGTH):
        self.max_word_length = max_word_length
        self.max_total_length = max_total_length

    def normalize(self, raw: str | None) -> str:
        return normalize(raw)

    def validate(self, candidate: str) -> str:
        return validate(candidate, self.max_word_length, self.max_total_length)

    def prepare(self, raw: str | None) -> str:
        """Normalize raw setup text and validate it."""
        return self.validate(self.normalize(raw))
