from .models import Challenge, HangmanRound, RoundOutcome
from .interfaces import AIProvider
from .validator import ChallengeValidator, normalize, validate
from .exceptions import (
    ValidationError, EmptyPhraseError, WordTooLongError, PhraseTooLongError,
    CollaboratorError
)
from .challenges import (
    DEFAULT_CHALLENGE, BUILTIN_CHALLENGES,
    default_challenge, human_challenge, challenge_from_payload,
    generate_challenge, request_hint
)
from .config import (
    MAX_WORD_LENGTH, MAX_TOTAL_LENGTH, MAX_MISTAKES, ALPHABET,
    DEFAULT_MODEL, NO_HINT_MESSAGE
)

__all__ = [
    'Challenge', 'HangmanRound', 'RoundOutcome',
    'AIProvider',
    'ChallengeValidator', 'normalize', 'validate',
    'ValidationError', 'EmptyPhraseError', 'WordTooLongError', 'PhraseTooLongError',
    'CollaboratorError',
    'DEFAULT_CHALLENGE', 'BUILTIN_CHALLENGES',
    'default_challenge', 'human_challenge', 'challenge_from_payload',
    'generate_challenge', 'request_hint',
    'MAX_WORD_LENGTH', 'MAX_TOTAL_LENGTH', 'MAX_MISTAKES', 'ALPHABET',
    'DEFAULT_MODEL', 'NO_HINT_MESSAGE'
]
