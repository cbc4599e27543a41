"""Built-in challenges and the pipelines that turn provider output into rounds."""

import logging
import random

from .config import NO_HINT_MESSAGE
from .exceptions import CollaboratorError, ValidationError
from .models import Challenge
from .validator import ChallengeValidator

logger = logging.getLogger(__name__)

# Used whenever a generated challenge cannot be played
DEFAULT_CHALLENGE = {
    'word': 'GALAXY',
    'category': 'Space',
    'clue': 'A massive system of stars, gas, and dust.'
}

# Offline challenge pool, all within the default phrase limits
BUILTIN_CHALLENGES = [
    DEFAULT_CHALLENGE,
    {'word': 'NEUTRON STAR', 'category': 'Physics',
     'clue': 'What is left when a massive star collapses.'},
    {'word': 'PHOTOSYNTHESIS', 'category': 'Biology',
     'clue': 'How leaves turn light into sugar.'},
    {'word': 'THE WIZARD OF OZ', 'category': 'Movies',
     'clue': 'Follow the yellow brick road.'},
    {'word': 'KILIMANJARO', 'category': 'Geography',
     'clue': 'The roof of Africa.'},
    {'word': 'BREAK A LEG', 'category': 'Idioms',
     'clue': 'Said before a performance, not meant literally.'},
    {'word': 'SAXOPHONE', 'category': 'Music',
     'clue': 'A brass-looking woodwind.'},
    {'word': 'CROISSANT', 'category': 'Food',
     'clue': 'Flaky, buttery and crescent shaped.'},
    {'word': 'LIGHTHOUSE KEEPER', 'category': 'Occupations',
     'clue': 'Keeps the lamp burning by the sea.'},
    {'word': 'PYTHAGOREAN THEOREM', 'category': 'Mathematics',
     'clue': 'A squared plus B squared.'},
]


def get_random_challenge(rng: random.Random | None = None) -> dict:
    """Get a random built-in challenge."""
    return dict((rng or random).choice(BUILTIN_CHALLENGES))


def find_builtin_challenge(phrase: str) -> dict | None:
    """Look up a built-in challenge by its phrase."""
    for item in BUILTIN_CHALLENGES:
        if item['word'] == phrase:
            return dict(item)
    return None


def default_challenge() -> Challenge:
    return Challenge(
        DEFAULT_CHALLENGE['word'],
        DEFAULT_CHALLENGE['category'],
        DEFAULT_CHALLENGE['clue'],
        source='fallback'
    )


def human_challenge(raw_phrase: str, category: str = '', clue: str = '',
                    validator: ChallengeValidator | None = None) -> Challenge:
    """Build a challenge from text typed by a player. Raises ValidationError."""
    validator = validator or ChallengeValidator()
    phrase = validator.prepare(raw_phrase)
    return Challenge(phrase, category, clue, source='human')


def challenge_from_payload(payload, validator: ChallengeValidator | None = None) -> Challenge:
    """Build a challenge from a provider payload.

    The word goes through the same normalization and validation as typed
    input. Raises CollaboratorError for a malformed payload and
    ValidationError when the word cannot be played.
    """
    if not isinstance(payload, dict):
        raise CollaboratorError(f"Challenge payload is not an object: {type(payload).__name__}")
    word = payload.get('word')
    if not isinstance(word, str):
        raise CollaboratorError(f"Challenge payload has no usable 'word': {word!r}")

    category = payload.get('category')
    clue = payload.get('clue')
    validator = validator or ChallengeValidator()
    phrase = validator.prepare(word)
    return Challenge(
        phrase,
        category if isinstance(category, str) else '',
        clue if isinstance(clue, str) else '',
        source='generated'
    )


def generate_challenge(provider, validator: ChallengeValidator | None = None) -> Challenge:
    """Ask the provider for a challenge, falling back to the default one."""
    try:
        payload = provider.generate_challenge()
        return challenge_from_payload(payload, validator)
    except CollaboratorError as e:
        logger.warning(f"Challenge generation failed, using default: {e}")
    except ValidationError as e:
        logger.warning(f"Generated challenge rejected ({e.code}), using default: {e.message}")
    return default_challenge()


def request_hint(provider, hangman_round) -> str:
    """Ask the provider for a hint on the round's current state."""
    try:
        hint = provider.get_hint(hangman_round.phrase, list(hangman_round.attempted))
    except CollaboratorError as e:
        logger.warning(f"Hint generation failed: {e}")
        return NO_HINT_MESSAGE
    if not hint or not hint.strip():
        return NO_HINT_MESSAGE
    return hint.strip()
