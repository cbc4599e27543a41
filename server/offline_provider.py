"""Offline provider backed by the built-in challenge list."""

import random

from core.interfaces import AIProvider
from core.exceptions import CollaboratorError
from core.challenges import get_random_challenge, find_builtin_challenge


class OfflineProvider(AIProvider):
    """Provider that needs no network access or API key."""

    model_name = 'offline'

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def generate_challenge(self) -> dict:
        return get_random_challenge(self.rng)

    def get_hint(self, phrase: str, attempted: list) -> str:
        hidden = [c for c in phrase if c != ' ' and c not in attempted]
        if not hidden:
            raise CollaboratorError("Nothing left to hint at")

        known = find_builtin_challenge(phrase)
        if known:
            return f"Think {known['category'].lower()}: {known['clue']}"

        words = len(phrase.split())
        word_label = 'word' if words == 1 else 'words'
        letter_label = 'letter' if len(set(hidden)) == 1 else 'different letters'
        return f"{words} {word_label}, still {len(set(hidden))} {letter_label} to find."
