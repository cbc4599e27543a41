"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class AIProvider(ABC):
    """Abstract base class for the phrase and hint collaborators."""

    @abstractmethod
    def generate_challenge(self) -> dict:
        """Generate a challenge. Returns {word, category, clue}.
        Raises CollaboratorError on failure."""
        pass

    @abstractmethod
    def get_hint(self, phrase: str, attempted: list) -> str:
        """Get a hint for the phrase given the letters tried so far.
        Raises CollaboratorError on failure."""
        pass
