"""Error types raised by the hangman core."""


class ValidationError(ValueError):
    """A candidate phrase cannot be played."""

    code = 'invalid'

    def __init__(self, message: str, limit: int | None = None):
        super().__init__(message)
        self.message = message
        self.limit = limit

    def to_dict(self) -> dict:
        return {'error': self.code, 'message': self.message, 'limit': self.limit}


class EmptyPhraseError(ValidationError):
    code = 'empty'

    def __init__(self):
        super().__init__("The secret phrase must contain at least one letter.")


class WordTooLongError(ValidationError):
    code = 'word_too_long'

    def __init__(self, limit: int):
        super().__init__(f"One word exceeds {limit} letters!", limit=limit)


class PhraseTooLongError(ValidationError):
    code = 'too_long'

    def __init__(self, limit: int):
        super().__init__(f"The phrase exceeds {limit} characters!", limit=limit)


class CollaboratorError(Exception):
    """An external provider failed or returned something unusable."""
