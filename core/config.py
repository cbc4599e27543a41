"""Configuration constants for hangman application."""

import string

# Phrase limits
MAX_WORD_LENGTH = 18     # Longest single word allowed in a phrase
MAX_TOTAL_LENGTH = 48    # Longest phrase allowed, spaces included

# Round rules
MAX_MISTAKES = 6         # Wrong letters before the round is lost

ALPHABET = string.ascii_uppercase

# AI provider
DEFAULT_MODEL = 'gemini-2.0-flash'
NO_HINT_MESSAGE = "No hint available right now. Keep thinking!"

# Server round retention
FINISHED_ROUND_LIMIT = 20   # Finished rounds kept for late reads before eviction
MAX_ROUNDS = 1000           # Hard cap on rounds held in memory, oldest evicted first
