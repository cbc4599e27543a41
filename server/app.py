"""FastAPI server for hangman application."""

import asyncio
import json
import logging
import os
import uuid
from collections import deque
from pathlib import Path

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from core.models import HangmanRound
from core.interfaces import AIProvider
from core.validator import ChallengeValidator
from core.exceptions import ValidationError
from core.challenges import human_challenge, generate_challenge, request_hint
from core.config import (
    MAX_WORD_LENGTH, MAX_TOTAL_LENGTH, MAX_MISTAKES, ALPHABET,
    DEFAULT_MODEL, NO_HINT_MESSAGE, FINISHED_ROUND_LIMIT, MAX_ROUNDS
)

from server.gemini_provider import GeminiProvider
from server.offline_provider import OfflineProvider

CONFIG_FILE = Path.home() / '.config' / 'hangman' / 'config.json'


# Pydantic models for API
class CreateRoundRequest(BaseModel):
    phrase: str
    category: str = ""
    clue: str = ""


class GuessRequest(BaseModel):
    letter: str


class RoundResponse(BaseModel):
    round_id: str
    outcome: str
    category: str
    clue: str
    source: str
    attempted: list[str]
    correct_letters: list[str]
    incorrect_letters: list[str]
    mistake_count: int
    max_mistakes: int
    word_lengths: list[int]
    display: list[list]
    masked: str
    phrase: Optional[str]
    accepted: Optional[bool] = None


class HintResponse(BaseModel):
    hint: str
    available: bool


class ConfigResponse(BaseModel):
    max_word_length: int
    max_total_length: int
    max_mistakes: int
    alphabet: str
    provider: str


# Global state (in production, use proper DI)
ai_provider: AIProvider = None
validator = ChallengeValidator(MAX_WORD_LENGTH, MAX_TOTAL_LENGTH)
rounds: dict[str, HangmanRound] = {}
finished_rounds: deque[str] = deque()  # ids of won or lost rounds, oldest first


def new_round_id() -> str:
    return str(uuid.uuid4())[:8]


def log_event(event: str, round_id: str, **data) -> None:
    """Log a round lifecycle event."""
    details = ' '.join(f"{k}={v!r}" for k, v in data.items())
    logger.info(f"[{round_id}] {event} {details}".rstrip())


def load_api_key() -> str | None:
    """Get API key from env or config file."""
    api_key = os.environ.get('GEMINI_API_KEY')
    if not api_key and CONFIG_FILE.exists():
        try:
            config = json.loads(CONFIG_FILE.read_text())
            api_key = config.get('gemini_api_key')
        except ValueError as e:
            logger.warning(f"Ignoring unreadable config file {CONFIG_FILE}: {e}")
    return api_key


def get_round(round_id: str) -> HangmanRound:
    """Get a live round or raise 404."""
    hangman_round = rounds.get(round_id)
    if hangman_round is None:
        raise HTTPException(status_code=404, detail=f"Round not found: {round_id}")
    return hangman_round


def round_response(round_id: str, hangman_round: HangmanRound, accepted: bool | None = None) -> RoundResponse:
    return RoundResponse(round_id=round_id, accepted=accepted, **hangman_round.to_dict())


def start_round(hangman_round: HangmanRound) -> str:
    round_id = new_round_id()
    rounds[round_id] = hangman_round
    log_event('round.start', round_id,
              source=hangman_round.challenge.source,
              length=len(hangman_round.phrase))

    # Rounds left unfinished by their clients; dicts keep insertion order
    while len(rounds) > MAX_ROUNDS:
        oldest_id = next(iter(rounds))
        del rounds[oldest_id]
        log_event('round.evict', oldest_id, reason='capacity')
    return round_id


def retire_round(round_id: str) -> None:
    """Mark a round as finished, evicting the oldest finished rounds past the limit."""
    finished_rounds.append(round_id)
    while len(finished_rounds) > FINISHED_ROUND_LIMIT:
        oldest_id = finished_rounds.popleft()
        if rounds.pop(oldest_id, None) is not None:
            log_event('round.evict', oldest_id, reason='finished')


app = FastAPI(title="Hangman API", description="Pass-and-play hangman with generated challenges")


@app.on_event("startup")
async def startup():
    """Initialize the AI provider on startup."""
    global ai_provider

    api_key = load_api_key()
    if api_key:
        model_name = os.environ.get('HANGMAN_MODEL', DEFAULT_MODEL)
        ai_provider = GeminiProvider(api_key, model_name=model_name)
        print(f"AI provider initialized: {model_name}")
    else:
        ai_provider = OfflineProvider()
        logger.warning(
            f"GEMINI_API_KEY not set and no key in {CONFIG_FILE}; using built-in challenges"
        )


@app.get("/")
async def root():
    """Service status."""
    return {"service": "hangman", "status": "ok", "rounds": len(rounds)}


@app.get("/api/config", response_model=ConfigResponse)
async def get_config():
    """Game limits used by the server."""
    return ConfigResponse(
        max_word_length=validator.max_word_length,
        max_total_length=validator.max_total_length,
        max_mistakes=MAX_MISTAKES,
        alphabet=ALPHABET,
        provider=getattr(ai_provider, 'model_name', 'none')
    )


@app.post("/api/rounds", response_model=RoundResponse)
async def create_round(request: CreateRoundRequest):
    """Start a round from a phrase typed by a player."""
    try:
        challenge = human_challenge(request.phrase, request.category, request.clue, validator)
    except ValidationError as e:
        logger.info(f"Rejected challenge ({e.code}): {e.message}")
        raise HTTPException(status_code=400, detail=e.to_dict())

    hangman_round = HangmanRound(challenge, MAX_MISTAKES)
    round_id = start_round(hangman_round)
    return round_response(round_id, hangman_round)


@app.post("/api/rounds/generate", response_model=RoundResponse)
async def create_generated_round():
    """Start a round from a generated challenge."""
    if ai_provider is None:
        raise HTTPException(status_code=503, detail="AI provider not initialized")

    challenge = await asyncio.to_thread(generate_challenge, ai_provider, validator)
    hangman_round = HangmanRound(challenge, MAX_MISTAKES)
    round_id = start_round(hangman_round)
    return round_response(round_id, hangman_round)


@app.get("/api/rounds/{round_id}", response_model=RoundResponse)
async def get_round_state(round_id: str):
    """Current state of a round."""
    return round_response(round_id, get_round(round_id))


@app.post("/api/rounds/{round_id}/guess", response_model=RoundResponse)
async def guess_letter(round_id: str, request: GuessRequest):
    """Attempt a letter."""
    hangman_round = get_round(round_id)
    letter = request.letter.strip().upper()
    accepted = hangman_round.attempt_letter(letter)

    if accepted:
        log_event('round.guess', round_id, letter=letter,
                  correct=letter in hangman_round.phrase_letters)
        if hangman_round.is_over:
            log_event('round.end', round_id,
                      outcome=hangman_round.outcome().value,
                      mistakes=hangman_round.mistake_count())
            retire_round(round_id)

    return round_response(round_id, hangman_round, accepted)


@app.post("/api/rounds/{round_id}/hint", response_model=HintResponse)
async def get_hint(round_id: str):
    """Get a hint for the current state of a round."""
    hangman_round = get_round(round_id)
    if ai_provider is None:
        return HintResponse(hint=NO_HINT_MESSAGE, available=False)

    hint = await asyncio.to_thread(request_hint, ai_provider, hangman_round.snapshot())
    available = hint != NO_HINT_MESSAGE
    log_event('hint.request', round_id, available=available)
    return HintResponse(hint=hint, available=available)


@app.delete("/api/rounds/{round_id}")
async def abandon_round(round_id: str):
    """Abandon a round."""
    hangman_round = get_round(round_id)
    del rounds[round_id]
    log_event('round.abandon', round_id, outcome=hangman_round.outcome().value)
    return {"success": True, "round_id": round_id}


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
