"""Gemini AI provider implementation."""

import json
import logging
import random
import time
import google.generativeai as genai

from core.interfaces import AIProvider
from core.exceptions import CollaboratorError
from core.config import DEFAULT_MODEL, MAX_WORD_LENGTH, MAX_TOTAL_LENGTH

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

THEMES = ["science", "movies", "geography", "history", "food", "music",
          "sports", "animals", "idioms", "literature", "technology", "mythology"]


class GeminiProvider(AIProvider):
    """Gemini AI provider implementation."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name)
        self.model_name = model_name
        self.stats = {'calls': 0, 'failures': 0, 'total_ms': 0}

    def _execute(self, prompt: str, json_mode: bool = False) -> tuple[str, int]:
        start_time = time.time()
        self.stats['calls'] += 1
        try:
            if json_mode:
                config = genai.GenerationConfig(response_mime_type="application/json")
                response = self.model.generate_content(prompt, generation_config=config)
            else:
                response = self.model.generate_content(prompt)
            text = response.text
        except Exception as e:
            self.stats['failures'] += 1
            raise CollaboratorError(f"Gemini request failed: {type(e).__name__}: {e}") from e
        ms = int((time.time() - start_time) * 1000)
        self.stats['total_ms'] += ms
        return (text, ms)

    def _extract_object(self, response: str) -> str:
        return response[response.find('{'):response.rfind('}')+1]

    def get_stats(self) -> dict:
        stats = dict(self.stats)
        stats['model'] = self.model_name
        stats['avg_ms'] = int(stats['total_ms'] / stats['calls']) if stats['calls'] else 0
        return stats

    def generate_challenge(self) -> dict:
        # Random theme and seed to keep consecutive challenges varied
        seed = int(time.time() * 1000) % 100000
        theme = random.choice(THEMES)

        prompt = f"""
            Challenge ID: {seed}

            Generate a word or short phrase for a hangman game, loosely themed around {theme}.

            CRITICAL rules:
            - No single word in the phrase may exceed {MAX_WORD_LENGTH} characters.
            - The total length of the entire phrase MUST be under {MAX_TOTAL_LENGTH} characters.
            - Use only the letters A-Z and spaces. No digits, accents or punctuation.

            Respond with a JSON object with exactly these keys:
            'word': the word or phrase to guess, uppercase
            'category': a broad category
            'clue': a subtle but helpful clue that does not contain the answer

            Return ONLY the JSON object, no other text.
        """
        response, ms = self._execute(prompt, json_mode=True)
        sanitized = self._extract_object(response)

        try:
            data = json.loads(sanitized)
        except ValueError as e:
            logger.error(f"Failed to parse challenge: {e}")
            logger.error(f"Raw response:\n{response}")

            if '{' not in response:
                logger.error("Diagnosis: No opening brace '{' found in response")
            elif '}' not in response:
                logger.error("Diagnosis: No closing brace '}' found in response")
            elif sanitized.count('{') != sanitized.count('}'):
                logger.error(f"Diagnosis: Mismatched braces - {{ count: {sanitized.count('{')}, }} count: {sanitized.count('}')}")
            else:
                logger.error("Diagnosis: Unknown parsing issue - possibly malformed JSON syntax")
            raise CollaboratorError(f"Malformed challenge response: {e}") from e

        required_keys = ['word', 'category', 'clue']
        missing_keys = [k for k in required_keys if k not in data]
        if missing_keys:
            logger.warning(f"AI response missing keys: {missing_keys}")
            logger.warning(f"Raw response:\n{response}")
        if not isinstance(data.get('word'), str):
            raise CollaboratorError(f"Challenge response has no usable 'word': {data.get('word')!r}")

        logger.info(f"Generated challenge in {ms}ms (theme: {theme})")
        return data

    def get_hint(self, phrase: str, attempted: list) -> str:
        prompt = f"""
            The player is playing Hangman. The secret phrase is "{phrase}".
            They have guessed: {', '.join(attempted) if attempted else 'nothing yet'}.

            Provide a witty and helpful hint in one or two sentences.
            Do NOT reveal any letters or the phrase itself.
        """
        response, ms = self._execute(prompt)
        hint = (response or '').strip()
        if not hint:
            logger.warning("Empty hint response")
            raise CollaboratorError("Empty hint response")
        return hint
