"""REST API client for hangman server."""

import requests


class HangmanAPIClient:
    """Client for communicating with the hangman REST API."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}")
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data or {})
        response.raise_for_status()
        return response.json()

    def _delete(self, endpoint: str) -> dict:
        """Make a DELETE request."""
        response = self.session.delete(f"{self.base_url}{endpoint}")
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        return self._get("/")

    def get_config(self) -> dict:
        """Get the server's phrase and mistake limits."""
        return self._get("/api/config")

    def create_round(self, phrase: str, category: str = "", clue: str = "") -> dict:
        """Start a round from a typed phrase."""
        return self._post("/api/rounds", {
            'phrase': phrase,
            'category': category,
            'clue': clue
        })

    def generate_round(self) -> dict:
        """Start a round from a generated challenge."""
        return self._post("/api/rounds/generate")

    def get_round(self, round_id: str) -> dict:
        """Get the current state of a round."""
        return self._get(f"/api/rounds/{round_id}")

    def guess(self, round_id: str, letter: str) -> dict:
        """Attempt a letter."""
        return self._post(f"/api/rounds/{round_id}/guess", {'letter': letter})

    def get_hint(self, round_id: str) -> dict:
        """Get a hint for the round."""
        return self._post(f"/api/rounds/{round_id}/hint")

    def abandon_round(self, round_id: str) -> dict:
        """Abandon a round."""
        return self._delete(f"/api/rounds/{round_id}")
