"""Console UI for hangman application."""

import requests

from core.validator import normalize
from cli.api_client import HangmanAPIClient


class ConsoleUI:
    """Console user interface for hangman application."""

    def __init__(self, client: HangmanAPIClient):
        self.client = client

    def print_round(self, state: dict):
        """Print the board for the current round."""
        print('\n' + '=' * 60)
        if state['category']:
            print(f"Category: {state['category']}")
        print(f"\n    {state['masked']}\n")
        if state['clue']:
            print(f'Clue: "{state["clue"]}"')
        print(self.format_gauge(state['mistake_count'], state['max_mistakes']))
        if state['attempted']:
            print(f"Correct: {' '.join(state['correct_letters']) or '-'}")
            print(f"Wrong:   {' '.join(state['incorrect_letters']) or '-'}")
        print('=' * 60)

    def format_gauge(self, mistakes: int, max_mistakes: int) -> str:
        """Format the mistake counter, e.g. 'Mistakes: 2/6 [##....]'."""
        bar = '#' * mistakes + '.' * max(max_mistakes - mistakes, 0)
        return f'Mistakes: {mistakes}/{max_mistakes} [{bar}]'

    def print_result(self, state: dict):
        """Print the end of round screen."""
        print('-' * 40)
        if state['outcome'] == 'won':
            print('VICTORY! Excellent work!')
        else:
            print('GAME OVER')
            print(f"The phrase was: {state['phrase']}")
        print('-' * 40)

    def setup_human_round(self) -> dict | None:
        """Prompt for a secret phrase until the server accepts one."""
        limits = self.client.get_config()
        print(f"\nEnter a secret word or phrase (max {limits['max_word_length']} letters per word, "
              f"{limits['max_total_length']} characters in total). Empty line to cancel.")
        while True:
            raw = input('Secret: ')
            if not raw.strip():
                return None
            phrase = normalize(raw)
            if phrase != raw:
                print(f'Using: {phrase}')
            category = input('Category (optional): ').strip()
            clue = input('Clue (optional): ').strip()
            try:
                state = self.client.create_round(phrase, category, clue)
            except requests.HTTPError as e:
                if e.response is not None and e.response.status_code == 400:
                    detail = e.response.json().get('detail', {})
                    print(f"Error: {detail.get('message', 'Invalid phrase')}")
                    continue
                raise
            # Scroll the secret off screen before handing over
            print('\n' * 40)
            return state

    def play(self, state: dict):
        """Play a round until it ends or is abandoned."""
        round_id = state['round_id']
        print('Commands: a letter to guess, "?" for a hint, "!" to give up\n')

        while state['outcome'] == 'in_progress':
            self.print_round(state)
            user_input = input('Letter: ').strip()

            if user_input == '!':
                self.client.abandon_round(round_id)
                print('Round abandoned.')
                return

            elif user_input == '?':
                print('Getting hint...')
                try:
                    hint = self.client.get_hint(round_id)
                    print(f"\nHint: {hint['hint']}")
                except requests.RequestException as e:
                    print(f"Error getting hint: {e}")

            elif len(user_input) == 1 and user_input.isascii() and user_input.isalpha():
                state = self.client.guess(round_id, user_input)
                if not state['accepted']:
                    print(f'"{user_input.upper()}" was already tried.')

            else:
                print('Type a single letter A-Z.')

        self.print_round(state)
        self.print_result(state)

    def run(self):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to hangman server ({health['service']})")
        except requests.RequestException:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        print('\nELITE HANGMAN')
        while True:
            print('\n1) Create a challenge for a friend')
            print('2) Play a generated challenge')
            print('q) Quit')
            choice = input('> ').strip().lower()

            if choice == 'q':
                print('Goodbye!')
                return

            try:
                if choice == '1':
                    state = self.setup_human_round()
                    if state:
                        self.play(state)
                elif choice == '2':
                    print('Generating challenge...')
                    state = self.client.generate_round()
                    if state['source'] == 'fallback':
                        print('(Generator unavailable, using a built-in challenge.)')
                    self.play(state)
            except requests.RequestException as e:
                print(f"Error talking to server: {e}")
