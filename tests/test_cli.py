"""Tests for the hangman console client."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from cli.api_client import HangmanAPIClient
from cli.console import ConsoleUI


def make_state(**overrides) -> dict:
    state = {
        'round_id': 'abc123',
        'outcome': 'in_progress',
        'category': '',
        'clue': '',
        'source': 'human',
        'attempted': [],
        'correct_letters': [],
        'incorrect_letters': [],
        'mistake_count': 0,
        'max_mistakes': 6,
        'word_lengths': [3],
        'display': [],
        'masked': '_ _ _',
        'phrase': None,
        'accepted': None
    }
    state.update(overrides)
    return state


def http_error(status_code: int, payload: dict) -> requests.HTTPError:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return requests.HTTPError(response=response)


class TestHangmanAPIClient(unittest.TestCase):
    """Tests for HangmanAPIClient request building."""

    def setUp(self):
        self.client = HangmanAPIClient(base_url="http://example.test/")
        self.client.session = MagicMock()
        self.client.session.get.return_value.json.return_value = {'ok': True}
        self.client.session.post.return_value.json.return_value = {'ok': True}
        self.client.session.delete.return_value.json.return_value = {'ok': True}

    def test_base_url_trailing_slash(self):
        self.assertEqual(self.client.base_url, "http://example.test")

    def test_create_round(self):
        self.client.create_round("CAT", "Animals", "Purrs")
        self.client.session.post.assert_called_once_with(
            "http://example.test/api/rounds",
            json={'phrase': 'CAT', 'category': 'Animals', 'clue': 'Purrs'}
        )

    def test_generate_round(self):
        self.client.generate_round()
        self.client.session.post.assert_called_once_with("http://example.test/api/rounds/generate", json={})

    def test_guess(self):
        self.client.guess("abc123", "E")
        self.client.session.post.assert_called_once_with(
            "http://example.test/api/rounds/abc123/guess", json={'letter': 'E'}
        )

    def test_get_round(self):
        self.assertEqual(self.client.get_round("abc123"), {'ok': True})
        self.client.session.get.assert_called_once_with("http://example.test/api/rounds/abc123")

    def test_abandon_round(self):
        self.client.abandon_round("abc123")
        self.client.session.delete.assert_called_once_with("http://example.test/api/rounds/abc123")

    def test_errors_are_raised(self):
        self.client.session.get.return_value.raise_for_status.side_effect = http_error(404, {})
        with self.assertRaises(requests.HTTPError):
            self.client.get_round("missing")


class TestConsoleUI(unittest.TestCase):
    """Tests for ConsoleUI flows."""

    def setUp(self):
        self.client = MagicMock()
        self.ui = ConsoleUI(self.client)
        self.client.get_config.return_value = {
            'max_word_length': 12, 'max_total_length': 30, 'max_mistakes': 6,
            'alphabet': 'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'provider': 'offline'
        }

    def test_format_gauge(self):
        self.assertEqual(self.ui.format_gauge(2, 6), "Mistakes: 2/6 [##....]")
        self.assertEqual(self.ui.format_gauge(6, 6), "Mistakes: 6/6 [######]")

    @patch('builtins.print')
    @patch('builtins.input', side_effect=['c', 'a', 't'])
    def test_play_until_won(self, mock_input, mock_print):
        self.client.guess.side_effect = [
            make_state(attempted=['C'], masked='C _ _', accepted=True),
            make_state(attempted=['C', 'A'], masked='C A _', accepted=True),
            make_state(outcome='won', attempted=['C', 'A', 'T'], masked='C A T', phrase='CAT', accepted=True),
        ]
        self.ui.play(make_state())
        self.assertEqual(self.client.guess.call_count, 3)
        self.client.guess.assert_called_with('abc123', 't')
        printed = ' '.join(str(c.args[0]) for c in mock_print.call_args_list if c.args)
        self.assertIn('VICTORY', printed)

    @patch('builtins.print')
    @patch('builtins.input', side_effect=['12', '?', '!'])
    def test_hint_and_abandon(self, mock_input, mock_print):
        self.client.get_hint.return_value = {'hint': 'It purrs.', 'available': True}
        self.ui.play(make_state())
        self.client.guess.assert_not_called()
        self.client.get_hint.assert_called_once_with('abc123')
        self.client.abandon_round.assert_called_once_with('abc123')

    @patch('builtins.print')
    @patch('builtins.input', side_effect=['\u00e9', '!'])
    def test_non_ascii_letter_is_not_guessed(self, mock_input, mock_print):
        self.ui.play(make_state())
        self.client.guess.assert_not_called()
        printed = ' '.join(str(c.args[0]) for c in mock_print.call_args_list if c.args)
        self.assertNotIn('already tried', printed)
        self.assertIn('Type a single letter A-Z.', printed)

    @patch('builtins.print')
    @patch('builtins.input', side_effect=['a' * 19, '', '', 'neutron star', 'Physics', 'Dense'])
    def test_setup_reprompts_on_validation_error(self, mock_input, mock_print):
        self.client.create_round.side_effect = [
            http_error(400, {'detail': {'error': 'word_too_long', 'message': 'One word exceeds 18 letters!', 'limit': 18}}),
            make_state(),
        ]
        state = self.ui.setup_human_round()
        self.assertEqual(state['round_id'], 'abc123')
        self.assertEqual(self.client.create_round.call_count, 2)
        self.client.create_round.assert_called_with('NEUTRON STAR', 'Physics', 'Dense')
        printed = ' '.join(str(c.args[0]) for c in mock_print.call_args_list if c.args)
        self.assertIn('One word exceeds 18 letters!', printed)
        self.client.get_config.assert_called_once_with()
        self.assertIn('max 12 letters per word, 30 characters in total', printed)

    @patch('builtins.print')
    @patch('builtins.input', side_effect=['   '])
    def test_setup_cancel(self, mock_input, mock_print):
        self.assertIsNone(self.ui.setup_human_round())
        self.client.create_round.assert_not_called()

    @patch('builtins.print')
    def test_run_without_server(self, mock_print):
        self.client.health_check.side_effect = requests.ConnectionError("refused")
        self.client.base_url = "http://localhost:8000"
        self.ui.run()
        self.client.generate_round.assert_not_called()

    @patch('builtins.print')
    @patch('builtins.input', side_effect=['2', 'q'])
    def test_run_generated_round_lost(self, mock_input, mock_print):
        self.client.health_check.return_value = {'service': 'hangman'}
        self.client.generate_round.return_value = make_state(
            outcome='lost', source='fallback', masked='G A L A X Y', phrase='GALAXY', mistake_count=6
        )
        self.ui.run()
        printed = ' '.join(str(c.args[0]) for c in mock_print.call_args_list if c.args)
        self.assertIn('GAME OVER', printed)
        self.assertIn('GALAXY', printed)


if __name__ == '__main__':
    unittest.main()
