"""Tests for :mod:`nmedia.users.tokens`."""

import re
from unittest import TestCase, mock

from .. import tokens


class TestGenerate(TestCase):
    """Tests for :func:`.tokens.generate`."""

    def test_length_and_alphabet(self):
        """The token is 128 bytes as unpadded URL-safe base64."""
        token = tokens.generate()
        self.assertEqual(len(token), 171)
        self.assertRegex(token, re.compile(r'^[A-Za-z0-9_-]+$'))
        self.assertNotIn('=', token)

    def test_draws_from_secrets(self):
        """Randomness comes from :mod:`secrets`."""
        randomness = b'\xfb\xff\xbf' * 10
        with mock.patch.object(tokens.secrets, 'token_bytes',
                               return_value=randomness) as token_bytes:
            token = tokens.generate()
        token_bytes.assert_called_once_with(tokens.TOKEN_BYTES)
        self.assertEqual(token, '-_-_' * 10, 'Encoded with - and _')

    def test_tokens_are_distinct(self):
        """Consecutive tokens differ."""
        generated = {tokens.generate() for _ in range(100)}
        self.assertEqual(len(generated), 100)
