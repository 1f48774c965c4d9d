"""Tests for :mod:`nmedia.users.passwords`."""

import os
import string
from unittest import TestCase, mock

from hypothesis import given, settings
from hypothesis import strategies as st

from .. import passwords

PASSWORDS = st.text(alphabet=string.printable, max_size=40)


class TestCheckPassword(TestCase):
    """Hashes produced by :func:`.hash_password` can be checked."""

    def setUp(self):
        """Keep bcrypt cheap."""
        patcher = mock.patch.dict(os.environ, {'BCRYPT_ROUNDS': '4'})
        patcher.start()
        self.addCleanup(patcher.stop)

    @given(PASSWORDS)
    @settings(max_examples=50, deadline=None)
    def test_check_passwords_successful(self, passw):
        encrypted = passwords.hash_password(passw)
        self.assertNotEqual(encrypted, passw)
        self.assertTrue(passwords.check_password(passw, encrypted),
                        f"should work for password '{passw}'")

    @given(PASSWORDS, PASSWORDS)
    @settings(max_examples=50, deadline=None)
    def test_check_passwords_fuzz(self, passw, fuzzpw):
        encrypted = passwords.hash_password(passw)
        self.assertEqual(passwords.check_password(fuzzpw, encrypted),
                         passw == fuzzpw)

    def test_hashes_are_salted(self):
        """The same password hashes differently each time."""
        self.assertNotEqual(passwords.hash_password('thepassword'),
                            passwords.hash_password('thepassword'))

    def test_rounds_from_config(self):
        """The work factor is taken from the configuration."""
        self.assertTrue(passwords.hash_password('foo').startswith('$2b$04$'))

    def test_malformed_hash(self):
        """A hash that bcrypt cannot read does not match anything."""
        self.assertFalse(passwords.check_password('foo', 'notahash'))

    def test_password_too_long(self):
        """bcrypt would silently ignore anything past 72 bytes."""
        with self.assertRaises(ValueError):
            passwords.hash_password('x' * 73)
