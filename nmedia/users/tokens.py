"""Generation of opaque bearer tokens."""

import secrets
from base64 import urlsafe_b64encode

TOKEN_BYTES = 128


def generate() -> str:
    """
    Generate a new random token.

    The token is :const:`TOKEN_BYTES` bytes from the OS CSPRNG, encoded as
    URL-safe base64 without padding.
    """
    return urlsafe_b64encode(secrets.token_bytes(TOKEN_BYTES)) \
        .rstrip(b'=') \
        .decode('ascii')
