"""Password hashing and verification."""

import bcrypt

from . import logging
from .util import get_application_config

logger = logging.getLogger(__name__)

MAX_PASSWORD_BYTES = 72
"""bcrypt only looks at this many bytes of the password."""

DEFAULT_ROUNDS = 12


def _encode(password: str) -> bytes:
    encoded = password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f'Password is longer than {MAX_PASSWORD_BYTES} bytes')
    return encoded


def hash_password(password: str) -> str:
    """
    Generate a salted bcrypt hash of a password.

    The work factor is taken from ``BCRYPT_ROUNDS`` in the application
    config.
    """
    rounds = int(get_application_config().get('BCRYPT_ROUNDS',
                                               DEFAULT_ROUNDS))
    hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode('ascii')


def check_password(password: str, encrypted: str) -> bool:
    """Check a password against a hash produced by :func:`hash_password`."""
    try:
        return bcrypt.checkpw(_encode(password), encrypted.encode('ascii'))
    except ValueError as e:     # Malformed hash, or overlong password.
        logger.debug('Cannot check password: %s', e)
        return False
