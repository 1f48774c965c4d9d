"""Flask configuration for the users package."""

import os

SQLALCHEMY_DATABASE_URI = os.environ.get('USERS_DATABASE_URI',
                                         'sqlite:///users.db')
"""Where users, tokens and push tokens are stored."""

SQLALCHEMY_TRACK_MODIFICATIONS = False

MEDIA_LOCATION = os.environ.get('MEDIA_LOCATION', './static')
"""Root directory for uploaded media. Avatars go in ``avatars/``."""

BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', '12'))
"""Work factor for password hashes."""

AUTH_HEADER_NAME = os.environ.get('AUTH_HEADER_NAME', 'Authorization')
"""Request header that carries the bearer token."""

LOGLEVEL = int(os.environ.get('LOGLEVEL', '20'))
"""Level for the package's loggers (20 is ``INFO``)."""
