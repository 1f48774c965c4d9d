"""
User accounts and opaque bearer tokens for NMedia services.

This package provides registration and login of users, issue and lookup of
bearer tokens, and registration of device push tokens. Tokens are random
strings without embedded claims: a token is valid exactly as long as the
database says that it was issued to somebody.

Quick start
-----------

.. code-block:: python

   from nmedia.users import accounts
   from nmedia.users.factory import create_web_app

   app = create_web_app()
   with app.app_context():
       token = accounts.register('alice', 'secret', 'Alice')
       user = accounts.get_by_token(token.token)

Inside a request, :func:`.auth.current_user_id` tells you who is asking
(see :class:`.auth.Auth`).
"""

from .domain import User, Token, PushToken, Media, Principal
from . import accounts, auth, exceptions, media, passwords, tokens

__all__ = ('User', 'Token', 'PushToken', 'Media', 'Principal',
           'accounts', 'auth', 'exceptions', 'media', 'passwords', 'tokens')
