"""
Attaches the user behind a request's bearer token to the request.

Install :class:`Auth` on the application, and the user who sent the current
request is available as ``flask.request.auth`` (``None`` for anonymous
requests). Views that need an owner for something, e.g. a push token, can
use :func:`current_user_id`.
"""

from typing import Optional

from flask import Flask, has_request_context, request

from . import accounts, domain, logging, util

logger = logging.getLogger(__name__)

BEARER = 'Bearer '


class Auth(object):
    """
    Attaches the authenticated :class:`.domain.User` to the request.

    Intended for use in a Flask application factory, for example:

    .. code-block:: python

       from flask import Flask
       from nmedia.users import util
       from nmedia.users.auth import Auth


       def create_web_app() -> Flask:
          app = Flask('someapp')
          util.init_app(app)
          Auth(app)
          return app

    """

    def __init__(self, app: Optional[Flask] = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """
        Attach :meth:`.load_principal` to the Flask app.

        Parameters
        ----------
        app : :class:`Flask`

        """
        self.app = app
        self.app.config.setdefault('AUTH_HEADER_NAME', 'Authorization')
        self.app.before_request(self.load_principal)

        @self.app.teardown_request
        def teardown_request(exception: Optional[BaseException]) -> None:
            if exception:
                util.current_session().rollback()

    def load_principal(self) -> None:
        """Look up the user for the token on the request, if any."""
        request.auth = None
        token = request.headers.get(self.app.config['AUTH_HEADER_NAME'])
        if not token:
            return
        if token.startswith(BEARER):
            token = token[len(BEARER):]
        request.auth = accounts.get_by_token(token)
        if request.auth is None:
            logger.debug('Request carries an unknown token')


def principal_or_none() -> Optional[domain.User]:
    """Get the user who sent the current request, if known."""
    if not has_request_context():
        return None
    principal: Optional[domain.User] = getattr(request, 'auth', None)
    return principal


def current_user_id() -> int:
    """Get the id of the current user, or :const:`.domain.NO_USER`."""
    principal = principal_or_none()
    if principal is None:
        return domain.NO_USER
    return principal.user_id
