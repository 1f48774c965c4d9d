"""Provides an app factory for services that manage users."""

from typing import Any, Mapping, Optional

from flask import Flask

from . import config, util
from .auth import Auth


def create_web_app(overrides: Optional[Mapping[str, Any]] = None,
                   create_db: bool = False) -> Flask:
    """
    Initialize a Flask app with the users database and :class:`.Auth`.

    Parameters
    ----------
    overrides : dict
        Config values that take precedence over :mod:`.config`. These are
        applied before the database is bound to the app.
    create_db : bool
        Create the tables right away.

    """
    app = Flask(__name__)
    app.config.from_object(config)
    if overrides:
        app.config.update(overrides)

    util.init_app(app)
    Auth(app)

    if create_db:
        with app.app_context():
            util.create_all()
    return app
