"""Testing helpers."""

import tempfile
from contextlib import contextmanager

from flask import Flask

from .. import util


@contextmanager
def temporary_db(database_url: str = 'sqlite:///:memory:',
                 create: bool = True, drop: bool = True):
    """Provide an in-memory sqlite database for testing purposes."""
    app = Flask('foo')
    app.config['SQLALCHEMY_DATABASE_URI'] = database_url
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['BCRYPT_ROUNDS'] = 4
    with tempfile.TemporaryDirectory() as media_location:
        app.config['MEDIA_LOCATION'] = media_location
        with app.app_context():
            util.init_app(app)
            if create:
                util.create_all()
            try:
                with util.transaction():
                    yield util.current_session()
            finally:
                if drop:
                    util.drop_all()
