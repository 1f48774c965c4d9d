"""Tests for :mod:`nmedia.users.util`."""

import os
import time
from unittest import TestCase, mock

from flask import Flask

from .. import models, util
from .util import temporary_db


class TestTransaction(TestCase):
    """Tests for :func:`.util.transaction`."""

    def test_commits_pending(self):
        """Anything left pending is committed on exit."""
        with temporary_db() as session:
            with util.transaction() as txn:
                txn.add(models.DBPushToken(token='device', user_id=1))
            self.assertFalse(session.new)
            session.rollback()
            self.assertEqual(session.query(models.DBPushToken).count(), 1)

    def test_rolls_back_on_error(self):
        """Nothing is written if the block fails."""
        with temporary_db() as session:
            with self.assertRaises(ValueError):
                with util.transaction() as txn:
                    txn.add(models.DBPushToken(token='device', user_id=1))
                    txn.flush()
                    raise ValueError('oops')
            self.assertEqual(session.query(models.DBPushToken).count(), 0)


class TestHelpers(TestCase):
    """Tests for the remaining helpers."""

    def test_now(self):
        """:func:`.util.now` is the current UNIX time."""
        self.assertLessEqual(abs(util.now() - time.time()), 1)

    def test_is_available(self):
        """The database is available once configured."""
        with temporary_db():
            self.assertTrue(util.is_available())

    def test_is_not_available(self):
        """Errors talking to the database are reported, not raised."""
        with temporary_db():
            with mock.patch.object(util, 'text',
                                   side_effect=RuntimeError('down')):
                self.assertFalse(util.is_available())

    def test_config_from_app(self):
        """Inside an app context, the app config is used."""
        app = Flask('foo')
        app.config['BCRYPT_ROUNDS'] = 5
        with app.app_context():
            self.assertEqual(util.get_application_config()['BCRYPT_ROUNDS'],
                             5)

    def test_config_from_environment(self):
        """Outside an app context, the environment is used."""
        with mock.patch.dict(os.environ, {'BCRYPT_ROUNDS': '6'}):
            self.assertEqual(util.get_application_config()['BCRYPT_ROUNDS'],
                             '6')
