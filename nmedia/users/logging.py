"""
Logging for the users package.

Loggers returned by :func:`getLogger` emit JSON records on ``stderr``, so
that they can be picked up by the log shipper alongside other services.
"""

import logging
import sys
from typing import IO, Optional

from pythonjsonlogger import jsonlogger

from . import config

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'
RENAME_FIELDS = {'levelname': 'level', 'asctime': 'timestamp'}


def getLogger(name: str, stream: Optional[IO] = None) -> logging.Logger:
    """
    Get a JSON-formatting logger for module ``name``.

    Parameters
    ----------
    name : str
        Usually ``__name__``.
    stream : file-like
        Where to write log records (default: ``sys.stderr``).

    Returns
    -------
    :class:`logging.Logger`

    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(
            jsonlogger.JsonFormatter(FORMAT, rename_fields=RENAME_FIELDS)
        )
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(config.LOGLEVEL)
    return logger
