"""Storage of uploaded media."""

import os
import uuid

from werkzeug.datastructures import FileStorage

from . import logging
from .domain import Media
from .exceptions import BadContentType
from .util import get_application_config

logger = logging.getLogger(__name__)

EXTENSIONS = {
    'image/jpeg': '.jpg',
    'image/png': '.png',
}
"""Content types that we accept for avatars, and how we name them."""

AVATARS = 'avatars'


def _get_location() -> str:
    config = get_application_config()
    return os.path.join(config.get('MEDIA_LOCATION', './static'), AVATARS)


def save_avatar(file: FileStorage) -> Media:
    """
    Store an uploaded avatar image.

    Parameters
    ----------
    file : :class:`FileStorage`
        A JPEG or PNG upload.

    Returns
    -------
    :class:`.Media`
        Refers to the stored file by its generated name.

    Raises
    ------
    :class:`.BadContentType`
        Raised if the upload is not a JPEG or PNG image.

    """
    extension = EXTENSIONS.get(file.mimetype)
    if extension is None:
        raise BadContentType(f'Cannot store media of type {file.mimetype}')

    name = f'{uuid.uuid4()}{extension}'
    location = _get_location()
    os.makedirs(location, exist_ok=True)
    file.save(os.path.join(location, name))
    logger.debug('Saved avatar %s', name)
    return Media(id=name)
