"""Exceptions."""


class UserAlreadyRegistered(RuntimeError):
    """A user with the requested login already exists."""


class NotFound(RuntimeError):
    """An entity required by the operation does not exist."""


class PasswordMismatch(RuntimeError):
    """Password does not match the stored hash."""


class UserNotFound(RuntimeError):
    """No principal could be loaded for the requested username."""


class BadContentType(RuntimeError):
    """Uploaded media has a content type that we do not store."""
