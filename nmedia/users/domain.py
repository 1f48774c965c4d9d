"""Defines the user, token and media concepts shared by the users package."""

from typing import NamedTuple, Optional

NO_USER = 0
"""User id used for records that are not attributed to any user."""


class User(NamedTuple):
    """Represents a registered user, without credentials."""

    user_id: int
    """Unique identifier assigned when the user is created."""

    login: str
    """Unique login name."""

    name: str
    """Display name."""

    avatar: str = ''
    """Reference to the user's avatar (a media id), or empty."""


class Token(NamedTuple):
    """An opaque bearer token issued to a user."""

    user_id: int
    """The user to whom the token is bound."""

    token: str
    """Opaque token value. Carries no claims."""


class PushToken(NamedTuple):
    """A device push-notification token and the user that owns it."""

    token: str
    """Push token string issued to the device by the push provider."""

    user_id: int = NO_USER
    """Owner of the device; :const:`NO_USER` if nobody was logged in."""

    push_token_id: Optional[int] = None
    """Identifier of the stored record. ``None`` if not yet stored."""


class Media(NamedTuple):
    """A stored media asset."""

    id: str
    """Name under which the asset was stored."""


class Principal(NamedTuple):
    """
    A user as seen by an authentication framework.

    Unlike :class:`User`, this carries the password hash so that the
    framework can perform its own credential checks.
    """

    user: User
    password: str
    """bcrypt hash of the user's password."""

    @property
    def username(self) -> str:
        """The login of the user."""
        return self.user.login
