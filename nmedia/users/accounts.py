"""
Provide methods for working with user accounts and their tokens.

These functions must be called within an application context, on an app
that has been initialized with :func:`.util.init_app`. Each call commits its
own writes; if anything fails along the way the transaction is rolled back
and nothing is left behind (e.g. a user without the token that
:func:`register` was supposed to issue).
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from werkzeug.datastructures import FileStorage

from . import domain, logging, media, passwords, tokens, util
from .exceptions import NotFound, PasswordMismatch, UserAlreadyRegistered, \
    UserNotFound
from .models import DBPushToken, DBToken, DBUser

logger = logging.getLogger(__name__)


def create(login: str, password: str, name: str, avatar: str) -> domain.User:
    """
    Create a new user without issuing a token.

    Parameters
    ----------
    login : str
    password : str
        Plaintext; only its hash is stored.
    name : str
        Display name.
    avatar : str
        Media id of the avatar, or empty.

    Returns
    -------
    :class:`.domain.User`

    Raises
    ------
    :class:`.UserAlreadyRegistered`
        Raised if the store rejects the login as a duplicate.

    """
    try:
        with util.transaction() as session:
            db_user = _new_user(login, password, name, avatar)
            session.add(db_user)
            session.commit()
            user = _to_domain(db_user)
    except IntegrityError as e:
        raise UserAlreadyRegistered(f'Login {login} is already taken') from e
    logger.info('Created user %s', user.user_id)
    return user


def register(login: str, password: str, name: str,
             file: Optional[FileStorage] = None) -> domain.Token:
    """
    Register a new user and issue their first token.

    Parameters
    ----------
    login : str
    password : str
        Plaintext; only its hash is stored.
    name : str
        Display name.
    file : :class:`FileStorage`
        Avatar upload (optional). Without one, the avatar is left empty.

    Returns
    -------
    :class:`.domain.Token`

    Raises
    ------
    :class:`.UserAlreadyRegistered`
        Raised if a user with ``login`` already exists.
    :class:`.BadContentType`
        Raised if the avatar is not an image that we can store.

    """
    if get_by_login(login) is not None:
        logger.debug('Login is taken: %s', login)
        raise UserAlreadyRegistered(f'Login {login} is already taken')

    # TODO: a registration without an avatar should get a default avatar
    # rather than an empty reference.
    avatar = media.save_avatar(file).id if file else ''

    try:
        with util.transaction() as session:
            db_user = _new_user(login, password, name, avatar)
            session.add(db_user)
            db_token = _new_token(db_user, tokens.generate())
            session.add(db_token)
            session.commit()
            token = domain.Token(user_id=db_user.user_id, token=db_token.token)
    except IntegrityError as e:     # Lost a race for the same login.
        raise UserAlreadyRegistered(f'Login {login} is already taken') from e
    logger.info('Registered user %s', token.user_id)
    return token


def login(login: str, password: str) -> domain.Token:
    """
    Check a user's credentials and issue a fresh token.

    Parameters
    ----------
    login : str
    password : str

    Returns
    -------
    :class:`.domain.Token`
        A new token; tokens from earlier logins remain valid.

    Raises
    ------
    :class:`.NotFound`
        Raised if there is no user with ``login``.
    :class:`.PasswordMismatch`
        Raised if ``password`` is not the user's password.

    """
    db_user = _get_user_by_login(login)
    if db_user is None:
        logger.debug('No such user: %s', login)
        raise NotFound(f'No user with login {login}')
    if not passwords.check_password(password, db_user.password):
        logger.debug('Wrong password for user %s', db_user.user_id)
        raise PasswordMismatch('Password does not match')
    return _issue_token(db_user, tokens.generate())


def get_by_login(login: str) -> Optional[domain.User]:
    """Get the user with ``login``, if there is one."""
    db_user = _get_user_by_login(login)
    if db_user is None:
        return None
    return _to_domain(db_user)


def get_by_token(token: str) -> Optional[domain.User]:
    """
    Get the user to whom a bearer token was issued.

    This is the authentication check for requests that carry a token.
    Returns ``None`` if the token was never issued.
    """
    with util.transaction() as session:
        db_token: DBToken = session.query(DBToken) \
            .filter(DBToken.token == token) \
            .first()
        if db_token is None:
            logger.debug('Unknown token')
            return None
        return _to_domain(db_token.user)


def load_user_by_username(username: Optional[str]) -> domain.Principal:
    """
    Load a user for an authentication framework.

    Raises
    ------
    :class:`.UserNotFound`
        Raised if there is no user with that login.

    """
    db_user = _get_user_by_login(username)
    if db_user is None:
        raise UserNotFound(username)
    return domain.Principal(user=_to_domain(db_user),
                            password=db_user.password)


def save_initial_token(user_id: int, value: str) -> domain.Token:
    """
    Bind a token value supplied by the caller to a user.

    Used for tokens that originate elsewhere (e.g. migrated sessions), so
    the caller is responsible for ``value`` being unguessable. If ``value``
    was already issued, it is rebound to this user and re-stamped.

    Raises
    ------
    :class:`.NotFound`
        Raised if there is no user with ``user_id``.

    """
    with util.transaction() as session:
        db_user: DBUser = session.query(DBUser) \
            .filter(DBUser.user_id == user_id) \
            .first()
    if db_user is None:
        raise NotFound(f'No user with id {user_id}')

    with util.transaction() as session:
        db_token: Optional[DBToken] = session.query(DBToken) \
            .filter(DBToken.token == value) \
            .with_for_update() \
            .first()
        if db_token is None:
            db_token = _new_token(db_user, value)
        else:
            logger.debug('Rebinding token from user %s', db_token.user_id)
            db_token.user = db_user
            db_token.issued_when = util.now()
        session.add(db_token)
        session.commit()
    logger.info('Issued token to user %s', db_user.user_id)
    return domain.Token(user_id=db_user.user_id, token=value)


def save_push_token(push_token: domain.PushToken,
                    user_id: Optional[int] = None) -> domain.PushToken:
    """
    Store a device push token, or move it to a new owner.

    Parameters
    ----------
    push_token : :class:`.domain.PushToken`
        Only :attr:`.domain.PushToken.token` is used.
    user_id : int
        The authenticated user that sent the token, if any. Without one,
        the token is owned by :const:`.domain.NO_USER`.

    Returns
    -------
    :class:`.domain.PushToken`
        The stored record.

    """
    owner = user_id if user_id is not None else domain.NO_USER
    try:
        return _upsert_push_token(push_token.token, owner)
    except IntegrityError:
        # Another request inserted the same token between our read and write.
        logger.warning('Push token was inserted concurrently, retrying')
    return _upsert_push_token(push_token.token, owner)


def _upsert_push_token(token: str, owner: int) -> domain.PushToken:
    with util.transaction() as session:
        db_push: DBPushToken = session.query(DBPushToken) \
            .filter(DBPushToken.token == token) \
            .with_for_update() \
            .first()
        if db_push is None:
            db_push = DBPushToken(token=token, user_id=owner)
        else:
            db_push.user_id = owner
        session.add(db_push)
        session.commit()
        return domain.PushToken(token=db_push.token,
                                user_id=db_push.user_id,
                                push_token_id=db_push.push_token_id)


def _get_user_by_login(login: Optional[str]) -> Optional[DBUser]:
    with util.transaction() as session:
        db_user: Optional[DBUser] = session.query(DBUser) \
            .filter(DBUser.login == login) \
            .first()
    return db_user


def _issue_token(db_user: DBUser, value: str) -> domain.Token:
    with util.transaction() as session:
        session.add(_new_token(db_user, value))
        session.commit()
    logger.info('Issued token to user %s', db_user.user_id)
    return domain.Token(user_id=db_user.user_id, token=value)


def _new_user(login: str, password: str, name: str, avatar: str) -> DBUser:
    return DBUser(
        login=login,
        password=passwords.hash_password(password),
        name=name,
        avatar=avatar,
        joined_date=util.now()
    )


def _new_token(db_user: DBUser, value: str) -> DBToken:
    return DBToken(token=value, user=db_user, issued_when=util.now())


def _to_domain(db_user: DBUser) -> domain.User:
    return domain.User(
        user_id=db_user.user_id,
        login=db_user.login,
        name=db_user.name,
        avatar=db_user.avatar
    )
