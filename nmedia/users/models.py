"""Database models for users, bearer tokens and device push tokens."""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Column, ForeignKey, Integer, String, text
from sqlalchemy.orm import relationship

db: SQLAlchemy = SQLAlchemy()


class DBUser(db.Model):  # type: ignore
    """
    Registered users.

    +-------------+--------------+------+-----+---------+----------------+
    | Field       | Type         | Null | Key | Default | Extra          |
    +-------------+--------------+------+-----+---------+----------------+
    | id          | int(11)      | NO   | PRI | NULL    | auto_increment |
    | login       | varchar(255) | NO   | UNI | NULL    |                |
    | password    | varchar(255) | NO   |     | NULL    |                |
    | name        | varchar(255) | NO   |     | NULL    |                |
    | avatar      | varchar(255) | NO   |     |         |                |
    | joined_date | int(11)      | NO   |     | 0       |                |
    +-------------+--------------+------+-----+---------+----------------+
    """

    __tablename__ = 'users'

    user_id = Column('id', Integer, primary_key=True, autoincrement=True)
    login = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    """bcrypt hash, never the password itself."""
    name = Column(String(255), nullable=False)
    avatar = Column(String(255), nullable=False, server_default=text("''"))
    joined_date = Column(Integer, nullable=False, server_default=text("'0'"))
    """Epoch time."""


class DBToken(db.Model):  # type: ignore
    """
    Bearer tokens. A user may hold any number of them.

    +-------------+--------------+------+-----+---------+-------+
    | Field       | Type         | Null | Key | Default | Extra |
    +-------------+--------------+------+-----+---------+-------+
    | token       | varchar(255) | NO   | PRI | NULL    |       |
    | user_id     | int(11)      | NO   | MUL | NULL    |       |
    | issued_when | int(11)      | NO   |     | 0       |       |
    +-------------+--------------+------+-----+---------+-------+
    """

    __tablename__ = 'tokens'

    token = Column(String(255), primary_key=True)
    user_id = Column(ForeignKey('users.id'), nullable=False, index=True)
    issued_when = Column(Integer, nullable=False, server_default=text("'0'"))
    """Epoch time."""

    user = relationship('DBUser')


class DBPushToken(db.Model):  # type: ignore
    """
    Device push tokens and their current owners.

    ``user_id`` is not a foreign key: 0 means that the device registered
    without anybody logged in.

    +---------+--------------+------+-----+---------+----------------+
    | Field   | Type         | Null | Key | Default | Extra          |
    +---------+--------------+------+-----+---------+----------------+
    | id      | int(11)      | NO   | PRI | NULL    | auto_increment |
    | token   | varchar(255) | NO   | UNI | NULL    |                |
    | user_id | int(11)      | NO   | MUL | 0       |                |
    +---------+--------------+------+-----+---------+----------------+
    """

    __tablename__ = 'push_tokens'

    push_token_id = Column('id', Integer, primary_key=True, autoincrement=True)
    token = Column(String(255), nullable=False, unique=True)
    user_id = Column(Integer, nullable=False, index=True,
                     server_default=text("'0'"))
