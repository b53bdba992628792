"""SQLAlchemy models for database integration."""

from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, \
    UniqueConstraint

db: SQLAlchemy = SQLAlchemy()


class DBUser(db.Model):  # type: ignore
    """Persistence for :class:`domain.User`."""

    __tablename__ = 'users'

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(25), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    """One-way hash of the password."""
    created = Column(DateTime, default=datetime.now)


class DBClient(db.Model):  # type: ignore
    """Persistence for :class:`domain.Client`."""

    __tablename__ = 'clients'
    __table_args__ = (
        UniqueConstraint('client_id', 'client_secret',
                         name='uq_clients_credential'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(ForeignKey('users.user_id'), nullable=False, index=True)
    name = Column(String(255), nullable=False, unique=True)
    callback_url = Column(String(255), nullable=False)
    client_id = Column(String(255), nullable=False)
    client_secret = Column(String(255), nullable=False)
    created = Column(DateTime, default=datetime.now)
