"""Core domain classes for the API client portal."""

from typing import Dict, List, NamedTuple, Optional

FieldErrors = Dict[str, List[str]]
"""Field name mapped to human-readable messages, in field order."""


class User(NamedTuple):
    """A registered portal user."""

    user_id: int
    """Unique identifier of the user."""

    username: str
    """Unique login name."""

    email: str
    """Unique e-mail address."""

    password: str
    """One-way hash of the user's password. Never the password itself."""


class Client(NamedTuple):
    """An API client registered by a :class:`User`."""

    id: int
    """Primary identifier of the client record."""

    owner_id: int
    """The :attr:`User.user_id` of the user who registered the client."""

    name: str
    """Unique, human-readable name of the client."""

    callback_url: str
    """HTTPS URL to which users are redirected after authorization."""

    client_id: str
    """Public identifier issued to the client."""

    client_secret: str
    """Secret issued to the client, paired with :attr:`client_id`."""


class Error(NamedTuple):
    """A domain error carried by a :class:`portal.result.Failure`."""

    code: str
    """Machine-readable error code; see the constants below."""

    errors: Optional[FieldErrors] = None
    """Field-level detail, only for ``validation_failure``."""


def validation_failure(errors: FieldErrors) -> Error:
    """Build the error for input that failed validation."""
    return Error('validation_failure', errors)


WRONG_CREDENTIALS = Error('wrong_username_and_password_combination')
"""Opaque login failure; never says which part of the credentials is wrong."""

UNAUTHORIZED = Error('unauthorized')
NOT_FOUND = Error('not_found')
CONFLICT = Error('conflict')
"""The datastore rejected a write that passed validation."""
