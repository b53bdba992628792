"""Registration of new user accounts."""

import logging
from typing import Optional

from wtforms import PasswordField, StringField

from .. import domain
from ..result import Failure, Result, Success
from ..schema import Schema, filled, length, matches
from ..services import Hasher
from ..services.datastore import Conflict, UserRepository

logger = logging.getLogger(__name__)

EMAIL_FORMAT = r'^[-a-zA-Z0-9_.+]+@[-a-zA-Z0-9]+\.[-a-zA-Z0-9.]+\Z'


class RegistrationSchema(Schema):
    """User registration fields."""

    username = StringField('Username',
                           validators=[filled(), length(min=5, max=25)])
    email = StringField('Email address',
                        validators=[filled(), matches(EMAIL_FORMAT)])
    password = PasswordField('Password',
                             validators=[filled(), length(min=6, max=64)])


class Form(object):
    """Validates a registration, including username and email uniqueness."""

    def __init__(self, repo: UserRepository,
                 logger: logging.Logger = logger) -> None:
        self._repo = repo
        self._logger = logger

    def submit(self, username: Optional[str], email: Optional[str],
               password: Optional[str]) -> Result:
        """
        Validate the registration data.

        Uniqueness is only checked for fields that passed the schema.

        Returns
        -------
        :class:`.Success`
            Empty, if the data are valid.
        :class:`.Failure`
            Carrying a ``validation_failure`` :class:`domain.Error`.

        """
        errors = RegistrationSchema.evaluate({
            'username': username,
            'email': email,
            'password': password
        })
        if 'username' not in errors \
                and self._repo.find_by(username=username).is_some():
            errors['username'] = ['username is taken']
        if 'email' not in errors \
                and self._repo.find_by(email=email).is_some():
            errors['email'] = ['email is taken']

        if errors:
            self._logger.debug('Registration form not valid: %s',
                               ', '.join(errors))
            return Failure(domain.validation_failure(
                RegistrationSchema.ordered(errors)))
        return Success()


class Service(object):
    """Creates a user account from valid registration data."""

    def __init__(self, form: Form, repo: UserRepository, hasher: Hasher,
                 logger: logging.Logger = logger) -> None:
        self._form = form
        self._repo = repo
        self._hasher = hasher
        self._logger = logger

    def call(self, username: Optional[str], email: Optional[str],
             password: Optional[str]) -> Result:
        """
        Register a new user.

        Returns
        -------
        :class:`.Success`
            Carrying the created :class:`domain.User`.
        :class:`.Failure`
            Carrying a ``validation_failure`` or :data:`domain.CONFLICT`.

        """
        return self._form.submit(username, email, password) \
            .bind(lambda _: self._create(username, email, password))

    __call__ = call

    def _create(self, username: str, email: str, password: str) -> Result:
        try:
            user = self._repo.create(
                username=username,
                email=email,
                password=self._hasher.hash(password)
            )
        except Conflict:
            # Someone else registered the username or email since the form
            # was checked; the form will now say which.
            self._logger.debug('Registration rejected by the datastore')
            return self._form.submit(username, email, password) \
                .bind(lambda _: Failure(domain.CONFLICT))
        self._logger.debug('Registered user %s', user.user_id)
        return Success(user)
