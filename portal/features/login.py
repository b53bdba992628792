"""Authentication with username and password."""

import logging
from typing import Mapping, Optional

from wtforms import PasswordField, StringField

from .. import domain
from ..result import Failure, Result, Success
from ..schema import Schema, filled
from ..services import Hasher
from ..services.datastore import UserRepository

logger = logging.getLogger(__name__)


class LoginSchema(Schema):
    """Log in fields."""

    username = StringField('Username', validators=[filled()])
    password = PasswordField('Password', validators=[filled()])


class Form(object):
    """Validates login input without revealing which field was wrong."""

    def __init__(self, logger: logging.Logger = logger) -> None:
        self._logger = logger

    def submit(self, params: Mapping[str, Optional[str]]) -> Result:
        if LoginSchema.evaluate(params):
            self._logger.debug('Login form not valid')
            return Failure(domain.WRONG_CREDENTIALS)
        return Success()


class Service(object):
    """Authenticates a user by username and password."""

    def __init__(self, form: Form, repo: UserRepository, hasher: Hasher,
                 logger: logging.Logger = logger) -> None:
        self._form = form
        self._repo = repo
        self._hasher = hasher
        self._logger = logger

    def call(self, username: Optional[str], password: Optional[str]) -> Result:
        """
        Authenticate a user.

        An unknown username, a wrong password and blank input all produce
        the same :data:`domain.WRONG_CREDENTIALS` failure.

        Returns
        -------
        :class:`.Success`
            Carrying the authenticated :class:`domain.User`.
        :class:`.Failure`
            Carrying :data:`domain.WRONG_CREDENTIALS`.

        """
        params = {'username': username, 'password': password}
        return self._form.submit(params) \
            .bind(lambda _: self._repo.find_by(username=username)
                  .to_result(domain.WRONG_CREDENTIALS)) \
            .bind(lambda user: self._verify(user, password))

    __call__ = call

    def _verify(self, user: domain.User, password: str) -> Result:
        if self._hasher.check(user.password, password):
            self._logger.debug('Authenticated user %s', user.user_id)
            return Success(user)
        self._logger.debug('Password check failed for user %s', user.user_id)
        return Failure(domain.WRONG_CREDENTIALS)
