"""Registration of new API clients."""

import logging
from typing import Mapping, Optional
from urllib.parse import SplitResult, urlsplit

from wtforms import StringField

from .. import domain
from ..result import Failure, Result, Success
from ..schema import Schema, filled, length
from ..services import SecretGenerator
from ..services.datastore import ClientRepository, Conflict

logger = logging.getLogger(__name__)


class ClientSchema(Schema):
    """API client fields."""

    name = StringField('Name', validators=[filled(), length(min=2, max=255)])
    callback_url = StringField('Callback URL',
                               validators=[filled(), length(min=5, max=255)])


def parse_url(value: str) -> SplitResult:
    """
    Parse ``value`` as a URI reference.

    Raises
    ------
    :class:`ValueError`
        If ``value`` contains whitespace or control characters, has a
        malformed network location, or has an invalid port.

    """
    if any(char.isspace() or ord(char) < 0x20 for char in value):
        raise ValueError(f'Not a valid URI: {value!r}')
    parts = urlsplit(value)
    # Reading the port raises ValueError if it is not a number.
    if parts.port is not None and parts.port == 0:
        raise ValueError(f'Not a valid port: {value!r}')
    return parts


def is_https_url(value: str) -> bool:
    """Determine whether ``value`` is an absolute HTTPS URL."""
    try:
        parts = parse_url(value)
    except ValueError:
        return False
    return parts.scheme == 'https' and bool(parts.hostname)


class Form(object):
    """Validates a new API client, including name uniqueness."""

    def __init__(self, repo: ClientRepository,
                 logger: logging.Logger = logger) -> None:
        self._repo = repo
        self._logger = logger

    def submit(self, params: Mapping[str, Optional[str]]) -> Result:
        """
        Validate the API client data.

        Returns
        -------
        :class:`.Success`
            Empty, if the data are valid.
        :class:`.Failure`
            Carrying a ``validation_failure`` :class:`domain.Error`.

        """
        errors = ClientSchema.evaluate(params)
        if 'name' not in errors \
                and self._repo.find_by(name=params['name']).is_some():
            errors['name'] = ['name is already taken']
        if 'callback_url' not in errors \
                and not is_https_url(params['callback_url']):
            errors['callback_url'] = ['callback_url is invalid']

        if errors:
            self._logger.debug('Client form not valid: %s', ', '.join(errors))
            return Failure(domain.validation_failure(
                ClientSchema.ordered(errors)))
        return Success()


class Service(object):
    """Registers an API client owned by the acting user."""

    def __init__(self, form: Form, repo: ClientRepository,
                 generator: SecretGenerator,
                 logger: logging.Logger = logger) -> None:
        self._form = form
        self._repo = repo
        self._generator = generator
        self._logger = logger

    def call(self, actor: domain.User, name: Optional[str],
             callback_url: Optional[str]) -> Result:
        """
        Register a new API client for ``actor``.

        Returns
        -------
        :class:`.Success`
            Carrying the created :class:`domain.Client`.
        :class:`.Failure`
            Carrying a ``validation_failure`` or :data:`domain.CONFLICT`.

        """
        params = {'name': name, 'callback_url': callback_url}
        return self._form.submit(params) \
            .bind(lambda _: self._create(actor, params))

    __call__ = call

    def _create(self, actor: domain.User, params: Mapping[str, str]) -> Result:
        try:
            client = self._repo.create(
                owner_id=actor.user_id,
                name=params['name'],
                callback_url=params['callback_url'],
                client_id=self._generator.generate(),
                client_secret=self._generator.generate()
            )
        except Conflict:
            self._logger.debug('Client rejected by the datastore')
            return self._form.submit(params) \
                .bind(lambda _: Failure(domain.CONFLICT))
        self._logger.debug('User %s registered client %s', actor.user_id,
                           client.id)
        return Success(client)
