"""Deletion of API clients by their owner."""

import logging

from .. import domain
from ..authorization import Authorization
from ..result import Failure, Result, Success
from ..services.datastore import ClientRepository, NoSuchRecord

logger = logging.getLogger(__name__)


class Service(object):
    """Deletes an API client, if ``owner`` is allowed to."""

    def __init__(self, repo: ClientRepository, authorization: Authorization,
                 owner: domain.User, logger: logging.Logger = logger) -> None:
        self._repo = repo
        self._authorization = authorization
        self._owner = owner
        self._logger = logger

    def call(self, record_id: int) -> Result:
        """
        Delete the API client with primary identifier ``record_id``.

        Returns
        -------
        :class:`.Success`
            Empty, once the client is deleted.
        :class:`.Failure`
            Carrying :data:`domain.NOT_FOUND` or :data:`domain.UNAUTHORIZED`.
            The client is left untouched.

        """
        return self._repo.find_by(id=record_id) \
            .to_result(domain.NOT_FOUND) \
            .bind(lambda client: self._authorization
                  .call(self._owner, client, 'delete')
                  .bind(lambda _: self._delete(client)))

    __call__ = call

    def _delete(self, client: domain.Client) -> Result:
        try:
            self._repo.delete(client)
        except NoSuchRecord:
            self._logger.debug('Client %s deleted concurrently', client.id)
            return Failure(domain.NOT_FOUND)
        self._logger.debug('User %s deleted client %s', self._owner.user_id,
                           client.id)
        return Success()
