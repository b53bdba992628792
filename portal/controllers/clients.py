"""Controllers for managing the API clients of the logged-in user."""

import logging
from http import HTTPStatus
from typing import Mapping, Optional

from flask import url_for
from werkzeug.exceptions import Forbidden, NotFound

from .. import domain
from ..authorization import Authorization
from ..features import create_client as create_feature
from ..features import delete_client as delete_feature
from ..features import list_clients as list_feature
from ..services.datastore import ClientRepository
from .util import ResponseData, failed_with, secret_generator, \
    succeeded_with, unhandled

logger = logging.getLogger(__name__)

CREATED_MESSAGE = 'Client successfully created'
DELETED_MESSAGE = 'Client Deleted'


def _serialize(client: domain.Client) -> dict:
    return client._asdict()


def list_clients(user: domain.User) -> ResponseData:
    """Get the API clients owned by ``user``."""
    result = list_feature.Service(ClientRepository(), user).call()
    if succeeded_with(result, list):
        return {'clients': [_serialize(c) for c in result.value]}, \
            HTTPStatus.OK, {}
    unhandled('list_clients', result)


def create_client(user: domain.User,
                  params: Mapping[str, Optional[str]]) -> ResponseData:
    """
    Register a new API client for ``user``.

    Parameters
    ----------
    user : :class:`domain.User`
        The authenticated user, who will own the client.
    params : Mapping
        Submitted form data, with ``name`` and ``callback_url``.

    Returns
    -------
    dict
        On success, the created client and a ``message`` to flash.
    int
        HTTP status code.
    dict
        Headers to add to the response.

    """
    repo = ClientRepository()
    service = create_feature.Service(create_feature.Form(repo), repo,
                                     secret_generator())
    result = service.call(user, params.get('name'),
                          params.get('callback_url'))

    if succeeded_with(result, domain.Client):
        logger.info('Created client %s', result.value.id)
        return {'client': _serialize(result.value),
                'message': CREATED_MESSAGE}, \
            HTTPStatus.SEE_OTHER, {'Location': url_for('ui.dashboard')}
    if failed_with(result, 'validation_failure'):
        return {'errors': result.error.errors}, HTTPStatus.BAD_REQUEST, {}
    if failed_with(result, domain.CONFLICT.code):
        return {'error': 'Please try again'}, HTTPStatus.CONFLICT, {}
    unhandled('create_client', result)


def delete_client(user: domain.User, record_id: int) -> ResponseData:
    """
    Delete the API client ``record_id``, if ``user`` owns it.

    Raises
    ------
    :class:`NotFound`
        If there is no such client.
    :class:`Forbidden`
        If ``user`` does not own the client.

    """
    service = delete_feature.Service(ClientRepository(), Authorization(),
                                     user)
    result = service.call(record_id)

    if result.is_success():
        logger.info('Deleted client %s', record_id)
        return {'message': DELETED_MESSAGE}, HTTPStatus.SEE_OTHER, \
            {'Location': url_for('ui.dashboard')}
    if failed_with(result, domain.NOT_FOUND.code):
        raise NotFound('No such client')
    if failed_with(result, domain.UNAUTHORIZED.code):
        raise Forbidden('You may not delete this client')
    unhandled('delete_client', result)
