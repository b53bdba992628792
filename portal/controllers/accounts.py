"""
Controllers for registration and login.

Users create an account with a username, an e-mail address and a password,
and then log in with their username and password.
"""

import logging
from http import HTTPStatus
from typing import Mapping, Optional

from flask import url_for

from .. import domain
from ..features import login as login_feature
from ..features import register as register_feature
from ..services.datastore import UserRepository
from .util import ResponseData, failed_with, hasher, succeeded_with, \
    unhandled

logger = logging.getLogger(__name__)

WRONG_CREDENTIALS_MESSAGE = 'Wrong username and password combo'


def register(params: Mapping[str, Optional[str]]) -> ResponseData:
    """Handle a submitted registration form."""
    logger.debug('Registration form submitted')
    repo = UserRepository()
    service = register_feature.Service(register_feature.Form(repo), repo,
                                       hasher())
    result = service.call(params.get('username'), params.get('email'),
                          params.get('password'))

    if succeeded_with(result, domain.User):
        return {'user_id': result.value.user_id}, HTTPStatus.SEE_OTHER, \
            {'Location': url_for('ui.login')}
    if failed_with(result, 'validation_failure'):
        return {'errors': result.error.errors}, HTTPStatus.BAD_REQUEST, {}
    if failed_with(result, domain.CONFLICT.code):
        return {'error': 'Please try again'}, HTTPStatus.CONFLICT, {}
    unhandled('register', result)


def login(params: Mapping[str, Optional[str]]) -> ResponseData:
    """
    Handle a submitted login form.

    On success the response data include the ``user_id`` of the
    authenticated user, for the route to store in the session.
    """
    logger.debug('Login form submitted')
    service = login_feature.Service(login_feature.Form(), UserRepository(),
                                    hasher())
    result = service.call(params.get('username'), params.get('password'))

    if succeeded_with(result, domain.User):
        return {'user_id': result.value.user_id}, HTTPStatus.SEE_OTHER, \
            {'Location': url_for('ui.dashboard')}
    if failed_with(result, domain.WRONG_CREDENTIALS.code):
        return {'error': WRONG_CREDENTIALS_MESSAGE}, \
            HTTPStatus.BAD_REQUEST, {}
    unhandled('login', result)
