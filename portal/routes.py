"""Provides Flask integration for the portal user interface."""

import logging
from functools import wraps
from http import HTTPStatus
from typing import Any, Callable

from flask import Blueprint, Response, current_app, flash, \
    get_flashed_messages, jsonify, make_response, redirect, request, \
    session, url_for
from werkzeug.exceptions import ServiceUnavailable

from .controllers import accounts, clients
from .controllers.util import ResponseData
from .result import Nothing
from .services import datastore
from .services.datastore import UserRepository

logger = logging.getLogger(__name__)
blueprint = Blueprint('ui', __name__, url_prefix='')

SESSION_KEY = 'auth_id'


def authenticated(func: Callable) -> Callable:
    """Load the logged-in user into ``request.auth``, or redirect to login."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        user_id = session.get(SESSION_KEY)
        user = Nothing if user_id is None \
            else UserRepository().find_by(user_id=user_id)
        if user.is_nothing():
            logger.debug('No authenticated user; redirecting to login')
            session.pop(SESSION_KEY, None)
            return redirect(url_for('ui.login'), code=HTTPStatus.SEE_OTHER)
        request.auth = user.unwrap()
        return func(*args, **kwargs)
    return wrapper


def anonymous_only(func: Callable) -> Callable:
    """Redirect logged-in users to the dashboard."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if session.get(SESSION_KEY) is not None:
            next_page = current_app.config['DEFAULT_LOGIN_REDIRECT_URL']
            return redirect(next_page, code=HTTPStatus.SEE_OTHER)
        return func(*args, **kwargs)
    return wrapper


def _respond(data: ResponseData) -> Response:
    body, code, headers = data
    if code == HTTPStatus.SEE_OTHER:
        response = redirect(headers['Location'], code=code)
    else:
        response = make_response(jsonify(body), code)
    for key, value in headers.items():
        response.headers[key] = value
    return response


def _fields(*names: str) -> Response:
    """Describe the fields a form submission expects."""
    return make_response(jsonify({'fields': list(names)}), HTTPStatus.OK)


@blueprint.route('/register', methods=['GET', 'POST'])
@anonymous_only
def register() -> Response:
    """Create a new user account."""
    if request.method == 'GET':
        return _fields('username', 'email', 'password')
    return _respond(accounts.register(request.form))


@blueprint.route('/login', methods=['GET', 'POST'])
@anonymous_only
def login() -> Response:
    """Log in with a username and password."""
    if request.method == 'GET':
        return _fields('username', 'password')
    data, code, headers = accounts.login(request.form)
    if code == HTTPStatus.SEE_OTHER:
        session.clear()
        session[SESSION_KEY] = data.pop('user_id')
    return _respond((data, code, headers))


@blueprint.route('/logout', methods=['GET'])
def logout() -> Response:
    """Forget the logged-in user."""
    session.pop(SESSION_KEY, None)
    return redirect(url_for('ui.login'), code=HTTPStatus.SEE_OTHER)


@blueprint.route('/', methods=['GET'])
@authenticated
def dashboard() -> Response:
    """List the API clients of the logged-in user."""
    data, code, headers = clients.list_clients(request.auth)
    data['messages'] = get_flashed_messages()
    return _respond((data, code, headers))


@blueprint.route('/clients/new', methods=['GET'])
@authenticated
def new_client() -> Response:
    """Describe the fields for registering an API client."""
    return _fields('name', 'callback_url')


@blueprint.route('/clients', methods=['POST'])
@authenticated
def create_client() -> Response:
    """Register a new API client."""
    data, code, headers = clients.create_client(request.auth, request.form)
    if 'message' in data:
        flash(data.pop('message'))
    return _respond((data, code, headers))


@blueprint.route('/clients/<int:client_id>/delete', methods=['GET', 'POST'])
@authenticated
def delete_client(client_id: int) -> Response:
    """Delete one of the user's API clients."""
    data, code, headers = clients.delete_client(request.auth, client_id)
    if 'message' in data:
        flash(data.pop('message'))
    return _respond((data, code, headers))


@blueprint.route('/status', methods=['GET'])
def service_status() -> Response:
    """Health check endpoint."""
    if not datastore.is_available():
        raise ServiceUnavailable('Database is not available')
    return make_response(jsonify({'status': 'OK'}), HTTPStatus.OK)
