"""Helpers for :mod:`portal.controllers`."""

import logging
from typing import Any, Dict, NoReturn, Tuple

from flask import current_app
from werkzeug.exceptions import InternalServerError

from .. import domain
from ..result import Failure, Result, Success
from ..services import Hasher, SecretGenerator

logger = logging.getLogger(__name__)

ResponseData = Tuple[Dict[str, Any], int, Dict[str, str]]


def hasher() -> Hasher:
    """Get a :class:`.Hasher` configured for the current application."""
    return Hasher(current_app.config['PASSWORD_SCHEMES'])


def secret_generator() -> SecretGenerator:
    """Get a :class:`.SecretGenerator` configured for this application."""
    return SecretGenerator(current_app.config['CLIENT_SECRET_LENGTH'])


def succeeded_with(result: Result, value_type: type) -> bool:
    """Determine whether ``result`` is a success carrying a ``value_type``."""
    return isinstance(result, Success) and isinstance(result.value, value_type)


def failed_with(result: Result, code: str) -> bool:
    """Determine whether ``result`` is a failure with error ``code``."""
    return isinstance(result, Failure) \
        and isinstance(result.error, domain.Error) \
        and result.error.code == code


def unhandled(operation: str, result: Any) -> NoReturn:
    """Fail loudly on a result that the controller does not handle."""
    logger.warning('%s: unhandled %s result', operation,
                   type(result).__name__)
    raise InternalServerError('Server Error')
