"""
Policy-based authorization of actions on records.

Each record type has a policy class, registered with :func:`policy`. A policy
is built from the actor and the record, and exposes one method per action
name that returns ``True`` if the action is allowed.

.. code-block:: python

   @policy(domain.Client)
   class ClientPolicy(Policy):
       def delete(self) -> bool:
           return self.record.owner_id == self.actor.user_id


   Authorization().call(user, client, 'delete')
   # Success('authorized') or Failure(UNAUTHORIZED)

Adding a policy for a new record type does not require changes to
:class:`Authorization`.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Type

from . import domain
from .result import Failure, Result, Success

logger = logging.getLogger(__name__)

AUTHORIZED = 'authorized'


class NoPolicy(RuntimeError):
    """No policy covers the requested record type or action."""


class Policy(object):
    """Base class for per-record-type policies."""

    def __init__(self, actor: domain.User, record: Any) -> None:
        self.actor = actor
        self.record = record


POLICIES: Dict[type, Type[Policy]] = {}
"""Registered policies, keyed by record type."""


def policy(record_type: type) -> Callable[[Type[Policy]], Type[Policy]]:
    """Register the decorated class as the policy for ``record_type``."""
    def register(policy_class: Type[Policy]) -> Type[Policy]:
        POLICIES[record_type] = policy_class
        return policy_class
    return register


@policy(domain.Client)
class ClientPolicy(Policy):
    """Only the owner of an API client may manage it."""

    def delete(self) -> bool:
        return bool(self.record.owner_id == self.actor.user_id)


class Authorization(object):
    """Decides whether an actor may perform an action on a record."""

    def __init__(self, policies: Optional[Mapping[type, Type[Policy]]] = None,
                 logger: logging.Logger = logger) -> None:
        self._policies = POLICIES if policies is None else policies
        self._logger = logger

    def call(self, actor: domain.User, record: Any, action: str) -> Result:
        """
        Evaluate the policy for ``record`` on ``action``.

        Returns
        -------
        :class:`.Success`
            Carrying ``'authorized'``.
        :class:`.Failure`
            Carrying :data:`domain.UNAUTHORIZED`.

        Raises
        ------
        :class:`NoPolicy`
            There is no policy for the record type, or the policy does not
            define ``action``.

        """
        check = self._lookup(actor, record, action)
        if check():
            self._logger.debug('%s authorized for %s', action,
                               type(record).__name__)
            return Success(AUTHORIZED)
        self._logger.debug('%s denied for %s', action, type(record).__name__)
        return Failure(domain.UNAUTHORIZED)

    __call__ = call

    def _lookup(self, actor: domain.User, record: Any,
                action: str) -> Callable[[], bool]:
        try:
            policy_class = self._policies[type(record)]
        except KeyError as e:
            raise NoPolicy(f'No policy for {type(record).__name__}') from e
        check = getattr(policy_class(actor, record), action, None)
        if action.startswith('_') or not callable(check):
            raise NoPolicy(f'{policy_class.__name__} does not define'
                           f' {action}')
        return check  # type: ignore
