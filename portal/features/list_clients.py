"""Listing the API clients of a user."""

from .. import domain
from ..result import Result, Success
from ..services.datastore import ClientRepository


class Service(object):
    """Lists the API clients owned by ``owner``."""

    def __init__(self, repo: ClientRepository, owner: domain.User) -> None:
        self._repo = repo
        self._owner = owner

    def call(self) -> Result:
        """Always a :class:`.Success` carrying a (possibly empty) list."""
        return Success(self._repo.owned_by(self._owner.user_id))

    __call__ = call
