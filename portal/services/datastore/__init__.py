"""
Database integration for persisting users and API clients.

Each repository wraps one entity table and returns domain objects, never ORM
instances. Lookups return a :class:`portal.result.Maybe`.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm.session import Session

from . import util, models
from ... import domain
from ...result import Maybe, maybe

logger = logging.getLogger(__name__)

E = TypeVar('E', domain.User, domain.Client)


class Unavailable(RuntimeError):
    """The database is temporarily unavailable."""


class Conflict(RuntimeError):
    """A write was rejected by a uniqueness constraint."""


class NoSuchRecord(RuntimeError):
    """A record was requested for deletion that does not exist."""


init_app = util.init_app
create_all = util.create_all
drop_all = util.drop_all
is_available = util.is_available


class Repository(Generic[E]):
    """Lookup, creation and deletion of one kind of entity."""

    model: Type[Any]
    key: str
    """Name of the primary key column, shared with the domain object."""

    def __init__(self, session: Optional[Session] = None) -> None:
        """Use ``session``, or the application's session if not provided."""
        self._session = session

    @property
    def session(self) -> Session:
        if self._session is None:
            return util.current_session()
        return self._session

    def to_domain(self, row: Any) -> E:
        raise NotImplementedError('Implement in a subclass')

    def find_by(self, **criteria: Any) -> Maybe:
        """
        Find the first record matching all of ``criteria``.

        Returns
        -------
        :class:`.Some` or :data:`.Nothing`

        """
        try:
            row = self.session.query(self.model) \
                .filter_by(**criteria) \
                .first()
        except OperationalError as e:
            raise Unavailable('Database is temporarily unavailable') from e
        return maybe(row).map(self.to_domain)

    def create(self, **fields: Any) -> E:
        """
        Persist a new record.

        Raises
        ------
        :class:`Conflict`
            A uniqueness constraint rejected the record.
        :class:`Unavailable`
            The database could not be reached.

        """
        row = self.model(**fields)
        try:
            with util.transaction(self.session) as session:
                session.add(row)
        except IntegrityError as e:
            logger.debug('Create rejected by constraint: %s', e.orig)
            raise Conflict(f'Could not create {self.model.__tablename__}'
                           ' record') from e
        except OperationalError as e:
            raise Unavailable('Database is temporarily unavailable') from e
        return self.to_domain(row)

    def delete(self, entity: E) -> None:
        """Delete the record behind ``entity``."""
        identifier = getattr(entity, self.key)
        try:
            with util.transaction(self.session) as session:
                row = session.get(self.model, identifier)
                if row is None:
                    raise NoSuchRecord(f'No {self.model.__tablename__}'
                                       f' record {identifier}')
                session.delete(row)
        except OperationalError as e:
            raise Unavailable('Database is temporarily unavailable') from e


class UserRepository(Repository[domain.User]):
    """Persistence for :class:`domain.User`."""

    model = models.DBUser
    key = 'user_id'

    def to_domain(self, row: models.DBUser) -> domain.User:
        return domain.User(
            user_id=row.user_id,
            username=row.username,
            email=row.email,
            password=row.password
        )


class ClientRepository(Repository[domain.Client]):
    """Persistence for :class:`domain.Client`."""

    model = models.DBClient
    key = 'id'

    def to_domain(self, row: models.DBClient) -> domain.Client:
        return domain.Client(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            callback_url=row.callback_url,
            client_id=row.client_id,
            client_secret=row.client_secret
        )

    def owned_by(self, owner_id: int) -> List[domain.Client]:
        """All clients registered by the user ``owner_id``, oldest first."""
        try:
            rows = self.session.query(models.DBClient) \
                .filter(models.DBClient.owner_id == owner_id) \
                .order_by(models.DBClient.id) \
                .all()
        except OperationalError as e:
            raise Unavailable('Database is temporarily unavailable') from e
        return [self.to_domain(row) for row in rows]
