"""Tests for :mod:`portal.services.datastore`."""

from unittest import TestCase, mock

from flask import Flask
from sqlalchemy.exc import OperationalError

from ... import domain
from ...result import Nothing
from .. import datastore
from . import ClientRepository, Conflict, NoSuchRecord, Unavailable, \
    UserRepository


class DatastoreTestCase(TestCase):
    """Set up an in-memory database."""

    def setUp(self):
        self.app = Flask('test')
        self.app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite://'
        self.app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
        datastore.init_app(self.app)
        self.context = self.app.app_context()
        self.context.push()
        datastore.create_all()

    def tearDown(self):
        datastore.drop_all()
        self.context.pop()


class TestUserRepository(DatastoreTestCase):
    """Tests for :class:`UserRepository`."""

    def test_create_and_find(self):
        """A created user can be found by any of its unique columns."""
        repo = UserRepository()
        user = repo.create(username='tester', email='test@example.com',
                           password='hash')
        self.assertIsInstance(user, domain.User)
        self.assertIsNotNone(user.user_id)
        self.assertEqual(repo.find_by(username='tester').unwrap(), user)
        self.assertEqual(repo.find_by(email='test@example.com').unwrap(),
                         user)
        self.assertEqual(repo.find_by(user_id=user.user_id).unwrap(), user)

    def test_not_found(self):
        self.assertIs(UserRepository().find_by(username='nobody'), Nothing)

    def test_unique_username(self):
        """The database enforces unique usernames."""
        repo = UserRepository()
        repo.create(username='tester', email='test@example.com',
                    password='hash')
        with self.assertRaises(Conflict):
            repo.create(username='tester', email='other@example.com',
                        password='hash')
        # The session is still usable after the rollback.
        self.assertTrue(repo.find_by(username='tester').is_some())
        self.assertTrue(repo.find_by(email='other@example.com').is_nothing())

    def test_unavailable(self):
        """Connection problems are raised as :class:`Unavailable`."""
        session = mock.MagicMock()
        session.query.side_effect = OperationalError('SELECT', {}, None)
        with self.assertRaises(Unavailable):
            UserRepository(session=session).find_by(username='tester')


class TestClientRepository(DatastoreTestCase):
    """Tests for :class:`ClientRepository`."""

    def setUp(self):
        super(TestClientRepository, self).setUp()
        users = UserRepository()
        self.owner = users.create(username='owner', email='o@example.com',
                                  password='hash')
        self.repo = ClientRepository()

    def _create(self, name, client_id='id', client_secret='secret',
                owner_id=None):
        return self.repo.create(
            owner_id=owner_id or self.owner.user_id,
            name=name,
            callback_url='https://example.com/cb',
            client_id=client_id,
            client_secret=client_secret
        )

    def test_owned_by(self):
        """Clients are listed for their owner, oldest first."""
        first = self._create('first', 'id1')
        second = self._create('second', 'id2')
        self.assertEqual(self.repo.owned_by(self.owner.user_id),
                         [first, second])
        self.assertEqual(self.repo.owned_by(self.owner.user_id + 1), [])

    def test_unique_credentials(self):
        """The pair of client id and secret is unique."""
        self._create('first', 'id1', 'secret')
        self._create('second', 'id2', 'secret')
        with self.assertRaises(Conflict):
            self._create('third', 'id1', 'secret')

    def test_unique_name(self):
        self._create('first', 'id1')
        with self.assertRaises(Conflict):
            self._create('first', 'id2')

    def test_delete(self):
        client = self._create('first')
        self.repo.delete(client)
        self.assertTrue(self.repo.find_by(id=client.id).is_nothing())
        with self.assertRaises(NoSuchRecord):
            self.repo.delete(client)


class TestIsAvailable(DatastoreTestCase):
    """Tests for :func:`datastore.is_available`."""

    def test_available(self):
        self.assertTrue(datastore.is_available())
