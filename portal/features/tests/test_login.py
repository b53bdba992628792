"""Tests for :mod:`portal.features.login`."""

from unittest import TestCase

from portal import domain
from portal.factory import create_web_app
from portal.features import login
from portal.result import Failure, Success
from portal.services import Hasher, datastore
from portal.services.datastore import UserRepository


class TestLogin(TestCase):
    """Tests for :class:`login.Service`."""

    def setUp(self):
        self.app = create_web_app()
        self.context = self.app.app_context()
        self.context.push()
        datastore.create_all()

        self.repo = UserRepository()
        hasher = Hasher()
        self.user = self.repo.create(username='tester',
                                     email='test@example.com',
                                     password=hasher.hash('password1'))
        self.service = login.Service(login.Form(), self.repo, hasher)

    def tearDown(self):
        datastore.drop_all()
        self.context.pop()

    def test_correct_credentials(self):
        """The user is returned for the right username and password."""
        self.assertEqual(self.service.call('tester', 'password1'),
                         Success(self.user))

    def test_failures_are_indistinguishable(self):
        """Every kind of bad login gives the same failure."""
        results = [
            self.service.call('nobody', 'password1'),
            self.service.call('tester', 'password2'),
            self.service.call('', ''),
            self.service.call(None, 'password1'),
            self.service.call('tester', None),
        ]
        for result in results:
            self.assertEqual(result, Failure(domain.WRONG_CREDENTIALS))
            self.assertIsNone(result.error.errors)

    def test_form_hides_field_errors(self):
        """The form does not say which field is missing."""
        self.assertEqual(login.Form().submit({'username': 'tester'}),
                         Failure(domain.WRONG_CREDENTIALS))
        self.assertEqual(login.Form().submit({'username': 'tester',
                                              'password': 'x'}),
                         Success())
