"""Tests for :mod:`portal.result`."""

from unittest import TestCase

from portal.result import Failure, Nothing, Some, Success, UnwrapError, \
    maybe


def _half(value):
    if value % 2:
        return Failure('odd')
    return Success(value // 2)


class TestSuccess(TestCase):
    """A :class:`Success` carries a value through the chain."""

    def test_bind(self):
        """bind passes the value along and returns the function's result."""
        self.assertEqual(Success(8).bind(_half).bind(_half), Success(2))
        self.assertEqual(Success(6).bind(_half).bind(_half), Failure('odd'))

    def test_and_then_is_bind(self):
        self.assertEqual(Success(4).and_then(_half), Success(2))

    def test_map(self):
        self.assertEqual(Success(2).map(lambda v: v + 1), Success(3))

    def test_or_else(self):
        """or_else is not called on a success."""
        def fail(error):
            raise AssertionError('Should not be called')
        self.assertEqual(Success(1).or_else(fail), Success(1))

    def test_extract(self):
        self.assertEqual(Success(1).value_or(5), 1)
        self.assertEqual(Success(1).unwrap(), 1)
        with self.assertRaises(UnwrapError):
            Success(1).failure()

    def test_empty(self):
        """A success may carry no value."""
        result = Success()
        self.assertTrue(result.is_success())
        self.assertFalse(result.is_failure())
        self.assertIsNone(result.value)
        self.assertEqual(repr(result), 'Success()')


class TestFailure(TestCase):
    """A :class:`Failure` short-circuits the chain."""

    def test_bind_short_circuits(self):
        calls = []

        def record(value):
            calls.append(value)
            return Success(value)

        result = Failure('nope').bind(record).map(record)
        self.assertEqual(result, Failure('nope'))
        self.assertEqual(calls, [])

    def test_or_else(self):
        """or_else recovers using the error."""
        result = Failure('nope').or_else(lambda error: Success(len(error)))
        self.assertEqual(result, Success(4))

    def test_extract(self):
        self.assertEqual(Failure('nope').value_or(5), 5)
        self.assertEqual(Failure('nope').failure(), 'nope')
        with self.assertRaises(UnwrapError):
            Failure('nope').unwrap()

    def test_not_equal_to_success(self):
        self.assertNotEqual(Failure(1), Success(1))
        self.assertTrue(Failure(1).is_failure())


class TestMaybe(TestCase):
    """Tests for :class:`Some` and :data:`Nothing`."""

    def test_maybe(self):
        """None becomes Nothing; anything else is Some."""
        self.assertIs(maybe(None), Nothing)
        self.assertEqual(maybe(0), Some(0))
        self.assertTrue(maybe('').is_some())

    def test_some_requires_value(self):
        with self.assertRaises(ValueError):
            Some(None)

    def test_some_map_to_none(self):
        """Mapping a present value to None gives Nothing."""
        self.assertIs(Some({}).map(lambda d: d.get('missing')), Nothing)
        self.assertEqual(Some(2).map(lambda v: v * 2), Some(4))

    def test_nothing(self):
        self.assertTrue(Nothing.is_nothing())
        self.assertFalse(Nothing)
        self.assertIs(Nothing.map(lambda v: v + 1), Nothing)
        self.assertIs(Nothing.bind(lambda v: Some(v)), Nothing)
        self.assertEqual(Nothing.value_or('fallback'), 'fallback')
        self.assertEqual(Nothing.or_else(lambda: Some(1)), Some(1))
        with self.assertRaises(UnwrapError):
            Nothing.unwrap()

    def test_to_result(self):
        """Absence converts to a failure with the given error."""
        self.assertEqual(Some(1).to_result('missing'), Success(1))
        self.assertEqual(Nothing.to_result('missing'), Failure('missing'))

    def test_chain_lookup_into_result(self):
        """A lookup can feed a result chain."""
        table = {'a': 4, 'b': 3}

        def lookup(key):
            return maybe(table.get(key)).to_result('missing').bind(_half)

        self.assertEqual(lookup('a'), Success(2))
        self.assertEqual(lookup('b'), Failure('odd'))
        self.assertEqual(lookup('c'), Failure('missing'))
