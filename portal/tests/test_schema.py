"""Tests for :mod:`portal.schema`."""

from unittest import TestCase

from wtforms import StringField

from portal.schema import Schema, filled, length, matches


class ExampleSchema(Schema):
    name = StringField('Name', validators=[filled(), length(min=2, max=5)])
    code = StringField('Code', validators=[filled(), matches(r'^[A-Z]+$')])
    note = StringField('Note', validators=[length(min=0, max=3)])


class TestEvaluate(TestCase):
    """Tests for :meth:`Schema.evaluate`."""

    def test_valid(self):
        """Valid input produces no errors."""
        self.assertEqual(
            ExampleSchema.evaluate({'name': 'abc', 'code': 'XY'}),
            {}
        )

    def test_missing_and_none(self):
        """Missing keys and None values are both reported as not filled."""
        errors = ExampleSchema.evaluate({'name': None})
        self.assertEqual(errors, {'name': ['name must be filled'],
                                  'code': ['code must be filled']})

    def test_filled_stops_other_rules(self):
        """A blank value is only reported as not filled."""
        errors = ExampleSchema.evaluate({'name': '', 'code': 'XY'})
        self.assertEqual(errors, {'name': ['name must be filled']})

    def test_all_fields_are_checked(self):
        """Every field is checked, and errors keep declaration order."""
        errors = ExampleSchema.evaluate({'name': 'abcdefg', 'code': 'xy',
                                         'note': 'long'})
        self.assertEqual(list(errors), ['name', 'code', 'note'])
        self.assertEqual(errors['name'], ['name length must be within 2 - 5'])
        self.assertEqual(errors['code'], ['code is in invalid format'])
        self.assertEqual(errors['note'], ['note length must be within 0 - 3'])


class TestOrdered(TestCase):
    """Tests for :meth:`Schema.ordered`."""

    def test_declaration_order(self):
        """Errors added after evaluation are put back in field order."""
        errors = {'note': ['note x'], 'name': ['name y']}
        self.assertEqual(list(ExampleSchema.ordered(errors)),
                         ['name', 'note'])
