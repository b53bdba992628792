"""
Declarative validation schemas.

A schema is a :class:`wtforms.Form` whose fields carry the per-field rules.
:meth:`Schema.evaluate` runs every field (a failing field never prevents the
others from being checked) and returns the violations as
:data:`portal.domain.FieldErrors`, in field declaration order, with each
message prefixed by the field name.

.. code-block:: python

   class LoginSchema(Schema):
       username = StringField('Username', validators=[filled()])

   LoginSchema.evaluate({'username': ''})
   # {'username': ['username must be filled']}

"""

from typing import Mapping, Optional

from werkzeug.datastructures import MultiDict
from wtforms import Form
from wtforms.validators import DataRequired, Length, Regexp

from .domain import FieldErrors

MUST_BE_FILLED = 'must be filled'
LENGTH_WITHIN = 'length must be within %(min)d - %(max)d'
INVALID_FORMAT = 'is in invalid format'


def filled() -> DataRequired:
    """Value must be present and not blank. Stops further rules on failure."""
    return DataRequired(message=MUST_BE_FILLED)


def length(min: int, max: int) -> Length:
    """Value length must fall within ``[min, max]``."""
    return Length(min=min, max=max, message=LENGTH_WITHIN)


def matches(pattern: str) -> Regexp:
    """Value must match ``pattern``."""
    return Regexp(pattern, message=INVALID_FORMAT)


class Schema(Form):
    """Base class for validation schemas."""

    @classmethod
    def evaluate(cls, raw: Mapping[str, Optional[str]]) -> FieldErrors:
        """
        Evaluate the schema rules against raw, untyped input.

        Parameters
        ----------
        raw : mapping
            Field names mapped to submitted values. Keys that are missing or
            mapped to ``None`` are treated as absent.

        Returns
        -------
        dict
            Field names mapped to full error messages. Fields without
            violations are not included.

        """
        formdata = MultiDict([(key, value) for key, value in raw.items()
                              if value is not None])
        form = cls(formdata)
        form.validate()
        errors: FieldErrors = {}
        for field in form:
            if field.errors:
                errors[field.name] = [f'{field.name} {message}'
                                      for message in field.errors]
        return errors

    @classmethod
    def ordered(cls, errors: FieldErrors) -> FieldErrors:
        """Rebuild ``errors`` in field declaration order."""
        names = [field.name for field in cls()]
        return {name: errors[name] for name in names if name in errors}
