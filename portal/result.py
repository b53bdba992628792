"""
Result and Maybe values for explicit control flow.

Services and forms return a :class:`Success` or a :class:`Failure` instead of
raising for expected failure paths (bad input, wrong credentials, missing
permissions). Repository lookups return :class:`Some` or :data:`Nothing`.

Both families support the same small set of combinators:

- ``bind`` (alias ``and_then``) chains a function that itself returns a
  result; the chain stops at the first failure (or absence), which is carried
  through unchanged.
- ``map`` transforms a present/successful value.
- ``or_else`` recovers from a failure (or absence).
- ``value_or`` extracts a value with a fallback; ``unwrap`` extracts it or
  raises :class:`UnwrapError`.

.. code-block:: python

   repo.find_by(username=username) \\
       .to_result(WRONG_CREDENTIALS) \\
       .bind(check_password)

"""

from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


class UnwrapError(RuntimeError):
    """Attempted to extract a value from a failure or an absent value."""


class Success(Generic[T]):
    """A successful outcome carrying ``value``."""

    __slots__ = ('value',)

    def __init__(self, value: T = None) -> None:  # type: ignore
        self.value = value

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def bind(self, func: Callable[[T], 'Result']) -> 'Result':
        """Pass the value to ``func``, which must return a result."""
        return func(self.value)

    and_then = bind

    def map(self, func: Callable[[T], U]) -> 'Success[U]':
        return Success(func(self.value))

    def or_else(self, func: Callable[[Any], 'Result']) -> 'Success[T]':
        return self

    def value_or(self, default: Any) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def failure(self) -> Any:
        raise UnwrapError(f'{self!r} is not a failure')

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Success) and other.value == self.value

    def __hash__(self) -> int:
        return hash(('Success', self.value))

    def __repr__(self) -> str:
        if self.value is None:
            return 'Success()'
        return f'Success({self.value!r})'


class Failure(Generic[T]):
    """A failed outcome carrying an ``error`` value."""

    __slots__ = ('error',)

    def __init__(self, error: T) -> None:
        self.error = error

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def bind(self, func: Callable[[Any], 'Result']) -> 'Failure[T]':
        return self

    and_then = bind

    def map(self, func: Callable[[Any], Any]) -> 'Failure[T]':
        return self

    def or_else(self, func: Callable[[T], 'Result']) -> 'Result':
        """Recover by passing the error to ``func``."""
        return func(self.error)

    def value_or(self, default: U) -> U:
        return default

    def unwrap(self) -> Any:
        raise UnwrapError(f'Cannot unwrap {self!r}')

    def failure(self) -> T:
        return self.error

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Failure) and other.error == self.error

    def __hash__(self) -> int:
        return hash(('Failure', self.error))

    def __repr__(self) -> str:
        return f'Failure({self.error!r})'


Result = Union[Success, Failure]


class Some(Generic[T]):
    """A value that is present."""

    __slots__ = ('value',)

    def __init__(self, value: T) -> None:
        if value is None:
            raise ValueError('Some() requires a value; use Nothing instead')
        self.value = value

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def bind(self, func: Callable[[T], Any]) -> Any:
        return func(self.value)

    and_then = bind

    def map(self, func: Callable[[T], U]) -> 'Maybe':
        return maybe(func(self.value))

    def or_else(self, func: Callable[[], Any]) -> 'Some[T]':
        return self

    def value_or(self, default: Any) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def to_result(self, error: Any = None) -> Success[T]:
        return Success(self.value)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Some) and other.value == self.value

    def __hash__(self) -> int:
        return hash(('Some', self.value))

    def __repr__(self) -> str:
        return f'Some({self.value!r})'


class _Nothing(object):
    """The absence of a value. Use the :data:`Nothing` singleton."""

    __slots__ = ()
    _instance: Optional['_Nothing'] = None

    def __new__(cls) -> '_Nothing':
        if cls._instance is None:
            cls._instance = super(_Nothing, cls).__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def bind(self, func: Callable[[Any], Any]) -> '_Nothing':
        return self

    and_then = bind

    def map(self, func: Callable[[Any], Any]) -> '_Nothing':
        return self

    def or_else(self, func: Callable[[], Any]) -> Any:
        """Recover by calling ``func`` with no arguments."""
        return func()

    def value_or(self, default: U) -> U:
        return default

    def unwrap(self) -> Any:
        raise UnwrapError('Cannot unwrap Nothing')

    def to_result(self, error: Any = None) -> Failure:
        """Convert absence into a :class:`Failure` carrying ``error``."""
        return Failure(error)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'Nothing'


Nothing = _Nothing()
Maybe = Union[Some, _Nothing]


def maybe(value: Optional[T]) -> Maybe:
    """Wrap ``value`` in :class:`Some`, or return :data:`Nothing` for None."""
    if value is None:
        return Nothing
    return Some(value)
