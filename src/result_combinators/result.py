"""Result type for explicit error handling.

Provides a Result[T, E] type with Ok and Err variants, plus combinators for
transforming, inspecting and extracting the payload without raising for
ordinary control flow.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f"not a number: {raw}")
        return Ok(int(raw))

    port = parse_port(raw).map(lambda p: p + 1).unwrap_or(8080)

    match parse_port(raw):
        case Ok(value):
            serve(value)
        case Err(error):
            log(error)

Extracting from the wrong variant (``unwrap()`` on Err, ``unwrap_err()`` on Ok)
is a programmer error and raises; see ``result_combinators.exceptions``.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Never, TypeGuard, cast, final

from result_combinators.exceptions import UnreachableStateError, UnwrapErrOnOkError, UnwrapOnErrError
from result_combinators.option import construct_absent, construct_present, is_absent, is_variant
from result_combinators.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from result_combinators.option import Present

# Text-like values are single payloads, not collections of characters.
_SCALAR_TYPES = (str, bytes, bytearray)


def _elements(value: object) -> Iterator[object]:
    if isinstance(value, _SCALAR_TYPES):
        yield value
    elif isinstance(value, Mapping):
        yield from value.values()
    elif isinstance(value, Collection):
        yield from value
    else:
        yield value


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        """Returns True if this is an Ok result."""
        return True

    def is_err(self) -> bool:
        """Returns False for Ok results."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Returns pred(value)."""
        return pred(self.value)

    def is_err_and(self, pred: Callable[[object], bool]) -> bool:
        """Returns False without calling pred."""
        return False

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_or(self, default: object) -> T:
        """Returns the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, fn: Callable[[object], object]) -> T:
        """Returns the contained value without calling fn."""
        return self.value

    def unwrap_err(self) -> Never:
        """Raises UnwrapErrOnOkError since this is not an Err."""
        raise UnwrapErrOnOkError("Called unwrap_err on Ok value", self.value)

    def expect(self, msg: str) -> T:
        """Returns the contained value."""
        return self.value

    def expect_err(self, msg: str) -> Never:
        """Raises UnwrapErrOnOkError with msg and the contained value."""
        raise UnwrapErrOnOkError(f"{msg}: {get_settings().render(self.value)}", self.value)

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Applies fn to the contained value, returning Ok(fn(value))."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[object], object]) -> Ok[T]:
        """Returns self unchanged since this is Ok."""
        return self

    def map_or[U](self, default: U, fn: Callable[[T], U]) -> U:
        """Returns fn(value), ignoring the default."""
        return fn(self.value)

    def map_or_else[U](self, default_fn: Callable[[object], U], fn: Callable[[T], U]) -> U:
        """Returns fn(value) without calling default_fn."""
        return fn(self.value)

    def inspect(self, fn: Callable[[T], object]) -> Ok[T]:
        """Calls fn with the contained value and returns self."""
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[object], object]) -> Ok[T]:
        """Returns self without calling fn."""
        return self

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Returns other."""
        return other

    def and_then[U, E](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Applies fn to the contained value, returning its result."""
        return fn(self.value)

    def or_(self, other: Result[T, object]) -> Ok[T]:
        """Returns self unchanged since this is Ok."""
        return self

    def or_else(self, fn: Callable[[object], Result[T, object]]) -> Ok[T]:
        """Returns self unchanged since this is Ok."""
        return self

    def flatten(self) -> Result[object, object]:
        """Returns the contained value if it is itself a Result, otherwise self."""
        if isinstance(self.value, (Ok, Err)):
            return cast("Result[object, object]", self.value)
        return self

    def into_ok(self) -> T:
        """Returns the contained value."""
        return self.value

    def into_err(self) -> Never:
        """Raises UnreachableStateError; an Ok never holds an error."""
        raise UnreachableStateError("Called into_err on Ok value, should be unreachable")

    def iter(self) -> Iterator[object]:
        """Returns a fresh iterator over the contained value.

        Collections yield their elements (mappings yield their values); any
        other value, including strings and bytes, is yielded once.
        """
        return _elements(self.value)

    def ok[S](self, some: Callable[[T], S] | None = None) -> S | T:
        """Returns the present Option variant wrapping the contained value.

        Raises:
            ConstructionError: If some cannot be invoked.
        """
        return construct_present(some, self.value)

    def err[N](self, none: Callable[[], N] | None = None) -> N | None:
        """Returns the absent Option variant.

        Raises:
            ConstructionError: If none cannot be invoked.
        """
        return construct_absent(none)

    def transpose[N, S](
        self,
        none: Callable[[], N] | None = None,
        some: Callable[[Ok[object]], S] | None = None,
    ) -> N | S | Ok[T] | None:
        """Turns Ok(Option[X]) into Option[Ok[X]].

        An absent value gives a fresh absent variant. A present value is
        unwrapped and returned as a fresh present variant wrapping Ok(inner).
        Any other value leaves self unchanged.

        Raises:
            ConstructionError: If a constructor cannot be invoked.
        """
        if is_absent(self.value, none):
            return construct_absent(none)
        if some is not None and is_variant(self.value, some):
            inner = cast("Present[object]", self.value).unwrap()
            return construct_present(some, Ok(inner))
        return self

    def match[U](self, on_ok: Callable[[T], U], on_err: Callable[[object], U]) -> U:
        """Returns on_ok(value)."""
        return on_ok(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error."""

    error: E

    def is_ok(self) -> bool:
        """Returns False for Err results."""
        return False

    def is_err(self) -> bool:
        """Returns True if this is an Err result."""
        return True

    def is_ok_and(self, pred: Callable[[object], bool]) -> bool:
        """Returns False without calling pred."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Returns pred(error)."""
        return pred(self.error)

    def unwrap(self) -> Never:
        """Raises UnwrapOnErrError with the contained error."""
        raise UnwrapOnErrError(f"Called unwrap on Err value: {get_settings().render(self.error)}", self.error)

    def unwrap_or[_T](self, default: _T) -> _T:  # noqa: UP049
        """Returns the default value."""
        return default

    def unwrap_or_else[_T](self, fn: Callable[[E], _T]) -> _T:  # noqa: UP049
        """Returns fn(error)."""
        return fn(self.error)

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def expect(self, msg: str) -> Never:
        """Raises UnwrapOnErrError with msg and the contained error."""
        raise UnwrapOnErrError(f"{msg}: {get_settings().render(self.error)}", self.error)

    def expect_err(self, msg: str) -> E:
        """Returns the contained error."""
        return self.error

    def map(self, fn: Callable[[object], object]) -> Err[E]:
        """Returns self unchanged since this is Err."""
        return self

    def map_err[_F](self, fn: Callable[[E], _F]) -> Err[_F]:  # noqa: UP049
        """Applies fn to the contained error, returning Err(fn(error))."""
        return Err(fn(self.error))

    def map_or[_U](self, default: _U, fn: Callable[[object], _U]) -> _U:  # noqa: UP049
        """Returns the default value without calling fn."""
        return default

    def map_or_else[_U](self, default_fn: Callable[[E], _U], fn: Callable[[object], _U]) -> _U:  # noqa: UP049
        """Returns default_fn(error) without calling fn."""
        return default_fn(self.error)

    def inspect(self, fn: Callable[[object], object]) -> Err[E]:
        """Returns self without calling fn."""
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Err[E]:
        """Calls fn with the contained error and returns self."""
        fn(self.error)
        return self

    def and_(self, other: Result[object, E]) -> Err[E]:
        """Returns self unchanged since this is Err."""
        return self

    def and_then(self, fn: Callable[[object], Result[object, E]]) -> Err[E]:
        """Returns self unchanged since this is Err."""
        return self

    def or_[_T, _F](self, other: Result[_T, _F]) -> Result[_T, _F]:  # noqa: UP049
        """Returns other."""
        return other

    def or_else[_T, _F](self, fn: Callable[[E], Result[_T, _F]]) -> Result[_T, _F]:  # noqa: UP049
        """Applies fn to the contained error, returning its result."""
        return fn(self.error)

    def flatten(self) -> Result[object, object]:
        """Returns the contained error if it is itself a Result, otherwise self."""
        if isinstance(self.error, (Ok, Err)):
            return cast("Result[object, object]", self.error)
        return self

    def into_ok(self) -> Never:
        """Raises UnreachableStateError; an Err never holds a value."""
        raise UnreachableStateError("Called into_ok on Err value, should be unreachable")

    def into_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def iter(self) -> Iterator[object]:
        """Returns a fresh, empty iterator."""
        return iter(())

    def ok[_N](self, none: Callable[[], _N] | None = None) -> _N | None:  # noqa: UP049
        """Returns the absent Option variant.

        Raises:
            ConstructionError: If none cannot be invoked.
        """
        return construct_absent(none)

    def err[_S](self, some: Callable[[E], _S] | None = None) -> _S | E:  # noqa: UP049
        """Returns the present Option variant wrapping the contained error.

        Raises:
            ConstructionError: If some cannot be invoked.
        """
        return construct_present(some, self.error)

    def transpose[_S](  # noqa: UP049
        self,
        none: Callable[[], object] | None = None,
        some: Callable[[Err[E]], _S] | None = None,
    ) -> _S | Err[E]:
        """Returns the present Option variant wrapping a fresh Err(error).

        Raises:
            ConstructionError: If some cannot be invoked.
        """
        return construct_present(some, Err(self.error))

    def match[_U](self, on_ok: Callable[[object], _U], on_err: Callable[[E], _U]) -> _U:  # noqa: UP049
        """Returns on_err(error)."""
        return on_err(self.error)


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Returns True if result is an Ok, narrowing its type."""
    match result:
        case Ok():
            return True
        case _:
            return False


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Returns True if result is an Err, narrowing its type."""
    match result:
        case Err():
            return True
        case _:
            return False


def as_result[**P, R](
    *exceptions: type[Exception],
) -> Callable[[Callable[P, R]], Callable[P, Result[R, Exception]]]:
    """Decorate a raising function so it returns a Result instead.

    The return value is wrapped in Ok. Any of the listed exceptions is caught
    and wrapped in Err; anything else propagates.

    Usage:
        @as_result(ValueError)
        def parse(raw: str) -> int:
            return int(raw)

        parse("42")    # Ok(42)
        parse("nope")  # Err(ValueError(...))

    Raises:
        TypeError: If no exception types are given.
    """
    if not exceptions:
        raise TypeError("as_result() requires at least one exception type")

    def decorator(fn: Callable[P, R]) -> Callable[P, Result[R, Exception]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R, Exception]:
            try:
                return Ok(fn(*args, **kwargs))
            except exceptions as e:
                return Err(e)

        return wrapper

    return decorator
