"""Construction of the external Option collaborator.

The Option type (present/absent) is not part of this package. Callers hand
its constructors to ``ok()``, ``err()`` and ``transpose()``:

    some: one-argument callable building the present variant. Its instances
        expose ``unwrap()``.
    none: zero-argument callable building the absent variant.

When a constructor is omitted the collaborator falls back to Python's native
optional: absent is ``None`` and present is the bare payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from result_combinators.exceptions import ConstructionError

if TYPE_CHECKING:
    from collections.abc import Callable


class Present[T](Protocol):
    """Present variant of an Option collaborator."""

    def unwrap(self) -> T: ...


def construct_present[P, S](some: Callable[[P], S] | None, payload: P) -> S | P:
    """Build the present variant around payload.

    Raises:
        ConstructionError: If some cannot be invoked with payload.
    """
    if some is None:
        return payload
    return _construct(some, payload)


def construct_absent[N](none: Callable[[], N] | None) -> N | None:
    """Build the absent variant.

    Raises:
        ConstructionError: If none cannot be invoked.
    """
    if none is None:
        return None
    return _construct(none)


def is_variant(obj: object, constructor: object) -> bool:
    """Check whether obj was built by constructor.

    Only class constructors can be recognised; any other callable never matches.
    """
    return isinstance(constructor, type) and isinstance(obj, constructor)


def is_absent(obj: object, none: object | None) -> bool:
    """Check whether obj is the absent variant built by none (or native None)."""
    if none is None:
        return obj is None
    return is_variant(obj, none)


def _construct[R](constructor: Callable[..., R], *args: object) -> R:
    try:
        return constructor(*args)
    except Exception as e:
        raise ConstructionError(constructor, e) from e
