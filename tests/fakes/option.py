"""Minimal Option collaborator used to exercise ok(), err() and transpose()."""


class Some:
    def __init__(self, value: object) -> None:
        self._value = value

    def unwrap(self) -> object:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))


class Nothing:
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash("Nothing")


class BrokenSome:
    def __init__(self, value: object) -> None:
        raise RuntimeError(f"cannot wrap {value}")

    def unwrap(self) -> object:
        raise AssertionError("unreachable")


class BrokenNothing:
    def __init__(self) -> None:
        raise RuntimeError("cannot build absent value")
