"""Rust-style Result type with Ok / Err variants and a combinator API."""

from result_combinators.exceptions import (
    ConstructionError,
    ResultException,
    SettingsError,
    UnreachableStateError,
    UnwrapErrOnOkError,
    UnwrapError,
    UnwrapOnErrError,
)
from result_combinators.result import Err, Ok, Result, as_result, is_err, is_ok
from result_combinators.settings import MessageSettings, get_settings, init_settings, load_settings, use_settings

__all__ = [
    "ConstructionError",
    "Err",
    "MessageSettings",
    "Ok",
    "Result",
    "ResultException",
    "SettingsError",
    "UnreachableStateError",
    "UnwrapErrOnOkError",
    "UnwrapError",
    "UnwrapOnErrError",
    "as_result",
    "get_settings",
    "init_settings",
    "is_err",
    "is_ok",
    "load_settings",
    "use_settings",
]
