"""Settings controlling how payloads appear in exception messages.

Payloads can be large or sensitive, so the text embedded in messages such as
``Called unwrap on Err value: <error>`` is rendered through the active
``MessageSettings``. The active settings live in a ContextVar, so threads and
asyncio tasks can scope them independently.

Usage:
    # Load from env vars / YAML at application entry
    init_settings(load_settings(create_config("result.yaml")))

    # Temporarily hide payloads
    with use_settings(redact_payloads=True):
        result.unwrap()  # UnwrapOnErrError("Called unwrap on Err value: <redacted>")
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from result_combinators.exceptions import SettingsError

if TYPE_CHECKING:
    from collections.abc import Generator

logger = logging.getLogger(__name__)

REDACTED = "<redacted>"

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class MessageSettings:
    """Rendering rules for payloads embedded in exception messages.

    Attributes:
        redact_payloads: Replace every payload with ``<redacted>``.
        max_payload_length: Truncate rendered payloads longer than this many
            characters and append ``...``. None or 0 disables truncation.
    """

    redact_payloads: bool = False
    max_payload_length: int | None = None

    def __post_init__(self) -> None:
        if self.max_payload_length is not None and self.max_payload_length < 0:
            raise SettingsError(f"max_payload_length must be non-negative, got {self.max_payload_length}")

    def render(self, payload: object) -> str:
        """Render a payload for inclusion in a message."""
        if self.redact_payloads:
            return REDACTED
        text = str(payload)
        if self.max_payload_length and len(text) > self.max_payload_length:
            return text[: self.max_payload_length] + "..."
        return text


_settings: ContextVar[MessageSettings] = ContextVar("message_settings", default=MessageSettings())


def get_settings() -> MessageSettings:
    """Get the settings active in the current context."""
    return _settings.get()


def init_settings(settings: MessageSettings | None = None) -> MessageSettings:
    """Install root settings. Call once at application entry.

    Args:
        settings: Settings to install. Defaults to ``MessageSettings()``.

    Returns:
        The installed settings.
    """
    installed = settings or MessageSettings()
    _settings.set(installed)
    return installed


def reset_settings() -> None:
    """Restore default settings. Primarily for testing."""
    _settings.set(MessageSettings())


@contextmanager
def use_settings(**overrides: bool | int | None) -> Generator[MessageSettings]:
    """Create child settings with overrides. Parent settings unchanged.

    Args:
        **overrides: MessageSettings fields to override.

    Yields:
        The child settings.
    """
    child = replace(get_settings(), **overrides)
    token = _settings.set(child)
    try:
        yield child
    finally:
        _settings.reset(token)


_DEFAULTS: dict[str, object] = {
    "messages": {
        "redact_payloads": False,
        # 0 disables truncation
        "max_payload_length": 0,
    },
}


def create_config(
    yaml_path: str = "result.yaml",
    env_prefix: str = "RESULT",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file. A missing file is ignored.
        env_prefix: Prefix for environment variables, e.g.
            ``RESULT__MESSAGES__REDACT_PAYLOADS=true``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS

    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def _parse_bool(key: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise SettingsError(f"{key} must be a boolean, got {raw!r}")


def _parse_length(key: str, raw: object) -> int | None:
    try:
        length = int(str(raw).strip())
    except ValueError:
        raise SettingsError(f"{key} must be an integer, got {raw!r}") from None
    if length < 0:
        raise SettingsError(f"{key} must be non-negative, got {length}")
    return length or None


def load_settings(cfg: ConfigurationSet | None = None) -> MessageSettings:
    """Build MessageSettings from a layered configuration.

    Env var values arrive as strings and are parsed here.

    Raises:
        SettingsError: If a value cannot be parsed.
    """
    if cfg is None:
        cfg = create_config()
    settings = MessageSettings(
        redact_payloads=_parse_bool("messages.redact_payloads", cfg["messages.redact_payloads"]),
        max_payload_length=_parse_length("messages.max_payload_length", cfg["messages.max_payload_length"]),
    )
    logger.debug("Loaded message settings: %s", settings)
    return settings
