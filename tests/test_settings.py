"""Tests for message settings and their configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from result_combinators.exceptions import SettingsError, UnwrapErrOnOkError, UnwrapOnErrError
from result_combinators.result import Err, Ok
from result_combinators.settings import (
    REDACTED,
    MessageSettings,
    create_config,
    get_settings,
    init_settings,
    load_settings,
    reset_settings,
    use_settings,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestMessageSettings:
    """Tests for the MessageSettings dataclass."""

    def test_default_values(self) -> None:
        """Defaults render payloads verbatim."""
        settings = MessageSettings()
        assert settings.redact_payloads is False
        assert settings.max_payload_length is None
        assert settings.render({"a": 1}) == "{'a': 1}"

    def test_frozen(self) -> None:
        """MessageSettings is immutable."""
        settings = MessageSettings()
        with pytest.raises(AttributeError):
            settings.redact_payloads = True  # type: ignore[misc]

    def test_redact(self) -> None:
        assert MessageSettings(redact_payloads=True).render("secret") == REDACTED

    def test_truncate(self) -> None:
        settings = MessageSettings(max_payload_length=3)
        assert settings.render("abcdef") == "abc..."
        assert settings.render("abc") == "abc"

    def test_zero_length_disables_truncation(self) -> None:
        assert MessageSettings(max_payload_length=0).render("boom") == "boom"

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(SettingsError):
            MessageSettings(max_payload_length=-1)


class TestSettingsScope:
    def test_defaults_without_init(self) -> None:
        assert get_settings() == MessageSettings()

    def test_init_settings(self) -> None:
        installed = init_settings(MessageSettings(redact_payloads=True))
        assert get_settings() is installed

    def test_init_settings_defaults(self) -> None:
        init_settings(MessageSettings(redact_payloads=True))
        assert init_settings() == MessageSettings()

    def test_use_settings_restores_parent(self) -> None:
        init_settings(MessageSettings(max_payload_length=10))
        with use_settings(redact_payloads=True) as child:
            assert child.redact_payloads is True
            assert child.max_payload_length == 10
            assert get_settings() is child
        assert get_settings().redact_payloads is False

    def test_reset_settings(self) -> None:
        init_settings(MessageSettings(redact_payloads=True))
        reset_settings()
        assert get_settings() == MessageSettings()


class TestMessagesUseSettings:
    def test_zero_length_keeps_error_text(self) -> None:
        with use_settings(max_payload_length=0), pytest.raises(UnwrapOnErrError) as exc_info:
            Err("boom").expect("Failed")
        assert str(exc_info.value) == "Failed: boom"

    def test_unwrap_redacted(self) -> None:
        with use_settings(redact_payloads=True), pytest.raises(UnwrapOnErrError) as exc_info:
            Err("password=hunter2").unwrap()
        assert str(exc_info.value) == f"Called unwrap on Err value: {REDACTED}"
        assert exc_info.value.payload == "password=hunter2"

    def test_expect_truncated(self) -> None:
        with use_settings(max_payload_length=4), pytest.raises(UnwrapOnErrError) as exc_info:
            Err("a very long error").expect("Failed")
        assert str(exc_info.value) == "Failed: a ve..."

    def test_expect_err_redacted(self) -> None:
        with use_settings(redact_payloads=True), pytest.raises(UnwrapErrOnOkError) as exc_info:
            Ok("token").expect_err("Expected failure")
        assert str(exc_info.value) == f"Expected failure: {REDACTED}"


@pytest.mark.usefixtures("clean_env")
class TestCreateConfig:
    def test_returns_defaults(self) -> None:
        cfg = create_config(yaml_path="/nonexistent/result.yaml")
        assert isinstance(cfg, ConfigurationSet)
        assert cfg["messages.redact_payloads"] is False
        assert cfg["messages.max_payload_length"] == 0

    def test_yaml_overrides_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "result.yaml"
        yaml_file.write_text("messages:\n  max_payload_length: 20\n")
        cfg = create_config(yaml_path=str(yaml_file))
        assert cfg["messages.max_payload_length"] == 20
        # Defaults still apply for unset keys
        assert cfg["messages.redact_payloads"] is False

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        yaml_file = tmp_path / "result.yaml"
        yaml_file.write_text("messages:\n  redact_payloads: false\n")
        monkeypatch.setenv("RESULT__MESSAGES__REDACT_PAYLOADS", "true")
        cfg = create_config(yaml_path=str(yaml_file))
        assert cfg["messages.redact_payloads"] == "true"  # env vars are strings


@pytest.mark.usefixtures("clean_env")
class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings(create_config(yaml_path="/nonexistent/result.yaml"))
        assert settings == MessageSettings()

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "result.yaml"
        yaml_file.write_text("messages:\n  redact_payloads: true\n  max_payload_length: 12\n")
        settings = load_settings(create_config(yaml_path=str(yaml_file)))
        assert settings == MessageSettings(redact_payloads=True, max_payload_length=12)

    def test_from_env_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT__MESSAGES__REDACT_PAYLOADS", "yes")
        monkeypatch.setenv("RESULT__MESSAGES__MAX_PAYLOAD_LENGTH", "8")
        settings = load_settings(create_config(yaml_path="/nonexistent/result.yaml"))
        assert settings == MessageSettings(redact_payloads=True, max_payload_length=8)

    def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MYAPP__MESSAGES__REDACT_PAYLOADS", "1")
        settings = load_settings(create_config(yaml_path="/nonexistent/result.yaml", env_prefix="MYAPP"))
        assert settings.redact_payloads is True

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT__MESSAGES__REDACT_PAYLOADS", "sometimes")
        with pytest.raises(SettingsError, match="must be a boolean"):
            load_settings(create_config(yaml_path="/nonexistent/result.yaml"))

    def test_invalid_length(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT__MESSAGES__MAX_PAYLOAD_LENGTH", "lots")
        with pytest.raises(SettingsError, match="must be an integer"):
            load_settings(create_config(yaml_path="/nonexistent/result.yaml"))

    def test_negative_length(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT__MESSAGES__MAX_PAYLOAD_LENGTH", "-5")
        with pytest.raises(SettingsError, match="must be non-negative"):
            load_settings(create_config(yaml_path="/nonexistent/result.yaml"))
