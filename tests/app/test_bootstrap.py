"""Testes do bootstrap (validação de settings no startup)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app import bootstrap
from config.settings import (
    get_base_settings,
    get_contacts_api_settings,
    get_sendpulse_settings,
    get_webflow_settings,
)
from utils.errors import ConfigurationError

_GETTERS = (
    get_base_settings,
    get_contacts_api_settings,
    get_sendpulse_settings,
    get_webflow_settings,
)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "SENDPULSE_API_USER_ID",
        "SENDPULSE_API_SECRET",
        "WEBFLOW_WEBHOOK_SECRET",
        "WEBFLOW_WEBHOOK_SECRET_LOCAL",
        "API_AUTH_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


def _configure_all(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SENDPULSE_API_USER_ID", "client")
    monkeypatch.setenv("SENDPULSE_API_SECRET", "secret")
    monkeypatch.setenv("WEBFLOW_WEBHOOK_SECRET", "webflow")
    monkeypatch.setenv("API_AUTH_KEY", "key")


def test_collect_settings_errors_prefixed() -> None:
    errors = bootstrap.collect_settings_errors()

    assert "sendpulse: SENDPULSE_API_USER_ID não configurado" in errors
    assert "webflow: WEBFLOW_WEBHOOK_SECRET não configurado" in errors
    assert "contacts_api: API_AUTH_KEY não configurado" in errors


def test_development_only_warns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")

    bootstrap.validate_runtime_settings()


def test_production_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(ConfigurationError) as exc_info:
        bootstrap.validate_runtime_settings()

    assert "contacts_api: API_AUTH_KEY não configurado" in exc_info.value.errors


def test_production_with_full_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    _configure_all(monkeypatch)

    bootstrap.validate_runtime_settings()
    assert bootstrap.collect_settings_errors() == []
