"""Testes da validação de settings no startup."""

from __future__ import annotations

import pytest

import app.bootstrap as bootstrap
from config.settings import BaseSettings, InferenceSettings, MongoSettings
from utils.errors import ConfigurationError


@pytest.fixture
def invalid_mongo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bootstrap, "get_mongo_settings", lambda: MongoSettings(uri=""))
    monkeypatch.setattr(bootstrap, "get_inference_settings", lambda: InferenceSettings())


def test_collect_settings_errors_prefixes_section(
    invalid_mongo: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())

    assert bootstrap.collect_settings_errors() == ["mongodb: MONGODB_URI não configurado"]


@pytest.mark.parametrize("environment", ["staging", "production"])
def test_strict_environments_abort(
    invalid_mongo: None, monkeypatch: pytest.MonkeyPatch, environment: str
) -> None:
    monkeypatch.setattr(
        bootstrap, "get_base_settings", lambda: BaseSettings(environment=environment)  # type: ignore[arg-type]
    )

    with pytest.raises(ConfigurationError, match="MONGODB_URI"):
        bootstrap.validate_runtime_settings()


def test_development_only_warns(invalid_mongo: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings())

    bootstrap.validate_runtime_settings()


def test_valid_settings_pass_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        bootstrap, "get_base_settings", lambda: BaseSettings(environment="production")
    )
    monkeypatch.setattr(
        bootstrap, "get_mongo_settings", lambda: MongoSettings(uri="mongodb://db:27017")
    )
    monkeypatch.setattr(bootstrap, "get_inference_settings", lambda: InferenceSettings())

    bootstrap.validate_runtime_settings()
