from pathlib import Path

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.lifecycle import TransitionPolicy
from storefront.infrastructure.config import Settings


def test_defaults(monkeypatch):
    for name in ("STOREFRONT_DATA_DIR", "STOREFRONT_STATUS_POLICY", "STOREFRONT_LOG_LEVEL", "STOREFRONT_ENV"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.data_dir.name == "data"
    assert settings.status_policy is TransitionPolicy.STRICT
    assert settings.log_level == "INFO"
    assert settings.environment == "development"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_STATUS_POLICY", "Permissive")
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")
    monkeypatch.setenv("STOREFRONT_ENV", "production")

    settings = Settings.from_env()

    assert settings.data_dir == Path(tmp_path)
    assert settings.status_policy is TransitionPolicy.PERMISSIVE
    assert settings.log_level == "DEBUG"
    assert settings.environment == "production"


def test_unknown_policy(monkeypatch):
    monkeypatch.setenv("STOREFRONT_STATUS_POLICY", "lenient")
    with pytest.raises(ValidationError):
        Settings.from_env()
