from __future__ import annotations

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        (" testing ", "config.testing"),
        ("dev", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_app_env_selects_settings_module(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_development_is_the_default(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"
