import importlib
import os
from types import ModuleType

import pytest
from pydantic import ValidationError


def _reload_settings_with_env(
    monkeypatch: pytest.MonkeyPatch, env: dict[str, str | None]
) -> ModuleType:
    # Clear related envs first to avoid leakage across tests
    prefixes = ("FASTKST_", "LOG_", "BENCH_")
    for key in list(os.environ.keys()):
        if key.startswith(prefixes):
            monkeypatch.delenv(key, raising=False)

    for k, v in env.items():
        if v is None:
            monkeypatch.delenv(k, raising=False)
        else:
            monkeypatch.setenv(k, str(v))

    import fastkst.config.settings as settings

    return importlib.reload(settings)


@pytest.fixture(autouse=True)
def _restore_settings():
    yield
    import fastkst.config.settings as settings

    importlib.reload(settings)


def test_kst_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    settings = _reload_settings_with_env(monkeypatch, {})

    assert settings.kst_settings.year_field_bits == 32


def test_kst_settings_env_override(monkeypatch: pytest.MonkeyPatch):
    settings = _reload_settings_with_env(monkeypatch, {"FASTKST_YEAR_FIELD_BITS": "64"})

    assert settings.kst_settings.year_field_bits == 64


def test_kst_settings_rejects_unsupported_width(monkeypatch: pytest.MonkeyPatch):
    settings = _reload_settings_with_env(monkeypatch, {})
    monkeypatch.setenv("FASTKST_YEAR_FIELD_BITS", "16")

    with pytest.raises(ValidationError):
        settings.KstSettings()


def test_logging_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    settings = _reload_settings_with_env(monkeypatch, {})

    assert settings.logging_settings.level == "INFO"
    assert settings.logging_settings.to_file is False
    assert settings.logging_settings.to_console is True
    assert settings.logging_settings.dir == "logs"


def test_logging_settings_env_override(monkeypatch: pytest.MonkeyPatch):
    settings = _reload_settings_with_env(
        monkeypatch, {"LOG_LEVEL": "DEBUG", "LOG_TO_FILE": "true", "LOG_DIR": "/tmp/fastkst"}
    )

    assert settings.logging_settings.level == "DEBUG"
    assert settings.logging_settings.to_file is True
    assert settings.logging_settings.dir == "/tmp/fastkst"


def test_bench_settings_defaults_and_override(monkeypatch: pytest.MonkeyPatch):
    settings = _reload_settings_with_env(monkeypatch, {})
    assert settings.bench_settings.iterations == 100_000
    assert settings.bench_settings.workers == 10
    assert settings.bench_settings.iterations_per_worker == 1000

    settings = _reload_settings_with_env(
        monkeypatch, {"BENCH_WORKERS": "4", "BENCH_ITERATIONS_PER_WORKER": "50"}
    )
    assert settings.bench_settings.workers == 4
    assert settings.bench_settings.iterations_per_worker == 50
