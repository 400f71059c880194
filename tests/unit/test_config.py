from __future__ import annotations

from calculator_web.core.config import AppSettings


def clear_env(monkeypatch) -> None:
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("FRONTEND_ORIGIN", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_defaults(monkeypatch) -> None:
    clear_env(monkeypatch)

    settings = AppSettings(_env_file=None)

    assert settings.api_title == "Calculator API"
    assert settings.log_level == "INFO"
    assert settings.resolved_cors_origins == ["http://localhost:8000", "http://127.0.0.1:8000"]


def test_resolved_cors_origins_appends_frontend_origin(monkeypatch) -> None:
    clear_env(monkeypatch)
    frontend_origin = "https://calculator.example.com"
    monkeypatch.setenv("FRONTEND_ORIGIN", frontend_origin)

    settings = AppSettings(_env_file=None)

    origins = settings.resolved_cors_origins
    assert "http://localhost:8000" in origins
    assert frontend_origin in origins


def test_resolved_cors_origins_deduplicates(monkeypatch) -> None:
    clear_env(monkeypatch)
    frontend_origin = "https://calculator.example.com"
    monkeypatch.setenv(
        "CORS_ORIGINS",
        '["http://localhost:8000", "https://calculator.example.com"]',
    )
    monkeypatch.setenv("FRONTEND_ORIGIN", f"{frontend_origin}/")

    settings = AppSettings(_env_file=None)

    origins = settings.resolved_cors_origins
    assert origins.count(frontend_origin) == 1


def test_log_level_read_from_env(monkeypatch) -> None:
    clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
