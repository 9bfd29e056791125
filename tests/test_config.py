"""Tests for environment-driven configuration."""

from app.config import _float_env


def test_float_env_reads_value(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    assert _float_env("HTTP_TIMEOUT", 10.0) == 2.5


def test_float_env_falls_back_on_malformed_value(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "ten seconds")
    assert _float_env("HTTP_TIMEOUT", 10.0) == 10.0


def test_float_env_falls_back_when_unset_or_blank(monkeypatch):
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    assert _float_env("HTTP_TIMEOUT", 10.0) == 10.0
    monkeypatch.setenv("HTTP_TIMEOUT", "  ")
    assert _float_env("HTTP_TIMEOUT", 10.0) == 10.0
