"""
Tests for the app factory.
"""

import importlib

import pytest

import main
from config import Settings


def test_import_does_not_read_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    reloaded = importlib.reload(main)
    assert callable(reloaded.create_app)


def test_factory_reads_environment_when_called(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        main.create_app()


def test_factory_keeps_injected_settings(tmp_path):
    settings = Settings(data_dir=tmp_path)
    app = main.create_app(settings)
    assert app.state.settings is settings
