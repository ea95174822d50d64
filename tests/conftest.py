# tests/conftest.py
import logging
import os

import pytest

from setup.config_models import AppSettings


@pytest.fixture(autouse=True)
def _isolate_lamp_environment(monkeypatch):
    """Keep LAMP_* variables of the developer's shell out of AppSettings."""
    for key in list(os.environ):
        if key.startswith("LAMP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def app_settings():
    return AppSettings()


@pytest.fixture
def mock_logger(mocker):
    return mocker.Mock(spec=logging.Logger)
