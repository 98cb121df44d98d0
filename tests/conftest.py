"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path

import pytest

# Raiz do projeto no sys.path para imports planos (core, api, internalloggin)
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Logs de teste fora da árvore do projeto
os.environ.setdefault("HOOKGATE_LOG_DIR", str(project_root / ".pytest_logs"))

from werkzeug.wrappers import Request

from api import create_app
from api.config import TestingConfig


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_request():
    """Fábrica de requisições Werkzeug com Content-Type opcional."""

    def _make(content_type=None):
        headers = {}
        if content_type is not None:
            headers["Content-Type"] = content_type
        return Request.from_values(method="POST", headers=headers)

    return _make
