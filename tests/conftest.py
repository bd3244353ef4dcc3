"""
Shared fixtures for the Showcase test-suite.

The REST backend is never contacted: guarded views receive a MagicMock
ApiClient through the patched guard, and public sections patch their own
get_api_client lookup.

NOTE: pytest is listed under extras_require["dev"] in setup.py.
Install with: pip install -e ".[dev]"
"""

import os
import shutil
import tempfile
from unittest.mock import MagicMock, patch

import pytest
from flask import Flask

from showcase import Showcase

RESOURCES = ("skills", "achievements", "experiences", "media")


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for the activity log, cleaned up after."""
    d = tempfile.mkdtemp(prefix="showcase-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


def make_app(db_dir, options=None, config=None):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["API_BASE_URL"] = "api.example.com/api"
    app.config["LOG_DB"] = os.path.join(db_dir, "logs", "showcase_logs.db")
    app.config.update(config or {})
    Showcase(app, options)
    return app


@pytest.fixture
def app_factory(tmp_db_dir):
    """Build extra apps with Showcase options, sharing the test log directory."""
    return lambda options=None, config=None: make_app(tmp_db_dir, options, config)


@pytest.fixture
def app(tmp_db_dir):
    """Flask app with every Showcase module registered."""
    return make_app(tmp_db_dir)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def backend():
    """Signed-in fake backend: check_auth passes and views get a MagicMock client.

    client.services[name] is the MagicMock ResourceService for each collection.
    """
    fake = MagicMock(name="ApiClient")
    services = {name: MagicMock(name=f"{name}_service") for name in RESOURCES}
    for svc in services.values():
        svc.list.return_value = []
    fake.service.side_effect = lambda name: services[name]
    fake.services = services

    with patch("showcase.modules.dashboard.guard.get_api_client", return_value=fake), \
            patch("showcase.modules.dashboard.guard.check_auth", return_value=True):
        yield fake
