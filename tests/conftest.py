from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

OVERLAY_HTML = b"<!DOCTYPE html><html><body>overlay \xe2\x98\x8e</body></html>\n"
ADMIN_HTML = b"<!DOCTYPE html><html><body>admin</body></html>\n"


@pytest.fixture(scope="session")
def static_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("static")
    (path / "overlay.html").write_bytes(OVERLAY_HTML)
    (path / "admin.html").write_bytes(ADMIN_HTML)
    return path


@pytest.fixture()
def make_settings(static_dir):
    from config.settings import Settings

    def _make(**overrides):
        values = {
            "static_dir": static_dir,
            "twilio_account_sid": "AC123",
            "twilio_auth_token": "SECRET",
            "twilio_app_sid": "AP456",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture(scope="session")
def app():
    import importlib

    main = importlib.import_module("main")
    return main.app


@pytest.fixture()
def relay():
    from relay.broadcast import BroadcastRelay

    return BroadcastRelay()


@pytest.fixture()
def client(app, make_settings, relay):
    import api.dependencies as deps
    from config.settings import get_settings

    settings = make_settings()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[deps.get_relay] = lambda: relay

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
