import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

os.environ.setdefault("LABYRINTH_SUPPRESS_ROUTE_MAP", "1")

from labyrinth import create_app, socketio  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def socket_client(test_app):
    # Flask-SocketIO provides a test client we can use against the global socketio instance
    test_client = socketio.test_client(test_app, flask_test_client=test_app.test_client())
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation timing guardrails")


@pytest.fixture(autouse=True)
def _clear_maze_state(test_app):
    """Seeded-result cache, per-connection dimensions and config must not leak between tests."""
    from labyrinth.routes import maze_api
    from labyrinth.websockets import maze as ws_maze

    saved = dict(test_app.config)
    with maze_api._maze_cache_lock:
        maze_api._maze_cache.clear()
    ws_maze.connection_dimensions.clear()
    yield
    test_app.config.clear()
    test_app.config.update(saved)
