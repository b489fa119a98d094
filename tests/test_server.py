import logging
import socket

import pytest
import uvicorn

from backend import server
from backend.core.config import Settings
from backend.core.errors import BindError


@pytest.fixture(name="occupied_port")
def occupied_port_fixture():
    """A port on 127.0.0.1 that is already bound and listening."""
    sock = server.bind_socket("127.0.0.1", 0)
    yield sock.getsockname()[1]
    sock.close()


def test_bind_socket_listens():
    sock = server.bind_socket("127.0.0.1", 0)
    try:
        host, port = sock.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
        with socket.create_connection((host, port), timeout=2):
            pass
    finally:
        sock.close()


def test_second_bind_on_same_port_fails(occupied_port: int):
    with pytest.raises(BindError) as exc_info:
        server.bind_socket("127.0.0.1", occupied_port)
    err = exc_info.value
    assert err.host == "127.0.0.1"
    assert err.port == occupied_port
    assert isinstance(err.__cause__, OSError)
    assert str(occupied_port) in str(err)


def test_serve_logs_port_and_hands_socket_to_uvicorn(monkeypatch, caplog):
    served = []

    def fake_run(self, sockets=None):
        served.append((self.config, sockets))
        for s in sockets:
            s.close()

    monkeypatch.setattr(uvicorn.Server, "run", fake_run)
    settings = Settings(HOST="127.0.0.1", PORT=0)

    with caplog.at_level(logging.INFO, logger="backend.server"):
        server.serve(settings)

    assert "Backend running on port 0" in caplog.text
    assert len(served) == 1
    config, sockets = served[0]
    assert config.app is server.app
    assert config.log_config is None
    assert len(sockets) == 1


def test_serve_does_not_start_uvicorn_when_bind_fails(monkeypatch, occupied_port: int):
    def fake_run(self, sockets=None):
        pytest.fail("uvicorn must not run after a bind failure")

    monkeypatch.setattr(uvicorn.Server, "run", fake_run)

    with pytest.raises(BindError):
        server.serve(Settings(HOST="127.0.0.1", PORT=occupied_port))


def test_main_exits_nonzero_when_port_in_use(monkeypatch, occupied_port: int):
    monkeypatch.setattr(server, "setup_logging", lambda: None)
    monkeypatch.setattr(
        server, "get_settings", lambda: Settings(HOST="127.0.0.1", PORT=occupied_port)
    )

    with pytest.raises(SystemExit) as exc_info:
        server.main()
    assert exc_info.value.code == 1
