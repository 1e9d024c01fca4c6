import socket

import pytest

from peernet.server import Server, ServerRoute

LOOPBACK = 0x7F000001


@pytest.fixture
def server():
    srv = Server(socket.AF_INET, socket.SOCK_STREAM, 0, LOOPBACK, 0, 20)
    yield srv
    srv.close()


def _hosts():
    return "hosts"


def _peers():
    return "peers"


def test_binds_to_interface(server):
    host, port = server.socket.getsockname()
    assert host == "127.0.0.1"
    assert port > 0
    assert server.backlog == 20


def test_accepts_connections(server):
    port = server.socket.getsockname()[1]
    with socket.create_connection(("127.0.0.1", port), timeout=5) as conn:
        accepted, _ = server.socket.accept()
        with accepted:
            conn.sendall(b"hi")
            assert accepted.recv(16) == b"hi"


def test_register_routes_stores_handler(server):
    server.register_routes(_hosts, "/known_hosts\n")
    route = server.router.search("/known_hosts\n")
    assert route == ServerRoute(_hosts)
    assert route.router_function() == "hosts"
    assert list(server.router.keys) == ["/known_hosts\n"]


def test_routes_are_kept_apart(server):
    server.register_routes(_hosts, "/a")
    server.register_routes(_peers, "/b")
    assert server.router.search("/a").router_function is _hosts
    assert server.router.search("/b").router_function is _peers
    assert server.router.search("/c") is None


def test_port_in_use_raises(server):
    port = server.socket.getsockname()[1]
    with pytest.raises(OSError):
        Server(socket.AF_INET, socket.SOCK_STREAM, 0, LOOPBACK, port, 20)


def test_close_releases_socket():
    srv = Server(socket.AF_INET, socket.SOCK_STREAM, 0, LOOPBACK, 0, 5)
    with srv:
        assert srv.socket.fileno() >= 0
    assert srv.socket.fileno() == -1