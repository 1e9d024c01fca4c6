"""Listening server with a path-to-handler router."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass
from typing import Callable

from peernet.dictionary import Dictionary, compare_string_keys


def _interface_host(domain: int, interface: int) -> str:
    if domain == socket.AF_INET6:
        return str(ipaddress.IPv6Address(interface))
    return str(ipaddress.IPv4Address(interface))


@dataclass
class ServerRoute:
    """The handler registered for one path."""

    router_function: Callable[..., str]


class Server:
    """A socket bound to ``interface``:``port`` and listening on creation.

    Raises :class:`OSError` when the socket cannot be bound or put into
    listening mode.
    """

    def __init__(
        self, domain: int, service: int, protocol: int, interface: int, port: int, backlog: int
    ) -> None:
        self.domain = domain
        self.service = service
        self.protocol = protocol
        self.interface = interface
        self.port = port
        self.backlog = backlog
        self.address = (_interface_host(domain, interface), port)
        self.router = Dictionary(compare_string_keys)
        self.socket = socket.socket(domain, service, protocol)
        try:
            self.socket.bind(self.address)
            self.socket.listen(backlog)
        except OSError:
            self.socket.close()
            raise

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def register_routes(self, route_function: Callable[..., str], path: str) -> None:
        """Register ``route_function`` as the handler for ``path``."""
        self.router.insert(path, ServerRoute(route_function))

    def close(self) -> None:
        """Stop listening and close the socket."""
        self.socket.close()