"""Stream client that sends a single request and reads the reply."""

from __future__ import annotations

import ipaddress
import socket
from typing import Union

RESPONSE_SIZE = 30000


def _interface_host(domain: int, interface: int) -> str:
    if domain == socket.AF_INET6:
        return str(ipaddress.IPv6Address(interface))
    return str(ipaddress.IPv4Address(interface))


class Client:
    """A socket client bound to one server port.

    ``interface`` is the fallback address, as an integer in host order, used
    when the server address handed to :meth:`request` cannot be parsed.
    """

    def __init__(self, domain: int, service: int, protocol: int, port: int, interface: int) -> None:
        self.domain = domain
        self.service = service
        self.protocol = protocol
        self.port = port
        self.interface = interface
        self.socket = socket.socket(domain, service, protocol)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _server_host(self, server_ip: str) -> str:
        try:
            socket.inet_pton(self.domain, server_ip)
        except (OSError, ValueError):
            return _interface_host(self.domain, self.interface)
        return server_ip

    def request(self, server_ip: str, request: Union[bytes, str]) -> bytes:
        """Connect to ``server_ip``, send ``request`` and return the reply."""
        payload = request.encode() if isinstance(request, str) else bytes(request)
        self.socket.connect((self._server_host(server_ip), self.port))
        self.socket.sendall(payload)
        return self.socket.recv(RESPONSE_SIZE)

    def close(self) -> None:
        """Close the underlying socket."""
        self.socket.close()