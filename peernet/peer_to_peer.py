"""A node that is both a server and a client."""

from __future__ import annotations

import threading
from typing import Any, Callable

from peernet.linked_list import LinkedList
from peernet.server import Server

SERVER_BACKLOG = 20
KNOWN_HOSTS_PATH = "/known_hosts\n"

NodeFunction = Callable[["PeerToPeer"], Any]


class PeerToPeer:
    """A peer that serves its list of known hosts and runs a client loop."""

    def __init__(
        self,
        domain: int,
        service: int,
        protocol: int,
        port: int,
        interface: int,
        server_function: NodeFunction,
        client_function: NodeFunction,
    ) -> None:
        self.domain = domain
        self.service = service
        self.protocol = protocol
        self.port = port
        self.interface = interface
        self.hosts = LinkedList()
        self.hosts.insert(0, "127.0.0.1")
        self.server = Server(domain, service, protocol, interface, port, SERVER_BACKLOG)
        self.server.register_routes(self.known_hosts, KNOWN_HOSTS_PATH)
        self.server_function = server_function
        self.client_function = client_function

    def user_portal(self) -> threading.Thread:
        """Start the server function in a background thread, then run the client function."""
        thread = threading.Thread(target=self.server_function, args=(self,), daemon=True)
        thread.start()
        self.client_function(self)
        return thread

    def known_hosts(self) -> str:
        """Return every known host followed by a comma."""
        print("known hosts requested")
        return "".join(f"{host}," for host in self.hosts)