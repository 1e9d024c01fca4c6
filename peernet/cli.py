"""Command line chat between a message server and an interactive client."""

from __future__ import annotations

import socket
import sys
from typing import Optional, Sequence

PORT = 8080
BUFFER_SIZE = 1024
SERVER_REPLY = b"Server received the message."
PROG = "peernet"


def run_server(port: int = PORT) -> None:
    """Accept connections forever, answering each message with a fixed reply."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind(("", port))
        server.listen(5)
        print(f"[SERVER] Listening on port {port}...", flush=True)
        while True:
            try:
                conn, _ = server.accept()
            except OSError as exc:
                print(f"Accept failed: {exc}", file=sys.stderr)
                continue
            with conn:
                try:
                    message = conn.recv(BUFFER_SIZE)
                    print(
                        f"[SERVER] Message received: {message.decode(errors='replace')}",
                        flush=True,
                    )
                    conn.sendall(SERVER_REPLY)
                except OSError as exc:
                    print(f"Connection error: {exc}", file=sys.stderr)


def run_client(server_ip: str, port: int = PORT) -> None:
    """Send lines read from standard input until ``exit`` or end of input."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as client:
        client.connect((server_ip, port))
        while True:
            print("> Enter message: ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                break
            message = line.split("\n", 1)[0]
            if message == "exit":
                break
            client.sendall(message.encode())
            reply = client.recv(BUFFER_SIZE)
            print(f"[CLIENT] Reply from server: {reply.decode(errors='replace')}")


def _usage() -> None:
    print("Usage:")
    print(f"  Server: {PROG} server")
    print(f"  Client: {PROG} client <server_ip>")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run as server or client according to ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _usage()
        return 1
    try:
        if args[0] == "server":
            run_server(PORT)
        elif args[0] == "client" and len(args) >= 2:
            run_client(args[1], PORT)
        else:
            print("Invalid parameters.", file=sys.stderr)
            return 1
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())