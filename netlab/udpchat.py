"""One request and one reply between a UDP client and a UDP server."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
BUFFER_SIZE = 2000
PROMPT = "Enter msg: "

Address = tuple[str, int]


def _encode(message: str | bytes) -> bytes:
    data = message.encode() if isinstance(message, str) else bytes(message)
    if len(data) >= BUFFER_SIZE:
        raise ValueError(f"message must be shorter than {BUFFER_SIZE} bytes")
    return data


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(errors="replace")


def request(sock: socket.socket, message: str | bytes, address: Address) -> str:
    """Send one datagram to ``address`` and return the text of the reply."""
    sock.sendto(_encode(message), address)
    reply, _ = sock.recvfrom(BUFFER_SIZE)
    return _text(reply)


def serve_once(
    sock: socket.socket,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> tuple[str, Address]:
    """Receive one datagram, print it, and answer the sender with a typed line.

    Returns the received message and the sender's address.
    """
    out = sys.stdout if out is None else out
    data, peer = sock.recvfrom(BUFFER_SIZE)
    message = _text(data)
    print(f"Received msg from IP: {peer[0]} and PORT: {peer[1]}", file=out)
    print(f"Msg received: {message}", file=out)
    sock.sendto(_encode(read_line(PROMPT)), peer)
    return message, (peer[0], peer[1])


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    return parser


def client_main(argv: Sequence[str] | None = None) -> int:
    """Send one typed message to the server and print its reply."""
    args = _parser("UDP message client.").parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
        print("socket created successfully")
        try:
            message = input(PROMPT)
            reply = request(sock, message, (args.host, args.port))
        except (OSError, ValueError, EOFError) as exc:
            print(f"ERROR(exchange): {exc}")
            return 1
        print(f"SERVER's response: {reply}")
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    """Wait for one message and answer it from the terminal."""
    args = _parser("UDP message server.").parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
        print("socket created successfully")
        try:
            sock.bind((args.host, args.port))
        except OSError:
            print("ERROR(bind)")
            return 1
        print("socket binded to PORT & IP")
        print("Waiting For Incoming Messages...")
        try:
            serve_once(sock)
        except (OSError, ValueError, EOFError) as exc:
            print(f"ERROR(exchange): {exc}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(client_main())