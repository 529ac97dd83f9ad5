"""Line-by-line chat between one TCP client and one TCP server."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
MESSAGE_SIZE = 2000
EXIT = "exit"
PROMPT = "Enter Message: "

ReadLine = Callable[[str], str]


def _encode(message: str) -> bytes:
    data = message.encode()
    if len(data) >= MESSAGE_SIZE:
        raise ValueError(f"message must be shorter than {MESSAGE_SIZE} bytes")
    return data.ljust(MESSAGE_SIZE, b"\0")


def _recv_message(conn: socket.socket) -> str:
    buffer = bytearray()
    while len(buffer) < MESSAGE_SIZE:
        part = conn.recv(MESSAGE_SIZE - len(buffer))
        if not part:
            raise ConnectionError("peer closed the connection")
        buffer.extend(part)
    return bytes(buffer).split(b"\0", 1)[0].decode(errors="replace")


def client_session(
    conn: socket.socket,
    read_line: ReadLine = input,
    out: TextIO | None = None,
) -> list[str]:
    """Send typed lines and print replies until the server answers ``exit``.

    Every message travels as a fixed-size, NUL-padded record. Returns the replies.
    """
    out = sys.stdout if out is None else out
    replies = []
    while True:
        conn.sendall(_encode(read_line(PROMPT)))
        reply = _recv_message(conn)
        print(f"SERVER's response: {reply}", file=out)
        replies.append(reply)
        if reply == EXIT:
            return replies


def server_session(
    conn: socket.socket,
    read_line: ReadLine = input,
    out: TextIO | None = None,
) -> list[str]:
    """Print each client message and answer with a typed line.

    The session ends once a reply has been sent to a client message of ``exit``.
    Returns the client's messages.
    """
    out = sys.stdout if out is None else out
    received = []
    while True:
        message = _recv_message(conn)
        print(f"CLIENT's response: {message}", file=out)
        received.append(message)
        conn.sendall(_encode(read_line(PROMPT)))
        if message == EXIT:
            return received


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    return parser


def client_main(argv: Sequence[str] | None = None) -> int:
    """Connect to the chat server and chat from the terminal."""
    args = _parser("TCP chat client.").parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        print("socket created successfully")
        try:
            sock.connect((args.host, args.port))
        except OSError:
            print("ERROR(connect)")
            return 1
        print("Connected to server")
        try:
            client_session(sock)
        except (OSError, ValueError, EOFError) as exc:
            print(f"ERROR(chat): {exc}")
            return 1
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    """Accept one client and chat with it from the terminal."""
    args = _parser("TCP chat server.").parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        print("socket created successfully")
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind((args.host, args.port))
        except OSError:
            print("ERROR(bind)")
            return 1
        print("socket binded to server's address")
        listener.listen(1)
        print("Listening for incoming connections...")
        try:
            conn, (peer_host, peer_port) = listener.accept()
        except OSError:
            print("ERROR(accept)")
            return 1
        print(f"CLIENT connected from IP: {peer_host} and PORT: {peer_port}")
        with conn:
            try:
                server_session(conn)
            except (OSError, ValueError, EOFError) as exc:
                print(f"ERROR(chat): {exc}")
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(client_main())