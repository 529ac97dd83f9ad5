"""A minimal file transfer over TCP: the client names a file, the server streams it back."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from collections.abc import Iterator, Sequence
from typing import BinaryIO

CHUNK_SIZE = 100
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
CHUNK_DELAY = 1.0

_ERROR = b"error"
_COMPLETED = b"completed"


class FileNotAvailable(Exception):
    """The server could not open the requested file."""


def _record(payload: bytes) -> bytes:
    return payload.ljust(CHUNK_SIZE, b"\0")


def _pieces(line: bytes) -> Iterator[bytes]:
    step = CHUNK_SIZE - 1
    for start in range(0, len(line), step):
        yield line[start:start + step]


def _recv_record(conn: socket.socket) -> bytes:
    buffer = bytearray()
    while len(buffer) < CHUNK_SIZE:
        part = conn.recv(CHUNK_SIZE - len(buffer))
        if not part:
            break
        buffer.extend(part)
    return bytes(buffer)


def serve_file(conn: socket.socket, chunk_delay: float = CHUNK_DELAY) -> bool:
    """Answer one request on ``conn``.

    Reads the file name, then sends the file line by line in fixed-size records
    followed by a completion marker. Returns False if the file could not be opened,
    in which case an error marker is sent instead.
    """
    request = conn.recv(CHUNK_SIZE)
    name = request.split(b"\0", 1)[0]
    try:
        source = open(name, "rb")
    except OSError:
        conn.sendall(_record(_ERROR))
        return False
    with source:
        for line in source:
            for piece in _pieces(line):
                conn.sendall(_record(piece))
                if chunk_delay:
                    time.sleep(chunk_delay)
    conn.sendall(_record(_COMPLETED))
    return True


def receive_file(conn: socket.socket, name: str | bytes, out: BinaryIO) -> int:
    """Request ``name`` from the server and write its contents to ``out``.

    Returns the number of bytes written. Raises FileNotAvailable if the server
    reports that the file cannot be opened.
    """
    encoded = name.encode() if isinstance(name, str) else bytes(name)
    if not encoded:
        raise ValueError("file name must not be empty")
    if len(encoded) >= CHUNK_SIZE:
        raise ValueError(f"file name must be shorter than {CHUNK_SIZE} bytes")
    conn.sendall(encoded)
    written = 0
    while True:
        record = _recv_record(conn)
        if not record:
            raise ConnectionError("connection closed before the transfer completed")
        payload = record.split(b"\0", 1)[0]
        if payload == _ERROR:
            raise FileNotAvailable(encoded.decode(errors="replace"))
        if payload == _COMPLETED:
            return written
        out.write(payload)
        written += len(payload)


class _EchoWriter:
    """Writes chunks to a file and echoes each one to stdout."""

    def __init__(self, target: BinaryIO) -> None:
        self._target = target

    def write(self, data: bytes) -> int:
        print(data.decode(errors="replace"))
        return self._target.write(data)


def _parser(description: str, with_delay: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    if with_delay:
        parser.add_argument("--delay", type=float, default=CHUNK_DELAY, help="seconds to pause after each chunk")
    return parser


def server_main(argv: Sequence[str] | None = None) -> int:
    """Serve a single file request."""
    args = _parser("Serve one file over TCP.", with_delay=True).parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        print("socket created successfully")
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind((args.host, args.port))
        except OSError:
            print("ERROR(bind)")
            return 1
        print("socket binded successfully")
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
                served = serve_file(conn, args.delay)
            except OSError as exc:
                print(f"ERROR(transfer): {exc}")
                return 1
        if served:
            print("Done!...")
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Ask for a remote file name and a local name, then download the file."""
    args = _parser("Fetch one file over TCP.", with_delay=False).parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        print("socket created successfully")
        try:
            sock.connect((args.host, args.port))
        except OSError:
            print("ERROR(connect)")
            return 1
        print("Connected to server")
        name = input("Enter filename: ")
        target = input("\nEnter the new filename: ")
        with open(target, "wb") as out:
            try:
                receive_file(sock, name, _EchoWriter(out))
            except FileNotAvailable:
                print("File not available")
                return 1
            except (OSError, ValueError) as exc:
                print(f"ERROR(recv): {exc}")
                return 1
    print("File is Transferred...")
    return 0


if __name__ == "__main__":
    sys.exit(client_main())