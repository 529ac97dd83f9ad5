"""Stop-and-wait ARQ simulation over TCP with simulated frame and ACK loss."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from collections.abc import Sequence
from typing import TextIO

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
FRAME_COUNT = 5
TIMEOUT_SECONDS = 3.0
BUFFER_SIZE = 1000

FRAME = b"frame"
ACK = b"ack"


def _simulate_timeout(out: TextIO, message: str, delay: float) -> None:
    for second in range(1, 4):
        print(f"Waiting for {second}s", file=out)
    print(message, file=out)
    if delay:
        time.sleep(delay)


def _recv(conn: socket.socket) -> bytes:
    data = conn.recv(BUFFER_SIZE)
    if not data:
        raise ConnectionError("peer closed the connection")
    return data


def send_frames(
    conn: socket.socket,
    count: int = FRAME_COUNT,
    timeout_delay: float = TIMEOUT_SECONDS,
    out: TextIO | None = None,
) -> list[bool]:
    """Send ``count`` frames, waiting for an ACK after each one.

    Odd-numbered frames are treated as lost once and retransmitted after a timeout.
    Returns, for each frame, whether an ACK came back.
    """
    out = sys.stdout if out is None else out
    acks = []
    for frame in range(1, count + 1):
        print(f"Sending frame {frame}", file=out)
        if frame % 2:
            print("packet loss", file=out)
            _simulate_timeout(out, "Retransmitting...", timeout_delay)
        conn.sendall(FRAME)
        print(f"send frame {frame}", file=out)
        acked = _recv(conn).startswith(ACK)
        verdict = "Ack received" if acked else "No Ack received"
        print(f"{verdict} for frame {frame}", file=out)
        acks.append(acked)
    return acks


def receive_frames(
    conn: socket.socket,
    count: int = FRAME_COUNT,
    timeout_delay: float = TIMEOUT_SECONDS,
    out: TextIO | None = None,
) -> list[bool]:
    """Receive ``count`` frames and acknowledge each one.

    The ACK for odd-numbered frames is treated as lost once and resent after a timeout.
    Returns, for each message, whether it was a frame.
    """
    out = sys.stdout if out is None else out
    frames = []
    for frame in range(1, count + 1):
        is_frame = _recv(conn).startswith(FRAME)
        if is_frame:
            print(f"Received frame {frame}", file=out)
        frames.append(is_frame)
        if frame % 2:
            print("ack lost", file=out)
            _simulate_timeout(out, "Retransmitting ACK...", timeout_delay)
        print(f"Sending ACK {frame}", file=out)
        conn.sendall(ACK)
    return frames


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=DEFAULT_HOST, help="receiver address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="receiver port")
    parser.add_argument("--frames", type=int, default=FRAME_COUNT, help="number of frames")
    parser.add_argument("--delay", type=float, default=TIMEOUT_SECONDS, help="simulated timeout in seconds")
    return parser


def sender_main(argv: Sequence[str] | None = None) -> int:
    """Connect to a receiver and run the sending side."""
    args = _parser("Stop-and-wait sender.").parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        print("socket created successfully")
        try:
            sock.connect((args.host, args.port))
        except OSError:
            print("ERROR(connect)")
            return 1
        print("Connected to SERVER")
        try:
            send_frames(sock, args.frames, args.delay)
        except OSError as exc:
            print(f"ERROR(transfer): {exc}")
            return 1
    return 0


def receiver_main(argv: Sequence[str] | None = None) -> int:
    """Accept one sender and run the receiving side."""
    args = _parser("Stop-and-wait receiver.").parse_args(argv)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        print("socket created successfully")
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind((args.host, args.port))
        except OSError:
            print("ERROR(bind)")
            return 1
        print("socket successfully binded to server")
        listener.listen(1)
        print("Listening for incoming connections...")
        try:
            conn, (peer_host, peer_port) = listener.accept()
        except OSError:
            print("ERROR(accept)")
            return 1
        print(f"Connected with CLIENT at IP: {peer_host} and PORT: {peer_port}")
        with conn:
            try:
                receive_frames(conn, args.frames, args.delay)
            except OSError as exc:
                print(f"ERROR(transfer): {exc}")
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(sender_main())