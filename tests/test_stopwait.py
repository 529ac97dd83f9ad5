import io
import socket
import threading

import pytest

from netlab.stopwait import receive_frames, send_frames, sender_main


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    left.settimeout(10)
    right.settimeout(10)
    yield left, right
    left.close()
    right.close()


def test_full_exchange_acknowledges_every_frame(pair):
    left, right = pair
    count = 5
    receiver_log = io.StringIO()
    received = []
    worker = threading.Thread(
        target=lambda: received.extend(receive_frames(right, count, 0, receiver_log))
    )
    worker.start()
    sender_log = io.StringIO()
    acks = send_frames(left, count, 0, sender_log)
    worker.join(10)
    assert acks == [True] * count
    assert received == [True] * count
    assert f"Ack received for frame {count}" in sender_log.getvalue()
    assert f"Sending ACK {count}" in receiver_log.getvalue()


def test_sender_log_for_lost_first_frame(pair):
    left, right = pair
    right.sendall(b"ack")
    log = io.StringIO()
    assert send_frames(left, 1, 0, log) == [True]
    assert log.getvalue().splitlines() == [
        "Sending frame 1",
        "packet loss",
        "Waiting for 1s",
        "Waiting for 2s",
        "Waiting for 3s",
        "Retransmitting...",
        "send frame 1",
        "Ack received for frame 1",
    ]
    assert right.recv(1000) == b"frame"


def test_sender_reports_missing_ack(pair):
    left, right = pair
    right.sendall(b"kca")
    log = io.StringIO()
    assert send_frames(left, 1, 0, log) == [False]
    assert "No Ack received for frame 1" in log.getvalue()


def test_receiver_log_and_ack_bytes(pair):
    left, right = pair
    left.sendall(b"frame")
    log = io.StringIO()
    assert receive_frames(right, 1, 0, log) == [True]
    assert log.getvalue().splitlines() == [
        "Received frame 1",
        "ack lost",
        "Waiting for 1s",
        "Waiting for 2s",
        "Waiting for 3s",
        "Retransmitting ACK...",
        "Sending ACK 1",
    ]
    assert left.recv(1000) == b"ack"


def test_receiver_flags_non_frame_message(pair):
    left, right = pair
    left.sendall(b"error")
    log = io.StringIO()
    assert receive_frames(right, 1, 0, log) == [False]
    assert "Received frame" not in log.getvalue()


def test_sender_raises_when_peer_closes(pair):
    left, right = pair
    right.close()
    with pytest.raises(OSError):
        send_frames(left, 1, 0, io.StringIO())


def test_receiver_raises_when_peer_closes(pair):
    left, right = pair
    left.shutdown(socket.SHUT_WR)
    with pytest.raises(ConnectionError):
        receive_frames(right, 1, 0, io.StringIO())


def test_even_frames_are_not_delayed(pair):
    left, right = pair
    right.sendall(b"ack")
    log = io.StringIO()
    send_frames(left, 1, 0, log)
    right.recv(1000)
    right.sendall(b"ack")
    second_log = io.StringIO()
    send_frames(left, 1, 0, second_log)
    assert log.getvalue().count("packet loss") == second_log.getvalue().count("packet loss")
    assert "Retransmitting..." in log.getvalue()


def test_sender_main_reports_refused_connection(capsys):
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    assert sender_main(["--port", str(port), "--delay", "0"]) == 1
    assert "ERROR(connect)" in capsys.readouterr().out