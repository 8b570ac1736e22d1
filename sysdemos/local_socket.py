"""Local (AF_UNIX) datagram and sequenced-packet echo servers and clients."""

from __future__ import annotations

import argparse
import contextlib
import os
import socket
import tempfile
from pathlib import Path
from typing import Sequence

SOCK_FILE = "./file.sock"
MSG_LEN = 256
BACKLOG_SIZE = 20

DGRAM_MESSAGE = "Test second msg from client"
CLIENT_MESSAGES = ("Test first msg from client", "Test second msg from client", "END")
SESSION_REPLY = "Test session completed"

PathLike = "str | os.PathLike[str]"


def _text(raw: bytes) -> str:
    """Decode a received buffer the way a C string is read: up to the first NUL."""
    return raw[: MSG_LEN - 1].split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _unlink(path: str | os.PathLike[str]) -> None:
    with contextlib.suppress(FileNotFoundError):
        os.unlink(path)


def serve_dgram(path: str | os.PathLike[str] = SOCK_FILE) -> list[str]:
    """Echo every datagram back to its sender until ``DOWN`` arrives.

    Returns the messages received, ``DOWN`` included.
    """
    path = os.fspath(path)
    received: list[str] = []
    _unlink(path)
    with socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM) as sock:
        sock.bind(path)
        try:
            while True:
                data, client = sock.recvfrom(MSG_LEN)
                message = _text(data)
                print(f"Received from client: {message}")
                received.append(message)
                if message == "DOWN":
                    break
                if client and sock.sendto(data, client) != len(data):
                    raise OSError("short send to client")
        finally:
            _unlink(path)
    return received


def send_dgram(path: str | os.PathLike[str], message: str = DGRAM_MESSAGE) -> str:
    """Send one datagram from a bound client socket and return the reply."""
    client_path = os.path.join(tempfile.gettempdir(), f"client{os.getpid()}.sock")
    payload = message.encode()
    with socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM) as sock:
        sock.bind(client_path)
        try:
            if sock.sendto(payload, os.fspath(path)) != len(payload):
                raise OSError("short send to server")
            reply = sock.recv(MSG_LEN)
        finally:
            _unlink(client_path)
    return _text(reply)


def serve_seqpacket(path: str | os.PathLike[str] = SOCK_FILE) -> list[str]:
    """Accept sessions; each ends at ``END`` or ``DOWN`` and gets one reply.

    ``DOWN`` also stops the server. Returns all messages received.
    """
    path = os.fspath(path)
    received: list[str] = []
    _unlink(path)
    with socket.socket(socket.AF_UNIX, socket.SOCK_SEQPACKET) as server:
        server.bind(path)
        try:
            server.listen(BACKLOG_SIZE)
            down = False
            while not down:
                print("Waiting connection")
                conn, _ = server.accept()
                with conn:
                    peer_closed = False
                    while True:
                        data = conn.recv(MSG_LEN)
                        if not data:
                            peer_closed = True
                            break
                        message = _text(data)
                        print(f"Received from client: {message}")
                        received.append(message)
                        if message == "DOWN":
                            down = True
                            break
                        if message == "END":
                            print("Session completed")
                            break
                    if not peer_closed:
                        conn.sendall(SESSION_REPLY.encode() + b"\0")
        finally:
            _unlink(path)
    return received


def send_seqpacket(
    path: str | os.PathLike[str], messages: Sequence[str] = CLIENT_MESSAGES
) -> str:
    """Send each message as one NUL-terminated packet and return the reply."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_SEQPACKET) as sock:
        sock.connect(os.fspath(path))
        for message in messages:
            sock.sendall(message.encode() + b"\0")
        reply = sock.recv(MSG_LEN)
    return _text(reply)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Local socket servers and clients.")
    parser.add_argument(
        "role", choices=("dgram-server", "dgram-client", "seqpacket-server", "seqpacket-client")
    )
    parser.add_argument("--path", type=Path, default=Path(SOCK_FILE))
    parser.add_argument("--message", default=DGRAM_MESSAGE, help="datagram client message")
    args = parser.parse_args(argv)

    try:
        if args.role == "dgram-server":
            serve_dgram(args.path)
        elif args.role == "seqpacket-server":
            serve_seqpacket(args.path)
        elif args.role == "dgram-client":
            print(f"Recv reply from server: {send_dgram(args.path, args.message)}")
        else:
            print(f"Recv reply from server: {send_seqpacket(args.path)}")
    except OSError as exc:
        print(f"{args.role}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())