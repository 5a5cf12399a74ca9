"""A client that keeps checking in numbered guests for random stays."""

from __future__ import annotations

import codecs
import itertools
import random
import socket
import sys
import time
from typing import TextIO

BUF_SIZE = 128


def read_line(sock: socket.socket, maxlen: int = BUF_SIZE) -> bytes:
    """Read up to a newline or maxlen - 1 bytes; b'' once the peer has closed."""
    line = bytearray()
    while len(line) < maxlen - 1:
        byte = sock.recv(1)
        if not byte:
            return b""
        line += byte
        if byte == b"\n":
            break
    return bytes(line)


def run(
    host: str,
    port: int,
    sleep_time: float,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> int:
    """Check in Guest1, Guest2, ... until the server goes away.

    Returns the number of replies received.
    """
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng
    socket.inet_pton(socket.AF_INET, host)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    answered = 0
    with socket.create_connection((host, port)) as sock:
        for guest_id in itertools.count(1):
            days = rng.randint(1, 5)
            message = f"CHECKIN Guest{guest_id} {days}\n"
            try:
                sock.sendall(message.encode("utf-8"))
            except OSError as exc:
                print(f"send: {exc}", file=sys.stderr)
                break
            try:
                reply = read_line(sock)
            except OSError as exc:
                print(f"recv: {exc}", file=sys.stderr)
                break
            if not reply:
                print("Server closed connection", file=sys.stderr)
                break
            out.write(decoder.decode(reply))
            out.flush()
            answered += 1
            time.sleep(sleep_time)
    return answered


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Usage: hotelsim-randclient <server_ip> <port> <sleep_time>", file=sys.stderr)
        return 1
    host, port_text, sleep_text = args
    try:
        port = int(port_text)
        sleep_time = int(sleep_text)
    except ValueError:
        print("port and sleep_time must be integers", file=sys.stderr)
        return 1
    try:
        run(host, port, sleep_time)
    except OSError as exc:
        print(f"connect: {exc}", file=sys.stderr)
        return 1
    return 0