"""Watch everything the hotel server reports to monitors."""

from __future__ import annotations

import codecs
import socket
import sys
from typing import TextIO

BUF_SIZE = 255
CLOSED_MESSAGE = "[RECV] Сервер закрыл соединение.\n"


def watch(host: str, port: int, out: TextIO | None = None) -> None:
    """Register as a monitor and copy every message to out until the server leaves."""
    out = sys.stdout if out is None else out
    socket.inet_pton(socket.AF_INET, host)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    with socket.create_connection((host, port)) as sock:
        sock.sendall(b"MONITOR\n")
        while True:
            try:
                chunk = sock.recv(BUF_SIZE)
            except OSError as exc:
                print(f"recv: {exc}", file=sys.stderr)
                return
            if not chunk:
                out.write(CLOSED_MESSAGE)
                out.flush()
                return
            out.write(f"[RECV] {decoder.decode(chunk)}")
            out.flush()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: hotelsim-monitor <server_ip> <port>", file=sys.stderr)
        return 1
    host, port_text = args
    try:
        port = int(port_text)
    except ValueError:
        print(f"invalid port: {port_text}", file=sys.stderr)
        return 1
    try:
        watch(host, port)
    except OSError as exc:
        print(f"connect: {exc}", file=sys.stderr)
        return 1
    return 0