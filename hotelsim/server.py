"""TCP front end of the hotel: clients check in, monitors watch the traffic."""

from __future__ import annotations

import signal
import socket
import sys
import threading
from typing import Any

from .hotel import Hotel, parse_checkin

DEFAULT_PORT = 8080
DAY_TIME = 6
BACKLOG = 10
MAX_MONITORS = 10
TAG_LIMIT = 511
RECV_SIZE = 127
_ACCEPT_POLL = 0.2

ERR_FORMAT = "ERROR неверный формат: CHECKIN <имя> <дни>\n"
ERR_UNKNOWN = "ERROR неизвестная команда\n"
ERR_MONITORS = "ERROR слишком много мониторов\n"
OK_MONITOR = "OK монитор зарегистрирован\n"


def format_tag(peer: tuple, msg: str) -> str:
    """Prefix a message with the '[ip:port] ' of the peer it concerns."""
    host, port = peer[0], peer[1]
    tagged = f"[{host}:{port}] {msg}"
    return tagged.encode("utf-8")[:TAG_LIMIT].decode("utf-8", "ignore")


class HotelServer:
    """Listens for clients, answers their commands and runs the day clock."""

    def __init__(self, port: int = DEFAULT_PORT, day_time: float = DAY_TIME) -> None:
        self.day_time = day_time
        self.hotel = Hotel()
        self._monitors: list[Any] = []
        self._monitors_lock = threading.Lock()
        self._stopped = threading.Event()
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(("", port))
            listener.listen(BACKLOG)
        except OSError:
            listener.close()
            raise
        listener.settimeout(_ACCEPT_POLL)
        self._listener = listener
        self.address = listener.getsockname()

    def __enter__(self) -> HotelServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    @property
    def monitor_count(self) -> int:
        with self._monitors_lock:
            return len(self._monitors)

    def handle_message(self, conn: Any, data: bytes | str) -> None:
        """Answer one chunk of text received from a connection."""
        text = data.decode("utf-8", "replace") if isinstance(data, bytes) else data
        print(f"Получено от клиента (sock={conn.fileno()}): {text}", end="", flush=True)

        if not text.startswith("MONITOR"):
            self._tag_and_broadcast(conn, text)

        if text.startswith("CHECKIN"):
            self._check_in(conn, text[len("CHECKIN"):])
        elif text.startswith("QUEUE"):
            self._reply(conn, self.hotel.queue_report())
        elif text.startswith("MONITOR"):
            self._register_monitor(conn)
        else:
            self._reply(conn, ERR_UNKNOWN)

    def _check_in(self, conn: Any, args: str) -> None:
        try:
            guest = parse_checkin(args)
        except ValueError:
            self._reply(conn, ERR_FORMAT)
            return
        placement = self.hotel.check_in(guest.name, guest.days, owner=conn)
        if placement is not None:
            self._reply(conn, placement.message)

    def _register_monitor(self, conn: Any) -> None:
        with self._monitors_lock:
            if len(self._monitors) < MAX_MONITORS:
                self._monitors.append(conn)
                reply = OK_MONITOR
            else:
                reply = ERR_MONITORS
        self._send(conn, reply)

    @staticmethod
    def _send(conn: Any, msg: str) -> bool:
        try:
            conn.sendall(msg.encode("utf-8"))
        except OSError:
            return False
        return True

    def _reply(self, conn: Any, msg: str) -> None:
        self._send(conn, msg)
        self._tag_and_broadcast(conn, msg)

    def _broadcast(self, msg: str) -> None:
        with self._monitors_lock:
            alive = []
            for monitor in self._monitors:
                if self._send(monitor, msg):
                    alive.append(monitor)
                else:
                    monitor.close()
            self._monitors = alive

    def _tag_and_broadcast(self, conn: Any, msg: str) -> None:
        try:
            peer = conn.getpeername()
        except OSError:
            peer = None
        if isinstance(peer, tuple) and len(peer) >= 2:
            self._broadcast(format_tag(peer, msg))
        else:
            self._broadcast(msg)

    def _serve_client(self, conn: socket.socket) -> None:
        with conn:
            while True:
                try:
                    data = conn.recv(RECV_SIZE)
                except OSError:
                    break
                if not data:
                    break
                self.handle_message(conn, data)

    def _clock(self) -> None:
        while not self._stopped.wait(self.day_time):
            for placement in self.hotel.advance_day():
                owner = placement.owner
                if self._send(owner, placement.message):
                    self._tag_and_broadcast(owner, placement.message)
                else:
                    owner.close()

    def serve_forever(self) -> None:
        """Accept clients until shutdown() is called."""
        threading.Thread(target=self._clock, daemon=True).start()
        while not self._stopped.is_set():
            try:
                conn, _ = self._listener.accept()
            except TimeoutError:
                continue
            except OSError as exc:
                if self._stopped.is_set():
                    break
                print(f"accept: {exc}", file=sys.stderr)
                continue
            conn.settimeout(None)
            threading.Thread(target=self._serve_client, args=(conn,), daemon=True).start()

    def shutdown(self) -> None:
        """Stop accepting clients and stop the clock."""
        self._stopped.set()
        self._listener.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: hotelsim-server <port>", file=sys.stderr)
        return 1
    try:
        port = int(args[0])
    except ValueError:
        print(f"Неверный порт: {args[0]}", file=sys.stderr)
        return 1
    try:
        server = HotelServer(port)
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1

    print(f"Сервер запущен на порту {port}", flush=True)

    def _stop(signum: int, frame: object) -> None:
        server.shutdown()

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)
    try:
        server.serve_forever()
    finally:
        server.shutdown()
    print("Сервер корректно завершил работу.", flush=True)
    return 0