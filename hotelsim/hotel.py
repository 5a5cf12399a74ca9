"""Room allocation and the waiting queue of a small hotel."""

from __future__ import annotations

import re
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any

NAME_LEN = 32
MAX_ROOMS = 10
REPORT_LIMIT = 511

_NAME = re.compile(r"\s*(\S{1,%d})" % (NAME_LEN - 1))
_DAYS = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Guest:
    """A guest and the number of days left in the stay."""

    name: str
    days: int


@dataclass(frozen=True)
class Placement:
    """Where a guest ended up: a room number or a place in the queue."""

    guest: Guest
    owner: Any = None
    room: int | None = None
    position: int | None = None

    def __post_init__(self) -> None:
        if self.room is None and self.position is None:
            raise ValueError("a placement needs a room or a queue position")

    @property
    def assigned(self) -> bool:
        return self.room is not None

    @property
    def message(self) -> str:
        """The protocol line that announces this placement."""
        if self.room is not None:
            return (
                f"ASSIGNED Клиент {self.guest.name} → Номер {self.room} "
                f"на {self.guest.days} суток\n"
            )
        return (
            f"QUEUED Клиент {self.guest.name} в очереди под номером "
            f"{self.position}\n"
        )


def _clip(text: str, limit: int) -> str:
    return text.encode("utf-8")[:limit].decode("utf-8", "ignore")


def parse_checkin(args: str) -> Guest:
    """Read '<name> <days>' the way the check-in command expects it.

    The name is at most 31 characters; a longer word is cut and the
    remainder must then be the number of days.
    """
    name_match = _NAME.match(args)
    if name_match is None:
        raise ValueError("expected: CHECKIN <name> <days>")
    days_match = _DAYS.match(args, name_match.end())
    if days_match is None:
        raise ValueError("expected: CHECKIN <name> <days>")
    return Guest(name_match.group(1), int(days_match.group(1)))


class Hotel:
    """A fixed set of rooms plus a first-come queue of waiting guests."""

    def __init__(self, rooms: int = MAX_ROOMS) -> None:
        if rooms < 1:
            raise ValueError("a hotel needs at least one room")
        self._rooms = [Guest("", 0) for _ in range(rooms)]
        self._free = rooms
        self._queue: deque[Placement] = deque()
        self._lock = threading.Lock()

    @property
    def rooms(self) -> tuple[Guest, ...]:
        with self._lock:
            return tuple(self._rooms)

    @property
    def free_rooms(self) -> int:
        with self._lock:
            return self._free

    @property
    def queue_length(self) -> int:
        with self._lock:
            return len(self._queue)

    @property
    def waiting(self) -> tuple[Guest, ...]:
        with self._lock:
            return tuple(entry.guest for entry in self._queue)

    def _first_vacant(self) -> int | None:
        return next(
            (index for index, guest in enumerate(self._rooms) if guest.days == 0),
            None,
        )

    def check_in(self, name: str, days: int, owner: Any = None) -> Placement | None:
        """Give the guest a room, or a place in the queue when none is free.

        Returns None when rooms are counted free but none is vacant.
        """
        guest = Guest(name[: NAME_LEN - 1], days)
        with self._lock:
            if self._free > 0:
                index = self._first_vacant()
                if index is None:
                    return None
                self._rooms[index] = guest
                self._free -= 1
                return Placement(guest, owner, room=index + 1)
            placement = Placement(guest, owner, position=len(self._queue) + 1)
            self._queue.append(placement)
            return placement

    def advance_day(self) -> list[Placement]:
        """Let one day pass and move waiting guests into freed rooms."""
        assigned: list[Placement] = []
        with self._lock:
            for index, guest in enumerate(self._rooms):
                if guest.days > 0:
                    remaining = guest.days - 1
                    if remaining == 0:
                        self._rooms[index] = Guest("", 0)
                        self._free += 1
                    else:
                        self._rooms[index] = Guest(guest.name, remaining)
            while self._free > 0 and self._queue:
                waiting = self._queue.popleft()
                index = self._first_vacant()
                if index is None:
                    continue
                self._rooms[index] = waiting.guest
                self._free -= 1
                assigned.append(Placement(waiting.guest, waiting.owner, room=index + 1))
        return assigned

    def queue_report(self) -> str:
        """The QUEUE reply: the waiting guests in order, or that there are none."""
        with self._lock:
            if not self._queue:
                return "QUEUE Пусто\n"
            lines = ["QUEUE Список ожидающих:\n"]
            lines.extend(
                f"{number}) {entry.guest.name} ({entry.guest.days})\n"
                for number, entry in enumerate(self._queue, 1)
            )
        return _clip("".join(lines), REPORT_LIMIT)