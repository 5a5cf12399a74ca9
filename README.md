# hotelsim

A small hotel simulated over TCP. The server has ten rooms. Guests check in
for a number of days. When every room is taken, new guests wait in a
first-in, first-out queue. A simulated day passes every six seconds. When a
room frees up, the next guest in the queue gets it, and the reply goes to the
connection that queued the guest.

Monitors can connect and receive every request and reply. Each message is
tagged with the `ip:port` of the client it belongs to.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Commands

### Server

```
hotelsim-server <port>
```

The server listens on all interfaces on the given port and prints every
message it receives. Stop it with Ctrl-C or SIGTERM.

Clients send text commands. A command is recognised by how the received text
begins:

| Command                 | Reply                                              |
|-------------------------|----------------------------------------------------|
| `CHECKIN <name> <days>` | `ASSIGNED ...` with the room number, or `QUEUED ...` with the queue position. A malformed request gets `ERROR ...` |
| `QUEUE`                 | `QUEUE ...`, which lists the waiting guests with their days, or says the queue is empty |
| `MONITOR`               | `OK ...`, after which the connection receives all traffic. At most 10 monitors are accepted; beyond that the reply is `ERROR ...` |
| anything else           | `ERROR ...`                                        |

Names are cut to 31 characters.

### Monitor

```
hotelsim-monitor <server_ip> <port>
```

The monitor registers with the server. It prints everything it receives with
a `[RECV]` prefix and exits when the server closes the connection. The server
address must be an IPv4 address.

### Random client

```
hotelsim-randclient <server_ip> <port> <sleep_time>
```

The random client checks in `Guest1`, `Guest2` and so on, each for a random
stay of 1 to 5 days. It prints each reply and waits `sleep_time` seconds
(a whole number) between requests. It stops when the server closes the
connection.

## Using it as a library

`hotelsim.hotel` holds the booking logic and does no networking:

```python
from hotelsim.hotel import Hotel, parse_checkin

hotel = Hotel(rooms=2)
guest = parse_checkin(" Alice 3")           # Guest(name="Alice", days=3)
placement = hotel.check_in(guest.name, guest.days, owner=None)
print(placement.message)                    # the ASSIGNED or QUEUED line
print(hotel.queue_report())                 # the QUEUE reply
for placement in hotel.advance_day():
    ...  # guests moved from the queue into rooms that became free
```

`parse_checkin` raises `ValueError` when the text does not hold a name and a
number of days. `Hotel` also has the read-only properties `rooms`,
`free_rooms`, `queue_length` and `waiting`.

`hotelsim.server.HotelServer(port, day_time)` runs the network server. It can
be used as a context manager. `serve_forever()` accepts clients and starts the
day clock, and `shutdown()` stops them. `hotelsim.monitor.watch(host, port, out)`
and `hotelsim.randclient.run(host, port, sleep_time, out, rng)` are the
functions behind the two client commands.

## Limits

The hotel state lives only in the server's memory. Bookings and the queue
are not stored anywhere and are lost when the server stops.

## Tests

```
pip install .[test]
pytest
```