import random

import pytest

from hotelsim.hotel import Guest, Hotel, Placement, parse_checkin


def test_parse_checkin_reads_name_and_days():
    assert parse_checkin(" Alice 3\n") == Guest("Alice", 3)


def test_parse_checkin_accepts_signed_days():
    assert parse_checkin("Bob -2") == Guest("Bob", -2)


def test_parse_checkin_cuts_name_and_reads_rest_as_days():
    assert parse_checkin(" " + "a" * 31 + "7 2") == Guest("a" * 31, 7)


def test_parse_checkin_long_name_without_number_fails():
    with pytest.raises(ValueError):
        parse_checkin("a" * 40 + " 3")


@pytest.mark.parametrize("args", ["", "   \n", "Alice", "Alice days", "Alice\n"])
def test_parse_checkin_rejects_malformed(args):
    with pytest.raises(ValueError):
        parse_checkin(args)


def test_check_in_assigns_first_room():
    hotel = Hotel(2)
    placement = hotel.check_in("Alice", 3, owner="a")
    assert placement.room == 1
    assert placement.position is None
    assert placement.message == "ASSIGNED Клиент Alice → Номер 1 на 3 суток\n"
    assert hotel.free_rooms == 1


def test_check_in_cuts_long_name():
    hotel = Hotel(1)
    assert hotel.check_in("x" * 40, 1).guest.name == "x" * 31


def test_full_hotel_queues_guests_in_order():
    hotel = Hotel(1)
    hotel.check_in("A", 1, owner="a")
    second = hotel.check_in("B", 2, owner="b")
    third = hotel.check_in("C", 4, owner="c")
    assert [second.position, third.position] == [1, 2]
    assert not second.assigned
    assert second.message == "QUEUED Клиент B в очереди под номером 1\n"
    assert hotel.waiting == (Guest("B", 2), Guest("C", 4))


def test_queue_report_empty():
    assert Hotel().queue_report() == "QUEUE Пусто\n"


def test_queue_report_lists_waiting_guests():
    hotel = Hotel(1)
    hotel.check_in("A", 1)
    hotel.check_in("B", 2)
    hotel.check_in("C", 4)
    assert hotel.queue_report() == "QUEUE Список ожидающих:\n1) B (2)\n2) C (4)\n"


def test_queue_report_is_clipped():
    hotel = Hotel(1)
    for number in range(60):
        hotel.check_in(f"Guest{number:026d}", 5)
    report = hotel.queue_report()
    assert len(report.encode("utf-8")) <= 511
    assert report.startswith("QUEUE Список ожидающих:\n1) ")


def test_advance_day_moves_waiting_guest_into_freed_room():
    hotel = Hotel(1)
    hotel.check_in("A", 1, owner="a")
    hotel.check_in("B", 2, owner="b")
    assert hotel.advance_day() == [Placement(Guest("B", 2), "b", room=1)]
    assert hotel.queue_length == 0
    assert hotel.free_rooms == 0


def test_advance_day_counts_down_stay():
    hotel = Hotel(2)
    hotel.check_in("A", 3)
    hotel.advance_day()
    assert hotel.rooms[0] == Guest("A", 2)
    hotel.advance_day()
    hotel.advance_day()
    assert hotel.rooms[0] == Guest("", 0)
    assert hotel.free_rooms == 2


def test_free_rooms_match_vacant_rooms():
    rng = random.Random(3)
    hotel = Hotel(4)
    for step in range(200):
        if rng.random() < 0.6:
            hotel.check_in(f"G{step}", rng.randint(1, 5))
        else:
            hotel.advance_day()
        vacant = sum(1 for guest in hotel.rooms if guest.days == 0)
        assert hotel.free_rooms == vacant
        if hotel.queue_length:
            assert hotel.free_rooms == 0


def test_hotel_needs_a_room():
    with pytest.raises(ValueError):
        Hotel(0)


def test_placement_needs_room_or_position():
    with pytest.raises(ValueError):
        Placement(Guest("A", 1))