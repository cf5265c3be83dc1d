from bid_euchre.seats import SEATS, next_seat, partner_seat


def test_next_seat_wraps_around_the_table():
    assert [next_seat(seat) for seat in SEATS] == [2, 3, 4, 1]


def test_partners_sit_opposite():
    assert [partner_seat(seat) for seat in SEATS] == [3, 4, 1, 2]
    for seat in SEATS:
        assert partner_seat(partner_seat(seat)) == seat
