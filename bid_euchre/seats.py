"""Seat arithmetic for the four-seat table."""

from __future__ import annotations

from typing import Tuple

Seat = int

SEATS: Tuple[Seat, ...] = (1, 2, 3, 4)


def next_seat(seat: Seat) -> Seat:
    """Return the seat to the left; seat 4 wraps round to seat 1."""
    return seat % 4 + 1


def partner_seat(seat: Seat) -> Seat:
    """Return the seat across the table (1 and 3, 2 and 4)."""
    return (seat + 1) % 4 + 1
