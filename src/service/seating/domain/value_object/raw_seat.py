from typing import Tuple

import attrs


@attrs.frozen
class RawSeat:
    seat_id: str
    place: int
    ticket_type_id: str


@attrs.frozen
class RawSeatRow:
    """Seats as delivered by the catalog endpoint, in no particular order."""

    seat_row: int
    seats: Tuple[RawSeat, ...] = attrs.field(factory=tuple, converter=tuple)
