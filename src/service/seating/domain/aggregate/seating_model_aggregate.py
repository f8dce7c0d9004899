"""
Seating Model Aggregate - read-only priced view of every seat of one event

[Business Invariants]
- Every PricedSeat carries exactly the price and name of the ticket type its
  raw seat referenced; a seat with an unknown ticket type fails the whole merge
- Rows ascend by seat_row, seats within a row ascend by place
- The model is rebuilt wholesale whenever the raw payload changes
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

import attrs

from src.platform.exception.exceptions import DataIntegrityError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.value_object.priced_seat import PricedSeat
from src.service.seating.domain.value_object.raw_seat import RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType


@attrs.frozen
class SeatingRow:
    seat_row: int
    seats: Tuple[PricedSeat, ...] = attrs.field(factory=tuple, converter=tuple)


@attrs.frozen
class SeatingModel:
    rows: Tuple[SeatingRow, ...] = attrs.field(factory=tuple, converter=tuple)
    _seat_index: Dict[str, PricedSeat] = attrs.field(init=False, repr=False, eq=False)

    def __attrs_post_init__(self) -> None:
        object.__setattr__(
            self,
            '_seat_index',
            {seat.seat_id: seat for row in self.rows for seat in row.seats},
        )

    @classmethod
    @Logger.io
    def merge(
        cls,
        *,
        ticket_types: Iterable[TicketType],
        seat_rows: Iterable[RawSeatRow],
    ) -> 'SeatingModel':
        """
        Join raw seat placements with ticket-type prices.

        Pure: identical inputs give an identical, deterministically ordered model.
        Sorting is stable, so seats sharing a place keep their payload order.

        Raises:
            DataIntegrityError: When a seat references an unknown ticket type.
        """
        ticket_map = {ticket_type.id: ticket_type for ticket_type in ticket_types}

        rows = []
        for raw_row in sorted(seat_rows, key=lambda r: r.seat_row):
            seats = []
            for raw_seat in raw_row.seats:
                ticket_type = ticket_map.get(raw_seat.ticket_type_id)
                if ticket_type is None:
                    raise DataIntegrityError(
                        seat_id=raw_seat.seat_id, ticket_type_id=raw_seat.ticket_type_id
                    )
                seats.append(
                    PricedSeat(
                        seat_id=raw_seat.seat_id,
                        row=raw_row.seat_row,
                        place=raw_seat.place,
                        price=ticket_type.price,
                        ticket_type_name=ticket_type.name,
                        ticket_type_id=ticket_type.id,
                    )
                )
            seats.sort(key=lambda s: s.place)
            rows.append(SeatingRow(seat_row=raw_row.seat_row, seats=seats))

        return cls(rows=rows)

    def get_seat(self, seat_id: str) -> Optional[PricedSeat]:
        return self._seat_index.get(seat_id)

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self._seat_index

    def __iter__(self) -> Iterator[PricedSeat]:
        for row in self.rows:
            yield from row.seats

    @property
    def seat_count(self) -> int:
        return len(self._seat_index)
