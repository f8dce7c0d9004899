import attrs


@attrs.frozen
class PricedSeat:
    """
    A seat joined with its ticket type at merge time.

    ticket_type_id is carried along so an order can be built straight from a
    cart entry without looking the ticket type up again by name and price.
    """

    seat_id: str
    row: int
    place: int
    price: float
    ticket_type_name: str
    ticket_type_id: str

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.row, self.place)
