import attrs


@attrs.frozen
class TicketType:
    """A named price tier (e.g. VIP, Standard), unique by id within an event."""

    id: str
    name: str
    price: float
