from types import MappingProxyType
from typing import List, Mapping, Tuple

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.aggregate.seating_model_aggregate import SeatingModel
from src.service.seating.domain.value_object.priced_seat import PricedSeat


def _freeze(entries: Mapping[str, PricedSeat]) -> Mapping[str, PricedSeat]:
    return MappingProxyType(dict(entries))


@attrs.frozen
class Cart:
    """
    Seats selected in this session, keyed by seat_id.

    Each entry is the PricedSeat as it was when selected, so a later catalog
    reload cannot change the remembered price. Every operation returns a new Cart.
    """

    entries: Mapping[str, PricedSeat] = attrs.field(
        factory=dict, converter=_freeze, eq=False, hash=False
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cart):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    @Logger.io
    def toggle(self, seat: PricedSeat) -> 'Cart':
        """Deselect the seat if present, otherwise select it."""
        entries = dict(self.entries)
        if seat.seat_id in entries:
            del entries[seat.seat_id]
        else:
            entries[seat.seat_id] = seat
        return Cart(entries=entries)

    @Logger.io
    def reconcile(self, seating_model: SeatingModel) -> 'Cart':
        """Drop entries whose seat no longer exists in the seating model."""
        kept = {seat_id: seat for seat_id, seat in self.entries.items() if seat_id in seating_model}
        if len(kept) == len(self.entries):
            return self
        dropped = sorted(set(self.entries) - set(kept))
        Logger.base.warning(f'🪑 [CART] Dropped seats missing from the catalog: {dropped}')
        return Cart(entries=kept)

    def contains(self, seat_id: str) -> bool:
        return seat_id in self.entries

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def ticket_count(self) -> int:
        return len(self.entries)

    @property
    def total_amount(self) -> float:
        return sum(seat.price for seat in self.entries.values())

    @property
    def seat_ids(self) -> Tuple[str, ...]:
        return tuple(seat.seat_id for seat in self.in_display_order())

    def in_display_order(self) -> List[PricedSeat]:
        """Row ascending, then place ascending."""
        return sorted(self.entries.values(), key=lambda seat: seat.sort_key)
