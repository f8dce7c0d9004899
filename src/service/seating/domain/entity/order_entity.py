"""
Order Entity - the request built from a cart and the server's answer

The request is built straight from the ticket_type_id each cart entry carries.
"""

from typing import Tuple

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity


@attrs.frozen
class OrderTicket:
    ticket_type_id: str
    seat_id: str


@attrs.frozen
class OrderRequest:
    event_id: str
    tickets: Tuple[OrderTicket, ...] = attrs.field(converter=tuple)
    user: BuyerIdentity

    @classmethod
    @Logger.io
    def from_cart(cls, *, event_id: str, cart: Cart, user: BuyerIdentity) -> 'OrderRequest':
        if cart.is_empty:
            raise DomainError('Cannot create an order from an empty cart')
        if not event_id:
            raise DomainError('Cannot create an order without an event')

        tickets = [
            OrderTicket(ticket_type_id=seat.ticket_type_id, seat_id=seat.seat_id)
            for seat in cart.in_display_order()
        ]
        return cls(event_id=event_id, tickets=tickets, user=user)


@attrs.frozen
class OrderResponse:
    order_id: str
    tickets: Tuple[OrderTicket, ...] = attrs.field(converter=tuple)
    user: BuyerIdentity
    total_amount: float
