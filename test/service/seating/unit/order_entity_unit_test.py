import pytest

from src.platform.exception.exceptions import DomainError
from src.service.seating.domain.aggregate.seating_model_aggregate import SeatingModel
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.entity.order_entity import OrderRequest, OrderTicket
from src.service.seating.domain.value_object.raw_seat import RawSeat, RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType


@pytest.mark.unit
class TestOrderRequestFromCart:
    def test_tickets_follow_display_order(self, seating_model, buyer):
        cart = Cart()
        for seat_id in ('s4', 's1'):
            cart = cart.toggle(seating_model.get_seat(seat_id))

        request = OrderRequest.from_cart(event_id='evt-2024', cart=cart, user=buyer)

        assert request.event_id == 'evt-2024'
        assert request.user == buyer
        assert request.tickets == (
            OrderTicket(ticket_type_id='t1', seat_id='s1'),
            OrderTicket(ticket_type_id='t2', seat_id='s4'),
        )

    def test_ticket_type_id_comes_from_the_cart_entry(self, buyer):
        # Given: Two ticket types sharing name and price
        model = SeatingModel.merge(
            ticket_types=[
                TicketType(id='early', name='Standard', price=500),
                TicketType(id='late', name='Standard', price=500),
            ],
            seat_rows=[
                RawSeatRow(
                    seat_row=1,
                    seats=[
                        RawSeat(seat_id='s1', place=1, ticket_type_id='early'),
                        RawSeat(seat_id='s2', place=2, ticket_type_id='late'),
                    ],
                )
            ],
        )
        cart = Cart().toggle(model.get_seat('s2'))

        # When
        request = OrderRequest.from_cart(event_id='evt', cart=cart, user=buyer)

        # Then
        assert request.tickets == (OrderTicket(ticket_type_id='late', seat_id='s2'),)

    def test_empty_cart_is_rejected(self, buyer):
        with pytest.raises(DomainError):
            OrderRequest.from_cart(event_id='evt', cart=Cart(), user=buyer)

    def test_missing_event_is_rejected(self, seating_model, buyer):
        cart = Cart().toggle(seating_model.get_seat('s1'))

        with pytest.raises(DomainError):
            OrderRequest.from_cart(event_id='', cart=cart, user=buyer)
