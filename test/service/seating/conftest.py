from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.service.seating.app.interface.i_ticketing_api_client import ITicketingApiClient
from src.service.seating.domain.aggregate.seating_model_aggregate import SeatingModel
from src.service.seating.domain.entity.order_entity import OrderResponse, OrderTicket
from src.service.seating.domain.session_state import (
    CatalogLoaded,
    EventLoaded,
    LoadStarted,
)
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity
from src.service.seating.domain.value_object.event_info import EventInfo
from src.service.seating.domain.value_object.raw_seat import RawSeat, RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType
from src.service.seating.driven_adapter.state.session_store_impl import SessionStoreImpl


EVENT_ID = 'evt-2024'


@pytest.fixture
def ticket_types() -> list[TicketType]:
    return [
        TicketType(id='t1', name='VIP', price=800),
        TicketType(id='t2', name='Standard', price=500),
    ]


@pytest.fixture
def raw_seat_rows() -> list[RawSeatRow]:
    """Rows and seats deliberately out of order."""
    return [
        RawSeatRow(
            seat_row=2,
            seats=[
                RawSeat(seat_id='s4', place=2, ticket_type_id='t2'),
                RawSeat(seat_id='s3', place=1, ticket_type_id='t2'),
            ],
        ),
        RawSeatRow(
            seat_row=1,
            seats=[
                RawSeat(seat_id='s2', place=2, ticket_type_id='t1'),
                RawSeat(seat_id='s1', place=1, ticket_type_id='t1'),
            ],
        ),
    ]


@pytest.fixture
def seating_model(
    ticket_types: list[TicketType], raw_seat_rows: list[RawSeatRow]
) -> SeatingModel:
    return SeatingModel.merge(ticket_types=ticket_types, seat_rows=raw_seat_rows)


@pytest.fixture
def event_info() -> EventInfo:
    return EventInfo(
        event_id=EVENT_ID,
        name_pub='NFCTRON Keynote',
        description='Annual keynote',
        currency_iso='CZK',
        date_from=datetime(2024, 10, 17, 18, 0, tzinfo=timezone.utc),
        date_to=datetime(2024, 10, 17, 22, 0, tzinfo=timezone.utc),
        header_image_url='https://example.com/header.jpg',
        place='Forum Karlin, Prague',
    )


@pytest.fixture
def buyer() -> BuyerIdentity:
    return BuyerIdentity(email='jan@example.com', first_name='Jan', last_name='Novak')


@pytest.fixture
def order_response(buyer: BuyerIdentity) -> OrderResponse:
    return OrderResponse(
        order_id='order-1',
        tickets=[OrderTicket(ticket_type_id='t1', seat_id='s1')],
        user=buyer,
        total_amount=800,
    )


@pytest.fixture
def session_store() -> SessionStoreImpl:
    return SessionStoreImpl()


@pytest.fixture
def ready_store(
    session_store: SessionStoreImpl, event_info: EventInfo, seating_model: SeatingModel
) -> SessionStoreImpl:
    """Session with event and seating model loaded, cart empty."""
    request_id = session_store.next_request_id('load')
    session_store.dispatch(LoadStarted(request_id=request_id))
    session_store.dispatch(EventLoaded(request_id=request_id, event=event_info))
    session_store.dispatch(CatalogLoaded(request_id=request_id, seating=seating_model))
    return session_store


@pytest.fixture
def mock_api_client(
    event_info: EventInfo,
    ticket_types: list[TicketType],
    raw_seat_rows: list[RawSeatRow],
    order_response: OrderResponse,
    buyer: BuyerIdentity,
) -> AsyncMock:
    client = AsyncMock(spec=ITicketingApiClient)
    client.get_event = AsyncMock(return_value=event_info)
    client.get_event_tickets = AsyncMock(return_value=(ticket_types, raw_seat_rows))
    client.login = AsyncMock(return_value=buyer)
    client.create_order = AsyncMock(return_value=order_response)
    return client
