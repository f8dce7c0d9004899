"""
Wire schemas of the remote ticketing API (camelCase JSON).

Only this module knows the payload shapes; everything past it speaks domain types.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.seating.domain.entity.order_entity import (
    OrderRequest,
    OrderResponse,
    OrderTicket,
)
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity
from src.service.seating.domain.value_object.event_info import EventInfo
from src.service.seating.domain.value_object.raw_seat import RawSeat, RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class EventResponseSchema(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'eventId': '3f0e4b5a-0c0e-4a8e-9d0a-1b2c3d4e5f60',
                'namePub': 'NFCTRON Keynote 2024',
                'description': 'Annual keynote',
                'currencyIso': 'CZK',
                'dateFrom': '2024-10-17T18:00:00Z',
                'dateTo': '2024-10-17T22:00:00Z',
                'headerImageUrl': 'https://example.com/header.jpg',
                'place': 'Forum Karlin, Prague',
            }
        }
    )

    event_id: str
    name_pub: str
    description: str = ''
    currency_iso: str
    date_from: datetime
    date_to: datetime
    header_image_url: Optional[str] = None
    place: str = ''

    def to_domain(self) -> EventInfo:
        return EventInfo(
            event_id=self.event_id,
            name_pub=self.name_pub,
            description=self.description,
            currency_iso=self.currency_iso,
            date_from=self.date_from,
            date_to=self.date_to,
            header_image_url=self.header_image_url,
            place=self.place,
        )


class TicketTypeSchema(CamelModel):
    id: str
    name: str
    price: float

    def to_domain(self) -> TicketType:
        return TicketType(id=self.id, name=self.name, price=self.price)


class SeatSchema(CamelModel):
    seat_id: str
    place: int
    ticket_type_id: str


class SeatRowSchema(CamelModel):
    seat_row: int
    seats: List[SeatSchema] = []

    def to_domain(self) -> RawSeatRow:
        return RawSeatRow(
            seat_row=self.seat_row,
            seats=[
                RawSeat(seat_id=s.seat_id, place=s.place, ticket_type_id=s.ticket_type_id)
                for s in self.seats
            ],
        )


class EventTicketsResponseSchema(CamelModel):
    ticket_types: List[TicketTypeSchema] = []
    seat_rows: List[SeatRowSchema] = []


class UserSchema(CamelModel):
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_domain(cls, identity: BuyerIdentity) -> 'UserSchema':
        return cls(
            email=identity.email,
            first_name=identity.first_name,
            last_name=identity.last_name,
        )

    def to_domain(self) -> BuyerIdentity:
        return BuyerIdentity(
            email=self.email, first_name=self.first_name, last_name=self.last_name
        )


class LoginRequestSchema(CamelModel):
    email: str
    password: str


class LoginResponseSchema(CamelModel):
    message: str = ''
    user: UserSchema


class OrderTicketSchema(CamelModel):
    ticket_type_id: str
    seat_id: str


class OrderRequestSchema(CamelModel):
    event_id: str
    tickets: List[OrderTicketSchema]
    user: UserSchema

    @classmethod
    def from_domain(cls, order_request: OrderRequest) -> 'OrderRequestSchema':
        return cls(
            event_id=order_request.event_id,
            tickets=[
                OrderTicketSchema(ticket_type_id=t.ticket_type_id, seat_id=t.seat_id)
                for t in order_request.tickets
            ],
            user=UserSchema.from_domain(order_request.user),
        )


class OrderResponseSchema(CamelModel):
    message: str = ''
    order_id: str
    tickets: List[OrderTicketSchema] = []
    user: UserSchema
    total_amount: float

    def to_domain(self) -> OrderResponse:
        return OrderResponse(
            order_id=self.order_id,
            tickets=[
                OrderTicket(ticket_type_id=t.ticket_type_id, seat_id=t.seat_id)
                for t in self.tickets
            ],
            user=self.user.to_domain(),
            total_amount=self.total_amount,
        )
