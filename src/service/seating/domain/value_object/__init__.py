"""Seating Domain Value Objects"""

from src.service.seating.domain.value_object.buyer_identity import BuyerForm, BuyerIdentity
from src.service.seating.domain.value_object.event_info import EventInfo
from src.service.seating.domain.value_object.priced_seat import PricedSeat
from src.service.seating.domain.value_object.raw_seat import RawSeat, RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType

__all__ = [
    'BuyerForm',
    'BuyerIdentity',
    'EventInfo',
    'PricedSeat',
    'RawSeat',
    'RawSeatRow',
    'TicketType',
]
