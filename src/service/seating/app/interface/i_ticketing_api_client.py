"""
Ticketing API Client Interface

Application layer abstraction over the remote ticketing service.
Use cases depend on this port, not on the HTTP transport.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from src.service.seating.domain.entity.order_entity import OrderRequest, OrderResponse
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity
from src.service.seating.domain.value_object.event_info import EventInfo
from src.service.seating.domain.value_object.raw_seat import RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType


class ITicketingApiClient(ABC):
    @abstractmethod
    async def get_event(self) -> EventInfo:
        """
        GET /event

        Raises:
            RemoteServiceError: On a non-2xx status or an unreadable body
            RemoteUnavailableError: When no usable response was received
        """
        pass

    @abstractmethod
    async def get_event_tickets(self, *, event_id: str) -> Tuple[List[TicketType], List[RawSeatRow]]:
        """
        GET /event-tickets?eventId=<event_id>

        Returns:
            The ticket-type catalog and the raw seat rows, unmerged

        Raises:
            RemoteServiceError: On a non-2xx status or an unreadable body
            RemoteUnavailableError: When no usable response was received
        """
        pass

    @abstractmethod
    async def login(self, *, email: str, password: str) -> BuyerIdentity:
        """
        POST /login

        Raises:
            LoginError: On a non-2xx status
            RemoteUnavailableError: When no usable response was received
        """
        pass

    @abstractmethod
    async def create_order(
        self, *, order_request: OrderRequest, idempotency_key: str
    ) -> OrderResponse:
        """
        POST /order

        Sent once, never retried here.

        Raises:
            RemoteServiceError: On a non-2xx status, detail holds the body text
            RemoteUnavailableError: When no usable response was received, outcome unknown
        """
        pass
