from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar

import httpx
import orjson
from pydantic import BaseModel, ValidationError

from src.platform.exception.exceptions import (
    LoginError,
    RemoteServiceError,
    RemoteUnavailableError,
)
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_ticketing_api_client import ITicketingApiClient
from src.service.seating.domain.entity.order_entity import OrderRequest, OrderResponse
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity
from src.service.seating.domain.value_object.event_info import EventInfo
from src.service.seating.domain.value_object.raw_seat import RawSeatRow
from src.service.seating.domain.value_object.ticket_type import TicketType
from src.service.seating.driven_adapter.schema.ticketing_api_schema import (
    EventResponseSchema,
    EventTicketsResponseSchema,
    LoginRequestSchema,
    LoginResponseSchema,
    OrderRequestSchema,
    OrderResponseSchema,
)


EVENT_PATH = '/event'
EVENT_TICKETS_PATH = '/event-tickets'
LOGIN_PATH = '/login'
ORDER_PATH = '/order'

IDEMPOTENCY_KEY_HEADER = 'Idempotency-Key'

# A gateway answered for the origin, which may already have committed the order
GATEWAY_STATUSES = frozenset({502, 503, 504})

_SchemaT = TypeVar('_SchemaT', bound=BaseModel)


class TicketingApiClientImpl(ITicketingApiClient):
    """
    httpx adapter for the ticketing API.

    One AsyncClient per call; nothing is retried here.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={'Accept': 'application/json'},
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        body: Optional[BaseModel] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Response:
        request_headers = dict(headers or {})
        content = None
        if body is not None:
            content = orjson.dumps(body.model_dump(by_alias=True))
            request_headers['Content-Type'] = 'application/json'

        try:
            async with self._client() as client:
                return await client.request(
                    method, path, params=params, content=content, headers=request_headers
                )
        except httpx.TimeoutException as e:
            raise RemoteUnavailableError(f'{method} {path} timed out', detail=str(e)) from e
        except httpx.HTTPError as e:
            # Covers transport failures and bodies that cannot be decoded
            raise RemoteUnavailableError(
                f'{method} {path} failed: no usable response', detail=str(e)
            ) from e

    @staticmethod
    def _raise_for_status(
        response: httpx.Response, method: str, path: str, *, may_have_committed: bool = False
    ) -> None:
        if response.is_success:
            return
        detail = response.text.strip() or None
        raise RemoteServiceError(
            f'{method} {path} failed: {response.status_code}',
            response.status_code,
            detail=detail,
            outcome_unknown=may_have_committed and response.status_code in GATEWAY_STATUSES,
        )

    @staticmethod
    def _parse(
        response: httpx.Response,
        schema: Type[_SchemaT],
        method: str,
        path: str,
        *,
        may_have_committed: bool = False,
    ) -> _SchemaT:
        try:
            payload: Any = orjson.loads(response.content)
            return schema.model_validate(payload)
        except (orjson.JSONDecodeError, ValidationError) as e:
            raise RemoteServiceError(
                f'{method} {path} returned an unreadable body',
                502,
                detail=str(e),
                outcome_unknown=may_have_committed,
            ) from e

    @Logger.io
    async def get_event(self) -> EventInfo:
        response = await self._request('GET', EVENT_PATH)
        self._raise_for_status(response, 'GET', EVENT_PATH)
        return self._parse(response, EventResponseSchema, 'GET', EVENT_PATH).to_domain()

    @Logger.io
    async def get_event_tickets(self, *, event_id: str) -> Tuple[List[TicketType], List[RawSeatRow]]:
        response = await self._request('GET', EVENT_TICKETS_PATH, params={'eventId': event_id})
        self._raise_for_status(response, 'GET', EVENT_TICKETS_PATH)
        parsed = self._parse(response, EventTicketsResponseSchema, 'GET', EVENT_TICKETS_PATH)
        return (
            [ticket_type.to_domain() for ticket_type in parsed.ticket_types],
            [row.to_domain() for row in parsed.seat_rows],
        )

    @Logger.io
    async def login(self, *, email: str, password: str) -> BuyerIdentity:
        response = await self._request(
            'POST', LOGIN_PATH, body=LoginRequestSchema(email=email, password=password)
        )
        if not response.is_success:
            raise LoginError(
                f'POST {LOGIN_PATH} failed: {response.status_code}', response.status_code
            )
        return self._parse(response, LoginResponseSchema, 'POST', LOGIN_PATH).user.to_domain()

    @Logger.io
    async def create_order(
        self, *, order_request: OrderRequest, idempotency_key: str
    ) -> OrderResponse:
        headers = {IDEMPOTENCY_KEY_HEADER: idempotency_key} if idempotency_key else None
        response = await self._request(
            'POST',
            ORDER_PATH,
            body=OrderRequestSchema.from_domain(order_request),
            headers=headers,
        )
        self._raise_for_status(response, 'POST', ORDER_PATH, may_have_committed=True)
        return self._parse(
            response, OrderResponseSchema, 'POST', ORDER_PATH, may_have_committed=True
        ).to_domain()
