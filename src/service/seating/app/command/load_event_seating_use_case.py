from opentelemetry import trace

from src.platform.exception.exceptions import DataIntegrityError, RemoteServiceError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_session_store import ISessionStore
from src.service.seating.app.interface.i_ticketing_api_client import ITicketingApiClient
from src.service.seating.domain.aggregate.seating_model_aggregate import SeatingModel
from src.service.seating.domain.enum.load_status import LoadStatus
from src.service.seating.domain.session_state import (
    CatalogLoaded,
    EventLoaded,
    LoadFailed,
    LoadStarted,
    LoadState,
)


class LoadEventSeatingUseCase:
    """
    Load the event and its seat catalog, then build the seating model.

    Flow:
    1. GET /event
    2. GET /event-tickets?eventId=<event.eventId>
    3. Merge ticket types into seats, dispatch the new model (cart is reconciled)

    No retry: a failed request leaves the session UNAVAILABLE. A merge failure
    leaves it INTEGRITY_ERROR and is re-raised, since rendering seats with
    unknown prices is never acceptable.
    """

    def __init__(self, *, api_client: ITicketingApiClient, session_store: ISessionStore) -> None:
        self.api_client = api_client
        self.session_store = session_store
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self) -> LoadState:
        """
        Returns:
            The load state after this request (possibly already superseded)

        Raises:
            DataIntegrityError: When a seat references an unknown ticket type
        """
        request_id = self.session_store.next_request_id('load')

        with self.tracer.start_as_current_span(
            'use_case.load_event_seating',
            attributes={'load.request_id': request_id},
        ):
            self.session_store.dispatch(LoadStarted(request_id=request_id))

            try:
                event = await self.api_client.get_event()
                self.session_store.dispatch(EventLoaded(request_id=request_id, event=event))

                ticket_types, seat_rows = await self.api_client.get_event_tickets(
                    event_id=event.event_id
                )
            except RemoteServiceError as e:
                Logger.base.warning(f'🎫 [LOAD] Event data unavailable: {e.message}')
                self.session_store.dispatch(
                    LoadFailed(
                        request_id=request_id,
                        status=LoadStatus.UNAVAILABLE,
                        detail=e.detail or e.message,
                    )
                )
                return self.session_store.state.load

            try:
                seating = SeatingModel.merge(ticket_types=ticket_types, seat_rows=seat_rows)
            except DataIntegrityError as e:
                self.session_store.dispatch(
                    LoadFailed(
                        request_id=request_id,
                        status=LoadStatus.INTEGRITY_ERROR,
                        detail=e.message,
                    )
                )
                raise

            self.session_store.dispatch(CatalogLoaded(request_id=request_id, seating=seating))
            Logger.base.info(
                f'🎫 [LOAD] Event {event.event_id}: {len(seating.rows)} rows, '
                f'{seating.seat_count} seats'
            )
            return self.session_store.state.load
