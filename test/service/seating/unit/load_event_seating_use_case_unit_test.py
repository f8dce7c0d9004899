from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    DataIntegrityError,
    RemoteServiceError,
    RemoteUnavailableError,
)
from src.service.seating.app.command.load_event_seating_use_case import (
    LoadEventSeatingUseCase,
)
from src.service.seating.domain.enum.load_status import LoadStatus
from src.service.seating.domain.session_state import LoadStarted, ToggleSeat
from src.service.seating.domain.value_object.raw_seat import RawSeat, RawSeatRow


@pytest.mark.unit
class TestLoadEventSeatingUseCase:
    @pytest.fixture
    def use_case(self, mock_api_client, session_store):
        return LoadEventSeatingUseCase(api_client=mock_api_client, session_store=session_store)

    @pytest.mark.asyncio
    async def test_load_builds_seating_model(
        self, use_case, mock_api_client, session_store, event_info, seating_model
    ):
        # When
        load = await use_case.execute()

        # Then
        assert load.status == LoadStatus.READY
        assert load.event == event_info
        assert load.seating == seating_model
        assert session_store.state.load is load
        mock_api_client.get_event_tickets.assert_awaited_once_with(event_id=event_info.event_id)

    @pytest.mark.asyncio
    async def test_event_failure_marks_unavailable(self, use_case, mock_api_client):
        # Given: GET /event times out
        mock_api_client.get_event = AsyncMock(
            side_effect=RemoteUnavailableError('GET /event timed out', detail='read timeout')
        )

        # When
        load = await use_case.execute()

        # Then: No exception, nothing else requested
        assert load.status == LoadStatus.UNAVAILABLE
        assert load.error_detail == 'read timeout'
        assert load.seating is None
        mock_api_client.get_event_tickets.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_catalog_failure_keeps_event_but_no_seating(
        self, use_case, mock_api_client, event_info
    ):
        mock_api_client.get_event_tickets = AsyncMock(
            side_effect=RemoteServiceError('GET /event-tickets failed: 500', 500)
        )

        load = await use_case.execute()

        assert load.status == LoadStatus.UNAVAILABLE
        assert load.error_detail == 'GET /event-tickets failed: 500'
        assert load.event == event_info
        assert not load.event_loaded

    @pytest.mark.asyncio
    async def test_unknown_ticket_type_marks_integrity_error_and_raises(
        self, use_case, mock_api_client, session_store, ticket_types
    ):
        mock_api_client.get_event_tickets = AsyncMock(
            return_value=(
                ticket_types,
                [
                    RawSeatRow(
                        seat_row=1,
                        seats=[RawSeat(seat_id='s1', place=1, ticket_type_id='ghost')],
                    )
                ],
            )
        )

        with pytest.raises(DataIntegrityError):
            await use_case.execute()

        assert session_store.state.load.status == LoadStatus.INTEGRITY_ERROR
        assert session_store.state.load.seating is None

    @pytest.mark.asyncio
    async def test_superseded_load_does_not_overwrite_newer_request(
        self, use_case, mock_api_client, session_store, ticket_types, raw_seat_rows
    ):
        # Given: A newer load starts while this one awaits the catalog
        async def newer_load_starts(*, event_id):
            session_store.dispatch(LoadStarted(request_id=session_store.next_request_id('load')))
            return ticket_types, raw_seat_rows

        mock_api_client.get_event_tickets = AsyncMock(side_effect=newer_load_starts)

        # When
        load = await use_case.execute()

        # Then: The older result was dropped
        assert load.status == LoadStatus.LOADING
        assert load.request_id == 2
        assert load.seating is None

    @pytest.mark.asyncio
    async def test_reload_reconciles_cart(
        self, use_case, mock_api_client, session_store, ticket_types
    ):
        await use_case.execute()
        session_store.dispatch(ToggleSeat(seat_id='s1'))
        session_store.dispatch(ToggleSeat(seat_id='s3'))
        mock_api_client.get_event_tickets = AsyncMock(
            return_value=(
                ticket_types,
                [RawSeatRow(seat_row=1, seats=[RawSeat(seat_id='s1', place=1, ticket_type_id='t1')])],
            )
        )

        await use_case.execute()

        assert session_store.state.cart.seat_ids == ('s1',)
