from opentelemetry import trace
import uuid_utils

from src.platform.exception.exceptions import DomainError, RemoteServiceError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_session_store import ISessionStore
from src.service.seating.app.interface.i_ticketing_api_client import ITicketingApiClient
from src.service.seating.domain.checkout_state_machine import (
    CheckoutState,
    SubmissionFailed,
    SubmissionSucceeded,
    Submit,
)
from src.service.seating.domain.entity.order_entity import OrderRequest
from src.service.seating.domain.enum.checkout_status import CheckoutStatus
from src.service.seating.domain.enum.ui_message import UiMessage
from src.service.seating.domain.session_state import CheckoutAction


class SubmitOrderUseCase:
    """
    Submit the cart as an order - exactly one POST per attempt

    Flow:
    1. Dispatch Submit with a fresh UUID7 idempotency key; validation failures
       stay in COLLECTING and never reach the network
    2. Build the OrderRequest from the cart (ticket_type_id is on every entry)
    3. POST /order once
    4. Dispatch SubmissionSucceeded (cart cleared) or SubmissionFailed (cart and
       buyer fields kept for a manual retry)

    When the failure left the outcome unknown, the next attempt reuses the same
    idempotency key unless the cart changed in between.
    """

    def __init__(self, *, api_client: ITicketingApiClient, session_store: ISessionStore) -> None:
        self.api_client = api_client
        self.session_store = session_store
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self) -> CheckoutState:
        """
        Returns:
            The checkout state after the attempt

        Raises:
            InvalidTransitionError: When checkout is not COLLECTING
        """
        state = self.session_store.dispatch(
            CheckoutAction(event=Submit(idempotency_key=str(uuid_utils.uuid7())))
        )
        checkout = state.checkout
        if checkout.status != CheckoutStatus.SUBMITTING:
            Logger.base.info(f'🧾 [CHECKOUT] Submit refused: {checkout.validation_error}')
            return checkout

        submission_id = checkout.submission_id
        idempotency_key = checkout.idempotency_key or ''

        with self.tracer.start_as_current_span(
            'use_case.submit_order',
            attributes={
                'order.submission_id': submission_id,
                'order.idempotency_key': idempotency_key,
                'order.ticket_count': state.cart.ticket_count,
            },
        ):
            try:
                event = state.load.event
                if event is None or checkout.submitted_identity is None:
                    raise DomainError('Event data is not loaded')
                order_request = OrderRequest.from_cart(
                    event_id=event.event_id,
                    cart=state.cart,
                    user=checkout.submitted_identity,
                )
                order = await self.api_client.create_order(
                    order_request=order_request, idempotency_key=idempotency_key
                )
            except RemoteServiceError as e:
                Logger.base.warning(
                    f'🧾 [CHECKOUT] Order #{submission_id} failed ({e.status_code}), '
                    f'outcome_unknown={e.outcome_unknown}'
                )
                self.session_store.dispatch(
                    CheckoutAction(
                        event=SubmissionFailed(
                            submission_id=submission_id,
                            detail=e.detail or UiMessage.ORDER_FAIL,
                            outcome_unknown=e.outcome_unknown,
                        )
                    )
                )
                return self.session_store.state.checkout
            except DomainError as e:
                self.session_store.dispatch(
                    CheckoutAction(
                        event=SubmissionFailed(submission_id=submission_id, detail=e.message)
                    )
                )
                return self.session_store.state.checkout
            except Exception:
                # Checkout must leave SUBMITTING even when the failure is unexpected
                self.session_store.dispatch(
                    CheckoutAction(
                        event=SubmissionFailed(
                            submission_id=submission_id,
                            detail=UiMessage.ORDER_FAIL,
                            outcome_unknown=True,
                        )
                    )
                )
                raise

            self.session_store.dispatch(
                CheckoutAction(event=SubmissionSucceeded(submission_id=submission_id, order=order))
            )
            Logger.base.info(
                f'🧾 [CHECKOUT] Order {order.order_id} created: '
                f'{len(order.tickets)} tickets, total {order.total_amount}'
            )
            return self.session_store.state.checkout
