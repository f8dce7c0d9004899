"""
Checkout State Machine

IDLE -> COLLECTING -> SUBMITTING -> SUCCESS
COLLECTING/SUBMITTING -> ERROR, ERROR -> COLLECTING (edit and retry) or IDLE (close)

transition() is a pure function (state, event, context) -> state. Clearing the
cart on SUCCESS belongs to the session reducer, which owns the cart.
"""

from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidTransitionError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.entity.order_entity import OrderResponse
from src.service.seating.domain.enum.checkout_status import CheckoutStatus
from src.service.seating.domain.enum.ui_message import UiMessage
from src.service.seating.domain.value_object.buyer_identity import BuyerForm, BuyerIdentity


# =============================================================================
# Events
# =============================================================================


@attrs.frozen
class CheckoutEvent:
    @property
    def name(self) -> str:
        return type(self).__name__


@attrs.frozen
class Open(CheckoutEvent):
    pass


@attrs.frozen
class Close(CheckoutEvent):
    pass


@attrs.frozen
class EditBuyer(CheckoutEvent):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@attrs.frozen
class Prefill(CheckoutEvent):
    identity: BuyerIdentity


@attrs.frozen
class Submit(CheckoutEvent):
    idempotency_key: str


@attrs.frozen
class SubmissionSucceeded(CheckoutEvent):
    submission_id: int
    order: OrderResponse


@attrs.frozen
class SubmissionFailed(CheckoutEvent):
    submission_id: int
    detail: str
    outcome_unknown: bool = False


@attrs.frozen
class Retry(CheckoutEvent):
    pass


# =============================================================================
# State
# =============================================================================


@attrs.frozen
class CheckoutContext:
    """Facts owned by the rest of the session that guard checkout transitions."""

    cart_size: int
    event_loaded: bool
    user: Optional[BuyerIdentity] = None


@attrs.frozen
class CheckoutState:
    status: CheckoutStatus = CheckoutStatus.IDLE
    form: BuyerForm = attrs.field(factory=BuyerForm)
    validation_error: Optional[str] = None
    error_detail: Optional[str] = None
    # The last failed submission may have reached the server
    outcome_unknown: bool = False
    submission_id: int = 0
    idempotency_key: Optional[str] = None
    submitted_identity: Optional[BuyerIdentity] = None
    order: Optional[OrderResponse] = None

    @property
    def is_open(self) -> bool:
        return self.status != CheckoutStatus.IDLE

    def forget_pending_submission(self) -> 'CheckoutState':
        """The cart changed, so a retry is a different order and gets a fresh key."""
        if self.idempotency_key is None and not self.outcome_unknown:
            return self
        return attrs.evolve(self, idempotency_key=None, outcome_unknown=False)


# =============================================================================
# Transitions
# =============================================================================


def _invalid(state: CheckoutState, event: CheckoutEvent, reason: str = '') -> InvalidTransitionError:
    return InvalidTransitionError(state=state.status.value, event=event.name, reason=reason)


def _is_current_result(state: CheckoutState, event: CheckoutEvent) -> bool:
    return (
        isinstance(event, (SubmissionSucceeded, SubmissionFailed))
        and state.status == CheckoutStatus.SUBMITTING
        and event.submission_id == state.submission_id
    )


def _open(state: CheckoutState, event: Open, context: CheckoutContext) -> CheckoutState:
    if context.cart_size == 0:
        raise _invalid(state, event, 'cart is empty')
    if not context.event_loaded:
        raise _invalid(state, event, 'event data is not loaded')
    form = BuyerForm.from_identity(context.user) if context.user else state.form
    return attrs.evolve(
        state,
        status=CheckoutStatus.COLLECTING,
        form=form,
        validation_error=None,
        error_detail=None,
        order=None,
    )


def _submit(state: CheckoutState, event: Submit, context: CheckoutContext) -> CheckoutState:
    if context.cart_size == 0:
        return attrs.evolve(state, validation_error=UiMessage.EMPTY_CART)

    identity = state.form.to_identity()
    if identity is None:
        return attrs.evolve(state, validation_error=UiMessage.FILL_ALL_FIELDS)

    reuse_key = state.outcome_unknown and state.idempotency_key is not None
    return attrs.evolve(
        state,
        status=CheckoutStatus.SUBMITTING,
        validation_error=None,
        error_detail=None,
        submission_id=state.submission_id + 1,
        idempotency_key=state.idempotency_key if reuse_key else event.idempotency_key,
        submitted_identity=identity,
    )


@Logger.io
def transition(
    state: CheckoutState, event: CheckoutEvent, context: CheckoutContext
) -> CheckoutState:
    """
    Apply one checkout event.

    Raises:
        InvalidTransitionError: When the event is not allowed in the current state.
            Close while SUBMITTING is not an error: it leaves the state unchanged.
    """
    status = state.status

    # Results of a submission that is no longer in flight are dropped
    if isinstance(event, (SubmissionSucceeded, SubmissionFailed)):
        if not _is_current_result(state, event):
            Logger.base.info(
                f'🧾 [CHECKOUT] Ignored stale {event.name} #{event.submission_id} '
                f'(current #{state.submission_id}, {status})'
            )
            return state
        if isinstance(event, SubmissionSucceeded):
            return attrs.evolve(
                state,
                status=CheckoutStatus.SUCCESS,
                order=event.order,
                idempotency_key=None,
                outcome_unknown=False,
                error_detail=None,
            )
        return attrs.evolve(
            state,
            status=CheckoutStatus.ERROR,
            error_detail=event.detail,
            outcome_unknown=event.outcome_unknown,
        )

    if isinstance(event, Close):
        if status == CheckoutStatus.SUBMITTING:
            return state
        return attrs.evolve(
            state, status=CheckoutStatus.IDLE, validation_error=None, order=None
        )

    if status == CheckoutStatus.IDLE:
        if isinstance(event, Open):
            return _open(state, event, context)
        raise _invalid(state, event)

    if status == CheckoutStatus.COLLECTING:
        if isinstance(event, Open):
            return state
        if isinstance(event, EditBuyer):
            return attrs.evolve(
                state,
                form=state.form.update(
                    email=event.email, first_name=event.first_name, last_name=event.last_name
                ),
                validation_error=None,
            )
        if isinstance(event, Prefill):
            return attrs.evolve(state, form=BuyerForm.from_identity(event.identity))
        if isinstance(event, Submit):
            return _submit(state, event, context)
        raise _invalid(state, event)

    if status == CheckoutStatus.ERROR:
        if isinstance(event, Retry):
            return attrs.evolve(state, status=CheckoutStatus.COLLECTING, error_detail=None)
        if isinstance(event, EditBuyer):
            return attrs.evolve(
                state,
                status=CheckoutStatus.COLLECTING,
                form=state.form.update(
                    email=event.email, first_name=event.first_name, last_name=event.last_name
                ),
                error_detail=None,
                validation_error=None,
            )
        if isinstance(event, Prefill):
            return attrs.evolve(state, form=BuyerForm.from_identity(event.identity))
        raise _invalid(state, event)

    # SUBMITTING and SUCCESS accept nothing else
    raise _invalid(state, event)
