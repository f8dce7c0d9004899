"""
Session State - the single state object of one browsing session

reduce_session() is the only way to produce a new SessionState. It is pure:
all network work happens in the use cases, which report results back as
actions tagged with the request id they were started under.
"""

from typing import Optional

import attrs

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.aggregate.seating_model_aggregate import SeatingModel
from src.service.seating.domain.checkout_state_machine import (
    CheckoutContext,
    CheckoutEvent,
    CheckoutState,
    Prefill,
    transition,
)
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.enum.checkout_status import CheckoutStatus
from src.service.seating.domain.enum.load_status import LoadStatus
from src.service.seating.domain.enum.ui_message import UiMessage
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity
from src.service.seating.domain.value_object.event_info import EventInfo


@attrs.frozen
class LoadState:
    status: LoadStatus = LoadStatus.LOADING
    event: Optional[EventInfo] = None
    seating: Optional[SeatingModel] = None
    error_detail: Optional[str] = None
    request_id: int = 0

    @property
    def event_loaded(self) -> bool:
        return self.status == LoadStatus.READY and self.event is not None


@attrs.frozen
class LoginState:
    user: Optional[BuyerIdentity] = None
    request_id: int = 0
    in_flight: bool = False
    error_message: Optional[str] = None


@attrs.frozen
class SessionState:
    load: LoadState = attrs.field(factory=LoadState)
    cart: Cart = attrs.field(factory=Cart)
    checkout: CheckoutState = attrs.field(factory=CheckoutState)
    login: LoginState = attrs.field(factory=LoginState)

    def checkout_context(self) -> CheckoutContext:
        return CheckoutContext(
            cart_size=self.cart.ticket_count,
            event_loaded=self.load.event_loaded,
            user=self.login.user,
        )


# =============================================================================
# Actions
# =============================================================================


@attrs.frozen
class SessionAction:
    pass


@attrs.frozen
class LoadStarted(SessionAction):
    request_id: int


@attrs.frozen
class EventLoaded(SessionAction):
    request_id: int
    event: EventInfo


@attrs.frozen
class CatalogLoaded(SessionAction):
    request_id: int
    seating: SeatingModel


@attrs.frozen
class LoadFailed(SessionAction):
    request_id: int
    status: LoadStatus
    detail: str


@attrs.frozen
class ToggleSeat(SessionAction):
    seat_id: str


@attrs.frozen
class CheckoutAction(SessionAction):
    event: CheckoutEvent


@attrs.frozen
class LoginStarted(SessionAction):
    request_id: int


@attrs.frozen
class LoggedIn(SessionAction):
    request_id: int
    user: BuyerIdentity


@attrs.frozen
class LoginFailed(SessionAction):
    request_id: int
    message: str = UiMessage.LOGIN_FAIL


@attrs.frozen
class LoggedOut(SessionAction):
    pass


# =============================================================================
# Reducer
# =============================================================================


def _reduce_load(state: SessionState, action: SessionAction) -> SessionState:
    load = state.load

    if isinstance(action, LoadStarted):
        # The previous event and seating stay visible until the new load settles
        return attrs.evolve(
            state,
            load=attrs.evolve(
                load, status=LoadStatus.LOADING, request_id=action.request_id, error_detail=None
            ),
        )

    if action.request_id != load.request_id:  # type: ignore[attr-defined]
        Logger.base.info(f'🎫 [LOAD] Ignored {type(action).__name__} of superseded request')
        return state

    if isinstance(action, EventLoaded):
        return attrs.evolve(state, load=attrs.evolve(load, event=action.event))

    if isinstance(action, CatalogLoaded):
        return _with_cart(
            attrs.evolve(
                state,
                load=attrs.evolve(
                    load, status=LoadStatus.READY, seating=action.seating, error_detail=None
                ),
            ),
            state.cart.reconcile(action.seating),
        )

    if isinstance(action, LoadFailed):
        if action.status == LoadStatus.INTEGRITY_ERROR:
            # No seat of the broken catalog can be trusted, so the cart is emptied
            return _with_cart(
                attrs.evolve(
                    state,
                    load=attrs.evolve(
                        load, status=action.status, seating=None, error_detail=action.detail
                    ),
                ),
                state.cart.reconcile(SeatingModel()),
            )
        return attrs.evolve(
            state,
            load=attrs.evolve(load, status=action.status, error_detail=action.detail),
        )

    raise TypeError(f'Unhandled load action {action!r}')


def _with_cart(state: SessionState, cart: Cart) -> SessionState:
    """Replace the cart; a changed cart invalidates any pending idempotency key."""
    if cart is state.cart:
        return state
    return attrs.evolve(state, cart=cart, checkout=state.checkout.forget_pending_submission())


def _reduce_toggle(state: SessionState, action: ToggleSeat) -> SessionState:
    if state.checkout.status == CheckoutStatus.SUBMITTING:
        raise ConflictError('Cart cannot change while an order is being submitted')

    seating = state.load.seating
    seat = seating.get_seat(action.seat_id) if seating is not None else None
    if seat is None:
        raise NotFoundError(f'Seat {action.seat_id} is not in the seating model')

    return _with_cart(state, state.cart.toggle(seat))


def _reduce_checkout(state: SessionState, action: CheckoutAction) -> SessionState:
    previous = state.checkout.status
    checkout = transition(state.checkout, action.event, state.checkout_context())
    cart = state.cart
    if previous == CheckoutStatus.SUBMITTING and checkout.status == CheckoutStatus.SUCCESS:
        cart = Cart()
    return attrs.evolve(state, checkout=checkout, cart=cart)


def _reduce_login(state: SessionState, action: SessionAction) -> SessionState:
    login = state.login

    if isinstance(action, LoginStarted):
        return attrs.evolve(
            state,
            login=attrs.evolve(
                login, request_id=action.request_id, in_flight=True, error_message=None
            ),
        )

    if isinstance(action, LoggedOut):
        return attrs.evolve(state, login=LoginState(request_id=login.request_id))

    if action.request_id != login.request_id or not login.in_flight:  # type: ignore[attr-defined]
        Logger.base.info(f'🔑 [LOGIN] Ignored {type(action).__name__} of superseded request')
        return state

    if isinstance(action, LoggedIn):
        state = attrs.evolve(
            state,
            login=attrs.evolve(login, user=action.user, in_flight=False, error_message=None),
        )
        if state.checkout.status in (CheckoutStatus.COLLECTING, CheckoutStatus.ERROR):
            state = attrs.evolve(
                state,
                checkout=transition(
                    state.checkout, Prefill(identity=action.user), state.checkout_context()
                ),
            )
        return state

    if isinstance(action, LoginFailed):
        return attrs.evolve(
            state,
            login=attrs.evolve(login, in_flight=False, error_message=action.message),
        )

    raise TypeError(f'Unhandled login action {action!r}')


def reduce_session(state: SessionState, action: SessionAction) -> SessionState:
    """
    Apply one action to the session.

    Raises:
        NotFoundError: When the toggled seat is not in the seating model.
        ConflictError: When the cart is toggled while an order is being submitted.
        InvalidTransitionError: When a checkout event is not allowed.
    """
    if isinstance(action, (LoadStarted, EventLoaded, CatalogLoaded, LoadFailed)):
        return _reduce_load(state, action)
    if isinstance(action, ToggleSeat):
        return _reduce_toggle(state, action)
    if isinstance(action, CheckoutAction):
        return _reduce_checkout(state, action)
    if isinstance(action, (LoginStarted, LoggedIn, LoginFailed, LoggedOut)):
        return _reduce_login(state, action)
    raise TypeError(f'Unhandled session action {action!r}')
