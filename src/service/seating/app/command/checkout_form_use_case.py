from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_session_store import ISessionStore
from src.service.seating.domain.checkout_state_machine import (
    CheckoutEvent,
    CheckoutState,
    Close,
    EditBuyer,
    Open,
    Retry,
)
from src.service.seating.domain.session_state import CheckoutAction


class CheckoutFormUseCase:
    """Synchronous checkout-dialog interactions: open, edit, retry, close."""

    def __init__(self, *, session_store: ISessionStore) -> None:
        self.session_store = session_store

    def _apply(self, event: CheckoutEvent) -> CheckoutState:
        return self.session_store.dispatch(CheckoutAction(event=event)).checkout

    @Logger.io
    def open(self) -> CheckoutState:
        """
        Raises:
            InvalidTransitionError: Cart empty or event not loaded
        """
        return self._apply(Open())

    @Logger.io
    def edit_buyer(
        self,
        *,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> CheckoutState:
        return self._apply(EditBuyer(email=email, first_name=first_name, last_name=last_name))

    @Logger.io
    def retry(self) -> CheckoutState:
        return self._apply(Retry())

    @Logger.io
    def close(self) -> CheckoutState:
        """No-op while an order is being submitted."""
        return self._apply(Close())
