from typing import Tuple

import attrs

from src.platform.config.core_setting import settings
from src.service.seating.app.interface.i_session_store import ISessionStore
from src.service.seating.domain.value_object.priced_seat import PricedSeat


@attrs.frozen
class CartSummary:
    lines: Tuple[PricedSeat, ...]
    ticket_count: int
    total_amount: float
    currency: str


class GetCartSummaryUseCase:
    def __init__(self, *, session_store: ISessionStore, default_currency: str = '') -> None:
        self.session_store = session_store
        self.default_currency = default_currency or settings.DEFAULT_CURRENCY

    def execute(self) -> CartSummary:
        state = self.session_store.state
        event = state.load.event
        return CartSummary(
            lines=tuple(state.cart.in_display_order()),
            ticket_count=state.cart.ticket_count,
            total_amount=state.cart.total_amount,
            currency=event.currency_iso if event else self.default_currency,
        )
