from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_session_store import ISessionStore
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.session_state import ToggleSeat


class ToggleSeatUseCase:
    def __init__(self, *, session_store: ISessionStore) -> None:
        self.session_store = session_store

    @Logger.io
    def execute(self, *, seat_id: str) -> Cart:
        """
        Select the seat, or deselect it when already in the cart.

        Raises:
            NotFoundError: Seat is not in the seating model
            ConflictError: An order is being submitted
        """
        return self.session_store.dispatch(ToggleSeat(seat_id=seat_id)).cart
