from abc import ABC, abstractmethod
from typing import Callable

from src.service.seating.domain.session_state import SessionAction, SessionState


SessionListener = Callable[[SessionState], None]


class ISessionStore(ABC):
    """
    Port (interface) for the one mutable holder of SessionState.

    Every dispatch reads the latest state and replaces it whole, so no update
    is ever computed from a stale snapshot.
    """

    @property
    @abstractmethod
    def state(self) -> SessionState:
        pass

    @abstractmethod
    def dispatch(self, action: SessionAction) -> SessionState:
        """Apply the action; after close() the action is dropped and the last state returned."""
        pass

    @abstractmethod
    def next_request_id(self, channel: str) -> int:
        """Monotonic id per channel ('load', 'login') for last-request-wins guards."""
        pass

    @abstractmethod
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        pass
