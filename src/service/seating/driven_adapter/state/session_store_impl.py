from collections import defaultdict
from typing import Callable, DefaultDict, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_session_store import ISessionStore, SessionListener
from src.service.seating.domain.session_state import (
    SessionAction,
    SessionState,
    reduce_session,
)


class SessionStoreImpl(ISessionStore):
    """
    In-memory session store for a single event loop.

    dispatch() never awaits, so on one loop it is atomic with respect to every
    other dispatch.
    """

    def __init__(self, initial_state: Optional[SessionState] = None) -> None:
        self._state = initial_state or SessionState()
        self._listeners: List[SessionListener] = []
        self._request_ids: DefaultDict[str, int] = defaultdict(int)
        self._closed = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._closed

    def dispatch(self, action: SessionAction) -> SessionState:
        if self._closed:
            Logger.base.debug(f'🧹 [STORE] Dropped {type(action).__name__} after teardown')
            return self._state

        new_state = reduce_session(self._state, action)
        if new_state is self._state:
            return new_state

        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def next_request_id(self, channel: str) -> int:
        self._request_ids[channel] += 1
        return self._request_ids[channel]

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()
        Logger.base.info('🧹 [STORE] Session closed')
