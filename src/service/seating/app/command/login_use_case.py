from typing import Optional

from src.platform.exception.exceptions import LoginError, RemoteServiceError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_session_store import ISessionStore
from src.service.seating.app.interface.i_ticketing_api_client import ITicketingApiClient
from src.service.seating.domain.session_state import (
    LoggedIn,
    LoggedOut,
    LoginFailed,
    LoginStarted,
)
from src.service.seating.domain.value_object.buyer_identity import BuyerIdentity


class LoginUseCase:
    """
    Log in with the test account so checkout is pre-filled with the user's identity.

    A failed login is recorded on the session, not raised.
    """

    def __init__(self, *, api_client: ITicketingApiClient, session_store: ISessionStore) -> None:
        self.api_client = api_client
        self.session_store = session_store

    @Logger.io
    async def login(self, *, email: str, password: str) -> Optional[BuyerIdentity]:
        request_id = self.session_store.next_request_id('login')
        self.session_store.dispatch(LoginStarted(request_id=request_id))

        try:
            user = await self.api_client.login(email=email, password=password)
        except (LoginError, RemoteServiceError) as e:
            Logger.base.warning(f'🔑 [LOGIN] Failed for {email}: {e.message}')
            self.session_store.dispatch(LoginFailed(request_id=request_id))
            return None

        self.session_store.dispatch(LoggedIn(request_id=request_id, user=user))
        return self.session_store.state.login.user

    @Logger.io
    def logout(self) -> None:
        self.session_store.dispatch(LoggedOut())
