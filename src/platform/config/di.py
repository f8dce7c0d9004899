"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seating.app.command.checkout_form_use_case import CheckoutFormUseCase
from src.service.seating.app.command.load_event_seating_use_case import (
    LoadEventSeatingUseCase,
)
from src.service.seating.app.command.login_use_case import LoginUseCase
from src.service.seating.app.command.submit_order_use_case import SubmitOrderUseCase
from src.service.seating.app.command.toggle_seat_use_case import ToggleSeatUseCase
from src.service.seating.app.query.get_cart_summary_use_case import GetCartSummaryUseCase
from src.service.seating.driven_adapter.http.ticketing_api_client_impl import (
    TicketingApiClientImpl,
)
from src.service.seating.driven_adapter.state.session_store_impl import SessionStoreImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Driven adapters
    ticketing_api_client = providers.Singleton(
        TicketingApiClientImpl,
        base_url=config_service.provided.SEATING_API_BASE_URL,
        timeout=config_service.provided.HTTP_TIMEOUT_SECONDS,
    )

    # One session per container
    session_store = providers.Singleton(SessionStoreImpl)

    # Use cases
    load_event_seating_use_case = providers.Factory(
        LoadEventSeatingUseCase,
        api_client=ticketing_api_client,
        session_store=session_store,
    )
    toggle_seat_use_case = providers.Factory(ToggleSeatUseCase, session_store=session_store)
    checkout_form_use_case = providers.Factory(CheckoutFormUseCase, session_store=session_store)
    submit_order_use_case = providers.Factory(
        SubmitOrderUseCase,
        api_client=ticketing_api_client,
        session_store=session_store,
    )
    login_use_case = providers.Factory(
        LoginUseCase,
        api_client=ticketing_api_client,
        session_store=session_store,
    )
    get_cart_summary_use_case = providers.Factory(
        GetCartSummaryUseCase,
        session_store=session_store,
        default_currency=config_service.provided.DEFAULT_CURRENCY,
    )


container = Container()
