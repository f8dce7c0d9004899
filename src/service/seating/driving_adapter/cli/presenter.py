from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.service.seating.app.query.get_cart_summary_use_case import CartSummary
from src.service.seating.domain.aggregate.seating_model_aggregate import SeatingModel
from src.service.seating.domain.checkout_state_machine import CheckoutState
from src.service.seating.domain.entity.order_entity import OrderResponse
from src.service.seating.domain.enum.ui_message import UiMessage
from src.service.seating.domain.value_object.event_info import EventInfo
from src.service.seating.driving_adapter.cli.ui_text import UiTexts


def format_currency(amount: float, currency: str) -> str:
    grouped = f'{amount:,.2f}'.replace(',', ' ')
    return f'{grouped} {currency}'


def render_event(console: Console, event: EventInfo) -> None:
    when = f'{event.date_from:%Y-%m-%d %H:%M} - {event.date_to:%Y-%m-%d %H:%M}'
    body = '\n'.join(part for part in (event.description, event.place, when) if part)
    console.print(Panel(body, title=event.name_pub, expand=False))


def render_seating(
    console: Console, texts: UiTexts, seating: SeatingModel, currency: str
) -> None:
    table = Table(title=texts.seating_title)
    table.add_column(texts.seat_row, justify='right')
    table.add_column(texts.seat_place, justify='right')
    table.add_column(texts.seat_id)
    table.add_column(texts.seat_type)
    table.add_column(texts.seat_price, justify='right')
    for row in seating.rows:
        for seat in row.seats:
            table.add_row(
                str(row.seat_row),
                str(seat.place),
                seat.seat_id,
                seat.ticket_type_name,
                format_currency(seat.price, currency),
            )
    console.print(table)


def render_cart(console: Console, texts: UiTexts, summary: CartSummary) -> None:
    table = Table(title=texts.cart_title)
    table.add_column(texts.seat_row, justify='right')
    table.add_column(texts.seat_place, justify='right')
    table.add_column(texts.seat_type)
    table.add_column(texts.seat_price, justify='right')
    for seat in summary.lines:
        table.add_row(
            str(seat.row),
            str(seat.place),
            seat.ticket_type_name,
            format_currency(seat.price, summary.currency),
        )
    console.print(table)
    console.print(
        f'{texts.total_for(summary.ticket_count)}: '
        f'[bold]{format_currency(summary.total_amount, summary.currency)}[/bold]'
    )


def render_order(
    console: Console, texts: UiTexts, order: OrderResponse, currency: str
) -> None:
    console.print(
        Panel(
            f'{texts.order_label} [bold]{order.order_id}[/bold]\n'
            f'{order.user.first_name} {order.user.last_name} <{order.user.email}>\n'
            f'{texts.total_for(len(order.tickets))}: {format_currency(order.total_amount, currency)}',
            title=texts.order_success_title,
            expand=False,
        )
    )


def render_checkout_error(console: Console, texts: UiTexts, checkout: CheckoutState) -> None:
    message = checkout.validation_error or checkout.error_detail or UiMessage.ORDER_FAIL
    console.print(f'[red]{texts.message(message)}[/red]')
    if checkout.outcome_unknown:
        console.print(f'[yellow]{texts.outcome_unknown_warning}[/yellow]')
