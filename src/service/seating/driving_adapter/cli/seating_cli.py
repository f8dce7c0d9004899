"""
Command line for browsing the seat map and placing an order.

    seating [--lang cs|en] seats
    seating order --seat <id> [--seat <id> ...] --email ... --first-name ... --last-name ...
    seating order --seat <id> --login-email ... --password ...
    seating calendar --output event.ics
"""

from pathlib import Path
from typing import Optional, Tuple

import anyio
import click
from rich.console import Console

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, DataIntegrityError
from src.service.seating.domain.calendar_export import build_calendar_event
from src.service.seating.domain.enum.checkout_status import CheckoutStatus
from src.service.seating.domain.enum.load_status import LoadStatus
from src.service.seating.domain.session_state import LoadState
from src.service.seating.driving_adapter.cli.presenter import (
    render_cart,
    render_checkout_error,
    render_event,
    render_order,
    render_seating,
)
from src.service.seating.driving_adapter.cli.ui_text import Language, UiTexts, get_ui_texts


console = Console()


async def _load(container: Container, texts: UiTexts) -> Optional[LoadState]:
    try:
        load = await container.load_event_seating_use_case().execute()
    except DataIntegrityError as e:
        console.print(f'[red]{texts.catalog_inconsistent}: {e.message}[/red]')
        return None
    if load.status != LoadStatus.READY:
        console.print(f'[red]{texts.event_unavailable}: {load.error_detail}[/red]')
        return None
    return load


async def _show_seats(container: Container, texts: UiTexts) -> int:
    store = container.session_store()
    try:
        load = await _load(container, texts)
        if load is None or load.event is None or load.seating is None:
            return 1
        render_event(console, load.event)
        render_seating(console, texts, load.seating, load.event.currency_iso)
        return 0
    finally:
        store.close()


async def _place_order(
    container: Container,
    texts: UiTexts,
    *,
    seat_ids: Tuple[str, ...],
    email: Optional[str],
    first_name: Optional[str],
    last_name: Optional[str],
    login_email: Optional[str],
    password: Optional[str],
) -> int:
    store = container.session_store()
    try:
        load = await _load(container, texts)
        if load is None:
            return 1

        toggle = container.toggle_seat_use_case()
        try:
            for seat_id in seat_ids:
                toggle.execute(seat_id=seat_id)
        except CustomBaseError as e:
            console.print(f'[red]{e.message}[/red]')
            return 1
        summary = container.get_cart_summary_use_case().execute()
        render_cart(console, texts, summary)

        if login_email:
            user = await container.login_use_case().login(
                email=login_email, password=password or ''
            )
            if user is None:
                console.print(f'[red]{texts.message(store.state.login.error_message or "")}[/red]')
                return 1
            console.print(f'{texts.logged_in_as} [bold]{user.email}[/bold]')

        checkout_form = container.checkout_form_use_case()
        try:
            checkout_form.open()
        except CustomBaseError as e:
            console.print(f'[red]{e.message}[/red]')
            return 1
        checkout_form.edit_buyer(email=email, first_name=first_name, last_name=last_name)

        checkout = await container.submit_order_use_case().execute()
        if checkout.status == CheckoutStatus.SUCCESS and checkout.order is not None:
            render_order(console, texts, checkout.order, summary.currency)
            return 0

        render_checkout_error(console, texts, checkout)
        return 1
    finally:
        store.close()


async def _export_calendar(container: Container, texts: UiTexts, output: Path) -> int:
    try:
        event = await container.ticketing_api_client().get_event()
    except CustomBaseError as e:
        console.print(f'[red]{texts.event_unavailable}: {e.message}[/red]')
        return 1
    output.write_text(build_calendar_event(event), encoding='utf-8', newline='')
    console.print(f'[bold]{event.name_pub}[/bold]: {texts.saved_to} {output}')
    return 0


@click.group()
@click.option(
    '--lang',
    'language',
    type=click.Choice([language.value for language in Language]),
    default=None,
    help='Language of the texts (defaults to LANGUAGE from settings).',
)
@click.pass_context
def cli(ctx: click.Context, language: Optional[str]) -> None:
    """Browse the seat map of the event and order tickets."""
    if not isinstance(ctx.obj, Container):
        ctx.obj = Container()
    ctx.meta['ui_texts'] = get_ui_texts(language or ctx.obj.config_service().LANGUAGE)


@cli.command()
@click.pass_context
def seats(ctx: click.Context) -> None:
    """Print the seating model, row by row."""
    raise SystemExit(anyio.run(_show_seats, ctx.obj, ctx.meta['ui_texts']))


@cli.command()
@click.option('--seat', 'seat_ids', multiple=True, required=True, help='Seat id to add to the cart.')
@click.option('--email', default=None, help='E-mail to receive tickets.')
@click.option('--first-name', default=None)
@click.option('--last-name', default=None)
@click.option('--login-email', default=None, help='Log in and use the account identity.')
@click.option('--password', default=None)
@click.pass_context
def order(
    ctx: click.Context,
    seat_ids: Tuple[str, ...],
    email: Optional[str],
    first_name: Optional[str],
    last_name: Optional[str],
    login_email: Optional[str],
    password: Optional[str],
) -> None:
    """Select seats and submit them as one order."""

    async def run() -> int:
        return await _place_order(
            ctx.obj,
            ctx.meta['ui_texts'],
            seat_ids=seat_ids,
            email=email,
            first_name=first_name,
            last_name=last_name,
            login_email=login_email,
            password=password,
        )

    raise SystemExit(anyio.run(run))


@cli.command()
@click.option(
    '--output',
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path('event.ics'),
    show_default=True,
)
@click.pass_context
def calendar(ctx: click.Context, output: Path) -> None:
    """Save the event as an iCalendar file."""
    raise SystemExit(anyio.run(_export_calendar, ctx.obj, ctx.meta['ui_texts'], output))


if __name__ == '__main__':
    cli()
