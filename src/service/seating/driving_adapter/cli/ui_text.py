"""
Terminal texts in Czech and English.

Session state records user-facing outcomes as UiMessage keys; this table turns
them (and the fixed labels) into text for the selected language.
"""

from enum import StrEnum
from typing import Callable, Dict

import attrs

from src.service.seating.domain.enum.ui_message import UiMessage


class Language(StrEnum):
    CS = 'cs'
    EN = 'en'


def _czech_tickets(count: int) -> str:
    if count == 1:
        noun = 'vstupenku'
    elif 2 <= count <= 4:
        noun = 'vstupenky'
    else:
        noun = 'vstupenek'
    return f'Celkem za {count} {noun}'


def _english_tickets(count: int) -> str:
    return f'Total for {count} ticket{"" if count == 1 else "s"}'


@attrs.define(frozen=True)
class UiTexts:
    seating_title: str
    cart_title: str
    seat_row: str
    seat_place: str
    seat_id: str
    seat_type: str
    seat_price: str
    order_label: str
    order_success_title: str
    logged_in_as: str
    event_unavailable: str
    catalog_inconsistent: str
    outcome_unknown_warning: str
    saved_to: str
    messages: Dict[UiMessage, str]
    total_for: Callable[[int], str]

    def message(self, text: str) -> str:
        """Translate a UiMessage key; server-provided text passes through unchanged."""
        try:
            return self.messages[UiMessage(text)]
        except ValueError:
            return text


UI_TEXTS: Dict[Language, UiTexts] = {
    Language.CS: UiTexts(
        seating_title='Výběr sedadel',
        cart_title='Košík',
        seat_row='Řada',
        seat_place='Místo',
        seat_id='ID sedadla',
        seat_type='Typ',
        seat_price='Cena',
        order_label='Objednávka',
        order_success_title='Objednávka vytvořena ✔️',
        logged_in_as='Objednávku dokončíme na účet',
        event_unavailable='Data akce nejsou dostupná',
        catalog_inconsistent='Katalog sedadel je nekonzistentní',
        outcome_unknown_warning=(
            'Nepřišla žádná odpověď; objednávka už možná existuje. '
            'Než to zkusíš znovu, zkontroluj e-mail.'
        ),
        saved_to='Uloženo do',
        messages={
            UiMessage.FILL_ALL_FIELDS: 'Vyplň prosím všechny údaje.',
            UiMessage.EMPTY_CART: 'Košík je prázdný.',
            UiMessage.LOGIN_FAIL: 'Login failed: Zkontroluj přihlašovací údaje.',
            UiMessage.ORDER_FAIL: 'Nepodařilo se vytvořit objednávku. Zkus to prosím znovu.',
        },
        total_for=_czech_tickets,
    ),
    Language.EN: UiTexts(
        seating_title='Seating',
        cart_title='Cart',
        seat_row='Row',
        seat_place='Seat',
        seat_id='Seat ID',
        seat_type='Type',
        seat_price='Price',
        order_label='Order',
        order_success_title='Order created ✔️',
        logged_in_as='We will complete the order for account',
        event_unavailable='Event data unavailable',
        catalog_inconsistent='Seat catalog is inconsistent',
        outcome_unknown_warning=(
            'No response was received; the order may already exist. '
            'Check your e-mail before trying again.'
        ),
        saved_to='Saved to',
        messages={
            UiMessage.FILL_ALL_FIELDS: 'Please fill in all required fields.',
            UiMessage.EMPTY_CART: 'Your cart is empty.',
            UiMessage.LOGIN_FAIL: 'Login failed: Please check credentials.',
            UiMessage.ORDER_FAIL: 'Could not create order. Please try again.',
        },
        total_for=_english_tickets,
    ),
}


def get_ui_texts(language: str) -> UiTexts:
    return UI_TEXTS[Language(language)]
