"""
UI Message Enum

User-facing outcomes recorded on the session by key; the driving adapter
renders them in the selected language. Server-provided details are kept as
plain text and shown as received.
"""

from enum import StrEnum


class UiMessage(StrEnum):
    FILL_ALL_FIELDS = 'fill_all_fields'
    EMPTY_CART = 'empty_cart'
    LOGIN_FAIL = 'login_fail'
    ORDER_FAIL = 'order_fail'
