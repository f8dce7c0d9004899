"""Seating Domain Enums"""

from src.service.seating.domain.enum.checkout_status import CheckoutStatus
from src.service.seating.domain.enum.load_status import LoadStatus
from src.service.seating.domain.enum.ui_message import UiMessage

__all__ = ['CheckoutStatus', 'LoadStatus', 'UiMessage']
