"""
Checkout Status Enum

Lifecycle of turning a non-empty cart into a submitted order.
"""

from enum import StrEnum


class CheckoutStatus(StrEnum):
    IDLE = 'idle'
    COLLECTING = 'collecting'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    ERROR = 'error'
