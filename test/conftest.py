"""
Test Configuration

Environment must be set before any application module is imported: settings
and the loguru sinks are built at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['DEBUG'] = 'true'
    os.environ.setdefault('SERVICE_NAME', 'seating-checkout-test')
    os.environ['SEATING_API_BASE_URL'] = 'https://seating.test'
    os.environ['DEFAULT_CURRENCY'] = 'CZK'


_early_setup_test_environment()
