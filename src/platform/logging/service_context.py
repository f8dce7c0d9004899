"""
Service context for log lines.

Identifies which process wrote a line when several CLI sessions share one
log directory.
"""

import os
from functools import lru_cache

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    return f'{settings.SERVICE_NAME}@{os.getpid()}'
