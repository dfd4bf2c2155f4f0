# src/tea_api/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from tea_api.core.config import get_settings


def tea_rate_limit() -> str:
    # wird pro Request ausgewertet, damit Settings-Overrides greifen
    return get_settings().default_rate_limit


limiter = Limiter(key_func=get_remote_address)
