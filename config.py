import logging
import os
from pathlib import Path


def _log_level(value):
    # неизвестный уровень (LOG_LEVEL=foo) → INFO
    value = (value or "").upper()
    return value if isinstance(logging.getLevelName(value), int) else "INFO"


# Сервер видеоаналитики
VA_SERVER_URL = os.getenv("VA_SERVER_URL", "http://localhost:2001")

# Таймаут одного POST-запроса, секунды
VA_REQUEST_TIMEOUT = int(os.getenv("VA_REQUEST_TIMEOUT", "30"))

# Логи
LOG_LEVEL = _log_level(os.getenv("LOG_LEVEL", "INFO"))
LOG_DIR = os.getenv("LOG_DIR", str(Path("./logs").resolve()))
Path(LOG_DIR).mkdir(parents=True, exist_ok=True)
