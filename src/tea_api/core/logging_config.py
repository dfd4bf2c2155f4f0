# src/tea_api/core/logging_config.py
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Setzt das Level des Root-Loggers und hängt einen Console-Handler an.
    Der Handler kommt nur einmal dazu; sind bereits Handler vorhanden (z.B.
    durch uvicorn oder pytest), bleiben diese bestehen, das Level gilt trotzdem.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
