"""
Logging setup for the service.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again is a no-op, which keeps repeated ``create_app`` calls
(one per test) from stacking handlers.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
