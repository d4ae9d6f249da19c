"""
Console logging for the catalog service.

``setup_logging`` configures the root logger once.  Uvicorn installs its
own handlers for access logs; this only covers application loggers.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger if none is present.

    ``level`` is a logging level name, case insensitive.  Unknown names
    fall back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by the test runner or a second create_app().
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
