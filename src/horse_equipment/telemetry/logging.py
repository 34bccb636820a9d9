"""Console logging setup for the CLI."""

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Route ``horse_equipment.*`` loggers through a rich console handler."""
    logger = logging.getLogger("horse_equipment")
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
