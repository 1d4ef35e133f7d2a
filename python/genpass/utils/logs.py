"""
Logging setup for the command line.
"""

import logging

import click

LOGGER_NAME = "genpass"


class ClickEchoHandler(logging.Handler):
    """Writes log records to stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: Show debug diagnostics instead of warnings only

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(handler, ClickEchoHandler) for handler in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(handler)

    return logger
