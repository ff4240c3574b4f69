"""Match log output and debug logging setup."""

import datetime
import logging


def format_event(message, now=None):
    now = now or datetime.datetime.now()
    return f"[{now.strftime('%H:%M:%S')}] {message}"


def log_event(message):
    print(format_event(message))


def configure_logging(verbose=False):
    """Debug traces from the engine go to stderr only when asked for."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
