#!/usr/bin/env python3
"""Main entry point for Transmission prune."""

import logging
import sys
import time
from datetime import datetime
from threading import Event
from typing import List, Optional

from . import __version__
from .client import TransmissionClient, build_endpoint
from .config import Config, LoggingConfig
from .constants import LOG_LEVELS, MAX_WAIT_SLICE
from .prune import TransmissionPrune
from .utils import format_duration, redact_url

# Custom log formatter with colors and symbols
class PrettyFormatter(logging.Formatter):
    """Custom formatter with colors and symbols for prettier output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m',     # Reset
        'BOLD': '\033[1m',      # Bold
        'DIM': '\033[2m',       # Dim
    }

    # Log level symbols
    SYMBOLS = {
        'DEBUG': '🔍',
        'INFO': '✔',
        'WARNING': '⚠',
        'ERROR': '✗',
        'CRITICAL': '💀',
    }

    def __init__(self, use_colors=True, use_symbols=True, show_source=False):
        """Initialize formatter."""
        self.use_colors = use_colors and sys.stdout.isatty()
        self.use_symbols = use_symbols
        self.show_source = show_source
        super().__init__()

    def format(self, record):
        """Format log record with colors and symbols."""
        levelname = record.levelname
        color = self.COLORS.get(levelname, '')
        reset = self.COLORS['RESET'] if self.use_colors else ''
        symbol = self.SYMBOLS.get(levelname, '•') if self.use_symbols else ''

        time_str = datetime.fromtimestamp(record.created).strftime('%H:%M:%S')
        message = record.getMessage()
        if self.show_source:
            message = f"{message} [{record.module}:{record.lineno}]"

        if self.use_colors:
            dim = self.COLORS['DIM']
            if record.name == '__main__' and levelname == 'INFO':
                formatted = f"{dim}{time_str}{reset} {color}{symbol}{reset} {self.COLORS['BOLD']}{message}{reset}"
            else:
                formatted = f"{dim}{time_str}{reset} {color}{symbol} {levelname:8}{reset} {message}"
        else:
            formatted = f"{time_str} {symbol} {levelname:8} {message}"

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def resolve_level(name: str) -> int:
    """Map a log level name to a logging level, falling back to INFO."""
    return LOG_LEVELS.get(name.lower(), logging.INFO)


def setup_logging(config: LoggingConfig) -> None:
    """Set up logging with pretty formatting."""
    level = resolve_level(config.level)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(PrettyFormatter(
        use_colors=config.use_colors,
        show_source=level <= logging.DEBUG,
    ))
    console_handler.setLevel(level)
    root_logger.setLevel(level)

    if level > logging.DEBUG:
        # Suppress some noisy loggers
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('transmission_rpc').setLevel(logging.WARNING)

    root_logger.addHandler(console_handler)


# Set up module logger
logger = logging.getLogger(__name__)


def run_prune_cycle(pruner: TransmissionPrune) -> bool:
    """
    Run a single prune pass.

    Args:
        pruner: Prune orchestrator

    Returns:
        True if successful
    """
    try:
        result = pruner.delete_completed()
        if not result.succeeded:
            logger.warning(f"Prune pass completed with issues: {result.error}")
        return result.succeeded
    except Exception as e:
        logger.error(f"Prune pass failed: {e}", exc_info=True)
        return False


def _wait_until(deadline: float, stop_event: Event) -> bool:
    """
    Wait until a monotonic deadline in bounded slices.

    Returns:
        True if the stop event was set
    """
    while True:
        delay = deadline - time.monotonic()
        if delay <= 0:
            return stop_event.is_set()
        if stop_event.wait(timeout=min(delay, MAX_WAIT_SLICE)):
            return True


def run_forever(pruner: TransmissionPrune, interval: float, stop_event: Event) -> None:
    """
    Run a prune pass on every tick of a fixed interval until stopped.

    Ticks missed while a pass was running are dropped.

    Args:
        pruner: Prune orchestrator
        interval: Seconds between passes
        stop_event: Set to end the loop
    """
    next_tick = time.monotonic() + interval
    while True:
        logger.debug(f"Next run in {format_duration(max(0.0, next_tick - time.monotonic()))}")

        if _wait_until(next_tick, stop_event):
            return

        now = time.monotonic()
        while next_tick <= now:
            next_tick += interval

        run_prune_cycle(pruner)


def run(config: Config, stop_event: Optional[Event] = None) -> int:
    """
    Connect, verify the daemon and prune once or on a loop.

    Args:
        config: Application configuration
        stop_event: Ends continuous mode when set

    Returns:
        Process exit status
    """
    try:
        return _run(config, stop_event or Event())
    except KeyboardInterrupt:
        logger.info("Shutdown requested - goodbye! 👋")
        return 0


def _run(config: Config, stop_event: Event) -> int:
    logger.info(f"Starting Transmission Prune v{__version__}")
    logger.info(
        f"log-level={config.logging.level} "
        f"transmission-url={redact_url(config.connection.url)} "
        f"ratio={config.prune.ratio} "
        f"wait={config.schedule.wait} "
        f"interval={format_duration(config.schedule.interval)}"
    )

    try:
        endpoint = build_endpoint(config.connection.url)
    except ValueError as e:
        logger.error(f"Error parsing Transmission URL: {e} "
                     f"(transmission-url={redact_url(config.connection.url)!r})")
        return 1

    client = TransmissionClient(endpoint, config.connection.timeout)
    if not client.connect():
        return 1

    if not client.check_version():
        return 1

    if config.prune.dry_run:
        logger.info("Mode: Dry run (nothing will be removed)")

    pruner = TransmissionPrune(config.prune, client)
    run_prune_cycle(pruner)

    if not config.schedule.wait:
        return 0

    logger.info(f"Mode: Scheduled (every {format_duration(config.schedule.interval)})")
    run_forever(pruner, config.schedule.interval, stop_event)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    config = Config.from_args(argv)
    setup_logging(config.logging)
    sys.exit(run(config))


if __name__ == "__main__":
    main()
