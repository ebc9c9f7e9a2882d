"""Logging setup for Simple Lifts.

Only the host layer logs. PlanService and JsonFilePlanRepository pass
context as loguru keyword arguments (user_id, date, sessions, code,
details, path), which land in ``record["extra"]`` and are rendered after
the message. The plan generation and propagation code never logs.

The CLI callback calls setup_logger once per invocation, with
LOG_LEVEL (or DEBUG under --debug) and SIMPLE_LIFTS_LOG_FILE.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Route service and repository logs to stderr and an optional file.

    Console output goes to stderr so it never mixes with the plan tables
    the CLI prints on stdout.

    Args:
        level: Minimum level for both sinks
        log_file: Session log file (SIMPLE_LIFTS_LOG_FILE); console only if None
        rotation: When to rotate the session log
        retention: How long rotated session logs are kept
    """
    # Drop handlers from any earlier CLI invocation in the same process
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Logger configured", level=level, log_file=log_file)
