import os
import sys
from pathlib import Path

from loguru import logger


def setup_logger(
    *,
    json_logs: bool = False,
    level: str = "INFO",
    log_dir: str | None = "logs",
) -> None:
    """Configure loguru for the risk service.

    Console level controlled by LOG_LEVEL env (falls back to ``level``).
    The file sink keeps DEBUG so skipped chain reads and unparseable inputs
    can be traced after the fact. ``log_dir=None`` disables it (CLI runs).
    """
    console_level = os.getenv("LOG_LEVEL", level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=True,
        )

    if log_dir is None:
        return

    logger.add(
        str(Path(log_dir) / "risk_{time:YYYY-MM-DD}.log"),
        rotation="20 MB",
        retention="7 days",
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )
