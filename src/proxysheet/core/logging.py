"""
Loguru setup for Proxy Sheet: a stderr sink and, optionally, a daily log file.
"""

import sys
import time

from loguru import logger

from proxysheet.config import ProxySheetSettings, get_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(settings: ProxySheetSettings | None = None) -> None:
    """Replace loguru's sinks with the ones the settings ask for.

    The CLI calls this once per invocation; tests call it with their own
    settings and remove the sinks afterwards.
    """
    settings = settings or get_settings()

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    if settings.log_to_file:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        # file sink always records debug
        logger.add(
            settings.logs_dir / "proxy-sheet_{time:YYYY-MM-DD}.log",
            level="DEBUG",
            format=FILE_FORMAT,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="gz",
        )

    logger.info("Logging initialized (level={})", settings.log_level)


def get_logger(name: str):
    """Logger bound to a module name, e.g. ``get_logger(__name__)``."""
    return logger.bind(module=name)


class log_operation:
    """Log the start, end and duration of a block.

    Example:
        >>> with log_operation("Batch lookup", names=3):
        ...     outcomes = list(client.lookup_many(names))
        # Logs: "Batch lookup [names=3] completed in 1.02s"
    """

    def __init__(self, operation: str, **context):
        self.operation = operation
        self.context = context
        self.start_time = None

    def _context_str(self) -> str:
        return " ".join(f"{k}={v}" for k, v in self.context.items())

    def __enter__(self):
        self.start_time = time.time()
        logger.info("{} [{}] starting...", self.operation, self._context_str())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            logger.info(
                "{} [{}] completed in {:.2f}s",
                self.operation,
                self._context_str(),
                duration,
            )
        else:
            logger.error(
                "{} [{}] failed after {:.2f}s: {}",
                self.operation,
                self._context_str(),
                duration,
                exc_val,
            )

        return False
