import logging
import time
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def log_action(action: str, func: Callable[[], T]) -> T:
    """Run func, logging when it starts and how long it took."""
    logger.info(f"Running {action}")
    start_time = time.perf_counter()
    result = func()
    elapsed = time.perf_counter() - start_time
    logger.info(f"{action} completed in {elapsed:.4f}s")
    return result


def configure(log_file: str | None) -> None:
    """Send INFO logs to log_file, or to stderr when no file is given."""
    if log_file:
        logging.basicConfig(filename=log_file, encoding="utf-8", level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)
