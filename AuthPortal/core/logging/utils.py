"""
Logging helpers for AuthPortal.
"""

import logging
import time
from typing import Optional

from AuthPortal.core.logging import get_logger


class LogTimer:
    """
    Context manager that logs how long a block took.

    Example:
        with LogTimer("POST /auth/login", logger):
            response = await session.post(url, json=body)
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG
    ):
        self.operation = operation
        self.logger = logger or get_logger(__name__)
        self.level = level
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self) -> 'LogTimer':
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return
        self.duration = time.perf_counter() - self.start_time
        if exc_type is not None:
            self.logger.log(
                self.level,
                "Operation '%s' failed after %.4f seconds: %s",
                self.operation, self.duration, exc_val
            )
        else:
            self.logger.log(
                self.level,
                "Operation '%s' completed in %.4f seconds",
                self.operation, self.duration
            )


__all__ = ['LogTimer']
