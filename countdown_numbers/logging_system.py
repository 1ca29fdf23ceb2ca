"""
Logging for the Countdown numbers solver

A search announces its solutions and a closing summary by default; progress
per tree size, per number permutation and skipped duplicates only show up
at the higher verbosity levels.
"""

import logging
import sys
import time
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(Enum):
    SILENT = 0      # Nothing at all
    MINIMAL = 1     # Start, solutions, warnings and the summary
    MODERATE = 2    # One line per finished tree size
    DETAILED = 3    # One line per finished number permutation
    VERBOSE = 4     # Matches skipped as duplicates


class NumbersSolverLogger:
    """Level-gated front for the ``countdown_numbers`` logger"""

    PROGRESS_INTERVAL = 2.0

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.start_time = time.time()
        self.last_progress_time = 0.0

        self.logger = logging.getLogger('countdown_numbers')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        if log_level is LogLevel.SILENT:
            return

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file_path is not None:
            handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def enabled(self, level: LogLevel) -> bool:
        return self.log_level is not LogLevel.SILENT and self.log_level.value >= level.value

    def milestone(self, message: str):
        if self.enabled(LogLevel.MINIMAL):
            self.logger.info(f"MILESTONE: {message}")

    def solution(self, message: str):
        if self.enabled(LogLevel.MINIMAL):
            self.logger.info(message)

    def warning(self, message: str):
        if self.enabled(LogLevel.MINIMAL):
            self.logger.warning(message)

    def progress(self, message: str, force: bool = False):
        """Throttled unless forced"""
        if not self.enabled(LogLevel.MODERATE):
            return
        now = time.time()
        if force or now - self.last_progress_time >= self.PROGRESS_INTERVAL:
            self.logger.info(f"PROGRESS: {message}")
            self.last_progress_time = now

    def search_step(self, size: int, step: int, n_steps: int, attempts: int, solutions: int):
        if self.enabled(LogLevel.DETAILED):
            elapsed = time.time() - self.start_time
            self.logger.info(f"Size {size} permutation {step + 1:3d}/{n_steps}: "
                             f"attempts={attempts:,} solutions={solutions} ({elapsed:.1f}s)")

    def debug(self, message: str):
        if self.enabled(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        if not self.enabled(LogLevel.MINIMAL):
            return
        self.logger.info("=" * 60)
        self.logger.info("NUMBERS SOLVER RESULTS:")
        self.logger.info("=" * 60)
        for key, value in results.items():
            if isinstance(value, int) and not isinstance(value, bool):
                value = f"{value:,}"
            self.logger.info(f"{key:.<30} {value}")


_global_logger: Optional[NumbersSolverLogger] = None


def get_logger() -> NumbersSolverLogger:
    global _global_logger
    if _global_logger is None:
        _global_logger = NumbersSolverLogger()
    return _global_logger


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_file_path: Optional[str] = None) -> NumbersSolverLogger:
    """Replace the global logger, optionally also writing to ``log_file_path``"""
    global _global_logger
    _global_logger = NumbersSolverLogger(log_level=log_level, log_file_path=log_file_path)
    return _global_logger


def set_log_level(level: LogLevel):
    """Change verbosity, keeping the current handlers"""
    logger = get_logger()
    if logger.log_level is LogLevel.SILENT and level is not LogLevel.SILENT:
        configure_logging(level)
    else:
        logger.log_level = level


def log_milestone(message: str):
    get_logger().milestone(message)


def log_solution(message: str):
    get_logger().solution(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_progress(message: str, force: bool = False):
    get_logger().progress(message, force)


def log_search_step(size: int, step: int, n_steps: int, attempts: int, solutions: int):
    get_logger().search_step(size, step, n_steps, attempts, solutions)


def log_debug(message: str):
    get_logger().debug(message)
