import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
from countdown_numbers import NumbersSolver, SolveMode
from countdown_numbers.logging_system import (
    LogLevel, NumbersSolverLogger, configure_logging, get_logger, set_log_level
)


def test_silent_logger_has_no_handlers():
    logger = NumbersSolverLogger(log_level=LogLevel.SILENT)
    assert logger.logger.handlers == []
    assert not logger.enabled(LogLevel.MINIMAL)


def test_levels_gate_messages():
    logger = NumbersSolverLogger(log_level=LogLevel.MODERATE)
    assert logger.enabled(LogLevel.MINIMAL)
    assert logger.enabled(LogLevel.MODERATE)
    assert not logger.enabled(LogLevel.DETAILED)
    configure_logging(LogLevel.SILENT)


def test_set_log_level_updates_global_logger():
    configure_logging(LogLevel.MINIMAL)
    set_log_level(LogLevel.VERBOSE)
    assert get_logger().log_level is LogLevel.VERBOSE
    configure_logging(LogLevel.SILENT)


def test_set_log_level_leaving_silent_attaches_handlers():
    configure_logging(LogLevel.SILENT)
    set_log_level(LogLevel.MINIMAL)
    assert get_logger().logger.handlers
    configure_logging(LogLevel.SILENT)


def test_file_logging(tmp_path):
    log_file = tmp_path / "solver.log"
    configure_logging(LogLevel.DETAILED, log_file_path=str(log_file))
    NumbersSolver(mode=SolveMode.ALL).solve(6, [1, 2, 3])
    for handler in get_logger().logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding='utf-8')
    configure_logging(LogLevel.SILENT)

    assert "MILESTONE: Searching for 6 using 1, 2, 3" in text
    assert "Size 1 permutation" in text
    assert "Found solution:" in text
    assert "NUMBERS SOLVER RESULTS" in text


def test_no_solution_is_a_warning(caplog):
    configure_logging(LogLevel.MINIMAL)
    with caplog.at_level(logging.WARNING, logger='countdown_numbers'):
        NumbersSolver(mode=SolveMode.FIRST).solve(1000, [1, 2, 3])
    configure_logging(LogLevel.SILENT)
    assert "No solution for 1000 after" in caplog.text
