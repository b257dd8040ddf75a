"""Utility functions for logging and progress reporting."""

from .logging_utils import (
    setup_logging,
    get_logger,
    log_step,
    log_summary_block,
    log_all_warnings_and_errors
)
from .progress import ProgressReporter

__all__ = [
    'setup_logging',
    'get_logger',
    'log_step',
    'log_summary_block',
    'log_all_warnings_and_errors',
    'ProgressReporter'
]
