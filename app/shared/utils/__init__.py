# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small drawer of helpful tools: logging, number and date helpers, and reading JSON out of AI replies.

# 🧪 Purpose (Technical Summary):
# Utilities package re-exporting structured logging and the general helpers used across the
# Plant Care application.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - helpers: General purpose helper functions

# 🔄 Connected Modules / Calls From:
# Used by: All application modules for logging, clocks and safe conversions

from .logging import get_logger, setup_logging, log_context
from .helpers import (
    Clock,
    FixedClock,
    SystemClock,
    extract_json_object,
    round_half_up,
    safe_float,
    safe_int,
    utc_now,
)

__all__ = [
    'get_logger',
    'setup_logging',
    'log_context',
    'Clock',
    'FixedClock',
    'SystemClock',
    'extract_json_object',
    'round_half_up',
    'safe_float',
    'safe_int',
    'utc_now',
]
