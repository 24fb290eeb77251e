"""
Utility modules for the Respectify client.
"""

from respectify.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    log_api_call,
    log_error_with_context,
)
from respectify.utils.metrics import (
    ClientMetrics,
    track_api_call,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "log_api_call",
    "log_error_with_context",
    "ClientMetrics",
    "track_api_call",
]
