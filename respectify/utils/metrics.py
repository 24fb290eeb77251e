"""
Metrics collection for Respectify API calls.

This module tracks, per client instance:
- Number of calls per endpoint
- Call latency per endpoint
- Failures grouped by error kind
"""

import time
from typing import Optional, Dict, Any, List
from contextlib import asynccontextmanager

from respectify.exceptions import RespectifyError
from respectify.utils.logging import log_api_call


class ClientMetrics:
    """
    Collects call metrics for one client instance.

    All mutation happens on the event loop thread, so no locking is used.
    """

    def __init__(self, service: str = "respectify"):
        """
        Initialize metrics collector.

        Args:
            service: Service name used when logging calls
        """
        self.service = service
        self.api_calls: Dict[str, int] = {}
        self.api_latencies: Dict[str, List[float]] = {}
        self.failures: Dict[str, int] = {}

    def record_api_call(self, endpoint: str, duration_ms: float) -> None:
        """
        Record API call and latency.

        Args:
            endpoint: Endpoint path
            duration_ms: Call duration in milliseconds
        """
        self.api_calls[endpoint] = self.api_calls.get(endpoint, 0) + 1
        self.api_latencies.setdefault(endpoint, []).append(duration_ms)

    def record_failure(self, kind: str) -> None:
        """
        Record a failed call.

        Args:
            kind: Error kind value (see ErrorKind)
        """
        self.failures[kind] = self.failures.get(kind, 0) + 1

    def get_metrics_summary(self) -> Dict[str, Any]:
        """
        Get summary of collected metrics.

        Returns:
            Dictionary of metrics
        """
        summary: Dict[str, Any] = {
            "service": self.service,
            "api_calls": dict(self.api_calls),
            "failures": dict(self.failures),
        }

        latency_stats = {}
        for endpoint, latencies in self.api_latencies.items():
            if latencies:
                latency_stats[endpoint] = {
                    "count": len(latencies),
                    "min_ms": round(min(latencies), 2),
                    "max_ms": round(max(latencies), 2),
                    "avg_ms": round(sum(latencies) / len(latencies), 2),
                }
        if latency_stats:
            summary["api_latencies"] = latency_stats

        return summary


@asynccontextmanager
async def track_api_call(
    metrics: Optional[ClientMetrics],
    endpoint: str,
    method: str,
    logger_adapter,
    service: str = "respectify",
):
    """
    Context manager to time and log one API call.

    Usage:
        async with track_api_call(metrics, "/v0.2/usercheck", "GET", logger) as call:
            response = await client.get(...)
            call["status_code"] = response.status_code

    Args:
        metrics: Metrics collector (optional)
        endpoint: Endpoint path
        method: HTTP method
        logger_adapter: Logger for logging API calls
        service: Service name for the log record

    Yields:
        Mutable dict; set ``status_code`` once a response is received
    """
    start_time = time.perf_counter()
    call: Dict[str, Any] = {"status_code": None}
    error: Optional[Exception] = None

    try:
        yield call
    except Exception as e:
        error = e
        raise
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000

        if metrics is not None:
            metrics.record_api_call(endpoint, duration_ms)
            if isinstance(error, RespectifyError):
                metrics.record_failure(error.kind.value)

        log_api_call(
            logger_adapter,
            service=metrics.service if metrics is not None else service,
            endpoint=endpoint,
            method=method,
            status_code=call["status_code"],
            duration_ms=duration_ms,
            error=str(error) if error else None
        )
