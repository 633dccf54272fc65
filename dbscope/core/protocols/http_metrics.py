"""HttpMetrics protocol for HTTP request instrumentation.

Abstracts metric collection so the middleware depends on a protocol
rather than a concrete library.  Production uses Prometheus; tests inject
a fake that records calls in memory.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HttpMetrics(Protocol):
    """Protocol for HTTP request duration metrics."""

    def observe_http_duration(
        self,
        method: str,
        route: str,
        status_code: str,
        duration: float,
    ) -> None:
        """Record a completed request.

        Implementations must never raise: a broken metric must not break
        the request it is measuring.

        Args:
            method: HTTP method (GET, POST, …).
            route: Route path template, or ``"unmatched"``.
            status_code: Response status code as a string.
            duration: Request duration in seconds.
        """
        ...
