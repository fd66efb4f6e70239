"""Request trace id context.

TraceMiddleware sets the id for each request; loggers and error
responses read it back without needing the request object.
"""

from contextvars import ContextVar

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID, or None outside a request."""
    return trace_id_context.get()
