import uuid
from contextvars import ContextVar, Token

TRACE_HEADER = "X-Request-Id"

_trace_id: ContextVar[str] = ContextVar("trace_id", default="-")


def get_trace_id() -> str:
    return _trace_id.get()


def bind_trace_id(value: str | None = None) -> Token:
    """Bind the inbound request id, or a fresh uuid4, to this context."""
    return _trace_id.set(value or str(uuid.uuid4()))


def reset_trace_id(token: Token) -> None:
    _trace_id.reset(token)
