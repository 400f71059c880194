from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import Optional

_request_id: ContextVar[Optional[str]] = ContextVar("calculator_request_id", default=None)


def set_request_id(request_id: Optional[str] = None) -> Token:
    """Bind a request id to the current context, generating one when absent."""
    return _request_id.set(request_id or uuid.uuid4().hex)


def get_request_id() -> Optional[str]:
    return _request_id.get()


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)
