from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .request import Request, RequestOptions, build_request
from .session import SessionToken

_logger = logging.getLogger(__name__)


class Transport:
    """Sends :class:`Request` objects over a ``requests.Session``.

    Failures are not retried: HTTP errors are logged and raised as
    ``requests.HTTPError``, network errors propagate as raised by requests.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 30.0) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: Request) -> Any:
        _logger.debug("%s %s params=%s", request.method, request.url, request.params)
        r = self.session.request(
            request.method,
            request.url,
            params=request.params or None,
            headers=request.headers,
            json=request.json,
            data=request.data,
            timeout=request.timeout or self.timeout,
        )

        if r.status_code >= 400:
            try:
                detail = r.json()
            except ValueError:
                detail = r.text
            _logger.error("HTTP %s error for %s: %s", r.status_code, request.url, detail)
            r.raise_for_status()

        if request.parse == "raw":
            return r
        if request.parse == "text":
            return r.text
        # 204 No Content (update/delete) has nothing to parse
        if not r.content:
            return None
        return r.json()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


_default_transport: Optional[Transport] = None


def default_transport() -> Transport:
    """Shared Transport used when a call is not given one; one Session per process."""
    global _default_transport
    if _default_transport is None:
        _default_transport = Transport()
    return _default_transport


def execute(
    token: Optional[SessionToken],
    method: str,
    path: str,
    options: Optional[RequestOptions] = None,
    transport: Optional[Transport] = None,
) -> Any:
    """Build a request for ``path`` and send it."""
    request = build_request(token, method, path, options)
    return (transport or default_transport()).send(request)
