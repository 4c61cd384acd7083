from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .exceptions import NoSessionError
from .session import SessionToken

# Salesforce honours this override on POST for clients that cannot send PATCH.
METHOD_OVERRIDE_PARAM = "_HttpMethod"

PARSE_MODES = ("json", "text", "raw")


# ----------------------------------------------------------------------
# Request description
# ----------------------------------------------------------------------
@dataclass
class RequestOptions:
    """Per-call overrides for :func:`build_request`.

    ``params`` and ``headers`` are merged one level deep over the defaults
    (option values win). Every other field replaces the default when set.
    """

    params: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None
    json: Any = None
    data: Any = None
    timeout: Optional[float] = None

    # "json" (parsed body), "text" or "raw" (the requests.Response)
    parse: Optional[str] = None


@dataclass(frozen=True)
class Request:
    """Fully-resolved HTTP call, ready for a Transport to send."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    json: Any = None
    data: Any = None
    timeout: Optional[float] = None
    parse: str = "json"


# ----------------------------------------------------------------------
# Builder
# ----------------------------------------------------------------------
def build_request(
    token: Optional[SessionToken],
    method: str,
    path: str,
    options: Optional[RequestOptions] = None,
) -> Request:
    """Compose an authorized request for ``path`` on the token's instance.

    ``path`` may be a template path from :mod:`sfrest.paths` or a
    ``nextRecordsUrl`` returned by the API; both are relative to the
    instance URL.
    """
    if not token:
        raise NoSessionError()

    opts = options or RequestOptions()
    method = method.upper()

    headers = {"Authorization": f"Bearer {token.access_token}"}
    params: Dict[str, Any] = {}
    if method == "PATCH":
        method = "POST"
        params[METHOD_OVERRIDE_PARAM] = "PATCH"

    headers.update(opts.headers or {})
    params.update(opts.params or {})

    parse = opts.parse or "json"
    if parse not in PARSE_MODES:
        raise ValueError(f"Unknown parse mode {parse!r}; expected one of {PARSE_MODES}")

    return Request(
        method=method,
        url=f"{token.instance_url}{path}",
        headers=headers,
        params=params,
        json=opts.json,
        data=opts.data,
        timeout=opts.timeout,
        parse=parse,
    )
