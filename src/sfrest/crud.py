from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .exceptions import InvalidKeyError
from .names import api_body_params, salesforce_name, translate_record
from .paths import is_id_field, object_path, record_path
from .request import RequestOptions
from .session import SessionToken
from .transport import Transport, execute

_logger = logging.getLogger(__name__)


def _json_body(body: Mapping[str, Any]) -> RequestOptions:
    return RequestOptions(json=api_body_params(body))


def get_object(
    token: SessionToken,
    obj: str,
    record_id: str,
    *fields: str,
    transport: Optional[Transport] = None,
) -> Dict[str, Any]:
    """Fetch one record by Id, optionally limited to ``fields``."""
    opts = None
    if fields:
        opts = RequestOptions(params={"fields": ",".join(salesforce_name(f) for f in fields)})
    result = execute(token, "GET", record_path(token, obj, "id", record_id), opts, transport)
    return translate_record(result)


def create_object(
    token: SessionToken,
    obj: str,
    body: Mapping[str, Any],
    *,
    transport: Optional[Transport] = None,
) -> Dict[str, Any]:
    """POST a new record. Returns the translated ``{id, success, errors}`` result."""
    result = execute(token, "POST", object_path(token, obj), _json_body(body), transport)
    _logger.info("Created %s %s", obj, (result or {}).get("id"))
    return translate_record(result)


def update_object(
    token: SessionToken,
    obj: str,
    record_id: str,
    body: Mapping[str, Any],
    *,
    transport: Optional[Transport] = None,
) -> Any:
    """PATCH the given fields of record ``record_id``."""
    path = record_path(token, obj, "id", record_id)
    return execute(token, "PATCH", path, _json_body(body), transport)


def upsert_object(
    token: SessionToken,
    obj: str,
    key: str,
    value: str,
    body: Mapping[str, Any],
    *,
    transport: Optional[Transport] = None,
) -> Any:
    """Insert or update ``obj`` matched on the external-id field ``key``."""
    if is_id_field(key):
        raise InvalidKeyError(obj)
    path = record_path(token, obj, key, value)
    result = execute(token, "PATCH", path, _json_body(body), transport)
    return translate_record(result)


def _record_id(body: Mapping[str, Any]) -> Optional[str]:
    for key, val in body.items():
        if is_id_field(key):
            return val
    return None


def save_object(
    token: SessionToken,
    obj: str,
    body: Mapping[str, Any],
    *,
    transport: Optional[Transport] = None,
) -> Any:
    """Update when ``body`` carries an Id, otherwise create."""
    record_id = _record_id(body)
    if record_id:
        rest = {k: v for k, v in body.items() if not is_id_field(k)}
        return update_object(token, obj, record_id, rest, transport=transport)
    return create_object(token, obj, body, transport=transport)


def delete_object(
    token: SessionToken,
    obj: str,
    record_id: str,
    *,
    transport: Optional[Transport] = None,
) -> Any:
    return execute(token, "DELETE", record_path(token, obj, "id", record_id), transport=transport)
