"""REST endpoint paths, relative to the instance URL."""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from .exceptions import NoSessionError
from .names import salesforce_name, salesforce_object_name
from .session import SessionToken


def services_path(token: Optional[SessionToken]) -> str:
    if not token:
        raise NoSessionError()
    return f"/services/data/{token.api_version}/"


def sobjects_path(token: SessionToken) -> str:
    return f"{services_path(token)}sobjects/"


def object_path(token: SessionToken, obj: str) -> str:
    return f"{sobjects_path(token)}{salesforce_object_name(obj)}"


def describe_path(token: SessionToken, obj: str) -> str:
    return f"{object_path(token, obj)}/describe"


def is_id_field(key: str) -> bool:
    return salesforce_name(key).lower() == "id"


def record_path(token: SessionToken, obj: str, key: str, value: str) -> str:
    """Path of one record, by Id or by an external-id field."""
    if is_id_field(key):
        return f"{object_path(token, obj)}/{value}"
    return f"{object_path(token, obj)}/{salesforce_name(key)}/{quote(str(value), safe='')}"


def query_path(token: SessionToken) -> str:
    return f"{services_path(token)}query/"
