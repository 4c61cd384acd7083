"""Salesforce REST client with canonical <-> vendor name translation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sfrest")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "unknown"

from .crud import (
    create_object,
    delete_object,
    get_object,
    save_object,
    update_object,
    upsert_object,
)
from .exceptions import InvalidKeyError, MissingCredentialsError, NoSessionError, SfRestError
from .names import salesforce_name, unsalesforce_names
from .query import Equals, Literal, Operator, QueryCursor, select, select_objects
from .schema import describe_object, list_objects, object_schema
from .session import SessionToken

__all__ = [
    "__version__",
    "Equals",
    "InvalidKeyError",
    "Literal",
    "MissingCredentialsError",
    "NoSessionError",
    "Operator",
    "QueryCursor",
    "SessionToken",
    "SfRestError",
    "create_object",
    "delete_object",
    "describe_object",
    "get_object",
    "list_objects",
    "object_schema",
    "salesforce_name",
    "save_object",
    "select",
    "select_objects",
    "unsalesforce_names",
    "update_object",
    "upsert_object",
]
