from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from .names import SYSTEM_FIELDS, salesforce_object_name, unsalesforce_names
from .paths import describe_path, services_path, sobjects_path
from .session import SessionToken
from .transport import Transport, execute

_logger = logging.getLogger(__name__)

Projection = Union[str, Sequence[str], None]


def salesforce_resources(token: SessionToken, *, transport: Optional[Transport] = None) -> dict:
    """Return the resource overview for the token's API version."""
    return execute(token, "GET", services_path(token), transport=transport)


def list_objects(
    token: SessionToken, *objects: str, transport: Optional[Transport] = None
) -> List[dict]:
    """Return global describe ``sobjects`` entries, optionally limited to ``objects``."""
    sobjects = execute(token, "GET", sobjects_path(token), transport=transport).get("sobjects", [])
    if not objects:
        return sobjects
    wanted = {salesforce_object_name(o) for o in objects}
    return [s for s in sobjects if s.get("name") in wanted]


def describe_object(token: SessionToken, obj: str, *, transport: Optional[Transport] = None) -> dict:
    """Return /sobjects/{name}/describe with Salesforce keys untouched."""
    return execute(token, "GET", describe_path(token, obj), transport=transport)


def _project(descriptor: Dict[str, Any], prop: Projection) -> Any:
    if prop is None:
        return descriptor
    if isinstance(prop, str):
        return descriptor.get(prop)
    return {p: descriptor.get(p) for p in prop}


def object_schema(
    token: SessionToken,
    obj: str,
    *,
    prop: Projection = "type",
    raw: bool = False,
    include_system: bool = True,
    transport: Optional[Transport] = None,
) -> Dict[str, Any]:
    """
    Map each field of ``obj`` to (a projection of) its describe entry.

    - prop: one property name (default ``"type"``), a sequence of names
      (each field maps to a dict of those), or None for the whole entry.
    - raw: keep Salesforce field names as keys.
    - include_system: keep CreatedDate, OwnerId, ... in the result.

    Canonical keys are computed over the fields that survive filtering,
    so collision markers reflect exactly the fields returned.
    """
    description = describe_object(token, obj, transport=transport)
    fields = description.get("fields", [])

    schema = {f["name"]: _project(f, prop) for f in fields}
    if not include_system:
        schema = {k: v for k, v in schema.items() if k not in SYSTEM_FIELDS}

    _logger.debug("Schema for %s: %d fields", description.get("name", obj), len(schema))
    if raw:
        return schema
    return dict(zip(unsalesforce_names(schema.keys()), schema.values()))
