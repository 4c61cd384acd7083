"""
SOQL queries.

``select`` returns a :class:`QueryCursor` that walks ``nextRecordsUrl``
continuations on demand: a follow-up page is requested only when the
consumer asks for a record past the end of the current page.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .names import NameKind, salesforce_name, translate_record
from .paths import query_path
from .request import RequestOptions
from .schema import object_schema
from .session import SessionToken
from .transport import Transport, default_transport, execute

_logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Cursor
# ----------------------------------------------------------------------
class QueryCursor(Iterator[Dict[str, Any]]):
    """Iterator over the translated records of a SOQL query."""

    def __init__(
        self,
        token: SessionToken,
        soql: str,
        *,
        transport: Optional[Transport] = None,
        translate: bool = True,
    ) -> None:
        self.token = token
        self.soql = soql
        self.transport = transport or default_transport()
        self.translate = translate
        self.total_size: Optional[int] = None
        self.requests_made = 0
        self._buffer: Deque[Any] = deque()
        self._next_url: Optional[str] = None

        self._load(
            execute(
                token,
                "GET",
                query_path(token),
                RequestOptions(params={"q": soql}),
                transport=self.transport,
            )
        )

    def _load(self, page: Mapping[str, Any]) -> None:
        self.requests_made += 1
        if self.total_size is None:
            self.total_size = page.get("totalSize")
        records = page.get("records") or []
        self._buffer.extend(records)
        self._next_url = page.get("nextRecordsUrl") or None
        _logger.debug(
            "Query page %d: %d records, more=%s", self.requests_made, len(records), bool(self._next_url)
        )

    @property
    def exhausted(self) -> bool:
        return not self._buffer and self._next_url is None

    def __iter__(self) -> QueryCursor:
        return self

    def __next__(self) -> Dict[str, Any]:
        while not self._buffer:
            if self._next_url is None:
                raise StopIteration
            next_url, self._next_url = self._next_url, None
            self._load(execute(self.token, "GET", next_url, transport=self.transport))

        record = self._buffer.popleft()
        return translate_record(record) if self.translate else record


def select(
    token: SessionToken,
    soql: str,
    *,
    transport: Optional[Transport] = None,
    translate: bool = True,
) -> QueryCursor:
    """Run ``soql``; the first page is fetched before this returns."""
    return QueryCursor(token, soql, transport=transport, translate=translate)


# ----------------------------------------------------------------------
# Query builder
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Equals:
    value: Any


@dataclass(frozen=True)
class Operator:
    op: str
    value: Any


@dataclass(frozen=True)
class Literal:
    """Right-hand side inserted verbatim, e.g. ``Literal("LAST_N_DAYS:30")``."""

    value: str


Condition = Union[Equals, Operator, Literal]


def soql_value(value: Any) -> str:
    """Render a Python value as a SOQL literal."""
    if isinstance(value, Literal):
        return value.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "(" + ", ".join(soql_value(v) for v in value) + ")"
    return str(value)


def _clause(field: str, condition: Any) -> str:
    name = salesforce_name(field)
    if isinstance(condition, Operator):
        return f"{name} {condition.op} {soql_value(condition.value)}"
    if isinstance(condition, Literal):
        return f"{name} = {condition.value}"
    if isinstance(condition, Equals):
        condition = condition.value
    return f"{name} = {soql_value(condition)}"


def where_clause(conditions: Optional[Mapping[str, Any]]) -> str:
    """AND together ``conditions``; plain values mean :class:`Equals`."""
    if not conditions:
        return ""
    return " and ".join(_clause(k, v) for k, v in conditions.items())


def _field_list(fields: Iterable[str]) -> List[str]:
    # Id first, then the rest de-duplicated case-insensitively
    out = ["Id"]
    seen = {"id"}
    for f in fields:
        name = salesforce_name(f)
        if name.lower() in seen:
            continue
        seen.add(name.lower())
        out.append(name)
    return out


def build_soql(obj: str, conditions: Optional[Mapping[str, Any]], fields: Iterable[str]) -> str:
    soql = f"select {', '.join(_field_list(fields))} from {salesforce_name(obj, NameKind.OBJECT)}"
    where = where_clause(conditions)
    if where:
        soql += f" where {where}"
    return soql


def select_objects(
    token: SessionToken,
    obj: str,
    conditions: Optional[Mapping[str, Any]] = None,
    *fields: str,
    transport: Optional[Transport] = None,
) -> QueryCursor:
    """
    Build and run ``select <fields> from <obj> where <conditions>``.

    With no ``fields`` every field in the object's describe is selected.
    """
    transport = transport or default_transport()
    if not fields:
        fields = tuple(object_schema(token, obj, raw=True, transport=transport))
    return select(token, build_soql(obj, conditions, fields), transport=transport)
