"""
Translate between canonical identifiers and Salesforce API names.

Callers use lower-kebab identifiers (``last-modified-date``); Salesforce
uses PascalCase with a ``__c`` suffix on custom objects and fields
(``LastModifiedDate``, ``ShoeSize__c``). Any string that is not a
canonical identifier is treated as an exact Salesforce name and passed
through, so ``"Account.Name"`` or ``"Legacy_Id__c"`` can always be used
verbatim.

Reverse translation works on a batch of names at once. A standard field
and a custom field can shrink to the same identifier (``FooBar`` and
``FooBar__c`` both become ``foo-bar``); within one batch the custom field
keeps the plain identifier and the standard one gets the ``__s`` marker.
"""

from __future__ import annotations

import re
from collections import defaultdict
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping

CUSTOM_SUFFIX = "__c"
DISAMBIGUATION_SUFFIX = "__s"

# Objects that ship with Salesforce. Never custom-suffixed.
STANDARD_OBJECTS = frozenset(
    {
        "Account",
        "Campaign",
        "Case",
        "Contact",
        "Contract",
        "Event",
        "Lead",
        "Opportunity",
        "Product2",
        "Solution",
        "Task",
        "User",
    }
)

# Fields present on every object. Never custom-suffixed.
SYSTEM_FIELDS = frozenset(
    {
        "Attributes",
        "CreatedById",
        "CreatedDate",
        "Id",
        "IsDeleted",
        "LastModifiedById",
        "LastModifiedDate",
        "Name",
        "OwnerId",
        "SystemModstamp",
    }
)

# System fields Salesforce rejects in create/update bodies.
READ_ONLY_FIELDS = SYSTEM_FIELDS - {"Name", "OwnerId"}

# Segments after the first start with a letter so the split survives PascalCase.
_CANONICAL_RE = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z][a-z0-9]*)*(?:__s)?$")
_WORD_RE = re.compile(r"[A-Z]*[^A-Z]*")


class NameKind(Enum):
    OBJECT = "object"
    FIELD = "field"


def is_canonical(identifier: str) -> bool:
    """True if ``identifier`` is a lower-kebab canonical identifier."""
    return bool(_CANONICAL_RE.match(identifier))


def salesforce_name(identifier: str, kind: NameKind = NameKind.FIELD) -> str:
    """Return the Salesforce API name for ``identifier``.

    ``"shoe-size"`` -> ``"ShoeSize__c"``, ``"owner-id"`` -> ``"OwnerId"``,
    ``"account"`` (as an object) -> ``"Account"``. Exact API names are
    returned unchanged.
    """
    if not is_canonical(identifier):
        return identifier

    stem = identifier.replace(DISAMBIGUATION_SUFFIX, "")
    pascal = "".join(word.capitalize() for word in stem.split("-"))

    known = STANDARD_OBJECTS if kind is NameKind.OBJECT else SYSTEM_FIELDS
    if pascal in known:
        return pascal
    return pascal + CUSTOM_SUFFIX


def salesforce_object_name(identifier: str) -> str:
    return salesforce_name(identifier, NameKind.OBJECT)


def _kebab(name: str) -> str:
    return "-".join(word.lower() for word in _WORD_RE.findall(name) if word)


def unsalesforce_names(names: Iterable[str]) -> List[str]:
    """Translate a batch of Salesforce names into canonical identifiers.

    Collisions are resolved against this batch only, so pass an object's
    whole field list (or a record's whole key set) in one call.
    """
    translated = [_kebab(n) for n in names]
    short = [t.replace(CUSTOM_SUFFIX, "") for t in translated]

    groups: Dict[str, List[int]] = defaultdict(list)
    for idx, key in enumerate(short):
        groups[key].append(idx)

    out = list(short)
    for indices in groups.values():
        if len(indices) < 2:
            continue
        for idx in indices:
            if CUSTOM_SUFFIX not in translated[idx]:
                out[idx] = short[idx] + DISAMBIGUATION_SUFFIX
    return out


def unsalesforce_name(name: str) -> str:
    """Translate a single name (a batch of one, so never disambiguated)."""
    return unsalesforce_names([name])[0]


def translate_record(value: Any) -> Any:
    """Re-key a parsed JSON record with canonical identifiers.

    Each mapping is translated as its own batch; lists are walked so that
    sub-query results are translated too.
    """
    if isinstance(value, Mapping):
        keys = list(value.keys())
        return {
            canon: translate_record(value[key])
            for canon, key in zip(unsalesforce_names(keys), keys)
        }
    if isinstance(value, list):
        return [translate_record(v) for v in value]
    return value


def api_body_params(params: Any) -> Any:
    """Prepare a request body: Salesforce field names, read-only fields dropped."""
    if not isinstance(params, Mapping):
        return params
    body = {}
    for key, val in params.items():
        name = salesforce_name(key)
        if name in READ_ONLY_FIELDS:
            continue
        body[name] = api_body_params(val)
    return body
