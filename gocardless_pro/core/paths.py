"""
core/paths.py
--------------

Path template substitution and query string serialisation.

Templates use ``:name`` placeholders (``/mandates/:identity``).  The set
of supplied parameters must match the set of placeholders exactly: a
missing value would produce a wrong URL and an unused value usually
means an identifier was silently dropped.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, List, Mapping, Set, Tuple
from urllib.parse import quote

from gocardless_pro.core.errors import MissingPathParameter, UnusedPathParameter

PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def placeholders(template: str) -> Set[str]:
    """Return the placeholder names used in ``template``."""
    return set(PLACEHOLDER.findall(template))


def resolve_path(template: str, params: Mapping[str, str]) -> str:
    """Substitute every ``:name`` token with the URL-escaped parameter.

    :param template: path template such as ``/customers/:identity``
    :param params: mapping of placeholder name to raw value
    :raises MissingPathParameter: a placeholder has no value
    :raises UnusedPathParameter: a value matches no placeholder
    :return: the concrete path
    """
    names = placeholders(template)
    missing = names - set(params)
    if missing:
        raise MissingPathParameter(template, list(missing))
    unused = set(params) - names
    if unused:
        raise UnusedPathParameter(template, list(unused))
    return PLACEHOLDER.sub(lambda m: quote(str(params[m.group(1)]), safe=""), template)


def _serialize_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_serialize_value(v) for v in value)
    return str(value)


def serialize_query(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """Turn query parameters into ordered ``(name, value)`` pairs.

    ``None`` entries are omitted entirely rather than sent empty, and enum
    members are sent by their wire value.
    """
    return [(name, _serialize_value(value)) for name, value in params.items() if value is not None]
