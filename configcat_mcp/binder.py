"""
Request Binder

Turns a descriptor plus validated arguments into a concrete request:
the resolved path, query parameters, headers and optional JSON body.

Rules:
- Only arguments named in the descriptor's bindings reach the path,
  query or headers. Absent and null arguments contribute nothing.
- Path values are stringified, then percent-encoded.
- Header names are lowercased, header values stringified.
- Query values are left as-is; httpx serializes them.
- The ``requestBody`` argument, when present and not null, is the body.
  Otherwise no body is attached at all.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from .endpoints import REQUEST_BODY_FIELD, EndpointDescriptor, ParameterLocation
from .errors import BindingError

_NO_BODY = object()


@dataclass(frozen=True)
class BoundRequest:
    method: str
    path: str
    query: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = _NO_BODY

    @property
    def has_body(self) -> bool:
        return self.body is not _NO_BODY


def stringify(value: Any) -> str:
    """Strings pass through; everything else is rendered as compact JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def bind_request(descriptor: EndpointDescriptor, arguments: dict[str, Any]) -> BoundRequest:
    """
    Bind validated arguments into a request for ``descriptor``.

    Raises:
        BindingError: If a placeholder is left in the path.
    """
    path = descriptor.path_template
    query: dict[str, Any] = {}
    headers: dict[str, str] = {}

    for binding in descriptor.bindings:
        value = arguments.get(binding.name)
        if value is None:
            continue

        match binding.location:
            case ParameterLocation.PATH:
                encoded = quote(stringify(value), safe="")
                path = path.replace(f"{{{binding.name}}}", encoded)
            case ParameterLocation.QUERY:
                query[binding.name] = value
            case ParameterLocation.HEADER:
                headers[binding.name.lower()] = stringify(value)

    if "{" in path:
        raise BindingError(descriptor.path_template, path)

    body = arguments.get(REQUEST_BODY_FIELD)
    return BoundRequest(
        method=descriptor.method.value,
        path=path,
        query=query,
        headers=headers,
        body=_NO_BODY if body is None else body,
    )
