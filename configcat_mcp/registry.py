"""
Descriptor Registry

An ordered, read-only mapping from tool name to EndpointDescriptor.
Built once at startup and passed explicitly to whoever needs it.

Construction is where configuration defects surface: a path placeholder
without a path binding (or the reverse) and duplicate tool names fail
here, never per call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .endpoints import EndpointDescriptor, ParameterLocation
from .errors import ConfigurationError, UnknownToolError

logger = logging.getLogger(__name__)


def check_descriptor(descriptor: EndpointDescriptor) -> list[str]:
    """Return the consistency problems of one descriptor. Empty list = valid."""
    problems: list[str] = []
    placeholders = descriptor.placeholders()
    path_bindings = [
        b.name for b in descriptor.bindings if b.location == ParameterLocation.PATH
    ]

    for name in sorted(set(placeholders)):
        count = path_bindings.count(name)
        if count == 0:
            problems.append(f"placeholder '{{{name}}}' has no path binding")
        elif count > 1:
            problems.append(f"placeholder '{{{name}}}' is bound {count} times")

    for name in sorted(set(path_bindings) - set(placeholders)):
        problems.append(f"path binding '{name}' has no placeholder in {descriptor.path_template}")

    return problems


class EndpointRegistry:
    """
    Immutable tool registry.

    ``endpoints`` is a MappingProxyType: item assignment and deletion
    raise TypeError.
    """

    def __init__(self, descriptors: Iterable[EndpointDescriptor]) -> None:
        table: dict[str, EndpointDescriptor] = {}
        problems: list[str] = []

        for descriptor in descriptors:
            if descriptor.name in table:
                problems.append(f"{descriptor.name}: duplicate tool name")
                continue
            problems.extend(f"{descriptor.name}: {p}" for p in check_descriptor(descriptor))
            table[descriptor.name] = descriptor

        if problems:
            raise ConfigurationError("Invalid endpoint descriptors: " + "; ".join(problems))

        self.endpoints: MappingProxyType[str, EndpointDescriptor] = MappingProxyType(table)
        logger.debug("Registered %d endpoint descriptors", len(table))

    def lookup(self, name: str) -> EndpointDescriptor:
        """
        Find the descriptor for a tool name.

        Raises:
            UnknownToolError: If no descriptor has that name.
        """
        try:
            return self.endpoints[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self.endpoints

    def __iter__(self) -> Iterator[EndpointDescriptor]:
        return iter(self.endpoints.values())

    def __len__(self) -> int:
        return len(self.endpoints)
