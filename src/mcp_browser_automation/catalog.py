"""
Tool Catalog: the static, ordered list of operations this server exposes.

Descriptors are declarative data. Validation against `input_schema` is done by
the dispatcher (see `utils.validation`), not here.
"""

import copy
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from jsonschema import Draft7Validator


@dataclass(frozen=True)
class ToolDescriptor:
    """
    Name, description and JSON-Schema input description of one operation.

    Attributes:
        name: Unique identifier callers invoke the tool by.
        description: Human-readable purpose, shown to the calling model.
        input_schema: JSON-Schema object (`type`, `properties`, `required`,
            per-property `type`, `description` and optional `default`).
    """

    name: str
    description: str
    input_schema: Dict = field(default_factory=lambda: {"type": "object", "properties": {}})

    def schema(self) -> Dict:
        """Return a deep copy of the input schema, safe for callers to mutate."""
        return copy.deepcopy(self.input_schema)

    def required(self) -> List[str]:
        return list(self.input_schema.get("required") or [])


class ToolCatalog:
    """Ordered, append-only collection of tool descriptors."""

    def __init__(self, descriptors=()):
        self._descriptors: Dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: ToolDescriptor) -> ToolDescriptor:
        """
        Append `descriptor`.

        Raises:
            ValueError: if the name is taken.
            jsonschema.SchemaError: if `input_schema` is not a valid JSON Schema.
        """
        if descriptor.name in self._descriptors:
            raise ValueError(f"Tool '{descriptor.name}' is already registered")
        Draft7Validator.check_schema(descriptor.input_schema)
        self._descriptors[descriptor.name] = descriptor
        return descriptor

    def list(self) -> List[ToolDescriptor]:
        return list(self._descriptors.values())

    def get(self, name: str) -> Optional[ToolDescriptor]:
        return self._descriptors.get(name)

    def names(self) -> List[str]:
        return list(self._descriptors)

    def __contains__(self, name) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self.list())


__all__ = ["ToolDescriptor", "ToolCatalog"]
