"""
Argument Schemas

A tool's input schema comes in one of two shapes:

1. A pydantic model class (``ModelSchema``). Validation is pydantic's own.
2. A JSON-Schema dictionary (``JsonSchema``). Validation is the ``jsonschema``
   library's Draft 2020-12 validator, built once at registration. OpenAPI's
   ``nullable: true`` is accepted and rewritten into a ``null`` type.

Both report failures as ``Violation(path, kind, message)`` using one shared
vocabulary of kinds, so the error text a caller sees does not depend on
how the tool happened to be declared. A missing object is reported through
the required fields inside it, in both modes.

Unknown fields are passed through untouched in both modes.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

import jsonschema
from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from .errors import ArgumentValidationError, ConfigurationError, Violation

# -----------------------------------------------------------------------------
# Violation kinds
# -----------------------------------------------------------------------------

REQUIRED = "required"
INVALID_TYPE = "invalid_type"
TOO_SMALL = "too_small"
TOO_BIG = "too_big"
INVALID_ENUM_VALUE = "invalid_enum_value"
INVALID_STRING = "invalid_string"
INVALID_UNION = "invalid_union"
INVALID_LITERAL = "invalid_literal"


@runtime_checkable
class ArgumentSchema(Protocol):
    """Anything that can check a raw argument mapping and describe itself."""

    def check(self, arguments: Mapping[str, Any]) -> tuple[dict[str, Any], list[Violation]]:
        ...

    def json_schema(self) -> dict[str, Any]:
        ...


def validate_arguments(
    tool_name: str,
    schema: ArgumentSchema,
    arguments: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Validate raw caller arguments against a tool's schema.

    Raises:
        ArgumentValidationError: One violation per offending field.
    """
    validated, violations = schema.check(arguments or {})
    if violations:
        raise ArgumentValidationError(tool_name, violations)
    return validated


def compile_schema(source: Any) -> ArgumentSchema:
    """Turn a descriptor's declared schema into a ready-to-use validator."""
    if isinstance(source, type) and issubclass(source, BaseModel):
        return ModelSchema(source)
    if isinstance(source, Mapping):
        return JsonSchema(source)
    if isinstance(source, ArgumentSchema):
        return source
    raise ConfigurationError(f"Unsupported input schema: {source!r}")


# -----------------------------------------------------------------------------
# Native pydantic models
# -----------------------------------------------------------------------------

_PYDANTIC_KINDS: dict[str, str] = {
    "missing": REQUIRED,
    "string_too_short": TOO_SMALL,
    "too_short": TOO_SMALL,
    "greater_than": TOO_SMALL,
    "greater_than_equal": TOO_SMALL,
    "string_too_long": TOO_BIG,
    "too_long": TOO_BIG,
    "less_than": TOO_BIG,
    "less_than_equal": TOO_BIG,
    "enum": INVALID_ENUM_VALUE,
    "literal_error": INVALID_ENUM_VALUE,
    "uuid_parsing": INVALID_STRING,
    "uuid_type": INVALID_STRING,
    "url_parsing": INVALID_STRING,
    "url_scheme": INVALID_STRING,
    "string_pattern_mismatch": INVALID_STRING,
    "datetime_parsing": INVALID_STRING,
    "datetime_from_date_parsing": INVALID_STRING,
    "value_error": INVALID_STRING,
    "union_tag_invalid": INVALID_UNION,
}


def _field_named(model: type[BaseModel], name: str) -> FieldInfo | None:
    for attribute, info in model.model_fields.items():
        if name in (attribute, info.alias):
            return info
    return None


def _nested_model(model: type[BaseModel], loc: tuple[Any, ...]) -> type[BaseModel] | None:
    """The model class a field location points at, if it is a model."""
    current = model
    for part in loc:
        info = _field_named(current, part) if isinstance(part, str) else None
        if info is None:
            return None
        annotation = info.annotation
        if not (isinstance(annotation, type) and issubclass(annotation, BaseModel)):
            return None
        current = annotation
    return current


def _missing_fields(model: type[BaseModel], loc: tuple[Any, ...]) -> Iterator[tuple[Any, ...]]:
    nested = _nested_model(model, loc)
    required = [
        info.alias or name
        for name, info in (nested.model_fields.items() if nested else ())
        if info.is_required()
    ]
    if not required:
        yield loc
        return
    for name in required:
        yield from _missing_fields(model, (*loc, name))


class ModelSchema:
    """Schema backed by a pydantic model class."""

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def check(self, arguments: Mapping[str, Any]) -> tuple[dict[str, Any], list[Violation]]:
        try:
            instance = self.model.model_validate(dict(arguments))
        except ValidationError as exc:
            violations: list[Violation] = []
            for error in exc.errors():
                if error["type"] == "missing":
                    violations.extend(
                        _from_pydantic({**error, "loc": leaf})
                        for leaf in _missing_fields(self.model, tuple(error["loc"]))
                    )
                else:
                    violations.append(_from_pydantic(error))
            return dict(arguments), violations
        # Unset optionals must stay absent so they never reach the wire.
        return instance.model_dump(mode="json", exclude_unset=True), []

    def json_schema(self) -> dict[str, Any]:
        return self.model.model_json_schema()

    def __repr__(self) -> str:
        return f"ModelSchema({self.model.__name__})"


def _from_pydantic(error: Mapping[str, Any]) -> Violation:
    path = ".".join(str(part) for part in error.get("loc", ()))
    kind = _PYDANTIC_KINDS.get(error.get("type", ""), INVALID_TYPE)
    return Violation(path=path, kind=kind, message=error.get("msg", "Invalid input"))


# -----------------------------------------------------------------------------
# JSON Schema dictionaries
# -----------------------------------------------------------------------------

_Validator = jsonschema.Draft202012Validator

# Keywords whose values are data, not subschemas.
_LITERAL_KEYWORDS = frozenset({"enum", "const", "default", "examples"})

# Keywords whose values map arbitrary names to subschemas.
_SCHEMA_MAPS = frozenset({"properties", "patternProperties", "$defs", "definitions", "dependentSchemas"})

_KINDS: dict[str, str] = {
    "required": REQUIRED,
    "type": INVALID_TYPE,
    "minLength": TOO_SMALL,
    "minimum": TOO_SMALL,
    "exclusiveMinimum": TOO_SMALL,
    "minItems": TOO_SMALL,
    "minProperties": TOO_SMALL,
    "maxLength": TOO_BIG,
    "maximum": TOO_BIG,
    "exclusiveMaximum": TOO_BIG,
    "maxItems": TOO_BIG,
    "maxProperties": TOO_BIG,
    "enum": INVALID_ENUM_VALUE,
    "const": INVALID_LITERAL,
    "format": INVALID_STRING,
    "pattern": INVALID_STRING,
    "anyOf": INVALID_UNION,
    "oneOf": INVALID_UNION,
}

_MESSAGES: dict[str, str] = {
    "minLength": "String must contain at least {limit} character(s)",
    "maxLength": "String must contain at most {limit} character(s)",
    "minimum": "Number must be greater than or equal to {limit}",
    "exclusiveMinimum": "Number must be greater than {limit}",
    "maximum": "Number must be less than or equal to {limit}",
    "exclusiveMaximum": "Number must be less than {limit}",
    "minItems": "Array must contain at least {limit} element(s)",
    "maxItems": "Array must contain at most {limit} element(s)",
    "const": "Invalid literal value, expected {limit!r}",
    "format": "Invalid {limit}",
    "pattern": "String must match pattern {limit!r}",
    "anyOf": "Invalid input",
    "oneOf": "Invalid input",
}


def _type_of(value: Any) -> str:
    """Name a JSON value's type the way violation messages report it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _types(schema: Any) -> list[str]:
    if not isinstance(schema, Mapping):
        return []
    declared = schema.get("type", [])
    return [declared] if isinstance(declared, str) else list(declared)


def _allow_null(schema: dict[str, Any]) -> dict[str, Any]:
    if "type" not in schema:
        return {"anyOf": [{"type": "null"}, schema]}
    types = _types(schema)
    if "null" not in types:
        schema["type"] = [*types, "null"]
    if "enum" in schema and None not in schema["enum"]:
        schema["enum"] = [*schema["enum"], None]
    return schema


def _normalize(node: Any) -> Any:
    """Rewrite OpenAPI-style ``nullable: true`` into plain JSON Schema."""
    if isinstance(node, list):
        return [_normalize(item) for item in node]
    if not isinstance(node, Mapping):
        return node

    schema: dict[str, Any] = {}
    for key, value in node.items():
        if key in _LITERAL_KEYWORDS:
            schema[key] = value
        elif key in _SCHEMA_MAPS and isinstance(value, Mapping):
            schema[key] = {name: _normalize(sub) for name, sub in value.items()}
        else:
            schema[key] = _normalize(value)

    nullable = schema.get("nullable")
    if isinstance(nullable, bool):
        del schema["nullable"]
        if nullable:
            return _allow_null(schema)
    return schema


def _narrow(value: Any, schema: Any) -> Any:
    """
    Copy a validated value, turning integral floats into ints where the
    schema asks for an integer. ``5.0`` must reach a URL as ``5``.
    """
    if not isinstance(schema, Mapping):
        return value
    if isinstance(value, float):
        types = set(_types(schema))
        for keyword in ("anyOf", "oneOf"):
            for branch in schema.get(keyword, ()):
                types.update(_types(branch))
        if value.is_integer() and "integer" in types and "number" not in types:
            return int(value)
        return value
    if isinstance(value, Mapping):
        properties = schema.get("properties", {})
        return {name: _narrow(item, properties.get(name)) for name, item in value.items()}
    if isinstance(value, list):
        return [_narrow(item, schema.get("items")) for item in value]
    return value


def _missing_paths(schema: Any, path: tuple[str, ...]) -> Iterator[tuple[str, ...]]:
    # A missing object is reported through its own required fields, so the
    # caller learns every leaf it has to supply, e.g. requestBody.name.
    required = schema.get("required", ()) if isinstance(schema, Mapping) else ()
    if "object" not in _types(schema) or not required:
        yield path
        return
    properties = schema.get("properties", {})
    for name in required:
        yield from _missing_paths(properties.get(name), (*path, name))


def _from_jsonschema(error: jsonschema.ValidationError) -> list[Violation]:
    path = tuple(str(part) for part in error.absolute_path)
    validator = str(error.validator)

    if validator == "required":
        instance = error.instance if isinstance(error.instance, Mapping) else {}
        properties = error.schema.get("properties", {})
        return [
            Violation(".".join(leaf), REQUIRED, "Required")
            for name in error.validator_value
            if name not in instance
            for leaf in _missing_paths(properties.get(name), (*path, name))
        ]

    where = ".".join(path)
    kind = _KINDS.get(validator, INVALID_TYPE)
    if validator == "type":
        expected = " | ".join(t for t in _types(error.schema) if t != "null") or "null"
        message = f"Expected {expected}, received {_type_of(error.instance)}"
    elif validator == "enum":
        options = " | ".join(repr(option) for option in error.validator_value)
        message = f"Invalid enum value. Expected {options}, received {error.instance!r}"
    elif validator in _MESSAGES:
        message = _MESSAGES[validator].format(limit=error.validator_value)
    else:
        message = error.message
    return [Violation(where, kind, message)]


class JsonSchema:
    """
    Schema declared as a JSON-Schema dictionary.

    The validator is built once, at registration, and checks formats
    (uuid, date-time, uri, email). An invalid schema is a configuration
    defect and fails here rather than on a tool call.
    """

    def __init__(self, schema: Mapping[str, Any]) -> None:
        root_type = schema.get("type", "object")
        if root_type != "object":
            raise ConfigurationError(
                f"Tool input schemas must describe an object, got type {root_type!r}"
            )
        self.schema: dict[str, Any] = _normalize({"type": "object", **dict(schema)})
        self.schema.setdefault("properties", {})
        try:
            _Validator.check_schema(self.schema)
        except jsonschema.SchemaError as exc:
            raise ConfigurationError(f"Invalid input schema: {exc.message}") from exc
        self._validator = _Validator(self.schema, format_checker=_Validator.FORMAT_CHECKER)

    def check(self, arguments: Mapping[str, Any]) -> tuple[dict[str, Any], list[Violation]]:
        arguments = dict(arguments)
        found: dict[str, Violation] = {}
        for error in self._validator.iter_errors(arguments):
            for violation in _from_jsonschema(error):
                # One violation per field; a type mismatch explains the rest.
                current = found.get(violation.path)
                if current is None or (violation.kind == INVALID_TYPE and current.kind != INVALID_TYPE):
                    found[violation.path] = violation
        if found:
            return arguments, list(found.values())
        return _narrow(arguments, self.schema), []

    def json_schema(self) -> dict[str, Any]:
        return self.schema

    @property
    def properties(self) -> frozenset[str]:
        return frozenset(self.schema["properties"])

    def __repr__(self) -> str:
        return f"JsonSchema(properties={sorted(self.properties)})"
