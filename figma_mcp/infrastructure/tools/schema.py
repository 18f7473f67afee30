"""
Declarative argument schemas and the registry that validates against them.

A schema is data: an ordered mapping of field name to Field. Validation is a
pure function of (schema, raw bag) that either returns the validated
arguments with defaults applied or raises InvalidArguments listing every
violating field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from figma_mcp.infrastructure.errors import FieldViolation, InvalidArguments

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
ENUM = "enum"
ANY = "any"

_KINDS = {STRING, NUMBER, BOOLEAN, ENUM, ANY}
_MISSING = object()


@dataclass(frozen=True)
class Field:
    kind: str
    description: str = ""
    required: bool = True
    default: Any = _MISSING
    choices: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown field kind: {self.kind}")
        if self.kind == ENUM and not self.choices:
            raise ValueError("enum fields need at least one choice")

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING


def string(description: str = "", *, required: bool = True, default: Any = _MISSING) -> Field:
    return Field(STRING, description, required, default)


def number(description: str = "", *, required: bool = True, default: Any = _MISSING) -> Field:
    return Field(NUMBER, description, required, default)


def boolean(description: str = "", *, required: bool = True, default: Any = _MISSING) -> Field:
    return Field(BOOLEAN, description, required, default)


def enum(choices: Tuple[str, ...], description: str = "", *, required: bool = True, default: Any = _MISSING) -> Field:
    return Field(ENUM, description, required, default, tuple(choices))


def any_value(description: str = "", *, required: bool = True) -> Field:
    return Field(ANY, description, required)


def _kind_of(value: Any) -> str:
    """Name a runtime value the way a JSON caller would see it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _check(constraint: Field, value: Any) -> Optional[str]:
    """Return the reason value violates constraint, or None."""
    if constraint.kind == ANY:
        return None
    actual = _kind_of(value)
    if constraint.kind == ENUM:
        if isinstance(value, str) and value in constraint.choices:
            return None
        expected = " | ".join(f"'{c}'" for c in constraint.choices)
        shown = f"'{value}'" if isinstance(value, str) else actual
        return f"Invalid enum value. Expected {expected}, received {shown}"
    expected_kind = constraint.kind
    if actual != expected_kind:
        return f"Expected {expected_kind}, received {actual}"
    if constraint.kind == NUMBER and value != value:
        return "Expected number, received nan"
    return None


@dataclass(frozen=True)
class ArgumentSchema:
    fields: Dict[str, Field] = field(default_factory=dict)

    def extend(self, **fields: Field) -> "ArgumentSchema":
        merged = dict(self.fields)
        merged.update(fields)
        return ArgumentSchema(merged)

    def __contains__(self, name: str) -> bool:
        return name in self.fields

    def validate(self, raw_args: Any, prefix: str = "") -> Dict[str, Any]:
        """
        Check raw_args against every field.

        Args:
            raw_args: The caller's argument bag; None is treated as empty
            prefix: Dotted path prepended to violation paths

        Returns:
            Validated arguments with defaults applied for omitted optional fields

        Raises:
            InvalidArguments: With one violation per failing field
        """
        if raw_args is None:
            raw_args = {}
        if not isinstance(raw_args, Mapping):
            raise InvalidArguments([FieldViolation(prefix, f"Expected object, received {_kind_of(raw_args)}")])

        violations: List[FieldViolation] = []
        validated: Dict[str, Any] = {}
        for name, constraint in self.fields.items():
            path = f"{prefix}.{name}" if prefix else name
            if name not in raw_args:
                if constraint.has_default:
                    validated[name] = constraint.default
                elif constraint.required:
                    violations.append(FieldViolation(path, "Required"))
                continue
            value = raw_args[name]
            reason = _check(constraint, value)
            if reason is not None:
                violations.append(FieldViolation(path, reason))
                continue
            validated[name] = value

        if violations:
            raise InvalidArguments(violations)
        return validated

    def to_json_schema(self) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        required: List[str] = []
        for name, constraint in self.fields.items():
            prop: Dict[str, Any] = {}
            if constraint.kind == ENUM:
                prop["type"] = "string"
                prop["enum"] = list(constraint.choices)
            elif constraint.kind != ANY:
                prop["type"] = constraint.kind
            if constraint.description:
                prop["description"] = constraint.description
            if constraint.has_default:
                prop["default"] = constraint.default
            properties[name] = prop
            if constraint.required and not constraint.has_default:
                required.append(name)
        return {"type": "object", "properties": properties, "required": required}


class SchemaRegistry:
    """
    Named argument schemas, populated at startup and read-only afterwards.
    """

    def __init__(self) -> None:
        self._schemas: Dict[str, ArgumentSchema] = {}

    def register(self, schema_id: str, schema: ArgumentSchema) -> None:
        if schema_id in self._schemas:
            raise ValueError(f"Schema '{schema_id}' already registered")
        self._schemas[schema_id] = schema

    def get(self, schema_id: str) -> ArgumentSchema:
        if schema_id not in self._schemas:
            raise KeyError(f"Schema '{schema_id}' not found")
        return self._schemas[schema_id]

    def __contains__(self, schema_id: str) -> bool:
        return schema_id in self._schemas

    def validate(self, schema_id: str, raw_args: Any) -> Dict[str, Any]:
        return self.get(schema_id).validate(raw_args)
