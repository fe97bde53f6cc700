"""Oracle contract, output shapes and response parsing."""

import json
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from beefup.domain.errors import MalformedResponseError

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)
_FENCE_MARKER_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


class FieldKind(str, Enum):
    """Primitive type of a field in an expected oracle answer."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldSpec:
    """Named field of an expected JSON object."""

    name: str
    kind: FieldKind


@dataclass(frozen=True)
class ObjectShape:
    """Expected JSON object shape with a set of required fields."""

    fields: tuple[FieldSpec, ...]
    required: frozenset[str]

    @classmethod
    def of(cls, *fields: FieldSpec) -> "ObjectShape":
        """Build a shape where every field is required."""
        return cls(fields=fields, required=frozenset(field.name for field in fields))

    @property
    def is_strict(self) -> bool:
        """Whether every declared field is required."""
        return self.required == {field.name for field in self.fields}

    def to_json_schema(self) -> dict[str, object]:
        """Render the shape as a JSON Schema object."""
        return {
            "type": "object",
            "properties": {
                field.name: {"type": field.kind.value} for field in self.fields
            },
            "required": [
                field.name for field in self.fields if field.name in self.required
            ],
            "additionalProperties": False,
        }

    @classmethod
    def from_json_schema(cls, schema: dict[str, object]) -> "ObjectShape":
        """Rebuild a shape from a JSON Schema object.

        Only flat objects with primitive properties are accepted; anything else
        raises ValueError.
        """
        if str(schema.get("type")).lower() != "object":
            raise ValueError("schema must describe an object")
        properties = schema.get("properties")
        if not isinstance(properties, dict) or not properties:
            raise ValueError("schema must declare properties")
        fields: list[FieldSpec] = []
        for name, prop in properties.items():
            if not isinstance(prop, dict):
                raise ValueError(f"property {name!r} must be an object")
            try:
                kind = FieldKind(str(prop.get("type")).lower())
            except ValueError as exc:
                raise ValueError(f"unsupported type for property {name!r}") from exc
            fields.append(FieldSpec(name=str(name), kind=kind))
        raw_required = schema.get("required") or []
        if not isinstance(raw_required, list):
            raise ValueError("required must be a list")
        names = {field.name for field in fields}
        unknown = [name for name in raw_required if name not in names]
        if unknown:
            raise ValueError(f"required fields not declared: {unknown}")
        return cls(fields=tuple(fields), required=frozenset(raw_required))


OutputShape = ObjectShape


class OracleClient(Protocol):
    """Interface for generative text completion."""

    async def complete(self, prompt: str, shape: OutputShape | None = None) -> str:
        """Return raw response text for the prompt."""


def strip_code_fences(text: str) -> str:
    """Return the content of the first Markdown code fence.

    Unpaired fence markers, as left by a truncated reply, are dropped.
    """
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return _FENCE_MARKER_RE.sub("", text).strip()


def parse_structured(text: str | None, shape: OutputShape) -> dict[str, object]:
    """Parse oracle text into a dict matching the shape."""
    if not text or not text.strip():
        raise MalformedResponseError("Oracle returned an empty response")
    try:
        payload = json.loads(strip_code_fences(text))
    except ValueError as exc:
        raise MalformedResponseError("Oracle response is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise MalformedResponseError("Oracle response is not a JSON object")
    for field in shape.fields:
        if field.name not in payload:
            if field.name in shape.required:
                raise MalformedResponseError(
                    f"Oracle response is missing field {field.name!r}"
                )
            continue
        if not _matches_kind(payload[field.name], field.kind):
            raise MalformedResponseError(
                f"Oracle field {field.name!r} is not a {field.kind.value}"
            )
    return payload


def _matches_kind(value: object, kind: FieldKind) -> bool:
    if kind is FieldKind.STRING:
        return isinstance(value, str)
    if kind is FieldKind.BOOLEAN:
        return isinstance(value, bool)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        as_float = float(value)
    except OverflowError:
        return False
    if not math.isfinite(as_float):
        return False
    return kind is FieldKind.NUMBER or as_float.is_integer()
