from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import jsonschema
from jsonschema.exceptions import SchemaError

from ..exceptions import SchemaExportError
from ..schemas import CoreSchema
from ..types import Descriptor


JsonSchema = Dict[str, Any]

_COMBINATOR_TYPES = ("oneOf", "anyOf", "allOf")

# Descriptor keys with the same meaning in JSON Schema.
_SHARED_KEYWORDS = (
    "description",
    "default",
    "deprecated",
    "readOnly",
    "writeOnly",
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "multipleOf",
    "minLength",
    "maxLength",
    "minItems",
    "maxItems",
    "uniqueItems",
    "format",
)

# Keys consumed by the conversion itself.
_STRUCTURAL_KEYS = frozenset((
    "type", "name", "example", "shape", "items", "tuple", "pattern", "valid", "invalid",
    "optional", "nullable", "not", *_COMBINATOR_TYPES,
))

_NUMBER_TYPES = {
    "number": ("number", None),
    "integer": ("integer", None),
    "float": ("number", "float"),
    "double": ("number", "double"),
}


def _descriptor_of(source: Union[CoreSchema, Descriptor]) -> Descriptor:
    if isinstance(source, CoreSchema):
        return source.export_metadata()
    if isinstance(source, dict):
        return source
    raise SchemaExportError(f"Cannot export {type(source).__name__}: expected a schema or a descriptor")


def _constrain_items(out: JsonSchema, keyword: str, values: List[Any]) -> None:
    constraint = {"enum": list(values)} if keyword == "valid" else {"not": {"enum": list(values)}}
    if isinstance(out.get("items"), dict):
        out["items"] = {**out["items"], **constraint}
    for index, item in enumerate(out.get("prefixItems", [])):
        out["prefixItems"][index] = {**item, **constraint}


def _convert(descriptor: Descriptor) -> JsonSchema:
    if not isinstance(descriptor, dict) or "type" not in descriptor:
        raise SchemaExportError(f"Descriptor must be a mapping with a 'type' key, got: {descriptor!r}")

    schema_type = descriptor["type"]
    out: JsonSchema = {}

    if schema_type in _COMBINATOR_TYPES:
        out[schema_type] = [_convert(d) for d in descriptor.get(schema_type, [])]
    elif schema_type == "not":
        out["allOf"] = [_convert(d) for d in descriptor.get("allOf", [])]
        out["not"] = _convert(descriptor["not"])
    elif schema_type in _NUMBER_TYPES:
        json_type, number_format = _NUMBER_TYPES[schema_type]
        out["type"] = json_type
        if number_format is not None:
            out["format"] = number_format
    else:
        out["type"] = schema_type

    if "name" in descriptor:
        out["title"] = descriptor["name"]
    if "example" in descriptor:
        out["examples"] = [descriptor["example"]]

    for key in _SHARED_KEYWORDS:
        if key in descriptor:
            out[key] = descriptor[key]

    # Date bounds are ISO strings, which JSON Schema only allows on numbers.
    if schema_type == "string":
        for key in ("minimum", "maximum"):
            if key in out:
                out[f"x-{key}"] = out.pop(key)

    if "pattern" in descriptor:
        pattern = descriptor["pattern"]
        out["pattern"] = pattern[0] if isinstance(pattern, (list, tuple)) else pattern

    if "shape" in descriptor:
        shape = descriptor["shape"]
        out["properties"] = {key: _convert(child) for key, child in shape.items()}
        required = [key for key, child in shape.items() if not child.get("optional")]
        if required:
            out["required"] = required

    if "items" in descriptor:
        out["items"] = _convert(descriptor["items"])
    if "tuple" in descriptor:
        positions = descriptor["tuple"]
        out["prefixItems"] = [_convert(d) for d in positions]
        out["items"] = False
        out.setdefault("minItems", len(positions))
        out.setdefault("maxItems", len(positions))

    for keyword in ("valid", "invalid"):
        if keyword not in descriptor:
            continue
        if schema_type == "array":
            _constrain_items(out, keyword, descriptor[keyword])
        elif keyword == "valid":
            out["enum"] = list(descriptor[keyword])
        else:
            out["not"] = {"enum": list(descriptor[keyword])}

    for key, value in descriptor.items():
        if key in _STRUCTURAL_KEYS or key in _SHARED_KEYWORDS:
            continue
        out[key if key.startswith("x-") else f"x-{key}"] = value

    if descriptor.get("nullable"):
        if isinstance(out.get("type"), str):
            out["type"] = [out["type"], "null"]
        else:
            out = {"anyOf": [out, {"type": "null"}]}

    return out


def to_json_schema(source: Union[CoreSchema, Descriptor], *, dialect: Optional[str] = None) -> JsonSchema:
    """Convert a schema (or an exported descriptor) into a JSON Schema document.

    Args:
        source: Schema instance or a descriptor returned by ``export_metadata``.
        dialect: Optional ``$schema`` URI placed at the document root.

    Returns:
        A JSON Schema dictionary. Constraints without a JSON Schema keyword
        are kept under ``x-`` prefixed keys.

    Raises:
        SchemaExportError: If the descriptor is malformed.
    """
    document = _convert(_descriptor_of(source))
    if dialect:
        document = {"$schema": dialect, **document}
    return document


def check_json_schema(document: JsonSchema) -> JsonSchema:
    """Check *document* against its meta-schema.

    Raises:
        SchemaExportError: If the document is not a valid JSON Schema.
    """
    validator_cls = jsonschema.validators.validator_for(document, default=jsonschema.Draft202012Validator)
    try:
        validator_cls.check_schema(document)
    except SchemaError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else ""
        raise SchemaExportError(f"Exported JSON Schema is invalid at '{path}': {e.message}") from e
    return document
