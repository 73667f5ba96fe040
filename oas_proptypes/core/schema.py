"""
Core schema representation for code generation.

Converts the ``components.schemas`` section of a parsed OpenAPI document
into a closed set of definition classes that generators can dispatch on
without looking at raw dictionaries again.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import (
    InvalidPropertyDefinition,
    InvalidReference,
    MissingPropertiesError,
    MissingSchemasError,
    PathPart,
)
from .naming import get_ref_name
from ..logging_config import get_logger

logger = get_logger(__name__)


class PrimitiveKind(Enum):
    """Validator families a primitive type tag can map to."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "bool"


# Type tags understood by the compiler. Anything else is unsupported.
PRIMITIVE_TYPE_TAGS: Dict[str, PrimitiveKind] = {
    "number": PrimitiveKind.NUMBER,
    "integer": PrimitiveKind.NUMBER,
    "long": PrimitiveKind.NUMBER,
    "float": PrimitiveKind.NUMBER,
    "double": PrimitiveKind.NUMBER,
    "string": PrimitiveKind.STRING,
    "byte": PrimitiveKind.STRING,
    "binary": PrimitiveKind.STRING,
    "date": PrimitiveKind.STRING,
    "DATETIME": PrimitiveKind.STRING,
    "date-time": PrimitiveKind.STRING,
    "datetime": PrimitiveKind.STRING,
    "password": PrimitiveKind.STRING,
    "boolean": PrimitiveKind.BOOLEAN,
}

ARRAY_TYPE_TAG = "array"
OBJECT_TYPE_TAG = "object"


@dataclass(kw_only=True)
class Definition:
    """Common part of every schema or property definition."""

    # Names listed in this definition's ``required`` array
    required: List[str] = field(default_factory=list)
    # ``required: true`` set on the definition itself
    inline_required: bool = False
    path: Tuple[PathPart, ...] = ()


@dataclass
class ObjectType(Definition):
    """Object with inline properties, compiled to ``shape({...})``."""

    properties: Dict[str, Definition] = field(default_factory=dict)


@dataclass
class ArrayType(Definition):
    """Array whose element type is ``items``."""

    items: Definition


@dataclass
class PrimitiveType(Definition):
    """Scalar type tag mapped to a validator family."""

    kind: PrimitiveKind
    type_tag: str


@dataclass
class Reference(Definition):
    """Pointer to another named schema via ``$ref``."""

    target: str

    @property
    def name(self) -> str:
        """Schema name the reference points at."""
        return get_ref_name(self.target)


@dataclass
class UnknownType(Definition):
    """Unsupported type tag kept only when strict typing is disabled."""

    type_tag: Optional[Any] = None


def extract_schemas_mapping(api: Any) -> Mapping[str, Any]:
    """
    Return the raw ``components.schemas`` mapping of a document.

    Raises:
        MissingSchemasError: If the document or any level of the path is
            absent or not a mapping.
    """
    if not isinstance(api, Mapping):
        raise MissingSchemasError()

    components = api.get("components")
    if not isinstance(components, Mapping):
        raise MissingSchemasError(path=("components",))

    schemas = components.get("schemas")
    if not isinstance(schemas, Mapping):
        raise MissingSchemasError(path=("components", "schemas"))

    return schemas


def parse_document(api: Any, strict_types: bool = True) -> Dict[str, Definition]:
    """
    Convert a parsed API document into named definitions.

    Args:
        api: Parsed OpenAPI document (dict-like)
        strict_types: Raise on unsupported type tags and object definitions
            without properties instead of degrading silently

    Returns:
        Dict mapping schema name to Definition, in document order

    Raises:
        SchemaError: Subclass describing the first malformed definition
    """
    raw_schemas = extract_schemas_mapping(api)
    base_path: Tuple[PathPart, ...] = ("components", "schemas")

    def parse_required(raw: Mapping[str, Any], path) -> Tuple[List[str], bool]:
        value = raw.get("required")
        if value is None:
            return [], False
        if isinstance(value, bool):
            return [], value
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value), False
        raise InvalidPropertyDefinition(
            "'required' must be a list of property names or a boolean",
            path + ("required",),
        )

    def common_fields(raw: Mapping[str, Any], path) -> Dict[str, Any]:
        required, inline_required = parse_required(raw, path)
        return {"required": required, "inline_required": inline_required, "path": path}

    def parse_reference(raw: Mapping[str, Any], path) -> Reference:
        target = raw["$ref"]
        if not isinstance(target, str):
            raise InvalidReference(
                f"$ref must be a string, got {type(target).__name__}",
                path + ("$ref",),
            )
        if not get_ref_name(target):
            raise InvalidReference(
                f"$ref '{target}' does not name a schema", path + ("$ref",)
            )
        return Reference(target=target, **common_fields(raw, path))

    def check_name(name: Any, path: Tuple[PathPart, ...]) -> None:
        # YAML turns keys such as `on:` or `200:` into bools and ints
        if not isinstance(name, str):
            raise InvalidPropertyDefinition(
                f"Name must be a string, got {type(name).__name__} {name!r}", path
            )

    def parse_node(
        raw: Any, path: Tuple[PathPart, ...], declaration: bool = False
    ) -> Definition:
        """
        Recursively convert one raw definition.

        ``declaration`` is set for top-level schemas: an object there always
        lists its own properties, while an object ``$ref`` in value position
        is a reference.
        """
        if not isinstance(raw, Mapping):
            raise InvalidPropertyDefinition(
                f"Definition must be a mapping, got {type(raw).__name__}", path
            )

        common = common_fields(raw, path)
        type_tag = raw.get("type")
        has_ref = "$ref" in raw

        if type_tag == ARRAY_TYPE_TAG:
            if "items" not in raw:
                raise InvalidPropertyDefinition("Array definition has no 'items'", path)
            items_raw = raw["items"]
            items_path = path + ("items",)
            # A $ref on the items wins over any type tag next to it
            if isinstance(items_raw, Mapping) and "$ref" in items_raw:
                items = parse_reference(items_raw, items_path)
            else:
                items = parse_node(items_raw, items_path)
            return ArrayType(items=items, **common)

        if type_tag == OBJECT_TYPE_TAG:
            if has_ref and not declaration:
                return parse_reference(raw, path)

            properties_raw = raw.get("properties")
            if properties_raw is None:
                if strict_types:
                    if has_ref:
                        message = "Object schema has '$ref' but no 'properties' to declare"
                    else:
                        message = "Object definition has neither 'properties' nor '$ref'"
                    raise MissingPropertiesError(message, path)
                logger.debug("Object at %s has no properties", ".".join(map(str, path)))
                properties_raw = {}
            if not isinstance(properties_raw, Mapping):
                raise InvalidPropertyDefinition(
                    "'properties' must be a mapping", path + ("properties",)
                )

            properties = {}
            for name, value in properties_raw.items():
                property_path = path + ("properties", name)
                check_name(name, property_path)
                properties[name] = parse_node(value, property_path)
            return ObjectType(properties=properties, **common)

        if isinstance(type_tag, str) and type_tag in PRIMITIVE_TYPE_TAGS:
            return PrimitiveType(
                kind=PRIMITIVE_TYPE_TAGS[type_tag], type_tag=type_tag, **common
            )

        if has_ref:
            return parse_reference(raw, path)

        if strict_types:
            if type_tag is None:
                message = "Definition has neither 'type' nor '$ref'"
            else:
                message = f"Unsupported type {type_tag!r}"
            raise InvalidPropertyDefinition(message, path)

        logger.debug(
            "Unsupported type %r at %s rendered as bare validator",
            type_tag,
            ".".join(map(str, path)),
        )
        return UnknownType(type_tag=type_tag, **common)

    definitions: Dict[str, Definition] = {}
    for schema_name, raw_schema in raw_schemas.items():
        schema_path = base_path + (schema_name,)
        check_name(schema_name, schema_path)
        definitions[schema_name] = parse_node(raw_schema, schema_path, declaration=True)

    logger.debug("Parsed %d schema definitions", len(definitions))
    return definitions


def iter_references(definition: Definition) -> Iterator[Reference]:
    """Yield every Reference reachable from a definition, depth first."""
    if isinstance(definition, Reference):
        yield definition
    elif isinstance(definition, ArrayType):
        yield from iter_references(definition.items)
    elif isinstance(definition, ObjectType):
        for child in definition.properties.values():
            yield from iter_references(child)


def get_max_depth(definition: Definition, current_depth: int = 1) -> int:
    """Deepest indentation level at which a definition's lines are emitted."""
    if not isinstance(definition, ObjectType):
        return _value_depth(definition, current_depth)

    max_depth = current_depth
    for child in definition.properties.values():
        max_depth = max(max_depth, _value_depth(child, current_depth))
    return max_depth


def _value_depth(definition: Definition, line_depth: int) -> int:
    if isinstance(definition, ArrayType):
        return _value_depth(definition.items, line_depth)
    if isinstance(definition, ObjectType):
        return get_max_depth(definition, line_depth + 1)
    return line_depth
