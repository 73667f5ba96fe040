"""
Core code generation components.

Provides base classes and utilities used by all target generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .errors import (
    GeneratorError,
    SchemaError,
    MissingSchemasError,
    InvalidPropertyDefinition,
    InvalidReference,
    MissingPropertiesError,
)
from .schema import (
    Definition,
    ObjectType,
    ArrayType,
    PrimitiveType,
    PrimitiveKind,
    Reference,
    UnknownType,
    parse_document,
    extract_schemas_mapping,
)
from .naming import ComponentNamer, format_property_key, get_ref_name
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "SchemaError",
    "MissingSchemasError",
    "InvalidPropertyDefinition",
    "InvalidReference",
    "MissingPropertiesError",
    # Schema system - core data structures
    "Definition",
    "ObjectType",
    "ArrayType",
    "PrimitiveType",
    "PrimitiveKind",
    "Reference",
    "UnknownType",
    "parse_document",
    "extract_schemas_mapping",
    # Naming utilities
    "ComponentNamer",
    "format_property_key",
    "get_ref_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
