"""
OpenAPI to PropTypes code generation.

Compiles the ``components.schemas`` section of an OpenAPI document into
React ``prop-types`` declarations, one exported block per schema.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_targets,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import (
    GeneratorError,
    SchemaError,
    MissingSchemasError,
    InvalidPropertyDefinition,
    InvalidReference,
    MissingPropertiesError,
)
from .core.config import GeneratorConfig, ConfigError, ConfigManager, load_config
from .languages.proptypes import PropTypesGenerator

# Version info
__version__ = "0.1.0"


# Convenience functions
def generate_prop_types(api, config=None, target="proptypes") -> GenerationResult:
    """
    Generate PropTypes declarations from a parsed API document.

    Schema problems never raise; they come back as a failed result with
    ``error_kind`` and ``error_path`` set and an empty ``code``.

    Args:
        api: Parsed OpenAPI document (dict)
        config: Generator configuration (GeneratorConfig, dict or JSON path)
        target: Target name or alias

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(target, config)
    return generate_code(generator, api)


def quick_generate(api, **options) -> str:
    """
    Quick code generation from a document.

    Args:
        api: Parsed document (dict) or JSON text
        **options: Generator options

    Returns:
        Generated code string

    Raises:
        GeneratorError: The error that made generation fail
    """
    if isinstance(api, str):
        import json

        api = json.loads(api)

    result = generate_prop_types(api, options or None)

    if result.success:
        return result.code
    raise result.exception


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "PropTypesGenerator",
    "GeneratorConfig",
    "ConfigError",
    "ConfigManager",
    "GeneratorError",
    "SchemaError",
    "MissingSchemasError",
    "InvalidPropertyDefinition",
    "InvalidReference",
    "MissingPropertiesError",
    "generate_code",
    "generate_prop_types",
    "quick_generate",
    "get_generator",
    "get_registry",
    "list_supported_targets",
    "load_config",
]
