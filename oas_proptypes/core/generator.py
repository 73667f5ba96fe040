"""
Base generator interface for all code generation targets.

Defines the contract that all target generators must implement, and the
``generate_code`` driver that turns any failure into an error result.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import GeneratorConfig, get_config_manager, load_config
from .errors import GeneratorError, SchemaError
from .naming import ComponentNamer
from .schema import Definition, ObjectType, get_max_depth, iter_references, parse_document
from .templates import TemplateEngine, create_template_engine
from ..logging_config import get_logger

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config(self.target_name)
        self.namer = ComponentNamer(self.config.component_suffix)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def target_name(self) -> str:
        """Return the name of the generation target (e.g., 'proptypes')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.js')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schemas: Dict[str, Definition]) -> str:
        """
        Generate code for all schemas.

        Args:
            schemas: Dictionary mapping schema names to definitions,
                in output order

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_schema(self, name: str, definition: Definition) -> str:
        """
        Generate the declaration for a single schema.

        Args:
            name: Schema name as written in the document
            definition: Parsed schema definition

        Returns:
            Generated code for this schema only
        """
        pass

    def validate_schemas(self, schemas: Dict[str, Definition]) -> List[str]:
        """
        Look for problems that do not stop generation.

        Args:
            schemas: Schemas to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for name, definition in schemas.items():
            if isinstance(definition, ObjectType) and not definition.properties:
                warnings.append(f"Schema '{name}' has no properties")

            for reference in iter_references(definition):
                if reference.name not in schemas:
                    location = ".".join(str(part) for part in reference.path)
                    warnings.append(
                        f"Reference '{reference.target}' at {location} "
                        f"points to an undefined schema"
                    )

        for identifier, names in self.namer.find_collisions(schemas).items():
            warnings.append(
                f"Schemas {', '.join(repr(n) for n in names)} all export {identifier}"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply target-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - strip trailing whitespace, cap blank runs at two
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.error_kind: Optional[str] = None
        self.error_path: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        if exception is not None:
            result.error_kind = type(exception).__name__
        if isinstance(exception, SchemaError):
            result.error_path = exception.path_string
        return result


def generate_code(generator: CodeGenerator, api: Any) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    The whole document is parsed before any text is produced, so a
    malformed definition anywhere yields an error result and no code.

    Args:
        generator: Code generator instance
        api: Parsed API document

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        schemas = parse_document(api, strict_types=generator.config.strict_types)

        warnings = get_config_manager().validate_config(generator.config)
        warnings.extend(generator.validate_schemas(schemas))
        for warning in warnings:
            logger.warning(warning)

        code = generator.generate(schemas)
        formatted_code = generator.format_code(code)

        metadata = {
            "target": generator.target_name,
            "file_extension": generator.file_extension,
            "schema_count": len(schemas),
            "reference_count": sum(
                1
                for definition in schemas.values()
                for _ in iter_references(definition)
            ),
            "max_depth": max(
                (get_max_depth(definition) for definition in schemas.values()),
                default=0,
            ),
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except SchemaError as e:
        logger.error("Schema error: %s", e)
        return GenerationResult.error(str(e), exception=e)
    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
