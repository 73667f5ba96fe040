"""
PropTypes code generator implementation.

Generates one ``export const <Name>PropTypes = {...};`` block per schema
in ``components.schemas``. Nested objects are rendered inline as
``PropTypes.shape({...})``; references become identifiers of sibling
blocks, so self and mutual references need no special handling.
"""

from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.errors import GeneratorError
from ...core.generator import CodeGenerator
from ...core.naming import format_property_key, get_ref_name
from ...core.schema import (
    ArrayType,
    Definition,
    ObjectType,
    PrimitiveType,
    Reference,
    UnknownType,
)
from ...logging_config import get_logger

logger = get_logger(__name__)

FILE_TEMPLATE_NAME = "proptypes_file.js.j2"
BLOCK_TEMPLATE_NAME = "proptypes_block.js.j2"

PROPTYPES_FILE_TEMPLATE = (
    "{% if header %}{{ header }}\n\n{% endif %}"
    "{% for block in blocks %}{{ block }}{% endfor %}"
)

PROPTYPES_BLOCK_TEMPLATE = "export const {{ identifier }} = {\n{{ body }}};\n\n"

REQUIRED_MARKER = ".isRequired,"
OPTIONAL_MARKER = ","

# Top-level declaration bodies start one level in
ROOT_DEPTH = 1


class PropTypesGenerator(CodeGenerator):
    """Code generator for React PropTypes declarations."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize PropTypes generator with configuration."""
        super().__init__(config)

        self.namespace = self.config.validator_namespace
        self.indent_unit = self.config.indent_unit
        self.shape_reference_style = self.config.shape_reference_style

    def _setup_templates(self):
        """Register the in-memory file and block templates."""
        super()._setup_templates()
        self._template_engine.add_template(FILE_TEMPLATE_NAME, PROPTYPES_FILE_TEMPLATE)
        self._template_engine.add_template(
            BLOCK_TEMPLATE_NAME, PROPTYPES_BLOCK_TEMPLATE
        )

    @property
    def target_name(self) -> str:
        """Return the target name."""
        return "proptypes"

    @property
    def file_extension(self) -> str:
        """Return JavaScript file extension."""
        return ".js"

    def generate(self, schemas: Dict[str, Definition]) -> str:
        """Generate the complete PropTypes module for all schemas."""
        self.namer.reset()

        blocks = []
        for schema_name, definition in schemas.items():
            logger.debug("Compiling schema %s", schema_name)
            blocks.append(self.generate_single_schema(schema_name, definition))

        context = {
            "header": self.config.import_statement if self.config.add_header else "",
            "blocks": blocks,
        }
        return self.render_template(FILE_TEMPLATE_NAME, context)

    def generate_single_schema(self, name: str, definition: Definition) -> str:
        """Generate the exported declaration block for one schema."""
        context = {
            "identifier": self.namer.component_name(name),
            "body": self.compile_declaration(name, definition, ROOT_DEPTH),
        }
        return self.render_template(BLOCK_TEMPLATE_NAME, context)

    def compile_declaration(self, name: str, definition: Definition, depth: int) -> str:
        """
        Compile the body of a declaration or of an inline shape.

        Objects produce one line per property, in document order. Any
        other definition produces a single line keyed by ``name``.

        Args:
            name: Schema or property name owning the body
            definition: Definition to compile
            depth: Indentation depth of the emitted lines

        Returns:
            Newline-terminated lines, without surrounding braces
        """
        if isinstance(definition, ObjectType):
            return "".join(
                self.compile_property_line(
                    property_name, property_definition, definition.required, depth
                )
                for property_name, property_definition in definition.properties.items()
            )

        return self.compile_property_line(name, definition, definition.required, depth)

    def compile_property_line(
        self,
        name: str,
        definition: Definition,
        required_names: List[str],
        depth: int,
    ) -> str:
        """Compile ``<indent><key>: <expression><marker>\\n``."""
        key = format_property_key(name)
        value = self.compile_value(name, definition, depth)
        marker = self._required_marker(name, definition, required_names)
        return f"{self.indent(depth)}{key}: {value}{marker}\n"

    def compile_value(self, name: str, definition: Definition, depth: int) -> str:
        """
        Compile the validator expression for a definition.

        Args:
            name: Property name the expression belongs to
            definition: Definition to compile
            depth: Indentation depth of the line holding the expression;
                inline shapes put their own lines one level deeper

        Returns:
            Expression text without trailing comma or newline
        """
        namespace = self.namespace

        if isinstance(definition, ArrayType):
            items = definition.items
            if isinstance(items, Reference):
                inner = self.namer.reference_name(items.target)
            else:
                inner = self.compile_value(name, items, depth)
            return f"{namespace}.arrayOf({inner})"

        if isinstance(definition, Reference):
            return f"{namespace}.shape({self._shape_reference(definition)})"

        if isinstance(definition, ObjectType):
            body = self.compile_declaration(name, definition, depth + 1)
            return f"{namespace}.shape({{\n{body}{self.indent(depth)}}})"

        if isinstance(definition, PrimitiveType):
            return f"{namespace}.{definition.kind.value}"

        if isinstance(definition, UnknownType):
            return f"{namespace}."

        raise GeneratorError(
            f"No PropTypes mapping for {type(definition).__name__} at '{name}'"
        )

    def indent(self, depth: int) -> str:
        """Indentation prefix for a depth."""
        return self.indent_unit * depth

    def _shape_reference(self, reference: Reference) -> str:
        if self.shape_reference_style == "identifier":
            return self.namer.reference_name(reference.target)
        return get_ref_name(reference.target)

    @staticmethod
    def _required_marker(
        name: str, definition: Definition, required_names: List[str]
    ) -> str:
        if name in required_names or definition.inline_required:
            return REQUIRED_MARKER
        return OPTIONAL_MARKER


def create_proptypes_generator(
    config: Optional[Dict[str, Any]] = None
) -> PropTypesGenerator:
    """Create a PropTypes generator from a dict of overrides."""
    return PropTypesGenerator(load_config("proptypes", custom_config=config))


def create_consistent_reference_generator() -> PropTypesGenerator:
    """Create a generator that renders every reference as a component identifier."""
    return create_proptypes_generator({"shape_reference_style": "identifier"})


def create_lenient_generator() -> PropTypesGenerator:
    """Create a generator that degrades on unsupported types instead of failing."""
    return create_proptypes_generator({"strict_types": False})
