"""
Exceptions raised while turning an API document into PropTypes code.
"""

from typing import Sequence, Tuple, Union

PathPart = Union[str, int]


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaError(GeneratorError):
    """A problem with the input document, located by its key path."""

    def __init__(self, message: str, path: Sequence[PathPart] = ()):
        self.path: Tuple[PathPart, ...] = tuple(path)
        self.message = message
        super().__init__(self._format())

    @property
    def kind(self) -> str:
        """Error kind reported to callers (the class name)."""
        return type(self).__name__

    @property
    def path_string(self) -> str:
        """Dot-joined path, e.g. ``components.schemas.user.properties.id``."""
        return ".".join(str(part) for part in self.path)

    def _format(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path_string})"
        return self.message


class MissingSchemasError(SchemaError):
    """The document has no ``components.schemas`` mapping."""

    def __init__(self, message: str = "API error: Missing schemas", path=()):
        super().__init__(message, path)


class InvalidPropertyDefinition(SchemaError):
    """A schema or property definition cannot be compiled."""

    pass


class InvalidReference(SchemaError):
    """A ``$ref`` value is not a usable reference path."""

    pass


class MissingPropertiesError(SchemaError):
    """An object definition without ``$ref`` has no ``properties`` mapping."""

    pass
