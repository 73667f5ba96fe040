"""
Naming utilities for safe code generation.

Handles component identifiers, object-literal keys and ``$ref`` path
resolution for the generated JavaScript.
"""

import re
from typing import Dict, Iterable, List

DEFAULT_COMPONENT_SUFFIX = "PropTypes"

REF_SEPARATOR = "/"

# Keys made only of ASCII letters are emitted without quotes
_BARE_KEY_PATTERN = re.compile(r"[a-zA-Z]*")

# Characters that cannot appear raw inside a single-quoted JS string
_KEY_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def get_ref_name(ref: str) -> str:
    """Return the schema name a ``$ref`` points at (its last path segment)."""
    return ref.split(REF_SEPARATOR)[-1]


def format_property_key(name: str) -> str:
    """
    Format a property name as an object-literal key.

    Purely alphabetic names stay bare; anything containing digits,
    underscores or symbols is wrapped in single quotes, with line
    breaks and quote characters escaped.
    """
    if _BARE_KEY_PATTERN.fullmatch(name):
        return name
    escaped = name.translate(_KEY_ESCAPES)
    return f"'{escaped}'"


class ComponentNamer:
    """Builds exported component identifiers from schema names."""

    def __init__(self, suffix: str = DEFAULT_COMPONENT_SUFFIX):
        """
        Initialize component namer.

        Args:
            suffix: Appended to every identifier to avoid clashing with
                the component the PropTypes describe
        """
        self.suffix = suffix
        self._name_cache: Dict[str, str] = {}

    def component_name(self, schema_name: str) -> str:
        """Capitalize the first character and append the suffix."""
        if schema_name in self._name_cache:
            return self._name_cache[schema_name]

        identifier = f"{schema_name[:1].upper()}{schema_name[1:]}{self.suffix}"
        self._name_cache[schema_name] = identifier
        return identifier

    def reference_name(self, ref: str) -> str:
        """Identifier of the component a ``$ref`` points at."""
        return self.component_name(get_ref_name(ref))

    def find_collisions(self, schema_names: Iterable[str]) -> Dict[str, List[str]]:
        """
        Group schema names that would export the same identifier.

        Returns:
            Dict mapping identifier to the colliding schema names
            (only identifiers with more than one source are included)
        """
        by_identifier: Dict[str, List[str]] = {}
        for name in schema_names:
            by_identifier.setdefault(self.component_name(name), []).append(name)

        return {
            identifier: names
            for identifier, names in by_identifier.items()
            if len(names) > 1
        }

    def reset(self):
        """Forget cached identifiers."""
        self._name_cache.clear()
