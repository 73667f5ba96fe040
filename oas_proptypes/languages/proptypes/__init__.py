"""
PropTypes code generator module.

Generates React ``prop-types`` declarations from OpenAPI component schemas.
"""

from .generator import (
    PropTypesGenerator,
    create_consistent_reference_generator,
    create_lenient_generator,
    create_proptypes_generator,
)

__all__ = [
    "PropTypesGenerator",
    # Factory functions
    "create_proptypes_generator",
    "create_consistent_reference_generator",
    "create_lenient_generator",
]
