"""
Target-specific code generators.

This module contains generators for the supported output targets.
"""

from .proptypes import (
    PropTypesGenerator,
    create_consistent_reference_generator,
    create_lenient_generator,
    create_proptypes_generator,
)

__all__ = [
    "PropTypesGenerator",
    "create_proptypes_generator",
    "create_consistent_reference_generator",
    "create_lenient_generator",
]
