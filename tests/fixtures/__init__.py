"""
Centralized test fixtures for the XMI translator test suite.

Usage:
    from fixtures import CLASS_BREAKER, element
"""

from .xmi_fixtures import (
    element,
    CLASS_BREAKER,
    CLASS_BREAKER_REF,
    CLASS_NO_NAME,
    CLASS_NO_ID,
    DATATYPE_FLOAT,
    ASSOCIATION_END_CONNECTS,
    ASSOCIATION_END_UNNAMED,
    TAG_DEFINITION,
    TAG_DEFINITION_REF,
    ATTRIBUTE_RATED_CURRENT,
    PACKAGE_WIRES,
    STEREOTYPE_ENUMERATION,
    STEREOTYPE_REF,
    ASSOCIATION_A1,
    SAMPLE_CONFIG,
)

__all__ = [
    'element',
    'CLASS_BREAKER',
    'CLASS_BREAKER_REF',
    'CLASS_NO_NAME',
    'CLASS_NO_ID',
    'DATATYPE_FLOAT',
    'ASSOCIATION_END_CONNECTS',
    'ASSOCIATION_END_UNNAMED',
    'TAG_DEFINITION',
    'TAG_DEFINITION_REF',
    'ATTRIBUTE_RATED_CURRENT',
    'PACKAGE_WIRES',
    'STEREOTYPE_ENUMERATION',
    'STEREOTYPE_REF',
    'ASSOCIATION_A1',
    'SAMPLE_CONFIG',
]
