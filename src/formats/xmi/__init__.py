"""
XMI package - XMI to OWL translation core.

This package turns UML model elements read from XMI into nodes and edges of
an rdflib graph.

Components:
- identifiers: XMI identifier to address mapping
- graph_store: the ontology graph under construction
- reference_resolver: xmi.idref resolution with forward references
- association_ends: identifiers for association ends without their own id
- classifier: declaration recognition for the driving pass
- resource_factory: per-construct constructors
- vocabulary: UML namespace terms used in the output
"""

from .identifiers import IdentifierScheme
from .graph_store import GraphStore, KIND_TYPES
from .reference_resolver import ReferenceResolver
from .association_ends import AssociationEndSynthesizer, Side, synthesize_end_id
from .classifier import ElementClassifier
from .resource_factory import ResourceFactory
from .vocabulary import (
    UML,
    UML_ID,
    HAS_STEREOTYPE,
    ATTRIBUTE,
    PACKAGE,
    STEREOTYPE,
)

__all__ = [
    'IdentifierScheme',
    'GraphStore',
    'KIND_TYPES',
    'ReferenceResolver',
    'AssociationEndSynthesizer',
    'Side',
    'synthesize_end_id',
    'ElementClassifier',
    'ResourceFactory',
    'UML',
    'UML_ID',
    'HAS_STEREOTYPE',
    'ATTRIBUTE',
    'PACKAGE',
    'STEREOTYPE',
]
