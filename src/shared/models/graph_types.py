"""
Graph node and input element types.

This module defines the data structures exchanged between the XMI element
source, the resource factory and the graph store. Nodes are a single tagged
type: the ``kind`` field discriminates Class, Datatype, properties,
individuals and the untyped placeholders.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from rdflib import URIRef


class NodeKind(Enum):
    """Kinds of node the translator places in the graph."""
    CLASS = "class"
    DATATYPE = "datatype"
    OBJECT_PROPERTY = "object_property"
    ANNOTATION_PROPERTY = "annotation_property"
    ATTRIBUTE_PROPERTY = "attribute_property"
    INDIVIDUAL = "individual"
    ASSOCIATION = "association"
    UNKNOWN = "unknown"


@dataclass
class GraphNode:
    """
    A node of the ontology under construction.

    The address is the node's identity. The kind is fixed once a specific
    kind has been established; only an ``UNKNOWN`` node may be refined.

    Attributes:
        address: Global resource address (URI) of the node.
        kind: Kind discriminator.
        individual_type: Class of an ``INDIVIDUAL`` node (e.g. uml:Package).
    """
    address: URIRef
    kind: NodeKind = NodeKind.UNKNOWN
    individual_type: Optional[URIRef] = None

    @property
    def is_provisional(self) -> bool:
        """True while the node has only been seen through a reference."""
        return self.kind is NodeKind.UNKNOWN


@dataclass(frozen=True)
class XMLElement:
    """
    An element delivered by the XMI event source.

    Attributes:
        tag: Local element type name (e.g. ``Class``, ``Association``).
        attributes: Attribute values keyed by attribute name, read-only.
    """
    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.tag, frozenset(self.attributes.items())))

    def get(self, name: str) -> Optional[str]:
        """Return an attribute value, or None when the attribute is absent."""
        return self.attributes.get(name)

    def matches(self, tag: str) -> bool:
        """Check the element type name."""
        return self.tag == tag
