"""
Graph store: the ontology under construction.

Wraps an rdflib ``Graph`` together with a registry of the nodes created in
the current run. Every node is addressed by a URI; asking for an address
that already exists returns the existing node, so references that arrive
before their declaration and the declaration itself converge on one node.

Kind resolution:
    - unknown address: a node of the requested kind is created
    - existing ``UNKNOWN`` node: refined in place to the requested kind
    - any other existing node: returned unchanged, the first specific
      kind wins and the mismatch is only logged
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union

from rdflib import Graph, Literal, OWL, RDF, RDFS, URIRef
from rdflib.term import Node

from constants import NamespaceConfig
from shared.models import GraphNode, NodeKind

from .vocabulary import LABEL, TYPE, UML, UML_ID

logger = logging.getLogger(__name__)

# rdf:type assertions per kind; INDIVIDUAL takes its class from the caller
KIND_TYPES: Dict[NodeKind, Tuple[URIRef, ...]] = {
    NodeKind.CLASS: (OWL.Class,),
    NodeKind.DATATYPE: (RDFS.Datatype,),
    NodeKind.OBJECT_PROPERTY: (OWL.ObjectProperty,),
    NodeKind.ANNOTATION_PROPERTY: (OWL.AnnotationProperty,),
    NodeKind.ATTRIBUTE_PROPERTY: (RDF.Property,),
    NodeKind.INDIVIDUAL: (),
    NodeKind.ASSOCIATION: (),
    NodeKind.UNKNOWN: (),
}


class GraphStore:
    """
    Mutable ontology graph for one translation run.

    Attributes:
        graph: The underlying rdflib graph handed to downstream consumers.
    """

    def __init__(self, namespace: str = NamespaceConfig.XMI_NS) -> None:
        self.graph: Graph = Graph()
        self.bind_namespace(namespace)
        self.graph.bind(NamespaceConfig.UML_PREFIX, UML)
        self.graph.bind("owl", OWL)
        self.graph.bind("rdfs", RDFS)
        self._nodes: Dict[URIRef, GraphNode] = {}

    def bind_namespace(self, namespace: str) -> None:
        """Bind the xmi prefix to the namespace node addresses are minted in."""
        self.graph.bind(NamespaceConfig.XMI_PREFIX, namespace, replace=True)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, address: object) -> bool:
        return address in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(list(self._nodes.values()))

    def get(self, address: URIRef) -> Optional[GraphNode]:
        """Return the node at address, or None."""
        return self._nodes.get(address)

    def get_or_create(
        self,
        address: URIRef,
        kind: NodeKind,
        individual_type: Optional[URIRef] = None,
    ) -> GraphNode:
        """
        Look up the node at address, creating it if needed.

        Args:
            address: Node address.
            kind: Kind to give a new (or still provisional) node.
            individual_type: Class asserted for an ``INDIVIDUAL`` node.

        Returns:
            The node at address. Callers must treat the returned node as
            authoritative; its kind may differ from the one requested.
        """
        node = self._nodes.get(address)
        if node is None:
            node = GraphNode(address=address)
            self._nodes[address] = node
            logger.debug(f"Created node {address}", extra={"address": address})
        elif node.kind is kind or kind is NodeKind.UNKNOWN:
            return node
        elif not node.is_provisional:
            logger.debug(
                f"Reusing {node.kind.value} node {address} for requested kind {kind.value}",
                extra={"address": address, "kind": node.kind.value},
            )
            return node
        else:
            logger.debug(
                f"Refining provisional node {address} to {kind.value}",
                extra={"address": address, "kind": kind.value},
            )

        self._assign_kind(node, kind, individual_type)
        return node

    def _assign_kind(
        self,
        node: GraphNode,
        kind: NodeKind,
        individual_type: Optional[URIRef],
    ) -> None:
        node.kind = kind
        for rdf_type in KIND_TYPES[kind]:
            self.graph.add((node.address, TYPE, rdf_type))
        if kind is NodeKind.INDIVIDUAL and individual_type is not None:
            node.individual_type = individual_type
            self.graph.add((node.address, TYPE, individual_type))

    def set_label(self, node: GraphNode, text: str, lang: Optional[str] = None) -> None:
        """
        Label a node, replacing any earlier label in the same language.

        A label without language replaces only the earlier untagged label.
        """
        for existing in list(self.graph.objects(node.address, LABEL)):
            if isinstance(existing, Literal) and existing.language == lang:
                self.graph.remove((node.address, LABEL, existing))
        self.graph.add((node.address, LABEL, Literal(text, lang=lang)))

    def add_edge(
        self,
        node: GraphNode,
        predicate: URIRef,
        target: Union[GraphNode, Node, str],
    ) -> None:
        """Add an edge from node; plain strings become literals."""
        if isinstance(target, GraphNode):
            obj: Node = target.address
        elif isinstance(target, Node):
            obj = target
        else:
            obj = Literal(target)
        self.graph.add((node.address, predicate, obj))

    def add_source_id(self, node: GraphNode, xuid: str) -> None:
        """Record the original XMI identifier of a node."""
        self.add_edge(node, UML_ID, Literal(xuid))

    def label(self, node: GraphNode, lang: Optional[str] = None) -> Optional[str]:
        """Return the node label in a language, or None."""
        for existing in self.graph.objects(node.address, LABEL):
            if isinstance(existing, Literal) and existing.language == lang:
                return str(existing)
        return None

    def source_ids(self, node: GraphNode) -> List[str]:
        """Return the recorded source identifiers of a node."""
        return sorted(str(value) for value in self.graph.objects(node.address, UML_ID))

    def nodes_of_kind(self, kind: NodeKind) -> List[GraphNode]:
        """Return all nodes of a kind."""
        return [node for node in self._nodes.values() if node.kind is kind]

    def summary(self) -> Dict[str, int]:
        """Count nodes per kind."""
        counts: Dict[str, int] = {}
        for node in self._nodes.values():
            counts[node.kind.value] = counts.get(node.kind.value, 0) + 1
        return counts
