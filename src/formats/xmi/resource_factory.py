"""
Resource factory: per-construct constructors for XMI elements.

Each constructor reads the mandatory attributes of its construct off an
element. When any is missing the constructor returns None and leaves the
graph untouched, so the driving pass can skip the element and continue.
Otherwise it derives the address, looks up or creates the node and attaches
the label, type and debug edges of that construct.

Declarations attach the ``uml:id`` debug annotation when the run preserves
source identifiers. References never attach it.

Usage:
    store = GraphStore()
    factory = ResourceFactory(store, TranslationConfig())

    factory.create_class(XMLElement("Class", {"xmi.id": "C1", "name": "Breaker"}))
    factory.find_class(XMLElement("Classifier", {"xmi.idref": "C1"}))
"""

import logging
from typing import List, Optional, Tuple

from rdflib import URIRef

from constants import XMIAttributes
from core.config import TranslationConfig
from shared.models import GraphNode, NodeKind, SkippedItem, XMLElement

from .association_ends import AssociationEndSynthesizer, Side
from .classifier import ElementClassifier
from .graph_store import GraphStore
from .identifiers import IdentifierScheme
from .reference_resolver import ReferenceResolver
from .vocabulary import ATTRIBUTE, HAS_STEREOTYPE, PACKAGE, STEREOTYPE

logger = logging.getLogger(__name__)


class ResourceFactory:
    """
    Builds graph nodes for UML constructs found in XMI.

    Attributes:
        store: The graph under construction.
        config: Run configuration.
        scheme: Identifier to address mapping.
        resolver: Reference resolution over the same store.
        skipped_items: Declarations that produced no node.
    """

    def __init__(
        self,
        store: GraphStore,
        config: Optional[TranslationConfig] = None,
    ) -> None:
        self.store = store
        self.config = config or TranslationConfig()
        self.store.bind_namespace(self.config.namespace)
        self.scheme = IdentifierScheme(self.config.namespace)
        self.resolver = ReferenceResolver(store, self.scheme)
        self.ends = AssociationEndSynthesizer(store, self.scheme, self.config)
        self.skipped_items: List[SkippedItem] = []

    # =========================================================================
    # Helpers
    # =========================================================================

    def _add_skipped_item(self, item_type: str, reason: str, identifier: Optional[str]) -> None:
        """Track a declaration that produced no node."""
        self.skipped_items.append(SkippedItem(
            item_type=item_type,
            reason=reason,
            identifier=identifier,
        ))
        logger.debug(f"Skipped {item_type} '{identifier}': {reason}")

    def _declaration(self, element: XMLElement, item_type: str) -> Optional[Tuple[str, str]]:
        """Return (xmi.id, name) or None, recording the skip."""
        xuid = element.get(XMIAttributes.ID)
        name = element.get(XMIAttributes.NAME)
        if not xuid:
            self._add_skipped_item(item_type, "missing xmi.id", None)
            return None
        if not name:
            self._add_skipped_item(item_type, "missing name", xuid)
            return None
        return xuid, name

    def _declare(
        self,
        xuid: str,
        kind: NodeKind,
        name: Optional[str] = None,
        individual_type: Optional[URIRef] = None,
    ) -> GraphNode:
        node = self.store.get_or_create(self.scheme.address(xuid), kind, individual_type)
        if name is not None:
            self.store.set_label(node, name, self.config.label_language)
        self._keep_id(node, xuid)
        return node

    def _keep_id(self, node: GraphNode, xuid: str) -> None:
        if self.config.preserve_source_ids:
            self.store.add_source_id(node, xuid)

    def matches(self, element: XMLElement, expected_tag: str) -> bool:
        """Recognise a model declaration of the given element type."""
        return ElementClassifier.matches(element, expected_tag)

    # =========================================================================
    # References
    # =========================================================================

    def find_class(
        self,
        element: XMLElement,
        attr: str = XMIAttributes.IDREF,
    ) -> Optional[GraphNode]:
        """Find the class an element refers to through attr."""
        return self.resolver.resolve_attribute(element, attr, NodeKind.CLASS)

    def find_resource(
        self,
        element: XMLElement,
        attr: str = XMIAttributes.IDREF,
    ) -> Optional[GraphNode]:
        """Find the node of as yet unknown kind an element refers to through attr."""
        return self.resolver.resolve_attribute(element, attr)

    def create_unknown_by_id(self, xuid: Optional[str]) -> Optional[GraphNode]:
        """Reference a node of as yet unknown kind by bare id string."""
        return self.resolver.resolve(xuid)

    # =========================================================================
    # Declarations
    # =========================================================================

    def create_class(self, element: XMLElement) -> Optional[GraphNode]:
        """Create and label a class for an XMI declaration."""
        decl = self._declaration(element, "Class")
        if decl is None:
            return None
        xuid, name = decl
        return self._declare(xuid, NodeKind.CLASS, name)

    def create_datatype(self, element: XMLElement) -> Optional[GraphNode]:
        """Create and label an rdfs:Datatype for an XMI declaration."""
        decl = self._declaration(element, "Datatype")
        if decl is None:
            return None
        xuid, name = decl
        return self._declare(xuid, NodeKind.DATATYPE, name)

    def create_object_property(self, element: XMLElement) -> Optional[GraphNode]:
        """
        Create an object property for an association end declaration.

        Only xmi.id is mandatory; the label is added when a name is present.
        """
        xuid = element.get(XMIAttributes.ID)
        if not xuid:
            self._add_skipped_item("ObjectProperty", "missing xmi.id", None)
            return None
        return self._declare(xuid, NodeKind.OBJECT_PROPERTY, element.get(XMIAttributes.NAME))

    def create_association_end(
        self,
        element: XMLElement,
        base_id: Optional[str],
        side: Side,
    ) -> Optional[GraphNode]:
        """
        Create an object property for an association end with no id of its own.

        The identifier is synthesized from the association id and the side.
        """
        node = self.ends.synthesize(element, base_id, side)
        if node is None:
            self._add_skipped_item("ObjectProperty", "missing association id", None)
        return node

    def create_annotation_property(self, element: XMLElement) -> Optional[GraphNode]:
        """
        Reference or declare an annotation property for an XMI tag definition.

        A reference (xmi.idref) takes precedence and adds no label.
        """
        if ElementClassifier.is_reference(element):
            return self.resolver.resolve_attribute(
                element, XMIAttributes.IDREF, NodeKind.ANNOTATION_PROPERTY
            )

        decl = self._declaration(element, "AnnotationProperty")
        if decl is None:
            return None
        xuid, name = decl
        return self._declare(xuid, NodeKind.ANNOTATION_PROPERTY, name)

    def create_attribute_property(self, element: XMLElement) -> Optional[GraphNode]:
        """Create a property for a UML attribute, marked with the attribute stereotype."""
        decl = self._declaration(element, "AttributeProperty")
        if decl is None:
            return None
        xuid, name = decl
        node = self._declare(xuid, NodeKind.ATTRIBUTE_PROPERTY, name)
        self.store.add_edge(node, HAS_STEREOTYPE, ATTRIBUTE)
        return node

    def create_individual(self, element: XMLElement, rdf_type: URIRef) -> Optional[GraphNode]:
        """Create a labelled individual of the given class."""
        decl = self._declaration(element, "Individual")
        if decl is None:
            return None
        xuid, name = decl
        return self._declare(xuid, NodeKind.INDIVIDUAL, name, rdf_type)

    def create_package(self, element: XMLElement) -> Optional[GraphNode]:
        """Create an individual of type uml:Package for a package declaration."""
        return self.create_individual(element, PACKAGE)

    def create_stereotype(self, element: XMLElement) -> Optional[GraphNode]:
        """Reference or declare a stereotype."""
        if ElementClassifier.is_reference(element):
            return self.reference_stereotype(element.get(XMIAttributes.IDREF))
        return self.create_individual(element, STEREOTYPE)

    def reference_stereotype(self, xuid: Optional[str]) -> Optional[GraphNode]:
        """Reference a stereotype by id string."""
        if not xuid:
            return None
        return self.store.get_or_create(
            self.scheme.address(xuid), NodeKind.INDIVIDUAL, STEREOTYPE
        )

    def create_unknown(self, element: XMLElement) -> Optional[GraphNode]:
        """Create a resource of as yet unknown kind with a plain (untagged) label."""
        decl = self._declaration(element, "Unknown")
        if decl is None:
            return None
        xuid, name = decl
        node = self.store.get_or_create(self.scheme.address(xuid), NodeKind.UNKNOWN)
        self.store.set_label(node, name)
        self._keep_id(node, xuid)
        return node

    def create_association(self, xuid: Optional[str]) -> Optional[GraphNode]:
        """
        Create the placeholder for a UML association.

        The association links its two ends during interpretation but is not
        required in the final model.
        """
        if not xuid:
            return None
        return self._declare(xuid, NodeKind.ASSOCIATION)
