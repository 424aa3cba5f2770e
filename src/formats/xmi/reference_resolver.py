"""
Reference resolver for ``xmi.idref`` style attributes.

A reference produces an address-only node that coincides with whatever the
declaration of the same identifier creates, whether that declaration was
already seen or arrives later.
"""

import logging
from typing import Optional

from constants import XMIAttributes
from shared.models import GraphNode, NodeKind, XMLElement

from .graph_store import GraphStore
from .identifiers import IdentifierScheme

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves identifier references to (possibly provisional) nodes."""

    def __init__(self, store: GraphStore, scheme: IdentifierScheme) -> None:
        self.store = store
        self.scheme = scheme

    def resolve(
        self,
        local_idref: Optional[str],
        kind: NodeKind = NodeKind.UNKNOWN,
    ) -> Optional[GraphNode]:
        """
        Resolve a referenced identifier.

        Args:
            local_idref: The referenced identifier; None or empty means absent.
            kind: Kind to give the node if this is its first appearance.

        Returns:
            The node at the identifier's address, or None when absent.
        """
        if not local_idref:
            return None
        address = self.scheme.address(local_idref)
        if address not in self.store:
            logger.debug(f"Forward reference to {local_idref}")
        return self.store.get_or_create(address, kind)

    def resolve_attribute(
        self,
        element: XMLElement,
        attr: str = XMIAttributes.IDREF,
        kind: NodeKind = NodeKind.UNKNOWN,
    ) -> Optional[GraphNode]:
        """Resolve the reference held in an element attribute."""
        return self.resolve(element.get(attr), kind)
