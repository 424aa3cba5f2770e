"""
Association end synthesis.

XMI may represent one bidirectional association as two ends that carry no
identifier of their own. Each end becomes an object property addressed by
the association identifier plus a side marker: ``<base>-A`` and ``<base>-B``.
"""

import logging
from enum import Enum
from typing import Optional

from constants import AssociationEndConfig, XMIAttributes
from core.config import TranslationConfig
from shared.models import GraphNode, NodeKind, XMLElement

from .graph_store import GraphStore
from .identifiers import IdentifierScheme

logger = logging.getLogger(__name__)


class Side(Enum):
    """The two ends of an association."""
    A = AssociationEndConfig.SIDE_A
    B = AssociationEndConfig.SIDE_B


def synthesize_end_id(base_id: str, side: Side) -> str:
    """
    Build the identifier of one association end.

    >>> synthesize_end_id("A100", Side.B)
    'A100-B'
    """
    return f"{base_id}{AssociationEndConfig.SEPARATOR}{side.value}"


class AssociationEndSynthesizer:
    """Creates the object properties for identifier-less association ends."""

    def __init__(
        self,
        store: GraphStore,
        scheme: IdentifierScheme,
        config: TranslationConfig,
    ) -> None:
        self.store = store
        self.scheme = scheme
        self.config = config

    def synthesize(
        self,
        element: XMLElement,
        base_id: Optional[str],
        side: Side,
    ) -> Optional[GraphNode]:
        """
        Create or look up the object property for one end.

        Args:
            element: The association end element; its name becomes the label.
            base_id: Identifier of the enclosing association.
            side: Which end.

        Returns:
            The object property node, or None when base_id is absent.
        """
        if not base_id:
            return None

        synth = synthesize_end_id(base_id, side)
        node = self.store.get_or_create(self.scheme.address(synth), NodeKind.OBJECT_PROPERTY)
        name = element.get(XMIAttributes.NAME)
        if name is not None:
            self.store.set_label(node, name, self.config.label_language)
        if self.config.preserve_source_ids:
            self.store.add_source_id(node, synth)
        logger.debug(f"Synthesized association end {synth}")
        return node
