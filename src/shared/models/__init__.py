"""
Shared data models for the XMI translator.

Usage:
    from shared.models import GraphNode, NodeKind, XMLElement, SkippedItem
"""

from .graph_types import (
    GraphNode,
    NodeKind,
    XMLElement,
)
from .translation import SkippedItem

__all__ = [
    "GraphNode",
    "NodeKind",
    "XMLElement",
    "SkippedItem",
]
