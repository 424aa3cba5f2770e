"""
Element classifier used by the driving pass to pick a declaration method.
"""

from constants import XMIAttributes
from shared.models import XMLElement


class ElementClassifier:
    """Recognises model declarations among incoming elements."""

    @staticmethod
    def matches(element: XMLElement, expected_tag: str) -> bool:
        """
        Recognise a model declaration.

        Args:
            element: Candidate element.
            expected_tag: The element type name.

        Returns:
            True if the element has the expected type and carries both a
            non-empty ``xmi.id`` and a non-empty ``name``.
        """
        return (
            element.matches(expected_tag)
            and bool(element.get(XMIAttributes.ID))
            and bool(element.get(XMIAttributes.NAME))
        )

    @staticmethod
    def is_reference(element: XMLElement) -> bool:
        """True if the element points at a construct declared elsewhere."""
        return bool(element.get(XMIAttributes.IDREF))
