"""
Translation bookkeeping models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SkippedItem:
    """Represents an element that produced no node during translation."""
    item_type: str  # Class, Datatype, ObjectProperty, ...
    reason: str
    identifier: Optional[str] = None  # xmi.id when present

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result: Dict[str, Any] = {
            "item_type": self.item_type,
            "reason": self.reason,
        }
        if self.identifier:
            result["identifier"] = self.identifier
        return result
