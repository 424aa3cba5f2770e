"""
Identifier scheme: maps XMI identifiers to node addresses.
"""

from rdflib import Namespace, URIRef

from constants import NamespaceConfig


class IdentifierScheme:
    """
    Deterministic mapping from a local XMI identifier to a global address.

    The namespace is fixed for the lifetime of the scheme, so the same
    identifier always yields the same address within a run.

    Example:
        >>> scheme = IdentifierScheme()
        >>> scheme.address("C1")
        rdflib.term.URIRef('http://langdale.com.au/2005/xmi#C1')
    """

    def __init__(self, namespace: str = NamespaceConfig.XMI_NS) -> None:
        self.namespace = Namespace(namespace)

    def address(self, local_id: str) -> URIRef:
        """
        Derive the address of a local identifier.

        Raises:
            ValueError: If local_id is empty; callers check presence first.
        """
        if not local_id:
            raise ValueError("Cannot derive an address from an empty identifier")
        return self.namespace[local_id]

    def local_id(self, address: URIRef) -> str:
        """Inverse of address() for addresses in this namespace."""
        text = str(address)
        if not text.startswith(self.namespace):
            raise ValueError(f"Address {text} is outside namespace {self.namespace}")
        return text[len(self.namespace):]
